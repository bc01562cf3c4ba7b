"""
네비게이션 컴포넌트

사용자 역할별 메뉴 트리로 사이드바를 렌더링합니다.
"""

from typing import Iterable, Tuple

import streamlit as st

from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.menu import FALLBACK_NAVIGATION, MenuNode, MenuTreeState
from oripro_dashboard.ui.session_state import LOGIN_PATH, AppContext, navigate_to

logger = setup_logger('Navigation')


def select_navigation(state: MenuTreeState) -> Tuple[MenuNode, ...]:
    """
    사이드바에 표시할 트리 선택

    트리가 비어 있으면 (로딩 중, 실패, 역할 없음) 고정 네비게이션을 그대로 사용합니다.
    """
    if state.tree:
        return state.tree
    return FALLBACK_NAVIGATION


def contains_path(node: MenuNode, path: str) -> bool:
    """노드 또는 하위 노드가 현재 경로인지 여부"""
    return any(not item.is_group and item.url == path for item in node.walk())


def node_label(node: MenuNode) -> str:
    return f"{node.icon.glyph} {node.title}"


class NavigationMenu:
    """네비게이션 메뉴 관리 클래스"""

    def __init__(self, ctx: AppContext):
        """
        네비게이션 메뉴 초기화

        Args:
            ctx: 현재 실행의 서비스 묶음
        """
        self.ctx = ctx

    def render(self):
        """사이드바 네비게이션 렌더링"""
        st.sidebar.header("🏢 Oripro")

        # 사용자 정보 표시
        self._render_user_info()

        st.sidebar.markdown("---")

        state = self.ctx.menu_store.state
        if state.error:
            st.sidebar.caption("⚠️ Menu tidak dapat dimuat")

        self._render_nodes(select_navigation(state), self.ctx.current_page)

        st.sidebar.markdown("---")

        # 로그아웃 버튼
        if st.sidebar.button("🚪 Log out", use_container_width=True):
            self._handle_logout()

    def _render_user_info(self):
        """사용자 정보 표시"""
        user = self.ctx.session.user
        if not user:
            return
        st.sidebar.markdown(f"**👤 {user.display_name}**")
        st.sidebar.caption(user.email)
        if st.sidebar.button("Profil saya", key="nav_view_profile", use_container_width=True):
            navigate_to('/view-profile')

    def _render_nodes(self, nodes: Iterable[MenuNode], current_page: str, container=None):
        container = container or st.sidebar
        nested = container is not st.sidebar

        for node in nodes:
            if node.has_children:
                # Streamlit은 expander 중첩을 허용하지 않음
                if nested:
                    container.markdown(f"**{node_label(node)}**")
                    if node.is_active:
                        self._render_nodes(node.children, current_page, container=container)
                    continue

                with container.expander(node_label(node), expanded=contains_path(node, current_page)):
                    if node.is_active:
                        self._render_nodes(node.children, current_page, container=st)
                    else:
                        st.caption("Menu tidak aktif")
            elif not node.is_group:
                self._render_leaf(node, current_page, container)

    def _render_leaf(self, node: MenuNode, current_page: str, container):
        # 현재 페이지 하이라이트
        button_type = "primary" if current_page == node.url else "secondary"

        if container.button(
            node_label(node),
            key=f"nav_{node.id}",
            use_container_width=True,
            type=button_type,
            disabled=not node.is_active
        ):
            logger.info(f"Navigated to {node.url}")
            navigate_to(node.url)

    def _handle_logout(self):
        """로그아웃 처리"""
        self.ctx.auth_service.logout()
        navigate_to(LOGIN_PATH)


def render_sidebar_navigation(ctx: AppContext):
    """
    사이드바 네비게이션 렌더링

    Args:
        ctx: 현재 실행의 서비스 묶음
    """
    NavigationMenu(ctx).render()
