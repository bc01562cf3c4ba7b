"""
Oripro Dashboard - Main Entry Point

역할별 메뉴 트리, 라우트 접근 확인, 페이지 라우팅을 연결하는 메인 애플리케이션입니다.
"""

import streamlit as st

from oripro_dashboard.log.logger import configure_logging, setup_logger
from oripro_dashboard.ui.components import get_page_title, render_breadcrumb
from oripro_dashboard.ui.navigation import render_sidebar_navigation, select_navigation
from oripro_dashboard.ui.pages.login import render_login_page
from oripro_dashboard.ui.pages.reset_password import (
    CREATE_PASSWORD_PATH,
    RESET_PASSWORD_PATH,
    render_create_password_page,
    render_reset_password_page,
)
from oripro_dashboard.ui.route_guard import render_route_guard
from oripro_dashboard.ui.router import get_router
from oripro_dashboard.ui.session_state import (
    HOME_PATH,
    LOGIN_PATH,
    get_app_context,
    get_current_page,
    initialize_session_state,
    navigate_to,
)

# Logger 설정
app_logger = setup_logger('MainApp')

# 로그인 없이 접근 가능한 인증 페이지
PUBLIC_PAGES = {
    RESET_PASSWORD_PATH: render_reset_password_page,
    CREATE_PASSWORD_PATH: render_create_password_page,
}


def render_public_page(ctx, current_page: str):
    """비로그인 상태의 화면 (비밀번호 재설정 링크 외에는 로그인)"""
    render_page = PUBLIC_PAGES.get(current_page, render_login_page)
    render_page(ctx)


def main():
    """메인 애플리케이션"""
    # 페이지 설정
    st.set_page_config(
        page_title="Oripro Dashboard",
        page_icon="🏢",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    # 세션 상태 초기화
    initialize_session_state()
    ctx = get_app_context()
    configure_logging(ctx.config.log_file, ctx.config.log_level)
    current_page = get_current_page()

    # 로그인 체크
    if not ctx.session.is_authenticated:
        if not current_page.startswith('/auth'):
            ctx.session.remember_redirect(current_page)
            navigate_to(LOGIN_PATH)
        render_public_page(ctx, current_page)
        ctx.notifier.flush()
        return

    # 로그인 상태에서 인증 페이지 접근 시 홈으로
    if current_page.startswith('/auth'):
        navigate_to(HOME_PATH)

    # 메뉴 트리 (세션당 한 번)
    ctx.menu_store.ensure_loaded()

    # 네비게이션 렌더링
    render_sidebar_navigation(ctx)

    # 브레드크럼 네비게이션
    tree = select_navigation(ctx.menu_store.state)
    render_breadcrumb(current_page, tree)
    app_logger.debug(f"Rendering {current_page} ({get_page_title(current_page, tree)})")

    # 접근 확인 후 라우터로 페이지 렌더링
    router = get_router()
    render_route_guard(ctx.gate, current_page, lambda: router.navigate(current_page, ctx))

    # 페이지 렌더링 중 401로 세션이 무효화된 경우
    if not ctx.session.is_authenticated:
        ctx.session.remember_redirect(current_page)
        navigate_to(LOGIN_PATH)

    ctx.notifier.flush()


if __name__ == "__main__":
    main()
