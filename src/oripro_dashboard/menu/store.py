"""
메뉴 트리 저장소

로그인한 사용자의 메뉴 트리를 세션당 한 번 가져와 보관합니다.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from oripro_dashboard.api import UsersApi
from oripro_dashboard.auth.session import MENU_STATE_KEY, SessionContext
from oripro_dashboard.config import Config
from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.menu.models import (
    MANAGE_MENUS_TITLE,
    MANAGE_MENUS_URL,
    SETTINGS_GROUP_TITLE,
    Capabilities,
    Icon,
    MenuNode,
    MenuTreeError,
    iter_nodes,
    parse_menu_tree,
)


@dataclass(frozen=True)
class MenuTreeState:
    """
    메뉴 트리 상태

    Attributes:
        tree: 메뉴 트리 (실패/역할 없음이면 빈 튜플)
        loading: 가져오는 중 여부
        error: 실패 메시지
        loaded: load()가 끝났는지 여부
    """
    tree: Tuple[MenuNode, ...] = ()
    loading: bool = False
    error: Optional[str] = None
    loaded: bool = False


def with_manage_menus_entry(tree: Tuple[MenuNode, ...]) -> Tuple[MenuNode, ...]:
    """
    'Setting' 그룹에 메뉴 관리 항목 추가

    이미 '/menus' 항목이 있으면 그대로 반환하고,
    'Setting' 그룹이 없으면 그 항목만 가진 그룹을 새로 만듭니다.
    """
    if any(node.url == MANAGE_MENUS_URL for node in iter_nodes(tree)):
        return tree

    entry = MenuNode(
        id='dev-manage-menus',
        title=MANAGE_MENUS_TITLE,
        url=MANAGE_MENUS_URL,
        icon=Icon.SETTINGS,
        capabilities=Capabilities.all()
    )

    for index, node in enumerate(tree):
        if node.title == SETTINGS_GROUP_TITLE:
            last_order = max((child.order for child in node.children), default=0)
            group = node.with_child(replace(entry, order=last_order + 1))
            return tree[:index] + (group,) + tree[index + 1:]

    last_order = max((node.order for node in tree), default=0)
    group = MenuNode(
        id='dev-setting',
        title=SETTINGS_GROUP_TITLE,
        icon=Icon.SETTINGS,
        order=last_order + 1,
        children=(replace(entry, order=1),)
    )
    return tree + (group,)


class MenuTreeStore:
    """
    메뉴 트리 저장소

    상태는 세션 컨텍스트에 보관되므로 Streamlit rerun 사이에도 유지되며,
    로그아웃 시 SessionContext.invalidate()로 함께 삭제됩니다.
    """

    def __init__(self, config: Config, users_api: UsersApi, session: SessionContext):
        """
        Args:
            config: 애플리케이션 설정
            users_api: 사용자 API (사이드바 조회)
            session: 세션 컨텍스트
        """
        self.logger = setup_logger('MenuTreeStore')
        self.config = config
        self.users_api = users_api
        self.session = session

    @property
    def state(self) -> MenuTreeState:
        return self.session.get(MENU_STATE_KEY) or MenuTreeState()

    @property
    def tree(self) -> Tuple[MenuNode, ...]:
        return self.state.tree

    def _set_state(self, state: MenuTreeState):
        self.session.set(MENU_STATE_KEY, state)

    def ensure_loaded(self) -> MenuTreeState:
        """세션에서 아직 불러오지 않았으면 load() 실행"""
        if not self.state.loaded:
            return self.load()
        return self.state

    def load(self) -> MenuTreeState:
        """
        메뉴 트리 가져오기

        역할이 없는 사용자(또는 로그아웃 상태)는 오류 없이 빈 트리가 됩니다.
        실패 시 빈 트리와 오류 메시지를 저장하며 재시도하지 않습니다.

        Returns:
            최종 MenuTreeState
        """
        user = self.session.user
        if not user or not user.has_role():
            self.logger.info("No role on session user, menu tree is empty")
            self._set_state(MenuTreeState(loaded=True))
            return self.state

        self._set_state(MenuTreeState(loading=True))

        result = self.users_api.sidebar()
        if not result.success:
            error = result.error or "Failed to fetch user sidebar"
            self.logger.error(f"Error fetching user sidebar: {error}")
            self._set_state(MenuTreeState(error=error, loaded=True))
            return self.state

        raw_nodes = result.data.get('navMain') if isinstance(result.data, dict) else None

        try:
            tree = parse_menu_tree(raw_nodes or [])
        except MenuTreeError as e:
            self.logger.error(f"Invalid user sidebar payload: {e}")
            self._set_state(MenuTreeState(error=str(e), loaded=True))
            return self.state

        if not self.config.is_production:
            tree = with_manage_menus_entry(tree)

        self.logger.info(f"Loaded menu tree with {len(tree)} top level items for {user.email}")
        self._set_state(MenuTreeState(tree=tree, loaded=True))
        return self.state

    def reload(self) -> MenuTreeState:
        """메뉴 변경 후 다시 가져오기"""
        self._set_state(MenuTreeState())
        return self.load()
