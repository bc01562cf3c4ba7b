"""
메뉴 트리 데이터 모델

권한 기반 네비게이션을 위한 모델입니다.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

# 이동할 수 없는 그룹 헤더의 url
GROUP_URL = '#'


class MenuTreeError(ValueError):
    """메뉴 트리 데이터가 올바르지 않을 때 발생"""


class Icon(Enum):
    """알려진 메뉴 아이콘 (값은 백엔드가 보내는 이름)"""
    HOUSE = 'House'
    MAIL = 'Mail'
    SHIELD_CHECK = 'ShieldCheck'
    COMPONENT = 'Component'
    CHART_PIE = 'ChartPie'
    BOXES = 'Boxes'
    SERVER = 'Server'
    USERS_ROUND = 'UsersRound'
    STICKY_NOTE = 'StickyNote'
    SETTINGS = 'Settings'
    BUILDING = 'Building2'
    FILE_TEXT = 'FileText'

    @property
    def glyph(self) -> str:
        return _ICON_GLYPHS[self]


_ICON_GLYPHS = {
    Icon.HOUSE: '🏠',
    Icon.MAIL: '✉️',
    Icon.SHIELD_CHECK: '🛡️',
    Icon.COMPONENT: '🧩',
    Icon.CHART_PIE: '📊',
    Icon.BOXES: '📦',
    Icon.SERVER: '🗄️',
    Icon.USERS_ROUND: '👥',
    Icon.STICKY_NOTE: '📝',
    Icon.SETTINGS: '⚙️',
    Icon.BUILDING: '🏢',
    Icon.FILE_TEXT: '📄',
}

DEFAULT_ICON = Icon.HOUSE


def resolve_icon(name) -> Icon:
    """
    아이콘 이름을 Icon으로 변환

    Args:
        name: 백엔드 아이콘 이름 (None 또는 알 수 없는 이름 허용)

    Returns:
        Icon (알 수 없으면 DEFAULT_ICON)
    """
    if isinstance(name, Icon):
        return name
    try:
        return Icon(name)
    except ValueError:
        return DEFAULT_ICON


@dataclass(frozen=True)
class Capabilities:
    """
    메뉴 노드에서 현재 사용자가 할 수 있는 작업

    Attributes:
        can_view: 조회
        can_add: 생성
        can_edit: 수정
        can_delete: 삭제
        can_confirm: 승인
    """
    can_view: bool = False
    can_add: bool = False
    can_edit: bool = False
    can_delete: bool = False
    can_confirm: bool = False

    @classmethod
    def none(cls) -> 'Capabilities':
        return cls()

    @classmethod
    def all(cls) -> 'Capabilities':
        return cls(True, True, True, True, True)

    @classmethod
    def from_dict(cls, data: dict) -> 'Capabilities':
        """
        백엔드 권한 필드로부터 생성

        백엔드는 can_add/can_create, can_edit/can_update 두 가지 이름을 모두 사용합니다.
        """
        return cls(
            can_view=bool(data.get('can_view', False)),
            can_add=bool(data.get('can_add', data.get('can_create', False))),
            can_edit=bool(data.get('can_edit', data.get('can_update', False))),
            can_delete=bool(data.get('can_delete', False)),
            can_confirm=bool(data.get('can_confirm', False))
        )

    def to_dict(self) -> dict:
        return {
            'can_view': self.can_view,
            'can_add': self.can_add,
            'can_edit': self.can_edit,
            'can_delete': self.can_delete,
            'can_confirm': self.can_confirm
        }


@dataclass(frozen=True)
class MenuNode:
    """
    네비게이션 트리의 노드

    Attributes:
        id: 트리 전체에서 고유한 ID
        title: 표시 이름
        url: 경로 또는 GROUP_URL
        icon: 아이콘
        order: 형제 노드 정렬 순서
        is_active: 활성화 여부
        capabilities: 작업 권한
        children: 하위 노드
    """
    id: str
    title: str
    url: str = GROUP_URL
    icon: Icon = DEFAULT_ICON
    order: int = 0
    is_active: bool = True
    capabilities: Capabilities = field(default_factory=Capabilities)
    children: Tuple['MenuNode', ...] = ()

    @property
    def is_group(self) -> bool:
        """이동할 수 없는 그룹 헤더 여부"""
        return self.url == GROUP_URL

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def with_child(self, child: 'MenuNode') -> 'MenuNode':
        return replace(self, children=self.children + (child,))

    def walk(self) -> Iterator['MenuNode']:
        """자신과 모든 하위 노드 (전위 순회)"""
        yield self
        for child in self.children:
            yield from child.walk()


def iter_nodes(tree: Iterable[MenuNode]) -> Iterator[MenuNode]:
    for node in tree:
        yield from node.walk()


def _normalize_url(url) -> str:
    if not url or not str(url).strip():
        return GROUP_URL
    return str(url).strip()


def _parse_node(raw: dict, fallback_id: str, seen_ids: set) -> MenuNode:
    if not isinstance(raw, dict):
        raise MenuTreeError(f"Menu node must be an object, got: {type(raw).__name__}")

    title = raw.get('title') or raw.get('name')
    if not title:
        raise MenuTreeError(f"Menu node {raw.get('id', fallback_id)} has no title")

    node_id = str(raw['id']) if raw.get('id') is not None else fallback_id
    if node_id in seen_ids:
        raise MenuTreeError(f"Duplicate menu id: {node_id}")
    seen_ids.add(node_id)

    # 사이드바 응답은 'items', 메뉴 응답은 'children' 사용
    raw_children = raw.get('children') or raw.get('items') or []

    try:
        order = int(raw.get('order') or 0)
    except (TypeError, ValueError) as e:
        raise MenuTreeError(f"Menu node {node_id} has invalid order: {raw.get('order')}") from e

    return MenuNode(
        id=node_id,
        title=str(title),
        url=_normalize_url(raw.get('url')),
        icon=resolve_icon(raw.get('icon')),
        order=order,
        is_active=bool(raw.get('is_active', raw.get('isActive', True))),
        capabilities=Capabilities.from_dict(raw),
        children=_parse_nodes(raw_children, node_id, seen_ids)
    )


def _parse_nodes(raw_nodes: list, parent_id: str, seen_ids: set) -> Tuple[MenuNode, ...]:
    if not isinstance(raw_nodes, list):
        raise MenuTreeError(f"Menu children must be a list, got: {type(raw_nodes).__name__}")

    nodes = [
        _parse_node(raw, f"{parent_id}.{index}", seen_ids)
        for index, raw in enumerate(raw_nodes)
    ]
    # sorted()는 안정 정렬: 같은 order는 응답 순서 유지
    return tuple(sorted(nodes, key=lambda node: node.order))


def parse_menu_tree(raw_nodes: Optional[list]) -> Tuple[MenuNode, ...]:
    """
    백엔드 메뉴 데이터를 MenuNode 트리로 변환

    Args:
        raw_nodes: 메뉴 딕셔너리 리스트 (None이면 빈 트리)

    Returns:
        order 기준으로 정렬된 MenuNode 튜플

    Raises:
        MenuTreeError: 제목 누락, ID 중복 등 데이터가 올바르지 않은 경우
    """
    if raw_nodes is None:
        return ()
    return _parse_nodes(raw_nodes, 'nav', set())


def _fallback_leaf(node_id: str, title: str, url: str, icon: Icon, order: int) -> MenuNode:
    return MenuNode(id=node_id, title=title, url=url, icon=icon, order=order)


# 메뉴 트리를 가져오지 못했을 때 표시하는 최소 네비게이션
FALLBACK_NAVIGATION: Tuple[MenuNode, ...] = (
    _fallback_leaf('fallback-dashboard', 'Dashboard', '/dashboard', Icon.HOUSE, 1),
    _fallback_leaf('fallback-dashboard-tenant', 'Dashboard Tenant', '/dashboard-tenant', Icon.FILE_TEXT, 2),
    MenuNode(
        id='fallback-users',
        title='Users',
        icon=Icon.USERS_ROUND,
        order=3,
        children=(
            _fallback_leaf('fallback-users-manage', 'Manage Users', '/users', Icon.USERS_ROUND, 1),
            _fallback_leaf('fallback-users-roles', 'Manage Roles', '/roles', Icon.SHIELD_CHECK, 2),
        )
    ),
    _fallback_leaf('fallback-asset', 'Asset', '/asset', Icon.BOXES, 4),
    _fallback_leaf('fallback-unit', 'Unit', '/unit', Icon.BUILDING, 5),
    _fallback_leaf('fallback-worker', 'Worker', '/worker', Icon.USERS_ROUND, 6),
    _fallback_leaf('fallback-tenants', 'Tenants', '/tenants', Icon.BUILDING, 7),
    _fallback_leaf('fallback-tasks', 'Task', '/tasks', Icon.STICKY_NOTE, 8),
    MenuNode(
        id='fallback-setting',
        title='Setting',
        icon=Icon.SETTINGS,
        order=9,
        children=(
            _fallback_leaf('fallback-setting-menus', 'Manage Menus', '/menus', Icon.SETTINGS, 1),
        )
    ),
)

# 개발 환경에서 추가하는 메뉴 관리 항목
SETTINGS_GROUP_TITLE = 'Setting'
MANAGE_MENUS_TITLE = 'Manage Menus'
MANAGE_MENUS_URL = '/menus'


def menu_titles_by_url(tree: Iterable[MenuNode]) -> dict:
    """url -> 제목 매핑 (그룹 헤더 제외)"""
    titles = {}
    for node in iter_nodes(tree):
        if not node.is_group and node.url not in titles:
            titles[node.url] = node.title
    return titles


def flatten_leaves(tree: Iterable[MenuNode]) -> List[MenuNode]:
    """이동 가능한 모든 노드"""
    return [node for node in iter_nodes(tree) if not node.is_group]
