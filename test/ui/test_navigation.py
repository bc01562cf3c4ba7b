from unittest.mock import MagicMock, patch

from oripro_dashboard.menu import FALLBACK_NAVIGATION, MenuNode, MenuTreeState, parse_menu_tree
from oripro_dashboard.ui.navigation import NavigationMenu, contains_path, node_label, select_navigation

TREE = parse_menu_tree([
    {'id': 1, 'title': 'Dashboard', 'url': '/dashboard', 'icon': 'House'},
    {'id': 2, 'title': 'Users', 'url': '#', 'icon': 'UsersRound', 'children': [
        {'id': 20, 'title': 'Manage Users', 'url': '/users'},
    ]},
])


def test_600_empty_tree_uses_fallback():
    """TEST-600: 트리가 비어 있으면 고정 네비게이션을 그대로 사용"""
    assert select_navigation(MenuTreeState(loaded=True)) is FALLBACK_NAVIGATION
    assert select_navigation(MenuTreeState(error='boom', loaded=True)) is FALLBACK_NAVIGATION
    assert select_navigation(MenuTreeState(loading=True)) is FALLBACK_NAVIGATION


def test_601_loaded_tree_is_used_unchanged():
    """TEST-601: 트리가 있으면 가공 없이 사용"""
    assert select_navigation(MenuTreeState(tree=TREE, loaded=True)) is TREE


def test_602_group_contains_current_path():
    """TEST-602: 그룹은 하위 노드가 현재 경로면 펼침"""
    users_group = TREE[1]

    assert contains_path(users_group, '/users') is True
    assert contains_path(users_group, '/dashboard') is False
    assert contains_path(users_group, '#') is False


def test_603_node_label_has_icon_glyph():
    """TEST-603: 아이콘 글리프와 제목"""
    assert node_label(TREE[0]) == '🏠 Dashboard'
    assert node_label(MenuNode(id='x', title='Plain')) == '🏠 Plain'


def make_menu(tree=(), current_page='/dashboard'):
    ctx = MagicMock()
    ctx.menu_store.state = MenuTreeState(tree=tuple(tree), loaded=True)
    ctx.session.user = None
    ctx.current_page = current_page
    return NavigationMenu(ctx)


def button_labels(button_mock):
    return [call.args[0] for call in button_mock.call_args_list]


@patch('oripro_dashboard.ui.navigation.st')
def test_604_inactive_leaf_is_disabled(mock_st):
    """TEST-604: 비활성 메뉴는 disabled 버튼, 현재 페이지는 primary"""
    mock_st.sidebar.button.return_value = False
    tree = parse_menu_tree([
        {'id': 1, 'title': 'Dashboard', 'url': '/dashboard', 'icon': 'House'},
        {'id': 3, 'title': 'Asset', 'url': '/asset', 'icon': 'Boxes', 'is_active': False},
    ])

    make_menu(tree)._render_nodes(tree, '/dashboard')

    dashboard_call, asset_call = mock_st.sidebar.button.call_args_list
    assert dashboard_call.kwargs['disabled'] is False
    assert dashboard_call.kwargs['type'] == 'primary'
    assert asset_call.kwargs['disabled'] is True
    assert asset_call.kwargs['type'] == 'secondary'


@patch('oripro_dashboard.ui.navigation.st')
def test_605_group_expands_only_when_holding_current_page(mock_st):
    """TEST-605: 현재 경로를 포함한 그룹만 펼쳐지고 하위 메뉴는 그룹 안에 표시"""
    mock_st.button.return_value = False
    mock_st.sidebar.button.return_value = False
    tree = parse_menu_tree([
        {'id': 2, 'title': 'Users', 'url': '#', 'icon': 'UsersRound', 'children': [
            {'id': 20, 'title': 'Manage Users', 'url': '/users'},
        ]},
        {'id': 4, 'title': 'Setting', 'url': '#', 'icon': 'Settings', 'children': [
            {'id': 40, 'title': 'Manage Menus', 'url': '/menus'},
        ]},
    ])

    make_menu(tree)._render_nodes(tree, '/users')

    expanders = {call.args[0]: call.kwargs['expanded'] for call in mock_st.sidebar.expander.call_args_list}
    assert expanders == {'👥 Users': True, '⚙️ Setting': False}
    assert button_labels(mock_st.button) == ['🏠 Manage Users', '🏠 Manage Menus']
    mock_st.sidebar.button.assert_not_called()


@patch('oripro_dashboard.ui.navigation.st')
def test_606_sibling_order_is_kept(mock_st):
    """TEST-606: 형제 메뉴는 order 순서로 렌더링"""
    mock_st.sidebar.button.return_value = False
    tree = parse_menu_tree([
        {'id': 3, 'title': 'Unit', 'url': '/unit', 'icon': 'Building2', 'order': 3},
        {'id': 1, 'title': 'Dashboard', 'url': '/dashboard', 'icon': 'House', 'order': 1},
        {'id': 2, 'title': 'Asset', 'url': '/asset', 'icon': 'Boxes', 'order': 2},
    ])

    make_menu(tree)._render_nodes(tree, '/asset')

    assert button_labels(mock_st.sidebar.button) == ['🏠 Dashboard', '📦 Asset', '🏢 Unit']


@patch('oripro_dashboard.ui.navigation.st')
def test_607_render_uses_fallback_for_empty_tree(mock_st):
    """TEST-607: 트리가 비어 있으면 고정 네비게이션과 로그아웃 버튼 표시"""
    mock_st.button.return_value = False
    mock_st.sidebar.button.return_value = False

    make_menu().render()

    labels = button_labels(mock_st.sidebar.button)
    top_leaves = [node_label(node) for node in FALLBACK_NAVIGATION if not node.has_children]
    assert labels[:-1] == top_leaves
    assert labels[-1] == "🚪 Log out"
    groups = [call.args[0] for call in mock_st.sidebar.expander.call_args_list]
    assert groups == [node_label(node) for node in FALLBACK_NAVIGATION if node.has_children]


def test_608_fallback_links_existing_pages():
    """TEST-608: 고정 네비게이션의 모든 링크는 등록된 라우트"""
    from oripro_dashboard.ui.router import PageRouter

    router = PageRouter()
    urls = []
    for node in FALLBACK_NAVIGATION:
        urls.extend(child.url for child in node.children)
        if not node.has_children:
            urls.append(node.url)

    assert '/dashboard-tenant' in urls
    assert '/worker' in urls
    for url in urls:
        assert router.resolve(url) is not None, url
