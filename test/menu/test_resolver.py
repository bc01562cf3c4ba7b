from oripro_dashboard.menu import Capabilities, find_menu_node, parse_menu_tree, resolve_capabilities


TREE = parse_menu_tree([
    {'id': 1, 'title': 'Dashboard', 'url': '/dashboard', 'can_view': True},
    {'id': 2, 'title': 'Users', 'url': '#', 'children': [
        {'id': 20, 'title': 'Manage Users', 'url': '/users', 'can_view': True, 'can_add': True},
        {'id': 21, 'title': 'Manage Roles', 'url': '/roles', 'can_view': True, 'can_delete': True},
    ]},
    {'id': 3, 'title': 'Tenants', 'url': '/tenants', 'can_view': True, 'can_edit': True, 'children': [
        {'id': 30, 'title': 'Payments', 'url': '/tenants/payment', 'can_view': True, 'can_confirm': True},
    ]},
])


def test_500_exact_match():
    """TEST-500: url이 정확히 일치하는 노드"""
    node = find_menu_node(TREE, '/roles')

    assert node.id == '21'
    assert resolve_capabilities(TREE, '/roles').can_delete is True


def test_501_parameterized_route_falls_back_to_prefix():
    """TEST-501: '/tenants/edit/7' -> '/tenants' 노드의 권한"""
    capabilities = resolve_capabilities(TREE, '/tenants/edit/7')

    assert capabilities.can_edit is True
    assert capabilities.can_confirm is False


def test_502_longest_prefix_wins():
    """TEST-502: 더 구체적인 하위 노드가 조상보다 우선"""
    node = find_menu_node(TREE, '/tenants/payment/7')

    assert node.id == '30'


def test_503_exact_match_beats_earlier_prefix():
    """TEST-503: 정확히 일치하는 노드는 접두어 후보보다 우선"""
    assert find_menu_node(TREE, '/tenants').id == '3'
    assert find_menu_node(TREE, '/tenants/payment').id == '30'


def test_504_no_match_is_all_false():
    """TEST-504: 일치하는 노드가 없으면 모든 권한 False"""
    assert resolve_capabilities(TREE, '/asset') == Capabilities.none()
    assert resolve_capabilities(TREE, '') == Capabilities.none()
    assert resolve_capabilities((), '/users') == Capabilities.none()


def test_505_group_nodes_are_never_matched():
    """TEST-505: 그룹 헤더('#')는 매칭 대상이 아님"""
    assert find_menu_node(TREE, '#') is None


def test_506_capabilities_are_not_merged_with_ancestors():
    """TEST-506: 조상의 권한과 합치지 않음"""
    capabilities = resolve_capabilities(TREE, '/tenants/payment')

    assert capabilities.can_confirm is True
    assert capabilities.can_edit is False
