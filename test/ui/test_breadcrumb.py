from unittest.mock import patch

from oripro_dashboard.menu import parse_menu_tree
from oripro_dashboard.ui.components.breadcrumb import build_breadcrumb, get_page_title, render_breadcrumb

TREE = parse_menu_tree([
    {'id': 1, 'title': 'Manage Users', 'url': '/users'},
    {'id': 2, 'title': 'Tenants', 'url': '/tenants'},
])


def test_610_menu_titles_and_segment_names():
    """TEST-610: 메뉴 제목과 세그먼트 이름 사용, ID는 생략"""
    crumbs = build_breadcrumb('/users/edit/12', TREE)

    assert crumbs == [('/users', 'Manage Users'), ('/users/edit', 'Edit')]


def test_611_unknown_segment_is_title_cased():
    """TEST-611: 알 수 없는 세그먼트는 Title Case"""
    assert build_breadcrumb('/task-groups', ()) == [('/task-groups', 'Task Groups')]


def test_612_payment_id_is_skipped():
    """TEST-612: '/tenants/payment/7' -> Tenants › Pembayaran"""
    crumbs = build_breadcrumb('/tenants/payment/7', TREE)

    assert [name for _, name in crumbs] == ['Tenants', 'Pembayaran']


def test_613_page_title():
    """TEST-613: 페이지 제목은 마지막 항목"""
    assert get_page_title('/users/create', TREE) == 'Tambah'
    assert get_page_title('', TREE) == 'Oripro'


@patch('oripro_dashboard.ui.components.breadcrumb.st')
def test_614_render_escapes_names(mock_st):
    """TEST-614: 메뉴 제목은 HTML 이스케이프"""
    tree = parse_menu_tree([{'id': 1, 'title': '<b>Asset</b>', 'url': '/asset'}])

    render_breadcrumb('/asset', tree)

    html = mock_st.markdown.call_args[0][0]
    assert '&lt;b&gt;Asset&lt;/b&gt;' in html
    assert '<b>Asset</b>' not in html


@patch('oripro_dashboard.ui.components.breadcrumb.st')
def test_615_empty_path_renders_nothing(mock_st):
    """TEST-615: 경로가 비어 있으면 렌더링하지 않음"""
    render_breadcrumb('', TREE)

    mock_st.markdown.assert_not_called()
