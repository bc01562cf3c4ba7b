"""
Test MenuTreeStore with a mocked UsersApi.
"""

from unittest.mock import Mock

import pytest

from oripro_dashboard.api import ApiResult, ErrorKind
from oripro_dashboard.auth import SessionContext, SessionUser
from oripro_dashboard.config import Config
from oripro_dashboard.menu import MenuNode, MenuTreeStore, iter_nodes, with_manage_menus_entry
from oripro_dashboard.menu.models import MANAGE_MENUS_URL

SIDEBAR = {'navMain': [
    {'id': 1, 'title': 'Dashboard', 'url': '/dashboard', 'order': 1},
    {'id': 9, 'title': 'Setting', 'url': '#', 'order': 9, 'items': [
        {'id': 90, 'title': 'Profile', 'url': '/setting/profile', 'order': 1},
    ]},
]}


@pytest.fixture
def users_api():
    api = Mock()
    api.sidebar.return_value = ApiResult.ok(SIDEBAR)
    return api


@pytest.fixture
def session():
    context = SessionContext({})
    context.sign_in('tok', SessionUser(id='1', email='admin@oripro.id', role_id='1'))
    return context


def make_store(users_api, session, app_env='development'):
    return MenuTreeStore(Config(app_env=app_env), users_api, session)


def menus_entries(tree):
    return [node for node in iter_nodes(tree) if node.url == MANAGE_MENUS_URL]


class TestLoad:
    """메뉴 트리 로드"""

    def test_user_without_role_gets_empty_tree_without_request(self, users_api):
        session = SessionContext({})
        session.sign_in('tok', SessionUser(id='1', email='norole@oripro.id'))
        store = make_store(users_api, session)

        state = store.load()

        assert state.tree == ()
        assert state.error is None
        assert state.loaded is True
        users_api.sidebar.assert_not_called()

    def test_failure_records_error_and_empty_tree(self, users_api, session):
        users_api.sidebar.return_value = ApiResult.fail('Server unavailable', kind=ErrorKind.NETWORK)
        store = make_store(users_api, session)

        state = store.load()

        assert state.tree == ()
        assert state.error == 'Server unavailable'
        assert state.loading is False

    def test_invalid_payload_records_error(self, users_api, session):
        users_api.sidebar.return_value = ApiResult.ok({'navMain': [{'id': 1}]})
        store = make_store(users_api, session)

        state = store.load()

        assert state.tree == ()
        assert 'no title' in state.error

    def test_development_appends_single_manage_menus_entry(self, users_api, session):
        store = make_store(users_api, session)

        tree = store.load().tree

        entries = menus_entries(tree)
        assert len(entries) == 1
        setting = tree[-1]
        assert setting.title == 'Setting'
        assert [child.url for child in setting.children] == ['/setting/profile', MANAGE_MENUS_URL]

    def test_production_does_not_append_entry(self, users_api, session):
        store = make_store(users_api, session, app_env='production')

        tree = store.load().tree

        assert menus_entries(tree) == []

    def test_ensure_loaded_fetches_once(self, users_api, session):
        store = make_store(users_api, session)

        store.ensure_loaded()
        store.ensure_loaded()

        users_api.sidebar.assert_called_once()

    def test_reload_fetches_again(self, users_api, session):
        store = make_store(users_api, session)
        store.ensure_loaded()

        store.reload()

        assert users_api.sidebar.call_count == 2

    def test_logout_clears_tree(self, users_api, session):
        store = make_store(users_api, session)
        store.load()

        session.invalidate()

        assert store.tree == ()
        assert store.state.loaded is False


class TestManageMenusEntry:
    """개발 환경 메뉴 관리 항목"""

    def test_creates_setting_group_when_missing(self):
        tree = (MenuNode(id='1', title='Dashboard', url='/dashboard', order=4),)

        result = with_manage_menus_entry(tree)

        assert len(result) == 2
        assert result[1].title == 'Setting'
        assert result[1].order == 5
        assert result[1].children[0].url == MANAGE_MENUS_URL

    def test_existing_entry_is_not_duplicated(self):
        tree = with_manage_menus_entry(())

        assert with_manage_menus_entry(tree) == tree
        assert len(menus_entries(tree)) == 1
