"""
페이지 라우터 테스트
"""

import importlib
from unittest.mock import Mock, patch

import pytest

from oripro_dashboard.ui.router import PAGES_PACKAGE, PageRouter, get_router, match_pattern


@pytest.fixture
def router():
    return PageRouter()


class TestMatchPattern:
    """경로 패턴 일치"""

    def test_static_pattern(self):
        assert match_pattern('/asset/create', '/asset/create') == {}

    def test_parameter_segment(self):
        assert match_pattern('/users/edit/{id}', '/users/edit/12') == {'id': '12'}

    def test_length_mismatch(self):
        assert match_pattern('/users/edit/{id}', '/users/edit') is None
        assert match_pattern('/users/edit/{id}', '/users/edit/12/extra') is None

    def test_literal_mismatch(self):
        assert match_pattern('/users/edit/{id}', '/users/view/12') is None


class TestResolve:
    """라우트 해석"""

    def test_static_route(self, router):
        assert router.resolve('/dashboard') == (f"{PAGES_PACKAGE}.dashboard", 'render_dashboard', {})

    def test_crud_routes_are_registered(self, router):
        routes = router.get_routes()

        for path in ('/asset', '/asset/create', '/asset/edit/{id}', '/asset/view/{id}'):
            assert path in routes
        assert '/roles/view/{id}' not in routes

    def test_pattern_route_with_params(self, router):
        module_path, function_name, params = router.resolve('/tenants/payment/7')

        assert module_path == f"{PAGES_PACKAGE}.tenants"
        assert function_name == 'render_payment_page'
        assert params == {'id': '7'}

    def test_static_route_wins_over_pattern(self, router):
        router.register('/users/edit/{id}', 'pattern.module', 'render')
        router.register('/users/edit/me', 'static.module', 'render')

        assert router.resolve('/users/edit/me')[0] == 'static.module'

    def test_worker_and_dashboard_routes(self, router):
        assert router.resolve('/worker/15') == (f"{PAGES_PACKAGE}.workers", 'render_worker_detail', {'id': '15'})
        assert router.resolve('/worker')[1] == 'render_workers_page'
        assert router.resolve('/work')[1] == 'render_work_page'
        assert router.resolve('/dashboard-tenant')[1] == 'render_tenant_dashboard'
        assert router.resolve('/dashboard-worker')[1] == 'render_worker_dashboard'
        assert router.resolve('/task-parents')[1] == 'render_task_parents_page'

    def test_every_route_points_to_a_render_function(self, router):
        for path, (module_path, function_name) in router.get_routes().items():
            module = importlib.import_module(module_path)
            assert callable(getattr(module, function_name, None)), path

    def test_unknown_path(self, router):
        assert router.resolve('/no-such-page') is None

    def test_get_routes_returns_copy(self, router):
        routes = router.get_routes()
        routes.clear()

        assert router.get_routes()


class TestNavigate:
    """페이지 렌더링"""

    @patch('oripro_dashboard.ui.router.render_not_found')
    def test_unknown_path_renders_not_found(self, mock_not_found, router):
        result = router.navigate('/no-such-page', Mock())

        assert result is False
        mock_not_found.assert_called_once_with("Halaman tidak ditemukan", '/no-such-page')

    @patch('oripro_dashboard.ui.router.importlib.import_module')
    def test_render_function_receives_context_and_params(self, mock_import, router):
        module = Mock()
        mock_import.return_value = module
        ctx = Mock()

        result = router.navigate('/users/edit/12', ctx)

        assert result is True
        mock_import.assert_called_once_with(f"{PAGES_PACKAGE}.users")
        module.render_edit.assert_called_once_with(ctx, id='12')

    @patch('oripro_dashboard.ui.router.st')
    def test_missing_module_shows_error(self, mock_st, router):
        router.register('/broken', 'oripro_dashboard.ui.pages.no_such_module', 'render')

        result = router.navigate('/broken', Mock())

        assert result is False
        mock_st.error.assert_called_once()
        assert 'no_such_module' in mock_st.error.call_args[0][0]

    @patch('oripro_dashboard.ui.router.importlib.import_module')
    @patch('oripro_dashboard.ui.router.st')
    def test_page_exception_is_contained(self, mock_st, mock_import, router):
        mock_import.return_value.render_dashboard.side_effect = RuntimeError('boom')

        result = router.navigate('/dashboard', Mock())

        assert result is False
        assert 'boom' in mock_st.error.call_args[0][0]


def test_get_router_is_singleton():
    assert get_router() is get_router()
