"""
페이지 라우팅 시스템

경로 패턴('/users/edit/{id}')을 페이지 렌더링 함수로 연결하고 동적으로 로딩합니다.
"""

import importlib
from typing import Callable, Optional

import streamlit as st

from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components.empty_state import render_not_found

logger = setup_logger('Router')

PAGES_PACKAGE = 'oripro_dashboard.ui.pages'


def _split(path: str) -> list:
    return [part for part in path.split('/') if part]


def match_pattern(pattern: str, path: str) -> Optional[dict]:
    """
    경로 패턴 일치 확인

    '{name}' 세그먼트는 비어 있지 않은 임의의 세그먼트와 일치합니다.

    Args:
        pattern: 라우트 패턴 (예: '/users/edit/{id}')
        path: 실제 경로 (예: '/users/edit/12')

    Returns:
        일치하면 파라미터 딕셔너리, 아니면 None
    """
    pattern_parts = _split(pattern)
    path_parts = _split(path)
    if len(pattern_parts) != len(path_parts):
        return None

    params = {}
    for expected, actual in zip(pattern_parts, path_parts):
        if expected.startswith('{') and expected.endswith('}'):
            params[expected[1:-1]] = actual
        elif expected != actual:
            return None
    return params


class PageRouter:
    """페이지 라우팅 관리 클래스"""

    def __init__(self):
        """라우터 초기화"""
        self.routes: dict[str, tuple[str, str]] = {}
        self._register_default_routes()

    def _register_crud(self, base: str, module: str, view: bool = False):
        """목록/생성/수정(/상세) 라우트 등록"""
        module_path = f"{PAGES_PACKAGE}.{module}"
        self.register(base, module_path, 'render_list')
        self.register(f"{base}/create", module_path, 'render_create')
        self.register(f"{base}/edit/{{id}}", module_path, 'render_edit')
        if view:
            self.register(f"{base}/view/{{id}}", module_path, 'render_view')

    def _register_default_routes(self):
        """기본 라우트 등록"""
        self.register('/welcome', f"{PAGES_PACKAGE}.welcome", 'render_welcome_page')
        self.register('/dashboard', f"{PAGES_PACKAGE}.dashboard", 'render_dashboard')
        self.register('/view-profile', f"{PAGES_PACKAGE}.profile", 'render_profile_page')
        self.register('/attendance', f"{PAGES_PACKAGE}.attendance", 'render_attendance_page')
        self.register('/menus', f"{PAGES_PACKAGE}.menus", 'render_menus_page')
        self.register('/dashboard-tenant', f"{PAGES_PACKAGE}.tenant_dashboard", 'render_tenant_dashboard')
        self.register('/dashboard-worker', f"{PAGES_PACKAGE}.worker_dashboard", 'render_worker_dashboard')
        self.register('/work', f"{PAGES_PACKAGE}.work", 'render_work_page')
        self.register('/worker', f"{PAGES_PACKAGE}.workers", 'render_workers_page')
        self.register('/worker/{id}', f"{PAGES_PACKAGE}.workers", 'render_worker_detail')
        self.register('/task-parents', f"{PAGES_PACKAGE}.task_parents", 'render_task_parents_page')

        self._register_crud('/asset', 'assets', view=True)
        self._register_crud('/unit', 'units', view=True)
        self._register_crud('/tenants', 'tenants', view=True)
        self.register('/tenants/payment/{id}', f"{PAGES_PACKAGE}.tenants", 'render_payment_page')
        self._register_crud('/tasks', 'tasks')
        self._register_crud('/task-groups', 'task_groups')
        self._register_crud('/users', 'users')
        self.register('/users/view-profile/{id}', f"{PAGES_PACKAGE}.users", 'render_view')
        self._register_crud('/roles', 'roles')
        self._register_crud('/scan-info', 'scan_info')
        self._register_crud('/complaint-reports', 'complaint_reports', view=True)

    def register(self, path: str, module_path: str, function_name: str):
        """
        라우트 등록

        Args:
            path: URL 경로 또는 패턴 (예: '/dashboard', '/users/edit/{id}')
            module_path: 모듈 경로 (예: 'oripro_dashboard.ui.pages.dashboard')
            function_name: 렌더링 함수 이름 (예: 'render_dashboard')
        """
        self.routes[path] = (module_path, function_name)
        logger.debug(f"Route registered: {path} -> {module_path}.{function_name}")

    def resolve(self, path: str) -> Optional[tuple[str, str, dict]]:
        """
        경로에 해당하는 라우트 찾기

        고정 경로가 패턴보다 우선합니다.

        Returns:
            (모듈 경로, 함수 이름, 경로 파라미터) 또는 None
        """
        if path in self.routes:
            module_path, function_name = self.routes[path]
            return module_path, function_name, {}

        for pattern, (module_path, function_name) in self.routes.items():
            if '{' not in pattern:
                continue
            params = match_pattern(pattern, path)
            if params is not None:
                return module_path, function_name, params

        return None

    def navigate(self, path: str, ctx) -> bool:
        """
        페이지 탐색 및 렌더링

        Args:
            path: 이동할 경로
            ctx: AppContext

        Returns:
            성공 여부
        """
        route = self.resolve(path)
        if route is None:
            logger.warning(f"Route not found: {path}")
            render_not_found("Halaman tidak ditemukan", path)
            return False

        module_path, function_name, params = route

        # 페이지 렌더링
        try:
            module = importlib.import_module(module_path)
            render_function: Callable = getattr(module, function_name)
            render_function(ctx, **params)
            return True
        except ModuleNotFoundError as e:
            st.error(f"❌ Modul halaman tidak ditemukan: {module_path}")
            logger.error(f"Module not found: {module_path} - {e}")
            return False
        except AttributeError as e:
            st.error(f"❌ Fungsi render tidak ditemukan: {function_name}")
            logger.error(f"Function not found: {function_name} in {module_path} - {e}")
            return False
        except Exception as e:
            st.error(f"❌ Terjadi kesalahan saat menampilkan halaman: {str(e)}")
            logger.error(f"Error rendering page {path}: {e}", exc_info=True)
            return False

    def get_routes(self) -> dict[str, tuple[str, str]]:
        """
        등록된 모든 라우트 반환

        Returns:
            라우트 딕셔너리
        """
        return self.routes.copy()


# 전역 라우터 인스턴스
_router: Optional[PageRouter] = None


def get_router() -> PageRouter:
    """
    전역 라우터 인스턴스 반환

    Returns:
        PageRouter 인스턴스
    """
    global _router
    if _router is None:
        _router = PageRouter()
    return _router
