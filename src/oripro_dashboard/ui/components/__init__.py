"""
UI 컴포넌트 모듈

공통 UI 컴포넌트를 제공합니다.
"""

from oripro_dashboard.ui.components.breadcrumb import build_breadcrumb, get_page_title, render_breadcrumb
from oripro_dashboard.ui.components.crud import CrudPage, field_error, load_options, select_index, to_table
from oripro_dashboard.ui.components.empty_state import render_empty, render_not_found

__all__ = [
    # Breadcrumb
    'render_breadcrumb',
    'build_breadcrumb',
    'get_page_title',
    # CRUD
    'CrudPage',
    'field_error',
    'load_options',
    'select_index',
    'to_table',
    # Empty state
    'render_empty',
    'render_not_found',
]
