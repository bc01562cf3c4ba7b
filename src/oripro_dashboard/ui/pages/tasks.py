"""
Task 관리 페이지
"""

import streamlit as st

from oripro_dashboard.forms import TaskForm
from oripro_dashboard.ui.components import CrudPage, field_error, load_options, select_index

DAY_LABELS = {
    0: 'Minggu',
    1: 'Senin',
    2: 'Selasa',
    3: 'Rabu',
    4: 'Kamis',
    5: 'Jumat',
    6: 'Sabtu',
}


def _split_times(value) -> list:
    if isinstance(value, list):
        return [str(v) for v in value]
    return [part.strip() for part in str(value or '').split(',') if part.strip()]


def render_task_fields(ctx, item: dict, errors: dict) -> dict:
    """Task 폼 필드"""
    assets = load_options(ctx.api.assets)
    roles = load_options(ctx.api.roles)
    groups = load_options(ctx.api.task_groups)
    asset_ids = list(assets.keys())
    role_ids = list(roles.keys())
    group_ids = [''] + list(groups.keys())

    name = st.text_input("Nama Task *", value=item.get('name') or '')
    field_error(errors, 'name')

    col1, col2 = st.columns(2)
    with col1:
        asset_id = st.selectbox(
            "Asset *",
            options=asset_ids,
            index=select_index(asset_ids, str(item.get('asset_id') or '')),
            format_func=lambda value: assets.get(value, value)
        )
        field_error(errors, 'asset_id')
    with col2:
        role_id = st.selectbox(
            "Role *",
            options=role_ids,
            index=select_index(role_ids, str(item.get('role_id') or '')),
            format_func=lambda value: roles.get(value, value)
        )
        field_error(errors, 'role_id')

    col1, col2 = st.columns(2)
    with col1:
        duration = st.number_input("Durasi (menit) *", min_value=0, value=int(item.get('duration') or 1))
        field_error(errors, 'duration')
    with col2:
        task_group_id = st.selectbox(
            "Task Group",
            options=group_ids,
            index=select_index(group_ids, str(item.get('task_group_id') or '')),
            format_func=lambda value: groups.get(value, '-')
        )

    col1, col2, col3 = st.columns(3)
    with col1:
        is_main_task = st.checkbox("Task utama", value=bool(item.get('is_main_task')))
    with col2:
        is_need_validation = st.checkbox("Perlu validasi", value=bool(item.get('is_need_validation')))
    with col3:
        is_scan = st.checkbox("Perlu scan", value=bool(item.get('is_scan')))

    scan_code = st.text_input("Scan Code", value=item.get('scan_code') or '')
    field_error(errors, 'scan_code')

    is_all_times = st.checkbox("Sepanjang waktu", value=bool(item.get('is_all_times')))
    days = st.multiselect(
        "Hari",
        options=list(DAY_LABELS.keys()),
        default=[d for d in item.get('days') or [] if d in DAY_LABELS],
        format_func=lambda value: DAY_LABELS[value]
    )
    field_error(errors, 'days')
    times = st.text_input("Jam (HH:mm, pisahkan dengan koma)", value=', '.join(_split_times(item.get('times'))))
    field_error(errors, 'times')

    return {
        'name': name,
        'asset_id': asset_id or '',
        'role_id': role_id or 0,
        'duration': duration,
        'task_group_id': task_group_id or None,
        'is_main_task': is_main_task,
        'is_need_validation': is_need_validation,
        'is_scan': is_scan,
        'scan_code': scan_code or None,
        'is_all_times': is_all_times,
        'parent_task_ids': item.get('parent_task_ids') or [],
        'days': days,
        'times': _split_times(times),
    }


PAGE = CrudPage(
    title="Task",
    icon="📝",
    base_path="/tasks",
    resource="tasks",
    schema=TaskForm,
    columns={
        'name': 'Nama',
        'asset.name': 'Asset',
        'role.name': 'Role',
        'duration': 'Durasi (menit)',
        'is_main_task': 'Utama',
        'is_scan': 'Scan',
    },
    render_fields=render_task_fields,
)

render_list = PAGE.render_list
render_create = PAGE.render_create
render_edit = PAGE.render_edit
