"""
Task Group 관리 페이지
"""

import streamlit as st

from oripro_dashboard.forms import TaskGroupForm
from oripro_dashboard.ui.components import CrudPage, field_error


def render_task_group_fields(ctx, item: dict, errors: dict) -> dict:
    name = st.text_input("Nama Group *", value=item.get('name') or '')
    field_error(errors, 'name')

    description = st.text_area("Deskripsi", value=item.get('description') or '')

    col1, col2 = st.columns(2)
    with col1:
        start_time = st.text_input("Jam Mulai *", value=item.get('start_time') or '', placeholder="06:00")
        field_error(errors, 'start_time')
    with col2:
        end_time = st.text_input("Jam Selesai *", value=item.get('end_time') or '', placeholder="14:00")
        field_error(errors, 'end_time')

    is_active = st.checkbox("Aktif", value=item.get('is_active', True))

    return {
        'name': name,
        'description': description or None,
        'start_time': start_time,
        'end_time': end_time,
        'is_active': is_active,
    }


PAGE = CrudPage(
    title="Task Group",
    icon="🗂️",
    base_path="/task-groups",
    resource="task_groups",
    schema=TaskGroupForm,
    columns={
        'name': 'Nama',
        'start_time': 'Mulai',
        'end_time': 'Selesai',
        'is_active': 'Aktif',
    },
    render_fields=render_task_group_fields,
)

render_list = PAGE.render_list
render_create = PAGE.render_create
render_edit = PAGE.render_edit
