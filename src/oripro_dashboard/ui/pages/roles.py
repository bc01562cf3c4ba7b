"""
Role 관리 페이지
"""

import streamlit as st

from oripro_dashboard.forms import RoleForm
from oripro_dashboard.ui.components import CrudPage, field_error


def render_role_fields(ctx, item: dict, errors: dict) -> dict:
    name = st.text_input("Nama Role *", value=item.get('name') or '')
    field_error(errors, 'name')

    level = st.number_input("Level *", min_value=0, max_value=999, value=int(item.get('level') or 1))
    field_error(errors, 'level')

    return {'name': name, 'level': level}


PAGE = CrudPage(
    title="Role",
    icon="🛡️",
    base_path="/roles",
    resource="roles",
    schema=RoleForm,
    columns={
        'name': 'Nama',
        'level': 'Level',
    },
    render_fields=render_role_fields,
)

render_list = PAGE.render_list
render_create = PAGE.render_create
render_edit = PAGE.render_edit
