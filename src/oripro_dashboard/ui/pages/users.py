"""
사용자 관리 페이지

사용자 계정을 생성, 수정, 삭제하고 프로필을 조회하는 페이지입니다.
"""

import streamlit as st

from oripro_dashboard.forms import UserForm
from oripro_dashboard.ui.components import CrudPage, field_error, load_options, select_index

GENDER_LABELS = {'': '-', 'male': 'Laki-laki', 'female': 'Perempuan'}
STATUS_LABELS = {'active': 'Aktif', 'inactive': 'Tidak Aktif'}


def render_user_fields(ctx, item: dict, errors: dict) -> dict:
    """사용자 폼 필드 (수정 시 비밀번호를 비우면 기존 비밀번호 유지)"""
    roles = load_options(ctx.api.roles)
    role_ids = list(roles.keys())
    current_role = item.get('role_id') or (item.get('role') or {}).get('id')

    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Nama *", value=item.get('name') or '')
        field_error(errors, 'name')
    with col2:
        email = st.text_input("Email *", value=item.get('email') or '')
        field_error(errors, 'email')

    password_label = "Password (kosongkan jika tidak diubah)" if item else "Password *"
    password = st.text_input(password_label, type="password")
    field_error(errors, 'password')

    col1, col2 = st.columns(2)
    with col1:
        phone = st.text_input("Telepon", value=item.get('phone') or '')
    with col2:
        gender_options = list(GENDER_LABELS.keys())
        gender = st.selectbox(
            "Jenis Kelamin",
            options=gender_options,
            index=select_index(gender_options, item.get('gender') or ''),
            format_func=lambda value: GENDER_LABELS[value]
        )

    col1, col2 = st.columns(2)
    with col1:
        role_id = st.selectbox(
            "Role",
            options=role_ids,
            index=select_index(role_ids, str(current_role or '')),
            format_func=lambda value: roles.get(value, value)
        )
    with col2:
        status_options = list(STATUS_LABELS.keys())
        status = st.selectbox(
            "Status",
            options=status_options,
            index=select_index(status_options, item.get('status')),
            format_func=lambda value: STATUS_LABELS[value]
        )

    return {
        'name': name,
        'email': email,
        'password': password or None,
        'phone': phone or None,
        'gender': gender or None,
        'roleId': role_id,
        'status': status,
    }


def validate_new_user(values: dict) -> dict:
    """생성 시 비밀번호 필수"""
    if not values.get('password'):
        return {'password': 'Password wajib diisi'}
    return {}


PAGE = CrudPage(
    title="User",
    icon="👥",
    base_path="/users",
    resource="users",
    schema=UserForm,
    columns={
        'name': 'Nama',
        'email': 'Email',
        'phone': 'Telepon',
        'role.name': 'Role',
        'status': 'Status',
    },
    detail_fields={
        'name': 'Nama',
        'email': 'Email',
        'phone': 'Telepon',
        'gender': 'Jenis Kelamin',
        'role.name': 'Role',
        'status': 'Status',
    },
    render_fields=render_user_fields,
    create_validator=validate_new_user,
    extra_actions={"👤 Profil": "/view-profile/{id}"},
    extra_action_capability='can_view',
)

render_list = PAGE.render_list
render_create = PAGE.render_create
render_edit = PAGE.render_edit
render_view = PAGE.render_view
