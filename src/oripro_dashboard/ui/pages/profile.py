"""
내 프로필 페이지
"""

import streamlit as st

from oripro_dashboard.ui.components import field_error, select_index
from oripro_dashboard.ui.pages.users import GENDER_LABELS
from oripro_dashboard.ui.session_state import AppContext

PROFILE_FORM_KEY = 'form_profile'


def render_profile_page(ctx: AppContext):
    """프로필 조회/수정"""
    st.title("👤 Profil Saya")

    user = ctx.session.user
    if not user:
        st.warning("Data pengguna tidak ditemukan.")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**Nama**: {user.display_name}")
        st.markdown(f"**Email**: {user.email}")
    with col2:
        st.markdown(f"**Role**: {user.role_name or '-'}")
        st.markdown(f"**Status**: {user.status or '-'}")

    st.markdown("---")
    st.subheader("Edit Profil")

    errors = st.session_state.form_errors.get(PROFILE_FORM_KEY, {})
    with st.form(PROFILE_FORM_KEY):
        name = st.text_input("Nama", value=user.name or '')
        field_error(errors, 'name')
        email = st.text_input("Email", value=user.email)
        field_error(errors, 'email')
        phone = st.text_input("Telepon", value=user.phone or '')
        gender_options = list(GENDER_LABELS.keys())
        gender = st.selectbox(
            "Jenis Kelamin",
            options=gender_options,
            index=select_index(gender_options, user.gender or ''),
            format_func=lambda value: GENDER_LABELS[value]
        )
        submitted = st.form_submit_button("💾 Simpan")

    if submitted:
        success, message, errors = ctx.auth_service.update_profile({
            'name': name or None,
            'email': email or None,
            'phone': phone or None,
            'gender': gender or None,
        })
        st.session_state.form_errors[PROFILE_FORM_KEY] = errors
        if success:
            ctx.notifier.success(message)
        else:
            ctx.notifier.error(message)
        st.rerun()
