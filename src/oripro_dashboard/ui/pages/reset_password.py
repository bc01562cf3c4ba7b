"""
비밀번호 재설정 / 생성 페이지

메일 링크의 `token`, `uid` 쿼리 파라미터로 새 비밀번호를 설정합니다.
초대 메일의 비밀번호 생성 링크도 같은 처리를 사용합니다.
"""

from typing import Optional

import streamlit as st

from oripro_dashboard.forms import FORM_ERROR_KEY, ResetPasswordForm, validate_form
from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components import field_error
from oripro_dashboard.ui.session_state import LOGIN_PATH, AppContext, navigate_to

logger = setup_logger('ResetPasswordPage')

RESET_FORM_KEY = 'form_reset_password'
CREATE_PASSWORD_PATH = '/auth/create-password'
RESET_PASSWORD_PATH = '/auth/reset-password'


def read_reset_link() -> Optional[tuple]:
    """
    현재 URL의 (uid, token)

    Returns:
        둘 다 있으면 (uid, token), 아니면 None
    """
    uid = st.query_params.get('uid')
    token = st.query_params.get('token')
    if not uid or not token:
        return None
    return uid, token


def render_reset_password_page(ctx: AppContext, create: bool = False):
    """
    비밀번호 재설정 페이지 렌더링

    Args:
        ctx: 서비스 묶음
        create: 최초 비밀번호 생성 화면 여부
    """
    st.title("🔑 Buat Password" if create else "🔑 Reset Password")

    link = read_reset_link()
    if link is None:
        st.error("❌ Link reset password tidak valid atau sudah kedaluwarsa.")
        st.caption("Minta link baru melalui menu 'Lupa password?' di halaman login.")
        if st.button("← Kembali ke login", key='reset_back_to_login'):
            navigate_to(LOGIN_PATH)
        return

    errors = st.session_state.form_errors.get(RESET_FORM_KEY, {})
    if FORM_ERROR_KEY in errors:
        st.error(errors[FORM_ERROR_KEY])

    with st.form(RESET_FORM_KEY):
        password = st.text_input("Password baru", type="password")
        field_error(errors, 'password')
        confirm_password = st.text_input("Konfirmasi password", type="password")
        field_error(errors, 'confirm_password')
        submitted = st.form_submit_button("Simpan password")

    if submitted:
        uid, token = link
        if submit_new_password(ctx, uid, token, {'password': password, 'confirm_password': confirm_password}):
            navigate_to(LOGIN_PATH)
        else:
            st.rerun()


def render_create_password_page(ctx: AppContext):
    """비밀번호 생성 페이지 렌더링"""
    render_reset_password_page(ctx, create=True)


def submit_new_password(ctx: AppContext, uid: str, token: str, values: dict) -> bool:
    """
    새 비밀번호 검증 후 전송

    Returns:
        성공 여부 (실패 시 필드 오류는 form_errors에 저장)
    """
    form, errors = validate_form(ResetPasswordForm, values)
    st.session_state.form_errors[RESET_FORM_KEY] = errors
    if errors:
        return False

    result = ctx.api.auth.reset_password(uid, token, form.password)
    if not result.success:
        st.session_state.form_errors[RESET_FORM_KEY] = {
            FORM_ERROR_KEY: result.error or "Gagal mereset password"
        }
        return False

    logger.info(f"Password reset for user {uid}")
    ctx.notifier.success("Password berhasil direset. Silakan login.")
    return True
