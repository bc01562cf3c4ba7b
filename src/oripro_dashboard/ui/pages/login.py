"""
로그인 페이지

사용자 인증을 처리하는 Streamlit 페이지입니다.
"""

import streamlit as st

from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components import field_error
from oripro_dashboard.ui.session_state import HOME_PATH, AppContext, navigate_to

# Logger 설정
logger = setup_logger('LoginPage')

LOGIN_FORM_KEY = 'form_login'


def render_login_page(ctx: AppContext):
    """로그인 페이지 렌더링"""
    st.title("🔐 Login")
    st.caption("Masuk ke Oripro Dashboard")

    errors = st.session_state.form_errors.get(LOGIN_FORM_KEY, {})

    # 로그인 폼
    with st.form(LOGIN_FORM_KEY):
        email = st.text_input("Email", placeholder="nama@perusahaan.com")
        field_error(errors, 'email')
        password = st.text_input("Password", type="password", placeholder="••••••••")
        field_error(errors, 'password')

        col1, col2 = st.columns([1, 3])
        with col1:
            submit = st.form_submit_button("Masuk", use_container_width=True)

    if submit:
        handle_login(ctx, email, password)

    render_oauth_providers(ctx)
    render_forgot_password(ctx)


def handle_login(ctx: AppContext, email: str, password: str):
    """
    로그인 처리

    Args:
        ctx: 서비스 묶음
        email: 이메일
        password: 비밀번호
    """
    result = ctx.auth_service.authenticate(email, password)
    st.session_state.form_errors[LOGIN_FORM_KEY] = result.errors

    if result.success:
        target = ctx.session.take_redirect(HOME_PATH)
        logger.info(f"Redirecting to {target} after login")
        ctx.notifier.success(result.message)
        navigate_to(target)
    else:
        st.error(f"❌ {result.message}")


def render_oauth_providers(ctx: AppContext):
    """설정된 OAuth 제공자 로그인 버튼"""
    providers = [provider for provider in ctx.auth_service.available_providers() if provider.is_oauth]
    if not providers:
        return

    st.markdown("---")
    st.caption("Atau masuk dengan")
    columns = st.columns(len(providers))
    for column, provider in zip(columns, providers):
        with column:
            st.link_button(provider.name, provider.signin_url, use_container_width=True)


def render_forgot_password(ctx: AppContext):
    """비밀번호 재설정 메일 요청"""
    with st.expander("Lupa password?"):
        email = st.text_input("Email akun", key='forgot_password_email')
        if st.button("Kirim link reset", key='forgot_password_submit'):
            if not email:
                st.warning("Masukkan email terlebih dahulu.")
                return
            result = ctx.api.auth.forgot_password(email)
            if result.success:
                st.success("Link reset password telah dikirim ke email Anda.")
            else:
                st.error(f"❌ {result.error}")
