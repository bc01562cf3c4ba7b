"""
Session state management module for Streamlit app.

This module initializes Streamlit session state variables and builds the
per-session service graph (API client, auth service, menu store, access gate).
"""

from dataclasses import dataclass
from typing import Optional

import requests
import streamlit as st

from oripro_dashboard.access import RouteAccessGate
from oripro_dashboard.api import ApiClient, BackendApi
from oripro_dashboard.auth import AuthService, SessionContext
from oripro_dashboard.config import Config, load_config
from oripro_dashboard.menu import Capabilities, MenuTreeStore, resolve_capabilities
from oripro_dashboard.ui.notifications import Notifier

HOME_PATH = '/welcome'
LOGIN_PATH = '/auth/login'

# 새로고침 후에도 현재 경로를 유지하기 위한 쿼리 파라미터
PAGE_QUERY_PARAM = 'page'

HTTP_SESSION_KEY = 'http_session'


def normalize_path(path: Optional[str]) -> str:
    """
    경로 정규화

    빈 경로와 '/'는 HOME_PATH로 보내고, 끝의 '/'는 제거합니다.
    """
    if not path:
        return HOME_PATH
    path = '/' + path.strip().strip('/')
    return HOME_PATH if path == '/' else path


def initialize_session_state():
    """
    Initialize all session state variables with default values.

    This function should be called at the start of the Streamlit app
    to ensure all required session state variables exist.
    """
    defaults = {
        # Navigation state
        'current_page': normalize_path(st.query_params.get(PAGE_QUERY_PARAM)),
        'menu_expanded': {},
        # Page local state
        'form_errors': {},
        'pending_delete': None,
    }

    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def get_current_page() -> str:
    return st.session_state.get('current_page', HOME_PATH)


def navigate_to(path: str, rerun: bool = True):
    """
    페이지 이동

    Args:
        path: 이동할 경로
        rerun: 즉시 다시 실행할지 여부
    """
    path = normalize_path(path)
    st.session_state.current_page = path
    st.session_state.form_errors = {}
    st.session_state.pending_delete = None
    st.query_params[PAGE_QUERY_PARAM] = path
    if rerun:
        st.rerun()


@dataclass
class AppContext:
    """
    한 번의 실행(rerun)에서 페이지가 사용하는 서비스 묶음

    Attributes:
        config: 애플리케이션 설정
        session: 세션 컨텍스트
        api: 백엔드 API
        auth_service: 인증 서비스
        menu_store: 메뉴 트리 저장소
        notifier: 토스트 알림
        gate: 라우트 접근 게이트
    """
    config: Config
    session: SessionContext
    api: BackendApi
    auth_service: AuthService
    menu_store: MenuTreeStore
    notifier: Notifier
    gate: RouteAccessGate

    @property
    def current_page(self) -> str:
        return get_current_page()

    def capabilities(self, path: Optional[str] = None) -> Capabilities:
        """현재 (또는 지정한) 경로의 작업 권한"""
        return resolve_capabilities(self.menu_store.tree, path or self.current_page)


@st.cache_resource
def get_config() -> Config:
    return load_config()


def build_app_context(config: Config, store, http_session: Optional[requests.Session] = None) -> AppContext:
    """
    서비스 묶음 생성

    Args:
        config: 애플리케이션 설정
        store: 세션 저장소 (st.session_state 또는 dict)
        http_session: requests 세션

    Returns:
        AppContext
    """
    session = SessionContext(store)
    client = ApiClient(
        config,
        token_provider=lambda: session.token,
        on_unauthorized=session.invalidate,
        session=http_session
    )
    api = BackendApi(client)
    notifier = Notifier(store)
    gate = RouteAccessGate(
        api.users.check_menu_access,
        session,
        notify=notifier.error,
        fail_open=config.access_check_fail_open
    )

    return AppContext(
        config=config,
        session=session,
        api=api,
        auth_service=AuthService(config, api, session),
        menu_store=MenuTreeStore(config, api.users, session),
        notifier=notifier,
        gate=gate
    )


def get_app_context() -> AppContext:
    """현재 Streamlit 세션의 서비스 묶음"""
    if HTTP_SESSION_KEY not in st.session_state:
        st.session_state[HTTP_SESSION_KEY] = requests.Session()
    return build_app_context(get_config(), st.session_state, st.session_state[HTTP_SESSION_KEY])
