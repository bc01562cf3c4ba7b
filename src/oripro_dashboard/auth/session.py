"""
세션 컨텍스트

인증 토큰, 사용자 스냅샷, 메뉴 트리 상태, 접근 판정을 소유하는 단일 객체입니다.
Streamlit 앱에서는 st.session_state를, 테스트에서는 일반 dict를 저장소로 사용합니다.
"""

from typing import Any, MutableMapping, Optional

from oripro_dashboard.auth.models import SessionUser
from oripro_dashboard.log.logger import setup_logger

logger = setup_logger('SessionContext')

TOKEN_KEY = 'auth_token'
USER_KEY = 'user'
MENU_STATE_KEY = 'menu_state'
ACCESS_DECISION_KEY = 'access_decision'
REDIRECT_KEY = 'redirect_after_login'

# 로그아웃 시 삭제되는 키
_SESSION_KEYS = (TOKEN_KEY, USER_KEY, MENU_STATE_KEY, ACCESS_DECISION_KEY)


class SessionContext:
    """
    세션 상태의 단일 소유자

    다른 컴포넌트는 저장소를 직접 읽지 않고 이 객체를 주입받아 사용합니다.
    """

    def __init__(self, store: MutableMapping[str, Any]):
        """
        Args:
            store: 세션 저장소 (st.session_state 또는 dict)
        """
        self.store = store

    @property
    def token(self) -> Optional[str]:
        return self.store.get(TOKEN_KEY)

    @property
    def user(self) -> Optional[SessionUser]:
        return self.store.get(USER_KEY)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and self.user is not None

    def sign_in(self, token: str, user: SessionUser):
        """
        로그인 처리

        이전 사용자의 메뉴 트리와 접근 판정은 버립니다.
        """
        self.invalidate()
        self.store[TOKEN_KEY] = token
        self.store[USER_KEY] = user
        logger.info(f"Session started for {user.email}")

    def update_user(self, user: SessionUser):
        """프로필 스냅샷 교체"""
        self.store[USER_KEY] = user

    def invalidate(self):
        """
        세션 무효화

        토큰, 사용자 스냅샷, 메뉴 트리, 접근 판정을 모두 삭제합니다.
        로그인 후 돌아갈 경로는 유지합니다.
        """
        had_session = self.store.get(TOKEN_KEY) is not None
        for key in _SESSION_KEYS:
            if key in self.store:
                del self.store[key]
        if had_session:
            logger.info("Session invalidated")

    def get(self, key: str, default: Any = None) -> Any:
        return self.store.get(key, default)

    def set(self, key: str, value: Any):
        self.store[key] = value

    def pop(self, key: str, default: Any = None) -> Any:
        if key in self.store:
            value = self.store[key]
            del self.store[key]
            return value
        return default

    def remember_redirect(self, path: str):
        """로그인 후 이동할 경로 저장"""
        self.store[REDIRECT_KEY] = path

    def take_redirect(self, default: str) -> str:
        """저장된 경로를 꺼내고 삭제"""
        return self.pop(REDIRECT_KEY) or default
