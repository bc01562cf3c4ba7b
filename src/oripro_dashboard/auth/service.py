"""
인증 서비스

로그인, 로그아웃, 로그인 제공자 목록, 프로필 수정을 담당합니다.
"""

from typing import List, Tuple

from oripro_dashboard.api import BackendApi
from oripro_dashboard.auth.models import AuthProvider, LoginResult, SessionUser
from oripro_dashboard.auth.session import SessionContext
from oripro_dashboard.config import Config
from oripro_dashboard.forms import LoginForm, ProfileForm, validate_form
from oripro_dashboard.log.logger import setup_logger


class AuthService:
    """
    인증 서비스

    세션 상태 변경은 모두 SessionContext를 통해서만 수행합니다.
    """

    def __init__(self, config: Config, api: BackendApi, session: SessionContext):
        """
        Args:
            config: 애플리케이션 설정
            api: 백엔드 API
            session: 세션 컨텍스트
        """
        self.logger = setup_logger('AuthService')
        self.config = config
        self.api = api
        self.session = session

    def authenticate(self, email: str, password: str) -> LoginResult:
        """
        자격 증명 로그인

        Args:
            email: 이메일
            password: 평문 비밀번호

        Returns:
            LoginResult (성공 시 세션에 토큰과 사용자 저장)
        """
        form, errors = validate_form(LoginForm, {'email': email, 'password': password})
        if not form:
            return LoginResult(False, "Email dan password wajib diisi dengan benar.", errors=errors)

        result = self.api.auth.login(form.email, form.password)
        if not result.success:
            self.logger.warning(f"Failed login attempt: {form.email}")
            return LoginResult(False, result.error or "Login gagal")

        data = result.data if isinstance(result.data, dict) else {}
        token = data.get('token')
        user_data = data.get('user')
        if not token or not isinstance(user_data, dict):
            self.logger.error(f"Login response missing token or user for {form.email}")
            return LoginResult(False, "Respons login tidak valid")

        try:
            user = SessionUser.from_dict(user_data)
        except KeyError as e:
            self.logger.error(f"Login response user is missing field {e}")
            return LoginResult(False, "Respons login tidak valid")

        self.session.sign_in(token, user)
        self.logger.info(f"User logged in: {user.email}")
        return LoginResult(True, "Login berhasil", user=user)

    def logout(self):
        """로그아웃 (세션 무효화)"""
        user = self.session.user
        self.session.invalidate()
        self.logger.info(f"User logged out: {user.email if user else 'Unknown'}")

    def available_providers(self) -> List[AuthProvider]:
        """
        로그인 제공자 목록

        자격 증명 로그인은 항상 제공되고,
        OAuth 제공자는 client id와 secret이 모두 설정된 경우에만 포함됩니다.
        """
        providers = [AuthProvider(id='credentials', name='Credentials', type='credentials')]

        if self.config.google_enabled:
            providers.append(AuthProvider(
                id='google',
                name='Google',
                type='oauth',
                signin_url=self.config.api_url('/api/auth/signin/google'),
                callback_url=self.config.api_url('/api/auth/callback/google')
            ))

        if self.config.github_enabled:
            providers.append(AuthProvider(
                id='github',
                name='GitHub',
                type='oauth',
                signin_url=self.config.api_url('/api/auth/signin/github'),
                callback_url=self.config.api_url('/api/auth/callback/github')
            ))

        return providers

    def update_profile(self, updates: dict) -> Tuple[bool, str, dict]:
        """
        내 프로필 수정

        성공하면 세션의 프로필 스냅샷에 변경 사항을 바로 반영합니다.

        Args:
            updates: name, email, phone, gender 중 변경할 값

        Returns:
            (성공 여부, 메시지, 필드별 오류)
        """
        user = self.session.user
        if not user:
            return False, "User ID tidak ditemukan", {}

        form, errors = validate_form(ProfileForm, updates)
        if not form:
            return False, "Data profil tidak valid", errors

        payload = form.to_payload()
        result = self.api.users.update(user.id, payload)
        if not result.success:
            self.logger.warning(f"Profile update failed for {user.email}: {result.error}")
            return False, result.error or "Gagal memperbarui profile", {}

        self.session.update_user(user.with_updates(payload))
        self.logger.info(f"Profile updated for {user.email}")
        return True, "Profile berhasil diperbarui", {}
