"""
Test AuthService with a mocked BackendApi.
"""

from unittest.mock import Mock

import pytest

from oripro_dashboard.api import ApiResult, ErrorKind
from oripro_dashboard.auth import AuthService, SessionContext, SessionUser
from oripro_dashboard.config import Config


@pytest.fixture
def api():
    return Mock()


@pytest.fixture
def session():
    return SessionContext({})


@pytest.fixture
def auth_service(api, session):
    return AuthService(Config(), api, session)


class TestAuthenticate:
    """자격 증명 로그인"""

    def test_login_success_stores_session(self, auth_service, api, session):
        api.auth.login.return_value = ApiResult.ok({
            'token': 'jwt-token',
            'user': {'id': 1, 'email': 'admin@oripro.id', 'name': 'Admin', 'role_id': 1}
        })

        result = auth_service.authenticate('admin@oripro.id', 'secret')

        assert result.success is True
        assert session.token == 'jwt-token'
        assert session.user.role_id == '1'
        api.auth.login.assert_called_once_with('admin@oripro.id', 'secret')

    def test_invalid_email_is_rejected_before_request(self, auth_service, api):
        result = auth_service.authenticate('not-an-email', 'secret')

        assert result.success is False
        assert 'email' in result.errors
        api.auth.login.assert_not_called()

    def test_backend_rejection(self, auth_service, api, session):
        api.auth.login.return_value = ApiResult.fail('Invalid credentials', kind=ErrorKind.VALIDATION)

        result = auth_service.authenticate('admin@oripro.id', 'wrong')

        assert result.success is False
        assert result.message == 'Invalid credentials'
        assert session.is_authenticated is False

    def test_response_without_token(self, auth_service, api, session):
        api.auth.login.return_value = ApiResult.ok({'user': {'id': 1, 'email': 'a@oripro.id'}})

        result = auth_service.authenticate('a@oripro.id', 'secret')

        assert result.success is False
        assert session.is_authenticated is False


class TestProviders:
    """로그인 제공자 목록"""

    def test_credentials_only_by_default(self, api, session):
        service = AuthService(Config(), api, session)

        providers = service.available_providers()

        assert [p.id for p in providers] == ['credentials']

    def test_oauth_providers_when_configured(self, api, session):
        config = Config(
            api_base_url='https://api.oripro.id',
            google_client_id='gid', google_client_secret='gsecret',
            github_client_id='only-id'
        )
        service = AuthService(config, api, session)

        providers = service.available_providers()

        assert [p.id for p in providers] == ['credentials', 'google']
        assert providers[1].signin_url == 'https://api.oripro.id/api/auth/signin/google'


class TestProfile:
    """내 프로필 수정"""

    def test_update_profile_merges_snapshot(self, auth_service, api, session):
        session.sign_in('tok', SessionUser(id='1', email='old@oripro.id', name='Old', role_id='2'))
        api.users.update.return_value = ApiResult.ok({'id': '1'})

        success, _, errors = auth_service.update_profile({'name': 'New', 'email': 'new@oripro.id'})

        assert success is True
        assert errors == {}
        api.users.update.assert_called_once_with('1', {'name': 'New', 'email': 'new@oripro.id'})
        assert session.user.name == 'New'
        assert session.user.email == 'new@oripro.id'
        assert session.user.role_id == '2'

    def test_failed_update_keeps_snapshot(self, auth_service, api, session):
        session.sign_in('tok', SessionUser(id='1', email='old@oripro.id', name='Old'))
        api.users.update.return_value = ApiResult.fail('Email already used', kind=ErrorKind.VALIDATION)

        success, message, _ = auth_service.update_profile({'email': 'taken@oripro.id'})

        assert success is False
        assert message == 'Email already used'
        assert session.user.email == 'old@oripro.id'

    def test_invalid_email_returns_field_error(self, auth_service, api, session):
        session.sign_in('tok', SessionUser(id='1', email='old@oripro.id'))

        success, _, errors = auth_service.update_profile({'email': 'broken'})

        assert success is False
        assert 'email' in errors
        api.users.update.assert_not_called()

    def test_logout_invalidates_session(self, auth_service, session):
        session.sign_in('tok', SessionUser(id='1', email='a@oripro.id'))

        auth_service.logout()

        assert session.is_authenticated is False
