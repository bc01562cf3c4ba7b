"""
Test RouteAccessGate state machine.

The access check is a plain callable, so no backend or Streamlit is needed.
"""

import logging
from unittest.mock import Mock

import pytest
import requests

from oripro_dashboard.access import (
    ACCESS_DENIED_MESSAGE,
    AccessState,
    RouteAccessGate,
    is_excluded,
)
from oripro_dashboard.api import ApiResult, ErrorKind
from oripro_dashboard.auth import SessionContext, SessionUser


@pytest.fixture
def session():
    context = SessionContext({})
    context.sign_in('tok', SessionUser(id='1', email='admin@oripro.id', role_id='1'))
    return context


@pytest.fixture
def notify():
    return Mock()


def make_gate(session, notify, result=None, side_effect=None, fail_open=True):
    check_access = Mock(return_value=result, side_effect=side_effect)
    return RouteAccessGate(check_access, session, notify=notify, fail_open=fail_open), check_access


class TestExcludedRoutes:
    """확인 제외 경로"""

    @pytest.mark.parametrize('path', ['/auth', '/auth/login', '/welcome', '/view-profile', '/menus'])
    def test_excluded_paths_are_granted_without_request(self, session, notify, path):
        gate, check_access = make_gate(session, notify)

        decision = gate.evaluate(path)

        assert decision.state == AccessState.GRANTED
        assert decision.reason == 'excluded'
        check_access.assert_not_called()

    def test_prefix_must_end_at_segment(self):
        assert is_excluded('/auth/callback') is True
        assert is_excluded('/authors') is False
        assert is_excluded('/users/view-profile/3') is False


class TestDecisions:
    """백엔드 응답별 판정"""

    def test_has_access_true_is_granted(self, session, notify):
        gate, check_access = make_gate(session, notify, ApiResult.ok({'hasAccess': True}))

        decision = gate.evaluate('/asset')

        assert decision.has_access is True
        check_access.assert_called_once_with('/asset')
        notify.assert_not_called()

    def test_raw_path_is_sent(self, session, notify):
        gate, check_access = make_gate(session, notify, ApiResult.ok({'hasAccess': True}))

        gate.evaluate('/tenants/edit/7')

        check_access.assert_called_once_with('/tenants/edit/7')

    def test_has_access_false_is_denied_with_single_toast(self, session, notify):
        gate, check_access = make_gate(session, notify, ApiResult.ok({'hasAccess': False}))

        first = gate.evaluate('/roles')
        second = gate.evaluate('/roles')

        assert first.state == AccessState.DENIED
        assert second == first
        check_access.assert_called_once()
        notify.assert_called_once_with(ACCESS_DENIED_MESSAGE)

    def test_non_success_response_is_denied(self, session, notify):
        gate, _ = make_gate(session, notify, ApiResult.fail('Forbidden', kind=ErrorKind.FORBIDDEN, status_code=403))

        decision = gate.evaluate('/roles')

        assert decision.state == AccessState.DENIED
        notify.assert_called_once()

    def test_missing_has_access_is_denied(self, session, notify):
        gate, _ = make_gate(session, notify, ApiResult.ok({'hasAccess': 'yes'}))

        assert gate.evaluate('/roles').state == AccessState.DENIED

    def test_unauthorized_is_denied_without_toast(self, session, notify):
        gate, _ = make_gate(session, notify, ApiResult.fail('Token expired', kind=ErrorKind.UNAUTHORIZED, status_code=401))

        decision = gate.evaluate('/asset')

        assert decision.state == AccessState.DENIED
        assert decision.reason == 'unauthorized'
        notify.assert_not_called()


class TestTransportFailure:
    """통신 실패 정책"""

    def test_exception_fails_open_and_logs(self, session, notify, caplog):
        gate, _ = make_gate(session, notify, side_effect=requests.ConnectionError('refused'))

        with caplog.at_level(logging.WARNING, logger='RouteGuard'):
            decision = gate.evaluate('/asset')

        assert decision.state == AccessState.GRANTED
        assert decision.reason == 'fail-open'
        assert 'Access check failed for /asset' in caplog.text
        notify.assert_not_called()

    def test_network_result_fails_open(self, session, notify):
        gate, _ = make_gate(session, notify, ApiResult.fail('timeout', kind=ErrorKind.NETWORK))

        assert gate.evaluate('/asset').state == AccessState.GRANTED

    def test_fail_closed_when_configured(self, session, notify):
        gate, _ = make_gate(session, notify, ApiResult.fail('timeout', kind=ErrorKind.NETWORK), fail_open=False)

        decision = gate.evaluate('/asset')

        assert decision.state == AccessState.DENIED
        assert decision.reason == 'fail-closed'
        notify.assert_called_once_with(ACCESS_DENIED_MESSAGE)


class TestNavigation:
    """경로 변경과 판정 수명"""

    def test_initial_state_is_checking(self, session, notify):
        gate, _ = make_gate(session, notify)

        assert gate.current_decision('/asset').state == AccessState.CHECKING

    def test_path_change_triggers_new_check(self, session, notify):
        gate, check_access = make_gate(session, notify, ApiResult.ok({'hasAccess': True}))

        gate.evaluate('/asset')
        assert gate.current_decision('/unit').state == AccessState.CHECKING
        gate.evaluate('/unit')
        gate.evaluate('/asset')

        assert [call.args[0] for call in check_access.call_args_list] == ['/asset', '/unit', '/asset']

    def test_stale_decision_is_discarded_after_invalidation(self, session, notify):
        def check_and_logout(path):
            session.invalidate()
            return ApiResult.ok({'hasAccess': False})

        gate = RouteAccessGate(check_and_logout, session, notify=notify)

        decision = gate.evaluate('/asset')

        assert decision.state == AccessState.DENIED
        assert gate.current_decision('/asset').state == AccessState.CHECKING
        notify.assert_not_called()

    def test_reset_forces_recheck(self, session, notify):
        gate, check_access = make_gate(session, notify, ApiResult.ok({'hasAccess': True}))
        gate.evaluate('/asset')

        gate.reset()
        gate.evaluate('/asset')

        assert check_access.call_count == 2
