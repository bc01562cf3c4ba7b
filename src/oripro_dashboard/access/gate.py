"""
라우트 접근 게이트

경로가 바뀔 때마다 백엔드에 접근 가능 여부를 확인하고
CHECKING -> GRANTED | DENIED 상태를 결정합니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from oripro_dashboard.api import ApiResult
from oripro_dashboard.auth.session import ACCESS_DECISION_KEY, SessionContext
from oripro_dashboard.log.logger import setup_logger

logger = setup_logger('RouteGuard')

# 접근 확인 없이 항상 허용되는 경로 (정확히 일치하거나 하위 경로)
DEFAULT_EXCLUDED_ROUTES = ('/auth', '/welcome', '/view-profile', '/menus')

ACCESS_DENIED_MESSAGE = "Anda tidak memiliki akses ke halaman ini"


class AccessState(Enum):
    """접근 판정 상태"""
    CHECKING = "checking"
    GRANTED = "granted"
    DENIED = "denied"


@dataclass(frozen=True)
class AccessDecision:
    """
    하나의 경로에 대한 접근 판정

    Attributes:
        path: 판정 대상 경로
        state: 판정 상태
        reason: 판정 근거 (로그/테스트용)
    """
    path: str
    state: AccessState
    reason: str = ""

    @property
    def has_access(self) -> bool:
        return self.state == AccessState.GRANTED

    @property
    def is_settled(self) -> bool:
        return self.state != AccessState.CHECKING


def is_excluded(path: str, excluded_routes: Iterable[str] = DEFAULT_EXCLUDED_ROUTES) -> bool:
    """
    접근 확인 제외 경로 여부

    '/auth'는 '/auth', '/auth/login'과 일치하지만 '/authors'와는 일치하지 않습니다.
    """
    return any(path == route or path.startswith(route + '/') for route in excluded_routes)


class RouteAccessGate:
    """
    경로별 접근 판정기

    판정은 세션 컨텍스트에 경로와 함께 보관됩니다. 같은 경로로 rerun되면 저장된 판정을
    재사용하고, 경로가 바뀌면 새로 확인합니다.
    """

    def __init__(
        self,
        check_access: Callable[[str], ApiResult],
        session: SessionContext,
        notify: Optional[Callable[[str], None]] = None,
        fail_open: bool = True,
        excluded_routes: Iterable[str] = DEFAULT_EXCLUDED_ROUTES
    ):
        """
        Args:
            check_access: 경로를 받아 ApiResult를 반환하는 접근 확인 함수
            session: 세션 컨텍스트
            notify: 거부 알림 함수 (오류 토스트)
            fail_open: 통신 실패 시 허용 여부
            excluded_routes: 확인을 건너뛰는 경로
        """
        self.check_access = check_access
        self.session = session
        self.notify = notify
        self.fail_open = fail_open
        self.excluded_routes = tuple(excluded_routes)

    def current_decision(self, path: str) -> AccessDecision:
        """
        현재 경로의 저장된 판정

        다른 경로의 판정이 저장되어 있거나 판정이 없으면 CHECKING입니다.
        """
        stored = self.session.get(ACCESS_DECISION_KEY)
        if isinstance(stored, AccessDecision) and stored.path == path:
            return stored
        return AccessDecision(path, AccessState.CHECKING)

    def evaluate(self, path: str) -> AccessDecision:
        """
        경로 접근 판정

        같은 경로에 대해 이미 확정된 판정이 있으면 요청 없이 그대로 반환합니다.
        거부 알림은 새로 거부된 경우에만 한 번 보냅니다.

        Args:
            path: 현재 경로

        Returns:
            확정된 AccessDecision
        """
        current = self.current_decision(path)
        if current.is_settled:
            return current

        self.session.set(ACCESS_DECISION_KEY, current)
        decision = self._decide(path)

        # 확인 중 세션이 무효화되었거나 다른 경로로 바뀌었으면 저장하지 않음
        pending = self.session.get(ACCESS_DECISION_KEY)
        if not isinstance(pending, AccessDecision) or pending.path != path:
            logger.info(f"Discarding stale access decision for {path}")
            return decision

        self.session.set(ACCESS_DECISION_KEY, decision)

        if decision.state == AccessState.DENIED and decision.reason != 'unauthorized' and self.notify:
            self.notify(ACCESS_DENIED_MESSAGE)

        return decision

    def reset(self):
        """저장된 판정 삭제"""
        self.session.pop(ACCESS_DECISION_KEY)

    def _transport_failure(self, path: str) -> AccessDecision:
        if self.fail_open:
            return AccessDecision(path, AccessState.GRANTED, 'fail-open')
        return AccessDecision(path, AccessState.DENIED, 'fail-closed')

    def _decide(self, path: str) -> AccessDecision:
        if is_excluded(path, self.excluded_routes):
            return AccessDecision(path, AccessState.GRANTED, 'excluded')

        try:
            result = self.check_access(path)
        except Exception as e:
            logger.warning(f"Access check failed for {path}: {e}", exc_info=True)
            return self._transport_failure(path)

        if result.is_network_error:
            logger.warning(f"Access check failed for {path}: {result.error}")
            return self._transport_failure(path)

        if result.is_unauthorized:
            logger.info(f"Access check for {path} rejected the session token")
            return AccessDecision(path, AccessState.DENIED, 'unauthorized')

        if result.success and isinstance(result.data, dict) and result.data.get('hasAccess') is True:
            logger.debug(f"Access granted for {path}")
            return AccessDecision(path, AccessState.GRANTED, 'allowed')

        logger.info(f"Access denied for {path}: {result.error or 'hasAccess is false'}")
        return AccessDecision(path, AccessState.DENIED, 'denied')
