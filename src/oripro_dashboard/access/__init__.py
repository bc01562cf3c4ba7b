"""Route access control."""

from oripro_dashboard.access.gate import (
    ACCESS_DENIED_MESSAGE,
    DEFAULT_EXCLUDED_ROUTES,
    AccessDecision,
    AccessState,
    RouteAccessGate,
    is_excluded,
)

__all__ = [
    'RouteAccessGate',
    'AccessDecision',
    'AccessState',
    'DEFAULT_EXCLUDED_ROUTES',
    'ACCESS_DENIED_MESSAGE',
    'is_excluded',
]
