"""Authentication and session module for Oripro Dashboard."""

from oripro_dashboard.auth.models import AuthProvider, LoginResult, SessionUser
from oripro_dashboard.auth.service import AuthService
from oripro_dashboard.auth.session import SessionContext

__all__ = [
    # Models
    'SessionUser',
    'AuthProvider',
    'LoginResult',
    # Session
    'SessionContext',
    # Service
    'AuthService',
]
