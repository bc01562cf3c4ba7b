"""oripro-backend REST API access."""

from oripro_dashboard.api.client import ApiClient, unwrap_envelope
from oripro_dashboard.api.resources import (
    AssetsApi,
    AttendanceApi,
    AuthApi,
    BackendApi,
    ComplaintReportsApi,
    DashboardApi,
    MenusApi,
    ResourceApi,
    RolesApi,
    ScanInfoApi,
    TaskGroupsApi,
    TasksApi,
    TenantsApi,
    UnitsApi,
    UsersApi,
    UserTasksApi,
)
from oripro_dashboard.api.result import ApiResult, ErrorKind

__all__ = [
    # Client
    'ApiClient',
    'unwrap_envelope',
    # Result
    'ApiResult',
    'ErrorKind',
    # Resources
    'BackendApi',
    'ResourceApi',
    'AuthApi',
    'UsersApi',
    'RolesApi',
    'AssetsApi',
    'UnitsApi',
    'TenantsApi',
    'TasksApi',
    'TaskGroupsApi',
    'ScanInfoApi',
    'MenusApi',
    'ComplaintReportsApi',
    'AttendanceApi',
    'UserTasksApi',
    'DashboardApi',
]
