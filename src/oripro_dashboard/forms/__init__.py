"""Form schemas and validation helpers."""

from oripro_dashboard.forms.schemas import (
    ASSET_TYPE_LABELS,
    COMPLAINT_PRIORITY_LABELS,
    COMPLAINT_STATUS_LABELS,
    DURATION_UNIT_LABELS,
    AssetForm,
    ComplaintReportForm,
    CompleteTaskForm,
    LoginForm,
    MenuForm,
    ProfileForm,
    ResetPasswordForm,
    RoleForm,
    ScanInfoForm,
    TaskForm,
    TaskGroupForm,
    TenantForm,
    TenantPaymentForm,
    UnitForm,
    UserForm,
)
from oripro_dashboard.forms.validation import FORM_ERROR_KEY, errors_by_field, validate_form

__all__ = [
    # Schemas
    'LoginForm',
    'ResetPasswordForm',
    'AssetForm',
    'UnitForm',
    'TenantForm',
    'TenantPaymentForm',
    'TaskForm',
    'TaskGroupForm',
    'UserForm',
    'ProfileForm',
    'RoleForm',
    'ScanInfoForm',
    'ComplaintReportForm',
    'MenuForm',
    'CompleteTaskForm',
    # Labels
    'ASSET_TYPE_LABELS',
    'DURATION_UNIT_LABELS',
    'COMPLAINT_STATUS_LABELS',
    'COMPLAINT_PRIORITY_LABELS',
    # Validation
    'validate_form',
    'errors_by_field',
    'FORM_ERROR_KEY',
]
