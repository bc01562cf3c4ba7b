"""
폼 스키마

각 CRUD 화면의 입력 검증 규칙입니다. 오류 메시지는 화면에 그대로 표시됩니다.
"""

import re
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

TIME_PATTERN = re.compile(r'^([0-1][0-9]|2[0-3]):[0-5][0-9]$')

# 자산 유형
ASSET_TYPE_LABELS = {
    1: 'Estate',
    2: 'Office',
    3: 'Warehouse',
    4: 'Sport',
    5: 'Entertainment/Restaurant',
    6: 'Residence',
    7: 'Mall',
    8: 'Support Facility/Mosque',
    9: 'Parking Lot',
}

# 임대 기간 단위
DURATION_UNIT_LABELS = {
    'year': 'Tahun',
    'month': 'Bulan',
}

COMPLAINT_STATUS_LABELS = {
    0: 'Pending',
    1: 'In Progress',
    2: 'Resolved',
    3: 'Closed',
}

COMPLAINT_PRIORITY_LABELS = {
    0: 'Low',
    1: 'Medium',
    2: 'High',
    3: 'Critical',
}


class _FormBase(BaseModel):
    """공백 문자열을 정리하는 공통 베이스"""

    model_config = {'str_strip_whitespace': True}

    def to_payload(self) -> dict:
        """API 전송용 딕셔너리 (None 제외)"""
        return self.model_dump(mode='json', exclude_none=True)


class LoginForm(_FormBase):
    email: EmailStr
    password: str = Field(min_length=1)


class ResetPasswordForm(_FormBase):
    password: str
    confirm_password: str

    @field_validator('password')
    @classmethod
    def check_password(cls, v):
        if len(v) < 6:
            raise ValueError('Password minimal 6 karakter')
        return v

    @field_validator('confirm_password')
    @classmethod
    def check_confirm_password(cls, v, info: ValidationInfo):
        # 비밀번호 자체가 잘못된 경우는 password 오류만 표시
        if 'password' in info.data and v != info.data['password']:
            raise ValueError('Konfirmasi password tidak cocok')
        return v


class AssetForm(_FormBase):
    name: str = Field(min_length=1)
    code: Optional[str] = None
    description: Optional[str] = None
    asset_type: int
    address: str = Field(min_length=1)
    area: float = Field(gt=0)
    longitude: float = Field(default=0, ge=-180, le=180)
    latitude: float = Field(ge=-90, le=90)
    status: int = 1

    @field_validator('asset_type')
    @classmethod
    def check_asset_type(cls, v):
        if v not in ASSET_TYPE_LABELS:
            raise ValueError('Tipe asset harus dipilih')
        return v


class UnitForm(_FormBase):
    name: str = Field(min_length=1)
    asset_id: str = Field(min_length=1)
    size: float = Field(gt=0)
    rent_price: float = Field(gt=0)
    lamp: int = Field(default=0, ge=0)
    electrical_socket: int = Field(default=0, ge=0)
    electrical_power: float = Field(gt=0)
    electrical_unit: str = 'Watt'
    is_toilet_exist: bool = False
    description: Optional[str] = None


class TenantForm(_FormBase):
    name: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    contract_begin_at: date
    rent_duration: int = Field(gt=0)
    rent_duration_unit: str = 'year'
    tenant_identifications: List[str] = Field(min_length=1)
    contract_documents: List[str] = Field(min_length=1)
    unit_ids: List[str] = Field(min_length=1)
    categories: List[int] = Field(min_length=1)

    @field_validator('rent_duration_unit')
    @classmethod
    def check_duration_unit(cls, v):
        if v not in DURATION_UNIT_LABELS:
            raise ValueError("Satuan durasi harus 'year' atau 'month'")
        return v


class TenantPaymentForm(_FormBase):
    amount: float = Field(gt=0)
    payment_date: date
    payment_method: str = Field(min_length=1)
    notes: Optional[str] = None


class TaskForm(_FormBase):
    name: str = Field(min_length=1)
    is_main_task: bool = False
    is_need_validation: bool = False
    is_scan: bool = False
    scan_code: Optional[str] = Field(default=None, validate_default=True)
    duration: int = Field(ge=1)
    asset_id: str = Field(min_length=1)
    role_id: int = Field(ge=1)
    is_all_times: bool = False
    parent_task_ids: List[int] = Field(default_factory=list)
    task_group_id: Optional[int] = None
    days: List[int] = Field(default_factory=list)
    times: List[str] = Field(default_factory=list)

    @field_validator('days')
    @classmethod
    def check_days(cls, v):
        # 0=일요일 ... 6=토요일
        if any(day < 0 or day > 6 for day in v):
            raise ValueError('Hari harus antara 0 dan 6')
        return v

    @field_validator('times')
    @classmethod
    def check_times(cls, v):
        for value in v:
            if not TIME_PATTERN.match(value):
                raise ValueError(f"Format waktu harus HH:mm, got: {value}")
        return v

    @field_validator('scan_code')
    @classmethod
    def check_scan_code(cls, v, info: ValidationInfo):
        if info.data.get('is_scan') and not v:
            raise ValueError('Scan code wajib diisi jika task memerlukan scan')
        return v or None


class TaskGroupForm(_FormBase):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    start_time: str
    end_time: str
    is_active: bool = True

    @field_validator('start_time', 'end_time')
    @classmethod
    def check_time(cls, v):
        if not TIME_PATTERN.match(v):
            raise ValueError('Waktu harus dalam format HH:mm (contoh: 06:00)')
        return v


class UserForm(_FormBase):
    email: EmailStr
    password: Optional[str] = None
    name: str = Field(min_length=1)
    phone: Optional[str] = None
    gender: Optional[str] = None
    roleId: Optional[str] = None
    status: Optional[str] = None

    @field_validator('password')
    @classmethod
    def check_password(cls, v):
        # 수정 시에는 빈 값 허용 (비밀번호 유지)
        if not v:
            return None
        if len(v) < 6:
            raise ValueError('Password minimal 6 karakter')
        return v


class ProfileForm(_FormBase):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    gender: Optional[str] = None


class RoleForm(_FormBase):
    name: str = Field(min_length=2)
    level: int = Field(ge=1, le=999)


class ScanInfoForm(_FormBase):
    scan_code: str = Field(min_length=1)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    asset_id: str = Field(min_length=1)


class ComplaintReportForm(_FormBase):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    tenant_id: Optional[str] = None
    status: int = Field(default=0, ge=0, le=3)
    priority: int = Field(default=1, ge=0, le=3)


class MenuForm(_FormBase):
    title: str = Field(min_length=1)
    url: Optional[str] = None
    icon: Optional[str] = None
    parent_id: Optional[int] = None
    order: int = Field(default=0, ge=0)
    is_active: bool = True
    can_view: bool = True
    can_add: bool = False
    can_edit: bool = False
    can_delete: bool = False
    can_confirm: bool = False

    @field_validator('url')
    @classmethod
    def check_url(cls, v):
        if v and v != '#' and not v.startswith('/'):
            raise ValueError("URL harus diawali '/' atau '#' untuk grup")
        return v or None


class CompleteTaskForm(_FormBase):
    """사용자 작업 완료 입력 (증빙 파일은 별도로 전송)"""
    is_scan: bool = False
    scan_code: Optional[str] = Field(default=None, validate_default=True)
    notes: Optional[str] = None

    @field_validator('scan_code')
    @classmethod
    def check_scan_code(cls, v, info: ValidationInfo):
        if info.data.get('is_scan') and not v:
            raise ValueError('Kode scan wajib diisi untuk task ini')
        return v or None

    def to_payload(self) -> dict:
        return self.model_dump(mode='json', exclude_none=True, exclude={'is_scan'})
