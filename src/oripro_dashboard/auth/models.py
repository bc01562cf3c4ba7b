"""
인증 관련 데이터 모델

로그인한 사용자 프로필 스냅샷과 로그인 제공자 모델입니다.
"""

from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class SessionUser:
    """
    로그인한 사용자 프로필 스냅샷

    Attributes:
        id: 사용자 ID
        email: 이메일 (로그인 ID)
        name: 표시 이름
        phone: 전화번호
        gender: 성별 코드
        role_id: 역할 ID (없으면 메뉴 트리가 비어 있음)
        role_name: 역할 이름
        status: 계정 상태
    """
    id: str
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[str] = None
    role_id: Optional[str] = None
    role_name: Optional[str] = None
    status: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.email

    def has_role(self) -> bool:
        return self.role_id is not None and str(self.role_id) != ''

    def to_dict(self) -> dict:
        """딕셔너리로 변환"""
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'phone': self.phone,
            'gender': self.gender,
            'role_id': self.role_id,
            'role_name': self.role_name,
            'status': self.status
        }

    def with_updates(self, updates: dict) -> 'SessionUser':
        """프로필 편집 결과를 반영한 새 스냅샷"""
        allowed = {k: v for k, v in updates.items() if k in ('name', 'email', 'phone', 'gender') and v}
        return replace(self, **allowed)

    @classmethod
    def from_dict(cls, data: dict) -> 'SessionUser':
        """
        백엔드 사용자 데이터로부터 생성

        역할은 `role_id` 또는 중첩된 `role: {id, name}` 형태로 올 수 있습니다.
        """
        role = data.get('role') if isinstance(data.get('role'), dict) else {}
        role_id = data.get('role_id') or role.get('id')

        return cls(
            id=str(data['id']),
            email=data['email'],
            name=data.get('name'),
            phone=data.get('phone'),
            gender=str(data['gender']) if data.get('gender') is not None else None,
            role_id=str(role_id) if role_id is not None else None,
            role_name=role.get('name') or data.get('role_name'),
            status=data.get('status')
        )


@dataclass(frozen=True)
class AuthProvider:
    """
    로그인 제공자

    Attributes:
        id: 제공자 ID ('credentials', 'google', 'github')
        name: 표시 이름
        type: 'credentials' 또는 'oauth'
        signin_url: OAuth 로그인 시작 URL
        callback_url: OAuth 콜백 URL
    """
    id: str
    name: str
    type: str
    signin_url: Optional[str] = None
    callback_url: Optional[str] = None

    @property
    def is_oauth(self) -> bool:
        return self.type == 'oauth'


@dataclass(frozen=True)
class LoginResult:
    success: bool
    message: str
    user: Optional[SessionUser] = None
    errors: dict = field(default_factory=dict)
