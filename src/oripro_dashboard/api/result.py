"""
API 응답 모델

모든 백엔드 호출이 반환하는 단일 결과 타입입니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """오류 분류"""
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    NETWORK = "network"
    SERVER = "server"


def error_kind_for_status(status_code: int) -> ErrorKind:
    """HTTP 상태 코드를 오류 분류로 변환"""
    if status_code == 401:
        return ErrorKind.UNAUTHORIZED
    if status_code == 403:
        return ErrorKind.FORBIDDEN
    if status_code == 404:
        return ErrorKind.NOT_FOUND
    if status_code in (400, 409, 422):
        return ErrorKind.VALIDATION
    return ErrorKind.SERVER


@dataclass(frozen=True)
class ApiResult:
    """
    정규화된 API 결과

    Attributes:
        success: 요청 성공 여부
        data: 응답 데이터 (봉투 `{success, data}`는 이미 벗겨진 상태)
        error: 오류 메시지
        message: 백엔드가 함께 보낸 안내 메시지
        status_code: HTTP 상태 코드 (네트워크 오류 시 None)
        kind: 오류 분류 (성공 시 None)
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None
    status_code: Optional[int] = None
    kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None, status_code: int = 200) -> 'ApiResult':
        return cls(success=True, data=data, message=message, status_code=status_code)

    @classmethod
    def fail(
        cls,
        error: str,
        kind: ErrorKind = ErrorKind.SERVER,
        status_code: Optional[int] = None,
        data: Any = None
    ) -> 'ApiResult':
        return cls(success=False, data=data, error=error, status_code=status_code, kind=kind)

    @property
    def is_unauthorized(self) -> bool:
        return self.kind == ErrorKind.UNAUTHORIZED

    @property
    def is_not_found(self) -> bool:
        return self.kind == ErrorKind.NOT_FOUND

    @property
    def is_network_error(self) -> bool:
        """요청 자체가 수행되지 못한 경우 (타임아웃, 연결 실패)"""
        return self.kind == ErrorKind.NETWORK

    def items(self) -> list:
        """
        목록 데이터 반환

        목록 엔드포인트는 리스트 또는 `{items|rows|data: [...]}` 형태를 반환합니다.
        실패했거나 데이터가 없으면 빈 리스트를 반환합니다.
        """
        if not self.success or self.data is None:
            return []
        if isinstance(self.data, list):
            return self.data
        if isinstance(self.data, dict):
            for key in ('items', 'rows', 'data'):
                if isinstance(self.data.get(key), list):
                    return self.data[key]
        return []
