"""
폼 검증 헬퍼

pydantic 검증 오류를 필드별 메시지 딕셔너리로 변환합니다.
"""

from typing import Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

FORM_ERROR_KEY = '_form'

T = TypeVar('T', bound=BaseModel)


def validate_form(schema: Type[T], data: dict) -> Tuple[Optional[T], dict]:
    """
    폼 데이터 검증

    Args:
        schema: 폼 스키마 클래스
        data: 입력 값 딕셔너리

    Returns:
        (검증된 모델 또는 None, {필드명: 오류 메시지})
    """
    try:
        return schema.model_validate(data), {}
    except ValidationError as e:
        return None, errors_by_field(e)


def errors_by_field(error: ValidationError) -> dict:
    """
    ValidationError를 필드별 첫 번째 오류 메시지로 변환

    필드에 속하지 않는 오류는 '_form' 키에 담깁니다.
    """
    errors = {}
    for item in error.errors():
        field = str(item['loc'][0]) if item['loc'] else FORM_ERROR_KEY
        if field in errors:
            continue

        message = item['msg']
        # 'Value error, ' 접두어 제거
        if message.startswith('Value error, '):
            message = message[len('Value error, '):]
        errors[field] = message
    return errors
