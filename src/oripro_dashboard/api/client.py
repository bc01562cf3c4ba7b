"""
REST API 클라이언트

oripro-backend 호출을 담당하며 모든 응답을 ApiResult로 정규화합니다.
"""

from typing import Any, Callable, Optional

import requests

from oripro_dashboard.api.result import ApiResult, ErrorKind, error_kind_for_status
from oripro_dashboard.config import Config
from oripro_dashboard.log.logger import setup_logger

logger = setup_logger('ApiClient')

NETWORK_ERROR_MESSAGE = "Network error. Please try again."
UNAUTHORIZED_MESSAGE = "Unauthorized. Redirecting to login..."


def unwrap_envelope(payload: Any) -> tuple[Any, Optional[bool], Optional[str]]:
    """
    백엔드 응답 봉투 해제

    `{success, data, message}` 봉투가 중첩되어 오는 경우가 있어
    data가 더 이상 봉투가 아닐 때까지 벗겨냅니다.

    Args:
        payload: JSON 디코딩된 응답 본문

    Returns:
        (데이터, 봉투의 success 값 또는 None, 메시지)
    """
    success = None
    message = None

    while isinstance(payload, dict) and 'success' in payload and 'data' in payload:
        # 안쪽 봉투가 실패를 보고하면 그 값을 따름
        success = bool(payload['success']) if success is None else success and bool(payload['success'])
        message = payload.get('message') or message
        payload = payload['data']

    return payload, success, message


class ApiClient:
    """
    oripro-backend REST 클라이언트

    토큰은 세션 컨텍스트가 소유하며, 클라이언트는 token_provider를 통해 읽기만 합니다.
    """

    def __init__(
        self,
        config: Config,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Args:
            config: 애플리케이션 설정
            token_provider: 현재 Bearer 토큰을 반환하는 함수
            on_unauthorized: 401 응답 시 호출되는 콜백 (세션 무효화)
            session: requests 세션 (테스트에서 주입)
        """
        self.config = config
        self.token_provider = token_provider or (lambda: None)
        self.on_unauthorized = on_unauthorized
        self.session = session or requests.Session()

    def _headers(self, json_body: bool = True) -> dict:
        headers = {'Accept': 'application/json'}
        if json_body:
            headers['Content-Type'] = 'application/json'

        token = self.token_provider()
        if token:
            headers['Authorization'] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        json: Any = None,
        files: Optional[dict] = None,
        data: Optional[dict] = None
    ) -> ApiResult:
        """
        API 요청 실행

        Args:
            method: HTTP 메서드
            endpoint: '/api/...' 형식의 엔드포인트
            params: 쿼리 파라미터 (None 값은 제외)
            json: JSON 본문
            files: multipart 업로드 파일
            data: multipart 폼 필드

        Returns:
            ApiResult
        """
        url = self.config.api_url(endpoint)
        if params:
            params = {key: value for key, value in params.items() if value is not None and value != ''}

        try:
            response = self.session.request(
                method,
                url,
                params=params or None,
                json=json,
                files=files,
                data=data,
                headers=self._headers(json_body=files is None),
                timeout=self.config.api_timeout_seconds
            )
        except requests.RequestException as e:
            logger.error(f"API request failed: {method} {endpoint} - {e}")
            return ApiResult.fail(NETWORK_ERROR_MESSAGE, kind=ErrorKind.NETWORK)

        return self._to_result(method, endpoint, response)

    def _to_result(self, method: str, endpoint: str, response: requests.Response) -> ApiResult:
        status = response.status_code

        # 204 No Content (DELETE 응답)
        if status == 204:
            return ApiResult.ok(status_code=status)

        try:
            body = response.json()
        except ValueError:
            body = {'message': f"HTTP {status}"}

        if not response.ok:
            if status == 401:
                logger.warning(f"Unauthorized response for {method} {endpoint}, invalidating session")
                if self.on_unauthorized:
                    self.on_unauthorized()
                return ApiResult.fail(UNAUTHORIZED_MESSAGE, kind=ErrorKind.UNAUTHORIZED, status_code=status)

            error = f"HTTP {status}"
            if isinstance(body, dict):
                error = body.get('message') or body.get('error') or error
            logger.warning(f"API error {status} for {method} {endpoint}: {error}")
            return ApiResult.fail(error, kind=error_kind_for_status(status), status_code=status)

        data, envelope_success, message = unwrap_envelope(body)

        # 'data' 없이 {success: false, error} 만 오는 경우 포함
        if envelope_success is False or (isinstance(body, dict) and body.get('success') is False):
            error = (body.get('error') if isinstance(body, dict) else None) or message or "Request failed"
            return ApiResult.fail(error, kind=ErrorKind.SERVER, status_code=status, data=data)

        return ApiResult.ok(data=data, message=message, status_code=status)

    def get(self, endpoint: str, params: Optional[dict] = None) -> ApiResult:
        return self.request('GET', endpoint, params=params)

    def post(self, endpoint: str, data: Any = None) -> ApiResult:
        return self.request('POST', endpoint, json=data)

    def put(self, endpoint: str, data: Any = None) -> ApiResult:
        return self.request('PUT', endpoint, json=data)

    def delete(self, endpoint: str) -> ApiResult:
        return self.request('DELETE', endpoint)

    def upload(self, endpoint: str, files: dict, fields: Optional[dict] = None) -> ApiResult:
        """multipart/form-data 업로드"""
        return self.request('POST', endpoint, files=files, data=fields)
