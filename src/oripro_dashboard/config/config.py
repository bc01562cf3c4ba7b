import os
from dataclasses import dataclass

from dotenv import load_dotenv

PRODUCTION = "production"
DEVELOPMENT = "development"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    api_base_url: str = "http://localhost:3001"
    app_env: str = DEVELOPMENT

    # HTTP 요청 설정
    api_timeout_seconds: float = 15.0

    # 접근 체크 실패 시(네트워크 오류) 허용 여부
    access_check_fail_open: bool = True

    # 로그 설정
    log_file: str = "dashboard.log"
    log_level: str = "INFO"

    # OAuth 제공자 (client id/secret 둘 다 있어야 활성화)
    google_client_id: str = ""
    google_client_secret: str = ""
    github_client_id: str = ""
    github_client_secret: str = ""

    @property
    def is_production(self) -> bool:
        return self.app_env == PRODUCTION

    @property
    def google_enabled(self) -> bool:
        """Google OAuth 설정 여부"""
        return bool(self.google_client_id and self.google_client_secret)

    @property
    def github_enabled(self) -> bool:
        """GitHub OAuth 설정 여부"""
        return bool(self.github_client_id and self.github_client_secret)

    def api_url(self, endpoint: str) -> str:
        """API 엔드포인트의 전체 URL 반환"""
        return f"{self.api_base_url}{endpoint}"


def _parse_bool(name: str, default: str) -> bool:
    raw = os.getenv(name, default).strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got: {os.getenv(name)}")


def load_config(load_dotenv_file: bool = True) -> Config:
    if load_dotenv_file:
        load_dotenv()

    # URL 끝의 슬래시 제거 (엔드포인트는 항상 '/'로 시작)
    api_base_url = os.getenv("ORIPRO_API_URL", "http://localhost:3001").strip().rstrip("/")
    if not api_base_url.startswith(("http://", "https://")):
        raise ValueError(f"ORIPRO_API_URL must start with http:// or https://, got: {api_base_url}")

    app_env = os.getenv("APP_ENV", DEVELOPMENT).strip().lower()
    if app_env not in (PRODUCTION, DEVELOPMENT, "test"):
        raise ValueError(f"APP_ENV must be one of production/development/test, got: {app_env}")

    # Validate and convert timeout
    try:
        api_timeout_seconds = float(os.getenv("API_TIMEOUT_SECONDS", "15"))
    except ValueError as e:
        raise ValueError(
            f"API_TIMEOUT_SECONDS must be a valid number: {os.getenv('API_TIMEOUT_SECONDS')}"
        ) from e

    if api_timeout_seconds <= 0:
        raise ValueError(f"API_TIMEOUT_SECONDS must be positive, got: {api_timeout_seconds}")

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got: {log_level}")

    return Config(
        api_base_url=api_base_url,
        app_env=app_env,
        api_timeout_seconds=api_timeout_seconds,
        access_check_fail_open=_parse_bool("ACCESS_CHECK_FAIL_OPEN", "true"),
        log_file=os.getenv("LOG_FILE", "dashboard.log"),
        log_level=log_level,
        google_client_id=os.getenv("GOOGLE_CLIENT_ID", ""),
        google_client_secret=os.getenv("GOOGLE_CLIENT_SECRET", ""),
        github_client_id=os.getenv("GITHUB_CLIENT_ID", ""),
        github_client_secret=os.getenv("GITHUB_CLIENT_SECRET", ""),
    )
