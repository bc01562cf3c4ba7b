import pytest

import oripro_dashboard.config.config as config_module
from oripro_dashboard.config import PRODUCTION, Config, load_config


@pytest.fixture
def clean_env(monkeypatch):
    """환경 변수를 비우고 .env 파일 로드를 막는 피스처"""
    for name in (
        "ORIPRO_API_URL", "APP_ENV", "API_TIMEOUT_SECONDS", "ACCESS_CHECK_FAIL_OPEN",
        "LOG_FILE", "LOG_LEVEL",
        "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GITHUB_CLIENT_ID", "GITHUB_CLIENT_SECRET",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda: None)


def test_010_default_values(clean_env):
    """TEST-010: 환경 변수가 없으면 기본값 적용"""
    config = load_config()

    assert config.api_base_url == "http://localhost:3001"
    assert config.app_env == "development"
    assert config.api_timeout_seconds == 15.0
    assert config.access_check_fail_open is True
    assert config.log_level == "INFO"
    assert config.is_production is False


def test_011_load_api_config(clean_env, monkeypatch):
    """TEST-011: API 주소와 타임아웃 로드, 끝의 슬래시 제거"""
    monkeypatch.setenv("ORIPRO_API_URL", "https://api.oripro.id/")
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "7.5")

    config = load_config()

    assert config.api_base_url == "https://api.oripro.id"
    assert config.api_timeout_seconds == 7.5
    assert config.api_url("/api/users") == "https://api.oripro.id/api/users"


def test_012_production_env(clean_env, monkeypatch):
    """TEST-012: APP_ENV=production 인식"""
    monkeypatch.setenv("APP_ENV", "Production")

    config = load_config()

    assert config.app_env == PRODUCTION
    assert config.is_production is True


def test_013_invalid_api_url_raises_error(clean_env, monkeypatch):
    """TEST-013: http(s)가 아닌 API 주소는 오류"""
    monkeypatch.setenv("ORIPRO_API_URL", "localhost:3001")

    with pytest.raises(ValueError, match="ORIPRO_API_URL"):
        load_config()


def test_014_invalid_timeout_raises_error(clean_env, monkeypatch):
    """TEST-014: 숫자가 아니거나 0 이하인 타임아웃은 오류"""
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "abc")
    with pytest.raises(ValueError, match="API_TIMEOUT_SECONDS"):
        load_config()

    monkeypatch.setenv("API_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValueError, match="API_TIMEOUT_SECONDS must be positive"):
        load_config()


def test_015_invalid_app_env_and_log_level(clean_env, monkeypatch):
    """TEST-015: 알 수 없는 APP_ENV / LOG_LEVEL은 오류"""
    monkeypatch.setenv("APP_ENV", "staging")
    with pytest.raises(ValueError, match="APP_ENV"):
        load_config()

    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        load_config()


def test_016_fail_open_flag(clean_env, monkeypatch):
    """TEST-016: ACCESS_CHECK_FAIL_OPEN 파싱"""
    monkeypatch.setenv("ACCESS_CHECK_FAIL_OPEN", "false")
    assert load_config().access_check_fail_open is False

    monkeypatch.setenv("ACCESS_CHECK_FAIL_OPEN", "1")
    assert load_config().access_check_fail_open is True

    monkeypatch.setenv("ACCESS_CHECK_FAIL_OPEN", "maybe")
    with pytest.raises(ValueError, match="ACCESS_CHECK_FAIL_OPEN"):
        load_config()


def test_017_oauth_enabled_only_with_id_and_secret():
    """TEST-017: OAuth 제공자는 client id와 secret이 모두 있어야 활성화"""
    assert Config(google_client_id="id").google_enabled is False
    assert Config(google_client_id="id", google_client_secret="secret").google_enabled is True
    assert Config(github_client_secret="secret").github_enabled is False
