import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# configure_logging()으로 등록한 설정 값 (없으면 환경 변수 사용)
_settings = {}

# setup_logger()로 만든 로거 이름
_managed_loggers = set()


def _resolve_level(level):
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(name: str, log_file: str = None, level=None):
    # 명시하지 않으면 configure_logging() 값, 그다음 LOG_FILE / LOG_LEVEL 환경 변수 사용
    if log_file is None:
        log_file = _settings.get('log_file') or os.getenv("LOG_FILE", "dashboard.log")
    if level is None:
        level = _settings.get('level') or os.getenv("LOG_LEVEL", "INFO")
    level = _resolve_level(level)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    _managed_loggers.add(name)

    # Streamlit reruns re-import pages, so drop handlers from the previous run
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    # 콘솔 출력
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 파일 출력
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    return logger


def configure_logging(log_file: str, level: str) -> bool:
    """
    애플리케이션 설정의 로그 파일/레벨 적용

    모듈 import 시점에 이미 만들어진 로거도 새 설정으로 다시 구성합니다.
    같은 값으로 다시 호출하면 아무것도 하지 않습니다.

    Args:
        log_file: 로그 파일 경로
        level: 로그 레벨 이름 (예: 'DEBUG')

    Returns:
        설정이 바뀌어 로거를 다시 구성했는지 여부
    """
    settings = {'log_file': log_file, 'level': level}
    if settings == _settings:
        return False

    _settings.clear()
    _settings.update(settings)
    for name in sorted(_managed_loggers):
        setup_logger(name)
    return True


def reset_logging():
    """등록한 설정 값 제거 (환경 변수 기본값으로 복귀)"""
    _settings.clear()


def cleanup_logger(logger):
    """Close all handlers and remove them"""
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    _managed_loggers.discard(logger.name)


def get_logger(name: str):
    """Get or create a logger with the given name."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        # Set up console handler only if no handlers exist
        logger.setLevel(logging.INFO)
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
    return logger
