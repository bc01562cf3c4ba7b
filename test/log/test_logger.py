import logging

from oripro_dashboard.log.logger import cleanup_logger, configure_logging, get_logger, reset_logging, setup_logger


def test_100_logger_initialization(tmp_path):
    """TEST-100: 로거 초기화 및 파일 기록 확인"""
    log_file = tmp_path / "test_dashboard.log"

    logger = setup_logger("test_logger", str(log_file))
    logger.info("Test message")

    # 핸들러 닫기 (파일 읽기를 위해)
    cleanup_logger(logger)

    assert log_file.exists()
    assert "Test message" in log_file.read_text()


def test_101_repeated_setup_does_not_duplicate_handlers(tmp_path):
    """TEST-101: Streamlit rerun처럼 반복 호출해도 핸들러가 늘지 않음"""
    log_file = tmp_path / "rerun.log"

    setup_logger("rerun_logger", str(log_file))
    logger = setup_logger("rerun_logger", str(log_file))

    assert len(logger.handlers) == 2
    cleanup_logger(logger)
    assert logger.handlers == []


def test_102_level_from_environment(tmp_path, monkeypatch):
    """TEST-102: LOG_LEVEL 환경 변수 적용"""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    logger = setup_logger("env_level_logger", str(tmp_path / "level.log"))

    assert logger.level == logging.WARNING
    cleanup_logger(logger)


def test_103_get_logger_adds_console_handler_once():
    """TEST-103: get_logger는 핸들러가 없을 때만 추가"""
    logger = get_logger("plain_logger")
    same = get_logger("plain_logger")

    assert logger is same
    assert len(logger.handlers) == 1
    cleanup_logger(logger)


def test_104_configure_logging_reapplies_config_to_existing_loggers(tmp_path):
    """TEST-104: 설정의 로그 파일/레벨이 이미 만든 로거에도 적용"""
    logger = setup_logger("configured_logger", str(tmp_path / "before.log"), logging.INFO)
    configured_file = tmp_path / "configured.log"

    try:
        assert configure_logging(str(configured_file), "DEBUG") is True
        assert configure_logging(str(configured_file), "DEBUG") is False

        assert logger.level == logging.DEBUG
        logger.debug("Debug after configure")
        cleanup_logger(logger)
        assert "Debug after configure" in configured_file.read_text()
    finally:
        reset_logging()
