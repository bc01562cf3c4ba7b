"""Logging module for Oripro Dashboard."""

from oripro_dashboard.log.logger import cleanup_logger, configure_logging, get_logger, reset_logging, setup_logger

__all__ = [
    'setup_logger',
    'configure_logging',
    'reset_logging',
    'cleanup_logger',
    'get_logger',
]
