"""Configuration module for Oripro Dashboard."""

from oripro_dashboard.config.config import DEVELOPMENT, PRODUCTION, Config, load_config

__all__ = ['Config', 'load_config', 'PRODUCTION', 'DEVELOPMENT']
