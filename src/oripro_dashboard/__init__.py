"""
Oripro Dashboard Package

Streamlit admin dashboard for the oripro property management backend.
Import from subpackages directly (config, api, auth, menu, access, forms, ui).
"""

from oripro_dashboard.config import Config, load_config
from oripro_dashboard.log.logger import setup_logger

__version__ = '0.1.0'

__all__ = [
    'Config', 'load_config', 'setup_logger',
]
