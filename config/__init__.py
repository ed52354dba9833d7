from .settings import Settings, get_settings, load_config_file
from .logger import setup_logger

__all__ = ['Settings', 'get_settings', 'load_config_file', 'setup_logger']
