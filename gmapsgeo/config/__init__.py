"""
Configuration and logging helpers shared by the gmapsgeo package.
"""

from .config_module import ConfigError, get_config, load_config, validate_config
from .logger_module import initialize_logger, log_error, log_info, log_warning

__all__ = [
    "ConfigError",
    "get_config",
    "load_config",
    "validate_config",
    "initialize_logger",
    "log_info",
    "log_warning",
    "log_error",
]
