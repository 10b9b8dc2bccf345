"""
Config Module
Configuration management.
"""

from .settings import (
    DEFAULT_HOST,
    DEFAULT_TIMEOUT,
    Config,
    get_host,
    get_log_level,
    get_timeout,
    load_config,
)

__all__ = [
    "Config",
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT",
    "get_host",
    "get_timeout",
    "get_log_level",
    "load_config",
]
