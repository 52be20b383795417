"""Configuration module for yabridgectl.

Provides loading, atomic saving and pure mutation of the per-user
configuration file (~/.config/yabridgectl/config.yaml).
"""

from yabridgectl.config.models import YabridgectlConfig, DEFAULT_METHOD
from yabridgectl.config.loader import (
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    add_directory,
    list_directories,
    normalize_path,
    read_config,
    remove_directory,
    set_options,
    write_config,
)
from yabridgectl.config.paths import get_config_path

__all__ = [
    "YabridgectlConfig",
    "DEFAULT_METHOD",
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "add_directory",
    "list_directories",
    "normalize_path",
    "read_config",
    "remove_directory",
    "set_options",
    "write_config",
    "get_config_path",
]
