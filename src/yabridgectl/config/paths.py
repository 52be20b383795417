"""Path management for yabridgectl's per-user files.

Follows the XDG base directory layout:
    $XDG_CONFIG_HOME/yabridgectl/config.yaml   - Configuration file
    $XDG_DATA_HOME/yabridge/                   - User-local yabridge install
"""

from __future__ import annotations

import os
from pathlib import Path

# Directory name under the XDG config home
CONFIG_DIR_NAME = "yabridgectl"
CONFIG_FILE_NAME = "config.yaml"

# Directory name under the XDG data home where yabridge may be installed
YABRIDGE_DATA_DIR_NAME = "yabridge"

# Environment variable to override the config directory
YABRIDGECTL_CONFIG_HOME_ENV = "YABRIDGECTL_CONFIG_HOME"


def get_xdg_config_home() -> Path:
    """Get the XDG config home, defaulting to ~/.config."""
    env_home = os.environ.get("XDG_CONFIG_HOME")
    if env_home:
        return Path(env_home)
    return Path.home() / ".config"


def get_xdg_data_home() -> Path:
    """Get the XDG data home, defaulting to ~/.local/share."""
    env_home = os.environ.get("XDG_DATA_HOME")
    if env_home:
        return Path(env_home)
    return Path.home() / ".local" / "share"


def get_config_dir() -> Path:
    """Get the yabridgectl configuration directory.

    Resolution order:
    1. YABRIDGECTL_CONFIG_HOME environment variable (if set)
    2. $XDG_CONFIG_HOME/yabridgectl
    3. ~/.config/yabridgectl

    Returns:
        Path to the configuration directory.
    """
    env_home = os.environ.get(YABRIDGECTL_CONFIG_HOME_ENV)
    if env_home:
        return Path(env_home)
    return get_xdg_config_home() / CONFIG_DIR_NAME


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / CONFIG_FILE_NAME


def get_user_yabridge_dir() -> Path:
    """Get the user-local yabridge installation directory."""
    return get_xdg_data_home() / YABRIDGE_DATA_DIR_NAME
