"""Configuration file loading, saving and mutation.

The configuration lives in a single YAML document (see
`yabridgectl.config.paths`). It is read fresh at the start of every
invocation and written back atomically after every mutation, so a
concurrent reader sees either the old or the new document, never a
partial one.

Mutations are pure functions from (old config, input) to a new config.
"""

from __future__ import annotations

import dataclasses
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Union

import yaml

from yabridgectl.config.models import DEFAULT_METHOD, YabridgectlConfig
from yabridgectl.config.paths import get_config_path
from yabridgectl.config.validation import validate_config
from yabridgectl.core.logging import get_logger
from yabridgectl.core.models import InstallationMethod

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]

# Marker for `set_options` arguments that should be left untouched
_UNSET: Any = object()


class ConfigError(Exception):
    """Configuration loading or saving error."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ConfigIOError(ConfigError):
    """The configuration file could not be read or written."""


class ConfigParseError(ConfigError):
    """The configuration file exists but its content is malformed."""


def normalize_path(path: PathLike) -> Path:
    """Normalize a path to the form stored in the configuration.

    The result is absolute, has ``~`` expanded, ``.``/``..`` components
    collapsed and no trailing separator. Symlinks are not resolved, so the
    path keeps the name the user registered it under.

    Args:
        path: Path as given by the user or read from the config file.

    Returns:
        Normalized absolute path.
    """
    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))


def read_config(path: Optional[Path] = None) -> YabridgectlConfig:
    """Read the configuration file.

    A missing file yields the default configuration. The default is not
    written to disk.

    Args:
        path: Config file location (defaults to the per-user config path).

    Returns:
        Parsed YabridgectlConfig.

    Raises:
        ConfigIOError: If the file exists but cannot be read.
        ConfigParseError: If the file content is not a valid configuration.
    """
    config_path = path if path is not None else get_config_path()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        LOGGER.debug(f"No config file at {config_path}, using defaults")
        return YabridgectlConfig()
    except OSError as e:
        raise ConfigIOError(
            f"Could not read config file '{config_path}': {e.strerror or e}", config_path
        ) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML in '{config_path}': {e}", config_path) from e

    if data is None:
        return YabridgectlConfig()

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Config file '{config_path}' must be a YAML mapping, got {type(data).__name__}",
            config_path,
        )

    validate_config(data, source=str(config_path))
    config = dict_to_config(data, source=config_path)
    LOGGER.debug(f"Loaded config from {config_path}")
    return config


def write_config(config: YabridgectlConfig, path: Optional[Path] = None) -> None:
    """Write the configuration file atomically.

    The document is written to a temporary file in the target directory and
    then moved into place. Missing parent directories are created.

    Args:
        config: Configuration to persist.
        path: Config file location (defaults to the per-user config path).

    Raises:
        ConfigIOError: If the file could not be written.
    """
    config_path = path if path is not None else get_config_path()
    content = yaml.safe_dump(config_to_dict(config), default_flow_style=False, sort_keys=True)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=config_path.parent, prefix=f".{config_path.stem}-", suffix=".tmp"
        )
    except OSError as e:
        raise ConfigIOError(
            f"Could not write config file '{config_path}': {e.strerror or e}", config_path
        ) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, config_path)
    except OSError as e:
        Path(tmp_path).unlink(missing_ok=True)
        raise ConfigIOError(
            f"Could not write config file '{config_path}': {e.strerror or e}", config_path
        ) from e

    LOGGER.debug(f"Wrote config to {config_path}")


def dict_to_config(data: Dict[str, Any], source: Optional[Path] = None) -> YabridgectlConfig:
    """Convert a parsed YAML mapping to a typed YabridgectlConfig.

    Unknown keys are ignored (`validate_config` warns about them).

    Args:
        data: Configuration dictionary.
        source: Config file the data came from, used in error messages.

    Returns:
        Typed YabridgectlConfig instance.

    Raises:
        ConfigParseError: If a known key has the wrong type or value.
    """
    where = f" in '{source}'" if source is not None else ""

    raw_dirs = data.get("plugin_dirs")
    if raw_dirs is None:
        raw_dirs = []
    if not isinstance(raw_dirs, list):
        raise ConfigParseError(
            f"'plugin_dirs' must be a list, got {type(raw_dirs).__name__}{where}", source
        )
    for entry in raw_dirs:
        if not isinstance(entry, str) or not entry:
            raise ConfigParseError(
                f"'plugin_dirs' entries must be non-empty strings, got {entry!r}{where}", source
            )
    plugin_dirs: FrozenSet[Path] = frozenset(normalize_path(entry) for entry in raw_dirs)

    raw_home = data.get("yabridge_home")
    yabridge_home: Optional[Path] = None
    if raw_home is not None:
        if not isinstance(raw_home, str) or not raw_home:
            raise ConfigParseError(
                f"'yabridge_home' must be a path string or null, got {raw_home!r}{where}", source
            )
        yabridge_home = normalize_path(raw_home)

    raw_method = data.get("method", DEFAULT_METHOD.value)
    try:
        method = InstallationMethod(str(raw_method).lower())
    except ValueError as e:
        valid = ", ".join(m.value for m in InstallationMethod)
        raise ConfigParseError(
            f"Invalid installation method {raw_method!r}{where}, expected one of: {valid}", source
        ) from e

    return YabridgectlConfig(
        plugin_dirs=plugin_dirs,
        yabridge_home=yabridge_home,
        method=method,
    )


def config_to_dict(config: YabridgectlConfig) -> Dict[str, Any]:
    """Convert a configuration to a plain dictionary for YAML output.

    Args:
        config: Configuration to convert.

    Returns:
        Dictionary with the plugin_dirs, yabridge_home and method keys.
    """
    data: Dict[str, Any] = {
        "plugin_dirs": [str(directory) for directory in config.sorted_plugin_dirs],
        "yabridge_home": str(config.yabridge_home) if config.yabridge_home else None,
        "method": config.method.value,
    }
    return data


def add_directory(config: YabridgectlConfig, path: PathLike) -> YabridgectlConfig:
    """Register a plugin directory.

    Adding a path that is already registered (after normalization) returns
    an equal configuration.

    Args:
        config: Current configuration.
        path: Directory to add.

    Returns:
        New configuration containing the normalized path.
    """
    directory = normalize_path(path)
    if directory in config.plugin_dirs:
        LOGGER.debug(f"'{directory}' is already registered")
        return config
    return dataclasses.replace(config, plugin_dirs=config.plugin_dirs | {directory})


def remove_directory(config: YabridgectlConfig, path: PathLike) -> YabridgectlConfig:
    """Unregister a plugin directory.

    Removing a path that is not registered returns an equal configuration.

    Args:
        config: Current configuration.
        path: Directory to remove.

    Returns:
        New configuration without the normalized path.
    """
    directory = normalize_path(path)
    if directory not in config.plugin_dirs:
        LOGGER.debug(f"'{directory}' is not registered, nothing to remove")
        return config
    return dataclasses.replace(config, plugin_dirs=config.plugin_dirs - {directory})


def set_options(
    config: YabridgectlConfig,
    yabridge_home: Any = _UNSET,
    method: Any = _UNSET,
) -> YabridgectlConfig:
    """Change the libyabridge.so location override and/or installation method.

    Args:
        config: Current configuration.
        yabridge_home: New override directory, or None to go back to
            automatic discovery. Left unchanged when omitted.
        method: New InstallationMethod (or its string value). Left unchanged
            when omitted.

    Returns:
        New configuration with the requested fields replaced.

    Raises:
        ValueError: If `method` is not a valid installation method.
    """
    changes: Dict[str, Any] = {}
    if yabridge_home is not _UNSET:
        changes["yabridge_home"] = (
            normalize_path(yabridge_home) if yabridge_home is not None else None
        )
    if method is not _UNSET:
        changes["method"] = InstallationMethod(method)
    return dataclasses.replace(config, **changes)


def list_directories(config: YabridgectlConfig) -> List[Path]:
    """Registered plugin directories in canonical order."""
    return config.sorted_plugin_dirs
