"""Shared pytest fixtures for the yabridgectl test suite."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from yabridgectl.config.paths import YABRIDGECTL_CONFIG_HOME_ENV
from yabridgectl.core.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temporary location for every test."""
    home = tmp_path / "config-home"
    monkeypatch.setenv(YABRIDGECTL_CONFIG_HOME_ENV, str(home))
    return home


@pytest.fixture
def config_file(config_home: Path) -> Path:
    """Path of the config file inside the temporary config directory."""
    return config_home / "config.yaml"


@pytest.fixture
def plugin_dir(tmp_path: Path) -> Path:
    """An empty directory to put plugins in."""
    directory = tmp_path / "plugins"
    directory.mkdir()
    return directory


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logger configuration done by the CLI between tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
