"""Tests for yabridgectl.bridge.locator."""

from __future__ import annotations

from pathlib import Path

import pytest

from yabridgectl.bridge.locator import (
    LIBYABRIDGE_NAME,
    SYSTEM_SEARCH_PATHS,
    BridgeLocator,
    LibraryNotFoundError,
    default_search_paths,
)
from yabridgectl.config.models import YabridgectlConfig


def _install_library(directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    library = directory / LIBYABRIDGE_NAME
    library.write_bytes(b"\x7fELF")
    return library


class TestDefaultSearchPaths:
    """Tests for default_search_paths function."""

    def test_system_paths_come_first(self) -> None:
        paths = default_search_paths()
        assert paths[: len(SYSTEM_SEARCH_PATHS)] == SYSTEM_SEARCH_PATHS

    def test_ends_with_user_data_dir(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert default_search_paths()[-1] == tmp_path / "yabridge"


class TestBridgeLocatorOverride:
    """Tests for resolve() with an explicit yabridge_home."""

    def test_finds_library_in_override(self, tmp_path: Path) -> None:
        library = _install_library(tmp_path / "custom")
        locator = BridgeLocator(tmp_path / "custom", search_paths=[])
        assert locator.resolve() == library

    def test_missing_library_in_override_is_an_error(self, tmp_path: Path) -> None:
        (tmp_path / "custom").mkdir()
        system = tmp_path / "system"
        _install_library(system)

        # The override is honored even though a system copy exists
        locator = BridgeLocator(tmp_path / "custom", search_paths=[system])
        with pytest.raises(LibraryNotFoundError, match="custom") as exc_info:
            locator.resolve()
        assert exc_info.value.searched == [tmp_path / "custom"]

    def test_from_config(self, tmp_path: Path) -> None:
        library = _install_library(tmp_path / "custom")
        config = YabridgectlConfig(yabridge_home=tmp_path / "custom")
        assert BridgeLocator.from_config(config, search_paths=[]).resolve() == library


class TestBridgeLocatorSearch:
    """Tests for resolve() without an override."""

    def test_first_location_wins(self, tmp_path: Path) -> None:
        first = tmp_path / "first"
        second = tmp_path / "second"
        _install_library(second)
        expected = _install_library(first)

        locator = BridgeLocator(search_paths=[first, second])
        assert locator.resolve() == expected

    def test_skips_locations_without_library(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        expected = _install_library(tmp_path / "second")

        locator = BridgeLocator(search_paths=[tmp_path / "missing", empty, tmp_path / "second"])
        assert locator.resolve() == expected

    def test_directory_named_like_library_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "first" / LIBYABRIDGE_NAME).mkdir(parents=True)
        expected = _install_library(tmp_path / "second")

        locator = BridgeLocator(search_paths=[tmp_path / "first", tmp_path / "second"])
        assert locator.resolve() == expected

    def test_not_found_lists_searched_locations(self, tmp_path: Path) -> None:
        paths = [tmp_path / "a", tmp_path / "b"]
        locator = BridgeLocator(search_paths=paths)
        with pytest.raises(LibraryNotFoundError, match="yabridgectl set --path") as exc_info:
            locator.resolve()
        assert exc_info.value.searched == paths
        assert str(tmp_path / "a") in str(exc_info.value)
        assert str(tmp_path / "b") in str(exc_info.value)

    def test_uses_default_search_paths(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        locator = BridgeLocator()
        assert locator.search_paths == default_search_paths()
