"""Tests for the rm command."""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path

from yabridgectl.cli import main
from yabridgectl.cli.commands.remove import RemoveCommand
from yabridgectl.cli.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from yabridgectl.config.loader import add_directory, read_config, write_config
from yabridgectl.config.models import YabridgectlConfig


class TestRemoveCommand:
    """Tests for RemoveCommand."""

    def test_command_name(self) -> None:
        assert RemoveCommand().name == "rm"

    def test_removes_registered_directory(self, tmp_path: Path, config_file: Path) -> None:
        config = add_directory(add_directory(YabridgectlConfig(), "/keep"), tmp_path / "gone")
        write_config(config, config_file)

        assert main(["rm", str(tmp_path / "gone")]) == EXIT_SUCCESS
        assert read_config(config_file).plugin_dirs == {Path("/keep")}

    def test_directory_does_not_have_to_exist(self, config_file: Path) -> None:
        write_config(add_directory(YabridgectlConfig(), "/deleted/plugins"), config_file)
        assert main(["rm", "/deleted/plugins/"]) == EXIT_SUCCESS
        assert read_config(config_file).plugin_dirs == frozenset()

    def test_unregistered_directory_fails(self, config_file: Path, caplog) -> None:
        caplog.set_level(logging.ERROR, logger="yabridgectl")
        write_config(add_directory(YabridgectlConfig(), "/plugins"), config_file)

        result = RemoveCommand().execute(
            Namespace(path=Path("/other"), config=None), read_config(config_file)
        )

        assert result == EXIT_FAILURE
        assert "'/other' is not a plugin location" in caplog.text
        assert read_config(config_file).plugin_dirs == {Path("/plugins")}
