"""Tests for the list command."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from yabridgectl.cli import main
from yabridgectl.cli.commands.list_dirs import ListCommand
from yabridgectl.cli.exit_codes import EXIT_SUCCESS
from yabridgectl.config.loader import add_directory, write_config
from yabridgectl.config.models import YabridgectlConfig


class TestListCommand:
    """Tests for ListCommand."""

    def test_command_name(self) -> None:
        assert ListCommand().name == "list"

    def test_empty(self, capsys) -> None:
        assert ListCommand().execute(Namespace(), YabridgectlConfig()) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""

    def test_prints_sorted_directories(self, config_file: Path, capsys) -> None:
        config = YabridgectlConfig()
        for directory in ["/c/vst", "/a/vst", "/b/vst"]:
            config = add_directory(config, directory)
        write_config(config, config_file)

        assert main(["list"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines() == ["/a/vst", "/b/vst", "/c/vst"]

    def test_output_is_stable(self, config_file: Path, capsys) -> None:
        config = YabridgectlConfig()
        for directory in ["/z", "/y", "/x"]:
            config = add_directory(config, directory)
        write_config(config, config_file)

        main(["list"])
        first = capsys.readouterr().out
        main(["list"])
        assert capsys.readouterr().out == first
