"""List command implementation."""

from __future__ import annotations

from argparse import Namespace

from yabridgectl.cli.commands import Command
from yabridgectl.cli.exit_codes import EXIT_SUCCESS
from yabridgectl.config.loader import list_directories
from yabridgectl.config.models import YabridgectlConfig


class ListCommand(Command):
    """Prints the registered plugin directories, one per line."""

    @property
    def name(self) -> str:
        return "list"

    def execute(self, args: Namespace, config: YabridgectlConfig) -> int:
        for directory in list_directories(config):
            print(directory)
        return EXIT_SUCCESS
