"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace

from yabridgectl.config.models import YabridgectlConfig


class Command(ABC):
    """Base class for CLI commands.

    Commands receive the configuration that was read at the start of the
    invocation and return an exit code.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier, as typed on the command line."""

    @abstractmethod
    def execute(self, args: Namespace, config: YabridgectlConfig) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            config: Configuration read for this invocation.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# ruff: noqa: E402
from yabridgectl.cli.commands.add import AddCommand
from yabridgectl.cli.commands.list_dirs import ListCommand
from yabridgectl.cli.commands.remove import RemoveCommand
from yabridgectl.cli.commands.set_options import SetCommand
from yabridgectl.cli.commands.status import StatusCommand

__all__ = [
    "Command",
    "AddCommand",
    "ListCommand",
    "RemoveCommand",
    "SetCommand",
    "StatusCommand",
]
