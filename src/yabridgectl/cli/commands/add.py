"""Add command implementation."""

from __future__ import annotations

from argparse import Namespace

from yabridgectl.cli.commands import Command
from yabridgectl.cli.exit_codes import EXIT_SUCCESS
from yabridgectl.config.loader import add_directory, write_config
from yabridgectl.config.models import YabridgectlConfig
from yabridgectl.core.logging import get_logger

LOGGER = get_logger(__name__)


class AddCommand(Command):
    """Registers a plugin directory.

    Duplicates are ignored, the configuration is still rewritten.
    """

    @property
    def name(self) -> str:
        return "add"

    def execute(self, args: Namespace, config: YabridgectlConfig) -> int:
        new_config = add_directory(config, args.path)
        if new_config == config:
            LOGGER.info(f"'{args.path}' is already a plugin location")
        write_config(new_config, args.config)
        return EXIT_SUCCESS
