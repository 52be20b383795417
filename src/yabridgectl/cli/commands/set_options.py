"""Set command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import Any, Dict

from yabridgectl.cli.commands import Command
from yabridgectl.cli.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from yabridgectl.config.loader import set_options, write_config
from yabridgectl.config.models import YabridgectlConfig
from yabridgectl.core.logging import get_logger

LOGGER = get_logger(__name__)


class SetCommand(Command):
    """Changes the libyabridge.so location and the installation method."""

    @property
    def name(self) -> str:
        return "set"

    def execute(self, args: Namespace, config: YabridgectlConfig) -> int:
        changes: Dict[str, Any] = {}
        if args.path_auto:
            changes["yabridge_home"] = None
        elif args.path is not None:
            changes["yabridge_home"] = args.path
        if args.method is not None:
            changes["method"] = args.method

        if not changes:
            LOGGER.error("Nothing to set, use --path, --path-auto or --method")
            return EXIT_FAILURE

        write_config(set_options(config, **changes), args.config)
        return EXIT_SUCCESS
