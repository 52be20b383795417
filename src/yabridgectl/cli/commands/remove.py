"""Remove command implementation."""

from __future__ import annotations

from argparse import Namespace

from yabridgectl.cli.commands import Command
from yabridgectl.cli.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from yabridgectl.config.loader import normalize_path, remove_directory, write_config
from yabridgectl.config.models import YabridgectlConfig
from yabridgectl.core.logging import get_logger

LOGGER = get_logger(__name__)


class RemoveCommand(Command):
    """Unregisters a plugin directory."""

    @property
    def name(self) -> str:
        return "rm"

    def execute(self, args: Namespace, config: YabridgectlConfig) -> int:
        """Execute the rm command.

        Only paths that are currently registered are accepted here, even
        though removing an unknown path is harmless for the config itself.

        Args:
            args: Parsed command-line arguments.
            config: Current configuration.

        Returns:
            Exit code.
        """
        directory = normalize_path(args.path)
        if directory not in config.plugin_dirs:
            registered = ", ".join(f"'{d}'" for d in config.sorted_plugin_dirs) or "none"
            LOGGER.error(f"'{directory}' is not a plugin location (registered: {registered})")
            return EXIT_FAILURE

        # TODO: Warn about libyabridge.so copies and links left behind in the directory
        write_config(remove_directory(config, directory), args.config)
        return EXIT_SUCCESS
