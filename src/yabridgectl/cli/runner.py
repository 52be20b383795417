"""CLI runner: parses arguments, reads the configuration and dispatches commands."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Dict, Iterable, Optional

from yabridgectl.cli.arguments import build_parser
from yabridgectl.cli.commands import (
    AddCommand,
    Command,
    ListCommand,
    RemoveCommand,
    SetCommand,
    StatusCommand,
)
from yabridgectl.cli.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from yabridgectl.config.loader import ConfigError, read_config
from yabridgectl.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get the installed yabridgectl version."""
    try:
        return version("yabridgectl")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from yabridgectl import __version__

        return __version__


class CLIRunner:
    """Runs one yabridgectl invocation."""

    def __init__(self) -> None:
        self.parser = build_parser()
        commands = [
            AddCommand(),
            RemoveCommand(),
            ListCommand(),
            StatusCommand(),
            SetCommand(),
        ]
        self.commands: Dict[str, Command] = {command.name: command for command in commands}

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        try:
            args = self.parser.parse_args(list(argv) if argv is not None else None)
        except SystemExit as e:
            # argparse exits on --help and on usage errors
            return EXIT_SUCCESS if not e.code else EXIT_FAILURE

        # Configure logging as early as possible.
        configure_logging(debug=args.debug, verbose=args.verbose, quiet=args.quiet)

        if args.version:
            print(get_version())
            return EXIT_SUCCESS

        command = self.commands.get(args.command) if args.command else None
        if command is None:
            self.parser.print_help()
            return EXIT_FAILURE

        try:
            config = read_config(args.config)
            return command.execute(args, config)
        except ConfigError as e:
            LOGGER.error(str(e))
            if args.debug:
                LOGGER.exception("Configuration error")
            return EXIT_FAILURE
