"""Status command implementation."""

from __future__ import annotations

from argparse import Namespace

from yabridgectl.bridge.locator import LIBYABRIDGE_NAME, BridgeLocator, LibraryNotFoundError
from yabridgectl.cli.commands import Command
from yabridgectl.cli.exit_codes import EXIT_SUCCESS
from yabridgectl.config.models import YabridgectlConfig
from yabridgectl.core.logging import get_logger
from yabridgectl.core.models import InstallationState
from yabridgectl.files.status import compose

LOGGER = get_logger(__name__)


class StatusCommand(Command):
    """Shows the settings and the installation status of every plugin."""

    @property
    def name(self) -> str:
        return "status"

    def execute(self, args: Namespace, config: YabridgectlConfig) -> int:
        """Execute the status command.

        Directories that cannot be searched are reported inline and do not
        affect the exit code.

        Args:
            args: Parsed command-line arguments.
            config: Current configuration.

        Returns:
            Exit code (always 0 once the configuration has been read).
        """
        if config.yabridge_home is not None:
            print(f"yabridge path: '{config.yabridge_home}'")
        else:
            print("yabridge path: <auto>")

        try:
            library = BridgeLocator.from_config(config).resolve()
            print(f"{LIBYABRIDGE_NAME}: '{library}'")
        except LibraryNotFoundError as e:
            LOGGER.debug(str(e))
            print(f"{LIBYABRIDGE_NAME}: <not found>")

        print(f"installation method: {config.method}")

        for report in compose(config):
            print()
            print(f"{report.directory}:")

            if report.result is None:
                print(f"  error: {report.error}")
                continue

            for plugin, status in report.result.installation_status():
                label = status.state.value
                if status.state == InstallationState.UNKNOWN:
                    label = f"{label} ({status.error})"
                print(f"  {plugin.relative_to(report.directory)} :: {label}")

        return EXIT_SUCCESS
