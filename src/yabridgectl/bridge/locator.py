"""libyabridge.so discovery.

An explicit `yabridge_home` is honored literally. Without it, a fixed list
of system and user locations is probed in order and the first one that
contains the library wins.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from yabridgectl.config.models import YabridgectlConfig
from yabridgectl.config.paths import get_user_yabridge_dir
from yabridgectl.core.logging import get_logger

LOGGER = get_logger(__name__)

LIBYABRIDGE_NAME = "libyabridge.so"

# System-wide locations, probed before the user's data directory
SYSTEM_SEARCH_PATHS = [
    Path("/usr/lib"),
    Path("/usr/local/lib"),
    Path("/usr/lib/yabridge"),
]


class LibraryNotFoundError(Exception):
    """libyabridge.so could not be found."""

    def __init__(self, message: str, searched: Sequence[Path] = ()):
        super().__init__(message)
        self.searched = list(searched)


def default_search_paths() -> List[Path]:
    """Get the default probe order for libyabridge.so.

    Returns:
        System library directories followed by ~/.local/share/yabridge.
    """
    return [*SYSTEM_SEARCH_PATHS, get_user_yabridge_dir()]


class BridgeLocator:
    """Resolves the path to libyabridge.so.

    Args:
        yabridge_home: Explicit directory override. When set, the library
            must be directly inside it.
        search_paths: Ordered probe list used when there is no override.
            Defaults to `default_search_paths()`.
    """

    def __init__(
        self,
        yabridge_home: Optional[Path] = None,
        search_paths: Optional[Sequence[Path]] = None,
    ):
        self.yabridge_home = yabridge_home
        self.search_paths = (
            list(search_paths) if search_paths is not None else default_search_paths()
        )

    @classmethod
    def from_config(
        cls,
        config: YabridgectlConfig,
        search_paths: Optional[Sequence[Path]] = None,
    ) -> "BridgeLocator":
        """Create a locator for the given configuration."""
        return cls(config.yabridge_home, search_paths)

    def resolve(self) -> Path:
        """Find libyabridge.so.

        Returns:
            Path to the library.

        Raises:
            LibraryNotFoundError: If the override directory does not contain
                the library, or no probed location does.
        """
        if self.yabridge_home is not None:
            candidate = self.yabridge_home / LIBYABRIDGE_NAME
            if candidate.is_file():
                return candidate
            raise LibraryNotFoundError(
                f"Could not find '{LIBYABRIDGE_NAME}' in '{self.yabridge_home}'",
                [self.yabridge_home],
            )

        for directory in self.search_paths:
            candidate = directory / LIBYABRIDGE_NAME
            if candidate.is_file():
                LOGGER.debug(f"Found {LIBYABRIDGE_NAME} at {candidate}")
                return candidate

        searched = ", ".join(f"'{directory}'" for directory in self.search_paths) or "<none>"
        raise LibraryNotFoundError(
            f"Could not find '{LIBYABRIDGE_NAME}' in any of {searched}. You can override "
            f"the default search path using 'yabridgectl set --path=<path>'.",
            self.search_paths,
        )
