"""Installation status of a single plugin.

Every ``Plugin.dll`` needs a ``Plugin.so`` next to it, which is either a
copy of or a symlink to libyabridge.so. Classification only looks at the
directory entry itself: a symlink is reported as a symlink wherever it
points, and a regular file is reported as a copy without comparing its
contents to the bridge library.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Optional

from yabridgectl.core.models import FileKind, InstalledArtifact

# Extension of the per-plugin bridge library
COMPANION_SUFFIX = ".so"


class InstallationCheckError(Exception):
    """The companion file of a plugin could not be inspected."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


def companion_path(plugin_path: Path) -> Path:
    """Get the path where a plugin's libyabridge.so copy or link belongs.

    Args:
        plugin_path: Path to a ``.dll`` plugin file.

    Returns:
        The same path with the extension replaced by ``.so``.
    """
    return plugin_path.with_suffix(COMPANION_SUFFIX)


def classify(plugin_path: Path) -> Optional[InstalledArtifact]:
    """Determine how yabridge is installed for a plugin.

    Args:
        plugin_path: Path to a ``.dll`` plugin file.

    Returns:
        None when there is no companion file, otherwise an InstalledArtifact
        describing the companion entry.

    Raises:
        InstallationCheckError: If the companion path cannot be inspected, or
            it is something other than a regular file or a symlink.
    """
    path = companion_path(plugin_path)
    try:
        mode = os.lstat(path).st_mode
    except FileNotFoundError:
        return None
    except OSError as e:
        raise InstallationCheckError(
            f"Could not check '{path}': {e.strerror or e}", path
        ) from e

    if stat.S_ISLNK(mode):
        return InstalledArtifact(FileKind.SYMLINK, path)
    if stat.S_ISREG(mode):
        return InstalledArtifact(FileKind.REGULAR, path)

    raise InstallationCheckError(f"'{path}' is not a regular file or a symlink", path)
