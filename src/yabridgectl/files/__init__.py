"""Plugin discovery and installation status."""

from yabridgectl.files.installation import (
    COMPANION_SUFFIX,
    InstallationCheckError,
    classify,
    companion_path,
)
from yabridgectl.files.scanner import (
    PLUGIN_SUFFIX,
    DirectoryError,
    DirectoryNotFoundError,
    DirectoryPermissionError,
    scan_directory,
)
from yabridgectl.files.status import check_plugin, compose, search_directory

__all__ = [
    "COMPANION_SUFFIX",
    "PLUGIN_SUFFIX",
    "DirectoryError",
    "DirectoryNotFoundError",
    "DirectoryPermissionError",
    "InstallationCheckError",
    "check_plugin",
    "classify",
    "companion_path",
    "compose",
    "scan_directory",
    "search_directory",
]
