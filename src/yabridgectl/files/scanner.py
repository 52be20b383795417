"""Plugin file discovery.

Walks a plugin directory and lazily yields every Windows VST plugin
(``.dll``) inside it. Symlinked directories are never entered, so cycles
in the tree cannot cause infinite traversal.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Iterator, List

from yabridgectl.core.logging import get_logger

LOGGER = get_logger(__name__)

# Native Windows VST2 plugin module extension, matched case-insensitively
PLUGIN_SUFFIX = ".dll"


class DirectoryError(Exception):
    """A plugin directory could not be opened."""

    def __init__(self, message: str, directory: Path):
        super().__init__(message)
        self.directory = directory


class DirectoryNotFoundError(DirectoryError):
    """The plugin directory does not exist (or is not a directory)."""


class DirectoryPermissionError(DirectoryError):
    """The plugin directory exists but cannot be read."""


def is_plugin_file(name: str) -> bool:
    """Check whether a file name follows the plugin naming convention."""
    return name.lower().endswith(PLUGIN_SUFFIX)


def scan_directory(directory: Path) -> Iterator[Path]:
    """Find all plugin files under a directory.

    The top-level directory is opened immediately, so a missing or
    unreadable directory raises here rather than producing an empty
    sequence. Everything below it is walked lazily, depth-first, with the
    entries of each directory sorted by name. The resulting order is the
    order of the paths' components.

    Subdirectories that cannot be opened during the walk are logged and
    skipped.

    Args:
        directory: Plugin directory to search.

    Returns:
        Iterator over plugin file paths below `directory`. Each call walks the
        tree again.

    Raises:
        DirectoryNotFoundError: If the directory does not exist.
        DirectoryPermissionError: If the directory cannot be read.
    """
    directory = Path(directory)
    entries = _list_directory(directory)
    return _walk(directory, entries)


def _list_directory(directory: Path) -> List[os.DirEntry]:
    """List a directory's entries sorted by name, translating OS errors."""
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)
    except FileNotFoundError as e:
        raise DirectoryNotFoundError(
            f"Directory '{directory}' does not exist", directory
        ) from e
    except NotADirectoryError as e:
        raise DirectoryNotFoundError(f"'{directory}' is not a directory", directory) from e
    except PermissionError as e:
        raise DirectoryPermissionError(
            f"Permission denied while reading '{directory}'", directory
        ) from e
    except OSError as e:
        if e.errno in (errno.ENOENT, errno.ENOTDIR):
            raise DirectoryNotFoundError(
                f"Could not open '{directory}': {e.strerror}", directory
            ) from e
        raise DirectoryPermissionError(
            f"Could not open '{directory}': {e.strerror}", directory
        ) from e


def _walk(directory: Path, entries: List[os.DirEntry]) -> Iterator[Path]:
    for entry in entries:
        path = directory / entry.name
        try:
            # Symlinks to directories are neither entered nor reported
            is_dir = entry.is_dir(follow_symlinks=False)
            is_plugin = not is_dir and is_plugin_file(entry.name) and entry.is_file()
        except OSError as e:
            LOGGER.warning(f"Could not inspect {path}: {e}")
            continue

        if is_dir:
            try:
                children = _list_directory(path)
            except DirectoryError as e:
                LOGGER.warning(f"Skipping {path}: {e}")
                continue
            yield from _walk(path, children)
        elif is_plugin:
            yield path
