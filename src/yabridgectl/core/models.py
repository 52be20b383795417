"""Shared data models for yabridgectl.

These describe what was found on disk during a status query. None of them
are persisted; they are recomputed on every invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Tuple

if TYPE_CHECKING:
    from yabridgectl.files.scanner import DirectoryError


class InstallationMethod(str, Enum):
    """How libyabridge.so should be placed next to a plugin.

    This is a hint for future installation actions, not a description of
    what is currently on disk.
    """

    COPY = "copy"
    SYMLINK = "symlink"

    def __str__(self) -> str:
        return self.value


class FileKind(str, Enum):
    """Type of the directory entry found at a companion path."""

    REGULAR = "regular"
    SYMLINK = "symlink"


class InstallationState(str, Enum):
    """Observed installation status of a single plugin."""

    COPY = "copy"
    SYMLINK = "symlink"
    NOT_INSTALLED = "not installed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class InstalledArtifact:
    """A libyabridge.so copy or symlink found next to a plugin.

    For symlinks `path` is the link itself, never its target.
    """

    kind: FileKind
    path: Path


@dataclass
class PluginStatus:
    """Installation status for one discovered plugin file."""

    plugin: Path
    artifact: Optional[InstalledArtifact] = None
    error: Optional[str] = None

    @property
    def state(self) -> InstallationState:
        if self.error is not None:
            return InstallationState.UNKNOWN
        if self.artifact is None:
            return InstallationState.NOT_INSTALLED
        if self.artifact.kind == FileKind.SYMLINK:
            return InstallationState.SYMLINK
        return InstallationState.COPY


@dataclass
class SearchResult:
    """All plugins found in one plugin directory, keyed by plugin path.

    Entries are kept in the order the scanner produced them, which is
    sorted by path.
    """

    directory: Path
    plugins: Dict[Path, PluginStatus] = field(default_factory=dict)

    def add(self, status: PluginStatus) -> None:
        self.plugins[status.plugin] = status

    def installation_status(self) -> Iterator[Tuple[Path, PluginStatus]]:
        """Iterate over ``(plugin, status)`` pairs in path order."""
        return iter(self.plugins.items())

    def __len__(self) -> int:
        return len(self.plugins)


@dataclass
class DirectoryReport:
    """Status of one registered plugin directory.

    Exactly one of `result` and `error` is set.
    """

    directory: Path
    result: Optional[SearchResult] = None
    error: Optional["DirectoryError"] = None

    @property
    def ok(self) -> bool:
        return self.error is None
