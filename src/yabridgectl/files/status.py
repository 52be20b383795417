"""Installation status for every registered plugin directory.

Failures are isolated to the smallest unit they concern: a directory that
cannot be scanned only affects its own report, and a plugin whose
companion file cannot be checked is reported as unknown.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Optional

from yabridgectl.config.models import YabridgectlConfig
from yabridgectl.core.logging import get_logger
from yabridgectl.core.models import (
    DirectoryReport,
    InstalledArtifact,
    PluginStatus,
    SearchResult,
)
from yabridgectl.files.installation import InstallationCheckError, classify
from yabridgectl.files.scanner import DirectoryError, scan_directory

LOGGER = get_logger(__name__)

Classifier = Callable[[Path], Optional[InstalledArtifact]]


def check_plugin(plugin: Path, classifier: Classifier = classify) -> PluginStatus:
    """Get the installation status of a single plugin file."""
    try:
        return PluginStatus(plugin, artifact=classifier(plugin))
    except InstallationCheckError as e:
        LOGGER.warning(str(e))
        return PluginStatus(plugin, error=str(e))


def search_directory(directory: Path, classifier: Classifier = classify) -> SearchResult:
    """Scan one plugin directory and classify every plugin in it.

    Args:
        directory: Plugin directory to search.
        classifier: Function used to classify each plugin file.

    Returns:
        SearchResult with one entry per plugin, in path order.

    Raises:
        DirectoryError: If the directory cannot be opened.
    """
    result = SearchResult(directory)
    for plugin in scan_directory(directory):
        result.add(check_plugin(plugin, classifier))
    LOGGER.debug(f"Found {len(result)} plugin(s) in {directory}")
    return result


def compose(
    config: YabridgectlConfig, classifier: Classifier = classify
) -> Iterator[DirectoryReport]:
    """Build status reports for all registered plugin directories.

    Directories are processed one at a time in canonical order, so callers
    can show a report before the next directory has been scanned.

    Args:
        config: Current configuration.
        classifier: Function used to classify each plugin file.

    Yields:
        One DirectoryReport per registered directory.
    """
    for directory in config.sorted_plugin_dirs:
        try:
            result = search_directory(directory, classifier)
        except DirectoryError as e:
            LOGGER.info(f"Could not search {directory}: {e}")
            yield DirectoryReport(directory, error=e)
            continue
        yield DirectoryReport(directory, result=result)
