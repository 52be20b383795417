"""Configuration data model for yabridgectl.

Defines the typed configuration that represents config.yaml. The value is
immutable: every mutation in `yabridgectl.config.loader` returns a new
instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional

from yabridgectl.core.models import InstallationMethod

DEFAULT_METHOD = InstallationMethod.COPY


@dataclass(frozen=True)
class YabridgectlConfig:
    """Complete yabridgectl configuration.

    Example config.yaml:
        method: copy
        plugin_dirs:
          - /home/user/.wine/drive_c/Program Files/Steinberg/VstPlugins
        yabridge_home: null
    """

    # Normalized absolute paths of registered plugin directories
    plugin_dirs: FrozenSet[Path] = field(default_factory=frozenset)

    # Overrides libyabridge.so discovery when set
    yabridge_home: Optional[Path] = None

    # Intended installation method, never used to report status
    method: InstallationMethod = DEFAULT_METHOD

    @property
    def sorted_plugin_dirs(self) -> List[Path]:
        """Plugin directories in canonical (sorted) order."""
        return sorted(self.plugin_dirs)
