"""yabridgectl - manage yabridge installations for Windows VST plugins."""

__version__ = "1.0.0"
