"""Locating the libyabridge.so bridge library."""

from yabridgectl.bridge.locator import (
    LIBYABRIDGE_NAME,
    BridgeLocator,
    LibraryNotFoundError,
    default_search_paths,
)

__all__ = [
    "LIBYABRIDGE_NAME",
    "BridgeLocator",
    "LibraryNotFoundError",
    "default_search_paths",
]
