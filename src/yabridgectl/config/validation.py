"""Configuration validation for yabridgectl.

Warns on unknown keys in config.yaml. Type errors in known keys are not
handled here; they are fatal and raised by the loader.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from yabridgectl.core.logging import get_logger

LOGGER = get_logger(__name__)

VALID_TOP_LEVEL_KEYS: Set[str] = {
    "plugin_dirs",
    "yabridge_home",
    "method",
}


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate a configuration dictionary.

    Does not raise exceptions - returns (and logs) warnings instead.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            warning = ConfigValidationWarning(
                message=f"Unknown key '{key}'",
                source=source,
                key=str(key),
                suggestion=_suggest_key(str(key), VALID_TOP_LEVEL_KEYS),
            )
            warnings.append(warning)
            _log_warning(warning)

    return warnings


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo.

    Args:
        invalid_key: The invalid key entered.
        valid_keys: Set of valid keys.

    Returns:
        Closest matching valid key, or None if no good match.
    """
    matches = get_close_matches(invalid_key, sorted(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    """Log a validation warning."""
    msg = f"{warning.message} in {warning.source}"
    if warning.suggestion:
        msg += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(msg)
