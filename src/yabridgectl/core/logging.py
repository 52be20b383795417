"""Logging setup for yabridgectl.

All modules obtain their logger through `get_logger(__name__)`. The CLI
configures the root ``yabridgectl`` logger once, as early as possible.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "yabridgectl"

_DEFAULT_FORMAT = "[%(levelname)s] %(message)s"
_DEBUG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``."""

    @property  # type: ignore[override]
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the yabridgectl root logger.

    Args:
        name: Usually the calling module's ``__name__``.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure the yabridgectl root logger.

    Level selection: ``--debug`` wins over ``--verbose``, which wins over
    ``--quiet``. Without flags only warnings and errors are shown.

    Args:
        debug: Enable debug logging.
        verbose: Enable info-level logging.
        quiet: Only show errors.
        stream: Output stream (defaults to stderr).
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Reconfiguring replaces the previous handler instead of stacking them
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler: logging.Handler
    if stream is None:
        handler = _StderrHandler()
    else:
        handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_DEBUG_FORMAT if debug else _DEFAULT_FORMAT))
    logger.addHandler(handler)
