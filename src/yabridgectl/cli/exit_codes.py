"""Exit codes for the yabridgectl CLI.

- 0: Success
- 1: Any error (bad arguments, unreadable config, missing directory, ...)
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
