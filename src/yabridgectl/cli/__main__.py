"""Allow running the CLI with ``python -m yabridgectl.cli``."""

from yabridgectl.cli import main

raise SystemExit(main())
