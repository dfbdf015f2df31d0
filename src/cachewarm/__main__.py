"""Entry point for ``python -m cachewarm``."""

from cachewarm.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
