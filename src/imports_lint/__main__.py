"""Allow running as ``python -m imports_lint``."""

from __future__ import annotations

from imports_lint.runner import main

if __name__ == "__main__":
    raise SystemExit(main())
