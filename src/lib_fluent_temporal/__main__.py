"""Allow ``python -m lib_fluent_temporal``."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
