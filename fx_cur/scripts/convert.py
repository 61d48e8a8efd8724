"""CLI entry point for currency conversion."""

from __future__ import annotations

from fx_cur.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    raise SystemExit(main())
