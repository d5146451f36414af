"""CLI entry point for the DM transpiler.

Allows ``python -m dm_transpiler.cli_main``; the click group lives in
``dm_transpiler.cli``.
"""

from __future__ import annotations

from .cli import app

__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
