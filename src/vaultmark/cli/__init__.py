"""CLI package for vaultmark.

Usage:
    from vaultmark.cli import app
"""

from __future__ import annotations

from vaultmark.cli.main import app

__all__ = ["app"]
