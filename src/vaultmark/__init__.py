"""vaultmark: bookmark web pages into a Markdown vault."""

from __future__ import annotations

__version__ = "0.1.0"
