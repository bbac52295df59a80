"""Allow running as ``python -m vaultmark``."""

from vaultmark.cli import app

app()
