"""CLI command groups for vaultmark.

Available command groups:
- config: Settings management commands

Command groups are lazily loaded by VaultmarkGroup in cli/main.py.
"""
