"""Rich consoles for the vaultmark CLI.

Command output (``config list``, ``commands``) goes to stdout; notices and
logs go to stderr so stdout stays clean for piping.
"""

from __future__ import annotations

from rich.console import Console

# Keyed by "writes to stderr"
_consoles: dict[bool, Console] = {}


def _shared(stderr: bool) -> Console:
    console = _consoles.get(stderr)
    if console is None:
        console = _consoles[stderr] = Console(stderr=stderr)
    return console


def get_console() -> Console:
    """Console for command output."""
    return _shared(stderr=False)


def get_stderr_console() -> Console:
    """Console for notices."""
    return _shared(stderr=True)


def reset_consoles() -> None:
    """Forget the shared consoles; the next call builds fresh ones."""
    _consoles.clear()
