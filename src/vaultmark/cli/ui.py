"""Visual components for vaultmark CLI output.

Usage:
    from vaultmark.cli.ui import title, success, warning, info

    title("Commands")
    success("Set bookmark.path = links")
"""

from __future__ import annotations

from rich.console import Console

from vaultmark.cli.console import get_console

MARK_SUCCESS = "✓"  # Checkmark
MARK_ERROR = "✗"  # Cross
MARK_WARNING = "!"
MARK_INFO = "•"  # Bullet
MARK_TITLE = "◆"  # Diamond
MARK_LINE = "│"  # Vertical line


def title(text: str, *, console: Console | None = None) -> None:
    """Display a title with diamond symbol."""
    c = console or get_console()
    c.print(f"[cyan]{MARK_TITLE}[/] [bold]{text}[/]")
    c.print()


def success(text: str, *, console: Console | None = None) -> None:
    """Display a success message with checkmark."""
    c = console or get_console()
    c.print(f"  [green]{MARK_SUCCESS}[/] {text}")


def error(
    text: str, *, detail: str | None = None, console: Console | None = None
) -> None:
    """Display an error message with cross symbol.

    Args:
        text: The error message to display.
        detail: Optional detail text shown on a separate line.
        console: Optional console for output (defaults to shared console).
    """
    c = console or get_console()
    c.print(f"  [red]{MARK_ERROR}[/] {text}")
    if detail:
        c.print(f"    [dim]{MARK_LINE} {detail}[/]")


def warning(text: str, *, console: Console | None = None) -> None:
    """Display a warning message with exclamation symbol."""
    c = console or get_console()
    c.print(f"  [yellow]{MARK_WARNING}[/] {text}")


def info(text: str, *, console: Console | None = None) -> None:
    """Display an info message with bullet symbol."""
    c = console or get_console()
    c.print(f"  [dim]{MARK_INFO}[/] {text}")
