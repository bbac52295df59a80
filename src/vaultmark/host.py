"""Host collaborators: vault, active document, selection, clipboard, notices.

The pipeline never talks to the terminal or the operating system directly;
it goes through a ``Host``. The CLI builds one from its arguments, tests
build one around a temporary vault.
"""

from __future__ import annotations

import shutil
import sys
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

import anyio
from loguru import logger
from rich.console import Console
from rich.markup import escape

from vaultmark.errors import NoClipboardContentError, NoClipboardError
from vaultmark.store import BookmarkStore

# Clipboard readers by preference; the first one installed is used
_CLIPBOARD_COMMANDS: dict[str, list[list[str]]] = {
    "darwin": [["pbpaste"]],
    "win32": [["powershell", "-NoProfile", "-Command", "Get-Clipboard -Raw"]],
    "linux": [
        ["wl-paste", "--no-newline"],
        ["xclip", "-selection", "clipboard", "-o"],
        ["xsel", "--clipboard", "--output"],
    ],
}


def _clipboard_command() -> list[str] | None:
    platform = "linux" if sys.platform.startswith(("linux", "freebsd")) else sys.platform
    for command in _CLIPBOARD_COMMANDS.get(platform, []):
        if shutil.which(command[0]):
            return command
    return None


async def read_clipboard() -> str:
    """Read text from the system clipboard.

    Raises:
        NoClipboardError: If no clipboard tool is available or it fails
        NoClipboardContentError: If the clipboard holds no text
    """
    command = _clipboard_command()
    if command is None:
        raise NoClipboardError("no clipboard tool found")

    logger.debug(f"[Clipboard] Reading with {command[0]}")
    try:
        result = await anyio.run_process(command, check=False)
    except OSError as e:
        raise NoClipboardError(str(e)) from e

    text = result.stdout.decode("utf-8", errors="replace")
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        # wl-paste exits non-zero with "Nothing is copied" for an empty clipboard
        if "nothing is copied" in stderr.lower():
            raise NoClipboardContentError()
        raise NoClipboardError(stderr or f"{command[0]} exited with {result.returncode}")

    if not text.strip():
        raise NoClipboardContentError()
    return text


class Notifier:
    """User-visible transient messages.

    Messages are printed to stderr and mirrored to the log. They are
    fire-and-forget: nothing the notifier does can fail a command.
    """

    def __init__(self, console: Console | None = None, enabled: bool = True) -> None:
        self.console = console or Console(stderr=True)
        self.enabled = enabled
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
        logger.debug(f"[Notice] {message}")
        if self.enabled:
            style = "red" if message.startswith("error:") else "dim"
            self.console.print(f"[{style}]{escape(message)}[/{style}]", highlight=False)


@dataclass
class Host:
    """Everything the commands need from their environment.

    Attributes:
        store: The vault
        active_document: Vault-relative path of the open document, if any
        selection: Currently selected text
        notifier: Where notices go
        clipboard: Coroutine function returning clipboard text
    """

    store: BookmarkStore
    active_document: str | None = None
    selection: str = ""
    notifier: Notifier = field(default_factory=Notifier)
    clipboard: Callable[[], Awaitable[str]] = read_clipboard

    def get_active_document(self) -> str | None:
        return self.active_document

    def get_selected_text(self) -> str:
        return self.selection

    async def read_clipboard_text(self) -> str:
        return await self.clipboard()

    def notify(self, message: str) -> None:
        self.notifier.notify(message)
