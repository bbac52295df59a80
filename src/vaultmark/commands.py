"""Command table.

Each user-facing action is an immutable ``Command`` record with a stable
id, a display name and an async handler. The table is built once at import
time; ``run_command`` is the single entry point hosts use to invoke one.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from loguru import logger

from vaultmark.batch import bookmark_all_links
from vaultmark.config import ConfigManager, Settings
from vaultmark.constants import NOTICE_ERROR
from vaultmark.errors import VaultmarkError
from vaultmark.extract import extract_url
from vaultmark.fetch import Fetcher
from vaultmark.host import Host

Handler = Callable[[Host, Settings, Fetcher | None], Awaitable[Any]]


@dataclass(frozen=True)
class Command:
    """A named, invocable action."""

    id: str
    name: str
    handler: Handler


async def _extract(host: Host, settings: Settings, fetcher: Fetcher | None) -> Any:
    return await extract_url(host, settings, use_clipboard=False, fetcher=fetcher)


async def _import(host: Host, settings: Settings, fetcher: Fetcher | None) -> Any:
    return await extract_url(host, settings, use_clipboard=True, fetcher=fetcher)


async def _bookmark_all(host: Host, settings: Settings, fetcher: Fetcher | None) -> Any:
    return await bookmark_all_links(host, settings, fetcher=fetcher)


EXTRACT_URL = Command(id="extract-url", name="Extract", handler=_extract)
IMPORT_URL = Command(id="import-url", name="Import From Clipboard", handler=_import)
BOOKMARK_ALL_LINKS = Command(
    id="bookmarkAllLinks", name="Bookmark All Links", handler=_bookmark_all
)

COMMANDS: MappingProxyType[str, Command] = MappingProxyType(
    {cmd.id: cmd for cmd in (EXTRACT_URL, IMPORT_URL, BOOKMARK_ALL_LINKS)}
)


def get_command(command_id: str) -> Command:
    """Look up a command by id.

    Raises:
        KeyError: If no command has that id
    """
    return COMMANDS[command_id]


async def run_command(
    command: Command,
    host: Host,
    config_manager: ConfigManager | None = None,
    fetcher: Fetcher | None = None,
) -> bool:
    """Run a command the way a host does.

    Settings are loaded fresh for the invocation. Any vaultmark error is
    reported as a single ``error: <description>`` notice.

    Returns:
        True on success, False if the command failed
    """
    manager = config_manager or ConfigManager()
    logger.debug(f"[Command] {command.id}")

    try:
        settings = manager.load_settings()
        await command.handler(host, settings, fetcher)
    except VaultmarkError as e:
        logger.debug(f"[Command] {command.id} failed ({e.kind.value}): {e}")
        host.notify(NOTICE_ERROR.format(error=e))
        return False

    return True
