"""Bookmarking a single URL from the selection or the clipboard."""

from __future__ import annotations

from functools import partial

from loguru import logger

from vaultmark.config import Settings
from vaultmark.constants import NOTICE_BOOKMARKED
from vaultmark.errors import NoUrlSelectedError
from vaultmark.fetch import Fetcher, fetch_page
from vaultmark.host import Host
from vaultmark.persist import MarkdownFile, persist_record
from vaultmark.record import url_to_record


def default_fetcher(settings: Settings) -> Fetcher:
    """Fetcher bound to the configured timeout and user agent."""
    return partial(fetch_page, config=settings.fetch)


async def bookmark_url(
    host: Host,
    settings: Settings,
    url: str,
    fetcher: Fetcher | None = None,
) -> MarkdownFile:
    """Fetch one URL, build its record and persist it.

    Fetch failures produce an unavailable bookmark; only persistence
    failures raise.

    Raises:
        PersistError: If the bookmark cannot be written
    """
    record = await url_to_record(url, fetcher or default_fetcher(settings))
    if not record.available:
        logger.warning(f"Page unavailable, bookmarking link only: {url}")
    return await persist_record(host.store, settings.bookmark_path(), record)


async def extract_url(
    host: Host,
    settings: Settings,
    *,
    use_clipboard: bool = False,
    fetcher: Fetcher | None = None,
) -> MarkdownFile:
    """Bookmark the selected URL, or the URL on the clipboard.

    Args:
        host: Host collaborators
        settings: Settings loaded for this invocation
        use_clipboard: Read the URL from the clipboard instead of the selection
        fetcher: Optional fetcher override

    Returns:
        Handle to the bookmark file

    Raises:
        NoUrlSelectedError: If the selection/clipboard is empty
        NoClipboardError: If the clipboard cannot be read
        NoClipboardContentError: If the clipboard holds no text
        PersistError: If the bookmark cannot be written
    """
    if use_clipboard:
        url = await host.read_clipboard_text()
    else:
        url = host.get_selected_text()

    url = url.strip()
    if not url:
        raise NoUrlSelectedError()

    bookmark = await bookmark_url(host, settings, url, fetcher)
    host.notify(NOTICE_BOOKMARKED.format(path=bookmark.file.path))
    return bookmark
