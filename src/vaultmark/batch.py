"""Bookmarking every link of a document."""

from __future__ import annotations

from loguru import logger

from vaultmark.config import Settings
from vaultmark.constants import NOTICE_BOOKMARKED, NOTICE_BOOKMARKING, NOTICE_COMPLETE
from vaultmark.errors import NoActiveDocumentError, PersistError
from vaultmark.extract import bookmark_url, default_fetcher
from vaultmark.fetch import Fetcher
from vaultmark.host import Host
from vaultmark.links import scan_links
from vaultmark.persist import MarkdownFile


async def bookmark_all_links(
    host: Host,
    settings: Settings,
    *,
    fetcher: Fetcher | None = None,
) -> list[MarkdownFile]:
    """Bookmark every link found in the active document.

    Links are processed one at a time in document order; link N+1 is not
    started before link N is persisted. Unreachable pages become
    unavailable bookmarks. The first persistence failure aborts the batch.

    Args:
        host: Host collaborators
        settings: Settings loaded for this invocation
        fetcher: Optional fetcher override

    Returns:
        Bookmark handles in document order

    Raises:
        NoActiveDocumentError: If no document is open (nothing is written)
        PersistError: On the first link that cannot be persisted, or if the
            document cannot be read
    """
    document = host.get_active_document()
    if document is None:
        raise NoActiveDocumentError()

    try:
        text = await host.store.read(document)
    except (OSError, ValueError) as e:
        raise PersistError(str(e), path=document) from e

    fetch = fetcher or default_fetcher(settings)
    bookmarks: list[MarkdownFile] = []

    for url in scan_links(text):
        host.notify(NOTICE_BOOKMARKING.format(url=url))
        bookmark = await bookmark_url(host, settings, url, fetch)
        bookmarks.append(bookmark)
        host.notify(NOTICE_BOOKMARKED.format(path=bookmark.file.path))

    logger.info(f"Complete: {len(bookmarks)} link(s) bookmarked from {document}")
    host.notify(NOTICE_COMPLETE)
    return bookmarks
