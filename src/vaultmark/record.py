"""Markdown records: the canonical form of one bookmarked page."""

from __future__ import annotations

from dataclasses import dataclass

from vaultmark.fetch import Fetcher, FetchResult
from vaultmark.title import extract_title


@dataclass(frozen=True)
class MarkdownRecord:
    """One bookmark before it is written to the vault.

    Attributes:
        title: Page title, or the URL itself when no title is known
        content: Body of the bookmark file (the URL)
        available: Whether the page was fetched successfully
    """

    title: str
    content: str
    available: bool


def build_record(url: str, fetched: FetchResult) -> MarkdownRecord:
    """Combine a URL and its fetch outcome into a record.

    Total over its inputs:

    - fetched, title found: title is the page title
    - fetched, no title: title is the URL
    - fetch failed: title is the URL and the record is unavailable
    """
    if not fetched.ok:
        return MarkdownRecord(title=url, content=url, available=False)

    title = extract_title(fetched.text or "")
    return MarkdownRecord(
        title=url if title is None else title,
        content=url,
        available=True,
    )


async def url_to_record(url: str, fetcher: Fetcher) -> MarkdownRecord:
    """Fetch a URL and build its record."""
    return build_record(url, await fetcher(url))
