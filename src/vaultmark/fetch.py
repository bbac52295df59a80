"""Page fetching for bookmarking.

A single GET request per URL through ``httpx``. Failures are returned as
data rather than raised: an unreachable page is a normal outcome that the
record builder turns into an unavailable bookmark. The pipeline never
raises on a failed fetch; ``FetchResult.raise_for_error`` is the public
helper for callers outside it that want a ``FetchError`` instead.

Example usage:
    from vaultmark.fetch import fetch_page

    result = await fetch_page("https://example.com", settings.fetch)
    if result.ok:
        print(result.text[:100])
    else:
        print(result.error)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx
from loguru import logger

from vaultmark.config import FetchConfig
from vaultmark.constants import TEXT_CONTENT_TYPES
from vaultmark.errors import FetchError


@dataclass(frozen=True)
class FetchResult:
    """Outcome of fetching one URL.

    Exactly one of ``text`` and ``error`` is set.

    Attributes:
        url: The requested URL
        text: Raw page text on success
        error: Diagnostic message on failure
        status_code: HTTP status, when a response was received
    """

    url: str
    text: str | None = None
    error: str | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def success(cls, url: str, text: str, status_code: int | None = None) -> FetchResult:
        return cls(url=url, text=text, status_code=status_code)

    @classmethod
    def failure(
        cls, url: str, error: str, status_code: int | None = None
    ) -> FetchResult:
        return cls(url=url, error=error, status_code=status_code)

    def raise_for_error(self) -> str:
        """Return the page text, or raise ``FetchError`` for a failed fetch."""
        if self.text is None:
            raise FetchError(self.error or "fetch error")
        return self.text


# Signature of anything that can fetch a page (used for injection in tests)
Fetcher = Callable[[str], Awaitable[FetchResult]]


def is_text_content_type(content_type: str) -> bool:
    """Check whether a Content-Type header denotes textual content.

    A missing header is treated as text; servers that omit it almost
    always serve HTML.
    """
    mime = content_type.split(";", 1)[0].strip().lower()
    if not mime:
        return True
    return mime.startswith("text/") or mime in TEXT_CONTENT_TYPES


async def fetch_page(
    url: str,
    config: FetchConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchResult:
    """Fetch a URL and return its text.

    One round trip, redirects followed, no retry.

    Args:
        url: URL to fetch
        config: Fetch configuration (timeout, user agent)
        transport: Optional httpx transport (mock transports in tests)

    Returns:
        FetchResult with the page text, or with an error message for
        transport errors, HTTP error statuses and non-text responses
    """
    cfg = config or FetchConfig()
    logger.debug(f"[Fetch] GET {url}")

    try:
        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=cfg.timeout,
            headers={"User-Agent": cfg.user_agent},
            transport=transport,
        ) as client:
            response = await client.get(url)
    except httpx.InvalidURL as e:
        logger.debug(f"[Fetch] Invalid URL {url}: {e}")
        return FetchResult.failure(url, f"invalid url: {e}")
    except httpx.HTTPError as e:
        logger.debug(f"[Fetch] Transport error for {url}: {e!r}")
        return FetchResult.failure(url, str(e) or type(e).__name__)

    if response.status_code >= 400:
        logger.debug(f"[Fetch] HTTP {response.status_code} for {url}")
        return FetchResult.failure(
            url, f"HTTP {response.status_code}", status_code=response.status_code
        )

    content_type = response.headers.get("Content-Type", "")
    if not is_text_content_type(content_type):
        logger.debug(f"[Fetch] Non-text response for {url}: {content_type}")
        return FetchResult.failure(
            url,
            f"non-text response ({content_type})",
            status_code=response.status_code,
        )

    logger.debug(
        f"[Fetch] {response.status_code} for {url}, {len(response.content)} bytes"
    )
    return FetchResult.success(url, response.text, status_code=response.status_code)
