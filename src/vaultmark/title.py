"""Title extraction from fetched pages."""

from __future__ import annotations

from bs4 import BeautifulSoup
from loguru import logger


def extract_title(raw: str) -> str | None:
    """Return the text of the first ``<title>`` element in a page.

    Parsing is best-effort: malformed or partial markup never raises.

    Args:
        raw: Raw page text (usually HTML)

    Returns:
        The title text with surrounding whitespace stripped, or None if the
        page has no title element
    """
    try:
        soup = BeautifulSoup(raw, "html.parser")
    except Exception as e:  # html.parser can choke on pathological input
        logger.debug(f"[Title] Page did not parse: {e}")
        return None

    title = soup.find("title")
    if title is None:
        return None
    return title.get_text().strip()
