"""Link scanning for batch bookmarking.

Finds every absolute http(s) link in a block of text (typically a Markdown
note), in order of appearance. Links wrapped in Markdown syntax such as
``[label](https://example.com)`` or ``<https://example.com>`` are returned
without the surrounding delimiters.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from urllib.parse import urlsplit

# Candidate: scheme followed by a run of characters that may appear in a URL.
# The lookbehind keeps "xhttp://" and "git+https://" from matching.
_LINK_CANDIDATE = re.compile(
    r"(?<![A-Za-z0-9+.\-])https?://[^\s<>\"'`{}|\\^\[\]]+",
    re.IGNORECASE,
)

# Sentence punctuation that ends a link rather than belonging to it
_TRAILING_PUNCTUATION = ".,;:!?"

_BRACKET_PAIRS = {")": "(", "]": "["}


def _trim(candidate: str) -> str:
    """Drop trailing punctuation and unbalanced closing brackets."""
    while candidate:
        last = candidate[-1]
        if last in _TRAILING_PUNCTUATION:
            candidate = candidate[:-1]
        elif last in _BRACKET_PAIRS and candidate.count(last) > candidate.count(
            _BRACKET_PAIRS[last]
        ):
            candidate = candidate[:-1]
        else:
            break
    return candidate


def _has_host(candidate: str) -> bool:
    try:
        netloc = urlsplit(candidate).netloc
    except ValueError:
        return False
    host = netloc.rsplit("@", 1)[-1]
    return any(ch.isalnum() for ch in host)


def scan_links(text: str) -> Iterator[str]:
    """Yield every link found in text, first to last.

    Duplicates are kept. The scan is pure: calling it again on the same
    text yields the same sequence.

    Args:
        text: Text to scan

    Yields:
        Link strings as they appear in the text
    """
    for match in _LINK_CANDIDATE.finditer(text):
        link = _trim(match.group(0))
        if _has_host(link):
            yield link
