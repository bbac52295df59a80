"""Filename derivation for bookmark files.

Filenames are a pure function of the record so re-bookmarking the same
page lands on the same path:

    <domain_with_underscores>.<sanitized title>.md
    UNAVAILABLE_<domain_with_underscores>.<sanitized title>.md

When the content has no domain the sanitized title is used alone.
"""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import urlsplit

from vaultmark.constants import BOOKMARK_SUFFIX, UNAVAILABLE_PREFIX
from vaultmark.record import MarkdownRecord

# Everything except ASCII letters, digits, hyphens and whitespace
_TITLE_STRIP_PATTERN = re.compile(r"[^a-zA-Z0-9\-\s]")

# Host names that are safe to embed in a filename
_HOST_PATTERN = re.compile(r"[a-z0-9._-]+")

# Longest "<domain>.<title>" part of a filename, before prefix and suffix
MAX_NAME_LENGTH = 200


def sanitize_title(title: str) -> str:
    """Strip characters that are unsafe in a filename.

    Examples:
        "Hello, World! #1" -> "Hello World 1"
        "Café - Menu" -> "Caf - Menu"

    Args:
        title: Raw title text

    Returns:
        Title containing only letters, digits, hyphens and non-newline
        whitespace (possibly empty)
    """
    return _TITLE_STRIP_PATTERN.sub("", title).replace("\n", "")


def url_domain(url: str) -> str | None:
    """Extract the domain of an absolute URL.

    Returns None for strings that do not parse as a URL with a host, for
    hosts with characters that are not valid in a host name, and for IP
    address hosts, which have no domain.
    """
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError:
        return None

    if not parts.scheme or not host:
        return None

    if not _HOST_PATTERN.fullmatch(host):
        return None

    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def derive_filename(record: MarkdownRecord) -> str:
    """Map a record to its bookmark filename.

    The domain-qualified form always wins when a domain is available, so
    identically titled pages from different sites do not collide. An empty
    sanitized title is kept as is. Long titles are cut so the name stays
    within MAX_NAME_LENGTH characters.

    Args:
        record: Record to name

    Returns:
        Filename with ``.md`` suffix, prefixed with ``UNAVAILABLE_`` when
        the page could not be fetched
    """
    title = sanitize_title(record.title)
    domain = url_domain(record.content)

    prefix = ""
    if domain and len(domain) < MAX_NAME_LENGTH:
        prefix = f"{domain.replace('.', '_')}."
    base = prefix + title[: MAX_NAME_LENGTH - len(prefix)]
    filename = f"{base}{BOOKMARK_SUFFIX}"

    if not record.available:
        return f"{UNAVAILABLE_PREFIX}{filename}"
    return filename
