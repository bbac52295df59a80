"""Error classes for vaultmark.

Every failure that crosses a boundary (network, filesystem, clipboard,
configuration) is wrapped into a ``VaultmarkError`` at the first crossing
point. Each error carries an ``ErrorKind`` tag and keeps the underlying
platform message in ``detail`` as an opaque diagnostic.

Error Hierarchy:
    VaultmarkError (base)
    ├── NoActiveDocumentError (input)
    ├── NoUrlSelectedError (input)
    ├── NoClipboardError (input)
    ├── NoClipboardContentError (input)
    ├── ConfigError (input)
    ├── FetchError (transport, never fatal)
    └── PersistError (persistence)

Usage:
    try:
        await bookmark_all_links(host, settings)
    except VaultmarkError as e:
        notifier.notify(f"error: {e}")
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Failure taxonomy."""

    INPUT = "input"
    TRANSPORT = "transport"
    PARSE = "parse"
    PERSISTENCE = "persistence"


class VaultmarkError(Exception):
    """Base exception for all vaultmark errors.

    Attributes:
        kind: Which part of the taxonomy the error belongs to
        detail: Original platform message, if any (never parsed)
    """

    __slots__ = ("kind", "detail")

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.detail = detail


class NoActiveDocumentError(VaultmarkError):
    """Raised when a command needs an open document and none is active."""

    def __init__(self) -> None:
        super().__init__(
            "expected to have a file open but none were active",
            kind=ErrorKind.INPUT,
        )


class NoUrlSelectedError(VaultmarkError):
    """Raised when the selection (or clipboard) holds no URL."""

    def __init__(self) -> None:
        super().__init__("select a url to bookmark", kind=ErrorKind.INPUT)


class NoClipboardError(VaultmarkError):
    """Raised when the platform clipboard cannot be read."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("no clipboard available", kind=ErrorKind.INPUT, detail=detail)


class NoClipboardContentError(VaultmarkError):
    """Raised when the clipboard is readable but holds no text."""

    def __init__(self) -> None:
        super().__init__("no url in clipboard", kind=ErrorKind.INPUT)


class ConfigError(VaultmarkError):
    """Raised when the settings file cannot be loaded or validated."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            f"error loading settings. {detail}",
            kind=ErrorKind.INPUT,
            detail=detail,
        )


class FetchError(VaultmarkError):
    """Transport failure while fetching a page.

    The pipeline never raises this: fetch failures are downgraded into an
    unavailable record. It exists so callers outside the pipeline can turn
    a failed ``FetchResult`` into an exception.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(
            f"fetch error `{detail}`",
            kind=ErrorKind.TRANSPORT,
            detail=detail,
        )


class PersistError(VaultmarkError):
    """Raised when creating the bookmark folder or file fails."""

    def __init__(self, detail: str, *, path: str | None = None) -> None:
        super().__init__(
            f"unexpected error `{detail}`",
            kind=ErrorKind.PERSISTENCE,
            detail=detail,
        )
        self.path = path
