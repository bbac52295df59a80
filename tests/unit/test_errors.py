"""Unit tests for the error taxonomy."""

from __future__ import annotations

import pytest

from vaultmark.errors import (
    ConfigError,
    ErrorKind,
    FetchError,
    NoActiveDocumentError,
    NoClipboardContentError,
    NoClipboardError,
    NoUrlSelectedError,
    PersistError,
    VaultmarkError,
)


class TestErrorMessages:
    """User-facing descriptions and kinds."""

    @pytest.mark.parametrize(
        ("error", "message", "kind"),
        [
            (
                NoActiveDocumentError(),
                "expected to have a file open but none were active",
                ErrorKind.INPUT,
            ),
            (NoUrlSelectedError(), "select a url to bookmark", ErrorKind.INPUT),
            (NoClipboardError(), "no clipboard available", ErrorKind.INPUT),
            (NoClipboardContentError(), "no url in clipboard", ErrorKind.INPUT),
            (ConfigError("bad"), "error loading settings. bad", ErrorKind.INPUT),
            (FetchError("timed out"), "fetch error `timed out`", ErrorKind.TRANSPORT),
            (
                PersistError("Permission denied"),
                "unexpected error `Permission denied`",
                ErrorKind.PERSISTENCE,
            ),
        ],
    )
    def test_message_and_kind(
        self, error: VaultmarkError, message: str, kind: ErrorKind
    ) -> None:
        assert isinstance(error, VaultmarkError)
        assert str(error) == message
        assert error.kind is kind

    def test_detail_is_kept(self) -> None:
        error = NoClipboardError("xclip: Can't open display")
        assert error.detail == "xclip: Can't open display"
        assert str(error) == "no clipboard available"

    def test_persist_error_path(self) -> None:
        error = PersistError("disk full", path="bookmarks/a.md")
        assert error.path == "bookmarks/a.md"
        assert error.detail == "disk full"
