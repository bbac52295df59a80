"""Unit tests for single-URL bookmarking."""

from __future__ import annotations

from pathlib import Path

import pytest

from vaultmark.config import Settings
from vaultmark.errors import (
    NoClipboardContentError,
    NoClipboardError,
    NoUrlSelectedError,
)
from vaultmark.extract import bookmark_url, extract_url
from vaultmark.host import Host


def _clipboard(text: str):
    async def read() -> str:
        return text

    return read


async def _no_clipboard() -> str:
    raise NoClipboardError("no clipboard tool found")


class TestExtractUrl:
    """Tests for extract_url."""

    @pytest.mark.asyncio
    async def test_from_selection(
        self, host: Host, settings: Settings, vault: Path, make_fetcher, html_page
    ) -> None:
        host.selection = "  https://example.com/page\n"
        fetcher = make_fetcher({"https://example.com/page": html_page("Example Page")})

        bookmark = await extract_url(host, settings, fetcher=fetcher)

        assert fetcher.calls == ["https://example.com/page"]
        assert bookmark.file.path == "bookmarks/example_com.Example Page.md"
        assert (vault / bookmark.file.path).read_text(
            encoding="utf-8"
        ) == "https://example.com/page"
        assert host.notifier.messages == [
            "bookmarked: bookmarks/example_com.Example Page.md"
        ]

    @pytest.mark.asyncio
    async def test_from_clipboard(
        self, host: Host, settings: Settings, make_fetcher, html_page
    ) -> None:
        host.selection = "https://ignored.example/"
        host.clipboard = _clipboard("https://clip.example/\n")
        fetcher = make_fetcher({"https://clip.example/": html_page("Clip")})

        bookmark = await extract_url(host, settings, use_clipboard=True, fetcher=fetcher)

        assert fetcher.calls == ["https://clip.example/"]
        assert bookmark.file.path == "bookmarks/clip_example.Clip.md"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("selection", ["", "   ", "\n\t"])
    async def test_empty_selection(
        self, host: Host, settings: Settings, vault: Path, make_fetcher, selection: str
    ) -> None:
        host.selection = selection
        fetcher = make_fetcher({})

        with pytest.raises(NoUrlSelectedError):
            await extract_url(host, settings, fetcher=fetcher)

        assert fetcher.calls == []
        assert list(vault.iterdir()) == []

    @pytest.mark.asyncio
    async def test_blank_clipboard(
        self, host: Host, settings: Settings, make_fetcher
    ) -> None:
        host.clipboard = _clipboard("   ")

        with pytest.raises(NoUrlSelectedError):
            await extract_url(host, settings, use_clipboard=True, fetcher=make_fetcher({}))

    @pytest.mark.asyncio
    async def test_clipboard_errors_propagate(
        self, host: Host, settings: Settings, make_fetcher
    ) -> None:
        host.clipboard = _no_clipboard

        with pytest.raises(NoClipboardError):
            await extract_url(host, settings, use_clipboard=True, fetcher=make_fetcher({}))

    @pytest.mark.asyncio
    async def test_unreachable_page(
        self, host: Host, settings: Settings, vault: Path, make_fetcher
    ) -> None:
        host.selection = "https://dead.example/"

        bookmark = await extract_url(host, settings, fetcher=make_fetcher({}))

        assert bookmark.file.path == (
            "bookmarks/UNAVAILABLE_dead_example.httpsdeadexample.md"
        )
        assert (vault / bookmark.file.path).read_text(
            encoding="utf-8"
        ) == "https://dead.example/"

    @pytest.mark.asyncio
    async def test_non_url_selection_is_bookmarked_as_text(
        self, host: Host, settings: Settings, make_fetcher
    ) -> None:
        host.selection = "just some words"

        bookmark = await extract_url(host, settings, fetcher=make_fetcher({}))

        assert bookmark.file.path == "bookmarks/UNAVAILABLE_just some words.md"


class TestBookmarkUrl:
    """Tests for bookmark_url."""

    @pytest.mark.asyncio
    async def test_page_without_title(
        self, host: Host, settings: Settings, make_fetcher, html_page
    ) -> None:
        url = "https://example.com/untitled"
        fetcher = make_fetcher({url: html_page(None)})

        bookmark = await bookmark_url(host, settings, url, fetcher)

        assert bookmark.title == url
        assert bookmark.file.path == "bookmarks/example_com.httpsexamplecomuntitled.md"

    @pytest.mark.asyncio
    async def test_second_bookmark_reuses_file(
        self, host: Host, settings: Settings, make_fetcher, html_page
    ) -> None:
        url = "https://example.com/"
        fetcher = make_fetcher({url: html_page("Home")})

        first = await bookmark_url(host, settings, url, fetcher)
        second = await bookmark_url(host, settings, url, fetcher)

        assert first.file == second.file
        assert second.created is False


class TestClipboardContentError:
    """The clipboard reader's own empty-clipboard error reaches the caller."""

    @pytest.mark.asyncio
    async def test_propagates(self, host: Host, settings: Settings, make_fetcher) -> None:
        async def empty() -> str:
            raise NoClipboardContentError()

        host.clipboard = empty

        with pytest.raises(NoClipboardContentError):
            await extract_url(host, settings, use_clipboard=True, fetcher=make_fetcher({}))
