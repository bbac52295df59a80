"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from loguru import logger

from vaultmark.config import Settings
from vaultmark.fetch import FetchResult
from vaultmark.host import Host, Notifier
from vaultmark.store import BookmarkStore

# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep settings files and logs of the developer machine out of tests."""
    monkeypatch.setenv("VAULTMARK_CONFIG", str(tmp_path / "no-such-config.json"))
    monkeypatch.setenv("VAULTMARK_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("VAULTMARK_VAULT", raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    logger.remove()


# =============================================================================
# Vault Fixtures
# =============================================================================


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Return an empty vault directory."""
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def store(vault: Path) -> BookmarkStore:
    return BookmarkStore(vault)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def host(store: BookmarkStore) -> Host:
    """Host with a silent notifier that only records messages."""
    return Host(store=store, notifier=Notifier(enabled=False))


# =============================================================================
# Fetch Fixtures
# =============================================================================


class FakeFetcher:
    """In-memory fetcher.

    Pages map a URL to its HTML; URLs mapped to None (or missing) fail
    like an unreachable host.
    """

    def __init__(self, pages: dict[str, str | None]) -> None:
        self.pages = pages
        self.calls: list[str] = []

    async def __call__(self, url: str) -> FetchResult:
        self.calls.append(url)
        html = self.pages.get(url)
        if html is None:
            return FetchResult.failure(url, "connection refused")
        return FetchResult.success(url, html, status_code=200)


@pytest.fixture
def make_fetcher() -> Callable[[dict[str, str | None]], FakeFetcher]:
    return FakeFetcher


def _page(title: str | None, body: str = "<p>content</p>") -> str:
    head = f"<head><title>{title}</title></head>" if title is not None else "<head></head>"
    return f"<!DOCTYPE html><html>{head}<body>{body}</body></html>"


@pytest.fixture
def html_page() -> Callable[..., str]:
    """Return a builder for small HTML pages, with or without a title element."""
    return _page
