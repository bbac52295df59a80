"""Unit tests for link scanning."""

from __future__ import annotations

from vaultmark.links import scan_links


class TestScanLinks:
    """Tests for scan_links."""

    def test_plain_links_in_order(self) -> None:
        text = "see https://a.example/x then http://b.example and https://c.example/y?z=1"
        assert list(scan_links(text)) == [
            "https://a.example/x",
            "http://b.example",
            "https://c.example/y?z=1",
        ]

    def test_duplicates_are_kept(self) -> None:
        text = "https://a.example https://a.example"
        assert list(scan_links(text)) == ["https://a.example", "https://a.example"]

    def test_no_links(self) -> None:
        assert list(scan_links("")) == []
        assert list(scan_links("nothing to see at example.com")) == []

    def test_scan_is_restartable(self) -> None:
        text = "- https://a.example\n- https://b.example\n"
        assert list(scan_links(text)) == list(scan_links(text))

    def test_markdown_link_syntax(self) -> None:
        text = "[Example](https://example.com/page) and <https://other.example/>"
        assert list(scan_links(text)) == [
            "https://example.com/page",
            "https://other.example/",
        ]

    def test_trailing_punctuation_stripped(self) -> None:
        text = "Read https://example.com/page. Or https://example.org, maybe!"
        assert list(scan_links(text)) == [
            "https://example.com/page",
            "https://example.org",
        ]

    def test_balanced_parentheses_kept(self) -> None:
        text = "(see https://en.wikipedia.org/wiki/Python_(programming_language))"
        assert list(scan_links(text)) == [
            "https://en.wikipedia.org/wiki/Python_(programming_language)"
        ]

    def test_scheme_without_host_ignored(self) -> None:
        assert list(scan_links("broken https:// link")) == []

    def test_embedded_scheme_not_matched(self) -> None:
        assert list(scan_links("git+https://example.com/repo.git")) == []

    def test_uppercase_scheme(self) -> None:
        assert list(scan_links("HTTPS://EXAMPLE.COM/A")) == ["HTTPS://EXAMPLE.COM/A"]

    def test_url_characters_at_end_kept(self) -> None:
        text = "files at https://example.com/snake_ z, https://example.com/~user~ and https://example.com/a*"
        assert list(scan_links(text)) == [
            "https://example.com/snake_",
            "https://example.com/~user~",
            "https://example.com/a*",
        ]

    def test_only_http_schemes(self) -> None:
        text = "ftp://files.example/a.txt and https://web.example/"
        assert list(scan_links(text)) == ["https://web.example/"]
