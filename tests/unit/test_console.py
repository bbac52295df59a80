"""Unit tests for the shared CLI consoles."""

from __future__ import annotations

from vaultmark.cli.console import get_console, get_stderr_console, reset_consoles


class TestConsoles:
    """Tests for console sharing."""

    def setup_method(self) -> None:
        reset_consoles()

    def teardown_method(self) -> None:
        reset_consoles()

    def test_consoles_are_shared(self) -> None:
        assert get_console() is get_console()
        assert get_stderr_console() is get_stderr_console()

    def test_stdout_and_stderr_differ(self) -> None:
        assert get_console() is not get_stderr_console()
        assert get_stderr_console().stderr is True
        assert get_console().stderr is False

    def test_reset_builds_fresh_consoles(self) -> None:
        before = get_console()
        reset_consoles()
        assert get_console() is not before
