"""Tests for pi.table.terminal -- terminal width detection."""

from __future__ import annotations

import io
import os

import pytest

from pi.table.terminal import detect_terminal_width


class FakeTerminalStream(io.StringIO):
    """A text stream that claims to be a terminal."""

    def __init__(self, fileno: int | None = 1) -> None:
        super().__init__()
        self._fileno = fileno

    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        if self._fileno is None:
            raise OSError("no file descriptor")
        return self._fileno


class TestDetectTerminalWidth:
    """Terminal width is only reported for real terminals."""

    def test_non_tty_stream(self) -> None:
        assert detect_terminal_width(io.StringIO()) is None

    def test_tty_stream(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((120, 40)))
        assert detect_terminal_width(FakeTerminalStream()) == 120

    def test_size_query_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(fd: int) -> os.terminal_size:
            raise OSError("not a terminal")

        monkeypatch.setattr(os, "get_terminal_size", fail)
        assert detect_terminal_width(FakeTerminalStream()) is None

    def test_no_file_descriptor(self) -> None:
        assert detect_terminal_width(FakeTerminalStream(fileno=None)) is None

    def test_defaults_to_stdout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdout", io.StringIO())
        assert detect_terminal_width() is None
