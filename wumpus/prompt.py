"""Reading player input from standard input."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_TRIM = " \t\n\r\f\v"


class _StdinBuffer:
    """Keeps the unread rest of a line that a single-character read left behind."""

    def __init__(self) -> None:
        self.stream: Optional[TextIO] = None
        self.rest: Optional[str] = None

    def _sync(self) -> TextIO:
        if self.stream is not sys.stdin:
            self.stream = sys.stdin
            self.rest = None
        return self.stream

    def _read_line(self) -> str:
        line = self._sync().readline()
        if not line:
            raise EOFError("end of input")
        return line[:-1] if line.endswith("\n") else line

    def line(self) -> str:
        self._sync()
        if self.rest is not None:
            text, self.rest = self.rest, None
            return text
        return self._read_line()

    def char(self) -> str:
        self._sync()
        while True:
            text = self.rest if self.rest is not None else self._read_line()
            stripped = text.lstrip()
            if stripped:
                self.rest = stripped[1:]
                return stripped[0]
            self.rest = None


_buffer = _StdinBuffer()


def prompt_user(message: str) -> str:
    """Show message once, then return the first non-blank input line, trimmed."""
    sys.stdout.write(message)
    sys.stdout.flush()
    while True:
        text = _buffer.line().strip(_TRIM)
        if text:
            return text


def read_choice() -> str:
    """Return the next non-whitespace character typed, leaving the rest of its line unread."""
    sys.stdout.flush()
    return _buffer.char()