from __future__ import annotations

import sys
from typing import Protocol, TextIO


class TextWriter(Protocol):
    def write(self, text: str) -> None: ...

    def rewrite_line(self, text: str) -> None: ...

    def write_line(self, text: str = "") -> None: ...


class ConsoleWriter:
    """Line-oriented console output with in-place rewrite of the current line."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self._line_open = False

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()
        self._line_open = bool(text) and not text.endswith("\n")

    def rewrite_line(self, text: str) -> None:
        self.write("\r" + text)

    def write_line(self, text: str = "") -> None:
        # Finish a progress line before printing below it.
        prefix = "\n" if self._line_open else ""
        self.write(prefix + text + "\n")
