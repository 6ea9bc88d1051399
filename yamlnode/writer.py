"""A text sink that keeps track of the current output position."""

from __future__ import annotations

from typing import TextIO


class OutputWriter:
    """Writes text to a stream, or to an internal buffer when none is given.

    Tracks the number of characters written, the current row and column,
    and whether the current line is a comment.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._buffer: list[str] = []
        self.pos = 0
        self.row = 0
        self.col = 0
        self.comment = False

    def write(self, text: str) -> None:
        """Write text and advance the position counters."""
        if self._stream is not None:
            self._stream.write(text)
        else:
            self._buffer.append(text)
        for ch in text:
            self._advance(ch)

    def _advance(self, ch: str) -> None:
        self.pos += 1
        self.col += 1
        if ch == "\n":
            self.row += 1
            self.col = 0
            self.comment = False

    def getvalue(self) -> str:
        """The buffered text; empty when writing to a stream."""
        return "".join(self._buffer)