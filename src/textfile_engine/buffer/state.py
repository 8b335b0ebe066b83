"""Line-ending state tracked per document."""

from __future__ import annotations

from enum import Enum


class LineEndingMode(str, Enum):
    """Terminator convention used when serializing new lines."""

    CR = "cr"
    LF = "lf"
    CRLF = "crlf"

    @property
    def terminator(self) -> bytes:
        return _TERMINATORS[self]


_TERMINATORS = {
    LineEndingMode.CR: b"\r",
    LineEndingMode.LF: b"\n",
    LineEndingMode.CRLF: b"\r\n",
}

DEFAULT_LINE_ENDING = LineEndingMode.LF

__all__ = ["LineEndingMode", "DEFAULT_LINE_ENDING"]
