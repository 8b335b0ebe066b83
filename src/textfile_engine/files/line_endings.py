"""Streaming detection of a document's line-ending convention."""

from __future__ import annotations

from textfile_engine.buffer import DEFAULT_LINE_ENDING, DocumentBuffer, LineEndingMode

_CR = 0x0D
_LF = 0x0A


class LineEndingDetector:
    """Latches onto the first line terminator seen across successive chunks.

    Only two pieces of state are kept: whether detection is still pending
    and the current best guess. A CR that ends a chunk sets the guess to
    ``CR`` while detection stays pending, so the next chunk can still turn
    it into ``CRLF``. Once resolved, ``analyze`` does nothing.
    """

    __slots__ = ("pending", "mode")

    def __init__(self) -> None:
        self.pending = True
        self.mode = DEFAULT_LINE_ENDING

    def analyze(self, chunk: bytes | memoryview) -> None:
        if not self.pending or not len(chunk):
            return
        data = bytes(chunk)
        if self.mode is LineEndingMode.CR:
            self._resolve(LineEndingMode.CRLF if data[0] == _LF else LineEndingMode.CR)
            return

        cr = data.find(b"\r")
        lf = data.find(b"\n")
        if lf != -1 and (cr == -1 or lf < cr):
            self._resolve(LineEndingMode.LF)
        elif cr == -1:
            return
        elif cr + 1 < len(data):
            self._resolve(
                LineEndingMode.CRLF if data[cr + 1] == _LF else LineEndingMode.CR
            )
        else:
            self.mode = LineEndingMode.CR

    def _resolve(self, mode: LineEndingMode) -> None:
        self.mode = mode
        self.pending = False

    def apply(self, document: DocumentBuffer) -> None:
        document.set_line_ending_mode(self.mode)


def detect_line_ending(data: bytes) -> LineEndingMode:
    detector = LineEndingDetector()
    detector.analyze(data)
    return detector.mode


__all__ = ["LineEndingDetector", "detect_line_ending"]
