"""Capability surface the file engine expects from a document buffer."""

from __future__ import annotations

from typing import Protocol

from .state import LineEndingMode


class DocumentAllocationError(MemoryError):
    """Raised by ``reserve`` when the requested capacity cannot be provided."""

    def __init__(self, requested: int, limit: int | None = None) -> None:
        message = f"Cannot reserve {requested} bytes"
        if limit:
            message += f" (limit {limit})"
        super().__init__(message)
        self.requested = requested
        self.limit = limit


class DocumentRangeError(ValueError):
    """Raised when a byte span falls outside the document."""

    def __init__(self, start: int, end: int, length: int) -> None:
        super().__init__(f"Range [{start}, {end}) outside document of {length} bytes")
        self.start = start
        self.end = end
        self.length = length


class DocumentBuffer(Protocol):
    """Opaque byte buffer owned by one editor.

    Only ``mark_save_point`` resets the modified state.
    """

    @property
    def line_ending(self) -> LineEndingMode: ...

    def reserve(self, capacity: int) -> None: ...

    def append_bytes(self, data: bytes | memoryview) -> None: ...

    def read_range(self, start: int, end: int) -> bytes: ...

    def read_into(self, start: int, end: int, target: memoryview) -> int: ...

    def write_range(self, start: int, end: int, data: bytes) -> None: ...

    def length(self) -> int: ...

    def mark_save_point(self) -> None: ...

    def is_at_save_point(self) -> bool: ...

    def begin_grouped_edit(self, label: str = ...) -> None: ...

    def end_grouped_edit(self) -> None: ...

    def set_line_ending_mode(self, mode: LineEndingMode) -> None: ...

    def can_redo(self) -> bool: ...

    def revert_last_edit(self) -> bool: ...


__all__ = ["DocumentBuffer", "DocumentAllocationError", "DocumentRangeError"]
