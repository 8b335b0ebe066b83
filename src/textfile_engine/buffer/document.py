"""In-memory byte document used as the editor's text buffer."""

from __future__ import annotations

from typing import Optional

from textfile_engine.runtime.settings import get_settings

from .protocol import DocumentAllocationError
from .state import DEFAULT_LINE_ENDING, LineEndingMode
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_range


class ByteDocument:
    """Byte buffer with save-point tracking and grouped undo.

    Content passed to the constructor counts as the saved state. Bytes
    appended afterwards (the load path) are not undoable and leave the
    document modified until ``mark_save_point`` runs. Ranged writes are
    recorded in ``undo_history``; walking the history back to the save
    point makes the document clean again.
    """

    def __init__(
        self,
        data: bytes = b"",
        *,
        max_capacity: Optional[int] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self._data = bytearray(data)
        self._capacity = len(self._data)
        if max_capacity is None:
            max_capacity = get_settings().max_document_size
        self.max_capacity = max_capacity
        self.undo_history = undo or UndoTimeline()
        self._line_ending = DEFAULT_LINE_ENDING
        self._save_index = self.undo_history.index
        self._unrecorded_changes = False
        self._group_depth = 0
        self._group_label = ""
        self._group_before: bytes | None = None

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def line_ending(self) -> LineEndingMode:
        return self._line_ending

    def set_line_ending_mode(self, mode: LineEndingMode) -> None:
        self._line_ending = LineEndingMode(mode)

    def length(self) -> int:
        return len(self._data)

    def reserve(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        if self.max_capacity and capacity > self.max_capacity:
            raise DocumentAllocationError(capacity, self.max_capacity)
        self._capacity = max(self._capacity, capacity)

    def append_bytes(self, data: bytes | memoryview) -> None:
        if not data:
            return
        self._data.extend(data)
        self._capacity = max(self._capacity, len(self._data))
        self._unrecorded_changes = True

    def read_range(self, start: int, end: int) -> bytes:
        start, end = ensure_range(len(self._data), start, end)
        return bytes(self._data[start:end])

    def read_into(self, start: int, end: int, target: memoryview) -> int:
        """Copy ``[start, end)`` into ``target`` and return the byte count."""

        start, end = ensure_range(len(self._data), start, end)
        count = end - start
        with memoryview(self._data) as view:
            target[:count] = view[start:end]
        return count

    def write_range(self, start: int, end: int, data: bytes) -> None:
        """Replace ``[start, end)`` with ``data`` (which may differ in size)."""

        start, end = ensure_range(len(self._data), start, end)
        before = bytes(self._data) if self._group_depth == 0 else None
        self._data[start:end] = data
        self._capacity = max(self._capacity, len(self._data))
        if before is not None and before != self._data:
            self.undo_history.push(
                UndoEntry(label="write_range", before=before, after=bytes(self._data))
            )

    def set_bytes(self, data: bytes) -> None:
        self.write_range(0, len(self._data), data)

    def begin_grouped_edit(self, label: str = "grouped_edit") -> None:
        if self._group_depth == 0:
            self._group_label = label
            self._group_before = bytes(self._data)
        self._group_depth += 1

    def end_grouped_edit(self) -> None:
        if self._group_depth == 0:
            raise RuntimeError("end_grouped_edit without begin_grouped_edit")
        self._group_depth -= 1
        if self._group_depth:
            return
        before, self._group_before = self._group_before, None
        if before is not None and before != self._data:
            self.undo_history.push(
                UndoEntry(
                    label=self._group_label, before=before, after=bytes(self._data)
                )
            )

    def can_undo(self) -> bool:
        return self.undo_history.can_undo()

    def can_redo(self) -> bool:
        return self.undo_history.can_redo()

    def undo(self) -> bool:
        entry = self.undo_history.undo()
        if entry is None:
            return False
        self._data[:] = entry.before
        return True

    def redo(self) -> bool:
        entry = self.undo_history.redo()
        if entry is None:
            return False
        self._data[:] = entry.after
        return True

    def revert_last_edit(self) -> bool:
        """Roll back the newest edit as if it never happened (no redo step)."""

        entry = self.undo_history.discard_last()
        if entry is None:
            return False
        self._data[:] = entry.before
        return True

    def mark_save_point(self) -> None:
        self._save_index = self.undo_history.index
        self._unrecorded_changes = False

    def is_at_save_point(self) -> bool:
        return (
            not self._unrecorded_changes
            and self.undo_history.index == self._save_index
        )


__all__ = ["ByteDocument"]
