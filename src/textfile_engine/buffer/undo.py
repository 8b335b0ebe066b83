"""Linear undo/redo history over byte snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class UndoEntry:
    label: str
    before: bytes
    after: bytes


class UndoTimeline:
    """Undo stack whose position doubles as the save-point marker."""

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []
        self._index: int = -1

    @property
    def index(self) -> int:
        return self._index

    def push(self, entry: UndoEntry) -> None:
        # A new edit after undo discards the redo tail.
        if self._index < len(self._entries) - 1:
            self._entries = self._entries[: self._index + 1]
        self._entries.append(entry)
        self._index = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[UndoEntry]:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]

    def discard_last(self) -> Optional[UndoEntry]:
        """Drop the most recent entry without leaving it available for redo."""

        if not self.can_undo() or self.can_redo():
            return None
        self._index -= 1
        return self._entries.pop()


__all__ = ["UndoEntry", "UndoTimeline"]
