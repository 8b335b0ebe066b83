"""Document buffer capability and its in-memory implementation."""

from .document import ByteDocument
from .protocol import DocumentAllocationError, DocumentBuffer, DocumentRangeError
from .state import DEFAULT_LINE_ENDING, LineEndingMode
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_range

__all__ = [
    "ByteDocument",
    "DocumentBuffer",
    "DocumentAllocationError",
    "DocumentRangeError",
    "LineEndingMode",
    "DEFAULT_LINE_ENDING",
    "UndoEntry",
    "UndoTimeline",
    "ensure_range",
]
