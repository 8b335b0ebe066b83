"""Editor-level file protocol: open, save, save-as, rename, close."""

from .normalize import (
    ensure_newline_at_end,
    normalize_bytes,
    normalize_document,
    strip_trailing_whitespace,
)
from .open import open_file
from .state import FileEditorState, SaveNotificationSink

__all__ = [
    "FileEditorState",
    "SaveNotificationSink",
    "open_file",
    "normalize_document",
    "normalize_bytes",
    "strip_trailing_whitespace",
    "ensure_newline_at_end",
]
