"""Dialog policies consulted by the save/rename protocol."""

from .base import FileDialogs, MessageKind, PathAccept, Reply, expand_path
from .interactive import DialogHooks, InteractiveFileDialogs, PathRequest
from .silent import SILENT_DIALOGS, SilentFileDialogs

__all__ = [
    "FileDialogs",
    "MessageKind",
    "PathAccept",
    "Reply",
    "expand_path",
    "DialogHooks",
    "InteractiveFileDialogs",
    "PathRequest",
    "SilentFileDialogs",
    "SILENT_DIALOGS",
]
