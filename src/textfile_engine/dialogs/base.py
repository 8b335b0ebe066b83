"""Dialog policy contract shared by interactive and silent front-ends."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textfile_engine.editor.state import FileEditorState

PathAccept = Callable[[str], bool]


class Reply(str, Enum):
    """Answer to a confirmation prompt."""

    YES = "yes"
    NO = "no"
    CANCEL = "cancel"


class MessageKind(str, Enum):
    CONFIRMATION = "confirmation"
    WARNING = "warning"
    ERROR = "error"


def expand_path(path: str | os.PathLike[str]) -> str:
    """Return ``path`` in absolute form with ``~`` expanded."""

    return os.path.abspath(os.path.expanduser(os.fspath(path)))


class FileDialogs(ABC):
    """Everything the save/rename protocol may ask of the user.

    Error reports return nothing; the failing operation reports its own
    result. Path getters call ``accept`` with each candidate path and
    return whether one was accepted.
    """

    @abstractmethod
    def confirm_save_untitled(self, state: "FileEditorState") -> Reply: ...

    @abstractmethod
    def confirm_save_modified(self, state: "FileEditorState") -> Reply: ...

    @abstractmethod
    def confirm_overwrite(self, path: str) -> Reply: ...

    @abstractmethod
    def remove_renamed_warning(self, dst: str, src: str, cause: str) -> None: ...

    @abstractmethod
    def rename_error(self, dst: str, src: str, cause: str) -> None: ...

    @abstractmethod
    def file_too_big_error(self, path: str, size: int) -> None: ...

    @abstractmethod
    def read_error(self, path: str, cause: str) -> None: ...

    @abstractmethod
    def write_error(self, path: str, cause: str) -> None: ...

    @abstractmethod
    def open_for_read_error(self, path: str, cause: str) -> None: ...

    @abstractmethod
    def open_for_write_error(self, path: str, cause: str) -> None: ...

    @abstractmethod
    def get_open_path(self, accept: PathAccept) -> bool: ...

    @abstractmethod
    def get_save_as_path(
        self, state: "FileEditorState", accept: PathAccept
    ) -> bool: ...

    @abstractmethod
    def get_rename_path(self, state: "FileEditorState", accept: PathAccept) -> bool: ...

    def can_overwrite(self, path: str) -> bool:
        return not os.path.exists(path) or self.confirm_overwrite(path) is Reply.YES


__all__ = ["FileDialogs", "MessageKind", "PathAccept", "Reply", "expand_path"]
