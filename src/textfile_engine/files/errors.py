"""Failure kinds raised by the file transfer primitives."""

from __future__ import annotations

import os
from abc import abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textfile_engine.dialogs.base import FileDialogs


def describe_os_error(exc: BaseException) -> str:
    """Return the OS-level cause string, the way ``strerror`` would."""

    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


class FileOperationError(RuntimeError):
    """Base class for every terminal file-operation failure."""

    def __init__(self, path: str | os.PathLike[str], cause: str) -> None:
        self.path = os.fspath(path)
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        return f"{self.path}: {self.cause}"

    @abstractmethod
    def report(self, dialogs: "FileDialogs") -> None:
        """Show this failure through ``dialogs``."""


class OpenForReadError(FileOperationError):
    def report(self, dialogs: "FileDialogs") -> None:
        dialogs.open_for_read_error(self.path, self.cause)


class OpenForWriteError(FileOperationError):
    def report(self, dialogs: "FileDialogs") -> None:
        dialogs.open_for_write_error(self.path, self.cause)


class ReadFailureError(FileOperationError):
    def report(self, dialogs: "FileDialogs") -> None:
        dialogs.read_error(self.path, self.cause)


class WriteFailureError(FileOperationError):
    def report(self, dialogs: "FileDialogs") -> None:
        dialogs.write_error(self.path, self.cause)


class FileTooBigError(FileOperationError):
    """The document could not reserve room for the file's contents."""

    def __init__(self, path: str | os.PathLike[str], size: int) -> None:
        self.size = size
        super().__init__(path, f"file too big ({size} bytes)")

    def report(self, dialogs: "FileDialogs") -> None:
        dialogs.file_too_big_error(self.path, self.size)


class RenameFailureError(FileOperationError):
    """The OS rename from ``src`` to ``dst`` failed.

    ``rename_file`` only logs it before falling back to writing ``dst``
    directly; that write reports its own failure.
    """

    def __init__(
        self, dst: str | os.PathLike[str], src: str | os.PathLike[str], cause: str
    ) -> None:
        self.src = os.fspath(src)
        self.dst = os.fspath(dst)
        super().__init__(src, cause)

    def _message(self) -> str:
        return f"{self.src} -> {self.dst}: {self.cause}"

    def report(self, dialogs: "FileDialogs") -> None:
        dialogs.rename_error(self.dst, self.src, self.cause)


class RemoveAfterRenameWarning(FileOperationError):
    """``dst`` holds the content but the old ``src`` could not be removed.

    Reported to the user, never treated as a failed rename.
    """

    def __init__(
        self, dst: str | os.PathLike[str], src: str | os.PathLike[str], cause: str
    ) -> None:
        self.src = os.fspath(src)
        self.dst = os.fspath(dst)
        super().__init__(src, cause)

    def _message(self) -> str:
        return f"{self.src} left behind after moving to {self.dst}: {self.cause}"

    def report(self, dialogs: "FileDialogs") -> None:
        dialogs.remove_renamed_warning(self.dst, self.src, self.cause)


__all__ = [
    "describe_os_error",
    "FileOperationError",
    "OpenForReadError",
    "OpenForWriteError",
    "ReadFailureError",
    "WriteFailureError",
    "FileTooBigError",
    "RenameFailureError",
    "RemoveAfterRenameWarning",
]
