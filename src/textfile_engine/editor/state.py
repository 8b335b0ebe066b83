"""Per-document save, save-as, rename, and close protocol."""

from __future__ import annotations

import os
from typing import Callable, Optional, Protocol

from textfile_engine.buffer import ByteDocument, DocumentBuffer
from textfile_engine.dialogs import FileDialogs, Reply, expand_path
from textfile_engine.files import (
    BufferedFileReader,
    BufferedFileWriter,
    read_file,
    rename_file,
    write_file,
)
from textfile_engine.runtime import telemetry

from .normalize import normalize_document


class SaveNotificationSink(Protocol):
    """Container told about every successful save, save-as, or rename."""

    def on_saved(self, state: "FileEditorState") -> None: ...


class FileEditorState:
    """Ties one document buffer to its file on disk.

    ``file_path`` is empty until the document is first saved or renamed to
    a real path. Every entry point returns ``True`` on success and leaves
    the state consistent on every exit path; failures have already been
    reported through the dialog policy that was passed in.
    """

    def __init__(
        self,
        document: DocumentBuffer,
        file_path: str | os.PathLike[str] = "",
        *,
        parent: Optional[SaveNotificationSink] = None,
        detect_language: Optional[Callable[["FileEditorState"], None]] = None,
        writer: Optional[BufferedFileWriter] = None,
    ) -> None:
        self.document = document
        self.file_path = expand_path(file_path) if os.fspath(file_path) else ""
        self.parent = parent
        self.detect_language = detect_language
        self.writer = writer

    @classmethod
    def load(
        cls,
        path: str | os.PathLike[str],
        dialogs: FileDialogs,
        *,
        create_document: Callable[[], DocumentBuffer] = ByteDocument,
        reader: Optional[BufferedFileReader] = None,
        **kwargs: object,
    ) -> Optional["FileEditorState"]:
        """Open ``path`` into a fresh document, or return ``None``."""

        file_path = expand_path(path)
        document = create_document()
        if not read_file(document, file_path, dialogs, reader=reader):
            return None
        document.mark_save_point()
        return cls(document, file_path, **kwargs)  # type: ignore[arg-type]

    def in_save_point(self) -> bool:
        return self.document.is_at_save_point()

    def save(self, dialogs: FileDialogs) -> bool:
        if not self.file_path:
            return self.save_as(dialogs)
        with telemetry.span(
            "editor::save", component="editor", metadata={"path": self.file_path}
        ):
            if self._write_normalized(
                lambda: write_file(
                    self.file_path, self.document, dialogs, writer=self.writer
                )
            ):
                self.notify_after_save()
                return True
            return False

    def save_as(self, dialogs: FileDialogs) -> bool:
        def accept(path: str) -> bool:
            with telemetry.span(
                "editor::save_as", component="editor", metadata={"path": path}
            ):
                if not self._write_normalized(
                    lambda: write_file(path, self.document, dialogs, writer=self.writer)
                ):
                    return False
                self.file_path = path
                self.notify_after_save()
                return True

        return dialogs.get_save_as_path(self, accept)

    def rename(self, dialogs: FileDialogs) -> bool:
        if not self.file_path:
            return self.save_as(dialogs)

        def accept(path: str) -> bool:
            with telemetry.span(
                "editor::rename",
                component="editor",
                metadata={"src": self.file_path, "dst": path},
            ):
                if not self._write_normalized(
                    lambda: rename_file(
                        path, self.file_path, self.document, dialogs, writer=self.writer
                    )
                ):
                    return False
                self.file_path = path
                self.notify_after_save()
                return True

        return dialogs.get_rename_path(self, accept)

    def close(self, dialogs: FileDialogs) -> bool:
        """Return whether the editor may close, asking to save if modified."""

        if self.in_save_point():
            return True
        if self.file_path:
            reply = dialogs.confirm_save_modified(self)
        else:
            reply = dialogs.confirm_save_untitled(self)
        telemetry.record_event(
            "editor.close_prompt", data={"path": self.file_path, "reply": reply.value}
        )
        return (reply is Reply.YES and self.save(dialogs)) or reply is Reply.NO

    def before_save(self) -> bool:
        """Normalize a modified document; return whether it changed."""

        # With redo history the user may still want to step back into the
        # current text, so it is left untouched.
        if self.in_save_point() or self.document.can_redo():
            return False
        return normalize_document(self.document)

    def _write_normalized(self, write: Callable[[], bool]) -> bool:
        normalized = self.before_save()
        if write():
            return True
        # A failed write leaves the buffer exactly as it was before the attempt.
        if normalized:
            self.document.revert_last_edit()
        return False

    def after_save(self) -> None:
        self.document.mark_save_point()
        if self.detect_language is not None:
            self.detect_language(self)

    def notify_after_save(self) -> None:
        self.after_save()
        telemetry.record_event("file.saved", data={"path": self.file_path})
        if self.parent is not None:
            self.parent.on_saved(self)


__all__ = ["FileEditorState", "SaveNotificationSink"]
