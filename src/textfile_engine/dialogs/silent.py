"""Dialog policy for unattended runs: declines everything, shows nothing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import FileDialogs, PathAccept, Reply

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textfile_engine.editor.state import FileEditorState


class SilentFileDialogs(FileDialogs):
    def confirm_save_untitled(self, state: "FileEditorState") -> Reply:
        return Reply.CANCEL

    def confirm_save_modified(self, state: "FileEditorState") -> Reply:
        return Reply.CANCEL

    def confirm_overwrite(self, path: str) -> Reply:
        return Reply.CANCEL

    def remove_renamed_warning(self, dst: str, src: str, cause: str) -> None:
        pass

    def rename_error(self, dst: str, src: str, cause: str) -> None:
        pass

    def file_too_big_error(self, path: str, size: int) -> None:
        pass

    def read_error(self, path: str, cause: str) -> None:
        pass

    def write_error(self, path: str, cause: str) -> None:
        pass

    def open_for_read_error(self, path: str, cause: str) -> None:
        pass

    def open_for_write_error(self, path: str, cause: str) -> None:
        pass

    def get_open_path(self, accept: PathAccept) -> bool:
        return False

    def get_save_as_path(self, state: "FileEditorState", accept: PathAccept) -> bool:
        return False

    def get_rename_path(self, state: "FileEditorState", accept: PathAccept) -> bool:
        return False


SILENT_DIALOGS = SilentFileDialogs()

__all__ = ["SilentFileDialogs", "SILENT_DIALOGS"]
