"""Dialog policy that asks the user through host-provided hooks."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Tuple

from textfile_engine.runtime import telemetry

from .base import FileDialogs, MessageKind, PathAccept, Reply, expand_path

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textfile_engine.editor.state import FileEditorState

YES_NO_CANCEL: Tuple[Reply, ...] = (Reply.YES, Reply.NO, Reply.CANCEL)
YES_NO: Tuple[Reply, ...] = (Reply.YES, Reply.NO)
OK_ONLY: Tuple[Reply, ...] = (Reply.YES,)


@dataclass(frozen=True, slots=True)
class PathRequest:
    """What a path picker should display."""

    title: str
    button: str = "OK"
    pattern: str = "*.*"


@dataclass(slots=True)
class DialogHooks:
    """Callbacks a host UI provides to show modal dialogs.

    ``message_box`` shows ``text`` with the given buttons and returns the
    reply; dismissing the box counts as ``Reply.CANCEL``. ``pick_path``
    keeps a picker open, calling ``accept`` for each submitted path, and
    returns ``True`` once ``accept`` does, or ``False`` if the user cancels.
    """

    message_box: Callable[[str, MessageKind, Tuple[Reply, ...]], Reply]
    pick_path: Callable[[PathRequest, PathAccept], bool]


class InteractiveFileDialogs(FileDialogs):
    def __init__(self, hooks: DialogHooks) -> None:
        self.hooks = hooks

    def _show(self, text: str, kind: MessageKind, buttons: Tuple[Reply, ...]) -> Reply:
        if kind is not MessageKind.CONFIRMATION:
            telemetry.record_event(
                "dialog.message",
                level="warning" if kind is MessageKind.WARNING else "error",
                data={"text": text},
            )
        return self.hooks.message_box(text, kind, buttons)

    def confirm_save_untitled(self, state: "FileEditorState") -> Reply:
        return self._show(
            "Save untitled file?", MessageKind.CONFIRMATION, YES_NO_CANCEL
        )

    def confirm_save_modified(self, state: "FileEditorState") -> Reply:
        return self._show(
            f"'{state.file_path}' has been modified. Save?",
            MessageKind.CONFIRMATION,
            YES_NO_CANCEL,
        )

    def confirm_overwrite(self, path: str) -> Reply:
        return self._show(
            f"'{path}' already exists. Overwrite?", MessageKind.CONFIRMATION, YES_NO
        )

    def remove_renamed_warning(self, dst: str, src: str, cause: str) -> None:
        self._show(
            f"'{dst}' was created successfully, "
            f"but '{src}' could not be removed: {cause}.",
            MessageKind.WARNING,
            OK_ONLY,
        )

    def rename_error(self, dst: str, src: str, cause: str) -> None:
        self._show(
            f"Unable to rename '{src}' into '{dst}': {cause}.",
            MessageKind.ERROR,
            OK_ONLY,
        )

    def file_too_big_error(self, path: str, size: int) -> None:
        self._show(
            f"Unable to open file '{path}': file too big ({size} bytes).",
            MessageKind.ERROR,
            OK_ONLY,
        )

    def read_error(self, path: str, cause: str) -> None:
        self._show(
            f"Cannot read from file '{path}': {cause}.", MessageKind.ERROR, OK_ONLY
        )

    def write_error(self, path: str, cause: str) -> None:
        self._show(
            f"Cannot write into file '{path}': {cause}.", MessageKind.ERROR, OK_ONLY
        )

    def open_for_read_error(self, path: str, cause: str) -> None:
        self._show(
            f"Unable to open file '{path}' for read: {cause}.",
            MessageKind.ERROR,
            OK_ONLY,
        )

    def open_for_write_error(self, path: str, cause: str) -> None:
        self._show(
            f"Unable to open file '{path}' for write: {cause}.",
            MessageKind.ERROR,
            OK_ONLY,
        )

    def get_open_path(self, accept: PathAccept) -> bool:
        request = PathRequest(title="Open file", button="Open")
        return self.hooks.pick_path(request, lambda path: accept(expand_path(path)))

    def get_save_as_path(self, state: "FileEditorState", accept: PathAccept) -> bool:
        if state.file_path:
            title = f"Save file '{os.path.basename(state.file_path)}' as"
        else:
            title = "Save untitled file"

        def check(raw: str) -> bool:
            path = expand_path(raw)
            return self.can_overwrite(path) and accept(path)

        return self.hooks.pick_path(PathRequest(title=title), check)

    def get_rename_path(self, state: "FileEditorState", accept: PathAccept) -> bool:
        title = f"Rename file '{os.path.basename(state.file_path)}'"

        def check(raw: str) -> bool:
            path = expand_path(raw)
            # Renaming onto itself is accepted without touching the disk;
            # saving in place is what ``save`` is for.
            if path == state.file_path:
                return True
            return self.can_overwrite(path) and accept(path)

        return self.hooks.pick_path(PathRequest(title=title), check)


__all__ = [
    "DialogHooks",
    "InteractiveFileDialogs",
    "PathRequest",
    "YES_NO_CANCEL",
    "YES_NO",
    "OK_ONLY",
]
