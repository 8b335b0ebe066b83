"""Executable Textual editor that persists documents through the file engine."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the demo is run
    from textual import work
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use textfile_engine.adapters.textual.app"
    ) from exc

from textfile_engine.buffer import ByteDocument, DocumentBuffer
from textfile_engine.dialogs import InteractiveFileDialogs
from textfile_engine.editor import FileEditorState, open_file
from textfile_engine.runtime import telemetry

from .dialogs import TextualDialogBridge

# Arbitrary bytes survive the round trip through the widget's str text.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class FileEditorApp(App[None]):
    """Single-document editor with open/save/save-as/rename/close."""

    CSS = """
    #editor {
        height: 1fr;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+o", "open", "Open"),
        ("ctrl+s", "save", "Save"),
        ("f12", "save_as", "Save as"),
        ("f2", "rename", "Rename"),
        ("ctrl+q", "close", "Quit"),
    ]

    def __init__(self, path: Optional[str] = None) -> None:
        super().__init__()
        self._initial_path = path
        self.editor_state = FileEditorState(ByteDocument(), parent=self)
        self.dialogs = InteractiveFileDialogs(TextualDialogBridge(self).hooks())

    def compose(self) -> ComposeResult:
        yield Header()
        yield TextArea(id="editor")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_title()
        if self._initial_path:
            self._lock_editor()
            self._load(self._initial_path)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.disabled:
            # A file worker owns the document until it unlocks the editor.
            return
        data = event.text_area.text.encode(_ENCODING, _ERRORS)
        document = self.editor_state.document
        if data != self._document_bytes():
            document.write_range(0, document.length(), data)
        self._refresh_title()

    def on_saved(self, state: FileEditorState) -> None:
        # Called from the worker thread running the file operation.
        self.call_from_thread(self._show_document, f"Saved {state.file_path}")

    def action_open(self) -> None:
        if self._lock_editor():
            self._open()

    def action_save(self) -> None:
        if self._lock_editor():
            self._run(lambda: self.editor_state.save(self.dialogs), "save")

    def action_save_as(self) -> None:
        if self._lock_editor():
            self._run(lambda: self.editor_state.save_as(self.dialogs), "save as")

    def action_rename(self) -> None:
        if self._lock_editor():
            self._run(lambda: self.editor_state.rename(self.dialogs), "rename")

    def action_close(self) -> None:
        if self._lock_editor():
            self._close()

    @work(thread=True, exclusive=True, group="file")
    def _run(self, operation, label: str) -> None:
        try:
            if not operation():
                self.call_from_thread(
                    self._set_status, f"{label} cancelled or failed"
                )
        finally:
            self.call_from_thread(self._unlock_editor)

    @work(thread=True, exclusive=True, group="file")
    def _load(self, path: str) -> None:
        try:
            state = FileEditorState.load(path, self.dialogs, parent=self)
            if state is None:
                self.call_from_thread(self._set_status, f"Could not open {path}")
            else:
                self.call_from_thread(self._adopt, state)
        finally:
            self.call_from_thread(self._unlock_editor)

    @work(thread=True, exclusive=True, group="file")
    def _open(self) -> None:
        try:
            if not self.editor_state.close(self.dialogs):
                return

            def adopt(document: DocumentBuffer, path: str) -> None:
                state = FileEditorState(document, path, parent=self)
                self.call_from_thread(self._adopt, state)

            open_file(ByteDocument, adopt, self.dialogs)
        finally:
            self.call_from_thread(self._unlock_editor)

    @work(thread=True, exclusive=True, group="file")
    def _close(self) -> None:
        if self.editor_state.close(self.dialogs):
            self.call_from_thread(self.exit)
        else:
            self.call_from_thread(self._unlock_editor)

    def _lock_editor(self) -> bool:
        """Hand the document to a file worker; False if one already has it."""

        editor = self.query_one("#editor", TextArea)
        if editor.disabled:
            return False
        editor.disabled = True
        return True

    def _unlock_editor(self) -> None:
        editor = self.query_one("#editor", TextArea)
        editor.disabled = False
        editor.focus()

    def _adopt(self, state: FileEditorState) -> None:
        self.editor_state = state
        self._show_document(f"Opened {state.file_path}")

    def _document_bytes(self) -> bytes:
        document = self.editor_state.document
        return document.read_range(0, document.length())

    def _show_document(self, status: str) -> None:
        text = self._document_bytes().decode(_ENCODING, _ERRORS)
        editor = self.query_one("#editor", TextArea)
        if editor.text != text:
            editor.load_text(text)
        self._set_status(status)
        self._refresh_title()

    def _set_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)

    def _refresh_title(self) -> None:
        name = os.path.basename(self.editor_state.file_path) or "untitled"
        marker = "" if self.editor_state.in_save_point() else " *"
        self.title = f"{name}{marker}"
        self.sub_title = self.editor_state.document.line_ending.name


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Edit a file with the textfile engine."
    )
    parser.add_argument("path", nargs="?", help="File to open on start-up")
    parser.add_argument(
        "--log-preset",
        choices=("development", "quiet"),
        default=os.environ.get("TEXTFILE_ENGINE_LOG_PRESET", "quiet"),
        help="Telemetry preset (default: quiet, so logs stay off the screen)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    FileEditorApp(path=args.path).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
