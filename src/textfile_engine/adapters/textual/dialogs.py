"""Textual modal screens backing ``InteractiveFileDialogs``."""

from __future__ import annotations

import threading
from typing import Any, Optional, Tuple

try:  # pragma: no cover - imported only when the Textual host is used
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.screen import ModalScreen, Screen
    from textual.widgets import Button, Input, Label
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use textfile_engine.adapters.textual"
    ) from exc

from textfile_engine.dialogs import (
    DialogHooks,
    MessageKind,
    PathAccept,
    PathRequest,
    Reply,
)

_BUTTON_LABELS = {Reply.YES: "Yes", Reply.NO: "No", Reply.CANCEL: "Cancel"}

DIALOG_CSS = """
MessageScreen, PathScreen {
    align: center middle;
}

#dialog {
    width: 64;
    height: auto;
    border: thick $accent;
    background: $surface;
    padding: 1 2;
}

#dialog.warning {
    border: thick $warning;
}

#dialog.error {
    border: thick $error;
}

#buttons {
    height: auto;
    align: right middle;
    margin-top: 1;
}
"""


class MessageScreen(ModalScreen[Reply]):
    """Message box answering with one of the offered replies."""

    DEFAULT_CSS = DIALOG_CSS
    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(
        self, text: str, kind: MessageKind, buttons: Tuple[Reply, ...]
    ) -> None:
        super().__init__()
        self._text = text
        self._kind = kind
        self._buttons = buttons

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog", classes=self._kind.value):
            yield Label(self._text, id="message")
            with Horizontal(id="buttons"):
                if self._buttons == (Reply.YES,):
                    yield Button("OK", id="reply-yes", variant="primary")
                    return
                for reply in self._buttons:
                    yield Button(
                        _BUTTON_LABELS[reply],
                        id=f"reply-{reply.value}",
                        variant="primary" if reply is Reply.YES else "default",
                    )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or "reply-cancel"
        self.dismiss(Reply(button_id.removeprefix("reply-")))

    def action_cancel(self) -> None:
        self.dismiss(Reply.CANCEL)


class PathScreen(ModalScreen[Optional[str]]):
    """Single-line path prompt; dismisses with ``None`` when cancelled."""

    DEFAULT_CSS = DIALOG_CSS
    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, request: PathRequest, initial: str = "") -> None:
        super().__init__()
        self._request = request
        self._initial = initial

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self._request.title)
            yield Input(
                value=self._initial, placeholder=self._request.pattern, id="path"
            )
            with Horizontal(id="buttons"):
                yield Button(self._request.button, id="accept", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "accept":
            self._submit(self.query_one("#path", Input).value)
        else:
            self.dismiss(None)

    def _submit(self, value: str) -> None:
        value = value.strip()
        if value:
            self.dismiss(value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class TextualDialogBridge:
    """Blocking dialog hooks for code running in a Textual thread worker.

    Each call pushes a modal screen on the app's event loop and waits for
    it to be dismissed; calling from the event loop thread would deadlock.
    """

    def __init__(self, app: App[Any]) -> None:
        self.app = app

    def _wait_for(self, screen: Screen[Any]) -> Any:
        done = threading.Event()
        outcome: dict[str, Any] = {}

        def on_dismiss(result: Any) -> None:
            outcome["result"] = result
            done.set()

        self.app.call_from_thread(self.app.push_screen, screen, on_dismiss)
        done.wait()
        return outcome.get("result")

    def message_box(
        self, text: str, kind: MessageKind, buttons: Tuple[Reply, ...]
    ) -> Reply:
        result = self._wait_for(MessageScreen(text, kind, buttons))
        return result if isinstance(result, Reply) else Reply.CANCEL

    def pick_path(self, request: PathRequest, accept: PathAccept) -> bool:
        last = ""
        while True:
            path = self._wait_for(PathScreen(request, last))
            if not path:
                return False
            if accept(path):
                return True
            last = path

    def hooks(self) -> DialogHooks:
        return DialogHooks(message_box=self.message_box, pick_path=self.pick_path)


__all__ = ["MessageScreen", "PathScreen", "TextualDialogBridge"]
