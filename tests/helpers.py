from __future__ import annotations

from typing import Iterable, List, Tuple

from textfile_engine.dialogs import (
    DialogHooks,
    InteractiveFileDialogs,
    MessageKind,
    PathAccept,
    PathRequest,
    Reply,
)
from textfile_engine.files import BufferedFileWriter


class ScriptedHooks:
    """Dialog hooks answering from pre-recorded replies and paths."""

    def __init__(self, *, replies: Iterable[Reply] = (), paths: Iterable[str] = ()):
        self.replies: List[Reply] = list(replies)
        self.paths: List[str] = [str(path) for path in paths]
        self.messages: List[Tuple[str, MessageKind, Tuple[Reply, ...]]] = []
        self.requests: List[PathRequest] = []
        self.accepted: List[str] = []

    def message_box(
        self, text: str, kind: MessageKind, buttons: Tuple[Reply, ...]
    ) -> Reply:
        self.messages.append((text, kind, buttons))
        return self.replies.pop(0) if self.replies else Reply.CANCEL

    def pick_path(self, request: PathRequest, accept: PathAccept) -> bool:
        self.requests.append(request)
        while self.paths:
            path = self.paths.pop(0)
            if accept(path):
                self.accepted.append(path)
                return True
        return False

    def texts(self, kind: MessageKind | None = None) -> List[str]:
        return [text for text, k, _ in self.messages if kind is None or k is kind]


def make_dialogs(**kwargs) -> Tuple[InteractiveFileDialogs, ScriptedHooks]:
    hooks = ScriptedHooks(**kwargs)
    dialogs = InteractiveFileDialogs(
        DialogHooks(message_box=hooks.message_box, pick_path=hooks.pick_path)
    )
    return dialogs, hooks


class CountingWriter(BufferedFileWriter):
    def __init__(self) -> None:
        super().__init__()
        self.paths: List[str] = []

    def write(self, path, document) -> None:
        self.paths.append(str(path))
        super().write(path, document)


class RecordingSink:
    def __init__(self) -> None:
        self.saved: List[str] = []

    def on_saved(self, state) -> None:
        self.saved.append(state.file_path)
