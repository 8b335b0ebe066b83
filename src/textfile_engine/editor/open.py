"""Interactive open: pick a path, load it into a fresh document."""

from __future__ import annotations

from typing import Callable, Optional

from textfile_engine.buffer import DocumentBuffer
from textfile_engine.dialogs import FileDialogs
from textfile_engine.files import BufferedFileReader, read_file
from textfile_engine.runtime import telemetry


def open_file(
    create_document: Callable[[], DocumentBuffer],
    accept: Callable[[DocumentBuffer, str], None],
    dialogs: FileDialogs,
    *,
    reader: Optional[BufferedFileReader] = None,
) -> bool:
    """Ask ``dialogs`` for a path and hand the loaded document to ``accept``.

    A document that fails to load is dropped and the picker stays open.
    """

    def try_path(path: str) -> bool:
        document = create_document()
        if not read_file(document, path, dialogs, reader=reader):
            return False
        document.mark_save_point()
        telemetry.record_event("file.opened", data={"path": path})
        accept(document, path)
        return True

    return dialogs.get_open_path(try_path)


__all__ = ["open_file"]
