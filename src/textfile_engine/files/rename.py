"""Moving a document's on-disk identity from one path to another."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Optional

from textfile_engine.buffer import DocumentBuffer
from textfile_engine.dialogs.silent import SILENT_DIALOGS
from textfile_engine.runtime import telemetry

from .errors import RemoveAfterRenameWarning, RenameFailureError, describe_os_error
from .writer import BufferedFileWriter, write_file

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textfile_engine.dialogs.base import FileDialogs


def _atomic_rename(src: str, dst: str) -> None:
    try:
        os.replace(src, dst)
    except OSError as exc:
        raise RenameFailureError(dst, src, describe_os_error(exc)) from exc


def rename_file(
    dst: str | os.PathLike[str],
    src: str | os.PathLike[str],
    document: DocumentBuffer,
    dialogs: "FileDialogs",
    *,
    writer: Optional[BufferedFileWriter] = None,
) -> bool:
    """Save ``document`` under ``dst`` and retire ``src``.

    The cheap path saves over ``src`` silently and renames it. When either
    step fails (e.g. across devices) the document is written straight to
    ``dst`` and ``src`` is removed afterwards. Until that removal both
    files may exist. A leftover ``src`` is only a warning.
    """

    src, dst = os.fspath(src), os.fspath(dst)
    with telemetry.span(
        "files::rename", component="files", metadata={"src": src, "dst": dst}
    ) as handle:
        if write_file(src, document, SILENT_DIALOGS, writer=writer):
            try:
                _atomic_rename(src, dst)
            except RenameFailureError as exc:
                telemetry.record_event(
                    "file.rename_fallback",
                    level="warning",
                    data={"src": src, "dst": dst, "cause": exc.cause},
                )
            else:
                handle.add_metadata("strategy", "rename")
                return True

        if not write_file(dst, document, dialogs, writer=writer):
            handle.add_metadata("strategy", "failed")
            return False

        handle.add_metadata("strategy", "copy")
        if os.path.exists(src):
            try:
                os.remove(src)
            except OSError as exc:
                warning = RemoveAfterRenameWarning(dst, src, describe_os_error(exc))
                telemetry.record_event(
                    "file.remove_failed",
                    level="warning",
                    data={"src": src, "dst": dst, "cause": warning.cause},
                )
                warning.report(dialogs)
        return True


__all__ = ["rename_file"]
