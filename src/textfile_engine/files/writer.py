"""Chunked saving of document buffers to disk."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, BinaryIO, Optional

from textfile_engine.buffer import DocumentBuffer
from textfile_engine.runtime import telemetry

from .errors import (
    FileOperationError,
    OpenForWriteError,
    WriteFailureError,
    describe_os_error,
)
from .staging import StagingBuffer, thread_staging_buffer

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textfile_engine.dialogs.base import FileDialogs


class BufferedFileWriter:
    """Truncates ``path`` and streams the document into it chunk by chunk.

    There is no temporary file: a failure part-way leaves a truncated file
    on disk. The document itself is never modified, and marking the save
    point is left to the caller.
    """

    def __init__(self, *, staging: Optional[StagingBuffer] = None) -> None:
        self._staging = staging

    @property
    def staging(self) -> StagingBuffer:
        return self._staging or thread_staging_buffer()

    def write(self, path: str | os.PathLike[str], document: DocumentBuffer) -> None:
        path = os.fspath(path)
        with telemetry.span(
            "files::write", component="files", metadata={"path": path}
        ) as handle:
            try:
                stream = open(path, "wb")
            except OSError as exc:
                raise OpenForWriteError(path, describe_os_error(exc)) from exc
            try:
                written = self._transfer(stream, path, document)
            finally:
                try:
                    stream.close()
                except OSError as exc:
                    raise WriteFailureError(path, describe_os_error(exc)) from exc
            handle.add_metadata("written", written)

    def _transfer(self, stream: BinaryIO, path: str, document: DocumentBuffer) -> int:
        staging = self.staging
        length = document.length()
        written = 0
        while written < length:
            count = min(length - written, staging.size)
            chunk = staging.chunk(count)
            document.read_into(written, written + count, chunk)
            try:
                result = stream.write(chunk)
            except OSError as exc:
                raise WriteFailureError(path, describe_os_error(exc)) from exc
            if result is not None and result != count:
                raise WriteFailureError(path, "short write")
            written += count
        return written


def write_file(
    path: str | os.PathLike[str],
    document: DocumentBuffer,
    dialogs: "FileDialogs",
    *,
    writer: Optional[BufferedFileWriter] = None,
) -> bool:
    """Save ``document`` to ``path``; failures are reported on ``dialogs``."""

    try:
        (writer or BufferedFileWriter()).write(path, document)
    except FileOperationError as exc:
        telemetry.record_event(
            "file.write_failed",
            level="warning",
            data={"path": exc.path, "kind": type(exc).__name__, "cause": exc.cause},
        )
        exc.report(dialogs)
        return False
    return True


__all__ = ["BufferedFileWriter", "write_file"]
