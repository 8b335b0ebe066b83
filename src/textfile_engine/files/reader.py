"""Chunked loading of files into document buffers."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, BinaryIO, Optional

from textfile_engine.buffer import DocumentAllocationError, DocumentBuffer
from textfile_engine.runtime import telemetry
from textfile_engine.runtime.settings import get_settings

from .errors import (
    FileOperationError,
    FileTooBigError,
    OpenForReadError,
    ReadFailureError,
    describe_os_error,
)
from .line_endings import LineEndingDetector
from .staging import StagingBuffer, thread_staging_buffer

if TYPE_CHECKING:  # pragma: no cover - typing only
    from textfile_engine.dialogs.base import FileDialogs


class BufferedFileReader:
    """Streams a file into an empty document through a staging buffer.

    Memory overhead is the staging buffer, never a second copy of the file.
    On failure the document may hold a prefix of the file and should be
    discarded by the caller.
    """

    def __init__(
        self,
        *,
        staging: Optional[StagingBuffer] = None,
        allocation_slack: Optional[int] = None,
    ) -> None:
        self._staging = staging
        self.allocation_slack = (
            get_settings().allocation_slack
            if allocation_slack is None
            else allocation_slack
        )

    @property
    def staging(self) -> StagingBuffer:
        return self._staging or thread_staging_buffer()

    def read(self, document: DocumentBuffer, path: str | os.PathLike[str]) -> None:
        path = os.fspath(path)
        with telemetry.span(
            "files::read", component="files", metadata={"path": path}
        ) as handle:
            try:
                stream = open(path, "rb")
            except OSError as exc:
                raise OpenForReadError(path, describe_os_error(exc)) from exc
            with stream:
                size = self._measure(stream, path)
                handle.add_metadata("size", size)
                try:
                    document.reserve(size + self.allocation_slack)
                except (DocumentAllocationError, MemoryError, OverflowError) as exc:
                    raise FileTooBigError(path, size) from exc
                detector = LineEndingDetector()
                self._transfer(stream, path, size, document, detector)
            detector.apply(document)
            handle.add_metadata("line_ending", detector.mode.value)

    def _measure(self, stream: BinaryIO, path: str) -> int:
        try:
            size = stream.seek(0, os.SEEK_END)
            stream.seek(0)
        except OSError as exc:
            raise ReadFailureError(path, describe_os_error(exc)) from exc
        return size

    def _transfer(
        self,
        stream: BinaryIO,
        path: str,
        size: int,
        document: DocumentBuffer,
        detector: LineEndingDetector,
    ) -> None:
        staging = self.staging
        bytes_left = size
        while bytes_left > 0:
            chunk = staging.chunk(min(bytes_left, staging.size))
            try:
                count = stream.readinto(chunk)
            except OSError as exc:
                raise ReadFailureError(path, describe_os_error(exc)) from exc
            if count != len(chunk):
                raise ReadFailureError(path, "unexpected end of file")
            detector.analyze(chunk)
            document.append_bytes(chunk)
            bytes_left -= count


def read_file(
    document: DocumentBuffer,
    path: str | os.PathLike[str],
    dialogs: "FileDialogs",
    *,
    reader: Optional[BufferedFileReader] = None,
) -> bool:
    """Load ``path`` into ``document``; failures are reported on ``dialogs``."""

    try:
        (reader or BufferedFileReader()).read(document, path)
    except FileOperationError as exc:
        telemetry.record_event(
            "file.read_failed",
            level="warning",
            data={"path": exc.path, "kind": type(exc).__name__, "cause": exc.cause},
        )
        exc.report(dialogs)
        return False
    return True


__all__ = ["BufferedFileReader", "read_file"]
