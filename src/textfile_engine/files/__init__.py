"""Streaming file transfer between disk and document buffers."""

from .errors import (
    FileOperationError,
    FileTooBigError,
    OpenForReadError,
    OpenForWriteError,
    ReadFailureError,
    RemoveAfterRenameWarning,
    RenameFailureError,
    WriteFailureError,
    describe_os_error,
)
from .line_endings import LineEndingDetector, detect_line_ending
from .reader import BufferedFileReader, read_file
from .rename import rename_file
from .staging import StagingBuffer, thread_staging_buffer
from .writer import BufferedFileWriter, write_file

__all__ = [
    "BufferedFileReader",
    "BufferedFileWriter",
    "LineEndingDetector",
    "StagingBuffer",
    "detect_line_ending",
    "read_file",
    "write_file",
    "rename_file",
    "thread_staging_buffer",
    "describe_os_error",
    "FileOperationError",
    "FileTooBigError",
    "OpenForReadError",
    "OpenForWriteError",
    "ReadFailureError",
    "WriteFailureError",
    "RenameFailureError",
    "RemoveAfterRenameWarning",
]
