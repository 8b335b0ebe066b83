"""Pre-save whitespace normalization."""

from __future__ import annotations

import re

from textfile_engine.buffer import DocumentBuffer

_TRAILING_BLANKS = re.compile(rb"[ \t]+(?=\r\n|\r|\n|\Z)")


def strip_trailing_whitespace(data: bytes) -> bytes:
    return _TRAILING_BLANKS.sub(b"", data)


def ensure_newline_at_end(data: bytes, eol: bytes) -> bytes:
    """End ``data`` with exactly one line terminator.

    A trailing run of terminators collapses to its first one; a missing
    terminator is added as ``eol``. Empty input stays empty.
    """

    if not data:
        return data
    body = data.rstrip(b"\r\n")
    if len(body) == len(data):
        return data + eol
    tail = data[len(body):]
    return body + (b"\r\n" if tail.startswith(b"\r\n") else tail[:1])


def normalize_bytes(data: bytes, eol: bytes) -> bytes:
    return ensure_newline_at_end(strip_trailing_whitespace(data), eol)


def normalize_document(document: DocumentBuffer) -> bool:
    """Normalize ``document`` in one grouped edit; return whether it changed."""

    length = document.length()
    original = document.read_range(0, length)
    normalized = normalize_bytes(original, document.line_ending.terminator)
    if normalized == original:
        return False
    document.begin_grouped_edit("normalize_whitespace")
    try:
        document.write_range(0, length, normalized)
    finally:
        document.end_grouped_edit()
    return True


__all__ = [
    "strip_trailing_whitespace",
    "ensure_newline_at_end",
    "normalize_bytes",
    "normalize_document",
]
