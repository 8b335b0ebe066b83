"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Tuple

from .protocol import DocumentRangeError


def ensure_range(length: int, start: int, end: int) -> Tuple[int, int]:
    if start < 0 or end < start or end > length:
        raise DocumentRangeError(start, end, length)
    return start, end
