"""Fixed-size staging buffer shuttling bytes between disk and documents."""

from __future__ import annotations

import threading
from typing import Optional

from textfile_engine.runtime.settings import get_settings


class StagingBuffer:
    """Reusable byte region; one transfer may use it at a time."""

    __slots__ = ("_storage", "view")

    def __init__(self, size: Optional[int] = None) -> None:
        if size is None:
            size = get_settings().chunk_size
        if size <= 0:
            raise ValueError("staging buffer size must be positive")
        self._storage = bytearray(size)
        self.view = memoryview(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    @property
    def size(self) -> int:
        return len(self._storage)

    def chunk(self, count: int) -> memoryview:
        return self.view[:count]


_LOCAL = threading.local()


def thread_staging_buffer() -> StagingBuffer:
    """Return the calling thread's staging buffer, creating it on first use."""

    buffer = getattr(_LOCAL, "buffer", None)
    if buffer is None:
        buffer = StagingBuffer()
        _LOCAL.buffer = buffer
    return buffer


__all__ = ["StagingBuffer", "thread_staging_buffer"]
