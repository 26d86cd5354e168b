"""A block that reads bytes from standard input."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1024
"""The default number of bytes read from standard input at a time."""


@dataclass
class ReadStdin:
    """Reads a byte stream in chunks of at most ``buffer_size`` bytes."""

    buffer_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.buffer_size is None:
            self.buffer_size = DEFAULT_BUFFER_SIZE
        if self.buffer_size < 0:
            raise ValueError("buffer_size must not be negative")

    def run(self, stream: Optional[BinaryIO] = None) -> Iterator[bytes]:
        """Yield chunks from ``stream`` (standard input by default) until EOF."""
        if stream is None:
            stream = sys.stdin.buffer
        read = getattr(stream, "read1", stream.read)
        if self.buffer_size == 0:
            return
        while True:
            try:
                chunk = read(self.buffer_size)
            except InterruptedError:
                continue
            if not chunk:
                break
            yield bytes(chunk)