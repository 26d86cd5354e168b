"""Blocks that write byte streams to standard output and standard error."""

from __future__ import annotations

import sys
from typing import BinaryIO, Iterable, Optional


def _write_all(messages: Iterable[bytes], stream: BinaryIO) -> None:
    for message in messages:
        stream.write(message)
        stream.flush()


class WriteStdout:
    """Writes every incoming message to standard output."""

    def run(self, messages: Iterable[bytes], stream: Optional[BinaryIO] = None) -> None:
        """Write ``messages`` to ``stream``, standard output by default."""
        _write_all(messages, sys.stdout.buffer if stream is None else stream)


class WriteStderr:
    """Writes every incoming message to standard error."""

    def run(self, messages: Iterable[bytes], stream: Optional[BinaryIO] = None) -> None:
        """Write ``messages`` to ``stream``, standard error by default."""
        _write_all(messages, sys.stderr.buffer if stream is None else stream)