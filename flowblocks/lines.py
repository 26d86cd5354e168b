"""Blocks that turn byte streams into messages and messages into byte streams."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from flowblocks.errors import BlockError
from flowblocks.stdio import Encoding

T = TypeVar("T")


def _display(message: Any) -> str:
    if isinstance(message, bool):
        return "true" if message else "false"
    return str(message)


def _varint(number: int) -> bytes:
    out = bytearray()
    while True:
        byte = number & 0x7F
        number >>= 7
        if number:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _serialize(message: Any) -> bytes:
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    serialize = getattr(message, "SerializeToString", None)
    if serialize is None:
        raise BlockError(
            f"cannot encode {type(message).__name__} as a protobuf message"
        )
    return serialize()


@dataclass
class Decode(Generic[T]):
    """Decodes messages from a byte stream.

    With the newline encoding every complete line is handed to ``parse``;
    lines that ``parse`` rejects are skipped, and a trailing line that never
    receives its newline is discarded.
    """

    encoding: Optional[Encoding] = None
    parse: Callable[[str], Any] = str

    def __post_init__(self) -> None:
        if self.encoding is None:
            self.encoding = Encoding.TEXT_WITH_NEWLINE_SUFFIX

    def run(self, chunks: Iterable[bytes]) -> Iterator[T]:
        if self.encoding is not Encoding.TEXT_WITH_NEWLINE_SUFFIX:
            raise BlockError(f"decoding with {self.encoding.value} is not supported")
        buffer = bytearray()
        for chunk in chunks:
            buffer += chunk
            if b"\n" not in chunk:
                continue
            *lines, rest = buffer.split(b"\n")
            buffer = bytearray(rest)
            for line in lines:
                try:
                    text = line.decode("utf-8")
                except UnicodeDecodeError as error:
                    raise BlockError(str(error)) from error
                try:
                    message = self.parse(text)
                except (ValueError, TypeError):
                    continue
                yield message


@dataclass
class Encode(Generic[T]):
    """Encodes messages to a byte stream.

    With the newline encoding each message is written as its text followed
    by a newline. The protobuf encodings take bytes or objects with a
    ``SerializeToString`` method, optionally prefixed by a varint length.
    """

    encoding: Optional[Encoding] = None

    def __post_init__(self) -> None:
        if self.encoding is None:
            self.encoding = Encoding.TEXT_WITH_NEWLINE_SUFFIX

    def encode(self, message: Any) -> bytes:
        """Encode a single message."""
        if self.encoding is Encoding.TEXT_WITH_NEWLINE_SUFFIX:
            return (_display(message) + "\n").encode("utf-8")
        payload = _serialize(message)
        if self.encoding is Encoding.PROTOBUF_WITH_LENGTH_PREFIX:
            return _varint(len(payload)) + payload
        return payload

    def run(self, messages: Iterable[T]) -> Iterator[bytes]:
        for message in messages:
            yield self.encode(message)