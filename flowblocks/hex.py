"""Blocks that convert bytes to and from hexadecimal text."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from flowblocks.errors import BlockError

_log = logging.getLogger(__name__)

_HEX_VALUES = {
    **{ord(c): i for i, c in enumerate("0123456789")},
    **{ord(c): 10 + i for i, c in enumerate("abcdef")},
    **{ord(c): 10 + i for i, c in enumerate("ABCDEF")},
}


def encode_hex(data: bytes) -> bytes:
    """Encode bytes as lower-case hexadecimal ASCII."""
    return bytes(data).hex().encode("ascii")


def _hex_value(byte: int) -> int:
    try:
        return _HEX_VALUES[byte]
    except KeyError:
        message = f"Invalid hex character: '{chr(byte)}' (0x{byte:02X})"
        _log.error(message)
        raise BlockError(message) from None


def decode_hex(data: bytes) -> bytes:
    """Decode hexadecimal ASCII to bytes; a trailing odd digit is ignored."""
    data = bytes(data)
    return bytes(
        (_hex_value(high) << 4) | _hex_value(low)
        for high, low in zip(data[0::2], data[1::2])
    )


class EncodeHex:
    """Encodes each incoming byte message into hexadecimal form."""

    def run(self, messages: Iterable[bytes]) -> Iterator[bytes]:
        for message in messages:
            yield encode_hex(message)


class DecodeHex:
    """Decodes each incoming hexadecimal message into bytes."""

    def run(self, messages: Iterable[bytes]) -> Iterator[bytes]:
        for message in messages:
            yield decode_hex(message)