"""Blocks that convert JSON text to and from JSON-like values."""

from __future__ import annotations

import json
import math
from typing import Any, Iterable, Iterator

from flowblocks.errors import BlockError

Value = Any
"""A JSON-like value: None, bool, float, str, list or dict."""

_WHITESPACE = " \t\n\r"


def _sorted_object(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    fields = dict(pairs)
    return {key: fields[key] for key in sorted(fields)}


_DECODER = json.JSONDecoder(
    parse_int=float,
    parse_float=float,
    parse_constant=float,
    object_pairs_hook=_sorted_object,
)


def decode_json(data: bytes | str) -> Value:
    """Decode the first JSON value in ``data``.

    Every number becomes a float and object keys come out sorted.
    Raises ValueError on malformed input.
    """
    text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
    start = len(text) - len(text.lstrip(_WHITESPACE))
    value, _ = _DECODER.raw_decode(text, start)
    return value


def _prepare(value: Value) -> Any:
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, (int, float)):
        number = float(value) if not isinstance(value, int) else value
        if isinstance(number, float):
            if math.isnan(number):
                return "NaN"
            if math.isinf(number):
                return "-Infinity" if number < 0 else "Infinity"
        return number
    if isinstance(value, (list, tuple)):
        return [_prepare(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _prepare(item) for key, item in value.items()}
    raise ValueError(f"cannot encode {type(value).__name__} as JSON")


def encode_json(value: Value) -> bytes:
    """Encode a value as compact JSON; non-finite numbers become strings."""
    return json.dumps(
        _prepare(value),
        separators=(",", ":"),
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


class DecodeJson:
    """Decodes each incoming byte message into a JSON value."""

    def run(self, messages: Iterable[bytes]) -> Iterator[Value]:
        for message in messages:
            try:
                yield decode_json(bytes(message))
            except ValueError as error:
                raise BlockError(str(error)) from error


class EncodeJson:
    """Encodes each incoming JSON value into bytes."""

    def run(self, values: Iterable[Value]) -> Iterator[bytes]:
        for value in values:
            try:
                yield encode_json(value)
            except ValueError as error:
                raise BlockError(str(error)) from error