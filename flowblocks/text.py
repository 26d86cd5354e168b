"""Blocks that join, split, parse and produce delimited text."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from flowblocks.errors import BlockError

Value = Any
"""A JSON-like value: None, bool, float, str, list or dict."""


@dataclass
class ConcatStrings:
    """Joins every incoming string into one, separated by ``delimiter``."""

    delimiter: Optional[str] = None

    def __post_init__(self) -> None:
        if self.delimiter is None:
            self.delimiter = ""

    def run(self, strings: Iterable[str]) -> Iterator[str]:
        """Yield a single string once the input stream is exhausted."""
        yield self.delimiter.join(strings)


def _split(text: str, delimiter: str) -> list[str]:
    if delimiter:
        return text.split(delimiter)
    # An empty delimiter matches at every character boundary, both ends included.
    return ["", *text, ""]


@dataclass
class SplitString:
    """Splits each incoming string on ``delimiter``."""

    delimiter: Optional[str] = None

    def __post_init__(self) -> None:
        if self.delimiter is None:
            self.delimiter = ""

    def run(self, strings: Iterable[str]) -> Iterator[str]:
        for text in strings:
            yield from _split(text, self.delimiter)


class DecodeCsv:
    """Parses each incoming CSV document into a header and its rows.

    Yields ``("header", fields)`` once per document, followed by one
    ``("rows", fields)`` per record, where ``fields`` is a list of strings.
    """

    def run(self, chunks: Iterable[bytes]) -> Iterator[tuple[str, list[str]]]:
        for chunk in chunks:
            try:
                text = bytes(chunk).decode("utf-8")
            except UnicodeDecodeError as error:
                raise BlockError(str(error)) from error
            records = (
                record
                for record in csv.reader(io.StringIO(text, newline=""))
                if record
            )
            try:
                header = next(records, [])
                yield ("header", list(header))
                for line, record in enumerate(records, start=2):
                    if len(record) != len(header):
                        raise BlockError(
                            f"CSV error: record {line - 1} has {len(record)} fields, "
                            f"but the header has {len(header)}"
                        )
                    yield ("rows", list(record))
            except csv.Error as error:
                raise BlockError(str(error)) from error


def encode_value_to_csv(value: Value) -> bytes:
    """Encode a list value as one CSV record; non-string items are skipped.

    A value that is not a list encodes to no bytes at all.
    """
    if not isinstance(value, list):
        return b""
    row = [item for item in value if isinstance(item, str)]
    if row in ([], [""]):
        return b'""\n'
    buffer = io.StringIO(newline="")
    try:
        csv.writer(buffer, lineterminator="\n").writerow(row)
    except csv.Error as error:
        raise BlockError(str(error)) from error
    return buffer.getvalue().encode("utf-8")


class EncodeCsv:
    """Encodes a header and a stream of rows into CSV bytes."""

    def run(self, header: Iterable[Value], rows: Iterable[Value]) -> Iterator[bytes]:
        """Encode the first header message, if any, then every row."""
        for first in header:
            yield encode_value_to_csv(first)
            break
        for row in rows:
            yield encode_value_to_csv(row)