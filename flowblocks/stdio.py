"""Configuration of blocks run against standard input and output."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


class Encoding(enum.Enum):
    """How messages are framed on a byte stream."""

    PROTOBUF_WITH_LENGTH_PREFIX = "protobuf-with-length-prefix"
    PROTOBUF_WITHOUT_LENGTH_PREFIX = "protobuf-without-length-prefix"
    TEXT_WITH_NEWLINE_SUFFIX = "text-with-newline-suffix"


class StdioError(Exception):
    """Base class for errors in building a stdio system."""


class UnknownSystemError(StdioError):
    def __init__(self, system: str) -> None:
        super().__init__(f"unknown system: {system}")
        self.system = system


class UnknownParameterError(StdioError):
    def __init__(self, parameter: str) -> None:
        super().__init__(f"unknown parameter: {parameter}")
        self.parameter = parameter


class MissingParameterError(StdioError):
    def __init__(self, parameter: str) -> None:
        super().__init__(f"missing parameter: {parameter}")
        self.parameter = parameter


class InvalidParameterError(StdioError):
    def __init__(self, parameter: str) -> None:
        super().__init__(f"invalid parameter: {parameter}")
        self.parameter = parameter


@dataclass
class StdioConfig:
    """Encoding and named string parameters for a stdio system."""

    encoding: Encoding = Encoding.TEXT_WITH_NEWLINE_SUFFIX
    params: dict[str, str] = field(default_factory=dict)

    def reject_any(self) -> None:
        """Raise if any parameter was given."""
        if self.params:
            raise UnknownParameterError(min(self.params))

    def allow_only(self, keys: Iterable[str]) -> None:
        """Raise on the first parameter, in key order, not among ``keys``."""
        allowed = set(keys)
        for key in sorted(self.params):
            if key not in allowed:
                raise UnknownParameterError(key)

    def get(self, key: str, parse: Callable[[str], T] = str) -> T:
        """Return the parameter parsed by ``parse``; it must be present."""
        return self._parse(key, self.get_string(key), parse)

    def get_opt(self, key: str, parse: Callable[[str], T] = str) -> T | None:
        """Return the parsed parameter, or None if it is absent."""
        if key not in self.params:
            return None
        return self._parse(key, self.params[key], parse)

    def get_string(self, key: str) -> str:
        """Return the raw parameter value; it must be present."""
        try:
            return self.params[key]
        except KeyError:
            raise MissingParameterError(key) from None

    @staticmethod
    def _parse(key: str, value: str, parse: Callable[[str], T]) -> T:
        try:
            return parse(value)
        except (ValueError, TypeError) as error:
            raise InvalidParameterError(key) from error