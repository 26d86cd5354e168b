"""The core blocks: buffering, constants, counting, delaying, dropping and random values."""

from __future__ import annotations

import random as _random
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar, Union

T = TypeVar("T")

DEFAULT_DELAY_SECONDS = 1.0
"""The delay used when none is configured."""


@dataclass(frozen=True)
class DelayType:
    """A fixed delay in seconds, or a random one drawn from ``(low, high)``."""

    duration: Union[float, tuple[float, float]] = DEFAULT_DELAY_SECONDS

    def __post_init__(self) -> None:
        if isinstance(self.duration, tuple):
            low, high = self.duration
            if low < 0 or high < 0:
                raise ValueError("delay bounds must not be negative")
            if low > high:
                raise ValueError("delay range is empty")
        elif self.duration < 0:
            raise ValueError("delay must not be negative")

    @classmethod
    def fixed(cls, seconds: float) -> DelayType:
        """A delay of exactly ``seconds``."""
        return cls(float(seconds))

    @classmethod
    def random(cls, low: float, high: float) -> DelayType:
        """A delay drawn uniformly between ``low`` and ``high`` seconds."""
        return cls((float(low), float(high)))

    @property
    def is_random(self) -> bool:
        return isinstance(self.duration, tuple)

    def sample(self, rng: Optional[_random.Random] = None) -> float:
        """The number of seconds to wait for one message."""
        if isinstance(self.duration, tuple):
            low, high = self.duration
            return (rng or _random).uniform(low, high)
        return self.duration


@dataclass
class Buffer(Generic[T]):
    """Stores every message it receives."""

    messages: deque = field(default_factory=deque)

    def run(self, messages: Iterable[T]) -> None:
        """Append every incoming message to :attr:`messages`."""
        self.messages.extend(messages)


@dataclass
class Const(Generic[T]):
    """Sends a constant value once."""

    value: Any = ""

    def run(self) -> Iterator[T]:
        yield self.value


@dataclass
class Count(Generic[T]):
    """Counts the messages it receives, optionally passing them through."""

    counter: int = 0

    def run(
        self,
        messages: Iterable[T],
        sink: Optional[Callable[[T], Any]] = None,
    ) -> int:
        """Count ``messages``, handing each to ``sink`` if given; return the total so far."""
        for message in messages:
            self.counter += 1
            if sink is not None:
                sink(message)
        return self.counter


@dataclass
class Delay(Generic[T]):
    """Passes messages through after a fixed or random delay."""

    delay: Optional[DelayType] = None

    def __post_init__(self) -> None:
        if self.delay is None:
            self.delay = DelayType()

    def run(
        self,
        messages: Iterable[T],
        sleep: Callable[[float], Any] = time.sleep,
        rng: Optional[_random.Random] = None,
    ) -> Iterator[T]:
        """Yield each message after waiting for the configured delay."""
        for message in messages:
            sleep(self.delay.sample(rng))
            yield message


class Drop(Generic[T]):
    """Discards every message it receives."""

    def run(self, messages: Iterable[T]) -> None:
        for _ in messages:
            pass


@dataclass
class Random(Generic[T]):
    """Sends one value of its message type.

    The value sent is the default of the message type, as made by
    ``factory``; ``seed`` is kept as a parameter of the block.
    """

    seed: Optional[int] = None
    factory: Callable[[], Any] = int

    def run(self) -> Iterator[T]:
        yield self.factory()