import random

import pytest

from flowblocks.core import (
    DEFAULT_DELAY_SECONDS,
    Buffer,
    Const,
    Count,
    Delay,
    DelayType,
    Drop,
    Random,
)


def test_buffer_stores_messages_in_order():
    buffer = Buffer()
    buffer.run(["a", "b", "c"])
    assert list(buffer.messages) == ["a", "b", "c"]


def test_buffer_accumulates_across_runs():
    buffer = Buffer()
    buffer.run([1, 2])
    buffer.run([3])
    assert list(buffer.messages) == [1, 2, 3]


def test_const_sends_value_once():
    block = Const(0x00BAB10C)
    assert list(block.run()) == [0x00BAB10C]


def test_const_default_is_empty_string():
    assert list(Const().run()) == [""]


def test_count_returns_number_of_messages():
    block = Count()
    assert block.run(["x", "y", "z"]) == len(["x", "y", "z"])


def test_count_passes_messages_through_to_sink():
    received = []
    block = Count()
    total = block.run(iter(["x", "y"]), received.append)
    assert received == ["x", "y"]
    assert total == len(received)


def test_count_empty_stream_is_zero():
    assert Count().run([]) == 0


def test_count_state_persists():
    block = Count()
    block.run(["a"])
    assert block.run(["b", "c"]) == 3


def test_delay_fixed_sleeps_per_message():
    sleeps = []
    block = Delay(DelayType.fixed(2.5))
    out = list(block.run(["a", "b"], sleep=sleeps.append))
    assert out == ["a", "b"]
    assert sleeps == [2.5, 2.5]


def test_delay_default_is_one_second():
    sleeps = []
    out = list(Delay().run([7], sleep=sleeps.append))
    assert out == [7]
    assert sleeps == [DEFAULT_DELAY_SECONDS]


def test_delay_random_within_bounds():
    sleeps = []
    block = Delay(DelayType.random(1.0, 5.0))
    out = list(block.run(range(20), sleep=sleeps.append, rng=random.Random(42)))
    assert out == list(range(20))
    assert len(sleeps) == 20
    assert all(1.0 <= s <= 5.0 for s in sleeps)


def test_delay_random_seeded_is_reproducible():
    block = Delay(DelayType.random(0.0, 3.0))
    first, second = [], []
    list(block.run("abc", sleep=first.append, rng=random.Random(7)))
    list(block.run("abc", sleep=second.append, rng=random.Random(7)))
    assert first == second


def test_delay_type_is_random_flag():
    assert DelayType.random(1, 2).is_random is True
    assert DelayType.fixed(1).is_random is False


def test_delay_type_empty_range_rejected():
    with pytest.raises(ValueError):
        DelayType.random(5.0, 1.0)


def test_delay_type_negative_rejected():
    with pytest.raises(ValueError):
        DelayType.fixed(-1.0)


def test_drop_consumes_everything():
    source = iter([1, 2, 3])
    assert Drop().run(source) is None
    assert next(source, "done") == "done"


def test_random_sends_default_value():
    assert list(Random().run()) == [0]


def test_random_keeps_seed():
    block = Random(seed=42)
    assert block.seed == 42
    assert len(list(block.run())) == 1


def test_random_with_factory():
    assert list(Random(factory=str).run()) == [""]