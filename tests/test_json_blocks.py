import math

import pytest

from flowblocks.errors import BlockError
from flowblocks.json_blocks import DecodeJson, EncodeJson, decode_json, encode_json


@pytest.mark.parametrize(
    "text, expected",
    [
        ("null", None),
        ("false", False),
        ("true", True),
        ("0", 0.0),
        ("1", 1.0),
        ("1.0", 1.0),
        ("1.123", 1.123),
        ("-1.123", -1.123),
        ("100", 100.0),
        ("1e3", 1000.0),
        ('"Hello world"', "Hello world"),
        ("[]", []),
    ],
)
def test_decode_scalars(text, expected):
    result = decode_json(text)
    assert result == expected
    assert type(result) is type(expected)


def test_decode_nested():
    text = '[null, false, true, 1, "foo", ["nested"], {"foo": 1, "bar": true}]'
    assert decode_json(text) == [
        None,
        False,
        True,
        1.0,
        "foo",
        ["nested"],
        {"foo": 1.0, "bar": True},
    ]


def test_decode_object_keys_sorted():
    assert list(decode_json('{"foo": 1, "bar": true}')) == ["bar", "foo"]


def test_decode_accepts_bytes():
    assert decode_json(b'{"a": [1]}') == {"a": [1.0]}


def test_decode_non_finite_numbers():
    assert math.isnan(decode_json("NaN"))
    assert decode_json("Infinity") == math.inf
    assert decode_json("-Infinity") == -math.inf


def test_decode_malformed_raises():
    with pytest.raises(ValueError):
        decode_json("[1,")


def test_decode_json_block_wraps_errors():
    with pytest.raises(BlockError):
        list(DecodeJson().run([b"{"]))


def test_decode_json_block_decodes_each_message():
    assert list(DecodeJson().run([b"1", b'"x"'])) == [1.0, "x"]


def test_encode_non_finite_as_strings():
    assert encode_json(math.nan) == b'"NaN"'
    assert encode_json(math.inf) == b'"Infinity"'
    assert encode_json(-math.inf) == b'"-Infinity"'


def test_encode_is_compact_with_sorted_keys():
    assert encode_json({"foo": True, "bar": None}) == b'{"bar":null,"foo":true}'


@pytest.mark.parametrize(
    "value",
    [None, True, False, 1.5, "text", [], [1.0, "a", [None]], {"k": {"n": [True]}}],
)
def test_encode_decode_round_trip(value):
    assert decode_json(encode_json(value)) == value


def test_encode_json_block_rejects_unsupported():
    with pytest.raises(BlockError):
        list(EncodeJson().run([object()]))


def test_encode_json_block_round_trip():
    values = [{"a": [1.0, 2.0]}, "s"]
    encoded = list(EncodeJson().run(values))
    assert list(DecodeJson().run(encoded)) == values