# flowblocks

Small, composable blocks for building dataflow pipelines in Python.
Most blocks have a `run` method that takes an iterable of messages and
yields messages, so blocks chain with ordinary iteration:

```python
from flowblocks.lines import Decode, Encode
from flowblocks.text import SplitString

chunks = [b"a b\nc", b" d\n"]
words = SplitString(" ").run(Decode().run(chunks))
assert b"".join(Encode().run(words)) == b"a\nb\nc\nd\n"
```

The package has no dependencies outside the standard library.

## Modules

### `flowblocks.core`

- `Buffer` stores every message it receives in its `messages` deque.
- `Const(value)` yields its value once. The default value is `""`.
- `Count` counts messages. `run(messages, sink=None)` hands each message
  to `sink` if one is given. It returns the running total, which is also
  kept in `counter`.
- `Delay(delay)` yields each message after calling `sleep` with the
  configured delay. `run(messages, sleep=time.sleep, rng=None)` takes an
  optional `random.Random` for random delays.
- `DelayType.fixed(seconds)` describes a fixed delay.
  `DelayType.random(low, high)` describes a delay drawn uniformly from a
  range. The default is one second. Negative delays and empty ranges
  raise `ValueError`.
- `Drop` consumes and discards every message.
- `Random(seed=None, factory=int)` yields one value made by `factory`,
  which is `0` by default. The `seed` is stored but not used to draw
  values.

### `flowblocks.lines`

- `Decode(encoding=None, parse=str)` splits a byte stream into lines and
  yields `parse(line)` for each complete line. Lines that `parse`
  rejects with `ValueError` or `TypeError` are skipped. A trailing line
  without a newline is discarded. Only the newline encoding is
  supported; any other encoding raises `BlockError` when the block runs.
- `Encode(encoding=None)` encodes messages one at a time with `encode`,
  or a whole stream with `run`.
  - With the newline encoding, each message is written as its text
    followed by `"\n"`; booleans are written as `true` and `false`.
  - The protobuf encodings accept `bytes`, or objects with a
    `SerializeToString` method. With a length prefix, the payload is
    preceded by its varint-encoded length.

### `flowblocks.hex`

- `encode_hex` turns bytes into lower-case hexadecimal ASCII.
- `decode_hex` turns hexadecimal ASCII back into bytes. A trailing odd
  digit is ignored. A non-hex character raises `BlockError`.
- `EncodeHex` and `DecodeHex` apply these functions to each message in
  a stream.

```python
from flowblocks.hex import encode_hex, decode_hex

assert encode_hex(b"hi") == b"6869"
assert decode_hex(b"6869") == b"hi"
```

### `flowblocks.json_blocks`

- `decode_json(data)` decodes the first JSON value in `data`. Every
  number becomes a `float` and object keys come out sorted. Malformed
  input raises `ValueError`.
- `encode_json(value)` writes compact JSON with sorted keys. NaN and
  infinities are written as the strings `"NaN"`, `"Infinity"` and
  `"-Infinity"`.
- `DecodeJson` and `EncodeJson` apply these functions to streams and
  raise `BlockError` on failure.

```python
from flowblocks.json_blocks import decode_json, encode_json

assert decode_json(b'{"b": 1, "a": [true, null]}') == {"a": [True, None], "b": 1.0}
assert encode_json({"b": 1, "a": float("nan")}) == b'{"a":"NaN","b":1}'
```

### `flowblocks.text`

- `ConcatStrings(delimiter=None)` joins the whole input stream into one
  string. The default delimiter is the empty string.
- `SplitString(delimiter=None)` splits each string on the delimiter. An
  empty delimiter splits at every character boundary, including both
  ends.
- `DecodeCsv` parses each incoming CSV document. It yields
  `("header", fields)` once, then `("rows", fields)` for each record.
  - Blank lines are skipped.
  - A record whose field count differs from the header's raises
    `BlockError`.
- `encode_value_to_csv(value)` encodes a list as one CSV record,
  skipping items that are not strings.
  - An empty row encodes as `b'""\n'`.
  - A value that is not a list encodes to `b""`.
- `EncodeCsv.run(header, rows)` encodes the first header message, if
  any, then every row.

```python
from flowblocks.text import DecodeCsv, encode_value_to_csv

assert encode_value_to_csv(["col1", "col2", "col3"]) == b"col1,col2,col3\n"
assert list(DecodeCsv().run([b"name,age\nann,30\n"])) == [
    ("header", ["name", "age"]),
    ("rows", ["ann", "30"]),
]
```

### `flowblocks.stdin` and `flowblocks.streams`

- `ReadStdin(buffer_size=None)` yields chunks of at most `buffer_size`
  bytes (1024 by default) until end of file. `run(stream=None)` reads
  standard input unless another binary stream is given.
- `WriteStdout` and `WriteStderr` write each message to standard output
  or standard error, or to a given binary stream. They flush after every
  message.

### `flowblocks.stdio`

- `Encoding` lists the framings:
  - `TEXT_WITH_NEWLINE_SUFFIX`, the default
  - `PROTOBUF_WITH_LENGTH_PREFIX`
  - `PROTOBUF_WITHOUT_LENGTH_PREFIX`
- `StdioConfig(encoding, params)` holds an encoding and string
  parameters.
  - `reject_any()` raises if any parameter is present.
  - `allow_only(keys)` raises on the first parameter, in sorted order,
    that is not among `keys`.
  - `get_string(key)` returns a raw value.
  - `get(key, parse=str)` and `get_opt(key, parse=str)` parse a value.
    `get_opt` returns `None` when the key is absent.
- Failures raise `UnknownParameterError`, `MissingParameterError` or
  `InvalidParameterError`. All of them are subclasses of `StdioError`.
  `UnknownSystemError` is also defined.

### `flowblocks.errors`

- `BlockError` is raised by blocks that fail while processing messages.

## What this package does not do

- There is no command-line tool and no runtime that wires blocks
  together or runs them concurrently. You compose blocks by passing
  iterators from one to the next.
- There are no blocks for reading directories, environment variables or
  files, for writing files, or for TCP sockets.
- There is no registry of block types and no parser that turns a named,
  tagged mapping into a block configuration.
- `StdioConfig` validates parameters but does not build pipelines from
  them.

## Running the tests

```console
pip install "flowblocks[test]"
pytest
```