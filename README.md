# fixserver

A small FIX (Financial Information eXchange) server and message toolkit.
The server accepts one TCP client, splits the incoming stream into
messages at the checksum field (`10=`), parses and validates each message,
logs it, and writes it back to the client.

## Installing

```
pip install .
```

## Running the server

```
fixserver
```

By default the server listens on port 5000 on all interfaces and waits
for a single client. Fields in incoming messages are separated by `|`,
for example:

```
8=FIX.4.2|9=5|35=A|10=000|
```

Options:

- `--port PORT` – the port to listen on (0–65535, default 5000).
- `--delimiter CHAR` – the single character that separates incoming
  fields (default `|`).

Messages that fail to parse or validate are logged and dropped. Each
valid message is logged, one field per line, and written back to the
client with its fields terminated by SOH (`\x01`). The command returns
exit status 1 if the port cannot be bound or no client can be accepted,
and 0 once the client disconnects.

## Using the library

```python
from fixserver.message import FixMessage
from fixserver.encoder import encode
from fixserver.parser import FixParser, FixParseError

msg = FixMessage()
msg.add_field(35, "A")
msg.add_field(49, "SENDER")

wire = encode(msg, "FIX.4.2", "|")   # adds 8=, 9= and 10= fields

parser = FixParser("|")
try:
    parsed = parser.parse_message("8=FIX.4.2|9=5|35=A|10=000|")
except FixParseError as exc:
    print("rejected:", exc)
else:
    print(parsed.get(35))
    print(parsed.to_string_hr())
```

The main pieces:

- `fixserver.message.FixMessage` holds ordered tag/value fields
  (`FixField`), each tag at most once. It offers `get`, `has`,
  `add_field` (which replaces the value of an existing tag in place),
  `remove_field`, `to_string` (SOH-terminated fields), `to_string_hr`
  (one field per line), equality that respects field order, and
  `is_valid(checksum=False)`. `is_valid` requires the message to start
  with tags 8, 9 and 35 and end with tag 10, checks the declared body
  length, and checks the declared checksum only when `checksum` is true.
- `fixserver.encoder.encode(msg, begin_string, delimiter)` drops any
  existing 8, 9 and 10 fields and returns the message with a new begin
  string, body length and three-digit checksum. The header and checksum
  fields end with `delimiter`; the body fields end with SOH.
- `fixserver.parser.FixParser(delimiter)` turns delimited text into a
  validated `FixMessage` with `parse_message`, raising `FixParseError`
  (a `ValueError`) for a token without `=`, a non-integer tag, or a
  message that fails `is_valid()`. The checksum is not verified.
- `fixserver.tcp.TCPServer(max_connections)` is a listener that holds one
  client at a time: `start(port)`, `accept_client()`,
  `read_from_client()` (an empty string means the client left),
  `write_to_client(data)`, `is_client_connected()`, `stop()`, and a
  `port` property. It can be used as a context manager, which stops it
  on exit. Socket failures are raised as `OSError`.
- `fixserver.session.FixSessionManager(server, parser, delimiter)` runs
  the read, extract, parse and reply loop with `run()`;
  `extract_messages()` yields complete messages from its buffer and
  `handle_message(msg)` logs and echoes one message.

## What it does not do

The server only echoes messages. It does not handle logon, heartbeats,
sequence numbers or resend requests, does not check incoming checksums,
serves a single client and then exits, and keeps no storage of messages.

## Running the tests

```
pip install ".[test]"
pytest
```