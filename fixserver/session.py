"""Session loop: split the byte stream into FIX messages and echo them back."""

from __future__ import annotations

import logging
from typing import Iterator

from fixserver.message import CHECKSUM, MSG_TYPE, FixMessage
from fixserver.parser import FixParseError, FixParser
from fixserver.tcp import TCPServer

log = logging.getLogger(__name__)

_CHECKSUM_MARKER = f"{CHECKSUM}="


class FixSessionManager:
    """Reads from a connected client, parses messages and answers each one."""

    def __init__(self, server: TCPServer, parser: FixParser, delimiter: str) -> None:
        self.server = server
        self.parser = parser
        self.delimiter = delimiter
        self.buffer = ""

    def run(self) -> None:
        """Serve the client until it disconnects."""
        while self.server.is_client_connected():
            try:
                data = self.server.read_from_client()
            except OSError as exc:
                log.error("Error reading from client: %s", exc)
                break
            if not data:
                break
            self.buffer += data

            for raw in self.extract_messages():
                try:
                    message = self.parser.parse_message(raw)
                except FixParseError:
                    log.error("Failed to parse FIX message:\n%s", raw)
                    continue
                self.handle_message(message)

    def handle_message(self, msg: FixMessage) -> None:
        """Log the message and echo it to the client."""
        msg_type = msg.get(MSG_TYPE)
        if msg_type is None:
            log.warning("Message missing 35 (MsgType)")
            return
        log.info("Received FIX message type %s:\n%s", msg_type, msg.to_string_hr())
        try:
            self.server.write_to_client(msg.to_string())
        except OSError as exc:
            log.error("Failed to answer client: %s", exc)

    def extract_messages(self) -> Iterator[str]:
        """Yield each complete message at the front of the buffer, removing it."""
        while True:
            marker = self.buffer.find(_CHECKSUM_MARKER)
            if marker == -1:
                return
            end = self.buffer.find(self.delimiter, marker)
            if end == -1:
                return
            raw, self.buffer = self.buffer[: end + 1], self.buffer[end + 1 :]
            yield raw