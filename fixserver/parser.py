"""Parse delimited tag=value text into a validated FixMessage."""

from __future__ import annotations

import logging
from typing import Iterator

from fixserver.message import FixMessage, _parse_int

log = logging.getLogger(__name__)


class FixParseError(ValueError):
    """Raised when text is not a well-formed, valid FIX message."""


class FixParser:
    """Splits text on a one-character delimiter and builds a FixMessage."""

    def __init__(self, delimiter: str) -> None:
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter

    def parse_message(self, input_string: str) -> FixMessage:
        """Return the parsed message or raise FixParseError."""
        message = FixMessage()
        for token in self._tokens(input_string):
            tag, value = self._parse_token(token)
            message.add_field(tag, value)
        if not message.is_valid():
            raise FixParseError("message failed validation")
        return message

    def _tokens(self, text: str) -> Iterator[str]:
        parts = text.split(self.delimiter)
        if parts[-1] == "":
            parts.pop()
        return iter(parts)

    @staticmethod
    def _parse_token(token: str) -> tuple[int, str]:
        tag_text, separator, value = token.partition("=")
        if not separator:
            log.error("Failed parsing token %s", token)
            raise FixParseError(f"failed parsing token {token!r}")
        try:
            tag = _parse_int(tag_text)
        except ValueError as exc:
            log.error("Failed parsing token %s", token)
            raise FixParseError(f"failed parsing token {token!r}") from exc
        return tag, value