"""FIX message model: an ordered collection of tag/value fields."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

log = logging.getLogger(__name__)

SOH = "\x01"

BEGIN_STRING = 8
BODY_LENGTH = 9
CHECKSUM = 10
MSG_TYPE = 35

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

# Per-tag format checks. Tags without an entry accept any value.
_FORMAT_VALIDATORS: dict[int, Callable[[str], bool]] = {}


def _parse_int(text: str) -> int:
    """Read a leading 32-bit integer, ignoring leading whitespace and trailing text."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _wire_bytes(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _checksum(text: str) -> int:
    return sum(_wire_bytes(text)) % 256


@dataclass(frozen=True)
class FixField:
    """A single tag=value pair."""

    tag: int
    value: str


def _render(fields: Iterable[FixField], terminator: str) -> str:
    return "".join(f"{field.tag}={field.value}{terminator}" for field in fields)


class FixMessage:
    """Fields in arrival order; each tag appears at most once."""

    def __init__(self) -> None:
        self._fields: list[FixField] = []

    @property
    def fields(self) -> tuple[FixField, ...]:
        return tuple(self._fields)

    def __iter__(self) -> Iterator[FixField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FixMessage({self._fields!r})"

    def get(self, tag: int) -> str | None:
        """Return the value of ``tag``, or None when absent."""
        return next((field.value for field in self._fields if field.tag == tag), None)

    def add_field(self, tag: int, value: str) -> None:
        """Append a field, or replace the value of an existing one in place."""
        for index, field in enumerate(self._fields):
            if field.tag == tag:
                log.warning("Tag %d already found in message. Updating value", tag)
                self._fields[index] = FixField(tag, value)
                return
        self._fields.append(FixField(tag, value))

    def has(self, tag: int) -> bool:
        return self.get(tag) is not None

    def to_string(self) -> str:
        """Render the fields SOH-terminated, as on the wire."""
        return _render(self._fields, SOH)

    def to_string_hr(self) -> str:
        """Render the fields one per line."""
        return _render(self._fields, "\n")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixMessage):
            return NotImplemented
        return self._fields == other._fields

    def has_valid_format_for(self, tag: int) -> bool:
        """Check the value of ``tag`` against its registered format, if any."""
        validator = _FORMAT_VALIDATORS.get(tag)
        if validator is None:
            return True
        value = self.get(tag)
        return value is None or validator(value)

    def is_valid(self, checksum: bool = False) -> bool:
        """Check header and trailer order, body length and optionally the checksum."""
        tags = [field.tag for field in self._fields]
        if tags[:3] != [BEGIN_STRING, BODY_LENGTH, MSG_TYPE] or tags[-1] != CHECKSUM:
            return False

        try:
            declared_length = _parse_int(self._fields[1].value)
            declared_checksum = _parse_int(self._fields[-1].value)
        except ValueError:
            return False

        header = _render(self._fields[:2], SOH)
        body = _render(self._fields[2:-1], SOH)
        actual_length = len(_wire_bytes(body))
        if actual_length != declared_length:
            log.warning(
                "Body length mismatch: declared=%d, actual=%d", declared_length, actual_length
            )
            return False

        if checksum:
            computed = _checksum(header + body)
            if computed != declared_checksum:
                log.warning(
                    "Checksum mismatch: declared=%d, computed=%d", declared_checksum, computed
                )
                return False

        return all(self.has_valid_format_for(field.tag) for field in self._fields)

    def remove_field(self, tag: int) -> None:
        """Remove the field with ``tag`` if present."""
        for index, field in enumerate(self._fields):
            if field.tag == tag:
                del self._fields[index]
                return