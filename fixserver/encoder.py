"""Serialise a FIX message with a fresh header and checksum trailer."""

from __future__ import annotations

import copy

from fixserver.message import (
    BEGIN_STRING,
    BODY_LENGTH,
    CHECKSUM,
    FixMessage,
    _checksum,
    _wire_bytes,
)


def encode(msg: FixMessage, begin_string: str, delimiter: str) -> str:
    """Return ``msg`` framed with BeginString, BodyLength and CheckSum fields."""
    working = copy.deepcopy(msg)
    for tag in (BEGIN_STRING, BODY_LENGTH, CHECKSUM):
        working.remove_field(tag)

    body = working.to_string()
    body_length = len(_wire_bytes(body))
    without_checksum = (
        f"{BEGIN_STRING}={begin_string}{delimiter}"
        f"{BODY_LENGTH}={body_length}{delimiter}"
        f"{body}"
    )
    checksum = _checksum(without_checksum)
    return f"{without_checksum}{CHECKSUM}={checksum:03d}{delimiter}"