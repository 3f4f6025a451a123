import re

import pytest

from fixserver.encoder import encode
from fixserver.message import SOH, FixMessage
from fixserver.parser import FixParser


def _message(*pairs):
    msg = FixMessage()
    for tag, value in pairs:
        msg.add_field(tag, value)
    return msg


def test_worked_example():
    encoded = encode(_message((35, "A")), "FIX.4.4", SOH)
    assert encoded == "8=FIX.4.4\x019=5\x0135=A\x0110=180\x01"


def test_existing_framing_fields_are_replaced():
    framed = _message((8, "OLD"), (9, "999"), (35, "A"), (10, "000"))
    plain = _message((35, "A"))
    assert encode(framed, "FIX.4.4", SOH) == encode(plain, "FIX.4.4", SOH)


def test_input_message_not_modified():
    msg = _message((8, "OLD"), (35, "A"), (10, "000"))
    before = msg.fields
    encode(msg, "FIX.4.4", SOH)
    assert msg.fields == before


def test_round_trip_through_parser():
    msg = _message((35, "D"), (49, "SENDER"), (56, "TARGET"), (55, "ABC"), (38, "100"))
    encoded = encode(msg, "FIX.4.2", SOH)
    parsed = FixParser(SOH).parse_message(encoded)
    assert parsed.is_valid(checksum=True)
    assert parsed.get(8) == "FIX.4.2"
    assert [field.tag for field in parsed][2:-1] == [35, 49, 56, 55, 38]
    assert parsed.get(55) == "ABC"


@pytest.mark.parametrize("value", ["", "x", "abcdefghij" * 7])
def test_checksum_is_three_digits(value):
    encoded = encode(_message((35, "0"), (58, value)), "FIX.4.4", SOH)
    match = re.fullmatch(r"(.*)\x0110=(\d{3})\x01", encoded, re.DOTALL)
    assert match is not None
    assert len(match.group(2)) == 3
    parsed = FixParser(SOH).parse_message(encoded)
    assert parsed.is_valid(checksum=True)
    assert parsed.get(10) == match.group(2)


def test_custom_delimiter_frames_header_and_trailer():
    encoded = encode(_message((35, "A")), "FIX.4.4", "|")
    assert encoded.startswith("8=FIX.4.4|9=5|35=A\x01")
    assert re.fullmatch(r".*\x0110=\d{3}\|", encoded, re.DOTALL)