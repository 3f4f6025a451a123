import pytest

from fixserver.message import SOH
from fixserver.parser import FixParseError, FixParser

LOGON = "8=FIX.4.2|9=5|35=A|10=000|"


def test_parses_valid_message():
    msg = FixParser("|").parse_message(LOGON)
    assert [(field.tag, field.value) for field in msg] == [
        (8, "FIX.4.2"),
        (9, "5"),
        (35, "A"),
        (10, "000"),
    ]


def test_trailing_delimiter_is_optional():
    parser = FixParser("|")
    assert parser.parse_message(LOGON) == parser.parse_message(LOGON.rstrip("|"))


def test_soh_delimiter():
    msg = FixParser(SOH).parse_message(LOGON.replace("|", SOH))
    assert msg.get(35) == "A"


def test_tag_with_trailing_text_is_read_by_leading_digits():
    msg = FixParser("|").parse_message("8=FIX.4.2|9=5|35x=A|10=000|")
    assert msg.get(35) == "A"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "8=FIX.4.2|9=5|35A|10=000|",
        "8=FIX.4.2|9=5|abc=A|10=000|",
        "8=FIX.4.2||9=5|35=A|10=000|",
        "8=FIX.4.2|9=6|35=A|10=000|",
        "9=5|8=FIX.4.2|35=A|10=000|",
        "8=FIX.4.2|9=5|35=A|",
    ],
)
def test_invalid_input_raises(text):
    with pytest.raises(FixParseError):
        FixParser("|").parse_message(text)


def test_checksum_not_verified():
    msg = FixParser("|").parse_message("8=FIX.4.2|9=5|35=A|10=999|")
    assert msg.get(10) == "999"
    assert not msg.is_valid(checksum=True)


def test_duplicate_tag_keeps_last_value():
    msg = FixParser("|").parse_message("8=FIX.4.2|9=5|35=A|35=B|10=000|")
    assert msg.get(35) == "B"


@pytest.mark.parametrize("delimiter", ["", "||"])
def test_delimiter_must_be_one_character(delimiter):
    with pytest.raises(ValueError):
        FixParser(delimiter)


def test_delimiter_attribute():
    assert FixParser(";").delimiter == ";"