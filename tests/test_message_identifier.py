import pytest

from taifexmd.common_header import CommonHeader
from taifexmd.message_identifier import format_last_three_digits, identify_message_id


def _header(tc: str, mk: str) -> CommonHeader:
    return CommonHeader(transmission_code=ord(tc), message_kind=ord(mk))


@pytest.mark.parametrize(
    "code, expected",
    [(1010, "010"), (1100, "100"), (1072, "072"), (1024, "024"), (1001, "001")],
)
def test_format_last_three_digits(code, expected):
    assert format_last_three_digits(code) == expected


def test_format_last_three_digits_negative():
    assert format_last_three_digits(-1) == "XXX"


def test_format_last_three_digits_always_three_chars():
    for code in range(0, 3000, 7):
        result = format_last_three_digits(code)
        assert len(result) == 3
        assert int(result) == code % 1000


@pytest.mark.parametrize(
    "tc, mk, expected",
    [
        ("0", "1", "M1001"),
        ("0", "2", "M1002"),
        ("1", "1", "I010"),
        ("1", "A", "I012"),
        ("2", "A", "I081"),
        ("2", "B", "I083"),
        ("2", "4", "I100"),
        ("3", "1", "I070"),
        ("3", "3", "I140"),
        ("3", "4", "I073"),
        ("4", "1", "I010"),
        ("4", "6", "I120"),
        ("5", "3", "I072"),
        ("5", "A", "I081"),
        ("5", "E", "I025"),
    ],
)
def test_identify_known(tc, mk, expected):
    assert identify_message_id(_header(tc, mk)) == expected


@pytest.mark.parametrize("tc, mk", [("9", "9"), ("5", "5"), ("3", "2"), ("0", "0")])
def test_identify_unknown(tc, mk):
    assert identify_message_id(_header(tc, mk)) == ""


def test_futures_and_options_share_ids():
    for mk in "12345678A":
        assert identify_message_id(_header("1", mk)) == identify_message_id(_header("4", mk))


def test_identify_from_parsed_header():
    raw = bytes([0x1B]) + b"2B" + bytes(6) + bytes([0x00, 0x01]) + bytes(5) + bytes([0x01]) + bytes([0x00, 0x30])
    header = CommonHeader.parse(raw)
    assert identify_message_id(header) == "I083"