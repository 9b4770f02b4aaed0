import pytest

from taifexmd.bcd import ParsingError
from taifexmd.book_snapshot import MdEntryI083, MessageI083, parse_i083_body


def _bcd(digits: str) -> bytes:
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


def _entry(entry_type: str, sign: str, px: str, size: str, level: str) -> bytes:
    return (
        entry_type.encode("ascii")
        + sign.encode("ascii")
        + _bcd(px.zfill(9))
        + _bcd(size.zfill(8))
        + _bcd(level.zfill(2))
    )


def _body(prod_id: str, seq: str, flag: str, entries: list[bytes], count: int | None = None) -> bytes:
    n = len(entries) if count is None else count
    return (
        prod_id.ljust(20).encode("ascii")
        + _bcd(seq.zfill(10))
        + flag.encode("ascii")
        + _bcd(str(n).zfill(2))
        + b"".join(entries)
    )


def test_single_entry_snapshot():
    body = _body("TXFF4", "42", "0", [_entry("0", "0", "17250", "3", "1")])
    msg = parse_i083_body(body, len(body))
    assert msg == MessageI083(
        prod_id="TXFF4".ljust(20),
        prod_msg_seq=42,
        calculated_flag="0",
        no_md_entries=1,
        md_entries=(
            MdEntryI083(
                md_entry_type="0",
                sign="0",
                md_entry_px=17250,
                md_entry_size=3,
                md_price_level=1,
            ),
        ),
    )


def test_entry_length_is_twelve_bytes():
    entry = _entry("1", "0", "1", "1", "1")
    assert len(entry) == 12
    body = _body("X", "1", "0", [entry])
    assert len(body) == 27 + 12
    assert parse_i083_body(body, len(body)).md_entries[0].md_entry_type == "1"


def test_multiple_entries_keep_order():
    entries = [
        _entry("0", "0", "100", "5", "1"),
        _entry("0", "0", "99", "7", "2"),
        _entry("1", "0", "101", "2", "1"),
        _entry("E", "-", "50", "1", "1"),
    ]
    body = _body("MXFF4", "123456789", "1", entries)
    msg = parse_i083_body(body, len(body))
    assert msg.no_md_entries == len(msg.md_entries) == 4
    assert [e.md_entry_px for e in msg.md_entries] == [100, 99, 101, 50]
    assert [e.md_entry_size for e in msg.md_entries] == [5, 7, 2, 1]
    assert [e.md_entry_type for e in msg.md_entries] == ["0", "0", "1", "E"]
    assert msg.md_entries[3].sign == "-"
    assert msg.calculated_flag == "1"
    assert msg.prod_msg_seq == 123456789


def test_zero_entries_fixed_part_only():
    body = _body("TXO", "0", "0", [])
    assert len(body) == 27
    msg = parse_i083_body(body, len(body))
    assert msg.no_md_entries == 0
    assert msg.md_entries == ()


def test_trailing_checksum_and_terminal_ignored():
    body = _body("TXF", "9", "0", [_entry("1", "0", "200", "4", "3")])
    with_trailer = body + b"\x5a\x0d\x0a"
    assert parse_i083_body(with_trailer, len(with_trailer)) == parse_i083_body(body, len(body))


def test_accepts_bytearray_and_memoryview():
    body = _body("TXF", "5", "0", [_entry("0", "0", "1", "1", "1")])
    expected = parse_i083_body(body, len(body))
    assert parse_i083_body(bytearray(body), len(body)) == expected
    assert parse_i083_body(memoryview(body), len(body)) == expected


def test_max_digit_values():
    body = _body("TXF", "9999999999", "0", [_entry("0", "0", "999999999", "99999999", "99")])
    msg = parse_i083_body(body, len(body))
    entry = msg.md_entries[0]
    assert msg.prod_msg_seq == 9999999999
    assert entry.md_entry_px == 999999999
    assert entry.md_entry_size == 99999999
    assert entry.md_price_level == 99


def test_missing_body_raises():
    with pytest.raises(ParsingError):
        parse_i083_body(None, 27)


def test_declared_length_too_short_raises():
    body = _body("TXF", "1", "0", [])
    with pytest.raises(ParsingError):
        parse_i083_body(body, 26)


def test_actual_bytes_too_short_raises():
    body = _body("TXF", "1", "0", [])
    with pytest.raises(ParsingError):
        parse_i083_body(body[:26], 27)


def test_declared_entries_exceed_body_length_raises():
    body = _body("TXF", "1", "0", [_entry("0", "0", "1", "1", "1")], count=2)
    with pytest.raises(ParsingError):
        parse_i083_body(body, len(body))


def test_body_length_smaller_than_entries_raises():
    body = _body("TXF", "1", "0", [_entry("0", "0", "1", "1", "1")])
    with pytest.raises(ParsingError):
        parse_i083_body(body, len(body) - 1)


def test_invalid_bcd_in_price_raises():
    body = bytearray(_body("TXF", "1", "0", [_entry("0", "0", "1", "1", "1")]))
    body[27 + 2] = 0xFA
    with pytest.raises(ParsingError, match="MD-ENTRY-PX"):
        parse_i083_body(bytes(body), len(body))


def test_invalid_bcd_in_sequence_raises():
    body = bytearray(_body("TXF", "1", "0", []))
    body[20] = 0xAB
    with pytest.raises(ParsingError, match="PROD-MSG-SEQ"):
        parse_i083_body(bytes(body), len(body))