"""Body of the I083 order book snapshot message."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bcd import ParsingError, bcd_to_ascii

I083_FIXED_LENGTH = 27
"""PROD-ID (20) + PROD-MSG-SEQ (5) + CALCULATED-FLAG (1) + NO-MD-ENTRIES (1)."""

I083_ENTRY_LENGTH = 12
"""Bytes per repeated snapshot entry."""


@dataclass(frozen=True)
class MdEntryI083:
    """One level of an order book snapshot.

    ``md_entry_type``: 0 buy, 1 sell, E derived buy, F derived sell.
    ``sign``: '0' positive, '-' negative.
    ``md_entry_px`` is a scaled integer; the product's decimal locator gives
    its number of decimal places.
    """

    md_entry_type: str
    sign: str
    md_entry_px: int
    md_entry_size: int
    md_price_level: int


@dataclass(frozen=True)
class MessageI083:
    """Full order book snapshot for one product.

    ``calculated_flag``: '0' order book message, '1' remaining order book
    calculated after matching.
    """

    prod_id: str
    prod_msg_seq: int
    calculated_flag: str
    no_md_entries: int
    md_entries: tuple[MdEntryI083, ...] = field(default_factory=tuple)


def _digits(raw: bytes, start: int, size: int, num_digits: int, field_name: str) -> str:
    try:
        return bcd_to_ascii(raw[start:start + size], num_digits)
    except ParsingError as exc:
        raise ParsingError(f"I083 {field_name}: {exc}") from exc


def _char(raw: bytes, pos: int) -> str:
    return chr(raw[pos])


def _parse_entry(raw: bytes, start: int) -> MdEntryI083:
    return MdEntryI083(
        md_entry_type=_char(raw, start),
        sign=_char(raw, start + 1),
        md_entry_px=int(_digits(raw, start + 2, 5, 9, "MD-ENTRY-PX")),
        md_entry_size=int(_digits(raw, start + 7, 4, 8, "MD-ENTRY-SIZE")),
        md_price_level=int(_digits(raw, start + 11, 1, 2, "MD-PRICE-LEVEL")),
    )


def parse_i083_body(body: bytes | bytearray | memoryview | None, body_length: int) -> MessageI083:
    """Parse an I083 body.

    ``body_length`` is the length declared by the common header. Raises
    ParsingError if the body is missing, too short for its declared entries
    or holds bad BCD.
    """
    if body is None:
        raise ParsingError("I083 body is missing")
    if body_length < I083_FIXED_LENGTH:
        raise ParsingError(
            f"I083 body length {body_length} is shorter than {I083_FIXED_LENGTH} bytes"
        )
    raw = bytes(body)
    if len(raw) < I083_FIXED_LENGTH:
        raise ParsingError(
            f"I083 body holds {len(raw)} bytes, fewer than {I083_FIXED_LENGTH}"
        )

    prod_id = raw[:20].decode("latin-1")
    prod_msg_seq = int(_digits(raw, 20, 5, 10, "PROD-MSG-SEQ"))
    calculated_flag = _char(raw, 25)
    no_md_entries = int(_digits(raw, 26, 1, 2, "NO-MD-ENTRIES"))

    required = I083_FIXED_LENGTH + no_md_entries * I083_ENTRY_LENGTH
    if body_length < required or len(raw) < required:
        raise ParsingError(
            f"I083 body is too short for {no_md_entries} entries: "
            f"need {required} bytes, declared {body_length}, got {len(raw)}"
        )

    entries = tuple(
        _parse_entry(raw, start)
        for start in range(I083_FIXED_LENGTH, required, I083_ENTRY_LENGTH)
    )
    return MessageI083(
        prod_id=prod_id,
        prod_msg_seq=prod_msg_seq,
        calculated_flag=calculated_flag,
        no_md_entries=no_md_entries,
        md_entries=entries,
    )