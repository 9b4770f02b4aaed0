"""Body of the I081 order book update (differential) message."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bcd import ParsingError, bcd_to_ascii

I081_FIXED_LENGTH = 26
"""PROD-ID (20) + PROD-MSG-SEQ (5) + NO-MD-ENTRIES (1)."""

I081_ENTRY_LENGTH = 13
"""Bytes per repeated update entry."""


@dataclass(frozen=True)
class MdEntryI081:
    """One order book update instruction.

    ``md_update_action``: 0 new, 1 change, 2 delete, 5 overlay.
    ``md_entry_type``: 0 buy, 1 sell, E derived buy, F derived sell.
    ``sign``: '0' positive, '-' negative.
    """

    md_update_action: str
    md_entry_type: str
    sign: str
    md_entry_px: int
    md_entry_size: int
    md_price_level: int


@dataclass(frozen=True)
class MessageI081:
    """Incremental order book update for one product."""

    prod_id: str
    prod_msg_seq: int
    no_md_entries: int
    md_entries: tuple[MdEntryI081, ...] = field(default_factory=tuple)


def _digits(raw: bytes, start: int, size: int, num_digits: int, field_name: str) -> str:
    try:
        return bcd_to_ascii(raw[start:start + size], num_digits)
    except ParsingError as exc:
        raise ParsingError(f"I081 {field_name}: {exc}") from exc


def _char(raw: bytes, pos: int) -> str:
    return chr(raw[pos])


def _parse_entry(raw: bytes, start: int) -> MdEntryI081:
    return MdEntryI081(
        md_update_action=_char(raw, start),
        md_entry_type=_char(raw, start + 1),
        sign=_char(raw, start + 2),
        md_entry_px=int(_digits(raw, start + 3, 5, 9, "MD-ENTRY-PX")),
        md_entry_size=int(_digits(raw, start + 8, 4, 8, "MD-ENTRY-SIZE")),
        md_price_level=int(_digits(raw, start + 12, 1, 2, "MD-PRICE-LEVEL")),
    )


def parse_i081_body(body: bytes | bytearray | memoryview | None, body_length: int) -> MessageI081:
    """Parse an I081 body.

    ``body_length`` is the length declared by the common header. Raises
    ParsingError if the body is missing, too short for its declared entries
    or holds bad BCD.
    """
    if body is None:
        raise ParsingError("I081 body is missing")
    if body_length < I081_FIXED_LENGTH:
        raise ParsingError(
            f"I081 body length {body_length} is shorter than {I081_FIXED_LENGTH} bytes"
        )
    raw = bytes(body)
    if len(raw) < I081_FIXED_LENGTH:
        raise ParsingError(
            f"I081 body holds {len(raw)} bytes, fewer than {I081_FIXED_LENGTH}"
        )

    prod_id = raw[:20].decode("latin-1")
    prod_msg_seq = int(_digits(raw, 20, 5, 10, "PROD-MSG-SEQ"))
    no_md_entries = int(_digits(raw, 25, 1, 2, "NO-MD-ENTRIES"))

    required = I081_FIXED_LENGTH + no_md_entries * I081_ENTRY_LENGTH
    if body_length < required or len(raw) < required:
        raise ParsingError(
            f"I081 body is too short for {no_md_entries} entries: "
            f"need {required} bytes, declared {body_length}, got {len(raw)}"
        )

    entries = tuple(
        _parse_entry(raw, start)
        for start in range(I081_FIXED_LENGTH, required, I081_ENTRY_LENGTH)
    )
    return MessageI081(
        prod_id=prod_id,
        prod_msg_seq=prod_msg_seq,
        no_md_entries=no_md_entries,
        md_entries=entries,
    )