"""Body of the I010 product basic data message."""

from __future__ import annotations

from dataclasses import dataclass

from .bcd import ParsingError, bcd_to_ascii

I010_BODY_LENGTH = 32
"""Length of the fixed I010 body, excluding CHECK-SUM and TERMINAL-CODE."""


@dataclass(frozen=True)
class MessageI010:
    """Product basic data.

    Prices are scaled integers; ``decimal_locator`` and
    ``strike_price_decimal_locator`` give their number of decimal places.
    Dates are eight-digit ``YYYYMMDD`` strings.
    """

    prod_id_s: str
    reference_price: int
    prod_kind: str
    decimal_locator: int
    strike_price_decimal_locator: int
    begin_date: str
    end_date: str
    flow_group: int
    delivery_date: str
    dynamic_banding: str


def _digits(raw: bytes, start: int, size: int, num_digits: int, field_name: str) -> str:
    try:
        return bcd_to_ascii(raw[start:start + size], num_digits)
    except ParsingError as exc:
        raise ParsingError(f"I010 {field_name}: {exc}") from exc


def _text(raw: bytes, start: int, size: int) -> str:
    return raw[start:start + size].decode("latin-1")


def parse_i010_body(body: bytes | bytearray | memoryview | None, body_length: int) -> MessageI010:
    """Parse an I010 body.

    ``body_length`` is the length declared by the common header; bytes past
    the fixed 32-byte part (such as CHECK-SUM and TERMINAL-CODE) are ignored.
    Raises ParsingError if the body is missing, too short or holds bad BCD.
    """
    if body is None:
        raise ParsingError("I010 body is missing")
    if body_length < I010_BODY_LENGTH:
        raise ParsingError(
            f"I010 body length {body_length} is shorter than {I010_BODY_LENGTH} bytes"
        )
    raw = bytes(body)
    if len(raw) < I010_BODY_LENGTH:
        raise ParsingError(
            f"I010 body holds {len(raw)} bytes, fewer than {I010_BODY_LENGTH}"
        )

    return MessageI010(
        prod_id_s=_text(raw, 0, 10),
        reference_price=int(_digits(raw, 10, 5, 9, "REFERENCE-PRICE")),
        prod_kind=_text(raw, 15, 1),
        decimal_locator=int(_digits(raw, 16, 1, 1, "DECIMAL-LOCATOR")),
        strike_price_decimal_locator=int(
            _digits(raw, 17, 1, 1, "STRIKE-PRICE-DECIMAL-LOCATOR")
        ),
        begin_date=_digits(raw, 18, 4, 8, "BEGIN-DATE"),
        end_date=_digits(raw, 22, 4, 8, "END-DATE"),
        flow_group=int(_digits(raw, 26, 1, 2, "FLOW-GROUP")),
        delivery_date=_digits(raw, 27, 4, 8, "DELIVERY-DATE"),
        dynamic_banding=_text(raw, 31, 1),
    )