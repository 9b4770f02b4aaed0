"""Packed BCD decoding for numeric wire fields.

A field declared as ``9(n)`` is stored as packed BCD: two decimal digits per
byte, high nibble first. When ``n`` is odd the field carries one leading pad
nibble, so the digits are the last ``n`` nibbles of the field.
"""

from __future__ import annotations

from typing import Iterable


class ParsingError(ValueError):
    """Raised when wire data cannot be decoded."""


def bcd_to_ascii(data: bytes | bytearray | memoryview | Iterable[int], num_digits: int) -> str:
    """Decode packed BCD ``data`` into a string of ``num_digits`` decimal digits."""
    raw = bytes(data)
    if not raw:
        raise ParsingError("BCD data is empty")
    if num_digits < 0 or num_digits > 2 * len(raw):
        raise ParsingError(
            f"cannot read {num_digits} digits from {len(raw)} BCD byte(s)"
        )
    nibbles = [n for byte in raw for n in (byte >> 4, byte & 0x0F)]
    digits = nibbles[len(nibbles) - num_digits:]
    if any(n > 9 for n in digits):
        raise ParsingError(f"invalid BCD data: nibble > 9 in {raw.hex()}")
    return "".join(str(n) for n in digits)


def bcd_to_int(data: bytes | bytearray | memoryview | Iterable[int], num_digits: int) -> int:
    """Decode packed BCD ``data`` into an integer of ``num_digits`` digits."""
    text = bcd_to_ascii(data, num_digits)
    if not text:
        raise ParsingError("no digits to convert to an integer")
    return int(text)