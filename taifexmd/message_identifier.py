"""Map a common header's transmission code and message kind to a message ID."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .common_header import CommonHeader

_HEARTBEAT = 1001
_SEQUENCE_RESET = 1002

_MESSAGE_CODES: Mapping[tuple[str, str], int] = MappingProxyType(
    {
        # Multicast group common
        ("0", "1"): _HEARTBEAT,
        ("0", "2"): _SEQUENCE_RESET,
        # Futures, transmission code 1
        ("1", "1"): 1010,
        ("1", "2"): 1030,
        ("1", "3"): 1011,
        ("1", "4"): 1050,
        ("1", "5"): 1060,
        ("1", "6"): 1120,
        ("1", "7"): 1130,
        ("1", "8"): 1064,
        ("1", "A"): 1012,
        # Futures, transmission code 2
        ("2", "1"): 1070,
        ("2", "2"): 1071,
        ("2", "3"): 1072,
        ("2", "4"): 1100,
        ("2", "A"): 1081,
        ("2", "B"): 1083,
        ("2", "C"): 1084,
        ("2", "D"): 1024,
        ("2", "E"): 1025,
        # Futures, transmission code 3
        ("3", "1"): 1070,
        ("3", "3"): 1140,
        ("3", "4"): 1073,
        # Options, transmission code 4
        ("4", "1"): 1010,
        ("4", "2"): 1030,
        ("4", "3"): 1011,
        ("4", "4"): 1050,
        ("4", "5"): 1060,
        ("4", "6"): 1120,
        ("4", "7"): 1130,
        ("4", "8"): 1064,
        ("4", "A"): 1012,
        # Options, transmission code 5
        ("5", "1"): 1070,
        ("5", "2"): 1071,
        ("5", "3"): 1072,
        ("5", "4"): 1100,
        ("5", "A"): 1081,
        ("5", "B"): 1083,
        ("5", "C"): 1084,
        ("5", "D"): 1024,
        ("5", "E"): 1025,
    }
)


def format_last_three_digits(code: int) -> str:
    """Return the last three decimal digits of ``code``, zero-padded.

    Negative codes yield ``"XXX"``.
    """
    if code < 0:
        return "XXX"
    return f"{code % 1000:03d}"


def identify_message_id(header: CommonHeader) -> str:
    """Return the message ID (e.g. ``"I010"``, ``"M1001"``) for ``header``.

    Heartbeat and sequence-reset messages map to ``"M1001"`` and ``"M1002"``;
    every other known message maps to ``"I"`` plus the last three digits of
    its numeric code. An unrecognised combination yields an empty string.
    """
    key = (chr(header.transmission_code), chr(header.message_kind))
    code = _MESSAGE_CODES.get(key)
    if code is None:
        return ""
    if code in (_HEARTBEAT, _SEQUENCE_RESET):
        return f"M{code}"
    return "I" + format_last_three_digits(code)