"""XOR checksum used by the market-data wire format.

The checksum covers every byte from the second byte of a message up to the
byte before the checksum field; callers pass exactly that segment.
"""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable


def calculate_xor_checksum(data: bytes | bytearray | memoryview | Iterable[int]) -> int:
    """Return the XOR of every byte in ``data`` (0 for an empty segment)."""
    return reduce(xor, bytes(data), 0)


def verify_xor_checksum(
    data: bytes | bytearray | memoryview | Iterable[int], expected_checksum: int
) -> bool:
    """Return True if the XOR checksum of ``data`` equals ``expected_checksum``."""
    return calculate_xor_checksum(data) == expected_checksum