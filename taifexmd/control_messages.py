"""Bodies of the heartbeat (I001) and sequence-reset (I002) messages.

Both messages carry no data. Their body length is either 0, or 3 when it
counts the CHECK-SUM (1 byte) and TERMINAL-CODE (2 bytes) fields.
"""

from __future__ import annotations

from dataclasses import dataclass

from .bcd import ParsingError

_EMPTY_BODY_LENGTHS = frozenset({0, 3})


@dataclass(frozen=True)
class MessageI001:
    """Heartbeat message; the body holds no data."""


@dataclass(frozen=True)
class MessageI002:
    """Sequence-reset message; the body holds no data."""


def _check_empty(name: str, body_length: int) -> None:
    if body_length not in _EMPTY_BODY_LENGTHS:
        raise ParsingError(
            f"{name} body is expected to be empty; got body length {body_length}"
        )


def parse_i001_body(body: bytes | bytearray | memoryview | None, body_length: int) -> MessageI001:
    """Validate an I001 body; raises ParsingError unless its length is 0 or 3."""
    _check_empty("I001", body_length)
    return MessageI001()


def parse_i002_body(body: bytes | bytearray | memoryview | None, body_length: int) -> MessageI002:
    """Validate an I002 body; raises ParsingError unless its length is 0 or 3."""
    _check_empty("I002", body_length)
    return MessageI002()