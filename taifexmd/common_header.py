"""The 19-byte header that starts every market-data message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .bcd import ParsingError, bcd_to_ascii


def _decode(data: bytes, num_digits: int, field_name: str) -> str:
    try:
        return bcd_to_ascii(data, num_digits)
    except ParsingError as exc:
        raise ParsingError(f"Failed to decode BCD for {field_name}: {exc}") from exc


@dataclass(frozen=True)
class CommonHeader:
    """Raw fields of the common header; numeric fields stay packed BCD."""

    HEADER_SIZE: ClassVar[int] = 19

    esc_code: int = 0
    transmission_code: int = 0
    message_kind: int = 0
    information_time_bcd: bytes = bytes(6)
    channel_id_bcd: bytes = bytes(2)
    channel_seq_bcd: bytes = bytes(5)
    version_no_bcd: int = 0
    body_length_bcd: bytes = bytes(2)

    @classmethod
    def parse(cls, buffer: bytes | bytearray | memoryview) -> "CommonHeader":
        """Read a header from the start of ``buffer``.

        Raises ParsingError if the buffer is shorter than HEADER_SIZE.
        """
        if buffer is None or len(buffer) < cls.HEADER_SIZE:
            size = 0 if buffer is None else len(buffer)
            raise ParsingError(
                f"buffer of {size} bytes is too short for a {cls.HEADER_SIZE}-byte header"
            )
        raw = bytes(buffer[: cls.HEADER_SIZE])
        return cls(
            esc_code=raw[0],
            transmission_code=raw[1],
            message_kind=raw[2],
            information_time_bcd=raw[3:9],
            channel_id_bcd=raw[9:11],
            channel_seq_bcd=raw[11:16],
            version_no_bcd=raw[16],
            body_length_bcd=raw[17:19],
        )

    def information_time(self) -> str:
        """INFORMATION-TIME as 12 digits (HHMMSSmmmuuu)."""
        return _decode(self.information_time_bcd, 12, "INFORMATION-TIME")

    def channel_id(self) -> int:
        """CHANNEL-ID, 0-9999."""
        return int(_decode(self.channel_id_bcd, 4, "CHANNEL-ID"))

    def channel_seq(self) -> int:
        """CHANNEL-SEQ, 0-9999999999."""
        return int(_decode(self.channel_seq_bcd, 10, "CHANNEL-SEQ"))

    def version_no(self) -> int:
        """VERSION-NO, 0-99."""
        return int(_decode(bytes([self.version_no_bcd]), 2, "VERSION-NO"))

    def body_length(self) -> int:
        """BODY-LENGTH, 0-9999."""
        return int(_decode(self.body_length_bcd, 4, "BODY-LENGTH"))