"""Decoders for TAIFEX tick-by-tick market data: header, BCD fields, checksums and message bodies."""

__version__ = "0.1.0"