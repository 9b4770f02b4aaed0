# taifexmd

Decoders for the TAIFEX tick-by-tick market data feed (the multicast
"逐筆行情" format). The package turns raw message bytes into Python objects.
It has no dependencies outside the standard library.

## Modules

- `taifexmd.checksum`: XOR checksum over a message segment.
  `calculate_xor_checksum(data)` returns the XOR of all bytes (0 for an
  empty segment); `verify_xor_checksum(data, expected_checksum)` compares it
  with an expected value.
- `taifexmd.bcd`: packed BCD decoding. `bcd_to_ascii(data, num_digits)`
  returns the last `num_digits` nibbles as a digit string and
  `bcd_to_int(data, num_digits)` returns them as an integer. Empty data, too
  many digits for the data, or a nibble above 9 raise `ParsingError` (a
  subclass of `ValueError`).
- `taifexmd.common_header`: the 19-byte `CommonHeader` (`HEADER_SIZE`).
  `CommonHeader.parse(buffer)` reads the raw fields and raises
  `ParsingError` if the buffer is too short. The methods
  `information_time()`, `channel_id()`, `channel_seq()`, `version_no()` and
  `body_length()` decode the BCD fields.
- `taifexmd.message_identifier`: `identify_message_id(header)` maps a
  header's transmission code and message kind to an id such as `"I081"`,
  or `"M1001"` / `"M1002"` for heartbeat and sequence reset. An unknown
  combination gives an empty string. `format_last_three_digits(code)`
  renders the last three digits of a numeric code, zero-padded.
- Message bodies, each parser taking the body bytes and the body length from
  the header and raising `ParsingError` on malformed input:
  - `taifexmd.control_messages`: `parse_i001_body` (heartbeat,
    `MessageI001`) and `parse_i002_body` (sequence reset, `MessageI002`);
    the body length must be 0 or 3.
  - `taifexmd.product_info`: `parse_i010_body` returns `MessageI010`
    (product basic data).
  - `taifexmd.book_update`: `parse_i081_body` returns `MessageI081` with a
    tuple of `MdEntryI081` order book updates.
  - `taifexmd.book_snapshot`: `parse_i083_body` returns `MessageI083` with a
    tuple of `MdEntryI083` snapshot levels.
- `taifexmd.log`: a small levelled logger. `LogLevel` (`DEBUG`, `INFO`,
  `WARNING`, `ERROR`, `NONE`), `set_log_level`, `get_log_level`,
  `format_log_line` and `log_message`; warnings and errors go to stderr,
  everything else to stdout. The default level is `INFO`.

All message objects are frozen dataclasses.

## Installation

```
pip install .
```

## Example

```python
from taifexmd.common_header import CommonHeader
from taifexmd.message_identifier import identify_message_id
from taifexmd.book_update import parse_i081_body

header = CommonHeader.parse(packet)
length = header.body_length()
body = packet[CommonHeader.HEADER_SIZE:CommonHeader.HEADER_SIZE + length]

if identify_message_id(header) == "I081":
    update = parse_i081_body(body, length)
    for entry in update.md_entries:
        print(entry.md_entry_type, entry.md_entry_px, entry.md_entry_size)
```

Price fields are kept as scaled integers; apply the decimal locator from the
product's I010 message to obtain the actual price.

## What this package does not do

It only decodes bytes you hand it. It does not receive multicast traffic,
request retransmissions, maintain order books, or replay captured files, and
it has no command-line tool. Message ids other than I001, I002, I010, I081
and I083 are recognised by `identify_message_id` but their bodies are not
decoded.

## Running the tests

```
pip install ".[test]"
pytest
```