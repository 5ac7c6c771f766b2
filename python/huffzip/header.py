"""Frequency table preamble.

Layout (all ASCII except the raw symbol byte):

    <n> ' ' { <symbol byte> <frequency> ' ' } * n

Entries are written in ascending symbol order. The end marker is never
written: its frequency is always 1 and it is put back on read.
"""
from typing import BinaryIO

from huffzip.abc import EOF_FREQUENCY, PSEUDO_EOF, FreqType
from huffzip.errors import MalformedHeaderError

SEPARATOR: bytes = b" "
MAX_ENTRIES: int = 256


def write_file_header(outfile: BinaryIO, frequencies: FreqType) -> int:
    """Write the header and return the number of bytes written."""
    if PSEUDO_EOF not in frequencies:
        raise ValueError("No PSEUDO_EOF defined.")

    symbols = sorted(s for s in frequencies if s != PSEUDO_EOF)
    for s in symbols:
        if not 0 <= s <= 255:
            raise ValueError(f"Symbol out of byte range: {s}")

    header = bytearray(f"{len(symbols)}".encode("ascii") + SEPARATOR)
    for s in symbols:
        header.append(s)
        header += f"{frequencies[s]}".encode("ascii") + SEPARATOR
    outfile.write(bytes(header))
    return len(header)


def _read_number(infile: BinaryIO, what: str) -> int:
    digits = bytearray()
    while True:
        b = infile.read(1)
        if len(b) < 1:
            raise MalformedHeaderError(f"Unexpected end of header in {what}")
        if b == SEPARATOR:
            break
        if not b.isdigit():
            raise MalformedHeaderError(f"Invalid character {b!r} in {what}")
        digits += b
    if not digits:
        raise MalformedHeaderError(f"Missing number in {what}")
    return int(digits)


def read_file_header(infile: BinaryIO) -> FreqType:
    """Parse the header written by write_file_header.

    Leaves `infile` positioned on the first byte of the bit body.
    """
    num_values = _read_number(infile, "entry count")
    if num_values > MAX_ENTRIES:
        raise MalformedHeaderError(
            f"Entry count {num_values} exceeds the byte alphabet"
        )

    result: FreqType = {}
    for i in range(num_values):
        b = infile.read(1)
        if len(b) < 1:
            raise MalformedHeaderError(
                f"Header declares {num_values} entries but only {i} are present"
            )
        symbol = b[0]
        frequency = _read_number(infile, f"frequency of entry {i}")
        if frequency == 0:
            raise MalformedHeaderError(f"Zero frequency for symbol {symbol}")
        if symbol in result:
            raise MalformedHeaderError(f"Duplicate entry for symbol {symbol}")
        result[symbol] = frequency

    result[PSEUDO_EOF] = EOF_FREQUENCY
    return result
