from typing import BinaryIO

from huffzip.errors import TruncatedStreamError


class BitOutputStream(object):
    """Packs bits MSB-first into bytes written to a binary stream.

    close() pads the last partial byte with zeros. The underlying stream is
    left open.
    """

    def __init__(self, out: BinaryIO) -> None:
        self.out = out
        self.current_byte = 0
        self.bits_in_byte = 0
        self.bits_written = 0

    def __enter__(self) -> "BitOutputStream":
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback) -> None:
        # Nothing is flushed while an exception propagates
        if exc_type is None:
            self.close()

    def write_bit(self, b: int) -> None:
        if b not in (0, 1):
            raise ValueError(f"Got unexpected bit: {b!r}")

        self.current_byte = (self.current_byte << 1) | b
        self.bits_in_byte += 1
        self.bits_written += 1
        if self.bits_in_byte == 8:
            self.out.write(bytes([self.current_byte]))
            self.current_byte = 0
            self.bits_in_byte = 0

    def write_bits(self, code: str) -> None:
        for c in code:
            self.write_bit(1 if c == "1" else 0)

    def close(self) -> None:
        if self.bits_in_byte > 0:
            pad = 8 - self.bits_in_byte
            self.out.write(bytes([self.current_byte << pad]))
            self.current_byte = 0
            self.bits_in_byte = 0


class BitInputStream(object):
    """Reads bits MSB-first from a binary stream."""

    def __init__(self, inp: BinaryIO) -> None:
        self.inp = inp
        self.current_byte = 0
        self.bits_left = 0
        self.bits_read = 0

    def __enter__(self) -> "BitInputStream":
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback) -> None:
        self.close()

    def read_bit(self) -> int:
        if self.bits_left == 0:
            b = self.inp.read(1)
            if len(b) < 1:
                raise TruncatedStreamError(
                    f"Bit stream ended after {self.bits_read} bits"
                )
            self.current_byte = b[0]
            self.bits_left = 8

        self.bits_left -= 1
        self.bits_read += 1
        return (self.current_byte >> self.bits_left) & 1

    def close(self) -> None:
        # Drop the rest of a partially consumed byte (padding)
        self.bits_left = 0
