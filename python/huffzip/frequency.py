import io
from collections import Counter
from typing import BinaryIO

from huffzip.abc import EOF_FREQUENCY, PSEUDO_EOF, FreqType

CHUNK_SIZE: int = 1 << 16


def get_frequency_table(infile: BinaryIO) -> FreqType:
    """Count every byte from the current position of `infile` to its end.

    The end marker is always added with a count of 1, so even an empty input
    yields a table with one entry.
    """
    counter: Counter[int] = Counter()
    while chunk := infile.read(CHUNK_SIZE):
        counter.update(chunk)

    freq: FreqType = {s: n for s, n in sorted(counter.items())}
    freq[PSEUDO_EOF] = EOF_FREQUENCY
    return freq


def frequency_table_of(data: bytes) -> FreqType:
    return get_frequency_table(io.BytesIO(data))
