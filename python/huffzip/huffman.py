import io
from typing import Any, BinaryIO

from huffzip.abc import PSEUDO_EOF, Compressor, FreqType
from huffzip.bitio import BitInputStream, BitOutputStream
from huffzip.codec import decode_bits, decode_file, encode_bits, encode_file
from huffzip.codes import build_code_table, weighted_length
from huffzip.frequency import frequency_table_of, get_frequency_table
from huffzip.header import read_file_header, write_file_header
from huffzip.tree import encoding_tree


def compress(infile: BinaryIO, outfile: BinaryIO, progress: bool = False) -> None:
    """Compress everything from the current position of `infile`.

    `infile` is read twice, so it must be seekable. The tree is released on
    every exit path.
    """
    if not infile.seekable():
        raise ValueError("compress needs a seekable input stream")
    start = infile.tell()

    freq = get_frequency_table(infile)
    with encoding_tree(freq) as root:
        write_file_header(outfile, freq)
        infile.seek(start)
        with BitOutputStream(outfile) as bits:
            encode_file(infile, root, bits, progress=progress)


def decompress(infile: BinaryIO, outfile: BinaryIO, progress: bool = False) -> None:
    """Inverse of compress. On error, whatever reached `outfile` is garbage."""
    freq = read_file_header(infile)
    with encoding_tree(freq) as root:
        with BitInputStream(infile) as bits:
            decode_file(bits, root, outfile, progress=progress)


def compress_bytes(data: bytes) -> bytes:
    out = io.BytesIO()
    compress(io.BytesIO(data), out)
    return out.getvalue()


def decompress_bytes(blob: bytes) -> bytes:
    out = io.BytesIO()
    decompress(io.BytesIO(blob), out)
    return out.getvalue()


class Huffman(Compressor):
    """Static Huffman coder over bytes with an end-of-stream symbol."""

    def __init__(self, verbose: bool = True) -> None:
        self.verbose = verbose

    def encode(self, data: bytes) -> dict[str, Any]:
        assert type(data) is bytes
        freq: FreqType = frequency_table_of(data)

        with encoding_tree(freq) as root:
            codes = build_code_table(root)
            encoded = encode_bits(data, codes)

        if self.verbose:
            lengths = {s: len(c) for s, c in codes.items()}
            print("Alphabet:", [s for s in freq if s != PSEUDO_EOF])
            print("Frequencies:", freq)
            print("Code lengths:", lengths)
        if len(codes) > 1:
            assert len(encoded) == weighted_length(freq, codes)

        return {"data": encoded, "meta": {"freq": freq}}

    def report(self, data: bytes, encoded: dict[str, Any]) -> None:
        bits = len(encoded["data"])
        freq = encoded["meta"]["freq"]
        print(f"{len(freq) - 1} distinct bytes, {len(data)} bytes in, "
              f"{bits} bits ({bits / 8:.2f} bytes) out")
        if bits > 0:
            print(f"Compression rate: {len(data) * 8 / bits:.2f}x")

    def decode(self, encoded: dict[str, Any]) -> bytes:
        meta = encoded["meta"]
        freq: FreqType = {int(s): int(n) for s, n in meta["freq"].items()}
        assert PSEUDO_EOF in freq, "Frequency table without PSEUDO_EOF"

        with encoding_tree(freq) as root:
            return decode_bits(encoded["data"], root)
