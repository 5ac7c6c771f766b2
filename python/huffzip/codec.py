from typing import BinaryIO

import tqdm  # noqa

from huffzip.abc import PSEUDO_EOF, CodeType
from huffzip.bitio import BitInputStream, BitOutputStream
from huffzip.codes import build_code_table
from huffzip.errors import TruncatedStreamError
from huffzip.frequency import CHUNK_SIZE
from huffzip.tree import Node, is_empty_tree


def lookup(codes: CodeType, s: int) -> str:
    code = codes.get(s)
    assert code is not None, f"Symbol {s} has no code in the encoding tree"
    assert code != "", f"Symbol {s} has an empty code"
    return code


def encode_file(
    infile: BinaryIO, encoding_tree: Node, outfile: BitOutputStream,
    progress: bool = False,
) -> int:
    """Write the code of every byte left in `infile`, then the end marker.

    Returns the number of body bits written. The degenerate tree (end marker
    only) writes nothing.
    """
    codes = build_code_table(encoding_tree)
    start = outfile.bits_written

    if is_empty_tree(encoding_tree):
        rest = infile.read(1)
        assert rest == b"", "Input is not empty but the tree is"
        return 0

    with tqdm.tqdm(desc="Encoding", unit="B", disable=not progress) as pbar:
        while chunk := infile.read(CHUNK_SIZE):
            for ch in chunk:
                outfile.write_bits(lookup(codes, ch))
            pbar.update(len(chunk))

    outfile.write_bits(lookup(codes, PSEUDO_EOF))
    return outfile.bits_written - start


def decode_file(
    infile: BitInputStream, encoding_tree: Node, outfile: BinaryIO,
    progress: bool = False,
) -> int:
    """Walk the tree bit by bit, writing each decoded byte to `outfile`.

    Stops at the end marker and returns the number of bytes written.
    """
    # Only the end marker: the original input was empty, there is no body
    if is_empty_tree(encoding_tree):
        return 0

    buf = bytearray()
    written = 0
    curr = encoding_tree
    with tqdm.tqdm(desc="Decoding", unit="B", disable=not progress) as pbar:
        while True:
            nxt = curr.one if infile.read_bit() else curr.zero
            assert nxt is not None, "Descended past a leaf"
            curr = nxt
            if not curr.is_leaf():
                continue

            if curr.symbol == PSEUDO_EOF:
                break
            buf.append(curr.symbol)
            curr = encoding_tree
            if len(buf) >= CHUNK_SIZE:
                outfile.write(bytes(buf))
                written += len(buf)
                pbar.update(len(buf))
                buf.clear()

        if buf:
            outfile.write(bytes(buf))
            written += len(buf)
            pbar.update(len(buf))
    return written


def encode_bits(data: bytes, codes: CodeType) -> str:
    """Bit string for `data` followed by the end marker."""
    if len(codes) == 1:
        assert data == b"", "Input is not empty but the tree is"
        return ""
    return "".join(lookup(codes, s) for s in data) + lookup(codes, PSEUDO_EOF)


def decode_bits(bits: str, encoding_tree: Node) -> bytes:
    if is_empty_tree(encoding_tree):
        return b""

    decoded = bytearray()
    curr = encoding_tree
    for s in bits:
        nxt = curr.one if s == "1" else curr.zero
        assert nxt is not None, "Descended past a leaf"
        curr = nxt
        if curr.is_leaf():
            if curr.symbol == PSEUDO_EOF:
                return bytes(decoded)
            decoded.append(curr.symbol)
            curr = encoding_tree
    raise TruncatedStreamError(f"No end marker in {len(bits)} bits")
