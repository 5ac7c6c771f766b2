import os

import fire  # noqa

from huffzip.abc import PSEUDO_EOF
from huffzip.codes import build_code_table
from huffzip.frequency import frequency_table_of
from huffzip.huffman import Huffman, compress, decompress
from huffzip.tree import encoding_tree


def ch(x: int) -> str:
    if x == PSEUDO_EOF:
        return "<EOF>"
    if 32 <= x < 127:
        return chr(x)
    elif x == ord("\n"):
        return "\\n"
    return f"<{x:02x}>"


def compress_file(in_file: str, out_file: str, progress: bool = True) -> None:
    with open(in_file, "rb") as fin, open(out_file, "wb") as fout:
        compress(fin, fout, progress=progress)
    in_size = os.path.getsize(in_file)
    out_size = os.path.getsize(out_file)
    print(f"{in_file}: {in_size} bytes -> {out_file}: {out_size} bytes")


def decompress_file(in_file: str, out_file: str, progress: bool = True) -> None:
    with open(in_file, "rb") as fin, open(out_file, "wb") as fout:
        try:
            decompress(fin, fout, progress=progress)
        except BaseException:
            # A failed decompression leaves nothing usable behind
            fout.close()
            os.remove(out_file)
            raise
    print(f"{in_file} -> {out_file}: {os.path.getsize(out_file)} bytes")


def check(in_file: str) -> None:
    with open(in_file, "rb") as f:
        data = f.read()

    comp = Huffman()
    encoded = comp.encode(data)
    decoded = comp.decode(encoded)
    if data != decoded:
        raise RuntimeError(
            f"Round trip mismatch: {len(data)} bytes in, {len(decoded)} bytes out"
        )
    comp.report(data, encoded)


def codes(in_file: str) -> None:
    with open(in_file, "rb") as f:
        freq = frequency_table_of(f.read())

    with encoding_tree(freq) as root:
        table = build_code_table(root)

    for s in sorted(table, key=lambda s: (len(table[s]), s)):
        print(f"{ch(s):>6} {freq[s]:>10} {table[s]}")


if __name__ == "__main__":
    fire.Fire({
        "compress": compress_file,
        "decompress": decompress_file,
        "check": check,
        "codes": codes,
    })
