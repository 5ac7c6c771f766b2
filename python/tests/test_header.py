import io

import pytest  # noqa

from huffzip.abc import PSEUDO_EOF
from huffzip.errors import MalformedHeaderError
from huffzip.frequency import frequency_table_of, get_frequency_table
from huffzip.header import read_file_header, write_file_header


_tables = [
    {PSEUDO_EOF: 1},
    {ord("a"): 4, PSEUDO_EOF: 1},
    {ord(" "): 3, ord("0"): 12, ord("9"): 1, PSEUDO_EOF: 1},
    {s: s + 1 for s in range(256)} | {PSEUDO_EOF: 1},
    {0: 10**12, 255: 7, PSEUDO_EOF: 1},
]


@pytest.mark.parametrize("table", _tables)
def test_header_roundtrip(table: dict[int, int]):
    out = io.BytesIO()
    n = write_file_header(out, table)
    assert n == len(out.getvalue())

    inp = io.BytesIO(out.getvalue() + b"\xff\x00")
    assert read_file_header(inp) == table
    # positioned on the first body byte
    assert inp.read() == b"\xff\x00"


def test_header_layout_is_sorted():
    out = io.BytesIO()
    write_file_header(out, {ord("b"): 2, PSEUDO_EOF: 1, ord("a"): 10})
    assert out.getvalue() == b"2 a10 b2 "


def test_write_requires_pseudo_eof():
    out = io.BytesIO()
    with pytest.raises(ValueError):
        write_file_header(out, {ord("a"): 1})
    assert out.getvalue() == b""


def test_write_rejects_non_byte_symbol():
    with pytest.raises(ValueError):
        write_file_header(io.BytesIO(), {300: 1, PSEUDO_EOF: 1})


@pytest.mark.parametrize("blob", [
    b"",            # no count at all
    b"3",           # count without separator
    b"x ",          # non-numeric count
    b" ",           # empty count
    b"-1 ",         # negative count
    b"300 ",        # more entries than bytes exist
    b"2 a4 ",       # fewer pairs than declared
    b"1 a",         # truncated pair
    b"1 a4",        # frequency without separator
    b"1 az ",       # non-numeric frequency
    b"1 a0 ",       # zero frequency
    b"2 a1 a2 ",    # duplicate symbol
])
def test_malformed_header(blob: bytes):
    with pytest.raises(MalformedHeaderError):
        read_file_header(io.BytesIO(blob))


def test_malformed_header_is_value_error():
    with pytest.raises(ValueError):
        read_file_header(io.BytesIO(b"?"))


def test_frequency_table():
    freq = get_frequency_table(io.BytesIO(b"abracadabra"))
    assert freq == {
        ord("a"): 5, ord("b"): 2, ord("c"): 1, ord("d"): 1, ord("r"): 2,
        PSEUDO_EOF: 1,
    }
    assert freq == frequency_table_of(b"abracadabra")


def test_frequency_table_empty():
    assert get_frequency_table(io.BytesIO(b"")) == {PSEUDO_EOF: 1}


def test_frequency_table_reads_from_current_position():
    inp = io.BytesIO(b"zzzab")
    inp.seek(3)
    assert get_frequency_table(inp) == {ord("a"): 1, ord("b"): 1, PSEUDO_EOF: 1}
    assert inp.read() == b""
