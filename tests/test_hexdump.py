import pytest
from hypothesis import given, strategies as st

from op4cipher.hexdump import format_diff_hex, format_hex, format_hex_line


def _parse(text):
    return bytes.fromhex("".join(text.split()))


@given(st.binary(max_size=80), st.integers(min_value=1, max_value=24))
def test_format_hex_round_trip(data, per_line):
    assert _parse(format_hex(data, per_line, True, True)) == data


def test_format_hex_simple_literal():
    assert format_hex(b"\x00\x01", 16, False, False) == "00 01 "


def test_format_hex_line_breaks():
    data = bytes(range(32))
    out = format_hex(data, 16, True, False)
    assert out.count("\n") == 3
    assert out.endswith("\n\n")


def test_format_hex_indent_each_line():
    data = bytes(range(40))
    out = format_hex(data, 8, False, True)
    lines = out.split("\n")
    assert len(lines) == 6
    assert all(line.startswith("\t") for line in lines[:5])


def test_format_hex_empty_with_newline():
    assert format_hex(b"", 16, True, False) == "\n"


def test_format_hex_color_marks():
    out = format_hex(bytes([0, 0x10, 0xFF]), 16, False, False, True)
    assert "\x1b[91m00\x1b[0m" in out
    assert "\x1b[93mff\x1b[0m" in out
    assert "10 " in out


def test_format_hex_rejects_bad_width():
    with pytest.raises(ValueError):
        format_hex(b"\x01", 0)


@given(st.binary(max_size=40), st.integers(min_value=0, max_value=40),
       st.integers(min_value=1, max_value=20))
def test_format_hex_line_fixed_width(data, start, per_line):
    assert len(format_hex_line(data, start, per_line)) == per_line * 3


def test_format_hex_line_padding():
    assert format_hex_line(b"\xab", 0, 2) == "ab    "


def test_format_hex_line_color():
    out = format_hex_line(bytes([0, 0xFF]), 0, 2, True)
    assert out == "\x1b[91m00 \x1b[0m\x1b[93mff \x1b[0m"


@given(st.binary(max_size=60), st.binary(max_size=60),
       st.integers(min_value=1, max_value=24))
def test_format_diff_hex_columns(left, right, per_line):
    out = format_diff_hex(left, right, per_line, True)
    lines = out.splitlines()
    expected_lines = -(-max(len(left), len(right)) // per_line)
    assert len(lines) == expected_lines
    lefts, rights = [], []
    for line in lines:
        assert line.startswith("\t")
        a, b = line[1:].split("\t\t")
        lefts.append(a)
        rights.append(b)
    assert _parse(" ".join(lefts)) == left
    assert _parse(" ".join(rights)) == right


def test_format_diff_hex_empty():
    assert format_diff_hex(b"", b"", 8) == ""