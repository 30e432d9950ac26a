import io

import pytest

from hex_dumper import DumpConfig


def _roundtrip(dump, data: bytes) -> bytes:
    text = io.StringIO()
    dump.run(io.BytesIO(data), DumpConfig.create(), text)
    text.seek(0)
    out = io.BytesIO()
    dump.revert(text, out)
    return out.getvalue()


@pytest.mark.parametrize(
    "line,expected",
    [
        ("00000000: 6162 6364 6566 6768 696a 6b6c 6d6e 6f70  abcdefghijklmnop", b"abcdefghijklmnop"),
        ("00000010: 7172 73" + " " * 34 + "qrs", b"qrs"),
        ("00000010: 7172 73" + " " * 34 + "qrs\n", b"qrs"),
        ("00000000: 2020 2020 2020 2020 2020 2020 2020 2020                  ", b" " * 16),
        ("00000020: 0a0d  ..\r\n", b"\n\r"),
        ("000000A0: ABCD EF01  ....", b"\xab\xcd\xef\x01"),
        ("00000000: ", b""),
    ],
)
def test_parse_line(logic, line, expected):
    assert logic.parse_line(line) == expected

@pytest.mark.parametrize(
    "bad",
    [
        "",
        "hello world",
        "0000000: 4142  AB",
        "00000000 4142  AB",
        "00000000: 41424  AB...",
        "00000000: zz41  .A",
        "00000000: 41\t42  AB",
    ],
)
def test_parse_line_errors(logic, bad):
    with pytest.raises(logic.DecodeError):
        logic.parse_line(bad)

@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"a",
        b"abcdefghijklmnopqrs",
        bytes(range(256)),
        b"  spaces  and\tcontrol\x00\x7f  ",
        "Hello123?$€Æ😊".encode("utf-8"),
        bytes(16) * 4,
    ],
)
def test_roundtrip(dump, data):
    assert _roundtrip(dump, data) == data

def test_revert_accepts_rendered_lines(dump):
    lines = dump.iter_lines(io.BytesIO(b"0123456789abcdefXYZ"), DumpConfig.create())
    out = io.BytesIO()
    assert dump.revert(lines, out) == 19
    assert out.getvalue() == b"0123456789abcdefXYZ"

def test_revert_skips_blank_lines(dump):
    out = io.BytesIO()
    dump.revert(["00000000: 4142  AB\n", "\n", "   \n", "00000002: 43  C\n"], out)
    assert out.getvalue() == b"ABC"

def test_revert_stops_at_first_bad_line(dump, logic):
    out = io.BytesIO()
    lines = ["00000000: 4142  AB\n", "00000002: 4g  ?\n", "00000003: 43  C\n"]
    with pytest.raises(logic.DecodeError, match="line 2"):
        dump.revert(lines, out)
    assert out.getvalue() == b"AB"
