import pytest

from fbdl.errors import TokenError
from fbdl.scanner import (
    Scanner,
    is_digit,
    is_hex_digit,
    is_letter,
    is_valid_after_number,
    scan_bit_string,
    scan_number,
    scan_string,
)
from fbdl.tokens import Kind


def _pos(tok):
    return (tok.kind, tok.start, tok.end, tok.line, tok.column)


def test_char_classes():
    assert is_digit(ord("7"))
    assert not is_digit(ord("a"))
    assert is_hex_digit(ord("F"))
    assert is_hex_digit(ord("c"))
    assert not is_hex_digit(ord("g"))
    assert is_letter(ord("Z"))
    assert not is_letter(ord("_"))
    assert is_valid_after_number(ord(")"))
    assert is_valid_after_number(ord("|"))
    assert not is_valid_after_number(ord("a"))


def test_scanner_bytes_and_positions():
    s = Scanner(b"ab")
    assert not s.end()
    assert s.byte() == ord("a")
    assert s.next_byte() == ord("b")
    s.idx = 1
    assert s.next_byte() == 0
    s.idx = 2
    assert s.end()
    assert s.byte() == 0


def test_scanner_pos_and_col():
    s = Scanner(b"x\nyz", path="f.fbd", line=2, idx=3, nl_idx=1)
    assert s.col(3) == 2
    tok = s.pos()
    assert _pos(tok) == (Kind.NONE, 3, 3, 2, 2)
    assert tok.path == "f.fbd"


def test_scanner_accepts_text():
    s = Scanner("ab")
    assert s.src == b"ab"


@pytest.mark.parametrize(
    "src, idx, want",
    [
        ("const A = 2**5 - 1", 10, (Kind.INT, 10, 10, 1, 11)),
        ("const A1 = 0b1 << 0o3", 11, (Kind.INT, 11, 13, 1, 12)),
        ("const A1 = 0b1 << 0o3", 18, (Kind.INT, 18, 20, 1, 19)),
        ("const C_1 = 0xaf| 0x11", 12, (Kind.INT, 12, 15, 1, 13)),
        ("const C_1 = 0xaf| 0x11", 18, (Kind.INT, 18, 21, 1, 19)),
        ("range = 1:9", 8, (Kind.INT, 8, 8, 1, 9)),
        ("range = 1:9", 10, (Kind.INT, 10, 10, 1, 11)),
    ],
)
def test_scan_number_positions(src, idx, want):
    s = Scanner(src.encode(), idx=idx)
    tok = scan_number(s)
    assert _pos(tok) == want
    assert s.idx == tok.end + 1


def test_scan_float_on_later_line():
    src = "const\n  A = 1\n  B = 2 # Inline comment\n  # Doc comment\n  C = 3.14"
    s = Scanner(src.encode(), idx=61, line=5, nl_idx=54)
    tok = scan_number(s)
    assert _pos(tok) == (Kind.FLOAT, 61, 64, 5, 7)
    assert s.end()


def test_scan_exponent_is_float():
    s = Scanner(b"1e5")
    assert scan_number(s).kind is Kind.FLOAT


@pytest.mark.parametrize(
    "src, msg",
    [
        ("1.2.3", "second point character '.' in number"),
        ("1e2.", "point character '.' after exponent in number"),
        ("1e2d", "invalid character 'd' in number"),
        ("1e2e", "second exponent in number"),
        ("0b12", "invalid character '2' in binary"),
        ("0o8", "invalid character '8' in octal"),
        ("0xg", "invalid character 'g' in hex"),
    ],
)
def test_scan_number_errors(src, msg):
    with pytest.raises(TokenError) as info:
        scan_number(Scanner(src.encode()))
    assert info.value.msg == msg


def test_scan_number_error_points_at_byte():
    with pytest.raises(TokenError) as info:
        scan_number(Scanner(b"1e2d"))
    assert info.value.toks[0].start == 3


@pytest.mark.parametrize(
    "src, idx, want",
    [
        ('s static; groups = ["a", "b"]', 20, (Kind.STRING, 20, 22, 1, 21)),
        ('s static; groups = ["a", "b"]', 25, (Kind.STRING, 25, 27, 1, 26)),
        ('import foo "path"', 11, (Kind.STRING, 11, 16, 1, 12)),
    ],
)
def test_scan_string(src, idx, want):
    s = Scanner(src.encode(), idx=idx)
    tok = scan_string(s)
    assert _pos(tok) == want
    assert s.idx == tok.end + 1


def test_scan_string_unterminated():
    s = Scanner(b'\n"str', idx=1, line=2, nl_idx=0)
    with pytest.raises(TokenError) as info:
        scan_string(s)
    assert info.value.msg == "unterminated string, probably missing '\"'"
    assert info.value.toks[0].start == 1


def test_scan_bit_string():
    s = Scanner(b'x"1F" ')
    tok = scan_bit_string(s)
    assert _pos(tok) == (Kind.BIT_STRING, 0, 4, 1, 1)
    assert s.idx == 5


@pytest.mark.parametrize(
    "src, msg",
    [
        ('b"01-uUwWxXzZ3"', "invalid character '3' in binary bit string"),
        ('B"0', "unterminated binary bit string, probably missing '\"'"),
        ('o"01234567-uUwWxXzZ8"', "invalid character '8' in octal bit string"),
        ('O"0', "unterminated octal bit string, probably missing '\"'"),
        ('x"0123456789aAbBcCdDeEfF-uUwWxXzZ8g"', "invalid character 'g' in hex bit string"),
        ('X"0', "unterminated hex bit string, probably missing '\"'"),
        ('b"01 ', "unterminated binary bit string, probably missing '\"'"),
    ],
)
def test_scan_bit_string_errors(src, msg):
    with pytest.raises(TokenError) as info:
        scan_bit_string(Scanner(src.encode()))
    assert info.value.msg == msg


def test_scan_bit_string_invalid_char_position():
    with pytest.raises(TokenError) as info:
        scan_bit_string(Scanner(b'b"01-uUwWxXzZ3"'))
    assert info.value.toks[0].start == 13


def test_scan_bit_string_requires_prefix():
    with pytest.raises(ValueError):
        scan_bit_string(Scanner(b'q"0"'))