import pytest

from fbdl.bitstr import BitStr


@pytest.mark.parametrize(
    "src, want",
    [
        ('b"0101"', 'b"0101"'),
        ('o"234"', 'b"010011100"'),
        ('o"77"', 'b"111111"'),
        ('o"22"', 'b"010010"'),
        ('o"hh"', 'b"hhhhhh"'),
        ('o"uu"', 'b"uuuuuu"'),
        ('o"WW"', 'b"WWWWWW"'),
        ('x"1"', 'b"0001"'),
        ('x"ab"', 'b"10101011"'),
        ('x"cd"', 'b"11001101"'),
        ('x"ef"', 'b"11101111"'),
        ('x"-"', 'b"----"'),
        ('x"LL"', 'b"LLLLLLLL"'),
    ],
)
def test_to_bin(src, want):
    assert BitStr(src).to_bin() == want


@pytest.mark.parametrize(
    "src, width, want",
    [
        ('b"0"', 2, 'b"00"'),
        ('b"1"', 2, 'b"01"'),
        ('b"111"', 3, 'b"111"'),
        ('b"101"', 5, 'b"00101"'),
    ],
)
def test_extend_bin(src, width, want):
    assert BitStr(src).extend(width) == want


@pytest.mark.parametrize(
    "src, width, want",
    [
        ('x"0"', 8, 'x"00"'),
        ('x"F"', 8, 'x"0F"'),
        ('x"a0"', 12, 'x"0a0"'),
        ('x"abcd"', 20, 'x"0abcd"'),
        ('x"f"', 5, 'b"01111"'),
        ('x"u"', 7, 'b"000uuuu"'),
        ('x"a0"', 10, 'b"0010100000"'),
    ],
)
def test_extend_hex(src, width, want):
    assert BitStr(src).extend(width) == want


def test_extend_octal():
    assert BitStr('o"7"').extend(6) == 'o"07"'
    assert BitStr('o"7"').extend(4) == 'b"0111"'


def test_extend_to_lesser_width_raises():
    with pytest.raises(ValueError, match="lesser"):
        BitStr('x"ff"').extend(4)


def test_extend_result_width_matches():
    for width in range(8, 20):
        assert BitStr('x"a5"').extend(width).bit_width() == width


def test_format_predicates():
    assert BitStr('b"1"').is_bin() and not BitStr('b"1"').is_hex()
    assert BitStr('o"1"').is_octal() and not BitStr('o"1"').is_bin()
    assert BitStr('x"1"').is_hex() and not BitStr('x"1"').is_octal()


def test_widths():
    assert BitStr('x"ab"').bit_width() == 8
    assert BitStr('o"234"').bit_width() == 9
    assert BitStr('x"abcd"').char_width() == 4


def test_value_literal():
    assert BitStr('x"AB"').value_literal() == "AB"
    assert BitStr('b"1100"').value_literal() == "1100"


@pytest.mark.parametrize(
    "src, want",
    [('b"1100"', 12), ('o"17"', 15), ('x"ff"', 255), ('x"FF"', 255)],
)
def test_to_int(src, want):
    assert BitStr(src).to_int() == want


@pytest.mark.parametrize("src", ['x"u1"', 'b"1-"', 'x""', 'x"1_0"', 'x"1ffffffffffffffff"'])
def test_to_int_invalid(src):
    with pytest.raises(ValueError, match="cannot parse"):
        BitStr(src).to_int()