"""Values of the FBDL type system.

FBDL booleans, integers, floats, strings and lists are represented by the
corresponding Python built-in types. Bit literals, ranges and times have
dedicated types defined here.
"""

from __future__ import annotations

from dataclasses import dataclass

_META_CHARS = frozenset("hHlLuUxXwWzZ-")
_DIGITS = {
    "b": frozenset("01"),
    "o": frozenset("01234567"),
    "x": frozenset("0123456789abcdefABCDEF"),
}
_FORMAT_NAMES = {"b": "binary", "o": "octal", "x": "hex"}
_BITS_PER_CHAR = {"b": 1, "o": 3, "x": 4}

NS_PER_SECOND = 1_000_000_000


class BitLiteral(str):
    """A bit string literal in normalised form, for example ``x"1F"``."""

    def bit_width(self) -> int:
        """Return the number of bits the literal represents."""
        try:
            per_char = _BITS_PER_CHAR[self[:1]]
        except KeyError:
            raise ValueError(f"invalid bit string format in {str(self)!r}") from None
        return self.char_width() * per_char

    def char_width(self) -> int:
        """Return the number of value characters, without format and quotes."""
        return len(self) - 3


def make_bit_literal(s: str) -> BitLiteral:
    """Validate a bit literal and return it with a lower case format specifier."""
    if not s:
        raise ValueError("empty bit literal")

    fmt = s[0].lower()
    if fmt not in _DIGITS:
        raise ValueError(f"invalid bit literal format '{s[0]}'")
    if len(s) < 2 or s[1] != '"':
        raise ValueError("missing '\"' at beginning of bit literal")
    if s[-1] != '"':
        raise ValueError("missing '\"' at end of bit literal")

    allowed = _DIGITS[fmt] | _META_CHARS
    for ch in s[2:-1]:
        if ch not in allowed:
            raise ValueError(
                f"make bit literal: invalid character '{ch}' in {_FORMAT_NAMES[fmt]} bit literal"
            )

    return BitLiteral(fmt + s[1:])


def bit_literal_from_int(value: int, width: int) -> BitLiteral:
    """Convert a non-negative integer to a bit literal of the given width.

    Hex format is used when the width is a multiple of 4, octal when it is a
    multiple of 3, and binary otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer, got {type(value).__name__}")

    maximum = (1 << width) - 1
    minimum = -(1 << (width - 1)) if width > 0 else 0

    if value > maximum:
        raise ValueError(
            f"value {value} is too large to be converted to bit string "
            f"of width {width}, max = {maximum}"
        )
    if value < minimum:
        raise ValueError(
            f"value {value} is too small to be converted to bit string "
            f"of width {width}, min = {minimum}"
        )
    if value < 0:
        raise ValueError(
            f"negative value {value} cannot be converted to bit string"
        )

    if width % 4 == 0:
        return BitLiteral(f'x"{value:0{width // 4}x}"')
    if width % 3 == 0:
        return BitLiteral(f'o"{value:0{width // 3}o}"')
    return BitLiteral(f'b"{value:0{width}b}"')


@dataclass(frozen=True)
class Range:
    """An FBDL range value with left and right bounds."""

    left: int
    right: int


@dataclass
class Time:
    """An FBDL time value split into seconds and nanoseconds."""

    s: int = 0
    ns: int = 0

    def normalize(self) -> None:
        """Move whole seconds out of the nanosecond part."""
        if self.ns < NS_PER_SECOND:
            return
        self.s += self.ns // NS_PER_SECOND
        self.ns %= NS_PER_SECOND

    def is_zero(self) -> bool:
        return self.s == 0 and self.ns == 0


def type_name(value: object) -> str:
    """Return the FBDL type name of a value."""
    if isinstance(value, BitLiteral):
        return "bit string"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, list):
        return "list"
    if isinstance(value, Range):
        return "range"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Time):
        return "time"
    raise TypeError(f"{type(value).__name__} is not an FBDL value")