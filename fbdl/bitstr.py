"""Bit strings used for init, reset and read values."""

from __future__ import annotations

from fbdl.values import BitLiteral

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_META_CHARS = frozenset("hHlLuUxXwWzZ-")
_BASE_DIGITS = {
    2: frozenset("01"),
    8: frozenset("01234567"),
    16: _HEX_DIGITS,
}
_UINT64_MAX = (1 << 64) - 1


class BitStr(str):
    """A bit string such as ``b"0101"``, ``o"17"`` or ``x"AB"``.

    Bit strings support registers of arbitrary width and the meta logic
    values known from hardware description languages.
    """

    def bit_width(self) -> int:
        """Return the number of bits the string represents."""
        return BitLiteral(self).bit_width()

    def char_width(self) -> int:
        """Return the number of value characters, without format and quotes."""
        return BitLiteral(self).char_width()

    def is_bin(self) -> bool:
        return self[:1] == "b"

    def is_octal(self) -> bool:
        return self[:1] == "o"

    def is_hex(self) -> bool:
        return self[:1] == "x"

    def extend(self, width: int) -> BitStr:
        """Return the bit string extended with leading '0' bits to the given width."""
        current = self.bit_width()
        if width < current:
            raise ValueError("cannot extend bit string width to lesser value")
        if width == current:
            return self

        if self.is_bin():
            return self._extend_bin(width)

        bits_per_char = 3 if self.is_octal() else 4
        diff = width - current
        if diff % bits_per_char == 0:
            padding = "0" * (diff // bits_per_char)
            return BitStr(f'{self[0]}"{padding}{self.value_literal()}"')
        return self.to_bin()._extend_bin(width)

    def _extend_bin(self, width: int) -> BitStr:
        padding = "0" * (width - self.bit_width())
        return BitStr(f'b"{padding}{self.value_literal()}"')

    def to_bin(self) -> BitStr:
        """Return the equivalent binary bit string."""
        if self.is_bin():
            return self
        if self.is_octal():
            bits_per_char = 3
        elif self.is_hex():
            bits_per_char = 4
        else:
            raise ValueError(f"invalid bit string format in {str(self)!r}")

        chunks = []
        for ch in self.value_literal():
            if ch in _HEX_DIGITS:
                chunks.append(format(int(ch, 16), "04b")[4 - bits_per_char:])
            elif ch in _META_CHARS:
                chunks.append(ch * bits_per_char)
            else:
                raise ValueError(f"invalid character '{ch}' in bit string {str(self)!r}")
        return BitStr(f'b"{"".join(chunks)}"')

    def to_int(self) -> int:
        """Convert the bit string to an unsigned 64-bit integer.

        Raises ValueError if the string holds meta values or does not fit.
        """
        if self.is_octal():
            base = 8
        elif self.is_hex():
            base = 16
        else:
            base = 2
        body = self.value_literal()
        allowed = _BASE_DIGITS[base]
        if not body or any(ch not in allowed for ch in body):
            raise ValueError(f"cannot parse bit string '{self}' to integer")
        value = int(body, base)
        if value > _UINT64_MAX:
            raise ValueError(f"cannot parse bit string '{self}' to integer: value out of range")
        return value

    def value_literal(self) -> str:
        """Return the value pattern, for example ``AB`` for ``x"AB"``."""
        return self[2:-1]