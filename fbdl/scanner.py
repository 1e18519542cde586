"""Scanning state and literal scanners for FBDL source code."""

from __future__ import annotations

from dataclasses import dataclass

from fbdl.errors import TokenError
from fbdl.tokens import Kind, Token

_AFTER_NUMBER = frozenset(b" \t\n()]-+*/%=<>;:,|&")
_BIT_STRING_TERMINATORS = frozenset(b" \n;,")
_BIT_STRING_META = frozenset(b"-uUwWxXzZ")
_BIT_STRING_FORMATS = {
    ord("b"): ("binary", frozenset(b"01") | _BIT_STRING_META),
    ord("o"): ("octal", frozenset(b"01234567") | _BIT_STRING_META),
    ord("x"): ("hex", frozenset(b"0123456789aAbBcCdDeEfF") | _BIT_STRING_META),
}


def is_digit(b: int) -> bool:
    return ord("0") <= b <= ord("9")


def is_hex_digit(b: int) -> bool:
    return (
        ord("0") <= b <= ord("9")
        or ord("a") <= b <= ord("f")
        or ord("A") <= b <= ord("F")
    )


def is_letter(b: int) -> bool:
    return ord("a") <= b <= ord("z") or ord("A") <= b <= ord("Z")


def is_valid_after_number(b: int) -> bool:
    """Return True if the byte may directly follow a number literal."""
    return b in _AFTER_NUMBER


@dataclass
class Scanner:
    """Position within the source being tokenized.

    ``idx`` is the current byte index, ``nl_idx`` the index of the last
    newline, ``line`` the current line and ``indent`` the current indent level.
    """

    src: bytes
    path: str = ""
    line: int = 1
    indent: int = 0
    idx: int = 0
    nl_idx: int = -1

    def __post_init__(self) -> None:
        if isinstance(self.src, str):
            self.src = self.src.encode("utf-8")

    def end(self) -> bool:
        """Return True if the whole source has been consumed."""
        return self.idx >= len(self.src)

    def col(self, idx: int) -> int:
        """Return the column number of the given index."""
        return idx - self.nl_idx

    def pos(self) -> Token:
        """Return a NONE token covering the current byte."""
        return self.token(Kind.NONE)

    def token(self, kind: Kind, length: int = 1) -> Token:
        """Return a token of the given kind starting at the current byte."""
        return Token(
            kind=kind,
            start=self.idx,
            end=self.idx + length - 1,
            line=self.line,
            column=self.col(self.idx),
            src=self.src,
            path=self.path,
        )

    def byte(self) -> int:
        """Return the current byte, or 0 past the end of the source."""
        if self.idx >= len(self.src):
            return 0
        return self.src[self.idx]

    def next_byte(self) -> int:
        """Return the byte after the current one, or 0 past the end."""
        if self.idx + 1 >= len(self.src):
            return 0
        return self.src[self.idx + 1]


def scan_string(scanner: Scanner) -> Token:
    """Scan a double quoted string starting at the current byte."""
    tok = scanner.token(Kind.STRING)
    while True:
        scanner.idx += 1
        if scanner.end():
            raise TokenError("unterminated string, probably missing '\"'", [tok])
        b = scanner.byte()
        if b != ord("\n"):
            tok.end += 1
        if b == ord('"'):
            break
    scanner.idx += 1
    return tok


def scan_bit_string(scanner: Scanner) -> Token:
    """Scan a binary, octal or hex bit string such as ``x"1F"``."""
    fmt = scanner.byte() | 0x20
    if fmt not in _BIT_STRING_FORMATS or scanner.next_byte() != ord('"'):
        raise ValueError("scanner is not at the beginning of a bit string")
    name, allowed = _BIT_STRING_FORMATS[fmt]
    unterminated = f"unterminated {name} bit string, probably missing '\"'"

    tok = scanner.token(Kind.BIT_STRING, 2)
    scanner.idx += 2
    while True:
        if scanner.end():
            raise TokenError(unterminated, [tok])
        b = scanner.byte()
        if b == ord('"'):
            tok.end += 1
            scanner.idx += 1
            return tok
        if b in allowed:
            tok.end += 1
            scanner.idx += 1
        elif b in _BIT_STRING_TERMINATORS:
            raise TokenError(unterminated, [tok])
        else:
            raise TokenError(
                f"invalid character '{chr(b)}' in {name} bit string",
                [scanner.token(Kind.BIT_STRING)],
            )


def _scan_prefixed_int(scanner: Scanner, is_valid_digit, name: str) -> Token:
    tok = scanner.token(Kind.INT)
    scanner.idx += 2
    while not scanner.end():
        b = scanner.byte()
        if is_valid_digit(b):
            scanner.idx += 1
        elif is_valid_after_number(b):
            break
        else:
            raise TokenError(
                f"invalid character '{chr(b)}' in {name}", [scanner.token(Kind.INT)]
            )
    tok.end = scanner.idx - 1
    return tok


def scan_number(scanner: Scanner) -> Token:
    """Scan an integer or float literal; prefixes 0b, 0o and 0x select the base."""
    b = scanner.byte()
    nb = scanner.next_byte() | 0x20
    if b == ord("0") and nb == ord("b"):
        return _scan_prefixed_int(scanner, lambda c: c in b"01", "binary")
    if b == ord("0") and nb == ord("o"):
        return _scan_prefixed_int(scanner, lambda c: ord("0") <= c <= ord("7"), "octal")
    if b == ord("0") and nb == ord("x"):
        return _scan_prefixed_int(scanner, is_hex_digit, "hex")

    tok = scanner.token(Kind.INT)
    has_point = False
    has_e = False

    while True:
        scanner.idx += 1
        if scanner.end():
            break
        b = scanner.byte()
        if is_digit(b):
            continue
        if b == ord("."):
            if has_point:
                raise TokenError(
                    "second point character '.' in number", [scanner.token(Kind.FLOAT)]
                )
            if has_e:
                raise TokenError(
                    "point character '.' after exponent in number",
                    [scanner.token(Kind.FLOAT)],
                )
            has_point = True
        elif b in (ord("e"), ord("E")):
            if has_e:
                raise TokenError("second exponent in number", [scanner.token(Kind.FLOAT)])
            has_e = True
        elif is_valid_after_number(b):
            break
        else:
            raise TokenError(
                f"invalid character '{chr(b)}' in number", [scanner.token(Kind.INT)]
            )

    tok.end = scanner.idx - 1
    if has_point or has_e:
        tok.kind = Kind.FLOAT
    return tok