"""Conversion of FBDL source code into a stream of tokens."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Union

from fbdl.errors import TokenError
from fbdl.scanner import (
    Scanner,
    is_digit,
    is_letter,
    scan_bit_string,
    scan_number,
    scan_string,
)
from fbdl.tokens import Kind, Token

_SPACE = ord(" ")
_TAB = ord("\t")
_NEWLINE = ord("\n")
_QUOTE = ord('"')

_DOUBLE = {
    b"!=": Kind.NEQ,
    b"==": Kind.EQ,
    b"**": Kind.EXP,
    b"<=": Kind.LESS_EQ,
    b"<<": Kind.LSHIFT,
    b">=": Kind.GREATER_EQ,
    b">>": Kind.RSHIFT,
    b"&&": Kind.AND,
    b"||": Kind.OR,
}

_SINGLE = {
    ord(":"): Kind.COLON,
    ord("!"): Kind.NEG,
    ord("="): Kind.ASS,
    ord("+"): Kind.ADD,
    ord("-"): Kind.SUB,
    ord("%"): Kind.REM,
    ord("*"): Kind.MUL,
    ord("/"): Kind.DIV,
    ord("<"): Kind.LESS,
    ord(">"): Kind.GREATER,
    ord("("): Kind.LPAREN,
    ord(")"): Kind.RPAREN,
    ord("["): Kind.LBRACKET,
    ord("]"): Kind.RBRACKET,
    ord("&"): Kind.BIT_AND,
    ord("|"): Kind.BIT_OR,
}

_BIT_STRING_PREFIXES = frozenset(b"bBoOxX")
_WORD_EXTRA = frozenset(b"_-.")

_KEYWORDS = {
    "false": Kind.BOOL,
    "true": Kind.BOOL,
    "block": Kind.BLOCK,
    "bus": Kind.BUS,
    "config": Kind.CONFIG,
    "const": Kind.CONST,
    "import": Kind.IMPORT,
    "irq": Kind.IRQ,
    "mask": Kind.MASK,
    "memory": Kind.MEMORY,
    "param": Kind.PARAM,
    "proc": Kind.PROC,
    "return": Kind.RETURN,
    "static": Kind.STATIC,
    "status": Kind.STATUS,
    "stream": Kind.STREAM,
    "type": Kind.TYPE,
}

_PROPERTIES = {
    "access": Kind.ACCESS,
    "add-enable": Kind.ADD_ENABLE,
    "atomic": Kind.ATOMIC,
    "byte-write-enable": Kind.BYTE_WRITE_ENABLE,
    "clear": Kind.CLEAR,
    "delay": Kind.DELAY,
    "enable-init-value": Kind.ENABLE_INIT_VALUE,
    "enable-reset-value": Kind.ENABLE_RESET_VALUE,
    "groups": Kind.GROUPS,
    "init-value": Kind.INIT_VALUE,
    "in-trigger": Kind.IN_TRIGGER,
    "masters": Kind.MASTERS,
    "out-trigger": Kind.OUT_TRIGGER,
    "range": Kind.RANGE,
    "read-latency": Kind.READ_LATENCY,
    "read-value": Kind.READ_VALUE,
    "reset": Kind.RESET,
    "reset-value": Kind.RESET_VALUE,
    "size": Kind.SIZE,
    "width": Kind.WIDTH,
}

_TIME_UNITS = frozenset({"ns", "us", "ms", "s"})

_PROPERTY_CONTEXT = (Kind.NEWLINE, Kind.SEMICOLON, Kind.INDENT)
_DOC_COMMENT_CONTEXT = (Kind.NEWLINE, Kind.INDENT, Kind.DEDENT)
_INSTANCE_NAME_CONTEXT = (Kind.NEWLINE, Kind.INDENT, Kind.DEDENT)

_QUAL_IDENT_MSG = "symbol name in qualified identifier must start with upper case letter"


def _get_word(src: bytes, idx: int) -> str:
    end = idx
    while end < len(src):
        b = src[end]
        if is_letter(b) or is_digit(b) or b in _WORD_EXTRA:
            end += 1
        else:
            break
    return src[idx:end].decode("ascii")


def _is_valid_qualified_identifier(word: str) -> bool:
    parts = word.split(".")
    symbol = parts[1] if len(parts) > 1 else ""
    return bool(symbol) and symbol[0].isupper()


class _Lexer:
    def __init__(self, scanner: Scanner):
        self.sc = scanner
        self.toks: list[Token] = []

    def last(self) -> Optional[Token]:
        return self.toks[-1] if self.toks else None

    def run(self) -> list[Token]:
        while not self.sc.end():
            tok = self._next()
            if tok is not None:
                self.toks.append(tok)
        self.toks.append(self.sc.token(Kind.EOF))
        return self.toks

    def _span(self, kind: Kind, start: int, length: int) -> Token:
        sc = self.sc
        return Token(
            kind=kind,
            start=start,
            end=start + length - 1,
            line=sc.line,
            column=sc.col(start),
            src=sc.src,
            path=sc.path,
        )

    def _next(self) -> Optional[Token]:
        sc = self.sc
        b = sc.byte()
        nb = sc.next_byte()

        if b == _SPACE:
            return self._space()
        if b == _TAB:
            raise TokenError(
                "tab character '\\t' allowed only in comments, use spaces",
                [sc.token(Kind.INDENT)],
            )
        if b == _NEWLINE:
            self._newline()
            return None
        if b == ord("#"):
            return self._comment()
        if b == ord(","):
            return self._separator(Kind.COMMA, "redundant ','")
        if b == ord(";"):
            return self._separator(Kind.SEMICOLON, "redundant ';'")

        kind = _DOUBLE.get(bytes((b, nb)))
        if kind is not None:
            tok = sc.token(kind, 2)
            sc.idx += 2
            return tok
        kind = _SINGLE.get(b)
        if kind is not None:
            tok = sc.token(kind)
            sc.idx += 1
            return tok

        if b == _QUOTE:
            return scan_string(sc)
        if b in _BIT_STRING_PREFIXES and nb == _QUOTE:
            return scan_bit_string(sc)
        if is_digit(b):
            return scan_number(sc)
        if is_letter(b):
            return self._word()

        raise TokenError(f"invalid byte 0x{b:x} ('{chr(b)}')", [sc.pos()])

    def _space(self) -> Optional[Token]:
        sc = self.sc
        last = self.last()
        if last is not None and last.kind is Kind.NEWLINE:
            return self._indent()

        start = sc.idx
        sc.idx += 1
        while sc.byte() == _SPACE:
            sc.idx += 1
        count = sc.idx - start

        if sc.byte() == _NEWLINE:
            sc.idx -= 1
            if count > 1:
                tok = sc.pos()
                tok.start = start
                tok.column -= count - 1
                raise TokenError(f"extra {count} spaces at line end", [tok])
            raise TokenError("extra space at line end", [sc.pos()])
        return None

    def _indent(self) -> Optional[Token]:
        sc = self.sc
        indent = sc.token(Kind.INDENT)

        count = 0
        while sc.byte() == _SPACE:
            sc.idx += 1
            count += 1

        if sc.byte() == _NEWLINE:
            if count > 1:
                indent.end += count - 1
                raise TokenError(f"extra {count} spaces at line end", [indent])
            raise TokenError("extra space at line end", [indent])

        indent.end += count - 1

        if count % 2 != 0:
            raise TokenError(
                f"odd number ({count}) of spaces in indent, expected even number",
                [indent],
            )

        level = count // 2
        if level == sc.indent + 1:
            sc.indent = level
            return indent
        if level > sc.indent + 1:
            raise TokenError(
                f"multi indent increase, previous indent {sc.indent} , current indent {level}",
                [indent],
            )
        if level < sc.indent:
            self.toks.extend(
                replace(indent, kind=Kind.DEDENT) for _ in range(sc.indent - level)
            )
            sc.indent = level
        return None

    def _newline(self) -> None:
        sc = self.sc
        last = self.last()
        if last is not None and last.kind is Kind.SEMICOLON:
            raise TokenError("extra ';' at line end", [last])

        nl = sc.token(Kind.NEWLINE)
        while True:
            sc.nl_idx = sc.idx
            sc.line += 1
            sc.idx += 1
            if sc.end() or sc.byte() != _NEWLINE:
                break
            nl.end += 1
        self.toks.append(nl)

        if not sc.end() and sc.byte() != _SPACE and sc.indent != 0:
            self.toks.extend(sc.token(Kind.DEDENT) for _ in range(sc.indent))
            sc.indent = 0

    def _comment(self) -> Optional[Token]:
        sc = self.sc
        tok = sc.token(Kind.COMMENT)
        while True:
            sc.idx += 1
            if sc.end() or sc.byte() == _NEWLINE:
                tok.end = sc.idx - 1
                break

        # Only comments that may document something are kept.
        last = self.last()
        if last is None or last.kind in _DOC_COMMENT_CONTEXT:
            return tok
        return None

    def _separator(self, kind: Kind, redundant_msg: str) -> Token:
        sc = self.sc
        last = self.last()
        if last is not None and last.kind is kind:
            raise TokenError(redundant_msg, [sc.token(kind)])
        tok = sc.token(kind)
        sc.idx += 1
        return tok

    def _word(self) -> Optional[Token]:
        sc = self.sc
        word = _get_word(sc.src, sc.idx)
        has_hyphen = "-" in word
        has_dot = "." in word

        if has_hyphen and has_dot:
            return self._hyphenated_with_dots(word)
        if has_dot:
            tok = self._span(Kind.QUAL_IDENT, sc.idx, len(word))
            if not _is_valid_qualified_identifier(word):
                raise TokenError(_QUAL_IDENT_MSG, [tok])
            sc.idx = tok.end + 1
            return tok
        if has_hyphen:
            return self._hyphenated(word)
        return self._plain(word)

    def _hyphenated_with_dots(self, word: str) -> Token:
        # Such a word is for sure a part of an expression.
        sc = self.sc
        chunks = word.split("-")
        for i, chunk in enumerate(chunks):
            kind = Kind.QUAL_IDENT if "." in chunk else Kind.IDENT
            tok = self._span(kind, sc.idx, len(chunk))
            if kind is Kind.QUAL_IDENT and not _is_valid_qualified_identifier(chunk):
                raise TokenError(_QUAL_IDENT_MSG, [tok])
            if i == len(chunks) - 1:
                sc.idx = tok.end + 1
                return tok
            self.toks.append(tok)
            sc.idx += len(chunk)
            self.toks.append(sc.token(Kind.SUB))
            sc.idx += 1
        raise AssertionError("unreachable")

    def _split_hyphenated(self, word: str) -> None:
        sc = self.sc
        base = sc.idx
        cut = word.rindex("-")
        self.toks.extend(
            [
                self._span(Kind.IDENT, base, cut),
                self._span(Kind.SUB, base + cut, 1),
                self._span(Kind.IDENT, base + cut + 1, len(word) - cut - 1),
            ]
        )
        sc.idx = base + len(word)

    def _hyphenated(self, word: str) -> Optional[Token]:
        sc = self.sc
        kind = _PROPERTIES.get(word)
        last = self.last()
        if kind is None or (last is not None and last.kind not in _PROPERTY_CONTEXT):
            self._split_hyphenated(word)
            return None
        tok = self._span(kind, sc.idx, len(word))
        sc.idx = tok.end + 1
        return tok

    def _plain(self, word: str) -> Token:
        sc = self.sc
        last = self.last()

        kind = _KEYWORDS.get(word)
        if kind is None:
            kind = _PROPERTIES.get(word, Kind.IDENT)
            # Properties outside of a property position are identifiers.
            if (
                kind is not Kind.IDENT
                and last is not None
                and last.kind not in _PROPERTY_CONTEXT
            ):
                kind = Kind.IDENT

        # Functionality keywords may be used as instance names.
        if kind.is_functionality() and (
            last is None or last.kind in _INSTANCE_NAME_CONTEXT
        ):
            kind = Kind.IDENT

        tok = self._span(kind, sc.idx, len(word))
        sc.idx = tok.end + 1

        if (
            kind is Kind.IDENT
            and last is not None
            and last.kind is Kind.INT
            and word in _TIME_UNITS
        ):
            self.toks.pop()
            tok = Token(
                kind=Kind.TIME,
                start=last.start,
                end=tok.end,
                line=last.line,
                column=last.column,
                src=sc.src,
                path=sc.path,
            )
        return tok


def tokenize(src: Union[bytes, str], path: str = "") -> list[Token]:
    """Split FBDL source code into tokens, ending with an EOF token.

    Raises TokenError on the first lexical error.
    """
    return _Lexer(Scanner(src, path)).run()