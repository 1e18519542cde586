"""Tokens of the Functional Bus Description Language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Kind(Enum):
    """Token kinds; the value of each member is its human readable label."""

    NONE = ""
    COMMENT = "comment"
    INDENT = "indent increment"
    DEDENT = "indent decrement"
    NEWLINE = "newline"
    EOF = "end of file"
    IDENT = "identifier"
    QUAL_IDENT = "qualified identifier"
    BOOL = "bool"
    INT = "integer"
    FLOAT = "float"
    STRING = "string"
    BIT_STRING = "bit string"
    TIME = "time"
    NEG = "!"
    ASS = "'='"
    ADD = "'+'"
    SUB = "'-'"
    MUL = "'*'"
    DIV = "'/'"
    REM = "'%'"
    EXP = "'**'"
    EQ = "'=='"
    NEQ = "'!='"
    LESS = "'<'"
    LESS_EQ = "'<='"
    GREATER = "'>'"
    GREATER_EQ = "'>='"
    AND = "'&&'"
    OR = "'||'"
    LSHIFT = "'<<'"
    RSHIFT = "'>>'"
    BIT_AND = "'&'"
    BIT_OR = "'|'"
    XOR = "'^'"
    LPAREN = "'('"
    RPAREN = "')'"
    LBRACKET = "'['"
    RBRACKET = "']'"
    COMMA = "','"
    SEMICOLON = "';'"
    COLON = "':'"
    # Keywords
    CONST = "'const'"
    IMPORT = "'import'"
    TYPE = "'type'"
    # Functionalities
    BLOCK = "'block'"
    BUS = "'bus'"
    CONFIG = "'config'"
    IRQ = "'irq'"
    MASK = "'mask'"
    MEMORY = "'memory'"
    PARAM = "'param'"
    PROC = "'proc'"
    RETURN = "'return'"
    STATIC = "'static'"
    STATUS = "'status'"
    STREAM = "'stream'"
    # Properties
    ACCESS = "'access'"
    ADD_ENABLE = "'add-enable'"
    ATOMIC = "'atomic'"
    BYTE_WRITE_ENABLE = "'byte-write-enable'"
    CLEAR = "'clear'"
    DELAY = "'delay'"
    ENABLE_INIT_VALUE = "'enable-init-value'"
    ENABLE_RESET_VALUE = "'enable-reset-value'"
    GROUPS = "'groups'"
    INIT_VALUE = "'init-value'"
    IN_TRIGGER = "'in-trigger'"
    MASTERS = "'masters'"
    OUT_TRIGGER = "'out-trigger'"
    RANGE = "'range'"
    READ_LATENCY = "'read-latency'"
    READ_VALUE = "'read-value'"
    RESET = "'reset'"
    RESET_VALUE = "'reset-value'"
    SIZE = "'size'"
    WIDTH = "'width'"
    # Currently unused
    PERIOD = "'.'"
    LBRACE = "'{'"
    RBRACE = "'}'"

    def label(self) -> str:
        """Return the name used for the kind in messages."""
        return self.value

    def precedence(self) -> Optional[int]:
        """Return the operator precedence, or None if the kind is no operator."""
        return _PRECEDENCE.get(self)

    def is_functionality(self) -> bool:
        return self in _FUNCTIONALITIES

    def is_property(self) -> bool:
        return self in _PROPERTIES

    def is_number(self) -> bool:
        return self in (Kind.INT, Kind.FLOAT)


_PRECEDENCE = {
    Kind.COLON: 0,
    Kind.OR: 1,
    Kind.AND: 2,
    Kind.EQ: 3,
    Kind.NEQ: 3,
    Kind.LESS: 3,
    Kind.LESS_EQ: 3,
    Kind.GREATER: 3,
    Kind.GREATER_EQ: 3,
    Kind.ADD: 4,
    Kind.SUB: 4,
    Kind.BIT_OR: 4,
    Kind.XOR: 4,
    Kind.MUL: 5,
    Kind.DIV: 5,
    Kind.REM: 5,
    Kind.LSHIFT: 5,
    Kind.RSHIFT: 5,
    Kind.BIT_AND: 5,
    Kind.EXP: 6,
}

_FUNCTIONALITIES = frozenset(
    {
        Kind.BLOCK,
        Kind.BUS,
        Kind.CONFIG,
        Kind.IRQ,
        Kind.MASK,
        Kind.MEMORY,
        Kind.PARAM,
        Kind.PROC,
        Kind.RETURN,
        Kind.STATIC,
        Kind.STATUS,
        Kind.STREAM,
    }
)

_PROPERTIES = frozenset(
    {
        Kind.ACCESS,
        Kind.ADD_ENABLE,
        Kind.ATOMIC,
        Kind.BYTE_WRITE_ENABLE,
        Kind.CLEAR,
        Kind.DELAY,
        Kind.ENABLE_INIT_VALUE,
        Kind.ENABLE_RESET_VALUE,
        Kind.GROUPS,
        Kind.INIT_VALUE,
        Kind.IN_TRIGGER,
        Kind.MASTERS,
        Kind.OUT_TRIGGER,
        Kind.RANGE,
        Kind.READ_LATENCY,
        Kind.READ_VALUE,
        Kind.RESET,
        Kind.RESET_VALUE,
        Kind.SIZE,
        Kind.WIDTH,
    }
)


@dataclass
class Token:
    """A token with its position in the source.

    ``start`` and ``end`` are inclusive byte indexes, ``line`` and ``column``
    are counted from 1.
    """

    kind: Kind
    start: int = 0
    end: int = 0
    line: int = 0
    column: int = 0
    src: bytes = b""
    path: str = ""

    def name(self) -> str:
        """Return the name used for the token in messages."""
        return self.kind.label()


def loc(tok: Token) -> str:
    """Return the token location in ``line:column`` format."""
    return f"{tok.line}:{tok.column}"


def text(tok: Token, src: Union[bytes, str]) -> str:
    """Return the token text from the source."""
    chunk = src[tok.start : tok.end + 1]
    if isinstance(chunk, bytes):
        return chunk.decode("utf-8", errors="replace")
    return chunk


def join(tok1: Token, tok2: Token) -> Token:
    """Return a NONE token spanning both tokens, for reporting errors.

    Raises ValueError if the tokens come from different files, lie on
    different lines, or if tok1 starts after tok2.
    """
    if tok1.path != tok2.path:
        raise ValueError("cannot join tokens from different files")
    if tok1.line != tok2.line:
        raise ValueError("cannot join tokens placed in different lines")
    if tok1.column > tok2.column:
        raise ValueError("cannot join tokens, tok1 starts after tok2")

    return Token(
        kind=Kind.NONE,
        start=tok1.start,
        end=tok2.end,
        line=tok1.line,
        column=tok1.column,
        src=tok1.src,
        path=tok1.path,
    )