"""Errors that point at tokens in the source."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from fbdl.tokens import Kind, Token

_RED = "\033[1;31m"
_RESET = "\033[0m"


class TokenError(Exception):
    """An error with a message and the tokens it concerns.

    Its string form shows each token's source line with the token underlined.
    Colour is used when ``color`` is True, or when it is None and standard
    output is a terminal.
    """

    def __init__(self, msg: str, toks: Iterable[Token] = (), color: Optional[bool] = None):
        super().__init__(msg)
        self.msg = msg
        self.toks = list(toks)
        self.color = color

    def _colors(self) -> tuple[str, str]:
        use = self.color
        if use is None:
            isatty = getattr(sys.stdout, "isatty", None)
            use = bool(isatty and isatty())
        return (_RED, _RESET) if use else ("", "")

    def __str__(self) -> str:
        prefix, suffix = self._colors()
        parts = [f"{prefix}error{suffix}: {self.msg}\n"]
        parts.extend(self.code(tok) for tok in self.toks)
        return "".join(parts)

    def code(self, tok: Token) -> str:
        """Return the source line of the token with the token underlined."""
        src = tok.src if isinstance(tok.src, bytes) else str(tok.src).encode()

        line_num = str(tok.line)
        margin = " " * (len(line_num) + 2)

        line_start = tok.start
        while line_start > 0 and src[line_start - 1 : line_start] != b"\n":
            line_start -= 1

        line_end = tok.end
        if tok.kind is Kind.NEWLINE:
            line_end -= 1
        else:
            while line_end < len(src) - 1 and src[line_end + 1 : line_end + 2] != b"\n":
                line_end += 1

        line = src[line_start : line_end + 1].decode("utf-8", errors="replace")

        prefix, suffix = self._colors()
        indent = " " * max(tok.column - 1, 0)
        carets = "^" * (tok.end - tok.start + 1)

        return (
            f"{tok.path} +{tok.line}:{tok.column}\n"
            f"{margin}|\n"
            f" {line_num} | {line}\n"
            f"{margin}| {indent}{prefix}{carets}{suffix}\n"
        )