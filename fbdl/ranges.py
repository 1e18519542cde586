"""Value ranges of params and configs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SingleRange:
    """A single range of possible values, ``left:right``."""

    left: int
    right: int

    def width(self) -> int:
        """Return the bit width required to represent the range."""
        if self.right < 0:
            raise ValueError(f"range right bound {self.right} is negative")
        return self.right.bit_length()


class MultiRange(list):
    """Several ranges; ``[1:3, 8:10]`` allows 1, 2, 3, 8, 9 and 10."""

    def is_empty(self) -> bool:
        return len(self) == 0

    def width(self) -> int:
        """Return the bit width required to represent all the ranges."""
        return max((r.width() for r in self), default=0)