"""Address spaces occupied by blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Single:
    """Address space of a single block, inclusive on both ends."""

    start: int
    end: int


@dataclass(frozen=True)
class Array:
    """Address space of an array of equally sized blocks."""

    start: int
    count: int
    block_size: int

    def end(self) -> int:
        """Return the last address of the last block."""
        return self.start + self.count * self.block_size - 1


AddrSpace = Union[Single, Array]


def start(space: AddrSpace) -> int:
    """Return the first address of an address space."""
    if isinstance(space, (Single, Array)):
        return space.start
    raise TypeError(f"{type(space).__name__} is not an address space")


def end(space: AddrSpace) -> int:
    """Return the last address of an address space."""
    if isinstance(space, Single):
        return space.end
    if isinstance(space, Array):
        return space.end()
    raise TypeError(f"{type(space).__name__} is not an address space")