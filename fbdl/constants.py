"""Containers for named constants."""

from __future__ import annotations

from dataclasses import dataclass, field

from fbdl.values import BitLiteral


@dataclass
class Container:
    """Constants grouped by their type."""

    bools: dict[str, bool] = field(default_factory=dict)
    bool_lists: dict[str, list[bool]] = field(default_factory=dict)
    floats: dict[str, float] = field(default_factory=dict)
    ints: dict[str, int] = field(default_factory=dict)
    int_lists: dict[str, list[int]] = field(default_factory=dict)
    strings: dict[str, str] = field(default_factory=dict)

    def _groups(self) -> tuple[dict, ...]:
        return (self.bools, self.bool_lists, self.floats, self.ints, self.int_lists, self.strings)

    def is_empty(self) -> bool:
        """Return True if the container holds no constants."""
        return not any(self._groups())

    def has_const(self, name: str) -> bool:
        """Return True if a constant with the given name is already present."""
        return any(name in group for group in self._groups())

    def add_const(self, name: str, value: object) -> None:
        """Store a value under the given name in the group matching its type.

        Lists whose elements do not all share the type of the first element
        are not stored.
        """
        if isinstance(value, BitLiteral):
            raise TypeError("bit string constants are not supported")
        if isinstance(value, bool):
            self.bools[name] = value
        elif isinstance(value, float):
            self.floats[name] = value
        elif isinstance(value, int):
            self.ints[name] = value
        elif isinstance(value, list):
            self._add_list(name, value)
        elif isinstance(value, str):
            self.strings[name] = value
        else:
            raise TypeError(f"cannot store {type(value).__name__} as a constant")

    def _add_list(self, name: str, value: list) -> None:
        if not value:
            raise ValueError(f"cannot store empty list constant '{name}'")
        first = value[0]
        if isinstance(first, BitLiteral):
            raise TypeError("bit string list constants are not supported")
        if isinstance(first, bool):
            if all(isinstance(v, bool) for v in value):
                self.bool_lists[name] = list(value)
        elif isinstance(first, int):
            if all(isinstance(v, int) and not isinstance(v, bool) for v in value):
                self.int_lists[name] = list(value)
        elif isinstance(first, str):
            raise TypeError("string list constants are not supported")
        else:
            raise TypeError(f"cannot store list of {type(first).__name__} as a constant")