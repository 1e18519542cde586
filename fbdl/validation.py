"""Checks of functionality types, their properties and their nesting."""

from __future__ import annotations

_VALID_PROPERTIES: dict[str, tuple[str, ...]] = {
    "blackbox": ("size",),
    "block": ("masters", "reset"),
    "bus": ("masters", "reset", "width"),
    "config": ("atomic", "groups", "init-value", "range", "read-value", "reset-value", "width"),
    "irq": (
        "add-enable",
        "clear",
        "enable-init-value",
        "enable-reset-value",
        "groups",
        "in-trigger",
        "out-trigger",
    ),
    "mask": ("atomic", "groups", "init-value", "read-value", "reset-value", "width"),
    "memory": ("access", "byte-write-enable", "read-latency", "size", "width"),
    "param": ("groups", "range", "width"),
    "proc": ("delay",),
    "return": ("groups", "width"),
    "static": ("groups", "init-value", "read-value", "reset-value", "width"),
    "status": ("atomic", "groups", "read-value", "width"),
    "stream": ("delay",),
}

_VALID_INNER_TYPES: dict[str, frozenset[str]] = {
    "blackbox": frozenset(),
    "block": frozenset(
        {"blackbox", "block", "config", "irq", "mask", "memory", "proc", "static", "status", "stream"}
    ),
    "bus": frozenset(
        {"block", "config", "irq", "mask", "memory", "proc", "static", "status", "stream"}
    ),
    "config": frozenset(),
    "irq": frozenset(),
    "mask": frozenset(),
    "memory": frozenset(),
    "param": frozenset(),
    "proc": frozenset({"param", "return"}),
    "return": frozenset(),
    "static": frozenset(),
    "status": frozenset(),
    "stream": frozenset({"param", "return"}),
}

_BASE_TYPES = frozenset(_VALID_PROPERTIES)


def is_base_type(type_name: str) -> bool:
    """Return True if the name is one of the built-in functionality types."""
    return type_name in _BASE_TYPES


def validate_property(prop: str, type_name: str) -> None:
    """Raise ValueError unless the property is valid for the base type.

    An unknown base type is also reported with ValueError.
    """
    try:
        valid = _VALID_PROPERTIES[type_name]
    except KeyError:
        raise ValueError(f"invalid base type '{type_name}'") from None

    if prop in valid:
        return

    msg = f"invalid property '{prop}' for {type_name} functionality"
    if not valid:
        msg += f"type '{type_name}' has no properties"
    else:
        listed = ", ".join(f"'{p}'" for p in valid)
        msg += f"\nvalid properties for {type_name} are: {listed}"
    raise ValueError(msg)


def is_valid_inner_type(inner: str, outer: str) -> bool:
    """Return True if a functionality of type inner may be placed in outer."""
    try:
        valid = _VALID_INNER_TYPES[outer]
    except KeyError:
        raise ValueError(f"invalid base type '{outer}'") from None
    return inner in valid


def align_to_power_of_2(n: int) -> int:
    """Return the smallest power of two not less than n; 0 stays 0."""
    if n < 0:
        raise ValueError(f"cannot align negative value {n}")
    if n == 0:
        return 0
    return 1 << (n - 1).bit_length()