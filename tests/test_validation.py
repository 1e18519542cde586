import pytest

from fbdl.validation import (
    align_to_power_of_2,
    is_base_type,
    is_valid_inner_type,
    validate_property,
)

BASE_TYPES = [
    "blackbox", "block", "bus", "config", "irq", "mask", "memory",
    "param", "proc", "return", "static", "status", "stream",
]


@pytest.mark.parametrize("name", BASE_TYPES)
def test_base_types(name):
    assert is_base_type(name) is True


@pytest.mark.parametrize("name", ["group", "Block", "", "widget"])
def test_not_base_types(name):
    assert is_base_type(name) is False


@pytest.mark.parametrize(
    "prop, type_name",
    [
        ("size", "blackbox"),
        ("masters", "block"),
        ("width", "bus"),
        ("range", "config"),
        ("out-trigger", "irq"),
        ("atomic", "mask"),
        ("read-latency", "memory"),
        ("range", "param"),
        ("delay", "proc"),
        ("groups", "return"),
        ("reset-value", "static"),
        ("read-value", "status"),
        ("delay", "stream"),
    ],
)
def test_valid_property(prop, type_name):
    assert validate_property(prop, type_name) is None


def test_invalid_property_message():
    with pytest.raises(ValueError) as info:
        validate_property("width", "proc")
    assert str(info.value) == (
        "invalid property 'width' for proc functionality\n"
        "valid properties for proc are: 'delay'"
    )


def test_invalid_property_lists_all_valid():
    with pytest.raises(ValueError) as info:
        validate_property("size", "status")
    message = str(info.value)
    for prop in ("atomic", "groups", "read-value", "width"):
        assert f"'{prop}'" in message
    assert not message.endswith(",")


def test_validate_property_unknown_type():
    with pytest.raises(ValueError, match="invalid base type 'widget'"):
        validate_property("width", "widget")


@pytest.mark.parametrize(
    "inner, outer",
    [("block", "bus"), ("blackbox", "block"), ("param", "proc"), ("return", "stream")],
)
def test_valid_inner_types(inner, outer):
    assert is_valid_inner_type(inner, outer) is True


@pytest.mark.parametrize(
    "inner, outer",
    [("blackbox", "bus"), ("param", "block"), ("config", "config"), ("status", "proc")],
)
def test_invalid_inner_types(inner, outer):
    assert is_valid_inner_type(inner, outer) is False


def test_inner_type_unknown_outer():
    with pytest.raises(ValueError):
        is_valid_inner_type("config", "widget")


@pytest.mark.parametrize("n", [1, 2, 8, 64, 1024])
def test_align_keeps_powers_of_two(n):
    assert align_to_power_of_2(n) == n


@pytest.mark.parametrize("n", [3, 5, 7, 9, 100, 1000, 12345])
def test_align_invariants(n):
    result = align_to_power_of_2(n)
    assert result & (result - 1) == 0
    assert n <= result < 2 * n


def test_align_zero():
    assert align_to_power_of_2(0) == 0


def test_align_negative_raises():
    with pytest.raises(ValueError):
        align_to_power_of_2(-1)