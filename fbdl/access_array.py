"""Register access descriptions for arrays of functionalities."""

from __future__ import annotations

from dataclasses import dataclass

from fbdl.access import Access


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


@dataclass(frozen=True)
class ArrayOneReg(Access):
    """An array with all items placed in one register.

    Example, ``s [4]status; width = 7`` on a 32-bit bus::

        || s[0] | s[1] | s[2] | s[3] | 4 bits gap ||
    """

    addr: int
    first_bit: int
    item_width: int
    item_count: int

    def reg_count(self) -> int:
        return 1

    def start_addr(self) -> int:
        return self.addr

    def end_addr(self) -> int:
        return self.addr

    def start_bit(self) -> int:
        return self.first_bit

    def end_bit(self) -> int:
        return self.first_bit + self.item_count * self.item_width - 1

    def width(self) -> int:
        return self.item_width

    def start_reg_width(self) -> int:
        return self.item_count * self.item_width

    def end_reg_width(self) -> int:
        return self.item_count * self.item_width

    def to_dict(self) -> dict[str, object]:
        return {
            "Type": "ArrayOneReg",
            "Addr": self.addr,
            "StartBit": self.first_bit,
            "ItemWidth": self.item_width,
            "ItemCount": self.item_count,
        }


@dataclass(frozen=True)
class ArrayOneInReg(Access):
    """An array with every item placed in its own register.

    Example, ``c [3]config; width = 25`` on a 32-bit bus::

        || c[0] | 7 bits gap || || c[1] | 7 bits gap || || c[2] | 7 bits gap ||
    """

    n_regs: int
    addr: int
    first_bit: int
    last_bit: int

    def reg_count(self) -> int:
        return self.n_regs

    def start_addr(self) -> int:
        return self.addr

    def end_addr(self) -> int:
        return self.addr + self.n_regs - 1

    def start_bit(self) -> int:
        return self.first_bit

    def end_bit(self) -> int:
        return self.last_bit

    def width(self) -> int:
        return self.last_bit - self.first_bit + 1

    def start_reg_width(self) -> int:
        return self.width()

    def end_reg_width(self) -> int:
        return self.width()

    def to_dict(self) -> dict[str, object]:
        return {
            "Type": "ArrayOneInReg",
            "RegCount": self.n_regs,
            "StartAddr": self.addr,
            "StartBit": self.first_bit,
            "EndBit": self.last_bit,
        }


@dataclass(frozen=True)
class ArrayNRegs(Access):
    """An array packed contiguously across several registers.

    Example, ``p [4]param; width = 14`` on a 32-bit bus::

        || p[0] | p[1] | p[2](0) || || p[2](1) | p[3] | 8 bits gap ||
    """

    n_regs: int
    item_count: int
    item_width: int
    addr: int
    first_bit: int
    bus_width: int

    def reg_count(self) -> int:
        return self.n_regs

    def start_addr(self) -> int:
        return self.addr

    def end_addr(self) -> int:
        return self.addr + self.n_regs - 1

    def start_bit(self) -> int:
        return self.first_bit

    def end_bit(self) -> int:
        return (self.first_bit + self.item_count * self.item_width - 1) % self.bus_width

    def width(self) -> int:
        return self.item_width

    def start_reg_width(self) -> int:
        return self.bus_width - self.first_bit

    def end_reg_width(self) -> int:
        return self.end_bit() + 1

    def to_dict(self) -> dict[str, object]:
        return {
            "Type": "ArrayNRegs",
            "RegCount": self.n_regs,
            "ItemCount": self.item_count,
            "ItemWidth": self.item_width,
            "StartAddr": self.addr,
            "StartBit": self.first_bit,
        }


@dataclass(frozen=True)
class ArrayNInReg(Access):
    """An array with the same number of items in every register.

    Example, ``c [6]config; width = 15`` on a 32-bit bus::

        || c[0] | c[1] | 2 bits gap || || c[2] | c[3] | 2 bits gap || || c[4] | c[5] | 2 bits gap ||
    """

    n_regs: int
    item_count: int
    item_width: int
    items_in_reg: int
    addr: int
    first_bit: int = 0

    def reg_count(self) -> int:
        return self.n_regs

    def start_addr(self) -> int:
        return self.addr

    def end_addr(self) -> int:
        return self.addr + self.n_regs - 1

    def start_bit(self) -> int:
        return self.first_bit

    def end_bit(self) -> int:
        return self.first_bit + self.items_in_reg * self.item_width - 1

    def width(self) -> int:
        return self.item_width

    def start_reg_width(self) -> int:
        return self.width()

    def end_reg_width(self) -> int:
        return self.width()

    def to_dict(self) -> dict[str, object]:
        return {
            "Type": "ArrayNInReg",
            "RegCount": self.n_regs,
            "ItemCount": self.item_count,
            "ItemWidth": self.item_width,
            "ItemsInReg": self.items_in_reg,
            "StartAddr": self.addr,
            "StartBit": self.first_bit,
        }


@dataclass(frozen=True)
class ArrayNInRegMInEndReg(Access):
    """An array with N items per register and fewer items in the last one.

    Example, ``c [5]config; width = 15`` on a 32-bit bus::

        || c[0] | c[1] | 2 bits gap || || c[2] | c[3] | 2 bits gap || || c[4] | 17 bits gap ||
    """

    n_regs: int
    item_count: int
    item_width: int
    items_in_reg: int
    items_in_end_reg: int
    addr: int
    first_bit: int = 0

    def reg_count(self) -> int:
        return self.n_regs

    def start_addr(self) -> int:
        return self.addr

    def end_addr(self) -> int:
        return self.addr + self.n_regs - 1

    def start_bit(self) -> int:
        return self.first_bit

    def end_bit(self) -> int:
        return self.first_bit + self.items_in_end_reg * self.item_width - 1

    def width(self) -> int:
        return self.item_width

    def start_reg_width(self) -> int:
        return self.items_in_reg * self.item_width

    def end_reg_width(self) -> int:
        return self.items_in_end_reg * self.item_width

    def to_dict(self) -> dict[str, object]:
        return {
            "Type": "ArrayNInRegMInEndReg",
            "RegCount": self.n_regs,
            "ItemCount": self.item_count,
            "ItemWidth": self.item_width,
            "ItemsInReg": self.items_in_reg,
            "ItemsInEndReg": self.items_in_end_reg,
            "StartAddr": self.addr,
            "StartBit": self.first_bit,
        }


@dataclass(frozen=True)
class ArrayOneInNRegs(Access):
    """An array whose every item spans several registers, starting at bit 0.

    Example, ``c [2]config; width = 33`` on a 32-bit bus::

        || c[0](0) || || c[0](1) | 31 bits gap || || c[1](0) || || c[1](1) | 31 bits gap ||
    """

    item_count: int
    item_width: int
    addr: int
    bus_width: int

    def regs_per_item(self) -> int:
        """Return the number of registers a single item occupies."""
        return _ceil_div(self.item_width, self.bus_width)

    def reg_count(self) -> int:
        return self.item_count * self.regs_per_item()

    def start_addr(self) -> int:
        return self.addr

    def end_addr(self) -> int:
        return self.addr + self.reg_count() - 1

    def start_bit(self) -> int:
        return 0

    def end_bit(self) -> int:
        remainder = self.item_width % self.bus_width
        if remainder == 0:
            return self.bus_width - 1
        return remainder - 1

    def width(self) -> int:
        return self.item_width

    def start_reg_width(self) -> int:
        return self.bus_width

    def end_reg_width(self) -> int:
        return self.end_bit() + 1

    def to_dict(self) -> dict[str, object]:
        return {
            "Type": "ArrayOneInNRegs",
            "ItemCount": self.item_count,
            "ItemWidth": self.item_width,
            "StartAddr": self.addr,
        }


def _items_in_reg(width: int, bus_width: int) -> int:
    if width <= 0:
        raise ValueError(f"item width must be positive, got {width}")
    items = bus_width // width
    if items == 0:
        raise ValueError(f"item width {width} exceeds bus width {bus_width}")
    return items


def make_array_one_reg(
    item_count: int, addr: int, start_bit: int, width: int, bus_width: int
) -> ArrayOneReg:
    """Place all array items within one register."""
    if start_bit + width * item_count > bus_width:
        raise ValueError(
            "cannot make ArrayOneReg, startBit + (width * itemCount) > busWidth, "
            f"({start_bit} + ({width} * {item_count}) > {bus_width})"
        )
    return ArrayOneReg(addr=addr, first_bit=start_bit, item_width=width, item_count=item_count)


def make_array_one_in_reg(
    item_count: int, addr: int, start_bit: int, width: int, bus_width: int
) -> ArrayOneInReg:
    """Place every array item in its own register."""
    if start_bit + width > bus_width:
        raise ValueError(
            "cannot make ArrayOneInReg, startBit + width > busWidth, "
            f"({start_bit} + {width} > {bus_width})"
        )
    return ArrayOneInReg(
        n_regs=item_count, addr=addr, first_bit=start_bit, last_bit=start_bit + width - 1
    )


def make_array_n_regs(
    item_count: int, start_addr: int, start_bit: int, width: int, bus_width: int
) -> ArrayNRegs:
    """Pack array items contiguously, starting at the given bit."""
    if bus_width <= 0:
        raise ValueError(f"bus width must be positive, got {bus_width}")
    total_width = item_count * width
    first_reg_width = bus_width - start_bit
    reg_count = _ceil_div(total_width - first_reg_width, bus_width) + 1
    return ArrayNRegs(
        n_regs=reg_count,
        item_count=item_count,
        item_width=width,
        addr=start_addr,
        first_bit=start_bit,
        bus_width=bus_width,
    )


def make_array_n_in_reg(
    item_count: int, start_addr: int, width: int, bus_width: int
) -> ArrayNInReg:
    """Place as many items per register as fit; the count must divide evenly."""
    items_in_reg = _items_in_reg(width, bus_width)
    if item_count % items_in_reg != 0:
        raise ValueError(
            "cannot make ArrayNInReg, itemCount % itemsInReg != 0, "
            f"{item_count} % {items_in_reg} != 0"
        )
    return ArrayNInReg(
        n_regs=item_count // items_in_reg,
        item_count=item_count,
        item_width=width,
        items_in_reg=items_in_reg,
        addr=start_addr,
    )


def make_array_n_in_reg_m_in_end_reg(
    item_count: int, start_addr: int, width: int, bus_width: int
) -> ArrayNInRegMInEndReg:
    """Place as many items per register as fit, with a partly filled last register."""
    items_in_reg = _items_in_reg(width, bus_width)
    items_in_end_reg = item_count % items_in_reg
    if items_in_end_reg == 0:
        raise ValueError("itemsInEndReg = 0, use ArrayNInReg")
    return ArrayNInRegMInEndReg(
        n_regs=_ceil_div(item_count, items_in_reg),
        item_count=item_count,
        item_width=width,
        items_in_reg=items_in_reg,
        items_in_end_reg=items_in_end_reg,
        addr=start_addr,
    )


def make_array_one_in_n_regs(
    item_count: int, start_addr: int, width: int, bus_width: int
) -> ArrayOneInNRegs:
    """Place every item across several registers; the width must exceed the bus width."""
    if width <= bus_width:
        raise ValueError(f"width <= busWidth, {width} <= {bus_width}")
    return ArrayOneInNRegs(
        item_count=item_count, item_width=width, addr=start_addr, bus_width=bus_width
    )