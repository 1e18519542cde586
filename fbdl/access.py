"""Register access descriptions for single functionalities and block sizes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Access(ABC):
    """How a functionality is placed within bus registers."""

    @abstractmethod
    def reg_count(self) -> int:
        """Return the number of occupied registers."""

    @abstractmethod
    def start_addr(self) -> int:
        """Return the address of the first occupied register."""

    @abstractmethod
    def end_addr(self) -> int:
        """Return the address of the last occupied register."""

    @abstractmethod
    def start_bit(self) -> int:
        """Return the first occupied bit in the first register."""

    @abstractmethod
    def end_bit(self) -> int:
        """Return the last occupied bit in the last register."""

    @abstractmethod
    def width(self) -> int:
        """Return the total width of a single functionality."""

    @abstractmethod
    def start_reg_width(self) -> int:
        """Return the width occupied in the first register."""

    @abstractmethod
    def end_reg_width(self) -> int:
        """Return the width occupied in the last register."""

    @abstractmethod
    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready description of the access."""


@dataclass(frozen=True)
class SingleOneReg(Access):
    """A single functionality placed within one register.

    Example, ``s status; width = 23`` on a 32-bit bus::

        || s | 9 bits gap ||
    """

    addr: int
    first_bit: int
    last_bit: int

    def reg_count(self) -> int:
        return 1

    def start_addr(self) -> int:
        return self.addr

    def end_addr(self) -> int:
        return self.addr

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
            "Type": "SingleOneReg",
            "Addr": self.addr,
            "StartBit": self.first_bit,
            "EndBit": self.last_bit,
        }


@dataclass(frozen=True)
class SingleNRegs(Access):
    """A single functionality placed within several consecutive registers.

    Example, ``c config; width = 72`` on a 32-bit bus::

        || c(0) || || c(1) || || c(2) | 24 bits gap ||
    """

    n_regs: int
    addr: int
    first_bit: int
    last_bit: int
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
        return self.last_bit

    def width(self) -> int:
        w = self.bus_width - self.first_bit + self.last_bit + 1
        if self.n_regs > 2:
            w += self.bus_width * (self.n_regs - 2)
        return w

    def start_reg_width(self) -> int:
        return self.bus_width - self.first_bit

    def end_reg_width(self) -> int:
        return self.last_bit + 1

    def is_end_reg_wider(self) -> bool:
        """Return True if the last register holds more bits than the first."""
        return self.last_bit > self.bus_width - self.first_bit

    def to_dict(self) -> dict[str, object]:
        return {
            "Type": "SingleNRegs",
            "RegCount": self.n_regs,
            "StartAddr": self.addr,
            "StartBit": self.first_bit,
            "EndBit": self.last_bit,
        }


@dataclass
class Sizes:
    """Address space sizes of a block."""

    block_aligned: int = 0
    compact: int = 0
    own: int = 0


def make_single_one_reg(addr: int, start_bit: int, width: int, bus_width: int) -> SingleOneReg:
    """Place a functionality within a single register."""
    if start_bit + width > bus_width:
        raise ValueError(
            "cannot make SingleOneReg, startBit + width > busWidth, "
            f"({start_bit} + {width} > {bus_width})"
        )
    return SingleOneReg(addr=addr, first_bit=start_bit, last_bit=start_bit + width - 1)


def make_single_n_regs(addr: int, start_bit: int, width: int, bus_width: int) -> SingleNRegs:
    """Place a functionality across consecutive registers."""
    if bus_width <= 0:
        raise ValueError(f"bus width must be positive, got {bus_width}")

    reg_count = 2
    covered = bus_width - start_bit
    while covered + bus_width < width:
        covered += bus_width
        reg_count += 1

    return SingleNRegs(
        n_regs=reg_count,
        addr=addr,
        first_bit=start_bit,
        last_bit=width - covered - 1,
        bus_width=bus_width,
    )


def make_single(addr: int, start_bit: int, width: int, bus_width: int) -> Access:
    """Place a functionality in one register if it fits, otherwise in several."""
    if width <= bus_width - start_bit:
        return make_single_one_reg(addr, start_bit, width, bus_width)
    return make_single_n_regs(addr, start_bit, width, bus_width)