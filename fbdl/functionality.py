"""Functionalities of a registerified bus description."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from fbdl import addrspace
from fbdl.access import Access, Sizes
from fbdl.addrspace import AddrSpace
from fbdl.bitstr import BitStr
from fbdl.constants import Container
from fbdl.ranges import MultiRange, SingleRange
from fbdl.values import Time

RangeValue = Union[SingleRange, MultiRange]


@dataclass(kw_only=True)
class Func:
    """Attributes common to every functionality."""

    type_name: ClassVar[str] = ""

    name: str = ""
    doc: str = ""
    is_array: bool = False
    count: int = 1


@dataclass(kw_only=True)
class Blackbox(Func):
    type_name: ClassVar[str] = "blackbox"

    size: int = 0
    sizes: Sizes = field(default_factory=Sizes)
    addr_space: Optional[AddrSpace] = None


@dataclass(kw_only=True)
class Config(Func):
    type_name: ClassVar[str] = "config"

    atomic: bool = False
    init_value: Optional[BitStr] = None
    groups: list[str] = field(default_factory=list)
    range: Optional[RangeValue] = None
    read_value: Optional[BitStr] = None
    reset_value: Optional[BitStr] = None
    width: int = 0
    access: Optional[Access] = None


@dataclass(kw_only=True)
class Irq(Func):
    type_name: ClassVar[str] = "irq"

    add_enable: bool = False
    clear: str = ""
    enable_init_value: Optional[BitStr] = None
    enable_reset_value: Optional[BitStr] = None
    groups: list[str] = field(default_factory=list)
    in_trigger: str = ""
    out_trigger: str = ""
    access: Optional[Access] = None


@dataclass(kw_only=True)
class Mask(Func):
    type_name: ClassVar[str] = "mask"

    atomic: bool = False
    groups: list[str] = field(default_factory=list)
    init_value: Optional[BitStr] = None
    read_value: Optional[BitStr] = None
    reset_value: Optional[BitStr] = None
    width: int = 0
    access: Optional[Access] = None


@dataclass(kw_only=True)
class Memory(Func):
    type_name: ClassVar[str] = "memory"

    access: str = ""
    byte_write_enable: bool = False
    read_latency: int = 0
    size: int = 0
    width: int = 0


@dataclass(kw_only=True)
class Param(Func):
    type_name: ClassVar[str] = "param"

    groups: list[str] = field(default_factory=list)
    range: Optional[RangeValue] = None
    width: int = 0
    access: Optional[Access] = None


@dataclass(kw_only=True)
class Return(Func):
    type_name: ClassVar[str] = "return"

    groups: list[str] = field(default_factory=list)
    width: int = 0
    access: Optional[Access] = None


@dataclass(kw_only=True)
class Static(Func):
    type_name: ClassVar[str] = "static"

    groups: list[str] = field(default_factory=list)
    init_value: Optional[BitStr] = None
    read_value: Optional[BitStr] = None
    reset_value: Optional[BitStr] = None
    width: int = 0
    access: Optional[Access] = None


@dataclass(kw_only=True)
class Status(Func):
    type_name: ClassVar[str] = "status"

    atomic: bool = False
    groups: list[str] = field(default_factory=list)
    read_value: Optional[BitStr] = None
    width: int = 0
    access: Optional[Access] = None


def _buf_size(items: list) -> int:
    if not items:
        return 0
    return items[-1].access.end_addr() - items[0].access.start_addr() + 1


@dataclass(kw_only=True)
class Proc(Func):
    type_name: ClassVar[str] = "proc"

    delay: Optional[Time] = None
    params: list[Param] = field(default_factory=list)
    returns: list[Return] = field(default_factory=list)
    call_addr: Optional[int] = None
    exit_addr: Optional[int] = None

    def params_buf_size(self) -> int:
        """Return the number of registers spanned by the params."""
        return _buf_size(self.params)

    def params_start_addr(self) -> int:
        """Return the address of the first param; raise if there are none."""
        if not self.params:
            raise ValueError(f"proc {self.name} has no params")
        return self.params[0].access.start_addr()

    def returns_buf_size(self) -> int:
        """Return the number of registers spanned by the returns."""
        return _buf_size(self.returns)

    def returns_start_addr(self) -> int:
        """Return the address of the first return; raise if there are none."""
        if not self.returns:
            raise ValueError(f"proc {self.name} has no returns")
        return self.returns[0].access.start_addr()

    def is_empty(self) -> bool:
        """Return True if the proc has neither params nor returns."""
        return not self.params and not self.returns

    def is_param(self) -> bool:
        """Return True if the proc has only params."""
        return bool(self.params) and not self.returns

    def is_return(self) -> bool:
        """Return True if the proc has only returns."""
        return not self.params and bool(self.returns)


@dataclass(kw_only=True)
class Stream(Func):
    type_name: ClassVar[str] = "stream"

    delay: Optional[Time] = None
    params: list[Param] = field(default_factory=list)
    returns: list[Return] = field(default_factory=list)
    stb_addr: int = 0

    def is_downstream(self) -> bool:
        """Return True unless the stream has only returns; empty streams are downstreams."""
        if self.params:
            return True
        return not self.returns

    def is_upstream(self) -> bool:
        return not self.is_downstream()

    def start_addr(self) -> int:
        """Return the first data address, or the strobe address of an empty stream."""
        if self.params:
            return self.params[0].access.start_addr()
        if self.returns:
            return self.returns[0].access.start_addr()
        return self.stb_addr


Groupable = Union[Config, Mask, Status]


@dataclass(kw_only=True)
class Block(Func):
    type_name: ClassVar[str] = "block"

    masters: int = 0
    reset: str = ""
    width: int = 0
    sizes: Sizes = field(default_factory=Sizes)
    addr_space: Optional[AddrSpace] = None
    consts: Container = field(default_factory=Container)
    blackboxes: list[Blackbox] = field(default_factory=list)
    configs: list[Config] = field(default_factory=list)
    irqs: list[Irq] = field(default_factory=list)
    masks: list[Mask] = field(default_factory=list)
    memories: list[Memory] = field(default_factory=list)
    procs: list[Proc] = field(default_factory=list)
    statics: list[Static] = field(default_factory=list)
    statuses: list[Status] = field(default_factory=list)
    streams: list[Stream] = field(default_factory=list)
    subblocks: list[Block] = field(default_factory=list)

    def grouped_insts(self) -> list[Groupable]:
        """Return configs, masks and statuses that belong to at least one group."""
        candidates = [*self.configs, *self.masks, *self.statuses]
        return [inst for inst in candidates if inst.groups]

    def start_addr(self) -> int:
        """Return the block start address, the first block's for arrays."""
        if self.addr_space is None:
            raise ValueError(f"block {self.name} has no address space assigned")
        return addrspace.start(self.addr_space)


@dataclass
class Package:
    """Constants exported by a package."""

    consts: Container = field(default_factory=Container)