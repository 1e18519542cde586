import pytest

from fbdl.functionality import (
    Block,
    Config,
    Irq,
    Mask,
    Memory,
    Param,
    Proc,
    Return,
    Static,
    Status,
    Stream,
)
from fbdl.lookup import (
    block_has_functionality,
    proc_has_functionality,
    stream_has_functionality,
)


@pytest.fixture
def block():
    return Block(
        name="Main",
        configs=[Config(name="cfg")],
        masks=[Mask(name="msk")],
        procs=[Proc(name="prc")],
        statics=[Static(name="stc")],
        statuses=[Status(name="sts")],
        streams=[Stream(name="str")],
        subblocks=[Block(name="sub", statuses=[Status(name="inner")])],
        irqs=[Irq(name="irq")],
        memories=[Memory(name="mem")],
    )


@pytest.mark.parametrize("name", ["cfg", "msk", "prc", "stc", "sts", "str", "sub"])
def test_block_finds_searched_kinds(block, name):
    assert block_has_functionality(block, name) is True


@pytest.mark.parametrize("name", ["missing", "inner", "irq", "mem", "Main"])
def test_block_does_not_find_other_names(block, name):
    assert block_has_functionality(block, name) is False


def test_empty_block():
    assert block_has_functionality(Block(), "ID") is False


def test_proc_lookup():
    proc = Proc(name="p", params=[Param(name="a")], returns=[Return(name="r")])
    assert proc_has_functionality(proc, "a") is True
    assert proc_has_functionality(proc, "r") is True
    assert proc_has_functionality(proc, "p") is False


def test_stream_lookup():
    stream = Stream(name="s", params=[Param(name="x")], returns=[Return(name="y")])
    assert stream_has_functionality(stream, "x") is True
    assert stream_has_functionality(stream, "y") is True
    assert stream_has_functionality(Stream(), "x") is False