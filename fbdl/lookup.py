"""Name lookups among the inner functionalities of blocks, procs and streams."""

from __future__ import annotations

from itertools import chain

from fbdl.functionality import Block, Proc, Stream


def block_has_functionality(block: Block, name: str) -> bool:
    """Return True if a config, mask, proc, static, status, stream or subblock has the name."""
    candidates = chain(
        block.configs,
        block.masks,
        block.procs,
        block.statics,
        block.statuses,
        block.streams,
        block.subblocks,
    )
    return any(f.name == name for f in candidates)


def proc_has_functionality(proc: Proc, name: str) -> bool:
    """Return True if a param or return of the proc has the name."""
    return any(f.name == name for f in chain(proc.params, proc.returns))


def stream_has_functionality(stream: Stream, name: str) -> bool:
    """Return True if a param or return of the stream has the name."""
    return any(f.name == name for f in chain(stream.params, stream.returns))