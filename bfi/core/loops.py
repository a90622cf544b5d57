"""Bracket validation and loop bookkeeping for the interpreter."""

import numpy as np

from .errors import ResourceAcquisitionFailure, UnbalancedBrackets, UnexpectedLoopEnd

OPEN = ord('[')
CLOSE = ord(']')


def count_brackets(source: bytes):
    """Return (open_count, close_count); all other bytes are ignored."""
    opens = closes = 0
    for b in source:
        if b == OPEN:
            opens += 1
        elif b == CLOSE:
            closes += 1
    return opens, closes


def validate_brackets(source: bytes) -> int:
    """Check that '[' and ']' occur equally often.

    Only counts are compared, not nesting order: ``][`` passes here and is
    caught at runtime by the loop stack instead.
    Returns the number of '[' so the loop stack can be sized exactly.
    """
    opens, closes = count_brackets(source)
    if opens != closes:
        raise UnbalancedBrackets(opens, closes)
    return opens


def skip_loop(source: bytes, position: int) -> int:
    """Return the position of the ']' matching the '[' at ``position``.

    Scans forward counting nesting depth. If the source ends first, the
    source length is returned and execution simply runs off the end.
    """
    depth = 1
    i = position
    end = len(source)
    while depth != 0:
        i += 1
        if i >= end:
            return end
        b = source[i]
        if b == OPEN:
            depth += 1
        elif b == CLOSE:
            depth -= 1
    return i


class LoopStack:
    """Fixed-capacity stack of '[' source positions.

    The buffer is allocated once at the exact size reported by
    validate_brackets and never grows.
    """

    def __init__(self, capacity: int):
        try:
            self._buffer = np.empty(capacity, dtype=np.int64)
        except MemoryError as e:
            raise ResourceAcquisitionFailure(capacity) from e
        self.depth = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return self.depth

    def push(self, position: int) -> None:
        self._buffer[self.depth] = position
        self.depth += 1

    def pop(self, position: int) -> int:
        """Pop the innermost loop start; ``position`` is the ']' being executed."""
        if self.depth == 0:
            raise UnexpectedLoopEnd(position)
        self.depth -= 1
        return int(self._buffer[self.depth])
