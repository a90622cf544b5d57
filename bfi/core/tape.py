from typing import List, Optional

import numpy as np

from .errors import InvalidAddress, ResourceAcquisitionFailure

DEFAULT_TAPE_SIZE = 30720  # 30KiB


class Tape:
    """Fixed-size circular tape of unsigned 8-bit cells.

    The pointer wraps at both ends, so it always stays in ``[0, size)``.
    Cell arithmetic wraps modulo 256 without complaint.
    """

    def __init__(self, size: int = DEFAULT_TAPE_SIZE):
        if size < 1:
            raise ValueError(f"tape size must be at least 1, got {size}")
        try:
            self.cells = np.zeros(size, dtype=np.uint8)
        except MemoryError as e:
            raise ResourceAcquisitionFailure(size, "tape") from e
        self.pointer = 0

    @property
    def size(self) -> int:
        return len(self.cells)

    def read(self) -> int:
        return int(self.cells[self.pointer])

    def write(self, value: int) -> None:
        self.cells[self.pointer] = value & 0xFF

    def increment(self) -> None:
        # Plain int arithmetic; numpy scalar overflow would warn
        self.cells[self.pointer] = (int(self.cells[self.pointer]) + 1) % 256

    def decrement(self) -> None:
        self.cells[self.pointer] = (int(self.cells[self.pointer]) - 1) % 256

    def move_right(self) -> None:
        if self.pointer == self.size - 1:
            self.pointer = 0
        else:
            self.pointer += 1

    def move_left(self) -> None:
        if self.pointer == 0:
            self.pointer = self.size - 1
        else:
            self.pointer -= 1

    def check_address(self, operation: str) -> None:
        """Bounds guard run before every cell access.

        Raises InvalidAddress if the pointer sits on the one-past-the-end
        sentinel. Movement wraps, so this never fires in normal operation.
        """
        if self.pointer == self.size:
            raise InvalidAddress(operation, self.pointer)

    def snapshot(self, start: int = 0, end: Optional[int] = None) -> List[int]:
        """Copy of cells[start:end] as plain ints."""
        return [int(v) for v in self.cells[start:end]]
