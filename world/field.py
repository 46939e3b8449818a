"""One chemical on a (cols, rows) grid, double-buffered as current / next."""

import numpy as np


class Field:
    """Two arrays of the same shape. Reads come from current, writes go to next."""

    __slots__ = ("shape", "current", "next")

    def __init__(self, cols: int, rows: int, value: float = 0.0) -> None:
        self.shape = (cols, rows)
        self.current = np.full(self.shape, value, dtype=np.float64)
        self.next = np.full(self.shape, value, dtype=np.float64)

    def swap(self) -> None:
        self.current, self.next = self.next, self.current
