"""2D grid of chemical A and chemical B per cell. Shape (cols, rows), indexed [i, j] = [x, y]."""

from world.constants import REST_A, REST_B
from world.field import Field


class Grid:
    """Fields A and B. Buffers of both fields swap together, never one alone."""

    __slots__ = ("shape", "a", "b")

    def __init__(self, cols: int, rows: int) -> None:
        self.shape = (cols, rows)
        self.a = Field(cols, rows, REST_A)
        self.b = Field(cols, rows, REST_B)

    @property
    def cols(self) -> int:
        return self.shape[0]

    @property
    def rows(self) -> int:
        return self.shape[1]

    @property
    def empty(self) -> bool:
        return self.shape[0] == 0 or self.shape[1] == 0

    def get_cell(self, i: int, j: int) -> tuple[float, float]:
        """Current (A, B) at column i, row j."""
        return float(self.a.current[i, j]), float(self.b.current[i, j])

    def set_cell(self, i: int, j: int, a: float, b: float) -> None:
        self.a.current[i, j] = a
        self.b.current[i, j] = b

    def swap(self) -> None:
        self.a.swap()
        self.b.swap()
