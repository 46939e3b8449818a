"""
Gray-Scott update, pointer injection and dissolve decay.
All neighbor lookups wrap toroidally (np.roll), so the grid has no edges.
Stepping reads only the current buffers and writes only the next ones.
"""

import numpy as np

from world.constants import (
    CARDINAL_OFFSETS,
    DIAGONAL_OFFSETS,
    REST_A,
    REST_B,
    W_CARDINAL,
    W_CENTER,
    W_DIAGONAL,
)
from world.grid import Grid
from world.seed_util import wrapped_square

DEFAULT_D_A = 1.0
DEFAULT_D_B = 0.5
DEFAULT_FEED = 0.055
DEFAULT_KILL = 0.062

# Same weights as a 3×3 kernel, indexed [di + 1, dj + 1].
STENCIL = np.array(
    [
        [W_DIAGONAL, W_CARDINAL, W_DIAGONAL],
        [W_CARDINAL, W_CENTER, W_CARDINAL],
        [W_DIAGONAL, W_CARDINAL, W_DIAGONAL],
    ],
    dtype=np.float64,
)


def _neighbor(arr: np.ndarray, di: int, dj: int) -> np.ndarray:
    """out[i, j] = arr[(i + di) mod cols, (j + dj) mod rows]."""
    return np.roll(arr, shift=(-di, -dj), axis=(0, 1))


def laplacian(arr: np.ndarray) -> np.ndarray:
    """Weighted 3×3 Laplacian with toroidal wrap. Zero on a uniform field."""
    out = W_CENTER * arr
    for di, dj in CARDINAL_OFFSETS:
        out = out + W_CARDINAL * _neighbor(arr, di, dj)
    for di, dj in DIAGONAL_OFFSETS:
        out = out + W_DIAGONAL * _neighbor(arr, di, dj)
    return out


def step(
    grid: Grid,
    d_a: float = DEFAULT_D_A,
    d_b: float = DEFAULT_D_B,
    feed: float = DEFAULT_FEED,
    kill: float = DEFAULT_KILL,
) -> None:
    """One reaction-diffusion update from current into next, clamped to [0, 1]. Does not swap."""
    if grid.empty:
        return
    a = grid.a.current
    b = grid.b.current
    reaction = a * b * b
    np.clip(a + d_a * laplacian(a) - reaction + feed * (1.0 - a), 0.0, 1.0, out=grid.a.next)
    np.clip(b + d_b * laplacian(b) + reaction - (kill + feed) * b, 0.0, 1.0, out=grid.b.next)


def inject(grid: Grid, ci: int, cj: int, radius: int) -> None:
    """Force B current to 1 on the wrapped square of the given radius around (ci, cj)."""
    if grid.empty:
        return
    wrapped_square(grid.b.current, ci, cj, radius)


def dissolve(grid: Grid, strength: float) -> None:
    """Move every cell (1 - strength) of the way back to rest, in both buffers."""
    if grid.empty:
        return
    t = 1.0 - strength
    a = grid.a.current
    b = grid.b.current
    a += (REST_A - a) * t
    b += (REST_B - b) * t
    grid.a.next[:] = a
    grid.b.next[:] = b
