"""Reproducible random seeding of chemical B. Seed -1 = new random each call.
Clusters are wrapped toroidally; the centre seed is clipped to the grid."""

import random
from typing import List, Tuple

import numpy as np


def make_rng(seed: int) -> Tuple[random.Random, int]:
    """Return (rng, seed_used). If seed == -1, choose a new random seed."""
    if seed == -1:
        seed_used = random.randint(0, 2**31 - 1)
    else:
        seed_used = seed
    return random.Random(seed_used), seed_used


def wrapped_square(arr: np.ndarray, ci: int, cj: int, radius: int, value: float = 1.0) -> None:
    """Set the (2r+1)×(2r+1) square centred on (ci, cj) to value, wrapping at the edges."""
    cols, rows = arr.shape
    if cols == 0 or rows == 0:
        return
    ii = np.arange(ci - radius, ci + radius + 1) % cols
    jj = np.arange(cj - radius, cj + radius + 1) % rows
    arr[np.ix_(ii, jj)] = value


def seed_center(arr: np.ndarray, half: int, value: float = 1.0) -> None:
    """Square of side 2*half starting at (cols//2 - half, rows//2 - half), clipped to the grid."""
    cols, rows = arr.shape
    i0, j0 = cols // 2 - half, rows // 2 - half
    i_lo, i_hi = max(0, i0), min(cols, i0 + 2 * half)
    j_lo, j_hi = max(0, j0), min(rows, j0 + 2 * half)
    if i_lo < i_hi and j_lo < j_hi:
        arr[i_lo:i_hi, j_lo:j_hi] = value


def pick_cluster_centers(cols: int, rows: int, count: int, rng: random.Random) -> List[Tuple[int, int]]:
    """count uniformly random cells; empty when the grid has no cells."""
    if cols <= 0 or rows <= 0:
        return []
    return [(rng.randrange(cols), rng.randrange(rows)) for _ in range(count)]


def seed_clusters(arr: np.ndarray, count: int, radius: int, rng: random.Random) -> List[Tuple[int, int]]:
    """Write count random wrapped clusters into arr. Returns the chosen centres."""
    cols, rows = arr.shape
    centers = pick_cluster_centers(cols, rows, count, rng)
    for ci, cj in centers:
        wrapped_square(arr, ci, cj, radius)
    return centers
