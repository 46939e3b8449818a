"""
Simulation session: owns the grid, palette colour, parameters, RNG and dissolve timer.
One session per host view. Frame order: dissolve check, pointer injection, step,
render, swap. Time is passed in as milliseconds so the loop is clock-agnostic.
"""

import logging
from typing import Callable, Optional, Sequence

from world.constants import DEFAULT_CELL_SIZE
from world.grid import Grid
from world.reaction import DEFAULT_D_A, DEFAULT_D_B, DEFAULT_FEED, DEFAULT_KILL, dissolve, inject
from world.reaction import step as rd_step
from world.seed_util import make_rng, seed_center, seed_clusters
from ui.colors import PASTEL_PALETTE

logger = logging.getLogger(__name__)

DEFAULT_DISSOLVE_INTERVAL_MS = 15000
DEFAULT_DISSOLVE_STRENGTH = 0.95
DEFAULT_POINTER_RADIUS = 5
DEFAULT_RESIZE_HYSTERESIS = 5

RGB = tuple[int, int, int]

INT_PARAMS = (
    "cell_size", "dissolve_interval_ms", "pointer_radius", "center_seed_half", "initial_clusters",
    "initial_cluster_radius", "reseed_clusters", "reseed_cluster_radius", "resize_hysteresis",
)
FLOAT_PARAMS = ("d_a", "d_b", "feed", "kill", "dissolve_strength")


def default_params() -> dict:
    return {
        "cell_size": DEFAULT_CELL_SIZE,
        "d_a": DEFAULT_D_A,
        "d_b": DEFAULT_D_B,
        "feed": DEFAULT_FEED,
        "kill": DEFAULT_KILL,
        "dissolve_interval_ms": DEFAULT_DISSOLVE_INTERVAL_MS,
        "dissolve_strength": DEFAULT_DISSOLVE_STRENGTH,
        "pointer_radius": DEFAULT_POINTER_RADIUS,
        "center_seed_half": 5,
        "initial_clusters": 3,
        "initial_cluster_radius": 2,
        "reseed_clusters": 2,
        "reseed_cluster_radius": 1,
        "resize_hysteresis": DEFAULT_RESIZE_HYSTERESIS,
    }


def resolve_params(overrides: Optional[dict] = None) -> dict:
    """Defaults with known keys from overrides applied; unknown keys are ignored."""
    params = default_params()
    for k, v in (overrides or {}).items():
        if k in params:
            params[k] = v
    for k in INT_PARAMS:
        params[k] = int(params[k])
    for k in FLOAT_PARAMS:
        params[k] = float(params[k])
    params["cell_size"] = max(1, params["cell_size"])
    return params


def grid_size(width: int, height: int, cell_size: int) -> tuple[int, int]:
    return max(0, int(width // cell_size)), max(0, int(height // cell_size))


class Session:
    """State of one reaction-diffusion background."""

    def __init__(
        self,
        width: int,
        height: int,
        params: Optional[dict] = None,
        seed: int = -1,
        now_ms: int = 0,
        palette: Sequence[RGB] = PASTEL_PALETTE,
    ) -> None:
        self.params = resolve_params(params)
        self.rng, self.seed_used = make_rng(seed)
        self.color: RGB = tuple(self.rng.choice(list(palette)))
        self.width = width
        self.height = height
        self.last_dissolve_ms = now_ms
        self.frame_count = 0
        self.grid = Grid(0, 0)
        self.reset(now_ms)

    @property
    def shape(self) -> tuple[int, int]:
        return self.grid.shape

    def reset(self, now_ms: int) -> None:
        """Fresh fields for the current viewport: centre seed plus random clusters."""
        p = self.params
        cols, rows = grid_size(self.width, self.height, p["cell_size"])
        self.grid = Grid(cols, rows)
        if not self.grid.empty:
            b = self.grid.b.current
            seed_center(b, p["center_seed_half"])
            seed_clusters(b, p["initial_clusters"], p["initial_cluster_radius"], self.rng)
        self.last_dissolve_ms = now_ms
        logger.debug("Initialized %dx%d grid (seed %d)", cols, rows, self.seed_used)

    def resize(self, width: int, height: int, now_ms: int) -> bool:
        """Track the new viewport; rebuild fields only past the hysteresis band. Returns True if rebuilt."""
        self.width, self.height = width, height
        new_cols, new_rows = grid_size(width, height, self.params["cell_size"])
        cols, rows = self.grid.shape
        band = self.params["resize_hysteresis"]
        if abs(new_cols - cols) > band or abs(new_rows - rows) > band:
            self.reset(now_ms)
            return True
        return False

    def maybe_dissolve(self, now_ms: int) -> bool:
        """Decay toward rest and reseed once the interval has elapsed. Returns True if it ran."""
        p = self.params
        if now_ms - self.last_dissolve_ms <= p["dissolve_interval_ms"]:
            return False
        dissolve(self.grid, p["dissolve_strength"])
        if not self.grid.empty:
            seed_clusters(self.grid.b.current, p["reseed_clusters"], p["reseed_cluster_radius"], self.rng)
        self.last_dissolve_ms = now_ms
        logger.debug("Dissolved pattern at %d ms", now_ms)
        return True

    def inject_pointer(self, x: float, y: float) -> bool:
        """Seed B under a held pointer at canvas pixel (x, y). Ignored outside the canvas."""
        if not (0 < x < self.width and 0 < y < self.height):
            return False
        size = self.params["cell_size"]
        inject(self.grid, int(x // size), int(y // size), self.params["pointer_radius"])
        return True

    def step(self) -> None:
        p = self.params
        rd_step(self.grid, d_a=p["d_a"], d_b=p["d_b"], feed=p["feed"], kill=p["kill"])

    def frame(
        self,
        now_ms: int,
        pointer: Optional[tuple[float, float]] = None,
        render: Optional[Callable[["Session"], None]] = None,
    ) -> None:
        """One frame. pointer is the pointer position while a button is held, else None."""
        self.maybe_dissolve(now_ms)
        if pointer is not None:
            self.inject_pointer(*pointer)
        self.step()
        if render is not None:
            render(self)
        self.grid.swap()
        self.frame_count += 1
