"""Canvas view: one filled, unstroked square per cell, coloured from chemical A."""

import pygame
import numpy as np

from ui.colors import WHITE, a_to_rgb


def cells_to_pixels(rgb: np.ndarray, cell_size: int) -> np.ndarray:
    """(cols, rows, 3) -> (rows*cell_size, cols*cell_size, 3), row-major for pygame byte buffers."""
    px = np.repeat(np.repeat(rgb, cell_size, axis=0), cell_size, axis=1)
    return np.ascontiguousarray(px.transpose(1, 0, 2))


def draw_field(
    surface: pygame.Surface,
    a: np.ndarray,
    color: tuple[int, int, int],
    cell_size: int,
) -> None:
    """Draw A at (i*cell_size, j*cell_size). Pixels past the last whole cell stay white."""
    surface.fill(WHITE)
    cols, rows = a.shape
    if cols == 0 or rows == 0:
        return
    px = cells_to_pixels(a_to_rgb(a, color), cell_size)
    img = pygame.image.frombytes(px.tobytes(), (cols * cell_size, rows * cell_size), "RGB")
    surface.blit(img, (0, 0))


def draw_session(surface: pygame.Surface, session) -> None:
    """Render callback for Session.frame: draws the current A buffer."""
    draw_field(surface, session.grid.a.current, session.color, session.params["cell_size"])
