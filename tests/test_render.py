import numpy as np
import pygame

from ui.colors import PASTEL_PALETTE, a_to_rgb
from ui.grid_view import cells_to_pixels, draw_field, draw_session
from world import Session

PEACH = (255, 218, 185)


def test_palette_has_twelve_pastels():
    assert len(PASTEL_PALETTE) == 12
    assert len(set(PASTEL_PALETTE)) == 12
    assert PEACH in PASTEL_PALETTE


def test_undisturbed_cells_are_white_and_reacted_cells_take_the_colour():
    a = np.array([[1.0, 0.0]])
    rgb = a_to_rgb(a, PEACH)
    assert rgb.shape == (1, 2, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[0, 0]) == (255, 255, 255)
    assert tuple(rgb[0, 1]) == PEACH


def test_colour_interpolates_linearly():
    rgb = a_to_rgb(np.array([[0.5]]), (155, 55, 255))
    assert tuple(rgb[0, 0]) == (205, 155, 255)


def test_cells_expand_to_square_blocks():
    rgb = np.zeros((2, 1, 3), dtype=np.uint8)
    rgb[1, 0] = (9, 9, 9)
    px = cells_to_pixels(rgb, 3)
    # (rows*size, cols*size, 3): column i=1 occupies x = 3..5
    assert px.shape == (3, 6, 3)
    assert tuple(px[0, 0]) == (0, 0, 0)
    assert tuple(px[2, 5]) == (9, 9, 9)


def test_draw_field_places_cell_i_j_at_x_y():
    surface = pygame.Surface((35, 20))
    a = np.ones((3, 2))
    a[2, 1] = 0.0
    draw_field(surface, a, PEACH, 10)
    assert tuple(surface.get_at((0, 0)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((25, 15)))[:3] == PEACH
    assert tuple(surface.get_at((29, 19)))[:3] == PEACH
    assert tuple(surface.get_at((15, 15)))[:3] == (255, 255, 255)
    # leftover strip past the last whole cell
    assert tuple(surface.get_at((33, 5)))[:3] == (255, 255, 255)


def test_draw_session_uses_current_a():
    session = Session(100, 50, params={"initial_clusters": 0, "center_seed_half": 0}, seed=4)
    session.grid.a.current[0, 0] = 0.0
    surface = pygame.Surface((100, 50))
    draw_session(surface, session)
    assert tuple(surface.get_at((3, 3)))[:3] == session.color
    assert tuple(surface.get_at((55, 25)))[:3] == (255, 255, 255)


def test_draw_empty_grid_only_clears():
    surface = pygame.Surface((8, 8))
    draw_field(surface, np.ones((0, 0)), PEACH, 10)
    assert tuple(surface.get_at((4, 4)))[:3] == (255, 255, 255)
