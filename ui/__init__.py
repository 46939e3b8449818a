"""UI: colour mapping and canvas view."""

from ui.grid_view import draw_field, draw_session
from ui.colors import PASTEL_PALETTE, a_to_rgb

__all__ = ["draw_field", "draw_session", "PASTEL_PALETTE", "a_to_rgb"]
