"""
Colour mapping for chemical A. Undisturbed cells (A = 1) are white; fully reacted
cells (A = 0) take the session's pastel colour. Channels interpolate linearly.
"""

import numpy as np

WHITE = (255, 255, 255)

# Pastel palette; one entry is picked per session.
PASTEL_PALETTE = (
    (255, 182, 193),  # light pink
    (230, 230, 250),  # lavender
    (176, 224, 230),  # powder blue
    (255, 218, 185),  # peach
    (152, 251, 152),  # pale green
    (255, 253, 208),  # lemon chiffon
    (221, 160, 221),  # plum
    (255, 192, 203),  # pink
    (177, 156, 217),  # light purple
    (174, 198, 207),  # light blue grey
    (255, 229, 180),  # light apricot
    (198, 255, 221),  # mint
)


def lerp(start: float, stop: float, t):
    return start + (stop - start) * t


def a_to_rgb(a: np.ndarray, color: tuple[int, int, int]) -> np.ndarray:
    """(cols, rows) A values in [0, 1] -> (cols, rows, 3) uint8: lerp(255, color, 1 - a) per channel."""
    t = 1.0 - np.clip(np.asarray(a, dtype=np.float64), 0.0, 1.0)
    rgb = np.empty(t.shape + (3,), dtype=np.float64)
    for c in range(3):
        rgb[..., c] = lerp(float(WHITE[c]), float(color[c]), t)
    return np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
