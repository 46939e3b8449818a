"""Simulation constants. Rest state: A saturated (1), B empty (0)."""

REST_A = 1.0
REST_B = 0.0
# 3×3 Laplacian stencil: centre -1, cardinals 0.2, diagonals 0.05. Sums to 0.
W_CENTER = -1.0
W_CARDINAL = 0.2
W_DIAGONAL = 0.05
# Neighbor offsets (di, dj): cardinals first, then diagonals.
CARDINAL_OFFSETS = [(-1, 0), (1, 0), (0, -1), (0, 1)]
DIAGONAL_OFFSETS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]
DEFAULT_CELL_SIZE = 10
