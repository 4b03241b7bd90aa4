"""Cell-level wall flags and the unscaled maze grid.

A grid cell records the walls on its *south* (horizontal) and *east*
(vertical) sides. Nested divisions OR their flags into the same cells, so a
cell can carry both orientations at once.
"""

from __future__ import annotations

from enum import IntFlag

import numpy as np

from mazeevo.exceptions import CoordinateOverflowError, InvalidBoundaryError

# Largest coordinate a scaled wall endpoint may take (signed 32-bit range)
MAX_COORDINATE = 2**31 - 1

GRID_DTYPE = np.uint8


class CellWall(IntFlag):
    """Walls present on a grid cell."""

    NONE = 0
    HORIZONTAL = 1  # south side
    VERTICAL = 2  # east side
    BOTH = HORIZONTAL | VERTICAL


def validate_boundary(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidBoundaryError(width, height)


def validate_coordinate_range(width: int, height: int, scale_multiplier: int) -> None:
    """Ensure every scaled coordinate of the maze stays representable."""
    extent = max(width, height) * scale_multiplier
    if extent > MAX_COORDINATE:
        raise CoordinateOverflowError(
            f"Scaled maze extent {extent} ({width}x{height} x {scale_multiplier}) "
            f"exceeds the maximum coordinate {MAX_COORDINATE}"
        )


def new_grid(width: int, height: int) -> np.ndarray:
    """Allocate an empty ``height x width`` grid (rows are y, columns are x)."""
    validate_boundary(width, height)
    return np.zeros((height, width), dtype=GRID_DTYPE)


def has_wall(cell: int, orientation: CellWall) -> bool:
    return bool(int(cell) & orientation)


def frozen_copy(grid: np.ndarray) -> np.ndarray:
    """Read-only snapshot of a grid."""
    snapshot = np.array(grid, dtype=GRID_DTYPE, copy=True)
    snapshot.setflags(write=False)
    return snapshot
