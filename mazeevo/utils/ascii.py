"""Plain-text view of a maze grid for logs and debugging."""

from __future__ import annotations

import numpy as np

from mazeevo.phenome.grid import CellWall, has_wall


def render_ascii(grid: np.ndarray) -> str:
    """Draw ``grid`` with ``_`` for south walls and ``|`` for east walls.

    Every cell takes two characters; the second one continues a south wall
    into the next cell so horizontal walls read as unbroken lines.
    """
    height, width = grid.shape
    lines = [" " + "_" * (width * 2 - 1)]

    for row in range(height):
        bottom = row + 1 >= height
        chars = ["|"]
        for col in range(width):
            last = col + 1 >= width
            south = bottom or has_wall(grid[row, col], CellWall.HORIZONTAL)
            next_south = bottom or (
                not last and has_wall(grid[row, col + 1], CellWall.HORIZONTAL)
            )
            east = last or has_wall(grid[row, col], CellWall.VERTICAL)

            chars.append("_" if south else " ")
            if east:
                chars.append("|")
            elif south and next_south:
                chars.append("_")
            else:
                chars.append(" ")
        lines.append("".join(chars))

    return "\n".join(lines)
