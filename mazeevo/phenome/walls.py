"""Conversion of a filled grid into merged, scaled wall line segments."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from mazeevo.phenome.grid import CellWall

__all__ = ["Point", "WallSegment", "boundary_walls", "extract_walls"]


class Point(NamedTuple):
    x: int
    y: int


class WallSegment(NamedTuple):
    start: Point
    end: Point

    @property
    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    @property
    def length(self) -> int:
        return abs(self.end.x - self.start.x) + abs(self.end.y - self.start.y)


def _segment(x0: int, y0: int, x1: int, y1: int) -> WallSegment:
    return WallSegment(Point(x0, y0), Point(x1, y1))


def boundary_walls(width: int, height: int, scale_multiplier: int) -> list[WallSegment]:
    """The four walls framing the maze: bottom, left, right, top."""
    w = width * scale_multiplier
    h = height * scale_multiplier
    return [
        _segment(0, 0, w, 0),
        _segment(0, 0, 0, h),
        _segment(w, 0, w, h),
        _segment(0, h, w, h),
    ]


def _runs(mask: np.ndarray) -> list[tuple[int, int]]:
    """Half-open ``(start, stop)`` index ranges of consecutive True values."""
    padded = np.concatenate(([False], mask, [False]))
    edges = np.flatnonzero(padded[1:] != padded[:-1]).tolist()
    return list(zip(edges[0::2], edges[1::2]))


def extract_walls(grid: np.ndarray, scale_multiplier: int) -> list[WallSegment]:
    """Boundary walls followed by the merged interior walls of ``grid``.

    Rows are scanned top to bottom for horizontal runs, then columns left to
    right for vertical runs. A cell's wall lies on its south/east grid line,
    i.e. at ``(index + 1) * scale_multiplier`` along the perpendicular axis.
    """
    height, width = grid.shape
    s = scale_multiplier
    walls = boundary_walls(width, height, s)

    horizontal = (grid & CellWall.HORIZONTAL) != 0
    for row in range(height):
        y = (row + 1) * s
        for start, stop in _runs(horizontal[row]):
            walls.append(_segment(start * s, y, stop * s, y))

    vertical = (grid & CellWall.VERTICAL) != 0
    for col in range(width):
        x = (col + 1) * s
        for start, stop in _runs(vertical[:, col]):
            walls.append(_segment(x, start * s, x, stop * s))

    return walls
