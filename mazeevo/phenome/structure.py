from __future__ import annotations

from collections import deque

import numpy as np
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

from mazeevo.phenome.grid import CellWall, frozen_copy, has_wall
from mazeevo.phenome.walls import Point, WallSegment

__all__ = ["MazeStructure", "shortest_path_length", "max_timesteps_for"]

Cell = tuple[int, int]  # (row, col)


def _blocked(grid: np.ndarray, a: Cell, b: Cell) -> bool:
    """Whether a wall separates the orthogonally adjacent cells ``a`` and ``b``."""
    (r0, c0), (r1, c1) = sorted((a, b))
    if r0 == r1 and c1 == c0 + 1:
        return has_wall(grid[r0, c0], CellWall.VERTICAL)
    if c0 == c1 and r1 == r0 + 1:
        return has_wall(grid[r0, c0], CellWall.HORIZONTAL)
    raise ValueError(f"Cells {a} and {b} are not orthogonally adjacent")


def shortest_path_length(grid: np.ndarray) -> int | None:
    """Breadth-first distance in cells from the top-left to the bottom-right cell.

    Returns ``None`` if the target cannot be reached.
    """
    height, width = grid.shape
    target = (height - 1, width - 1)
    distances: dict[Cell, int] = {(0, 0): 0}
    queue: deque[Cell] = deque([(0, 0)])

    while queue:
        cell = queue.popleft()
        if cell == target:
            return distances[cell]
        row, col = cell
        for neighbor in (
            (row - 1, col),
            (row, col + 1),
            (row + 1, col),
            (row, col - 1),
        ):
            r, c = neighbor
            if not (0 <= r < height and 0 <= c < width) or neighbor in distances:
                continue
            if _blocked(grid, cell, neighbor):
                continue
            distances[neighbor] = distances[cell] + 1
            queue.append(neighbor)
    return None


def max_timesteps_for(distance: int | None, scale_multiplier: int) -> int:
    """Time budget for a navigator: the cell distance split evenly over both axes."""
    if distance is None:
        return 0
    return 2 * (scale_multiplier * (distance // 2))


class MazeStructure(BaseModel):
    """Decoded maze phenotype: the wall segments plus the grid they came from."""

    width: int = Field(gt=0, description="Unscaled maze width (cells)")
    height: int = Field(gt=0, description="Unscaled maze height (cells)")
    scale_multiplier: int = Field(gt=0, description="Grid to output coordinate factor")
    grid: np.ndarray = Field(description="Read-only snapshot of the cell wall flags")
    walls: tuple[WallSegment, ...] = Field(
        description="Boundary walls followed by merged interior walls"
    )
    num_partitions: int = Field(
        default=0, ge=0, description="Number of dividing walls imposed"
    )
    max_timesteps: int = Field(
        default=0, ge=0, description="Time steps allotted to a navigator"
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("grid")
    @classmethod
    def freeze_grid(cls, v: np.ndarray) -> np.ndarray:
        if v.ndim != 2:
            raise ValueError(f"Maze grid must be two-dimensional, got shape {v.shape}")
        return frozen_copy(v)

    @model_validator(mode="after")
    def validate_grid_shape(self):
        if self.grid.shape != (self.height, self.width):
            raise ValueError(
                f"Grid shape {self.grid.shape} does not match maze {self.width}x{self.height}"
            )
        return self

    @computed_field
    @property
    def scaled_width(self) -> int:
        return self.width * self.scale_multiplier

    @computed_field
    @property
    def scaled_height(self) -> int:
        return self.height * self.scale_multiplier

    @property
    def start_location(self) -> Point:
        """Navigator start, centred in the top-left cell."""
        half = self.scale_multiplier // 2
        return Point(half, half)

    @property
    def target_location(self) -> Point:
        """Navigator goal, centred in the bottom-right cell."""
        half = self.scale_multiplier // 2
        return Point(self.scaled_width - half, self.scaled_height - half)

    @property
    def boundary_walls(self) -> tuple[WallSegment, ...]:
        return self.walls[:4]

    @property
    def interior_walls(self) -> tuple[WallSegment, ...]:
        return self.walls[4:]

    def __hash__(self) -> int:
        """Hash based on geometry and grid contents."""
        return hash(
            (
                self.width,
                self.height,
                self.scale_multiplier,
                self.walls,
                self.grid.tobytes(),
            )
        )

    def __eq__(self, other: object) -> bool:
        """Equality by value; grids are compared element-wise."""
        if not isinstance(other, MazeStructure):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.scale_multiplier == other.scale_multiplier
            and self.num_partitions == other.num_partitions
            and self.max_timesteps == other.max_timesteps
            and self.walls == other.walls
            and np.array_equal(self.grid, other.grid)
        )

    def is_wall_between(self, a: Cell, b: Cell) -> bool:
        """Whether a wall blocks movement between two adjacent ``(row, col)`` cells."""
        for row, col in (a, b):
            if not (0 <= row < self.height and 0 <= col < self.width):
                raise ValueError(f"Cell {(row, col)} lies outside the maze")
        return _blocked(self.grid, a, b)

    def shortest_path_length(self) -> int | None:
        return shortest_path_length(self.grid)
