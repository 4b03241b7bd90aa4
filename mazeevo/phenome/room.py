from __future__ import annotations

from enum import Enum
from typing import NamedTuple

import numpy as np

from mazeevo.phenome.grid import CellWall

__all__ = [
    "MIN_ROOM_SPAN",
    "Room",
    "Division",
    "OrientationRule",
    "choose_orientation",
    "divide_room",
]

# Rooms narrower than this along either axis are never divided
MIN_ROOM_SPAN = 2


class Room(NamedTuple):
    """Rectangular region of the grid still eligible for subdivision."""

    x: int
    y: int
    width: int
    height: int

    @property
    def is_divisible(self) -> bool:
        return min(self.width, self.height) >= MIN_ROOM_SPAN

    def split_span(self, orientation: CellWall) -> int:
        """Length of the axis a wall of ``orientation`` cuts across."""
        return self.height if orientation is CellWall.HORIZONTAL else self.width

    def wall_length(self, orientation: CellWall) -> int:
        return self.width if orientation is CellWall.HORIZONTAL else self.height


class Division(NamedTuple):
    """Outcome of dividing a room with a single wall."""

    orientation: CellWall
    wall_offset: int  # grid line of the wall, relative to the room origin
    passage_offset: int  # cell index of the passage along the wall
    first: Room  # top/left child
    second: Room  # bottom/right child


class OrientationRule(str, Enum):
    """How a non-square room picks the orientation of its dividing wall.

    ``WIDER_IS_HORIZONTAL`` places a horizontal wall in rooms that are wider
    than tall. ``TALLER_IS_HORIZONTAL`` is the classic recursive-division
    choice of cutting across the longer side.
    """

    WIDER_IS_HORIZONTAL = "wider_is_horizontal"
    TALLER_IS_HORIZONTAL = "taller_is_horizontal"


def choose_orientation(
    room: Room,
    orientation_seed: bool,
    rule: OrientationRule = OrientationRule.WIDER_IS_HORIZONTAL,
) -> CellWall:
    """Pick the wall orientation for ``room``; square rooms use the seed."""
    if room.width == room.height:
        return CellWall.HORIZONTAL if orientation_seed else CellWall.VERTICAL

    wider = room.width > room.height
    if rule is OrientationRule.TALLER_IS_HORIZONTAL:
        wider = not wider
    return CellWall.HORIZONTAL if wider else CellWall.VERTICAL


def divide_room(
    grid: np.ndarray,
    room: Room,
    orientation: CellWall,
    wall_location: float,
    passage_location: float,
) -> Division:
    """Carve one wall with a single-cell passage into ``grid``.

    The wall sits on the south (horizontal) or east (vertical) side of the
    selected row/column, so its grid line is always strictly inside the room.
    Flags are OR-ed into the grid; no other state is touched.
    """
    if orientation not in (CellWall.HORIZONTAL, CellWall.VERTICAL):
        raise ValueError(f"A dividing wall must be horizontal or vertical, got {orientation!r}")
    if not room.is_divisible:
        raise ValueError(f"Room {room} is too small to divide")

    span = room.split_span(orientation)
    length = room.wall_length(orientation)

    wall_cell = min(span - MIN_ROOM_SPAN, max(0, int((span - MIN_ROOM_SPAN) * wall_location)))
    passage_cell = min(length - 1, max(0, int(length * passage_location)))

    mask = np.ones(length, dtype=bool)
    mask[passage_cell] = False

    if orientation is CellWall.HORIZONTAL:
        line = grid[room.y + wall_cell, room.x : room.x + room.width]
    else:
        line = grid[room.y : room.y + room.height, room.x + wall_cell]
    line[mask] |= np.uint8(orientation)

    near = wall_cell + 1
    far = span - near
    if orientation is CellWall.HORIZONTAL:
        first = Room(room.x, room.y, room.width, near)
        second = Room(room.x, room.y + near, room.width, far)
    else:
        first = Room(room.x, room.y, near, room.height)
        second = Room(room.x + near, room.y, far, room.height)

    return Division(orientation, near, passage_cell, first, second)
