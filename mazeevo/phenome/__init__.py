from mazeevo.phenome.grid import MAX_COORDINATE, CellWall, new_grid
from mazeevo.phenome.room import (
    Division,
    OrientationRule,
    Room,
    choose_orientation,
    divide_room,
)
from mazeevo.phenome.structure import MazeStructure, shortest_path_length
from mazeevo.phenome.walls import Point, WallSegment, extract_walls

__all__ = [
    "MAX_COORDINATE",
    "CellWall",
    "Division",
    "MazeStructure",
    "OrientationRule",
    "Point",
    "Room",
    "WallSegment",
    "choose_orientation",
    "divide_room",
    "extract_walls",
    "new_grid",
    "shortest_path_length",
]
