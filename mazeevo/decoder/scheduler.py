"""Breadth-first subdivision of the maze grid driven by the genome's genes."""

from __future__ import annotations

from collections import deque
import math
from typing import NamedTuple

from loguru import logger
import numpy as np

from mazeevo.decoder.config import GeneValidationPolicy
from mazeevo.exceptions import DegenerateGeneError
from mazeevo.genome.genome import MazeGene, MazeGenome
from mazeevo.phenome.grid import new_grid
from mazeevo.phenome.room import (
    OrientationRule,
    Room,
    choose_orientation,
    divide_room,
)

__all__ = ["Subdivision", "resolve_location", "subdivide"]


class Subdivision(NamedTuple):
    grid: np.ndarray
    num_partitions: int
    genes_consumed: int
    open_rooms: tuple[Room, ...]


def resolve_location(
    value: float,
    policy: GeneValidationPolicy,
    gene_index: int,
    field: str,
) -> float:
    """Apply the validation policy to a single gene location."""
    if not math.isfinite(value):
        raise DegenerateGeneError(gene_index, field, value)
    if 0.0 <= value < 1.0:
        return value
    if policy is GeneValidationPolicy.REJECT:
        raise DegenerateGeneError(gene_index, field, value)

    clamped = min(max(value, 0.0), 1.0)
    logger.debug(f"[subdivide] Clamped gene {gene_index} {field} {value} -> {clamped}")
    return clamped


def _gene_locations(
    gene: MazeGene, index: int, policy: GeneValidationPolicy
) -> tuple[float, float]:
    return (
        resolve_location(gene.wall_location, policy, index, "wall_location"),
        resolve_location(gene.passage_location, policy, index, "passage_location"),
    )


def subdivide(
    genome: MazeGenome,
    policy: GeneValidationPolicy = GeneValidationPolicy.REJECT,
    rule: OrientationRule = OrientationRule.WIDER_IS_HORIZONTAL,
) -> Subdivision:
    """Carve the genome's walls into a fresh grid.

    Rooms are processed first-in first-out and each dequeued room consumes
    exactly one gene, whether or not it can actually be divided. Decoding
    stops when either the genes or the rooms run out.
    """
    grid = new_grid(genome.width, genome.height)
    rooms: deque[Room] = deque([Room(0, 0, genome.width, genome.height)])
    terminal: list[Room] = []
    partitions = 0
    consumed = 0

    for index, gene in enumerate(genome.genes):
        if not rooms:
            logger.debug(
                f"[subdivide] Rooms exhausted, {genome.num_genes - index} genes unused"
            )
            break

        room = rooms.popleft()
        consumed += 1
        wall_location, passage_location = _gene_locations(gene, index, policy)

        if not room.is_divisible:
            terminal.append(room)
            continue

        orientation = choose_orientation(room, gene.orientation_seed, rule)
        division = divide_room(grid, room, orientation, wall_location, passage_location)
        rooms.append(division.first)
        rooms.append(division.second)
        partitions += 1

    return Subdivision(
        grid=grid,
        num_partitions=partitions,
        genes_consumed=consumed,
        open_rooms=tuple(terminal) + tuple(rooms),
    )
