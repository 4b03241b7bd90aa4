from __future__ import annotations

import itertools
import random
import threading

from loguru import logger

from mazeevo.exceptions import InvalidBoundaryError
from mazeevo.genome.genome import MazeGene, MazeGenome

__all__ = ["MazeGenomeFactory"]


class MazeGenomeFactory:
    """Creates random maze genomes of a fixed boundary size.

    All genomes produced by one factory share an innovation-id counter, so
    genes added later in a lineage never collide with earlier ones.
    """

    def __init__(self, width: int, height: int, seed: int | None = None):
        if width <= 0 or height <= 0:
            raise InvalidBoundaryError(width, height)
        self.width = width
        self.height = height
        self.rng = random.Random(seed)
        self._innovation_ids = itertools.count(1)
        self._lock = threading.Lock()

    def next_innovation_id(self) -> int:
        with self._lock:
            return next(self._innovation_ids)

    def create_gene(self) -> MazeGene:
        return MazeGene(
            innovation_id=self.next_innovation_id(),
            wall_location=self.rng.random(),
            passage_location=self.rng.random(),
            orientation_seed=self.rng.random() < 0.5,
        )

    def create_genome(
        self, num_genes: int = 0, birth_generation: int = 0
    ) -> MazeGenome:
        if num_genes < 0:
            raise ValueError(f"num_genes must be non-negative, got {num_genes}")
        return MazeGenome(
            width=self.width,
            height=self.height,
            genes=tuple(self.create_gene() for _ in range(num_genes)),
            birth_generation=birth_generation,
        )

    def create_population(
        self, size: int, num_genes: int = 0
    ) -> list[MazeGenome]:
        """Create ``size`` independent random genomes."""
        if size < 0:
            raise ValueError(f"Population size must be non-negative, got {size}")
        population = [self.create_genome(num_genes) for _ in range(size)]
        logger.debug(
            f"[MazeGenomeFactory] Created {size} genomes of {self.width}x{self.height} "
            f"with {num_genes} genes each"
        )
        return population
