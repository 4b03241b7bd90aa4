from __future__ import annotations

from loguru import logger

from mazeevo.decoder.config import DecoderConfig, GeneValidationPolicy
from mazeevo.decoder.scheduler import subdivide
from mazeevo.genome.genome import MazeGenome
from mazeevo.phenome.grid import validate_boundary, validate_coordinate_range
from mazeevo.phenome.structure import (
    MazeStructure,
    max_timesteps_for,
    shortest_path_length,
)
from mazeevo.phenome.walls import extract_walls

__all__ = ["MazeDecoder", "decode_genome"]


class MazeDecoder:
    """Translates maze genomes into scaled wall geometry.

    The decoder holds only its configuration, so a single instance can be
    shared between threads decoding different genomes.
    """

    def __init__(self, config: DecoderConfig | None = None):
        self.config = config or DecoderConfig()

    @property
    def scale_multiplier(self) -> int:
        return self.config.scale_multiplier

    def decode(self, genome: MazeGenome) -> MazeStructure:
        """Decode ``genome`` into an immutable MazeStructure.

        Raises:
            InvalidBoundaryError: non-positive width or height
            CoordinateOverflowError: scaled maze exceeds the coordinate range
            DegenerateGeneError: a consumed gene location is out of range
                under the REJECT policy, or is not finite
        """
        validate_boundary(genome.width, genome.height)
        validate_coordinate_range(genome.width, genome.height, self.scale_multiplier)

        subdivision = subdivide(
            genome,
            policy=self.config.validation_policy,
            rule=self.config.orientation_rule,
        )
        walls = extract_walls(subdivision.grid, self.scale_multiplier)
        distance = shortest_path_length(subdivision.grid)

        maze = MazeStructure(
            width=genome.width,
            height=genome.height,
            scale_multiplier=self.scale_multiplier,
            grid=subdivision.grid,
            walls=tuple(walls),
            num_partitions=subdivision.num_partitions,
            max_timesteps=max_timesteps_for(distance, self.scale_multiplier),
        )
        logger.debug(
            f"[MazeDecoder] Genome {genome.id}: {genome.width}x{genome.height}, "
            f"{subdivision.genes_consumed}/{genome.num_genes} genes consumed, "
            f"{subdivision.num_partitions} partitions, {len(walls)} walls"
        )
        return maze


def decode_genome(
    genome: MazeGenome,
    scale_multiplier: int = 1,
    validation_policy: GeneValidationPolicy = GeneValidationPolicy.REJECT,
) -> MazeStructure:
    """One-off decode with an ad hoc configuration."""
    config = DecoderConfig(
        scale_multiplier=scale_multiplier, validation_policy=validation_policy
    )
    return MazeDecoder(config).decode(genome)
