from __future__ import annotations

from enum import Enum

from loguru import logger
from pydantic import BaseModel, Field, model_validator

from mazeevo.exceptions import MutationError
from mazeevo.genome.factory import MazeGenomeFactory
from mazeevo.genome.genome import MazeGenome

__all__ = ["MutationKind", "MutationParameters", "MazeGenomeMutator"]


class MutationKind(str, Enum):
    """Structural and positional mutations applicable to a maze genome."""

    WALL_LOCATION = "wall_location"
    PASSAGE_LOCATION = "passage_location"
    ADD_GENE = "add_gene"
    DELETE_GENE = "delete_gene"


class MutationParameters(BaseModel):
    """Roulette-wheel weights for each mutation kind."""

    mutate_wall_location_probability: float = Field(default=0.1, ge=0)
    mutate_passage_location_probability: float = Field(default=0.1, ge=0)
    add_gene_probability: float = Field(default=0.01, ge=0)
    delete_gene_probability: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def validate_total_weight(self):
        if sum(self.roulette_wheel().values()) <= 0:
            raise ValueError("At least one mutation probability must be positive")
        return self

    def roulette_wheel(self) -> dict[MutationKind, float]:
        return {
            MutationKind.WALL_LOCATION: self.mutate_wall_location_probability,
            MutationKind.PASSAGE_LOCATION: self.mutate_passage_location_probability,
            MutationKind.ADD_GENE: self.add_gene_probability,
            MutationKind.DELETE_GENE: self.delete_gene_probability,
        }


class MazeGenomeMutator:
    """Produces offspring by applying exactly one mutation to a parent copy.

    Gene orientation seeds are never mutated; only wall and passage
    locations are resampled, and genes may be appended or removed.
    """

    def __init__(
        self,
        factory: MazeGenomeFactory,
        parameters: MutationParameters | None = None,
    ):
        self.factory = factory
        self.parameters = parameters or MutationParameters()

    @property
    def rng(self):
        return self.factory.rng

    def choose_mutation(self, genome: MazeGenome) -> MutationKind:
        """Spin the roulette wheel, excluding mutations that cannot apply."""
        if not genome.genes:
            return MutationKind.ADD_GENE

        wheel = self.parameters.roulette_wheel()
        if genome.num_genes >= genome.max_useful_genes:
            wheel.pop(MutationKind.ADD_GENE)

        kinds = [kind for kind, weight in wheel.items() if weight > 0]
        if not kinds:
            raise MutationError(
                f"No applicable mutation for genome {genome.id} "
                f"with {genome.num_genes} genes"
            )
        weights = [wheel[kind] for kind in kinds]
        return self.rng.choices(kinds, weights=weights, k=1)[0]

    def create_offspring(
        self, parent: MazeGenome, birth_generation: int
    ) -> tuple[MazeGenome, MutationKind]:
        kind = self.choose_mutation(parent)
        genes = list(parent.genes)

        if kind is MutationKind.ADD_GENE:
            genes.append(self.factory.create_gene())
        elif kind is MutationKind.DELETE_GENE:
            del genes[self.rng.randrange(len(genes))]
        else:
            index = self.rng.randrange(len(genes))
            value = self.rng.random()
            if kind is MutationKind.WALL_LOCATION:
                genes[index] = genes[index].with_wall_location(value)
            else:
                genes[index] = genes[index].with_passage_location(value)

        child = parent.copy_as_offspring(birth_generation, genes=tuple(genes))
        logger.debug(
            f"[MazeGenomeMutator] {parent.id} -> {child.id} via {kind.value} "
            f"({parent.num_genes} -> {child.num_genes} genes)"
        )
        return child, kind
