import random
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MazeGene(BaseModel):
    """Evolvable description of a single dividing wall.

    Locations are relative (nominally in ``[0, 1)``) and are only turned into
    concrete cell offsets once the decoder knows which room the gene applies to.
    """

    innovation_id: int = Field(
        default=0, ge=0, description="Lineage-wide identifier of the gene"
    )
    wall_location: float = Field(
        description="Relative position of the wall across the room"
    )
    passage_location: float = Field(
        description="Relative position of the passage along the wall"
    )
    orientation_seed: bool = Field(
        default=True,
        description="Preferred orientation (True = horizontal), used for square rooms",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def mutate(self, rng: random.Random) -> "MazeGene":
        """Return a copy with both locations resampled uniformly in [0, 1).

        Standalone form for callers outside the roulette wheel;
        ``MazeGenomeMutator`` resamples one location per offspring through
        ``with_wall_location`` / ``with_passage_location``.
        """
        return self.model_copy(
            update={
                "wall_location": rng.random(),
                "passage_location": rng.random(),
            }
        )

    def with_wall_location(self, value: float) -> "MazeGene":
        return self.model_copy(update={"wall_location": value})

    def with_passage_location(self, value: float) -> "MazeGene":
        return self.model_copy(update={"passage_location": value})


class MazeGenome(BaseModel):
    """Ordered gene list plus the unscaled maze boundary.

    Gene order is significant: the decoder consumes one gene per room in the
    order rooms are created.
    """

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique genome identifier",
    )
    width: int = Field(description="Unscaled maze boundary width (cells)")
    height: int = Field(description="Unscaled maze boundary height (cells)")
    genes: tuple[MazeGene, ...] = Field(
        default_factory=tuple, description="Genes in decoding order"
    )
    birth_generation: int = Field(
        default=0, ge=0, description="Generation the genome was created in"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("id")
    @classmethod
    def validate_uuid(cls, v: str) -> str:
        try:
            uuid.UUID(v)
            return v
        except ValueError:
            raise ValueError("Invalid UUID format")

    @property
    def num_genes(self) -> int:
        return len(self.genes)

    @property
    def max_useful_genes(self) -> int:
        """Upper bound on the number of genes the decoder can ever consume.

        Each division adds exactly one room and rooms never overlap, so a
        ``width x height`` maze holds at most ``width * height`` rooms and at
        most ``2 * width * height - 1`` rooms are ever dequeued.
        """
        return max(0, 2 * self.width * self.height - 1)

    def copy_as_offspring(
        self, birth_generation: int, genes: tuple[MazeGene, ...] | None = None
    ) -> "MazeGenome":
        """Create a child genome with a fresh id."""
        return self.model_copy(
            update={
                "id": str(uuid.uuid4()),
                "birth_generation": birth_generation,
                "genes": self.genes if genes is None else tuple(genes),
            }
        )
