from mazeevo.genome.factory import MazeGenomeFactory
from mazeevo.genome.genome import MazeGene, MazeGenome
from mazeevo.genome.mutation import (
    MazeGenomeMutator,
    MutationKind,
    MutationParameters,
)

__all__ = [
    "MazeGene",
    "MazeGenome",
    "MazeGenomeFactory",
    "MazeGenomeMutator",
    "MutationKind",
    "MutationParameters",
]
