"""MazeEvo – decoding of evolvable maze genomes into wall geometry."""

from mazeevo.decoder import DecoderConfig, GeneValidationPolicy, MazeDecoder, decode_genome
from mazeevo.genome import MazeGene, MazeGenome
from mazeevo.phenome import CellWall, MazeStructure, WallSegment

__all__ = [
    "CellWall",
    "DecoderConfig",
    "GeneValidationPolicy",
    "MazeDecoder",
    "MazeGene",
    "MazeGenome",
    "MazeStructure",
    "WallSegment",
    "decode_genome",
]
