from __future__ import annotations

from mazeevo.decoder.batch import DecodeOutcome, decode_population
from mazeevo.decoder.config import DecoderConfig, GeneValidationPolicy
from mazeevo.decoder.decoder import MazeDecoder, decode_genome
from mazeevo.decoder.scheduler import Subdivision, subdivide

__all__ = [
    "DecodeOutcome",
    "DecoderConfig",
    "GeneValidationPolicy",
    "MazeDecoder",
    "Subdivision",
    "decode_genome",
    "decode_population",
    "subdivide",
]
