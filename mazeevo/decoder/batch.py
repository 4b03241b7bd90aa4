"""Fan-out decoding of a whole population on a shared thread pool."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import os
from typing import Iterable, NamedTuple

from loguru import logger

from mazeevo.decoder.decoder import MazeDecoder
from mazeevo.exceptions import MazeDecodeError
from mazeevo.genome.genome import MazeGenome
from mazeevo.phenome.structure import MazeStructure

__all__ = ["DecodeOutcome", "decode_population"]


class DecodeOutcome(NamedTuple):
    genome_id: str
    maze: MazeStructure | None
    error: MazeDecodeError | None

    @property
    def ok(self) -> bool:
        return self.error is None


def _default_workers() -> int:
    return max(4, (os.cpu_count() or 4) * 2)


def _decode_one(decoder: MazeDecoder, genome: MazeGenome) -> DecodeOutcome:
    try:
        return DecodeOutcome(genome.id, decoder.decode(genome), None)
    except MazeDecodeError as e:
        logger.warning(f"[decode_population] Genome {genome.id} failed to decode: {e}")
        return DecodeOutcome(genome.id, None, e)


def decode_population(
    genomes: Iterable[MazeGenome],
    decoder: MazeDecoder | None = None,
    max_workers: int | None = None,
) -> list[DecodeOutcome]:
    """Decode every genome independently; outcomes keep the input order.

    Decode failures are reported per genome so the caller can discard or
    penalize the offenders. Any other exception propagates.
    """
    decoder = decoder or MazeDecoder()
    genomes = list(genomes)
    if not genomes:
        return []

    with ThreadPoolExecutor(
        max_workers=max_workers or _default_workers(),
        thread_name_prefix="mazeevo-decode",
    ) as executor:
        futures = [executor.submit(_decode_one, decoder, genome) for genome in genomes]
        outcomes = [future.result() for future in futures]

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.debug(
        f"[decode_population] Decoded {len(outcomes) - failed}/{len(outcomes)} genomes"
    )
    return outcomes
