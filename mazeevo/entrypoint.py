"""Smoke run: evolve a few random maze genomes and decode them in a batch."""

from __future__ import annotations

from datetime import datetime, timezone
import time

from hydra.utils import instantiate
from loguru import logger
from omegaconf import DictConfig

from mazeevo.decoder import DecodeOutcome, DecoderConfig, MazeDecoder, decode_population
from mazeevo.genome import MazeGenomeFactory, MazeGenomeMutator, MutationParameters
from mazeevo.utils.ascii import render_ascii


def run_demo(cfg: DictConfig) -> list[DecodeOutcome]:
    start_time = time.time()
    logger.info("=" * 80)
    logger.info("MazeEvo decode run")
    logger.info("=" * 80)
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")

    decoder_config: DecoderConfig = instantiate(cfg.decoder)
    mutation_parameters: MutationParameters = instantiate(cfg.mutation)
    decoder = MazeDecoder(decoder_config)

    factory = MazeGenomeFactory(cfg.maze.width, cfg.maze.height, seed=cfg.seed)
    population = factory.create_population(cfg.population_size, cfg.maze.num_genes)
    logger.info(
        f"Created {len(population)} genomes of {cfg.maze.width}x{cfg.maze.height} "
        f"with {cfg.maze.num_genes} genes"
    )

    mutator = MazeGenomeMutator(factory, mutation_parameters)
    for generation in range(1, cfg.generations + 1):
        population = [
            mutator.create_offspring(genome, generation)[0] for genome in population
        ]
    if cfg.generations:
        logger.info(f"Applied {cfg.generations} generations of mutation")

    outcomes = decode_population(population, decoder, max_workers=cfg.max_workers)
    decoded = [outcome for outcome in outcomes if outcome.ok]
    logger.info(f"Decoded {len(decoded)}/{len(outcomes)} genomes")

    for outcome in decoded:
        maze = outcome.maze
        logger.info(
            f"  {outcome.genome_id}: {maze.num_partitions} partitions, "
            f"{len(maze.interior_walls)} interior walls, "
            f"max timesteps {maze.max_timesteps}"
        )

    if cfg.show_ascii and decoded:
        logger.info("First decoded maze:\n" + render_ascii(decoded[0].maze.grid))

    duration = time.time() - start_time
    logger.info(f"Total duration: {duration:.2f} seconds")
    return outcomes
