import numpy as np

from mazeevo.decoder import DecoderConfig, MazeDecoder, decode_population
from mazeevo.exceptions import DegenerateGeneError, InvalidBoundaryError
from mazeevo.genome import MazeGene, MazeGenome, MazeGenomeFactory


def test_empty_population():
    assert decode_population([]) == []


def test_outcomes_follow_input_order():
    factory = MazeGenomeFactory(9, 7, seed=4)
    genomes = factory.create_population(12, num_genes=20)
    decoder = MazeDecoder(DecoderConfig(scale_multiplier=3))

    outcomes = decode_population(genomes, decoder, max_workers=4)

    assert [o.genome_id for o in outcomes] == [g.id for g in genomes]
    for genome, outcome in zip(genomes, outcomes):
        assert outcome.ok
        expected = decoder.decode(genome)
        assert outcome.maze.walls == expected.walls
        np.testing.assert_array_equal(outcome.maze.grid, expected.grid)


def test_decode_errors_are_reported_per_genome():
    good = MazeGenome(width=3, height=3, genes=[MazeGene(wall_location=0.2, passage_location=0.4)])
    bad_boundary = MazeGenome(width=0, height=3)
    bad_gene = MazeGenome(width=3, height=3, genes=[MazeGene(wall_location=3.0, passage_location=0.4)])

    outcomes = decode_population([good, bad_boundary, bad_gene])

    assert [o.ok for o in outcomes] == [True, False, False]
    assert outcomes[0].error is None
    assert outcomes[1].maze is None
    assert isinstance(outcomes[1].error, InvalidBoundaryError)
    assert isinstance(outcomes[2].error, DegenerateGeneError)
    assert outcomes[2].genome_id == bad_gene.id
