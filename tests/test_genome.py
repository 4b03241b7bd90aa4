"""Tests for the maze gene and genome models."""

import random

from pydantic import ValidationError
import pytest

from mazeevo.genome import MazeGene, MazeGenome


def make_gene(wall=0.5, passage=0.5, seed=True, innovation_id=1):
    return MazeGene(
        innovation_id=innovation_id,
        wall_location=wall,
        passage_location=passage,
        orientation_seed=seed,
    )


def test_gene_mutate_resamples_locations_only():
    gene = make_gene(wall=0.25, passage=0.75, seed=False, innovation_id=7)
    mutated = gene.mutate(random.Random(3))

    assert mutated is not gene
    assert 0.0 <= mutated.wall_location < 1.0
    assert 0.0 <= mutated.passage_location < 1.0
    assert (mutated.wall_location, mutated.passage_location) != (0.25, 0.75)
    assert mutated.orientation_seed is False
    assert mutated.innovation_id == 7
    # source gene untouched
    assert gene.wall_location == 0.25
    assert gene.passage_location == 0.75


def test_gene_mutate_is_reproducible_with_seeded_rng():
    gene = make_gene()
    assert gene.mutate(random.Random(11)) == gene.mutate(random.Random(11))


def test_gene_is_frozen():
    gene = make_gene()
    with pytest.raises(ValidationError):
        gene.wall_location = 0.1


def test_gene_accepts_out_of_range_locations():
    """Range checks belong to the decoder's validation policy."""
    gene = make_gene(wall=1.5, passage=-0.2)
    assert gene.wall_location == 1.5
    assert gene.passage_location == -0.2


def test_genome_defaults():
    genome = MazeGenome(width=5, height=3)
    assert genome.genes == ()
    assert genome.num_genes == 0
    assert genome.birth_generation == 0
    assert genome.max_useful_genes == 29


def test_genome_keeps_gene_order():
    genes = [make_gene(innovation_id=i) for i in (3, 1, 2)]
    genome = MazeGenome(width=4, height=4, genes=genes)
    assert [g.innovation_id for g in genome.genes] == [3, 1, 2]


def test_genome_rejects_invalid_id():
    with pytest.raises(ValidationError):
        MazeGenome(id="not-a-uuid", width=2, height=2)


def test_copy_as_offspring_assigns_new_id():
    parent = MazeGenome(width=4, height=4, genes=[make_gene()])
    child = parent.copy_as_offspring(birth_generation=5)

    assert child.id != parent.id
    assert child.birth_generation == 5
    assert child.genes == parent.genes
    assert (child.width, child.height) == (4, 4)


def test_copy_as_offspring_with_replacement_genes():
    parent = MazeGenome(width=4, height=4, genes=[make_gene()])
    child = parent.copy_as_offspring(1, genes=[])
    assert child.genes == ()
    assert parent.num_genes == 1
