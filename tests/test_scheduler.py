"""Tests for breadth-first subdivision and gene validation."""

import math
import random

import numpy as np
import pytest

from mazeevo.decoder import GeneValidationPolicy, subdivide
from mazeevo.decoder.scheduler import resolve_location
from mazeevo.exceptions import DegenerateGeneError, InvalidBoundaryError
from mazeevo.genome import MazeGene, MazeGenome
from mazeevo.phenome import CellWall, OrientationRule, Room


def gene(wall, passage, seed=True):
    return MazeGene(wall_location=wall, passage_location=passage, orientation_seed=seed)


def genome(width, height, *genes):
    return MazeGenome(width=width, height=height, genes=genes)


def test_empty_genome_leaves_grid_blank():
    result = subdivide(genome(5, 4))
    assert result.grid.shape == (4, 5)
    assert not result.grid.any()
    assert result.num_partitions == 0
    assert result.genes_consumed == 0
    assert result.open_rooms == (Room(0, 0, 5, 4),)


def test_invalid_boundary():
    with pytest.raises(InvalidBoundaryError):
        subdivide(genome(0, 3, gene(0.5, 0.5)))


def test_rooms_are_processed_first_in_first_out():
    result = subdivide(
        genome(4, 4, gene(0.5, 0.5), gene(0.5, 0.5), gene(0.5, 0.5))
    )

    expected = np.array(
        [[1, 1, 0, 1], [1, 1, 0, 1], [1, 1, 0, 1], [0, 0, 0, 0]], dtype=np.uint8
    )
    np.testing.assert_array_equal(result.grid, expected)
    assert result.num_partitions == 3
    assert result.genes_consumed == 3
    assert result.open_rooms == (
        Room(0, 0, 4, 1),
        Room(0, 1, 4, 1),
        Room(0, 2, 4, 1),
        Room(0, 3, 4, 1),
    )


def test_terminal_rooms_still_consume_genes():
    result = subdivide(
        genome(2, 2, gene(0.5, 0.5), gene(0.5, 0.5), gene(0.5, 0.5), gene(0.5, 0.5))
    )
    assert result.num_partitions == 1
    assert result.genes_consumed == 3
    assert result.open_rooms == (Room(0, 0, 2, 1), Room(0, 1, 2, 1))


def test_extra_genes_are_ignored_once_rooms_run_out():
    base = subdivide(genome(1, 1, gene(0.5, 0.5)))
    extended = subdivide(genome(1, 1, gene(0.5, 0.5), gene(0.1, 0.9), gene(0.7, 0.2)))

    assert extended.genes_consumed == 1
    np.testing.assert_array_equal(base.grid, extended.grid)


@pytest.mark.parametrize("width,height", [(1, 6), (6, 1)])
def test_single_cell_thick_mazes_are_never_divided(width, height):
    genes = [gene(0.5, 0.5) for _ in range(5)]
    result = subdivide(genome(width, height, *genes))
    assert not result.grid.any()
    assert result.num_partitions == 0


def test_random_genomes_never_exceed_useful_gene_count():
    rng = random.Random(5)
    for _ in range(20):
        width, height = rng.randint(1, 7), rng.randint(1, 7)
        genes = [gene(rng.random(), rng.random(), rng.random() < 0.5) for _ in range(200)]
        g = genome(width, height, *genes)
        result = subdivide(g)

        assert result.genes_consumed <= g.max_useful_genes
        assert result.num_partitions <= width * height - 1
        # fully consumed: only rooms that cannot be divided remain
        assert not any(room.is_divisible for room in result.open_rooms)
        assert sum(r.width * r.height for r in result.open_rooms) == width * height


def test_taller_rule_can_mark_both_walls_on_one_cell():
    result = subdivide(
        genome(4, 4, gene(0.5, 0.5), gene(0.5, 0.0)),
        rule=OrientationRule.TALLER_IS_HORIZONTAL,
    )
    assert result.grid[1, 1] == CellWall.BOTH
    np.testing.assert_array_equal(result.grid[1], [1, 3, 0, 1])
    assert result.grid[0, 1] == CellWall.NONE


def test_out_of_range_gene_rejected_by_default():
    with pytest.raises(DegenerateGeneError) as exc_info:
        subdivide(genome(8, 8, gene(0.5, 0.5), gene(1.5, 0.5)))
    assert exc_info.value.gene_index == 1
    assert exc_info.value.field == "wall_location"
    assert exc_info.value.value == 1.5


def test_out_of_range_gene_clamped_on_request():
    result = subdivide(
        genome(8, 8, gene(1.5, -3.0)), policy=GeneValidationPolicy.CLAMP
    )
    # wall pushed to the last interior line, passage to the first cell
    np.testing.assert_array_equal(result.grid[6], [0, 1, 1, 1, 1, 1, 1, 1])
    assert np.count_nonzero(result.grid) == 7


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_gene_rejected_under_any_policy(value):
    for policy in GeneValidationPolicy:
        with pytest.raises(DegenerateGeneError):
            subdivide(genome(4, 4, gene(0.5, value)), policy=policy)


def test_unconsumed_genes_are_not_validated():
    result = subdivide(genome(1, 1, gene(0.5, 0.5), gene(7.0, math.nan)))
    assert result.genes_consumed == 1


def test_resolve_location_passes_valid_values_through():
    for policy in GeneValidationPolicy:
        assert resolve_location(0.25, policy, 0, "wall_location") == 0.25
        assert resolve_location(0.0, policy, 0, "wall_location") == 0.0


def test_resolve_location_clamps_upper_bound_to_one():
    assert resolve_location(1.0, GeneValidationPolicy.CLAMP, 0, "wall_location") == 1.0
    with pytest.raises(DegenerateGeneError):
        resolve_location(1.0, GeneValidationPolicy.REJECT, 0, "wall_location")
