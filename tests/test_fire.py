"""Unit tests for fire propagation."""

import numpy as np
import pytest
from forest_fire.cell import BURN_DECAY_FRAMES, CellKind, CellState
from forest_fire.fire import NEIGHBOR_OFFSETS, FirePropagation
from forest_fire.grid import ForestGrid


def forest(size, cells=None):
    """Grid with trees on ``cells``, or everywhere if omitted."""
    grid = ForestGrid(size)
    if cells is None:
        cells = [(x, y) for y in range(size) for x in range(size)]
    for x, y in cells:
        grid.plant(x, y)
    return grid


class TestNeighbourhood:

    def test_row_major_moore_offsets(self):
        assert NEIGHBOR_OFFSETS == (
            (-1, -1), (0, -1), (1, -1),
            (-1, 0), (1, 0),
            (-1, 1), (0, 1), (1, 1),
        )


class TestFirePropagation:
    """Test cases for FirePropagation."""

    def test_ignite_state(self):
        grid = forest(8)
        fire = FirePropagation(grid)
        fire.ignite(4, 4)
        assert fire.active
        assert fire.size == 1
        assert fire.frontier == [(4, 4)]
        assert grid.state_at(4, 4).kind == CellKind.Burning
        assert grid.tree_count == 63

    def test_ignite_non_tree_rejected(self):
        grid = forest(8, cells=[])
        fire = FirePropagation(grid)
        with pytest.raises(ValueError):
            fire.ignite(0, 0)
        assert not fire.active

    def test_second_ignition_rejected(self):
        grid = forest(8)
        fire = FirePropagation(grid)
        fire.ignite(0, 0)
        with pytest.raises(ValueError):
            fire.ignite(7, 7)

    def test_full_forest_burns_completely(self):
        sizes = []
        grid = forest(8)
        fire = FirePropagation(grid, on_complete=sizes.append)
        fire.ignite(4, 4)
        assert fire.burn_out() == 64
        assert sizes == [64]
        assert not fire.active
        assert fire.size == 0
        assert grid.tree_count == 0
        assert np.all(grid.kind == CellKind.Decaying)
        assert np.all(grid.decay == BURN_DECAY_FRAMES)

    def test_first_expansion_frontier_order(self):
        grid = forest(8)
        fire = FirePropagation(grid)
        fire.ignite(4, 4)
        fire.step()
        assert fire.frontier == [(3, 3), (4, 3), (5, 3), (3, 4), (5, 4), (3, 5), (4, 5), (5, 5)]
        assert fire.size == 9
        assert grid.state_at(4, 4) == CellState.decaying(BURN_DECAY_FRAMES)

    def test_stepwise_rings(self):
        grid = forest(8)
        fire = FirePropagation(grid)
        fire.ignite(4, 4)

        # Chebyshev rings around (4, 4): 8, 16, 24 and 15 cells
        for expected in (9, 25, 49, 64):
            fire.step()
            assert fire.size == expected
            assert fire.active

        fire.step()
        assert not fire.active
        assert fire.last_size == 64

    def test_step_respects_expansion_limit(self):
        grid = forest(8)
        fire = FirePropagation(grid)
        fire.ignite(0, 0)
        fire.step(max_expansions=2)
        assert fire.size == 9  # 1 + 3 + 5 in the corner
        assert fire.active

    def test_corner_does_not_wrap(self):
        cells = [(0, 0), (7, 7), (7, 0), (0, 7)]
        grid = forest(8, cells=cells)
        fire = FirePropagation(grid)
        fire.ignite(0, 0)
        assert fire.burn_out() == 1
        assert grid.tree_count == 3

    def test_diagonal_connection_spreads(self):
        grid = forest(8, cells=[(0, 0), (1, 1), (2, 2), (4, 4)])
        fire = FirePropagation(grid)
        fire.ignite(0, 0)
        assert fire.burn_out() == 3
        assert grid.state_at(4, 4).kind == CellKind.Tree

    def test_modes_agree(self):
        rng = np.random.default_rng(7)
        cells = [(x, y) for y in range(16) for x in range(16) if rng.random() < 0.6]
        start = cells[len(cells) // 2]

        instant = forest(16, cells)
        instant_fire = FirePropagation(instant)
        instant_fire.ignite(*start)
        instant_fire.burn_out()

        stepwise = forest(16, cells)
        stepwise_fire = FirePropagation(stepwise)
        stepwise_fire.ignite(*start)
        while stepwise_fire.active:
            stepwise_fire.step()

        assert instant_fire.last_size == stepwise_fire.last_size
        assert instant.snapshot().equals(stepwise.snapshot())
        assert instant.tree_count == instant.count_trees()

    def test_size_equals_burnt_trees(self):
        rng = np.random.default_rng(3)
        cells = [(x, y) for y in range(12) for x in range(12) if rng.random() < 0.5]
        grid = forest(12, cells)
        before = grid.count_trees()
        fire = FirePropagation(grid)
        fire.ignite(*cells[0])
        size = fire.burn_out()
        assert size >= 1
        assert size == before - grid.count_trees()
        assert size == int(np.count_nonzero(grid.kind == CellKind.Decaying))
