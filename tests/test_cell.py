"""Unit tests for cell states and the forest grid."""

import numpy as np
import pytest
from forest_fire.cell import BURN_DECAY_FRAMES, CellKind, CellState, TREE, VACANT
from forest_fire.grid import ForestGrid


class TestCellState:
    """Test cases for the tagged cell state."""

    def test_cell_kinds_exist(self):
        assert [k.name for k in CellKind] == ["Vacant", "Tree", "Burning", "Decaying"]

    def test_decaying_carries_countdown(self):
        state = CellState.decaying(3)
        assert state.kind == CellKind.Decaying
        assert state.decay == 3
        assert str(state) == "Decaying(3)"

    def test_decaying_countdown_range(self):
        with pytest.raises(ValueError):
            CellState(CellKind.Decaying, 0)
        with pytest.raises(ValueError):
            CellState(CellKind.Decaying, BURN_DECAY_FRAMES + 1)

    def test_only_decaying_has_countdown(self):
        with pytest.raises(ValueError):
            CellState(CellKind.Tree, 2)

    def test_growable(self):
        assert VACANT.is_growable()
        assert CellState.decaying().is_growable()
        assert not TREE.is_growable()
        assert not CellState(CellKind.Burning).is_growable()


class TestForestGrid:
    """Test cases for ForestGrid."""

    @pytest.fixture
    def grid(self, sample_grid_size):
        return ForestGrid(sample_grid_size)

    def test_grid_starts_vacant(self, grid):
        assert grid.tree_count == 0
        assert np.all(grid.kind == CellKind.Vacant)
        assert np.all(grid.decay == 0)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            ForestGrid(0)

    def test_plant_updates_count(self, grid):
        grid.plant(1, 2)
        grid.plant(3, 0)
        assert grid.tree_count == 2
        assert grid.count_trees() == 2
        assert grid.state_at(1, 2) == TREE
        # arrays are indexed [y, x]
        assert grid.kind[2, 1] == CellKind.Tree

    def test_plant_on_tree_rejected(self, grid):
        grid.plant(0, 0)
        with pytest.raises(ValueError):
            grid.plant(0, 0)

    def test_out_of_bounds_rejected(self, grid):
        with pytest.raises(ValueError):
            grid.plant(grid.size, 0)
        with pytest.raises(ValueError):
            grid.state_at(-1, 0)

    def test_set_burning_requires_tree(self, grid):
        with pytest.raises(ValueError):
            grid.set_burning(0, 0)
        grid.plant(0, 0)
        grid.set_burning(0, 0)
        assert grid.state_at(0, 0).kind == CellKind.Burning
        assert grid.tree_count == 0

    def test_decay_countdown(self, grid):
        grid.plant(4, 4)
        grid.set_burning(4, 4)
        grid.burn_out(4, 4)
        assert grid.state_at(4, 4) == CellState.decaying(BURN_DECAY_FRAMES)

        for remaining in range(BURN_DECAY_FRAMES - 1, 0, -1):
            grid.decay_step()
            assert grid.state_at(4, 4) == CellState.decaying(remaining)

        grid.decay_step()
        assert grid.state_at(4, 4) == VACANT

    def test_tree_grows_on_decaying_cell(self, grid):
        grid.plant(2, 2)
        grid.set_burning(2, 2)
        grid.burn_out(2, 2)
        grid.plant(2, 2)
        assert grid.state_at(2, 2) == TREE
        grid.decay_step()
        assert grid.state_at(2, 2) == TREE

    def test_snapshot_is_a_copy(self, grid):
        snapshot = grid.snapshot()
        grid.plant(0, 0)
        assert snapshot.state_at(0, 0) == VACANT
        assert snapshot.count(CellKind.Tree) == 0
        assert not snapshot.equals(grid.snapshot())

    def test_snapshot_fade_intensity(self, grid):
        grid.plant(1, 1)
        grid.set_burning(1, 1)
        grid.burn_out(1, 1)
        fade = grid.snapshot().fade_intensity()
        assert fade[1, 1] == 1.0
        assert fade.sum() == 1.0

    def test_density(self, grid):
        grid.plant(0, 0)
        assert grid.density() == pytest.approx(1 / grid.size**2)
