"""Square forest grid backed by numpy arrays."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .cell import BURN_DECAY_FRAMES, CellKind, CellState


@dataclass(frozen=True, eq=False)
class GridSnapshot:
    """Read-only copy of the grid for renderers and tests.

    Arrays are indexed ``[y, x]``.
    """

    kind: np.ndarray
    decay: np.ndarray

    @property
    def size(self) -> int:
        return int(self.kind.shape[0])

    def state_at(self, x: int, y: int) -> CellState:
        return CellState(CellKind(int(self.kind[y, x])), int(self.decay[y, x]))

    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self.kind == kind))

    def fade_intensity(self) -> np.ndarray:
        """Per-cell fade level in [0, 1]; 1 right after burning out, 0 when not decaying."""
        return self.decay.astype(float) / BURN_DECAY_FRAMES

    def equals(self, other: "GridSnapshot") -> bool:
        return np.array_equal(self.kind, other.kind) and np.array_equal(self.decay, other.decay)


class ForestGrid:
    """Square matrix of cells with an incrementally maintained tree count.

    The cell kind and the decay countdown live in two parallel arrays so
    that the countdown never doubles as a state code.

    Attributes:
        size: Side length of the grid.
        kind: int8 array of ``CellKind`` values, indexed ``[y, x]``.
        decay: uint8 array of remaining decay frames, zero unless decaying.
        tree_count: Number of ``Tree`` cells.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.kind = np.full((size, size), CellKind.Vacant, dtype=np.int8)
        self.decay = np.zeros((size, size), dtype=np.uint8)
        self.tree_count = 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise ValueError(f"Cell ({x}, {y}) is outside a {self.size}x{self.size} grid")

    def state_at(self, x: int, y: int) -> CellState:
        self._check_bounds(x, y)
        return CellState(CellKind(int(self.kind[y, x])), int(self.decay[y, x]))

    def is_tree(self, x: int, y: int) -> bool:
        return self.kind[y, x] == CellKind.Tree

    def is_growable(self, x: int, y: int) -> bool:
        """Vacant and decaying cells both accept new trees."""
        k = self.kind[y, x]
        return k == CellKind.Vacant or k == CellKind.Decaying

    def plant(self, x: int, y: int) -> None:
        """Grow a tree on a vacant or decaying cell."""
        self._check_bounds(x, y)
        if not self.is_growable(x, y):
            raise ValueError(f"Cannot plant a tree on {self.state_at(x, y)} cell ({x}, {y})")
        self.kind[y, x] = CellKind.Tree
        self.decay[y, x] = 0
        self.tree_count += 1

    def set_burning(self, x: int, y: int) -> None:
        """Turn a tree into a burning cell."""
        self._check_bounds(x, y)
        if not self.is_tree(x, y):
            raise ValueError(f"Only trees can catch fire, ({x}, {y}) is {self.state_at(x, y)}")
        self.kind[y, x] = CellKind.Burning
        self.tree_count -= 1

    def burn_out(self, x: int, y: int) -> None:
        """Start the decay countdown of a cell whose neighbours have been examined."""
        self.kind[y, x] = CellKind.Decaying
        self.decay[y, x] = BURN_DECAY_FRAMES

    def decay_step(self) -> None:
        """Advance every decay countdown by one frame."""
        decaying = self.kind == CellKind.Decaying
        if not decaying.any():
            return
        self.decay[decaying] -= 1
        self.kind[decaying & (self.decay == 0)] = CellKind.Vacant

    def count_trees(self) -> int:
        """Full re-scan of the grid, independent of ``tree_count``."""
        return int(np.count_nonzero(self.kind == CellKind.Tree))

    def density(self) -> float:
        """Fraction of cells holding a tree."""
        return self.tree_count / (self.size * self.size)

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(kind=self.kind.copy(), decay=self.decay.copy())
