"""Fire propagation over the forest grid."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .cell import CellKind
from .config import FIRE_EXPANSIONS_PER_TICK
from .grid import ForestGrid

logger = logging.getLogger(__name__)

# Moore neighbourhood in row-major order, centre excluded
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class FirePropagation:
    """Spreads a single fire as a wavefront over 8-connected neighbours.

    The engine is idle until ``ignite`` is called and returns to idle when
    the wavefront dies out. At that point ``on_complete`` receives the final
    fire size.

    Attributes:
        grid: The grid the fire burns on.
        frontier: Burning cells whose neighbours have not been examined yet.
        size: Number of cells burnt by the current fire.
        last_size: Size of the most recently completed fire.
    """

    def __init__(self, grid: ForestGrid, on_complete: Optional[Callable[[int], None]] = None):
        self.grid = grid
        self.on_complete = on_complete
        self.frontier: list[tuple[int, int]] = []
        self.size = 0
        self.last_size = 0

    @property
    def active(self) -> bool:
        return bool(self.frontier)

    def ignite(self, x: int, y: int) -> None:
        """Set a tree on fire and make it the sole frontier cell."""
        if self.active:
            raise ValueError("Cannot ignite while another fire is burning")
        self.grid.set_burning(x, y)
        self.size = 1
        self.frontier = [(x, y)]

    def expand(self) -> None:
        """Run one wavefront expansion.

        Every tree next to a frontier cell catches fire and forms the next
        frontier; frontier cells then start decaying.
        """
        grid = self.grid
        kind = grid.kind
        size = grid.size
        next_frontier: list[tuple[int, int]] = []

        for x, y in self.frontier:
            for dx, dy in NEIGHBOR_OFFSETS:
                nx = x + dx
                ny = y + dy
                if 0 <= nx < size and 0 <= ny < size and kind[ny, nx] == CellKind.Tree:
                    grid.set_burning(nx, ny)
                    self.size += 1
                    next_frontier.append((nx, ny))
            grid.burn_out(x, y)

        self.frontier = next_frontier
        if not self.frontier:
            self._finish()

    def step(self, max_expansions: int = FIRE_EXPANSIONS_PER_TICK) -> None:
        """Run at most ``max_expansions`` expansions (animated spreading)."""
        for _ in range(max_expansions):
            if not self.active:
                break
            self.expand()

    def burn_out(self) -> int:
        """Spread the fire until it dies out and return its final size."""
        while self.active:
            self.expand()
        return self.last_size

    def _finish(self) -> None:
        self.last_size = self.size
        logger.debug(f"Fire finished, {self.size} cells burnt")
        if self.on_complete is not None:
            self.on_complete(self.size)
        self.size = 0
        self.frontier = []
