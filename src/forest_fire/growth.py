"""Tree growth and lightning between fires."""

from __future__ import annotations

from typing import Optional

from .grid import ForestGrid
from .prng import SeededRandom


class GrowthStepper:
    """Applies random tree growth and lightning strikes one timestep at a time.

    Attributes:
        grid: The grid trees grow on.
        rng: Shared simulation PRNG.
        growth_probability: Chance that a sampled empty cell grows a tree.
        ignition_probability: Chance that a sampled tree is struck.
        elapsed_steps: Completed timesteps that did not end in a strike.
    """

    def __init__(
        self,
        grid: ForestGrid,
        rng: SeededRandom,
        growth_probability: float,
        ignition_probability: float,
    ):
        self.grid = grid
        self.rng = rng
        self.growth_probability = growth_probability
        self.ignition_probability = ignition_probability
        self.elapsed_steps = 0

    def run(self, steps: int) -> Optional[tuple[int, int]]:
        """
        Attempt up to ``steps`` timesteps.

        Each timestep samples one cell for growth and then one cell for
        lightning. A strike ends the batch at once and that timestep is not
        counted in ``elapsed_steps``.

        Returns:
            Coordinates of the struck tree, or None if no lightning hit.
        """
        grid = self.grid
        rng = self.rng
        size = grid.size
        p = self.growth_probability
        f = self.ignition_probability

        for _ in range(steps):
            x = rng.next_int(size)
            y = rng.next_int(size)
            if grid.is_growable(x, y) and rng.random() < p:
                grid.plant(x, y)

            x = rng.next_int(size)
            y = rng.next_int(size)
            if grid.is_tree(x, y) and rng.random() < f:
                return x, y

            self.elapsed_steps += 1

        return None
