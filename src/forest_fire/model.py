"""Forest-fire model implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from mesa import Model

from .config import (
    DEFAULT_BIN_BASE,
    DEFAULT_GRID_SIZE,
    InvalidParameterError,
    SimulationParameters,
)
from .fire import FirePropagation
from .grid import ForestGrid, GridSnapshot
from .growth import GrowthStepper
from .prng import SeededRandom
from .statistics import BinnedPoint, FireStatistics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationStats:
    """Counters of a running simulation."""

    elapsed_steps: int
    live_trees: int
    total_fires: int
    density_percent: float


class ForestFireModel(Model):
    """Self-organized-criticality forest-fire model.

    Each tick either grows trees and waits for lightning, or spreads the
    current fire; never both. Completed fires are recorded in ``statistics``.
    """

    def __init__(self, grid_size: int = DEFAULT_GRID_SIZE, params: Optional[SimulationParameters] = None):
        """
        Initialize the forest-fire model.

        Args:
            grid_size: Side length of the square grid (number of cells)
            params: Simulation parameters, defaults if omitted

        Raises:
            InvalidParameterError: If ``params`` violate their invariants.
        """
        super().__init__()
        if grid_size < 1:
            raise ValueError(f"grid_size must be positive, got {grid_size}")
        self.grid_size = grid_size
        self._start((params or SimulationParameters()).validate())

    def configure(
        self,
        growth_probability: Optional[float] = None,
        ignition_probability: Optional[float] = None,
        steps_per_tick: Optional[int] = None,
        animate: Optional[bool] = None,
        seed: Optional[str] = None,
    ) -> SimulationParameters:
        """
        Replace the simulation parameters and start over.

        Omitted arguments keep their current value. The parameters are
        validated before anything is changed.

        Returns:
            The new parameters.

        Raises:
            InvalidParameterError: If the new parameters are invalid; the
                model is left untouched.
        """
        changes = {
            "growth_probability": growth_probability,
            "ignition_probability": ignition_probability,
            "steps_per_tick": steps_per_tick,
            "animate": animate,
            "seed": seed,
        }
        candidate = replace(self.params, **{k: v for k, v in changes.items() if v is not None})
        try:
            candidate.validate()
        except InvalidParameterError as e:
            logger.warning(f"Rejected configuration: {e}")
            raise

        self._start(candidate)
        logger.info(f"Configured {candidate}")
        return candidate

    def reset(self) -> None:
        """Start from an empty grid with fresh counters, statistics and PRNG."""
        self._start(self.params)

    def _start(self, params: SimulationParameters) -> None:
        # Everything is built before any attribute changes
        prng = SeededRandom(params.seed)
        grid = ForestGrid(self.grid_size)
        statistics = FireStatistics()
        stepper = GrowthStepper(grid, prng, params.growth_probability, params.ignition_probability)
        fire = FirePropagation(grid, on_complete=self._record_fire)

        self.params = params
        self.prng = prng
        self.grid = grid
        self.statistics = statistics
        self.stepper = stepper
        self.fire = fire
        logger.info(f"Reset {self.grid_size}x{self.grid_size} grid with seed {params.seed!r}")

    def step(self) -> None:
        """
        Execute one tick of the simulation.

        Decay countdowns advance first. Then an active fire spreads (one
        expansion when animated, to completion otherwise), or, without a
        fire, ``steps_per_tick`` growth timesteps run until lightning strikes.
        """
        self.grid.decay_step()

        if self.fire.active:
            if self.params.animate:
                self.fire.step()
            else:
                self.fire.burn_out()
            return

        strike = self.stepper.run(self.params.steps_per_tick)
        if strike is not None:
            self.fire.ignite(*strike)

    def tick(self) -> None:
        self.step()

    def ignite(self, x: int, y: int) -> None:
        """Start a fire at a tree cell, as lightning would."""
        self.fire.ignite(x, y)

    @property
    def fire_active(self) -> bool:
        return self.fire.active

    def _record_fire(self, size: int) -> None:
        self.statistics.record(size)
        logger.debug(f"Recorded fire of size {size}, {self.statistics.total_fires} fires so far")

    def snapshot_grid(self) -> GridSnapshot:
        return self.grid.snapshot()

    def snapshot_stats(self) -> SimulationStats:
        return SimulationStats(
            elapsed_steps=self.stepper.elapsed_steps,
            live_trees=self.grid.tree_count,
            total_fires=self.statistics.total_fires,
            density_percent=self.grid.density() * 100.0,
        )

    def snapshot_binned_distribution(self, bin_base: float = DEFAULT_BIN_BASE) -> list[BinnedPoint]:
        return self.statistics.binned_density(bin_base)

    def __str__(self) -> str:
        stats = self.snapshot_stats()
        return (
            f"Steps: {stats.elapsed_steps}, trees: {stats.live_trees} "
            f"({stats.density_percent:.2f}%), fires: {stats.total_fires}"
        )
