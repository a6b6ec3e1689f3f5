"""Simulation parameters and default configuration values."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

# ============================================================================
# GRID
# ============================================================================

DEFAULT_GRID_SIZE: int = 256                        # Grid side length in cells

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_GROWTH_PROBABILITY: float = 0.01            # p
DEFAULT_IGNITION_PROBABILITY: float = 0.0001        # f, at most p / 10
DEFAULT_STEPS_PER_TICK: int = 5000                  # Elementary timesteps per tick
DEFAULT_ANIMATE: bool = True
DEFAULT_SEED: str = "forest"

# ============================================================================
# FIRE AND STATISTICS
# ============================================================================

FIRE_EXPANSIONS_PER_TICK: int = 1                   # Wavefront expansions per animated tick
DEFAULT_BIN_BASE: float = 1.5                       # Log-binning growth factor

# Lightning must be much rarer than growth for criticality to emerge
IGNITION_TO_GROWTH_RATIO: float = 10.0


class InvalidParameterError(ValueError):
    """Raised when simulation parameters violate their invariants."""


@dataclass(frozen=True)
class SimulationParameters:
    """Parameters of one simulation run.

    Attributes:
        growth_probability: Probability ``p`` that a sampled empty cell grows a tree.
        ignition_probability: Probability ``f`` that a sampled tree is struck by lightning.
        steps_per_tick: Elementary timesteps attempted per tick outside of a fire.
        animate: Spread fires one wavefront expansion per tick instead of instantly.
        seed: Seed string for the deterministic PRNG.
    """

    growth_probability: float = DEFAULT_GROWTH_PROBABILITY
    ignition_probability: float = DEFAULT_IGNITION_PROBABILITY
    steps_per_tick: int = DEFAULT_STEPS_PER_TICK
    animate: bool = DEFAULT_ANIMATE
    seed: str = DEFAULT_SEED

    @property
    def max_ignition_probability(self) -> float:
        return self.growth_probability / IGNITION_TO_GROWTH_RATIO

    def validate(self) -> "SimulationParameters":
        """Check the parameter invariants.

        Returns:
            The parameters themselves, so calls can be chained.

        Raises:
            InvalidParameterError: If any parameter is out of range.
        """
        p = self.growth_probability
        f = self.ignition_probability

        if not (math.isfinite(p) and 0.0 < p <= 1.0):
            raise InvalidParameterError(f"growth_probability must be in (0, 1], got {p}")
        if not math.isfinite(f) or f <= 0.0:
            raise InvalidParameterError(f"ignition_probability must be positive, got {f}")
        if f > self.max_ignition_probability:
            raise InvalidParameterError(
                f"ignition_probability must not exceed growth_probability / "
                f"{IGNITION_TO_GROWTH_RATIO:g} ({self.max_ignition_probability:g}), got {f}"
            )
        steps = self.steps_per_tick
        if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
            raise InvalidParameterError(f"steps_per_tick must be an integer, got {steps!r}")
        if steps < 1:
            raise InvalidParameterError(f"steps_per_tick must be at least 1, got {steps}")
        if not isinstance(self.seed, str):
            raise InvalidParameterError(f"seed must be a string, got {self.seed!r}")
        return self
