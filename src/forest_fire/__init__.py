"""
Forest-fire self-organized criticality using cellular automata.

Trees grow at random on a square grid and lightning occasionally ignites
one of them; the fire then burns through every connected tree. The sizes
of the fires follow a power law, which the statistics module log-bins.
"""

from .cell import BURN_DECAY_FRAMES, CellKind, CellState
from .config import InvalidParameterError, SimulationParameters
from .grid import ForestGrid, GridSnapshot
from .model import ForestFireModel, SimulationStats
from .prng import SeededRandom
from .statistics import BinnedPoint, FireStatistics, compute_binned_density, fit_power_law

__version__ = "0.1.0"

__all__ = [
    "BURN_DECAY_FRAMES",
    "CellKind",
    "CellState",
    "InvalidParameterError",
    "SimulationParameters",
    "ForestGrid",
    "GridSnapshot",
    "ForestFireModel",
    "SimulationStats",
    "SeededRandom",
    "BinnedPoint",
    "FireStatistics",
    "compute_binned_density",
    "fit_power_law",
]
