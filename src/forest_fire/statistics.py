from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping

import numpy as np

from .config import DEFAULT_BIN_BASE

# Below this many recorded fires a binned distribution is not meaningful
MIN_FIRES_FOR_BINNING = 2


@dataclass(frozen=True)
class BinnedPoint:
    """One log-bin of the fire size distribution."""

    size: float
    density: float


@dataclass(frozen=True)
class PowerLawFit:
    """Straight-line fit of ``log10(density)`` against ``log10(size)``."""

    exponent: float
    intercept: float
    n: int


class FireStatistics:
    """Occurrence counts of completed fire sizes.

    Attributes:
        table: Mapping of fire size to number of fires of that size.
        total_fires: Number of recorded fires.
    """

    def __init__(self) -> None:
        self.table: Counter[int] = Counter()
        self.total_fires = 0

    def record(self, size: int) -> None:
        if size == 0:
            return
        self.table[size] += 1
        self.total_fires += 1

    def clear(self) -> None:
        self.table.clear()
        self.total_fires = 0

    def binned_density(self, bin_base: float = DEFAULT_BIN_BASE) -> list[BinnedPoint]:
        return compute_binned_density(self.table, bin_base)

    def __len__(self) -> int:
        return len(self.table)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def log_bin_edges(max_size: int, bin_base: float = DEFAULT_BIN_BASE) -> list[int]:
    """Geometric bin edges starting at 1 and reaching past ``max_size``.

    The running edge is kept unrounded; only the stored edges are rounded,
    so small bins may collapse to zero width.
    """
    if bin_base <= 1.0:
        raise ValueError(f"bin_base must be greater than 1, got {bin_base}")

    edges = [1]
    edge = 1.0
    while edge <= max_size:
        edge *= bin_base
        edges.append(_round_half_up(edge))
    edges.append(_round_half_up(edge * bin_base))
    return edges


def compute_binned_density(
    table: Mapping[int, int],
    bin_base: float = DEFAULT_BIN_BASE,
) -> list[BinnedPoint]:
    """Log-bin a fire size table into a probability-density estimate.

    Each non-empty bin ``[lo, hi)`` yields its count-weighted mean size and
    its count divided by the bin width, so bins of different widths are
    comparable on a log-log plot.

    Returns:
        Points ordered by size; empty with fewer than two recorded fires.
    """
    if sum(table.values()) < MIN_FIRES_FOR_BINNING:
        return []

    sizes = sorted(table)
    edges = log_bin_edges(sizes[-1], bin_base)

    points: list[BinnedPoint] = []
    index = 0
    for lo, hi in zip(edges, edges[1:]):
        if lo >= hi:
            continue

        while index < len(sizes) and sizes[index] < lo:
            index += 1

        count = 0
        weighted = 0
        k = index
        while k < len(sizes) and sizes[k] < hi:
            occurrences = table[sizes[k]]
            count += occurrences
            weighted += sizes[k] * occurrences
            k += 1

        if count > 0:
            points.append(BinnedPoint(size=weighted / count, density=count / (hi - lo)))

    return points


def fit_power_law(points: Iterable[BinnedPoint]) -> PowerLawFit:
    """Least-squares power-law fit to binned points.

    The slope of the fitted line in log-log space is the exponent estimate;
    it is negative for a decaying distribution.
    """
    pts = list(points)
    if len(pts) < 2:
        raise ValueError(f"Need at least 2 binned points to fit a power law, got {len(pts)}")

    log_x = np.log10([p.size for p in pts])
    log_y = np.log10([p.density for p in pts])
    slope, intercept = np.polyfit(log_x, log_y, 1)
    return PowerLawFit(exponent=float(slope), intercept=float(intercept), n=len(pts))
