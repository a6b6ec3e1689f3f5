"""Unit tests for fire statistics and log-binning."""

import numpy as np
import pytest
from forest_fire.statistics import (
    BinnedPoint,
    FireStatistics,
    compute_binned_density,
    fit_power_law,
    log_bin_edges,
)


class TestFireStatistics:
    """Test cases for FireStatistics."""

    def test_record(self):
        stats = FireStatistics()
        stats.record(3)
        stats.record(3)
        stats.record(10)
        assert stats.table == {3: 2, 10: 1}
        assert stats.total_fires == 3
        assert len(stats) == 2

    def test_record_zero_is_ignored(self):
        stats = FireStatistics()
        stats.record(5)
        stats.record(0)
        assert stats.table == {5: 1}
        assert stats.total_fires == 1

    def test_clear(self):
        stats = FireStatistics()
        stats.record(1)
        stats.clear()
        assert stats.table == {}
        assert stats.total_fires == 0


class TestLogBinning:
    """Test cases for compute_binned_density."""

    def test_edges_worked_example(self):
        assert log_bin_edges(4, 1.5) == [1, 2, 2, 3, 5, 8]

    def test_edges_round_half_up(self):
        # 2.5 rounds up to 3, not to the even 2
        assert log_bin_edges(1, 2.5) == [1, 3, 6]

    def test_worked_example(self):
        points = compute_binned_density({1: 10, 2: 5, 4: 2}, 1.5)
        assert points == [
            BinnedPoint(size=1.0, density=10.0),
            BinnedPoint(size=2.0, density=5.0),
            BinnedPoint(size=4.0, density=1.0),
        ]

    def test_weighted_mean_within_bin(self):
        # sizes 3 and 4 share the bin [3, 5)
        points = compute_binned_density({3: 1, 4: 3}, 1.5)
        assert points == [BinnedPoint(size=(3 + 12) / 4, density=2.0)]

    def test_fewer_than_two_fires(self):
        assert compute_binned_density({}) == []
        assert compute_binned_density({7: 1}) == []
        assert compute_binned_density({7: 2}) == [BinnedPoint(size=7.0, density=2 / 3)]

    def test_invalid_base(self):
        with pytest.raises(ValueError):
            log_bin_edges(10, 1.0)

    def test_density_property(self):
        rng = np.random.default_rng(11)
        sizes = np.minimum(rng.zipf(1.8, size=2000), 50000)
        table = {}
        for size in sizes.tolist():
            table[size] = table.get(size, 0) + 1

        points = compute_binned_density(table, 1.5)
        xs = [p.size for p in points]
        assert xs == sorted(xs)
        assert all(p.density > 0 for p in points)

        edges = log_bin_edges(max(table), 1.5)
        widths = {}
        for lo, hi in zip(edges, edges[1:]):
            if hi > lo:
                widths[(lo, hi)] = hi - lo
        total = 0.0
        for point in points:
            (lo, hi), width = next(((b, w) for b, w in widths.items() if b[0] <= point.size < b[1]))
            total += point.density * width
        assert total == pytest.approx(sum(table.values()))

    def test_statistics_binned_density(self):
        stats = FireStatistics()
        for size in (1, 1, 2, 4):
            stats.record(size)
        assert stats.binned_density() == compute_binned_density({1: 2, 2: 1, 4: 1})


class TestPowerLawFit:

    def test_exact_power_law(self):
        points = [BinnedPoint(size=s, density=100.0 * s**-1.2) for s in (1, 10, 100, 1000)]
        fit = fit_power_law(points)
        assert fit.exponent == pytest.approx(-1.2)
        assert fit.intercept == pytest.approx(2.0)
        assert fit.n == 4

    def test_needs_two_points(self):
        with pytest.raises(ValueError):
            fit_power_law([BinnedPoint(size=1.0, density=1.0)])
