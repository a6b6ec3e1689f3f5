#!/usr/bin/env python3
"""Headless run of the forest-fire simulation.

Runs the model for a fixed number of ticks, prints the counters and the
log-binned fire size distribution, and saves a log-log plot.
"""

import logging
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import ForestFireModel, SimulationParameters, fit_power_law
from forest_fire.plotting import DistributionPlotter


def print_distribution(model: ForestFireModel) -> None:
    """
    Print the binned fire size distribution to console.

    Args:
        model: The ForestFireModel instance to summarize
    """
    points = model.snapshot_binned_distribution()
    if not points:
        print("Not enough fires recorded for a distribution.")
        return

    print(f"{'size':>12} {'density':>14}")
    for point in points:
        print(f"{point.size:12.2f} {point.density:14.6g}")

    if len(points) >= 2:
        fit = fit_power_law(points)
        print(f"Power-law exponent: {fit.exponent:.3f} ({fit.n} bins)")


def main():
    """Run the forest-fire simulation."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Simulation parameters
    GRID_SIZE = 128
    TICKS = 20000
    PLOT_PATH = "fire_distribution.png"

    params = SimulationParameters(
        growth_probability=0.05,
        ignition_probability=0.0005,
        steps_per_tick=2000,
        animate=False,
        seed="forest",
    )

    print("--- CREATING MODEL ---")
    model = ForestFireModel(grid_size=GRID_SIZE, params=params)

    for i in range(TICKS):
        model.tick()
        if (i + 1) % 1000 == 0:
            print(f"--- TICK {i + 1} --- {model}")

    print("--- FIRE SIZE DISTRIBUTION ---")
    print_distribution(model)

    points = model.snapshot_binned_distribution()
    if len(points) >= 2:
        fit = fit_power_law(points)
        stats = model.snapshot_stats()
        metrics = {"fires": stats.total_fires, "timesteps": stats.elapsed_steps, "exponent": fit.exponent}
        plotter = DistributionPlotter()
        fig = plotter.figure(points, model.snapshot_grid(), fit=fit, metrics=metrics)
        plotter.save(fig, PLOT_PATH)
        print(f"Saved plot to {PLOT_PATH}")


if __name__ == "__main__":
    main()
