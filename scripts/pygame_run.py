#!/usr/bin/env python3
"""Pygame visualization launcher for the forest-fire simulation.

This script drives the model once per display frame and draws the grid and
its counters. Pressing P saves a log-log plot of the fire size distribution
to the working directory.

Usage:
    python scripts/pygame_run.py
"""

import logging
import sys
from pathlib import Path

import matplotlib
import pygame

matplotlib.use("Agg")
import matplotlib.pyplot as plt

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import ForestFireModel, InvalidParameterError, SimulationParameters
from forest_fire.config import DEFAULT_GRID_SIZE
from forest_fire.plotting import DistributionPlotter
from forest_fire.statistics import fit_power_law

from visualization import (
    GridRenderer,
    InfoPanel,
    SpeedSlider,
    BLACK,
    DEFAULT_CELL_SIZE,
    DEFAULT_FPS,
    PANEL_HEIGHT,
    MIN_STEPS_PER_TICK,
    MAX_STEPS_PER_TICK,
)

logger = logging.getLogger(__name__)

PLOT_PATH = "fire_distribution.png"


class SimulationRunner:
    """Main simulation runner with Pygame visualization.

    Attributes:
        model: The forest-fire model.
        screen: Pygame display surface.
        clock: Pygame clock for frame rate control.
        renderer: Grid renderer for drawing cells.
        info_panel: UI panel for displaying counters.
        slider: Steps-per-tick slider.
        paused: Whether the simulation is paused.
        dragging_slider: Whether the user is dragging the slider.
    """

    def __init__(self, grid_size: int, cell_size: int, params: SimulationParameters) -> None:
        self.grid_side = grid_size * cell_size
        window_width = max(self.grid_side, 520)
        window_height = self.grid_side + PANEL_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption("Forest Fire SOC")
        self.clock = pygame.time.Clock()
        self.window_width = window_width

        self.model = ForestFireModel(grid_size=grid_size, params=params)

        self.renderer = GridRenderer(cell_size)
        self.info_panel = InfoPanel()
        self.slider = SpeedSlider(
            x=10,
            y=window_height - 28,
            width=window_width - 20,
            height=14,
            min_val=MIN_STEPS_PER_TICK,
            max_val=MAX_STEPS_PER_TICK,
        )
        self.slider_value = params.steps_per_tick

        self.paused = True
        self.dragging_slider = False

    def _reconfigure(self, **changes) -> None:
        try:
            self.model.configure(**changes)
        except InvalidParameterError as e:
            logger.warning(f"Keeping previous configuration: {e}")
        self.slider_value = self.model.params.steps_per_tick

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Returns:
            False if the simulation should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False

        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused

        elif event.key == pygame.K_r:
            self.model.reset()
            self.paused = True

        elif event.key == pygame.K_a:
            self._reconfigure(animate=not self.model.params.animate)

        elif event.key == pygame.K_p:
            self._save_plot()

        return True

    def _save_plot(self) -> None:
        points = self.model.snapshot_binned_distribution()
        if len(points) < 2:
            logger.info("Not enough fires to plot yet")
            return
        fit = fit_power_law(points)
        stats = self.model.snapshot_stats()
        metrics = {"fires": stats.total_fires, "timesteps": stats.elapsed_steps, "exponent": fit.exponent}
        plotter = DistributionPlotter()
        fig = plotter.figure(points, self.model.snapshot_grid(), fit=fit, metrics=metrics)
        plotter.save(fig, PLOT_PATH)
        plt.close(fig)
        logger.info(f"Saved fire size distribution to {PLOT_PATH}")

    def _handle_slider_events(self, event: pygame.event.Event) -> None:
        """Track the slider while dragging; apply the value on release."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            new_val = self.slider.handle_click(*event.pos)
            if new_val is not None:
                self.dragging_slider = True
                self.slider_value = new_val

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.dragging_slider:
                self.dragging_slider = False
                self._reconfigure(steps_per_tick=self.slider_value)

        elif event.type == pygame.MOUSEMOTION and self.dragging_slider:
            new_val = self.slider.handle_click(*event.pos)
            if new_val is not None:
                self.slider_value = new_val

    def _render(self) -> None:
        """Render all visual components to the screen."""
        self.screen.fill(BLACK)
        self.renderer.draw(self.screen, self.model.snapshot_grid())
        self.info_panel.draw(
            self.screen,
            self.model.snapshot_stats(),
            self.model.params,
            self.paused,
            self.grid_side,
            self.window_width,
        )
        self.slider.draw(self.screen, self.slider_value)
        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False

                else:
                    self._handle_slider_events(event)

            if not self.paused:
                self.model.tick()

            self._render()
            self.clock.tick(DEFAULT_FPS)

        pygame.quit()


def main() -> None:
    """Main entry point for the Pygame visualization."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    params = SimulationParameters(
        growth_probability=0.01,
        ignition_probability=0.0001,
        steps_per_tick=5000,
        animate=True,
        seed="forest",
    )
    runner = SimulationRunner(DEFAULT_GRID_SIZE, DEFAULT_CELL_SIZE, params)
    runner.run()
    logger.info(str(runner.model))


if __name__ == "__main__":
    main()
