"""UI components for the forest-fire visualization.

This module contains the info panel showing the simulation counters and
the slider controlling how many timesteps run per tick.
"""

from typing import Optional

import pygame

from forest_fire.model import SimulationStats
from forest_fire.config import SimulationParameters
from .colors import WHITE


class InfoPanel:
    """Displays simulation counters beneath the grid.

    Attributes:
        font: Main font for the counters.
        small_font: Smaller font for parameters and shortcuts.
    """

    def __init__(self) -> None:
        """Initialize the info panel with fonts."""
        self.font = pygame.font.Font(None, 26)
        self.small_font = pygame.font.Font(None, 20)

    def draw(
        self,
        screen: pygame.Surface,
        stats: SimulationStats,
        params: SimulationParameters,
        paused: bool,
        top: int,
        window_width: int,
    ) -> None:
        """Draw counters, parameters and keyboard shortcuts starting at ``top``."""
        padding = 10
        panel = pygame.Surface((window_width, screen.get_height() - top), pygame.SRCALPHA)
        panel.fill((80, 0, 0, 160))
        screen.blit(panel, (0, top))

        lines = [
            f"Timesteps: {stats.elapsed_steps:,}",
            f"Trees: {stats.live_trees:,} ({stats.density_percent:.2f}%)",
            f"Fires: {stats.total_fires:,}",
        ]
        y = top + padding
        for line in lines:
            screen.blit(self.font.render(line, True, WHITE), (padding, y))
            y += 24

        status = "PAUSED" if paused else "RUNNING"
        status_text = self.font.render(status, True, WHITE)
        screen.blit(status_text, (window_width - status_text.get_width() - padding, top + padding))

        details = (
            f"p={params.growth_probability:.4f}  f={params.ignition_probability:.2e}  "
            f"steps/tick={params.steps_per_tick}  animate={'on' if params.animate else 'off'}"
        )
        screen.blit(self.small_font.render(details, True, WHITE), (padding, y + 4))

        shortcuts = "SPACE = pause   R = reset   A = animate fires   P = save plot   ESC = quit"
        screen.blit(self.small_font.render(shortcuts, True, WHITE), (padding, y + 24))


class SpeedSlider:
    """Interactive slider for the number of timesteps per tick.

    Attributes:
        x: X coordinate of the slider's left edge.
        y: Y coordinate of the slider's top edge.
        width: Width of the slider bar in pixels.
        height: Height of the slider bar in pixels.
        min_val: Minimum steps per tick.
        max_val: Maximum steps per tick.
    """

    def __init__(self, x: int, y: int, width: int, height: int, min_val: int, max_val: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.min_val = min_val
        self.max_val = max_val

    def draw(self, screen: pygame.Surface, current_val: int) -> None:
        bar_rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(screen, (20, 20, 20), bar_rect, border_radius=6)
        pygame.draw.rect(screen, (70, 70, 70), bar_rect, 2, border_radius=6)

        ratio = (current_val - self.min_val) / (self.max_val - self.min_val)
        handle_x = self.x + int(ratio * self.width)
        pygame.draw.circle(screen, (255, 120, 0), (handle_x, self.y + self.height // 2), self.height // 2 + 3)

    def handle_click(self, mouse_x: int, mouse_y: int) -> Optional[int]:
        """Slider value under the mouse, or None if the mouse is off the slider."""
        grab_margin = 10
        if not (self.x - grab_margin <= mouse_x <= self.x + self.width + grab_margin):
            return None
        if not (self.y - grab_margin <= mouse_y <= self.y + self.height + grab_margin):
            return None

        ratio = (mouse_x - self.x) / self.width
        new_val = self.min_val + ratio * (self.max_val - self.min_val)
        return max(self.min_val, min(self.max_val, int(new_val)))
