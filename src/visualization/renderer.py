"""Grid rendering functionality for the forest-fire simulation.

This module provides the GridRenderer class which turns a grid snapshot
into pixels, with a flickering fire and fading burn scars.
"""

import random
from typing import Optional

import numpy as np
import pygame

from forest_fire.cell import BURN_DECAY_FRAMES, CellKind
from forest_fire.grid import GridSnapshot
from .colors import (
    AMBER_COLOR,
    BURNING_COLOR,
    BURNING_FLICKER_MIN,
    BURNING_FLICKER_SPAN,
    TREE_COLOR,
    VACANT_COLOR,
)


def snapshot_to_rgb(snapshot: GridSnapshot, flicker_rng: Optional[random.Random] = None) -> np.ndarray:
    """Convert a grid snapshot to an (H, W, 3) uint8 RGB array.

    Decaying cells fade linearly from amber to black as their countdown
    runs out. Burning cells get a random green channel so the fire
    flickers; the flicker uses its own generator so rendering never
    disturbs the simulation PRNG.

    Args:
        snapshot: Grid snapshot to render.
        flicker_rng: Generator for the flicker, a fresh one if omitted.

    Returns:
        RGB image indexed [y, x].
    """
    kind = snapshot.kind
    rgb = np.empty(kind.shape + (3,), dtype=np.uint8)
    rgb[:] = VACANT_COLOR
    rgb[kind == CellKind.Tree] = TREE_COLOR

    decaying = kind == CellKind.Decaying
    if decaying.any():
        frames = snapshot.decay[decaying].astype(np.uint16)
        amber = np.array(AMBER_COLOR, dtype=np.uint16)
        rgb[decaying] = (np.outer(frames, amber) // BURN_DECAY_FRAMES).astype(np.uint8)

    burning = np.argwhere(kind == CellKind.Burning)
    if len(burning):
        rng = flicker_rng or random.Random()
        for y, x in burning:
            g = BURNING_FLICKER_MIN + rng.randrange(BURNING_FLICKER_SPAN)
            rgb[y, x] = (BURNING_COLOR[0], g, BURNING_COLOR[2])

    return rgb


class GridRenderer:
    """Renders the forest grid onto a Pygame surface.

    Attributes:
        cell_size: Size of each cell in pixels.
    """

    def __init__(self, cell_size: int) -> None:
        """Initialize the grid renderer.

        Args:
            cell_size: Size of each cell in pixels.
        """
        self.cell_size = cell_size
        self.flicker_rng = random.Random()

    def draw(self, screen: pygame.Surface, snapshot: GridSnapshot, offset_x: int = 0, offset_y: int = 0) -> None:
        """Draw the grid with its top-left corner at the given offset."""
        rgb = snapshot_to_rgb(snapshot, self.flicker_rng)
        # surfarray expects [x, y]
        surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1))
        if self.cell_size != 1:
            side = snapshot.size * self.cell_size
            surface = pygame.transform.scale(surface, (side, side))
        screen.blit(surface, (offset_x, offset_y))
