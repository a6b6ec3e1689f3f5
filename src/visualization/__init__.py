"""Visualization package for the forest-fire simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer, snapshot_to_rgb
from .ui import InfoPanel, SpeedSlider

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'snapshot_to_rgb',
    'InfoPanel',
    'SpeedSlider',

    # Cell state colors
    'VACANT_COLOR',
    'TREE_COLOR',
    'BURNING_COLOR',
    'AMBER_COLOR',

    # UI colors
    'BLACK',
    'WHITE',

    # Default parameters
    'DEFAULT_CELL_SIZE',
    'DEFAULT_FPS',
    'PANEL_HEIGHT',

    # Steps-per-tick limits
    'MIN_STEPS_PER_TICK',
    'MAX_STEPS_PER_TICK',
]
