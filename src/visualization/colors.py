"""Color definitions and constants for the forest-fire visualization.

This module contains all RGB color tuples and default configuration values
used throughout the Pygame visualization.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

VACANT_COLOR: Color = (30, 30, 30)                  # dark gray (bare ground)
TREE_COLOR: Color = (34, 139, 34)                   # forest green
BURNING_COLOR: Color = (255, 150, 0)                # orange, green channel flickers
AMBER_COLOR: Color = (255, 191, 0)                  # burnt cells fade out from amber

BURNING_FLICKER_MIN: int = 150                      # Green channel range of burning cells
BURNING_FLICKER_SPAN: int = 105

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Text
WHITE: Color = (255, 255, 255)                      # Background, text

# ============================================================================
# DEFAULT DISPLAY PARAMETERS
# ============================================================================

DEFAULT_CELL_SIZE: int = 3                          # Cell size in pixels
DEFAULT_FPS: int = 60                               # Display refresh rate
PANEL_HEIGHT: int = 160                             # Space below the grid for UI

# ============================================================================
# STEPS-PER-TICK SLIDER LIMITS
# ============================================================================

MIN_STEPS_PER_TICK: int = 1
MAX_STEPS_PER_TICK: int = 20000
