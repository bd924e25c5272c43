"""
Constants shared by the rotating-calipers modules.
"""

from enum import IntEnum
from typing import Tuple

# A convex polygon needs at least three vertices.
MIN_HULL_VERTICES = 3


class BoxSide(IntEnum):
    """Sides of a caliper box, in rotational order from its baseline."""

    BOTTOM = 0
    RIGHT = 1
    TOP = 2
    LEFT = 3


# (k0, k1) pairs of adjacent box sides, starting with the left/bottom corner.
BOX_SIDE_PAIRS: Tuple[Tuple[int, int], ...] = (
    (BoxSide.LEFT, BoxSide.BOTTOM),
    (BoxSide.BOTTOM, BoxSide.RIGHT),
    (BoxSide.RIGHT, BoxSide.TOP),
    (BoxSide.TOP, BoxSide.LEFT),
)

# Rendering defaults
RENDER_SIZE = (512, 512)
RENDER_MARGIN = 16
RENDER_BACKGROUND = (255, 255, 255)
RENDER_HULL_COLOR = (0, 0, 255)
RENDER_RECT_COLOR = (255, 0, 0)
RENDER_CENTER_RADIUS = 3
