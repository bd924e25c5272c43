"""
Minimum-area oriented bounding rectangle of a convex polygon.

The minimum-area rectangle enclosing a convex polygon has at least one side
collinear with a polygon edge. Rotating calipers visit those candidate
rectangles in order, moving each support vertex forward at most once around
the hull, which makes the whole sweep O(n).

The algorithm follows the one described at
https://www.geometrictools.com/GTE/Mathematics/MinimumAreaBox2.h
"""

import logging
from math import atan2, pi
from typing import Sequence, Tuple

from rotating_calipers.angles import compute_angles, sort_angles
from rotating_calipers.box import CaliperBox, smallest_box
from rotating_calipers.constants import BoxSide
from rotating_calipers.support import update_support
from rotating_calipers.value_objects import OrientedRect, Point
from rotating_calipers.vertices import PointLike, prev_index, to_vertex_set

logger = logging.getLogger(__name__)


def rotating_calipers(hull: Sequence[PointLike]) -> OrientedRect:
    """
    Compute the minimum-area bounding rectangle of a convex polygon.

    Args:
        hull: Vertices of a strictly convex polygon, counter-clockwise, with
            no three consecutive collinear points. Each vertex may be a
            Point, an (x, y) pair or a mapping with 'x' and 'y' keys.
            Convexity and orientation are not checked.

    Returns:
        OrientedRect: The rectangle's width, height, center and angle (in
            radians) of its width axis relative to the x-axis.

    Raises:
        InvalidHullError: If the hull has fewer than three vertices or a
            vertex is not a pair of finite numbers.
    """
    vertices = to_vertex_set(hull)
    n = len(vertices)
    logger.debug("Computing minimum-area rectangle for %d vertices", n)

    visited = [False] * n
    min_box = smallest_box(n - 1, 0, vertices)
    visited[min_box.index[BoxSide.BOTTOM]] = True

    box = min_box.copy()
    for step in range(n):
        angles = compute_angles(vertices, box)
        if not angles:
            logger.debug("Caliper box collapsed at step %d", step)
            break
        if not update_support(sort_angles(angles), vertices, visited, box):
            logger.debug("Sweep closed after %d steps", step)
            break
        # Later boxes of equal area replace earlier ones.
        if box.area <= min_box.area:
            logger.debug(
                "New minimum area %s with bottom support %d",
                box.area,
                box.index[BoxSide.BOTTOM],
            )
            min_box = box.copy()

    return _rect_from_box(min_box, vertices)


def _rect_from_box(
    box: CaliperBox, vertices: Sequence[Point]
) -> OrientedRect:
    """Convert a caliper box into the rectangle it describes."""
    normal_u0 = box.u0.normalized()
    normal_u1 = box.u1.normalized()

    # The bottom side passes through the vertex before the bottom support;
    # the left support fixes where the rectangle starts along it.
    origin = vertices[prev_index(box.index[BoxSide.BOTTOM], len(vertices))]
    left_support = vertices[box.index[BoxSide.LEFT]]
    corner = origin + normal_u0.scale((left_support - origin).dot(normal_u0))

    diff_width = (
        vertices[box.index[BoxSide.RIGHT]] - vertices[box.index[BoxSide.LEFT]]
    )
    diff_height = (
        vertices[box.index[BoxSide.TOP]] - vertices[box.index[BoxSide.BOTTOM]]
    )
    width = abs(normal_u0.dot(diff_width))
    height = abs(normal_u1.dot(diff_height))

    center = (
        corner + normal_u0.scale(width * 0.5) + normal_u1.scale(height * 0.5)
    )
    angle = atan2(box.u0.y, box.u0.x)
    # atan2 gives -pi when the y component is -0.0; keep angle in (-pi, pi].
    if angle == -pi:
        angle = pi
    return OrientedRect(width=width, height=height, center=center, angle=angle)


def min_area_rect(
    hull: Sequence[PointLike],
) -> Tuple[Tuple[float, float], Tuple[float, float], float]:
    """
    Compute the minimum-area bounding rectangle of a convex polygon.

    Returns a tuple of:
      - center (cx, cy)
      - (width, height)
      - angle (in degrees) of the width axis relative to the x-axis
    """
    return rotating_calipers(hull).as_tuple()
