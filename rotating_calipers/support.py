"""
Advancing the support vertices of a caliper box by one rotation step.
"""

from typing import List, Sequence

from rotating_calipers.angles import AngleInfo
from rotating_calipers.box import CaliperBox
from rotating_calipers.value_objects import Point
from rotating_calipers.vertices import next_index


def update_support(
    angles: Sequence[AngleInfo],
    vertices: Sequence[Point],
    visited: List[bool],
    box: CaliperBox,
) -> bool:
    """
    Rotate the box by the smallest candidate angle.

    Every side that becomes flush with a hull edge under that rotation
    (several when hull edges are parallel) advances its support to the next
    hull vertex. The side with the smallest angle becomes the new bottom and
    the box basis and area are recomputed.

    Args:
        angles: Candidates sorted by ``sort_angles``; must not be empty.
        vertices: The hull vertex set.
        visited: Per-vertex flags for vertices that have been a bottom
            support. Updated in place.
        box: The caliper box. Updated in place.

    Returns:
        bool: False if the new bottom support was already visited, meaning
            the sweep has gone all the way around the hull.
    """
    n = len(vertices)
    min_angle = angles[0]

    parallel = [
        angle
        for angle in angles
        if angle.sin_theta_sqr == min_angle.sin_theta_sqr
    ]
    for angle in parallel:
        box.index[angle.box_side] = next_index(box.index[angle.box_side], n)

    bottom = box.index[min_angle.box_side]
    if visited[bottom]:
        return False

    for angle in parallel:
        visited[box.index[angle.box_side]] = True

    # Cycle the supports so the side with the smallest angle is the bottom.
    box.index = [box.index[(min_angle.box_side + k) % 4] for k in range(4)]
    box.rebase(vertices)
    return True
