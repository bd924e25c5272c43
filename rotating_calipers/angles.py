"""
Rotation angles between the sides of a caliper box and the hull.

For every side of the box, the calipers need the smallest rotation that
brings the side flush with the hull edge leaving its support vertex. The
squared sine of that angle is enough to rank the sides, so no inverse
trigonometry is needed.
"""

from functools import cmp_to_key
from typing import List, NamedTuple, Sequence

from rotating_calipers.box import CaliperBox
from rotating_calipers.constants import BOX_SIDE_PAIRS
from rotating_calipers.value_objects import Point
from rotating_calipers.vertices import next_index


class AngleInfo(NamedTuple):
    """Rotation needed to make one box side flush with a hull edge."""

    sin_theta_sqr: float
    box_side: int


def compute_angles(
    vertices: Sequence[Point], box: CaliperBox
) -> List[AngleInfo]:
    """
    Compute the rotation candidates for every non-degenerate box side.

    A side is skipped when its support and the support of the following side
    are the same vertex, since rotating about that corner cannot bring the
    side onto a new hull edge.

    Args:
        vertices: The hull vertex set.
        box: The current caliper box. It is not modified.

    Returns:
        List[AngleInfo]: One candidate per non-degenerate side, in side
            order starting with the left side. An empty list means the box
            collapsed to a single vertex and the sweep must stop.
    """
    angles: List[AngleInfo] = []
    n = len(vertices)
    axes = (box.u0, box.u1)
    for k0, k1 in BOX_SIDE_PAIRS:
        if box.index[k0] == box.index[k1]:
            continue
        # Top and left sides run against u0/u1.
        d = axes[k0 & 1]
        if k0 & 2:
            d = d.scale(-1.0)
        j0 = box.index[k0]
        e = vertices[next_index(j0, n)] - vertices[j0]
        dp = e.perp().dot(d)
        sin_theta_sqr = (dp * dp) / (e.length_sq() * d.length_sq())
        angles.append(AngleInfo(sin_theta_sqr, int(k0)))
    return angles


def compare_angles(first: AngleInfo, second: AngleInfo, count: int) -> int:
    """
    Order two rotation candidates, smallest rotation first.

    When fewer than four sides produced candidates, some supports coincide.
    If two candidates then need exactly the same rotation, the side with
    the larger index comes first so that the more counter-clockwise support
    is the one advanced onto the new bottom edge. With four candidates
    equal rotations compare equal.

    Args:
        first: A candidate.
        second: Another candidate.
        count: Number of candidates being sorted.

    Returns:
        int: Negative if ``first`` sorts before ``second``, positive if
            after, zero if they compare equal.
    """
    if count < 4 and first.sin_theta_sqr == second.sin_theta_sqr:
        return second.box_side - first.box_side
    if first.sin_theta_sqr < second.sin_theta_sqr:
        return -1
    if first.sin_theta_sqr > second.sin_theta_sqr:
        return 1
    return 0


def sort_angles(angles: Sequence[AngleInfo]) -> List[AngleInfo]:
    """Return the candidates ordered by ``compare_angles``."""
    count = len(angles)

    def _compare(first: AngleInfo, second: AngleInfo) -> int:
        return compare_angles(first, second, count)

    return sorted(angles, key=cmp_to_key(_compare))
