"""
Caliper box state and the builder for the initial box.

A caliper box is the candidate rectangle of one rotating-calipers step. It
is described by four support indices into the vertex set, one per side
(see ``BoxSide``), and by the direction ``u0`` of the hull edge its bottom
side lies on. ``u1`` is ``u0`` rotated by +90 degrees, so both axes share the
same (unnormalized) length.
"""

from dataclasses import dataclass
from typing import List, Sequence

from rotating_calipers.constants import BoxSide
from rotating_calipers.value_objects import Point
from rotating_calipers.vertices import prev_index


@dataclass
class CaliperBox:
    """
    Mutable caliper box.

    Attributes:
        index: Support vertex indices for the bottom, right, top and left
            sides, in that order
        u0: Direction of the bottom side (the baseline hull edge)
        u1: ``u0`` rotated by +90 degrees
        sqr_len_u0: Squared length of ``u0``
        area: Area of the rectangle implied by ``index`` and the basis
    """

    index: List[int]
    u0: Point
    u1: Point
    sqr_len_u0: float
    area: float

    def copy(self) -> "CaliperBox":
        """Return a snapshot unaffected by later changes to this box."""
        return CaliperBox(
            index=list(self.index),
            u0=self.u0,
            u1=self.u1,
            sqr_len_u0=self.sqr_len_u0,
            area=self.area,
        )

    def rebase(self, vertices: Sequence[Point]) -> None:
        """
        Recompute the basis and area from the current support indices.

        The bottom side is taken to lie on the hull edge that ends at
        ``index[BOTTOM]``.
        """
        j1 = self.index[BoxSide.BOTTOM]
        j0 = prev_index(j1, len(vertices))
        self.u0 = vertices[j1] - vertices[j0]
        self.u1 = self.u0.perp()
        self.sqr_len_u0 = self.u0.length_sq()

        # Width along u0 between the left/right supports, height along u1
        # between the bottom/top supports, both scaled by |u0|.
        diff_width = vertices[self.index[BoxSide.RIGHT]] - vertices[
            self.index[BoxSide.LEFT]
        ]
        diff_height = vertices[self.index[BoxSide.TOP]] - vertices[
            self.index[BoxSide.BOTTOM]
        ]
        self.area = (
            self.u0.dot(diff_width) * self.u1.dot(diff_height)
        ) / self.sqr_len_u0


def smallest_box(i0: int, i1: int, vertices: Sequence[Point]) -> CaliperBox:
    """
    Build the smallest box whose bottom side lies on the edge ``i0 -> i1``.

    Every vertex is projected onto the (u0, u1) basis with the origin at
    ``vertices[i1]``. Because the hull is convex and CCW, all projections
    have y >= 0, and the bottom support is ``i1`` itself.

    Ties are broken so the supports sit at the rectangle corners reached
    first when walking the hull counter-clockwise:

      - right support: maximum x, then maximum y
      - top support: maximum y, then minimum x
      - left support: minimum x, then minimum y

    Args:
        i0: Index of the first endpoint of the baseline edge.
        i1: Index of the second endpoint of the baseline edge.
        vertices: The hull vertex set.

    Returns:
        CaliperBox: The box with ``index = [i1, right, top, left]``.
    """
    u0 = vertices[i1] - vertices[i0]
    u1 = u0.perp()
    sqr_len_u0 = u0.length_sq()
    origin = vertices[i1]

    index = [i1, i1, i1, i1]
    # Projections of the right, top and left supports; the origin projects
    # to (0, 0).
    right_x, right_y = 0.0, 0.0
    top_x, top_y = 0.0, 0.0
    left_x, left_y = 0.0, 0.0

    for i, vertex in enumerate(vertices):
        diff = vertex - origin
        x = u0.dot(diff)
        y = u1.dot(diff)

        if x > right_x or (x == right_x and y > right_y):
            index[BoxSide.RIGHT] = i
            right_x, right_y = x, y

        if y > top_y or (y == top_y and x < top_x):
            index[BoxSide.TOP] = i
            top_x, top_y = x, y

        if x < left_x or (x == left_x and y < left_y):
            index[BoxSide.LEFT] = i
            left_x, left_y = x, y

    area = ((right_x - left_x) * top_y) / sqr_len_u0
    return CaliperBox(
        index=index, u0=u0, u1=u1, sqr_len_u0=sqr_len_u0, area=area
    )
