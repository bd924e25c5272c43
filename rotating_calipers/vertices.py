"""
Conversion of caller-supplied hull vertices into an immutable vertex set.

The vertex set is a tuple of Points indexed cyclically: index ``n`` wraps to
0 and index -1 wraps to ``n - 1``. Vertices are expected in counter-clockwise
order and must form a strictly convex polygon; only the vertex count and the
coordinates themselves are validated here.
"""

from typing import Any, Dict, Sequence, Tuple, Union

from rotating_calipers.constants import MIN_HULL_VERTICES
from rotating_calipers.exceptions import InvalidHullError
from rotating_calipers.value_objects import Point

PointLike = Union[Point, Sequence[float], Dict[str, float]]


def _to_point(vertex: Any, position: int) -> Point:
    try:
        if isinstance(vertex, Point):
            return vertex
        if isinstance(vertex, dict):
            return Point.from_dict(vertex)
        x, y = vertex
        return Point(x, y)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidHullError(
            f"hull vertex {position} is not a valid point: {vertex!r}"
        ) from e


def to_vertex_set(hull: Sequence[PointLike]) -> Tuple[Point, ...]:
    """
    Validate a convex hull and return it as a tuple of Points.

    Args:
        hull: Vertices of a strictly convex polygon in counter-clockwise
            order. Each vertex may be a Point, an (x, y) pair or a mapping
            with 'x' and 'y' keys.

    Returns:
        Tuple[Point, ...]: The vertices, in input order.

    Raises:
        InvalidHullError: If there are fewer than three vertices or a vertex
            is not a pair of finite numbers.
    """
    if hull is None:
        raise InvalidHullError("hull cannot be None")
    vertices = tuple(
        _to_point(vertex, position) for position, vertex in enumerate(hull)
    )
    if len(vertices) < MIN_HULL_VERTICES:
        raise InvalidHullError(
            f"hull must have at least {MIN_HULL_VERTICES} vertices, "
            f"got {len(vertices)}"
        )
    return vertices


def next_index(i: int, n: int) -> int:
    """Index of the vertex after ``i`` in a cyclic sequence of ``n``."""
    i += 1
    return 0 if i == n else i


def prev_index(i: int, n: int) -> int:
    """Index of the vertex before ``i`` in a cyclic sequence of ``n``."""
    return n - 1 if i == 0 else i - 1
