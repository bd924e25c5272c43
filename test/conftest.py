"""Shared test configuration and polygon fixtures."""

import math
import random
from typing import Callable, List, Tuple

import pytest

Polygon = List[Tuple[float, float]]


def pytest_configure(config):
    """Add custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")


@pytest.fixture
def square() -> Polygon:
    return [(0, 0), (2, 0), (2, 2), (0, 2)]


@pytest.fixture
def right_triangle() -> Polygon:
    return [(0, 0), (4, 0), (0, 3)]


@pytest.fixture
def diamond() -> Polygon:
    return [(1, 0), (2, 1), (1, 2), (0, 1)]


def _ellipse_polygon(seed: int, n: int) -> Polygon:
    """
    Points on a randomly placed ellipse, counter-clockwise.

    One point is drawn from each of ``n`` equal angular sectors, so the
    polygon is strictly convex without any hull computation.
    """
    rng = random.Random(seed)
    a = rng.uniform(2.0, 10.0)
    b = rng.uniform(0.5, 5.0)
    phi = rng.uniform(-math.pi, math.pi)
    cx = rng.uniform(-20.0, 20.0)
    cy = rng.uniform(-20.0, 20.0)
    cos_p, sin_p = math.cos(phi), math.sin(phi)

    points = []
    for k in range(n):
        t = (k + rng.uniform(0.1, 0.9)) * 2.0 * math.pi / n
        ex, ey = a * math.cos(t), b * math.sin(t)
        points.append(
            (cx + cos_p * ex - sin_p * ey, cy + sin_p * ex + cos_p * ey)
        )
    return points


@pytest.fixture
def ellipse_polygon() -> Callable[[int, int], Polygon]:
    """Factory for random strictly convex CCW polygons."""
    return _ellipse_polygon
