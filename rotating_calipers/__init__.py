from .calipers import min_area_rect, rotating_calipers
from .exceptions import InvalidHullError, RotatingCalipersError
from .render import render_rect
from .value_objects import OrientedRect, Point

__all__ = [
    "rotating_calipers",
    "min_area_rect",
    "render_rect",
    "OrientedRect",
    "Point",
    "RotatingCalipersError",
    "InvalidHullError",
]
