"""
Draw a hull and its bounding rectangle with Pillow, for visual inspection.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from PIL import Image as PIL_Image
from PIL import ImageDraw

from rotating_calipers.constants import (
    RENDER_BACKGROUND,
    RENDER_CENTER_RADIUS,
    RENDER_HULL_COLOR,
    RENDER_MARGIN,
    RENDER_RECT_COLOR,
    RENDER_SIZE,
)
from rotating_calipers.value_objects import OrientedRect, Point
from rotating_calipers.vertices import PointLike, to_vertex_set

Color = Tuple[int, int, int]


def _fit_transform(
    points: Sequence[Point], size: Tuple[int, int], margin: int
) -> Callable[[Point], Tuple[float, float]]:
    """
    Build a function mapping polygon coordinates to image pixels.

    The points are scaled uniformly to fit inside ``size`` minus ``margin``
    on every side, and the y axis is flipped so that +y points up.
    """
    width, height = size
    min_x = min(p.x for p in points)
    max_x = max(p.x for p in points)
    min_y = min(p.y for p in points)
    max_y = max(p.y for p in points)
    span_x = max_x - min_x
    span_y = max_y - min_y

    usable_w = max(width - 2 * margin, 1)
    usable_h = max(height - 2 * margin, 1)
    scale_candidates = []
    if span_x > 0:
        scale_candidates.append(usable_w / span_x)
    if span_y > 0:
        scale_candidates.append(usable_h / span_y)
    scale = min(scale_candidates) if scale_candidates else 1.0

    def to_pixel(p: Point) -> Tuple[float, float]:
        return (
            margin + (p.x - min_x) * scale,
            height - margin - (p.y - min_y) * scale,
        )

    return to_pixel


def render_rect(
    hull: Sequence[PointLike],
    rect: OrientedRect,
    size: Tuple[int, int] = RENDER_SIZE,
    margin: int = RENDER_MARGIN,
    background: Color = RENDER_BACKGROUND,
    hull_color: Color = RENDER_HULL_COLOR,
    rect_color: Color = RENDER_RECT_COLOR,
    image: Optional[PIL_Image.Image] = None,
) -> PIL_Image.Image:
    """
    Render the hull outline, the rectangle outline and its center.

    Args:
        hull: The hull vertices passed to ``rotating_calipers``.
        rect: The rectangle to draw.
        size: Output image (width, height) in pixels. Ignored when ``image``
            is given.
        margin: Empty border, in pixels, around the drawing.
        background: Fill color of a newly created image.
        hull_color: Outline color for the hull.
        rect_color: Outline color for the rectangle and its center.
        image: Optional RGB image to draw onto instead of a new one.

    Returns:
        PIL.Image.Image: The image that was drawn on.
    """
    vertices = to_vertex_set(hull)
    corners = rect.corners()

    if image is None:
        image = PIL_Image.new("RGB", size, background)
    to_pixel = _fit_transform(list(vertices) + corners, image.size, margin)

    draw = ImageDraw.Draw(image)
    rect_pixels: List[Tuple[float, float]] = [to_pixel(c) for c in corners]
    draw.polygon(rect_pixels, outline=rect_color)
    hull_pixels = [to_pixel(v) for v in vertices]
    draw.polygon(hull_pixels, outline=hull_color)

    cx, cy = to_pixel(rect.center)
    r = RENDER_CENTER_RADIUS
    draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=rect_color)
    return image
