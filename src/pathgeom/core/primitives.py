"""Polygon synthesis for parametric primitives.

Primitive parameters, by kind:

- ellipse, rect: center x, center y, width, height
- triangle: x1, y1, x2, y2, x3, y3
- quad: x1, y1, x2, y2, x3, y3, x4, y4
- arc: center x, center y, width, height, start angle, angular extent

Curved primitives use a fixed point count taken from ``CurveConfig``
regardless of their size. Line, point and 3D primitives have no polygonal
counterpart and synthesize to an empty polygon.
"""

import math

import structlog
from shapely.geometry import Polygon

from pathgeom.config import CurveConfig
from pathgeom.domain import PrimitiveKind, PrimitiveShape, Vertex
from pathgeom.exceptions import MalformedShapeError, ShapeError, UnsupportedShapeError

logger = structlog.get_logger(__name__)

_PARAM_COUNTS = {
    PrimitiveKind.ELLIPSE: 4,
    PrimitiveKind.RECT: 4,
    PrimitiveKind.TRIANGLE: 6,
    PrimitiveKind.QUAD: 8,
    PrimitiveKind.ARC: 6,
}


def ellipse_points(
    cx: float, cy: float, width: float, height: float, num_points: int
) -> list[Vertex]:
    """Sample a closed ellipse ring centered on (cx, cy).

    Points start at angle 0 and advance counter-clockwise by 2*pi/num_points.
    """
    rx = width / 2.0
    ry = height / 2.0
    step = 2.0 * math.pi / num_points
    points = [
        (cx + rx * math.cos(i * step), cy + ry * math.sin(i * step))
        for i in range(num_points)
    ]
    points.append(points[0])
    return points


def rectangle_points(
    cx: float, cy: float, width: float, height: float, num_points: int
) -> list[Vertex]:
    """Sample a closed rectangle ring centered on (cx, cy).

    Each side carries ``num_points // 4`` points (at least one). The ring
    starts at the lower-left corner and runs along the bottom edge first.
    """
    per_side = max(num_points // 4, 1)
    min_x = cx - width / 2.0
    min_y = cy - height / 2.0
    max_x = min_x + width
    max_y = min_y + height
    dx = width / per_side
    dy = height / per_side

    points: list[Vertex] = []
    points.extend((min_x + i * dx, min_y) for i in range(per_side))
    points.extend((max_x, min_y + i * dy) for i in range(per_side))
    points.extend((max_x - i * dx, max_y) for i in range(per_side))
    points.extend((min_x, max_y - i * dy) for i in range(per_side))
    points.append(points[0])
    return points


def arc_points(
    cx: float,
    cy: float,
    width: float,
    height: float,
    start_angle: float,
    extent: float,
    num_points: int,
) -> list[Vertex]:
    """Sample a closed circular-sector ring (pie slice).

    The ring runs center, ``num_points`` arc points, center. An extent that
    is not positive or exceeds a full turn is treated as a full turn.
    """
    if extent <= 0.0 or extent > 2.0 * math.pi:
        extent = 2.0 * math.pi
    rx = width / 2.0
    ry = height / 2.0
    step = extent / (num_points - 1) if num_points > 1 else 0.0

    points: list[Vertex] = [(cx, cy)]
    for i in range(num_points):
        angle = start_angle + i * step
        points.append((cx + rx * math.cos(angle), cy + ry * math.sin(angle)))
    points.append((cx, cy))
    return points


def _corner_points(params: list[float], corners: int) -> list[Vertex]:
    points = [(params[2 * i], params[2 * i + 1]) for i in range(corners)]
    points.append(points[0])
    return points


def _build_points(shape: PrimitiveShape, config: CurveConfig) -> list[Vertex]:
    kind = shape.kind

    if kind in (PrimitiveKind.LINE, PrimitiveKind.POINT):
        raise UnsupportedShapeError(kind.value, "non-polygon primitives are not supported")
    if kind in (PrimitiveKind.BOX, PrimitiveKind.SPHERE):
        raise UnsupportedShapeError(kind.value, "3D primitives are not supported")

    expected = _PARAM_COUNTS[kind]
    if len(shape.params) < expected:
        raise MalformedShapeError(
            f"{kind.value} needs {expected} parameters, got {len(shape.params)}"
        )

    p = shape.params
    n = config.primitive_points

    if kind == PrimitiveKind.ELLIPSE:
        return ellipse_points(p[0], p[1], p[2], p[3], n)
    if kind == PrimitiveKind.RECT:
        return rectangle_points(p[0], p[1], p[2], p[3], n)
    if kind == PrimitiveKind.TRIANGLE:
        return _corner_points(p, 3)
    if kind == PrimitiveKind.QUAD:
        return _corner_points(p, 4)
    # ARC: angles are measured from twelve o'clock
    return arc_points(p[0], p[1], p[2], p[3], -math.pi / 2.0 + p[4], p[5], n)


def build_primitive(shape: PrimitiveShape, config: CurveConfig | None = None) -> Polygon:
    """Build the polygon equivalent of a primitive shape.

    Raises:
        UnsupportedShapeError: For line, point and 3D primitives
        MalformedShapeError: If the primitive has too few parameters
    """
    return Polygon(_build_points(shape, config or CurveConfig()))


def synthesize(shape: PrimitiveShape, config: CurveConfig | None = None) -> Polygon:
    """Build the polygon of a primitive, logging unconvertible input.

    Args:
        shape: Primitive shape
        config: Sampling configuration (defaults if None)

    Returns:
        Polygon for ellipse, rect, triangle, quad and arc primitives; an
        empty polygon for unsupported or malformed primitives
    """
    try:
        return build_primitive(shape, config)
    except ShapeError as e:
        logger.warning("Primitive not converted", kind=shape.kind.value, reason=str(e))
        return Polygon()
