"""Planar helpers for contour accumulation.

This module provides the small amount of geometry the converter needs
before handing rings to Shapely:
- Signed area calculation (shoelace formula)
- Ring closure

All functions are pure and stateless.
"""

from pathgeom.domain import Vertex


def signed_area(points: list[Vertex]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    A repeated closing point contributes nothing, so open and closed
    contours give the same result.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> signed_area([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])  # CCW square
        1.0
        >>> signed_area([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]

    return area / 2.0


def is_closed(points: list[Vertex]) -> bool:
    """Check whether the first and last points coincide."""
    return bool(points) and points[0] == points[-1]


def close_ring(points: list[Vertex]) -> list[Vertex]:
    """Return the points with the first point repeated at the end if needed.

    Args:
        points: Contour points

    Returns:
        New list forming a closed ring
    """
    if not points or is_closed(points):
        return list(points)
    return [*points, points[0]]
