"""Bezier curve evaluation and uniform sampling.

Curves are sampled at ``resolution`` evenly spaced parameter values
``t = j / resolution`` for ``j = 0 .. resolution - 1``. The end point
(``t = 1``) is never produced: it is the next on-curve vertex of the
stream.
"""

from pathgeom.domain import Vertex


def quadratic_point(p0: Vertex, p1: Vertex, p2: Vertex, t: float) -> Vertex:
    """Evaluate a quadratic Bezier curve.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve at ``t``
    """
    u = 1.0 - t
    a = u * u
    b = 2.0 * u * t
    c = t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0],
        a * p0[1] + b * p1[1] + c * p2[1],
    )


def cubic_point(p0: Vertex, p1: Vertex, p2: Vertex, p3: Vertex, t: float) -> Vertex:
    """Evaluate a cubic Bezier curve.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve at ``t``
    """
    u = 1.0 - t
    a = u * u * u
    b = 3.0 * u * u * t
    c = 3.0 * u * t * t
    d = t * t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
        a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
    )


def _check_resolution(resolution: int) -> None:
    if resolution < 1:
        raise ValueError(f"Curve resolution must be at least 1, got {resolution}")


def sample_quadratic(
    p0: Vertex, p1: Vertex, p2: Vertex, resolution: int
) -> list[Vertex]:
    """Sample a quadratic Bezier curve at ``resolution`` points in [0, 1)."""
    _check_resolution(resolution)
    return [quadratic_point(p0, p1, p2, j / resolution) for j in range(resolution)]


def sample_cubic(
    p0: Vertex, p1: Vertex, p2: Vertex, p3: Vertex, resolution: int
) -> list[Vertex]:
    """Sample a cubic Bezier curve at ``resolution`` points in [0, 1)."""
    _check_resolution(resolution)
    return [cubic_point(p0, p1, p2, p3, j / resolution) for j in range(resolution)]
