"""pathgeom - Convert path-command shapes to polygon geometries and back.

pathgeom decodes shapes made of vertex streams with command codes (line,
quadratic and cubic curve vertices, contour breaks), parametric primitives
and groups into Shapely polygons, and encodes Shapely geometries back into
shapes.

Example:
    >>> from pathgeom.core import decode, encode
    >>> from pathgeom.domain import PathShape
    >>> path = PathShape()
    >>> for x, y in [(0, 0), (10, 0), (10, 10), (0, 10)]:
    ...     path.vertex(x, y)
    >>> decode(path).area
    100.0
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
