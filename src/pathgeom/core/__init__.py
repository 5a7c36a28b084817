"""Core conversion algorithms for pathgeom.

This module contains the core algorithms for:

- Curve sampling (quadratic and cubic Bezier evaluation)
- Primitive synthesis (ellipse, rect, triangle, quad, arc)
- Decoding shape trees into Shapely geometries
- Encoding Shapely geometries into shape trees
- Shape tree traversal and bulk styling

All services are stateless apart from their configuration. Unsupported
or malformed elements are logged and converted to empty results.

Key functions:
- decode: Convert a shape to a geometry
- encode: Convert a geometry to a shape
- synthesize: Build the polygon of a primitive shape
- flatten_leaves: Collect the non-group nodes of a shape tree

Key classes:
- ShapeDecoder: Configurable shape to geometry converter
- ShapeEncoder: Configurable geometry to shape converter
"""

from pathgeom.core._bezier import (
    cubic_point,
    quadratic_point,
    sample_cubic,
    sample_quadratic,
)
from pathgeom.core.decoder import ShapeDecoder, decode
from pathgeom.core.encoder import ShapeEncoder, encode
from pathgeom.core.geometry import close_ring, signed_area
from pathgeom.core.primitives import build_primitive, synthesize
from pathgeom.core.traversal import (
    disable_all_fill,
    flatten_leaves,
    iter_shapes,
    set_all_fill_color,
    set_all_stroke_color,
)

__all__ = [
    # Converter classes
    "ShapeDecoder",
    "ShapeEncoder",
    # Conversion functions
    "build_primitive",
    "close_ring",
    "cubic_point",
    "decode",
    "disable_all_fill",
    "encode",
    "flatten_leaves",
    "iter_shapes",
    "quadratic_point",
    "sample_cubic",
    "sample_quadratic",
    "set_all_fill_color",
    "set_all_stroke_color",
    "signed_area",
    "synthesize",
]
