"""Domain models for pathgeom.

This module contains the path-command shape model consumed by the decoder
and produced by the encoder. Models are plain dataclasses, independent of
Shapely, and serialize to dictionaries for storage as JSON documents.

Key classes:
- Shape: Base of the shape node variants
- GroupShape: Node owning ordered child shapes
- PathShape: Vertex stream with per-element command codes
- PrimitiveShape: Parametric primitive (ellipse, rect, arc, ...)
- ShapeStyle: Fill/stroke settings carried by every node
"""

from pathgeom.domain.shape import (
    GroupShape,
    PathShape,
    PrimitiveKind,
    PrimitiveShape,
    Shape,
    ShapeFamily,
    Vertex,
    VertexCode,
)
from pathgeom.domain.style import BLACK, PINK, WHITE, ShapeStyle, argb

__all__: list[str] = [
    # Enums
    "ShapeFamily",
    "VertexCode",
    "PrimitiveKind",
    # Core types
    "Vertex",
    "Shape",
    "GroupShape",
    "PathShape",
    "PrimitiveShape",
    "ShapeStyle",
    # Colors
    "BLACK",
    "PINK",
    "WHITE",
    "argb",
]
