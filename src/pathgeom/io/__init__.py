"""Document I/O layer for pathgeom.

This module handles reading and writing shape documents (JSON) and
geometry files (WKT). It keeps file formats out of the converter.

Key classes:
- ShapeReader: Load shape documents into domain models
- ShapeWriter: Save shape trees as JSON documents

Key functions:
- read_geometry: Parse a WKT geometry file
- write_geometry: Write a geometry as WKT
"""

from pathgeom.io.reader import ShapeReader, read_geometry
from pathgeom.io.writer import ShapeWriter, write_geometry

__all__ = [
    "ShapeReader",
    "ShapeWriter",
    "read_geometry",
    "write_geometry",
]
