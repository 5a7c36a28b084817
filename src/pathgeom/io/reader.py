"""Readers for shape documents and geometry files.

Shape documents are JSON files of the form::

    {"version": 1, "shape": {"family": "path", "vertices": [...], ...}}

Geometry files hold a single WKT geometry.
"""

import json
from collections.abc import Iterator
from pathlib import Path

from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry.base import BaseGeometry

from pathgeom.core.traversal import iter_shapes
from pathgeom.domain import Shape
from pathgeom.exceptions import DocumentLoadError

DOCUMENT_VERSION = 1


class ShapeReader:
    """Loads shape documents into domain models.

    Example:
        reader = ShapeReader(Path("logo.json"))
        reader.load()
        for node in reader.iter_shapes():
            print(node.family)
    """

    def __init__(self, document_path: Path) -> None:
        """Initialize the shape reader.

        Args:
            document_path: Path to the JSON shape document
        """
        self._document_path = document_path
        self._shape: Shape | None = None

    def load(self) -> Shape:
        """Load and parse the document.

        Returns:
            Root shape of the document

        Raises:
            FileNotFoundError: If the document does not exist
            DocumentLoadError: If the document is not a valid shape document
        """
        if not self._document_path.exists():
            raise FileNotFoundError(f"Shape document not found: {self._document_path}")

        try:
            data = json.loads(self._document_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentLoadError(str(self._document_path), str(e)) from e

        if not isinstance(data, dict) or "shape" not in data:
            raise DocumentLoadError(str(self._document_path), "missing 'shape' entry")

        version = data.get("version", DOCUMENT_VERSION)
        if version != DOCUMENT_VERSION:
            raise DocumentLoadError(
                str(self._document_path), f"unsupported document version {version}"
            )

        try:
            self._shape = Shape.from_dict(data["shape"])
        except (KeyError, TypeError, ValueError) as e:
            raise DocumentLoadError(str(self._document_path), f"invalid shape data: {e}") from e

        return self._shape

    @property
    def shape(self) -> Shape:
        """Return the loaded root shape.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._shape is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._shape

    def iter_shapes(self, max_depth: int = 64) -> Iterator[Shape]:
        """Iterate over every node of the loaded tree in pre-order.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        return iter_shapes(self.shape, max_depth)


def read_geometry(path: Path) -> BaseGeometry:
    """Read a WKT geometry file.

    Args:
        path: Path to a file containing one WKT geometry

    Returns:
        Parsed Shapely geometry

    Raises:
        FileNotFoundError: If the file does not exist
        DocumentLoadError: If the file cannot be parsed
    """
    if not path.exists():
        raise FileNotFoundError(f"Geometry file not found: {path}")

    try:
        return wkt.loads(path.read_text(encoding="utf-8"))
    except (OSError, ShapelyError) as e:
        raise DocumentLoadError(str(path), str(e)) from e
