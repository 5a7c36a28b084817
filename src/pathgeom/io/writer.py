"""Writers for shape documents and geometry files."""

import json
from pathlib import Path

from shapely import wkt
from shapely.geometry.base import BaseGeometry

from pathgeom.domain import Shape
from pathgeom.exceptions import DocumentSaveError
from pathgeom.io.reader import DOCUMENT_VERSION


class ShapeWriter:
    """Writes shape trees as JSON documents.

    Example:
        writer = ShapeWriter(Path("output.json"))
        writer.save(shape)
    """

    def __init__(self, output_path: Path, indent: int | None = 2) -> None:
        """Initialize the shape writer.

        Args:
            output_path: Path where the document will be saved
            indent: JSON indentation (None for compact output)
        """
        self._output_path = output_path
        self._indent = indent

    def save(self, shape: Shape) -> None:
        """Save the shape tree to the output path.

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        document = {"version": DOCUMENT_VERSION, "shape": shape.to_dict()}
        try:
            self._output_path.write_text(
                json.dumps(document, indent=self._indent), encoding="utf-8"
            )
        except OSError as e:
            raise DocumentSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path, extension: str) -> Path:
        """Generate the default output path next to the input file.

        Converts: logo.json -> logo.wkt
                  ring.wkt -> ring.json

        Args:
            input_path: Input file path
            extension: Output extension including the dot

        Returns:
            Path with the input stem and the new extension
        """
        return input_path.with_suffix(extension)


def write_geometry(path: Path, geometry: BaseGeometry) -> None:
    """Write a geometry as WKT.

    Raises:
        DocumentSaveError: If the file cannot be written
    """
    try:
        path.write_text(wkt.dumps(geometry) + "\n", encoding="utf-8")
    except OSError as e:
        raise DocumentSaveError(str(path), str(e)) from e
