"""Geometry to shape conversion.

The encoder turns a Shapely geometry into a shape tree:

- MultiPolygon, MultiLineString and GeometryCollection become a group
  whose children are the encoded members, in order.
- LineString and LinearRing become a path. A closed line drops its
  repeated last coordinate and closes the path instead.
- Polygon becomes a single path: the shell coordinates, then one contour
  per hole, each without its repeated closing coordinate.

Every produced node gets the default style from ``StyleConfig`` unless
defaults are disabled. Unsupported geometry types are logged and become
empty groups so that sibling members still convert.
"""

from collections.abc import Iterable

import structlog
from shapely.geometry import LineString, Polygon
from shapely.geometry.base import BaseGeometry

from pathgeom.config import ConversionConfig, PathgeomSettings, StyleConfig
from pathgeom.domain import GroupShape, PathShape, Shape, ShapeFamily
from pathgeom.exceptions import NestingDepthError

logger = structlog.get_logger(__name__)

COLLECTION_TYPES = frozenset({"MultiPolygon", "MultiLineString", "GeometryCollection"})
LINE_TYPES = frozenset({"LineString", "LinearRing"})


def _ring_vertices(coords: Iterable[tuple[float, ...]], drop_last: bool) -> list[tuple[float, float]]:
    points = [(float(c[0]), float(c[1])) for c in coords]
    if drop_last and points:
        points.pop()
    return points


class ShapeEncoder:
    """Converts Shapely geometries into shape trees.

    Example:
        encoder = ShapeEncoder(style=StyleConfig(apply_defaults=False))
        shape = encoder.encode(polygon)
    """

    def __init__(
        self,
        conversion: ConversionConfig | None = None,
        style: StyleConfig | None = None,
    ) -> None:
        """Initialize the encoder.

        Args:
            conversion: Depth cap for nested collections (defaults if None)
            style: Style assigned to produced nodes (defaults if None)
        """
        self.conversion = conversion or ConversionConfig()
        self.style = style or StyleConfig()

    @classmethod
    def from_settings(cls, settings: PathgeomSettings) -> "ShapeEncoder":
        return cls(conversion=settings.conversion, style=settings.style)

    def encode(self, geometry: BaseGeometry | None) -> Shape:
        """Convert a geometry to a shape tree.

        Args:
            geometry: Any Shapely geometry, or None

        Returns:
            Root shape; an empty GEOMETRY path when ``geometry`` is None

        Raises:
            NestingDepthError: If collections are nested deeper than allowed
        """
        if geometry is None:
            return PathShape(kind=ShapeFamily.GEOMETRY)

        root = self._encode_node(geometry)
        stack: list[tuple[BaseGeometry, Shape, int]] = [(geometry, root, 0)]
        while stack:
            geom, node, depth = stack.pop()
            if geom.geom_type not in COLLECTION_TYPES or not isinstance(node, GroupShape):
                continue

            members = list(geom.geoms)
            if members and depth + 1 > self.conversion.max_depth:
                raise NestingDepthError(self.conversion.max_depth)
            children = [(member, self._encode_node(member)) for member in members]
            for _, child in children:
                node.add_child(child)
            stack.extend((member, child, depth + 1) for member, child in reversed(children))

        return root

    def _encode_node(self, geom: BaseGeometry) -> Shape:
        style = self.style.default_style()
        geom_type = geom.geom_type

        if geom_type in COLLECTION_TYPES:
            return GroupShape(style=style)
        if geom_type in LINE_TYPES:
            return self.encode_line(geom)
        if geom_type == "Polygon":
            return self.encode_polygon(geom)

        logger.warning("Unsupported geometry type", geom_type=geom_type)
        return GroupShape(style=style)

    def encode_line(self, line: LineString) -> PathShape:
        """Encode a line string or ring as a path."""
        closed = line.is_closed
        path = PathShape(style=self.style.default_style())
        path.begin_shape()
        for x, y in _ring_vertices(line.coords, drop_last=closed):
            path.vertex(x, y)
        path.end_shape(close=closed)
        return path

    def encode_polygon(self, polygon: Polygon) -> PathShape:
        """Encode a polygon as one path with a contour per hole."""
        path = PathShape(style=self.style.default_style())
        path.begin_shape()
        for x, y in _ring_vertices(polygon.exterior.coords, drop_last=True):
            path.vertex(x, y)

        for interior in polygon.interiors:
            path.begin_contour()
            for x, y in _ring_vertices(interior.coords, drop_last=True):
                path.vertex(x, y)
            path.end_contour()

        path.end_shape(close=True)
        return path


def encode(geometry: BaseGeometry | None, settings: PathgeomSettings | None = None) -> Shape:
    """Convert a geometry to a shape tree using the given settings.

    Args:
        geometry: Any Shapely geometry, or None
        settings: Application settings (defaults if None)

    Returns:
        Root shape of the encoded tree
    """
    return ShapeEncoder.from_settings(settings or PathgeomSettings()).encode(geometry)
