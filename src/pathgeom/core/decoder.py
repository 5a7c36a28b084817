"""Shape to geometry conversion.

The decoder turns a shape tree into a Shapely geometry:

- Path and geometry nodes become a Polygon. Their command stream is split
  into contours at BREAK codes, curve segments are sampled into points,
  every contour is closed, and one contour becomes the shell while the
  others become holes.
- Primitive nodes are synthesized by ``pathgeom.core.primitives``.
- Group nodes are flattened to their leaves, each leaf is decoded, and
  the polygons are merged with a zero-distance buffer into a MultiPolygon.

Malformed or unsupported elements are logged and decode to an empty
polygon so that the rest of a group still converts.
"""

import structlog
from shapely import get_coordinates
from shapely.geometry import LinearRing, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from pathgeom.config import ConversionConfig, CurveConfig, OuterRingPolicy, PathgeomSettings
from pathgeom.core._bezier import sample_cubic, sample_quadratic
from pathgeom.core.geometry import close_ring, signed_area
from pathgeom.core.primitives import build_primitive
from pathgeom.core.traversal import flatten_leaves
from pathgeom.domain import GroupShape, PathShape, PrimitiveShape, Shape, Vertex, VertexCode
from pathgeom.exceptions import MalformedShapeError, UnsupportedShapeError
from pathgeom.utils import ConversionLogger

logger = structlog.get_logger(__name__)

# A closed ring needs three distinct points plus the closing point
MIN_RING_COORDS = 4


class ShapeDecoder:
    """Converts shape trees into Shapely geometries.

    Example:
        decoder = ShapeDecoder()
        polygon = decoder.decode(path_shape)
    """

    def __init__(
        self,
        curve: CurveConfig | None = None,
        conversion: ConversionConfig | None = None,
        conversion_logger: ConversionLogger | None = None,
    ) -> None:
        """Initialize the decoder.

        Args:
            curve: Curve sampling settings (defaults if None)
            conversion: Outer ring policy and depth cap (defaults if None)
            conversion_logger: Optional collector of per-leaf statistics
        """
        self.curve = curve or CurveConfig()
        self.conversion = conversion or ConversionConfig()
        self.conversion_logger = conversion_logger

    @classmethod
    def from_settings(
        cls,
        settings: PathgeomSettings,
        conversion_logger: ConversionLogger | None = None,
    ) -> "ShapeDecoder":
        return cls(
            curve=settings.curve,
            conversion=settings.conversion,
            conversion_logger=conversion_logger,
        )

    def decode(self, shape: Shape) -> BaseGeometry:
        """Convert a shape to its geometry.

        Args:
            shape: Any shape node

        Returns:
            MultiPolygon for groups, Polygon otherwise (possibly empty)

        Raises:
            NestingDepthError: If a group is nested deeper than allowed
        """
        if isinstance(shape, GroupShape):
            return self.decode_group(shape)
        return self._decode_leaf(shape, 0)

    def _decode_leaf(self, shape: Shape, index: int) -> Polygon:
        element = f"{shape.family.value}:{shape.name or index}"
        try:
            if isinstance(shape, PrimitiveShape):
                polygon = build_primitive(shape, self.curve)
            elif isinstance(shape, PathShape):
                polygon = self.path_polygon(shape)
            else:
                raise UnsupportedShapeError(type(shape).__name__, "unknown shape type")
        except UnsupportedShapeError as e:
            logger.warning("Shape not converted", element=element, reason=str(e))
            if self.conversion_logger is not None:
                self.conversion_logger.log_skipped(element, e.reason)
            return Polygon()
        except MalformedShapeError as e:
            logger.warning("Shape not converted", element=element, reason=e.reason)
            if self.conversion_logger is not None:
                self.conversion_logger.log_error(element, e)
            return Polygon()

        if self.conversion_logger is not None:
            if polygon.is_empty:
                self.conversion_logger.log_skipped(element, "empty result")
            else:
                self.conversion_logger.log_converted(element, len(get_coordinates(polygon)))
        return polygon

    def decode_group(self, group: GroupShape) -> MultiPolygon:
        """Decode every leaf of a group and merge the results.

        Overlapping or touching leaves are merged by the zero-distance
        buffer, so the members of the result are disjoint.
        """
        polygons: list[Polygon] = []
        for index, leaf in enumerate(flatten_leaves(group, self.conversion.max_depth)):
            polygon = self._decode_leaf(leaf, index)
            if polygon.is_empty:
                logger.debug("Empty leaf skipped", family=leaf.family.value, name=leaf.name)
                continue
            polygons.append(polygon)

        if not polygons:
            return MultiPolygon()

        merged = MultiPolygon(polygons).buffer(0)
        if merged.is_empty:
            return MultiPolygon()
        if isinstance(merged, Polygon):
            return MultiPolygon([merged])
        return merged

    def decode_path(self, shape: PathShape) -> Polygon:
        """Decode a vertex stream into a polygon with holes.

        Malformed streams are logged and give an empty polygon.
        """
        try:
            return self.path_polygon(shape)
        except MalformedShapeError as e:
            logger.warning("Shape not converted", reason=e.reason, name=shape.name)
            return Polygon()

    def path_polygon(self, shape: PathShape) -> Polygon:
        """Decode a vertex stream into a polygon with holes.

        Raises:
            MalformedShapeError: If the stream cannot form a polygon
        """
        if shape.vertex_count < 3:
            logger.warning(
                "Shape has less than 3 vertices (not polygonal)",
                vertices=shape.vertex_count,
                name=shape.name,
            )
            return Polygon()

        return self._build_polygon(self.assemble_contours(shape))

    def assemble_contours(self, shape: PathShape) -> list[list[Vertex]]:
        """Split a vertex stream into closed contours, sampling curves.

        Args:
            shape: Path shape whose codes are consistent with its vertices

        Returns:
            Closed contours, in stream order

        Raises:
            MalformedShapeError: If the codes and vertices disagree or a
                curve has no start vertex
        """
        groups, codes = _expand_codes(shape)
        vertices = shape.vertices
        resolution = self.curve.curve_samples

        contours: list[list[Vertex]] = []
        last_group = -1
        i = 0
        while i < len(vertices):
            if groups[i] != last_group:
                last_group = groups[i]
                contours.append([])
            contour = contours[-1]
            code = codes[i]

            if code in (VertexCode.QUADRATIC_VERTEX, VertexCode.BEZIER_VERTEX) and not contour:
                raise MalformedShapeError(f"{code.value} at vertex {i} has no start vertex")

            if code == VertexCode.QUADRATIC_VERTEX:
                contour.extend(
                    sample_quadratic(vertices[i - 1], vertices[i], vertices[i + 1], resolution)
                )
                i += 2
            elif code == VertexCode.BEZIER_VERTEX:
                contour.extend(
                    sample_cubic(
                        vertices[i - 1], vertices[i], vertices[i + 1], vertices[i + 2], resolution
                    )
                )
                i += 3
            else:
                contour.append(vertices[i])
                i += 1

        return [close_ring(contour) for contour in contours]

    def select_outer(self, contours: list[list[Vertex]]) -> int:
        """Pick the index of the contour used as the polygon shell.

        With the LARGEST policy the contour enclosing the most area wins
        (earliest on ties). With the FIRST policy contour 0 is used and a
        warning is logged when another contour encloses more area.
        """
        areas = [abs(signed_area(contour)) for contour in contours]
        largest = max(range(len(areas)), key=areas.__getitem__)

        if self.conversion.outer_ring == OuterRingPolicy.LARGEST:
            return largest

        if largest != 0:
            logger.warning(
                "First contour is not the outer ring",
                first_area=areas[0],
                largest_index=largest,
                largest_area=areas[largest],
            )
        return 0

    def _build_polygon(self, contours: list[list[Vertex]]) -> Polygon:
        outer_index = self.select_outer(contours)
        outer = contours[outer_index]
        if len(outer) < MIN_RING_COORDS:
            raise MalformedShapeError(f"outer contour has only {len(outer)} coordinates")

        holes: list[LinearRing] = []
        for index, contour in enumerate(contours):
            if index == outer_index:
                continue
            if len(contour) < MIN_RING_COORDS:
                logger.warning(
                    "Degenerate hole skipped", contour=index, coordinates=len(contour)
                )
                continue
            holes.append(LinearRing(contour))

        logger.debug("Contours assembled", contours=len(contours), holes=len(holes))
        return Polygon(LinearRing(outer), holes)


def _expand_codes(shape: PathShape) -> tuple[list[int], list[VertexCode]]:
    """Expand command codes to one contour group and code per vertex.

    A BREAK advances the contour group. Multi-vertex commands tag each of
    their vertices with the same group and code. A shape without codes is
    treated as plain vertices.
    """
    codes = shape.codes or [VertexCode.VERTEX] * shape.vertex_count
    consumed = sum(code.vertex_count for code in codes)
    if consumed != shape.vertex_count:
        raise MalformedShapeError(
            f"codes consume {consumed} vertices but shape has {shape.vertex_count}"
        )

    group = 0
    vertex_groups: list[int] = []
    vertex_codes: list[VertexCode] = []
    for code in codes:
        if code == VertexCode.BREAK:
            group += 1
            continue
        vertex_groups.extend([group] * code.vertex_count)
        vertex_codes.extend([code] * code.vertex_count)

    return vertex_groups, vertex_codes


def decode(shape: Shape, settings: PathgeomSettings | None = None) -> BaseGeometry:
    """Convert a shape to its geometry using the given settings.

    Args:
        shape: Any shape node
        settings: Application settings (defaults if None)

    Returns:
        MultiPolygon for groups, Polygon otherwise
    """
    return ShapeDecoder.from_settings(settings or PathgeomSettings()).decode(shape)
