"""Unit tests for geometry to shape encoding."""

import pytest
from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
)
from structlog.testing import capture_logs

from pathgeom.config import ConversionConfig, StyleConfig
from pathgeom.core.encoder import ShapeEncoder, encode
from pathgeom.domain import (
    PINK,
    WHITE,
    GroupShape,
    PathShape,
    ShapeFamily,
    ShapeStyle,
    VertexCode,
)
from pathgeom.exceptions import NestingDepthError

SQUARE = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])


class TestPolygonEncoding:
    """Tests for polygon encoding."""

    def test_none_is_empty_geometry_path(self) -> None:
        """Test that None encodes to an empty, unstyled GEOMETRY path."""
        shape = encode(None)

        assert isinstance(shape, PathShape)
        assert shape.family == ShapeFamily.GEOMETRY
        assert shape.vertex_count == 0
        assert shape.style is None

    def test_square(self) -> None:
        """Test that the repeated closing coordinate is dropped."""
        shape = encode(SQUARE)

        assert isinstance(shape, PathShape)
        assert shape.vertices == [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
        assert shape.codes == [VertexCode.VERTEX] * 4
        assert shape.closed

    def test_holes_become_contours(self) -> None:
        """Test that each hole is preceded by a BREAK."""
        polygon = Polygon(
            [(0, 0), (10, 0), (10, 10), (0, 10)],
            [
                [(1, 1), (1, 3), (3, 3), (3, 1)],
                [(5, 5), (5, 7), (7, 7), (7, 5)],
            ],
        )

        shape = encode(polygon)

        assert shape.codes.count(VertexCode.BREAK) == 2
        assert shape.vertex_count == 12
        assert shape.codes[4] == VertexCode.BREAK
        assert shape.vertices[4] == (1.0, 1.0)

    def test_empty_polygon(self) -> None:
        """Test that an empty polygon encodes to an empty closed path."""
        shape = encode(Polygon())

        assert isinstance(shape, PathShape)
        assert shape.vertex_count == 0


class TestLineEncoding:
    """Tests for line string and ring encoding."""

    def test_open_line(self) -> None:
        """Test that an open line keeps every coordinate and stays open."""
        shape = encode(LineString([(0, 0), (5, 5), (10, 0)]))

        assert shape.vertex_count == 3
        assert not shape.closed

    def test_linear_ring(self) -> None:
        """Test that a ring drops its closing coordinate and closes."""
        shape = encode(LinearRing([(0, 0), (5, 0), (5, 5)]))

        assert shape.vertices == [(0.0, 0.0), (5.0, 0.0), (5.0, 5.0)]
        assert shape.closed


class TestCollectionEncoding:
    """Tests for collection encoding."""

    def test_multipolygon_order(self) -> None:
        """Test that members become group children in order."""
        multi = MultiPolygon(
            [
                Polygon([(0, 0), (1, 0), (1, 1)]),
                Polygon([(5, 5), (6, 5), (6, 6), (5, 6)]),
            ]
        )

        shape = encode(multi)

        assert isinstance(shape, GroupShape)
        assert shape.child_count == 2
        assert shape.children[0].vertex_count == 3
        assert shape.children[1].vertex_count == 4

    def test_nested_collection(self) -> None:
        """Test that nested collections become nested groups."""
        collection = GeometryCollection(
            [SQUARE, GeometryCollection([LineString([(0, 0), (1, 1)])])]
        )

        shape = encode(collection)

        assert isinstance(shape.children[1], GroupShape)
        assert isinstance(shape.children[1].children[0], PathShape)

    def test_unsupported_member_is_empty_group(self) -> None:
        """Test that a point member becomes an empty group with a warning."""
        collection = GeometryCollection([Point(1, 1), SQUARE])

        with capture_logs() as logs:
            shape = encode(collection)

        assert shape.child_count == 2
        assert isinstance(shape.children[0], GroupShape)
        assert shape.children[0].child_count == 0
        assert isinstance(shape.children[1], PathShape)
        assert logs[0]["event"] == "Unsupported geometry type"
        assert logs[0]["geom_type"] == "Point"

    def test_depth_cap(self) -> None:
        """Test that collections nested beyond max_depth raise."""
        collection = GeometryCollection([GeometryCollection([SQUARE])])
        encoder = ShapeEncoder(conversion=ConversionConfig(max_depth=1))

        with pytest.raises(NestingDepthError):
            encoder.encode(collection)


class TestEncodedStyle:
    """Tests for the style assigned to encoded nodes."""

    def test_default_style(self) -> None:
        """Test the default white fill and pink stroke."""
        shape = encode(MultiPolygon([SQUARE]))

        for node in (shape, shape.children[0]):
            assert node.style == ShapeStyle(
                fill=True,
                fill_color=WHITE,
                stroke=True,
                stroke_color=PINK,
                stroke_weight=4.0,
            )

    def test_custom_style(self) -> None:
        """Test that the configured style is applied."""
        encoder = ShapeEncoder(style=StyleConfig(stroke_weight=1.5, fill_color=0xFF000000))
        shape = encoder.encode(SQUARE)

        assert shape.style.stroke_weight == 1.5
        assert shape.style.fill_color == 0xFF000000

    def test_defaults_disabled(self) -> None:
        """Test that nodes stay unstyled when defaults are disabled."""
        encoder = ShapeEncoder(style=StyleConfig(apply_defaults=False))
        shape = encoder.encode(MultiPolygon([SQUARE]))

        assert shape.style is None
        assert shape.children[0].style is None


class TestEncodingWalk:
    """Tests for the iterative collection walk."""

    def test_nested_member_order(self) -> None:
        """Test that members keep their order at every nesting level."""
        collection = GeometryCollection(
            [
                LineString([(0, 0), (1, 0)]),
                GeometryCollection(
                    [LineString([(2, 0), (3, 0)]), LineString([(4, 0), (5, 0)])]
                ),
                LineString([(6, 0), (7, 0)]),
            ]
        )

        shape = encode(collection)

        assert shape.children[0].vertices[0] == (0.0, 0.0)
        inner = shape.children[1]
        assert [child.vertices[0] for child in inner.children] == [(2.0, 0.0), (4.0, 0.0)]
        assert shape.children[2].vertices[0] == (6.0, 0.0)

    def test_single_geometry_root(self) -> None:
        """Test that a non-collection root is returned as the encoded node."""
        shape = ShapeEncoder().encode(LineString([(0, 0), (1, 1)]))
        assert isinstance(shape, PathShape)
        assert shape.vertex_count == 2
