"""End-to-end conversion tests through the encoder, the decoder and documents."""

from pathlib import Path

import pytest
from shapely.geometry import MultiPolygon, Polygon

from pathgeom.config import CurveConfig, PathgeomSettings
from pathgeom.core import decode, encode, set_all_fill_color
from pathgeom.domain import PINK, GroupShape, PathShape, PrimitiveKind, PrimitiveShape
from pathgeom.io import ShapeReader, ShapeWriter, read_geometry, write_geometry

FRAME = Polygon(
    [(0, 0), (100, 0), (100, 100), (0, 100)],
    [[(20, 20), (20, 80), (80, 80), (80, 20)]],
)


class TestGeometryRoundTrip:
    """Geometry -> shape -> geometry conversions."""

    def test_polygon_with_hole(self) -> None:
        """Test that a polygon with a hole survives encoding and decoding."""
        restored = decode(encode(FRAME))

        assert isinstance(restored, Polygon)
        assert restored.equals(FRAME)
        assert len(restored.interiors) == 1

    def test_multipolygon(self) -> None:
        """Test that disjoint members survive as a MultiPolygon."""
        multi = MultiPolygon(
            [
                Polygon([(0, 0), (10, 0), (10, 10), (0, 10)]),
                Polygon([(20, 0), (30, 0), (30, 10), (20, 10)]),
            ]
        )

        restored = decode(encode(multi))

        assert isinstance(restored, MultiPolygon)
        assert restored.equals(multi)

    def test_single_member_group_stays_multi(self) -> None:
        """Test that a one-member group decodes to a MultiPolygon."""
        restored = decode(encode(MultiPolygon([FRAME])))

        assert isinstance(restored, MultiPolygon)
        assert restored.area == pytest.approx(FRAME.area)


class TestDocumentRoundTrip:
    """Shape document -> geometry file conversions."""

    def test_curved_logo(self, tmp_path: Path) -> None:
        """Test decoding a styled, curved shape loaded from a document."""
        body = PathShape(name="body")
        body.begin_shape()
        body.vertex(0, 0)
        body.vertex(100, 0)
        body.bezier_vertex(130, 30, 130, 70, 100, 100)
        body.vertex(0, 100)
        body.begin_contour()
        body.vertex(20, 20)
        body.vertex(20, 80)
        body.vertex(80, 80)
        body.vertex(80, 20)
        body.end_contour()
        body.end_shape(close=True)

        logo = GroupShape(
            name="logo",
            children=[body, PrimitiveShape(PrimitiveKind.ELLIPSE, [200, 50, 40, 40])],
        )
        set_all_fill_color(logo, PINK)

        document = tmp_path / "logo.json"
        ShapeWriter(document).save(logo)
        loaded = ShapeReader(document).load()
        assert loaded == logo

        settings = PathgeomSettings(curve=CurveConfig(curve_samples=32))
        geometry = decode(loaded, settings)

        assert isinstance(geometry, MultiPolygon)
        assert len(geometry.geoms) == 2
        assert geometry.is_valid
        # square body, a hole, a curved bulge and a circle of radius 20
        assert geometry.area > 100 * 100 - 60 * 60
        assert geometry.bounds[2] == pytest.approx(220.0, abs=0.5)

        output = tmp_path / "logo.wkt"
        write_geometry(output, geometry)
        assert read_geometry(output).equals_exact(geometry, 1e-6)


def test_polygon_without_holes_keeps_point_set() -> None:
    """Test that a hole-free polygon keeps its exact coordinates."""
    polygon = Polygon([(0.5, 0.25), (7.0, 1.5), (9.25, 6.0), (4.0, 9.5), (-1.0, 5.0)])

    restored = decode(encode(polygon))

    assert isinstance(restored, Polygon)
    assert len(restored.interiors) == 0
    assert set(restored.exterior.coords) == set(polygon.exterior.coords)
    assert len(restored.exterior.coords) == len(polygon.exterior.coords)
