"""Unit tests for Bezier curve sampling."""

import pytest

from pathgeom.core._bezier import (
    cubic_point,
    quadratic_point,
    sample_cubic,
    sample_quadratic,
)

P0 = (0.0, 0.0)
P1 = (5.0, 10.0)
P2 = (10.0, 0.0)
P3 = (15.0, 5.0)


class TestQuadraticPoint:
    """Tests for quadratic_point."""

    def test_endpoints(self) -> None:
        """Test that t=0 and t=1 hit the end points."""
        assert quadratic_point(P0, P1, P2, 0.0) == pytest.approx(P0)
        assert quadratic_point(P0, P1, P2, 1.0) == pytest.approx(P2)

    def test_midpoint(self) -> None:
        """Test the blend at t=0.5."""
        expected = (
            0.25 * P0[0] + 0.5 * P1[0] + 0.25 * P2[0],
            0.25 * P0[1] + 0.5 * P1[1] + 0.25 * P2[1],
        )
        assert quadratic_point(P0, P1, P2, 0.5) == pytest.approx(expected)


class TestCubicPoint:
    """Tests for cubic_point."""

    def test_endpoints(self) -> None:
        """Test that t=0 and t=1 hit the end points."""
        assert cubic_point(P0, P1, P2, P3, 0.0) == pytest.approx(P0)
        assert cubic_point(P0, P1, P2, P3, 1.0) == pytest.approx(P3)

    def test_midpoint(self) -> None:
        """Test the blend at t=0.5."""
        expected = (
            0.125 * (P0[0] + 3 * P1[0] + 3 * P2[0] + P3[0]),
            0.125 * (P0[1] + 3 * P1[1] + 3 * P2[1] + P3[1]),
        )
        assert cubic_point(P0, P1, P2, P3, 0.5) == pytest.approx(expected)


class TestSampling:
    """Tests for uniform curve sampling."""

    def test_quadratic_sample_count(self) -> None:
        """Test that exactly `resolution` points are produced."""
        points = sample_quadratic(P0, P1, P2, 20)
        assert len(points) == 20

    def test_quadratic_excludes_end(self) -> None:
        """Test that sampling starts at t=0 and never reaches t=1."""
        points = sample_quadratic(P0, P1, P2, 4)
        assert points[0] == pytest.approx(P0)
        assert points[-1] == pytest.approx(quadratic_point(P0, P1, P2, 0.75))
        assert all(p != pytest.approx(P2) for p in points)

    def test_cubic_uniform_parameters(self) -> None:
        """Test that samples are taken at t = j / resolution."""
        points = sample_cubic(P0, P1, P2, P3, 5)
        assert len(points) == 5
        for j, point in enumerate(points):
            assert point == pytest.approx(cubic_point(P0, P1, P2, P3, j / 5))

    def test_invalid_resolution(self) -> None:
        """Test that a resolution below 1 is rejected."""
        with pytest.raises(ValueError, match="at least 1"):
            sample_quadratic(P0, P1, P2, 0)
        with pytest.raises(ValueError):
            sample_cubic(P0, P1, P2, P3, -1)
