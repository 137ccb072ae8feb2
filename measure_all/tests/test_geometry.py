"""
Tests for vector math - runs without a CAD host.

Run with: pytest measure_all/tests/ -v
"""
import math

import pytest

from measure_all.core.geometry import (
    add,
    angle_between_vectors,
    cross_product,
    distance_between_points,
    dot_product,
    fold_to_acute,
    magnitude,
    midpoint,
    scale,
    subtract,
)
from measure_all.core.results import DegenerateLineError
from measure_all.models.types import Point3D


class TestBasicOperations:
    """Test component-wise vector operations."""

    def test_subtract(self) -> None:
        assert subtract((5.0, 7.0, 9.0), (1.0, 2.0, 3.0)) == (4.0, 5.0, 6.0)

    def test_add_returns_point(self) -> None:
        result = add(Point3D(1.0, 1.0, 1.0), (2.0, 0.0, -1.0))
        assert isinstance(result, Point3D)
        assert result == Point3D(3.0, 1.0, 0.0)

    def test_scale(self) -> None:
        assert scale((1.0, -2.0, 0.5), 2.0) == (2.0, -4.0, 1.0)

    def test_dot_product_orthogonal(self) -> None:
        assert dot_product((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == 0.0

    def test_dot_product(self) -> None:
        assert dot_product((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == 32.0

    def test_cross_product_right_handed(self) -> None:
        assert cross_product((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)

    def test_cross_product_parallel_is_zero(self) -> None:
        assert cross_product((2.0, 0.0, 0.0), (5.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)


class TestMagnitudeAndDistance:
    """Test lengths and distances."""

    def test_magnitude_345(self) -> None:
        assert magnitude((3.0, 4.0, 0.0)) == pytest.approx(5.0)

    def test_magnitude_zero(self) -> None:
        assert magnitude((0.0, 0.0, 0.0)) == 0.0

    def test_distance(self) -> None:
        p1 = Point3D(1.0, 2.0, 3.0)
        p2 = Point3D(4.0, 6.0, 3.0)
        assert distance_between_points(p1, p2) == pytest.approx(5.0)

    def test_distance_symmetric(self) -> None:
        p1 = Point3D(-1.0, 0.5, 2.0)
        p2 = Point3D(3.0, -2.0, 7.0)
        assert distance_between_points(p1, p2) == distance_between_points(p2, p1)

    def test_midpoint(self) -> None:
        assert midpoint(Point3D(0.0, 0.0, 0.0), Point3D(2.0, 4.0, -6.0)) == Point3D(1.0, 2.0, -3.0)


class TestAngleBetweenVectors:
    """Test unsigned angle computation."""

    def test_perpendicular(self) -> None:
        assert angle_between_vectors((1.0, 0.0, 0.0), (0.0, 3.0, 0.0)) == pytest.approx(90.0)

    def test_parallel(self) -> None:
        assert angle_between_vectors((1.0, 1.0, 0.0), (2.0, 2.0, 0.0)) == pytest.approx(0.0, abs=1e-6)

    def test_parallel_off_axis_is_exact(self) -> None:
        assert angle_between_vectors((1.0, 1.0, 0.0), (2.0, 2.0, 0.0)) == pytest.approx(0.0, abs=1e-9)

    def test_small_angle_precision(self) -> None:
        angle = angle_between_vectors((1.0, 0.0, 0.0), (1.0, 1e-8, 0.0))
        assert angle == pytest.approx(math.degrees(1e-8), rel=1e-6)

    def test_anti_parallel(self) -> None:
        assert angle_between_vectors((1.0, 0.0, 0.0), (-4.0, 0.0, 0.0)) == pytest.approx(180.0)

    def test_obtuse_not_folded(self) -> None:
        assert angle_between_vectors((1.0, 0.0, 0.0), (-1.0, 1.0, 0.0)) == pytest.approx(135.0)

    def test_scale_invariant(self) -> None:
        a = angle_between_vectors((1.0, 2.0, 3.0), (-2.0, 0.5, 1.0))
        b = angle_between_vectors((10.0, 20.0, 30.0), (-0.2, 0.05, 0.1))
        assert a == pytest.approx(b)

    def test_zero_vector_raises(self) -> None:
        with pytest.raises(DegenerateLineError, match="First vector"):
            angle_between_vectors((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))

        with pytest.raises(DegenerateLineError, match="Second vector"):
            angle_between_vectors((1.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    def test_result_is_finite_for_nearly_parallel(self) -> None:
        # Rounding can push the cosine slightly past 1
        angle = angle_between_vectors((1.0, 1e-9, 0.0), (1.0, 0.0, 0.0))
        assert math.isfinite(angle)


class TestFoldToAcute:
    """Test folding angles into [0, 90]."""

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0),
        (30.0, 30.0),
        (90.0, 90.0),
        (135.0, 45.0),
        (180.0, 0.0),
    ])
    def test_fold(self, angle: float, expected: float) -> None:
        assert fold_to_acute(angle) == pytest.approx(expected)
