"""
Tests for angle and length measurement - runs without a CAD host.

Run with: pytest measure_all/tests/ -v
"""
import pytest

from helpers import MockLine, line
from measure_all.core.angles import compute_angle, compute_length, line_direction
from measure_all.core.results import DegenerateLineError, Err, Ok
from measure_all.models.entities import LineSegment
from measure_all.models.types import Point3D


class TestLineDirection:
    """Test direction vectors of lines."""

    def test_direction_is_end_minus_start(self) -> None:
        ln = line("L1_2", (1.0, 1.0, 1.0), (4.0, 5.0, 1.0))
        assert line_direction(ln) == (3.0, 4.0, 0.0)

    def test_short_line_raises(self) -> None:
        ln = line("L1_2", (0.0, 0.0, 0.0), (0.0005, 0.0, 0.0))
        with pytest.raises(DegenerateLineError, match="L1_2"):
            line_direction(ln)


class TestComputeAngle:
    """Test acute angle between two lines."""

    def test_right_angle(self, x_axis: MockLine, y_axis: MockLine) -> None:
        result = compute_angle(x_axis, y_axis)
        assert isinstance(result, Ok)
        assert result.value == pytest.approx(90.0)

    def test_forty_five(self, x_axis: MockLine, diagonal: MockLine) -> None:
        assert compute_angle(x_axis, diagonal).unwrap() == pytest.approx(45.0)

    def test_obtuse_is_folded(self, x_axis: MockLine) -> None:
        other = line("L2_5", (0.0, 0.0, 0.0), (-5.0, 5.0, 0.0))
        assert compute_angle(x_axis, other).unwrap() == pytest.approx(45.0)

    def test_endpoint_order_does_not_matter(self, x_axis: MockLine, diagonal: MockLine) -> None:
        reversed_diagonal = MockLine(diagonal.name, diagonal.p1, diagonal.p0)
        forward = compute_angle(x_axis, diagonal).unwrap()
        backward = compute_angle(x_axis, reversed_diagonal).unwrap()
        assert forward == pytest.approx(backward)

    def test_symmetric(self, x_axis: MockLine, diagonal: MockLine) -> None:
        assert compute_angle(x_axis, diagonal).unwrap() == pytest.approx(
            compute_angle(diagonal, x_axis).unwrap()
        )

    def test_parallel_off_axis_lines_are_exactly_zero(self) -> None:
        a = line("La", (0.0, 0.0, 0.0), (1.0, 1.0, 0.0))
        b = line("Lb", (0.0, 1.0, 0.0), (1.0, 2.0, 0.0))
        assert compute_angle(a, b).unwrap() == pytest.approx(0.0, abs=1e-9)

    def test_anti_parallel_off_axis_lines(self) -> None:
        a = line("La", (0.0, 0.0, 0.0), (3.0, 4.0, 5.0))
        b = line("Lb", (6.0, 8.0, 11.0), (0.0, 0.0, 1.0))
        assert compute_angle(a, b).unwrap() == pytest.approx(0.0, abs=1e-9)

    def test_anti_parallel_is_zero(self, x_axis: MockLine) -> None:
        other = line("L4_5", (10.0, 3.0, 0.0), (0.0, 3.0, 0.0))
        assert compute_angle(x_axis, other).unwrap() == pytest.approx(0.0, abs=1e-6)

    def test_result_in_range(self) -> None:
        a = line("La", (0.0, 0.0, 0.0), (1.0, 2.0, 3.0))
        b = line("Lb", (5.0, -1.0, 2.0), (-3.0, 4.0, 0.5))
        angle = compute_angle(a, b).unwrap()
        assert 0.0 <= angle <= 90.0

    def test_skew_lines_still_measured(self) -> None:
        a = line("La", (0.0, 0.0, 0.0), (10.0, 0.0, 0.0))
        b = line("Lb", (0.0, 0.0, 5.0), (0.0, 10.0, 5.0))
        assert compute_angle(a, b).unwrap() == pytest.approx(90.0)

    def test_degenerate_line_returns_err(self, x_axis: MockLine) -> None:
        point_line = line("L3_3", (2.0, 2.0, 2.0), (2.0, 2.0, 2.0))
        result = compute_angle(x_axis, point_line)
        assert isinstance(result, Err)
        assert not result.is_ok
        assert isinstance(result.error, DegenerateLineError)
        assert result.value is None

    def test_unwrap_err_raises(self, x_axis: MockLine) -> None:
        point_line = line("L3_3", (2.0, 2.0, 2.0), (2.0, 2.0, 2.0))
        with pytest.raises(DegenerateLineError):
            compute_angle(point_line, x_axis).unwrap()


class TestComputeLength:
    """Test center-to-center distances."""

    def test_length(self) -> None:
        assert compute_length(Point3D(0.0, 0.0, 0.0), Point3D(3.0, 4.0, 12.0)) == pytest.approx(13.0)

    def test_same_point(self) -> None:
        p = Point3D(1.5, -2.0, 0.25)
        assert compute_length(p, p) == 0.0


class TestLineSegmentModel:
    """Test the package's own line type against the calculators."""

    def test_line_segment_satisfies_protocol(self) -> None:
        a = LineSegment("L1_2", Point3D(0.0, 0.0, 0.0), Point3D(2.0, 0.0, 0.0))
        b = LineSegment("L2_3", Point3D(2.0, 0.0, 0.0), Point3D(2.0, 0.0, 3.0))
        assert compute_angle(a, b).unwrap() == pytest.approx(90.0)
        assert a.endpoints == (Point3D(0.0, 0.0, 0.0), Point3D(2.0, 0.0, 0.0))

    def test_line_segment_is_frozen(self) -> None:
        a = LineSegment("L1_2", Point3D(0.0, 0.0, 0.0), Point3D(2.0, 0.0, 0.0))
        with pytest.raises(AttributeError):
            a.name = "L9_9"
