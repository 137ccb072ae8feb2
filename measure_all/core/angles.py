"""Angle and length measurements between scene primitives."""

from __future__ import annotations

from ..models.entities import LineLike
from ..models.types import Point3D, Vector3D
from .geometry import (
    subtract,
    magnitude,
    angle_between_vectors,
    distance_between_points,
    fold_to_acute,
)
from .results import Ok, Err, Result, DegenerateLineError
from .tolerances import MIN_SEGMENT_LENGTH


def line_direction(line: LineLike) -> Vector3D:
    """
    Direction vector p1 - p0 of a line.

    Args:
        line: Line with two ordered endpoints

    Returns:
        Un-normalized direction vector

    Raises:
        DegenerateLineError: If the endpoints are closer than MIN_SEGMENT_LENGTH
    """
    direction = subtract(line.p1, line.p0)
    length = magnitude(direction)
    if length < MIN_SEGMENT_LENGTH:
        raise DegenerateLineError(
            f"Line '{line.name}' is degenerate (length={length:.6g})"
        )
    return direction


def compute_angle(line_a: LineLike, line_b: LineLike) -> Result[float]:
    """
    Acute angle between two lines in degrees.

    Line direction is only defined up to sign (endpoint order is whatever
    the caller supplied), so the result is folded into [0, 90] by taking
    the smaller of the angle and its supplement.

    Args:
        line_a: First line
        line_b: Second line

    Returns:
        Ok(angle) with 0 <= angle <= 90, or Err(DegenerateLineError)
    """
    try:
        v1 = line_direction(line_a)
        v2 = line_direction(line_b)
        angle = angle_between_vectors(v1, v2)
    except DegenerateLineError as e:
        return Err(e)
    return Ok(fold_to_acute(angle))


def compute_length(p1: Point3D, p2: Point3D) -> float:
    """Straight-line distance between two points (e.g. sphere centers)."""
    return distance_between_points(p1, p2)
