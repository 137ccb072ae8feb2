"""Perpendicular projection of a point onto a line."""

from __future__ import annotations

from ..models.entities import LineLike
from ..models.measurement import PerpendicularResult
from ..models.types import Point3D
from .angles import line_direction
from .geometry import subtract, add, scale, dot_product, distance_between_points
from .results import Ok, Err, Result, DegenerateLineError


def project_point_on_line(point: Point3D, line: LineLike) -> PerpendicularResult:
    """
    Foot of the perpendicular from a point onto the infinite extension of a line.

    The line parameter is not clamped to [0, 1], so the foot may lie
    outside the segment.

    Args:
        point: Point to project (e.g. a sphere center)
        line: Line defined by its two endpoints

    Returns:
        PerpendicularResult with foot, distance and line parameter

    Raises:
        DegenerateLineError: If the line has no usable direction
    """
    direction = line_direction(line)
    length_sq = dot_product(direction, direction)
    t = dot_product(subtract(point, line.p0), direction) / length_sq
    foot = add(line.p0, scale(direction, t))
    return PerpendicularResult(
        foot=foot,
        distance=distance_between_points(point, foot),
        parameter=t,
    )


def compute_perpendicular(point: Point3D, line: LineLike) -> Result[PerpendicularResult]:
    """
    Result-returning wrapper around project_point_on_line().

    Returns:
        Ok(PerpendicularResult) or Err(DegenerateLineError)
    """
    try:
        return Ok(project_point_on_line(point, line))
    except DegenerateLineError as e:
        return Err(e)
