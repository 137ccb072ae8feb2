"""Angle arc construction.

Builds a polyline arc around a center point, sweeping from the direction
of one reference point to the direction of another. Points are sampled
in a local XY frame at a fixed angular step and moved into world space
with a three-point frame alignment from the geometry provider.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..models.entities import LineLike
from ..models.measurement import Arc
from ..models.types import Point3D
from .geometry import (
    subtract,
    add,
    scale,
    magnitude,
    angle_between_vectors,
    distance_between_points,
    midpoint,
)
from .intersection import provider_or_default
from .results import (
    Ok,
    Err,
    Result,
    MeasurementError,
    CoincidentPointsError,
    RadiusTooSmallError,
    NegligibleAngleError,
    FullCircleError,
)
from .tolerances import (
    MIN_ANCHOR_DISTANCE,
    MIN_ARC_RADIUS,
    ARC_RADIUS_FRACTION,
    MIN_ARC_ANGLE_DEG,
    MAX_ARC_ANGLE_DEG,
    ARC_STEP_DEG,
)

if TYPE_CHECKING:
    from ..providers.base import GeometryProvider

_LOCAL_ORIGIN = Point3D(0.0, 0.0, 0.0)
_LOCAL_X = Point3D(1.0, 0.0, 0.0)
_LOCAL_Y = Point3D(0.0, 1.0, 0.0)


def sample_local_arc(radius: float, sweep_deg: float, step_deg: int = ARC_STEP_DEG) -> list[Point3D]:
    """
    Arc points in the local XY plane, starting on +X and turning toward +Y.

    Samples are taken at every whole multiple of step_deg from 0 up to
    floor(sweep_deg) inclusive; the exact end angle is not added.
    """
    if step_deg < 1:
        raise ValueError(f"step_deg must be a positive integer, got {step_deg}")

    points: list[Point3D] = []
    for i in range(0, math.floor(sweep_deg) + 1, step_deg):
        radians = math.radians(i)
        points.append(Point3D(radius * math.cos(radians), radius * math.sin(radians), 0.0))
    return points


def _validate_arc_inputs(center: Point3D, toward_a: Point3D, toward_b: Point3D) -> tuple[float, float]:
    """
    Check arc inputs in order; the first failing check wins.

    Returns:
        Tuple of (radius, sweep_degrees)

    Raises:
        CoincidentPointsError, RadiusTooSmallError, NegligibleAngleError,
        FullCircleError
    """
    dist_a = distance_between_points(center, toward_a)
    dist_b = distance_between_points(center, toward_b)
    if dist_a < MIN_ANCHOR_DISTANCE:
        raise CoincidentPointsError(
            f"Center and first direction point too close ({dist_a:.6g})"
        )
    if dist_b < MIN_ANCHOR_DISTANCE:
        raise CoincidentPointsError(
            f"Center and second direction point too close ({dist_b:.6g})"
        )

    radius = min(dist_a, dist_b) * ARC_RADIUS_FRACTION
    if radius < MIN_ARC_RADIUS:
        raise RadiusTooSmallError(f"Arc radius too small ({radius:.6g})")

    sweep = angle_between_vectors(subtract(toward_a, center), subtract(toward_b, center))
    if sweep < MIN_ARC_ANGLE_DEG:
        raise NegligibleAngleError(
            f"Angle too small ({sweep:.4f} < {MIN_ARC_ANGLE_DEG} degrees)"
        )
    if sweep > MAX_ARC_ANGLE_DEG:
        raise FullCircleError(
            f"Angle too large ({sweep:.4f} > {MAX_ARC_ANGLE_DEG} degrees)"
        )

    return radius, sweep


def build_arc(
    center: Point3D,
    toward_a: Point3D,
    toward_b: Point3D,
    name: str,
    provider: GeometryProvider | None = None,
    step_degrees: int = ARC_STEP_DEG,
) -> Result[Arc]:
    """
    Build the arc spanning the angle between center->toward_a and center->toward_b.

    Args:
        center: Arc center (intersection or fallback midpoint)
        toward_a: Point giving the start direction
        toward_b: Point giving the end direction
        name: Name to give the arc polyline
        provider: Geometry provider for frame alignment; default if None
        step_degrees: Angular resolution of the samples

    Returns:
        Ok(Arc) with floor(sweep) + 1 points at the default resolution,
        or Err with the first validation failure
    """
    try:
        radius, sweep = _validate_arc_inputs(center, toward_a, toward_b)
        local_points = sample_local_arc(radius, sweep, step_degrees)

        geometry = provider_or_default(provider)
        transform = geometry.align(
            _LOCAL_ORIGIN, _LOCAL_X, _LOCAL_Y,
            center, toward_a, toward_b,
        )
        world_points = tuple(Point3D(*geometry.apply(transform, p)) for p in local_points)
    except MeasurementError as e:
        return Err(e)

    return Ok(Arc(
        name=name,
        center=Point3D(*center),
        toward_a=Point3D(*toward_a),
        toward_b=Point3D(*toward_b),
        radius=radius,
        sweep=sweep,
        points=world_points,
    ))


def polyline_length(points: Sequence[Point3D]) -> float:
    """Sum of the segment lengths of a polyline."""
    return sum(
        distance_between_points(points[i], points[i + 1])
        for i in range(len(points) - 1)
    )


def point_at_distance(points: Sequence[Point3D], distance: float) -> Point3D:
    """
    Point at a given arc-length distance along a polyline.

    Distances outside [0, length] are clamped to the polyline ends.

    Raises:
        ValueError: If the polyline has no points
    """
    if not points:
        raise ValueError("Polyline has no points")
    if distance <= 0:
        return Point3D(*points[0])

    travelled = 0.0
    for i in range(len(points) - 1):
        segment = subtract(points[i + 1], points[i])
        seg_len = magnitude(segment)
        if seg_len > 0 and travelled + seg_len >= distance:
            return add(points[i], scale(segment, (distance - travelled) / seg_len))
        travelled += seg_len
    return Point3D(*points[-1])


def arc_midpoint(arc: Arc) -> Point3D:
    """
    Point halfway along the arc, used to anchor its label.

    Falls back to the middle sample by index when the arc has zero length.
    """
    length = polyline_length(arc.points)
    if length > 0:
        return point_at_distance(arc.points, length / 2)
    return Point3D(*arc.points[len(arc.points) // 2])


def attachment_point(line_a: LineLike, line_b: LineLike) -> Point3D:
    """Midpoint between the midpoints of two lines (label position without an arc)."""
    return midpoint(midpoint(line_a.p0, line_a.p1), midpoint(line_b.p0, line_b.p1))
