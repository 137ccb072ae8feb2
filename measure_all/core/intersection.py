"""Arc anchor resolution for two lines.

Finds where two measurement lines meet so an angle arc can be drawn
around that point. Lines that never meet (parallel, skew or simply too
short) fall back to the midpoint of their closest endpoints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.entities import LineLike
from ..models.measurement import ArcAnchors
from ..models.types import Point3D
from .geometry import distance_between_points, midpoint
from .results import IntersectionUnavailable

if TYPE_CHECKING:
    from ..providers.base import GeometryProvider


def provider_or_default(provider: GeometryProvider | None) -> GeometryProvider:
    """Return the given provider, or the shared default one."""
    if provider is not None:
        return provider
    from ..providers import get_default_provider
    return get_default_provider()


def find_intersection(
    line_a: LineLike,
    line_b: LineLike,
    provider: GeometryProvider,
) -> Point3D:
    """
    Ask the provider where two lines meet.

    When the provider reports several points the first one is used;
    no ordering is guaranteed upstream.

    Raises:
        IntersectionUnavailable: If the provider reports no intersection
    """
    points = provider.intersect(line_a, line_b)
    if not points:
        raise IntersectionUnavailable(
            f"No intersection between '{line_a.name}' and '{line_b.name}'"
        )
    return Point3D(*points[0])


def farthest_endpoint(line: LineLike, origin: Point3D) -> Point3D:
    """Endpoint of the line farther from origin (p1 wins a tie)."""
    dist_start = distance_between_points(origin, line.p0)
    dist_end = distance_between_points(origin, line.p1)
    return line.p0 if dist_start > dist_end else line.p1


def closest_endpoint_anchors(line_a: LineLike, line_b: LineLike) -> ArcAnchors:
    """
    Fallback anchors for lines without an intersection.

    All four endpoint pairings are compared (start-start, start-end,
    end-start, end-end). The closest pair's midpoint becomes the center and
    the opposite endpoint of each line becomes its direction reference.
    The first pairing wins a tie.
    """
    candidates = [
        (line_a.p0, line_b.p0, line_a.p1, line_b.p1),
        (line_a.p0, line_b.p1, line_a.p1, line_b.p0),
        (line_a.p1, line_b.p0, line_a.p0, line_b.p1),
        (line_a.p1, line_b.p1, line_a.p0, line_b.p0),
    ]

    best = candidates[0]
    min_distance = distance_between_points(best[0], best[1])
    for candidate in candidates[1:]:
        d = distance_between_points(candidate[0], candidate[1])
        if d < min_distance:
            min_distance = d
            best = candidate

    close_a, close_b, far_a, far_b = best
    return ArcAnchors(
        center=midpoint(close_a, close_b),
        toward_a=Point3D(*far_a),
        toward_b=Point3D(*far_b),
        used_fallback=True,
    )


def resolve_arc_anchors(
    line_a: LineLike,
    line_b: LineLike,
    provider: GeometryProvider | None = None,
) -> ArcAnchors:
    """
    Center and direction points for the arc spanning the angle between two lines.

    Primary path: the provider's first intersection point is the center and
    each line's endpoint farther from it is the direction reference.
    Fallback path: see closest_endpoint_anchors().

    Args:
        line_a: First line
        line_b: Second line
        provider: Geometry provider; the default numpy provider if None

    Returns:
        ArcAnchors (used_fallback tells which path was taken)
    """
    geometry = provider_or_default(provider)
    try:
        center = find_intersection(line_a, line_b, geometry)
    except IntersectionUnavailable:
        return closest_endpoint_anchors(line_a, line_b)

    return ArcAnchors(
        center=center,
        toward_a=Point3D(*farthest_endpoint(line_a, center)),
        toward_b=Point3D(*farthest_endpoint(line_b, center)),
    )
