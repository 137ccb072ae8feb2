"""Default geometry provider built on numpy and scipy rotations."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy.spatial.transform import Rotation

from ..models.entities import LineLike
from ..models.types import Point3D
from ..core.results import CoincidentPointsError
from ..core.tolerances import (
    ZERO_MAGNITUDE,
    INTERSECTION_DISTANCE,
    SEGMENT_PARAM_SLACK,
)


@dataclass(frozen=True)
class RigidTransform:
    """Rotation followed by translation: x -> R @ x + t."""

    rotation: Rotation
    translation: np.ndarray

    def apply(self, points: np.ndarray) -> np.ndarray:
        return self.rotation.apply(points) + self.translation


def _as_array(p: Point3D) -> np.ndarray:
    return np.array([p[0], p[1], p[2]], dtype='float64')


def _any_perpendicular(u: np.ndarray) -> np.ndarray:
    """Unit vector perpendicular to unit vector u (deterministic choice)."""
    # Cross with the world axis least aligned with u
    axis = np.zeros(3)
    axis[int(np.argmin(np.abs(u)))] = 1.0
    v = np.cross(u, axis)
    return v / np.linalg.norm(v)


def orthonormal_frame(origin: np.ndarray, p_x: np.ndarray, p_y: np.ndarray) -> np.ndarray:
    """
    Right-handed orthonormal frame from three points.

    The first axis points from origin to p_x, the second lies in the plane
    of the three points on the p_y side, the third is their cross product.
    When p_y is collinear with the first axis, any perpendicular is used.

    Returns:
        3x3 matrix whose columns are the frame axes

    Raises:
        CoincidentPointsError: If p_x coincides with origin
    """
    e1 = p_x - origin
    n1 = np.linalg.norm(e1)
    if n1 < ZERO_MAGNITUDE:
        raise CoincidentPointsError("Frame x-point coincides with origin")
    e1 = e1 / n1

    w = p_y - origin
    e2 = w - np.dot(w, e1) * e1
    n2 = np.linalg.norm(e2)
    if n2 <= 1e-12 * max(np.linalg.norm(w), 1.0):
        e2 = _any_perpendicular(e1)
    else:
        e2 = e2 / n2

    e3 = np.cross(e1, e2)
    return np.column_stack((e1, e2, e3))


class NumpyGeometryProvider:
    """Geometry provider used when the host does not supply one.

    Intersections are computed between the finite segments; parallel,
    skew and non-overlapping segments report no intersection.
    """

    def __init__(
        self,
        intersection_distance: float = INTERSECTION_DISTANCE,
        param_slack: float = SEGMENT_PARAM_SLACK,
    ) -> None:
        self._intersection_distance = intersection_distance
        self._param_slack = param_slack

    def intersect(self, line_a: LineLike, line_b: LineLike) -> list[Point3D]:
        p = _as_array(line_a.p0)
        q = _as_array(line_b.p0)
        d1 = _as_array(line_a.p1) - p
        d2 = _as_array(line_b.p1) - q

        len1 = np.linalg.norm(d1)
        len2 = np.linalg.norm(d2)
        if len1 < ZERO_MAGNITUDE or len2 < ZERO_MAGNITUDE:
            return []

        # Parallel (or collinear) segments have no single meeting point
        if np.linalg.norm(np.cross(d1, d2)) <= 1e-12 * len1 * len2:
            return []

        a = np.column_stack((d1, -d2))
        (s, t), *_ = np.linalg.lstsq(a, q - p, rcond=None)
        on_a = p + s * d1
        on_b = q + t * d2

        # Skew lines never meet
        if np.linalg.norm(on_a - on_b) > self._intersection_distance:
            return []

        lo = -self._param_slack
        hi = 1.0 + self._param_slack
        if not (lo <= s <= hi and lo <= t <= hi):
            return []

        hit = 0.5 * (on_a + on_b)
        return [Point3D(float(hit[0]), float(hit[1]), float(hit[2]))]

    def align(
        self,
        src_origin: Point3D,
        src_x: Point3D,
        src_y: Point3D,
        dst_origin: Point3D,
        dst_x: Point3D,
        dst_y: Point3D,
    ) -> RigidTransform:
        """
        Rigid transform mapping the source frame onto the destination frame.

        The source origin lands exactly on the destination origin, the
        source x direction on the destination x direction, and the source
        xy-plane on the destination plane (same side of the x axis).
        """
        src_o = _as_array(src_origin)
        dst_o = _as_array(dst_origin)
        src_frame = orthonormal_frame(src_o, _as_array(src_x), _as_array(src_y))
        dst_frame = orthonormal_frame(dst_o, _as_array(dst_x), _as_array(dst_y))

        rotation = Rotation.from_matrix(dst_frame @ src_frame.T)
        translation = dst_o - rotation.apply(src_o)
        return RigidTransform(rotation=rotation, translation=translation)

    def apply(self, transform: RigidTransform, point: Point3D) -> Point3D:
        moved = transform.apply(_as_array(point))
        return Point3D(float(moved[0]), float(moved[1]), float(moved[2]))
