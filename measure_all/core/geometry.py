"""3D vector math and geometry utilities."""

from __future__ import annotations

import math

from ..models.types import Vector3D, Point3D
from .results import DegenerateLineError
from .tolerances import ZERO_MAGNITUDE


def subtract(p: Vector3D, q: Vector3D) -> Vector3D:
    """
    Calculate the vector from q to p (p - q).

    Args:
        p: End point or vector (x, y, z)
        q: Start point or vector (x, y, z)

    Returns:
        Difference vector (x, y, z)
    """
    return (p[0] - q[0], p[1] - q[1], p[2] - q[2])


def add(p: Vector3D, v: Vector3D) -> Point3D:
    """Offset point p by vector v."""
    return Point3D(p[0] + v[0], p[1] + v[1], p[2] + v[2])


def scale(v: Vector3D, factor: float) -> Vector3D:
    """Multiply a vector by a scalar."""
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def dot_product(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the dot product of two 3D vectors.

    Args:
        v1: First vector (x, y, z)
        v2: Second vector (x, y, z)

    Returns:
        Scalar dot product
    """
    return v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]


def cross_product(v1: Vector3D, v2: Vector3D) -> Vector3D:
    """
    Calculate the cross product of two 3D vectors.

    Args:
        v1: First vector (x, y, z)
        v2: Second vector (x, y, z)

    Returns:
        Cross product vector (x, y, z)
    """
    return (
        v1[1] * v2[2] - v1[2] * v2[1],
        v1[2] * v2[0] - v1[0] * v2[2],
        v1[0] * v2[1] - v1[1] * v2[0]
    )


def magnitude(v: Vector3D) -> float:
    """
    Calculate the magnitude (length) of a 3D vector.

    Args:
        v: Vector (x, y, z)

    Returns:
        Scalar magnitude, never negative
    """
    return math.sqrt(v[0]**2 + v[1]**2 + v[2]**2)


def distance_between_points(p1: Point3D, p2: Point3D) -> float:
    """
    Calculate the Euclidean distance between two 3D points.

    Args:
        p1: First point (x, y, z)
        p2: Second point (x, y, z)

    Returns:
        Distance between points
    """
    return magnitude(subtract(p2, p1))


def midpoint(p1: Point3D, p2: Point3D) -> Point3D:
    """Point halfway between p1 and p2."""
    return Point3D(
        0.5 * (p1[0] + p2[0]),
        0.5 * (p1[1] + p2[1]),
        0.5 * (p1[2] + p2[2]),
    )


def _safe_magnitude_product(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the product of magnitudes, raising if either vector has zero length.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        Product of magnitudes (mag1 * mag2)

    Raises:
        DegenerateLineError: If either vector has zero or near-zero length
    """
    mag1 = magnitude(v1)
    mag2 = magnitude(v2)

    if mag1 < ZERO_MAGNITUDE:
        raise DegenerateLineError(
            f"First vector has zero length (magnitude={mag1}): {v1}"
        )
    if mag2 < ZERO_MAGNITUDE:
        raise DegenerateLineError(
            f"Second vector has zero length (magnitude={mag2}): {v2}"
        )

    return mag1 * mag2


def angle_between_vectors(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the unsigned angle between two vectors in degrees.

    This is the full angle between the vectors, not folded to acute.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        Angle in degrees (0-180)

    Raises:
        DegenerateLineError: If either vector has zero length
    """
    _safe_magnitude_product(v1, v2)
    # atan2 form stays accurate near 0 and 180 degrees
    sin_term = magnitude(cross_product(v1, v2))
    return math.degrees(math.atan2(sin_term, dot_product(v1, v2)))


def fold_to_acute(angle_deg: float) -> float:
    """Return the smaller of an angle and its 180 degree supplement."""
    return min(angle_deg, 180.0 - angle_deg)
