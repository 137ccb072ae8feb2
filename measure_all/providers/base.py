"""Geometry provider capability required by the measurement kernel.

The host application (or a numerical library) supplies planar
intersection and three-point frame alignment. The kernel only talks to
this Protocol, never to concrete host types.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..models.entities import LineLike
from ..models.types import Point3D


class GeometryProvider(Protocol):
    """Protocol for objects that can intersect lines and align frames.

    This enables testing with fake providers and plugging in a host
    application's own geometry engine through an adapter.
    """

    def intersect(self, line_a: LineLike, line_b: LineLike) -> list[Point3D]:
        """Intersection points of two coplanar segments (possibly empty)."""
        ...

    def align(
        self,
        src_origin: Point3D,
        src_x: Point3D,
        src_y: Point3D,
        dst_origin: Point3D,
        dst_x: Point3D,
        dst_y: Point3D,
    ) -> Any:
        """Transform taking the source frame points onto the destination frame."""
        ...

    def apply(self, transform: Any, point: Point3D) -> Point3D:
        """Apply a transform returned by align() to one point."""
        ...
