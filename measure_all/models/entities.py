"""Named scene primitives consumed by the measurement kernel.

The host application owns the real objects. These dataclasses and
Protocols describe the minimal surface the kernel reads from them, so
adapters (and tests) can pass anything with the same shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .types import Point3D


class LineLike(Protocol):
    """Protocol for a named segment with exactly two ordered endpoints."""

    @property
    def name(self) -> str: ...

    @property
    def p0(self) -> Point3D: ...

    @property
    def p1(self) -> Point3D: ...


class SphereLike(Protocol):
    """Protocol for a named sphere; only its center is measured."""

    @property
    def name(self) -> str: ...

    @property
    def center(self) -> Point3D: ...


@dataclass(frozen=True, slots=True)
class LineSegment:
    """A named line segment between two points."""

    name: str
    p0: Point3D
    p1: Point3D

    @property
    def endpoints(self) -> tuple[Point3D, Point3D]:
        return (self.p0, self.p1)

    def __repr__(self) -> str:
        return f"LineSegment({self.name!r}, {tuple(self.p0)} -> {tuple(self.p1)})"


@dataclass(frozen=True, slots=True)
class Sphere:
    """A named sphere. Read-only input."""

    name: str
    center: Point3D
