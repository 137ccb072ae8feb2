"""
Shared test helpers for MeasureAll tests.

This module contains mock classes and utilities used across multiple test files.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from measure_all.models.types import Point3D


@dataclass
class MockLine:
    """Mock host line for testing without a CAD document.

    Satisfies LineLike Protocol from models.entities.
    """

    name: str
    p0: Point3D
    p1: Point3D


@dataclass
class MockSphere:
    """Mock host sphere. Satisfies SphereLike Protocol."""

    name: str
    center: Point3D


@dataclass
class FakeProvider:
    """Geometry provider with canned intersections and a pure translation.

    align() returns the translation taking src_origin to dst_origin,
    apply() adds it. Every call is recorded for assertions.
    """

    intersections: list[Point3D] = field(default_factory=list)
    intersect_calls: list[tuple[str, str]] = field(default_factory=list)
    align_calls: list[tuple[Point3D, ...]] = field(default_factory=list)

    def intersect(self, line_a, line_b) -> list[Point3D]:
        self.intersect_calls.append((line_a.name, line_b.name))
        return list(self.intersections)

    def align(self, src_origin, src_x, src_y, dst_origin, dst_x, dst_y):
        self.align_calls.append((src_origin, src_x, src_y, dst_origin, dst_x, dst_y))
        return tuple(d - s for d, s in zip(dst_origin, src_origin))

    def apply(self, transform, point) -> Point3D:
        return Point3D(*(p + t for p, t in zip(point, transform)))


def line(name: str, start: tuple[float, float, float], end: tuple[float, float, float]) -> MockLine:
    """Build a MockLine from plain tuples."""
    return MockLine(name, Point3D(*start), Point3D(*end))


def sphere(name: str, center: tuple[float, float, float]) -> MockSphere:
    """Build a MockSphere from a plain tuple."""
    return MockSphere(name, Point3D(*center))


def points_close(p: tuple[float, ...], q: tuple[float, ...], tol: float = 1e-9) -> bool:
    """True when two points agree coordinate-wise within tol."""
    return all(math.isclose(a, b, abs_tol=tol) for a, b in zip(p, q))
