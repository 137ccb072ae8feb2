"""Measurement data models."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Point3D, MeasurementKind, ToleranceStatus, SelectionStrategy


@dataclass(frozen=True, slots=True)
class ToleranceThresholds:
    """Good / warning limits on the absolute deviation.

    No ordering is enforced between the two limits.
    """

    good: float
    warning: float

    @property
    def is_ordered(self) -> bool:
        """True when good <= warning (the only sensible configuration)."""
        return self.good <= self.warning


@dataclass(frozen=True, slots=True)
class Measurement:
    """One measured value, optionally compared against a nominal."""

    kind: MeasurementKind
    actual: float
    nominal: float | None = None
    deviation: float | None = None  # actual - nominal
    status: ToleranceStatus | None = None
    label: str = ""

    @property
    def is_classified(self) -> bool:
        return self.status is not None

    def __repr__(self) -> str:
        parts = [f"{self.kind.value}", f"actual={self.actual:.4f}"]
        if self.nominal is not None:
            parts.append(f"nominal={self.nominal:.4f}")
        if self.status is not None:
            parts.append(self.status.name)
        label = f"{self.label}: " if self.label else ""
        return f"Measurement({label}{', '.join(parts)})"


@dataclass(frozen=True, slots=True)
class PerpendicularResult:
    """Foot of the perpendicular from a point onto an infinite line."""

    foot: Point3D
    distance: float
    parameter: float  # foot = p0 + parameter * (p1 - p0)


@dataclass(frozen=True, slots=True)
class ArcAnchors:
    """Center and two direction references for an angle arc."""

    center: Point3D
    toward_a: Point3D
    toward_b: Point3D
    used_fallback: bool = False  # True when no intersection was available


@dataclass(frozen=True, slots=True)
class Arc:
    """Sampled circular arc polyline in world space (visualization only)."""

    name: str
    center: Point3D
    toward_a: Point3D
    toward_b: Point3D
    radius: float
    sweep: float  # Degrees between center->toward_a and center->toward_b
    points: tuple[Point3D, ...]

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True, slots=True)
class PairSelection:
    """Unordered pair of entity names produced by a selection strategy."""

    entity_a: str
    entity_b: str
    strategy: SelectionStrategy

    @property
    def key(self) -> tuple[str, str]:
        """Canonical key used for de-duplication (sorted names)."""
        a, b = sorted((self.entity_a, self.entity_b))
        return (a, b)

    @property
    def names(self) -> tuple[str, str]:
        return (self.entity_a, self.entity_b)
