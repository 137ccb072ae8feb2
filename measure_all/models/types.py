"""Type definitions for measurement geometry."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, TypeAlias


class Point3D(NamedTuple):
    """Immutable 3D point (x, y, z) in document units."""

    x: float
    y: float
    z: float


# Free vectors are plain coordinate triples
Vector3D: TypeAlias = tuple[float, float, float]


class MeasurementKind(Enum):
    """What a measurement row reports."""

    LENGTH = 'length'
    ANGLE = 'angle'
    PERPENDICULAR = 'perpendicular'


class ToleranceStatus(Enum):
    """Three-tier classification of a deviation, ordered by severity."""

    GOOD = 0
    WARNING = 1
    ERROR = 2

    @property
    def severity(self) -> int:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ToleranceStatus):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ToleranceStatus):
            return NotImplemented
        return self.value <= other.value


class SelectionStrategy(Enum):
    """How candidate pairs are generated from one entity collection."""

    DEFAULT = 'default'
    SEQUENTIAL = 'sequential'
    CUSTOM = 'custom'


class CrossPairStrategy(Enum):
    """How source-to-target pairs are generated (e.g. sphere to line)."""

    DEFAULT = 'default'
    ALL_TO_FIRST = 'all_to_first'
    CUSTOM = 'custom'
