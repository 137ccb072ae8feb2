"""Data models for measurements and scene primitives."""

from .types import (
    Point3D,
    Vector3D,
    MeasurementKind,
    ToleranceStatus,
    SelectionStrategy,
    CrossPairStrategy,
)
from .entities import LineLike, SphereLike, LineSegment, Sphere
from .measurement import (
    ToleranceThresholds,
    Measurement,
    PerpendicularResult,
    ArcAnchors,
    Arc,
    PairSelection,
)
from .presets import MeasurementPreset, PresetDict, validate_preset_values

__all__ = [
    'Point3D',
    'Vector3D',
    'MeasurementKind',
    'ToleranceStatus',
    'SelectionStrategy',
    'CrossPairStrategy',
    'LineLike',
    'SphereLike',
    'LineSegment',
    'Sphere',
    'ToleranceThresholds',
    'Measurement',
    'PerpendicularResult',
    'ArcAnchors',
    'Arc',
    'PairSelection',
    'MeasurementPreset',
    'PresetDict',
    'validate_preset_values',
]
