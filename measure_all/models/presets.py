"""Measurement preset models (curated pairs, nominals and thresholds)."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypedDict

from .measurement import ToleranceThresholds
from .types import MeasurementKind


class PresetDict(TypedDict):
    """Type definition for MeasurementPreset serialization."""

    id: str
    name: str
    kind: str
    pairs: list[list[str]]
    nominals: dict[str, float]
    good: float
    warning: float
    notes: str


def validate_preset_values(
    good: float | None = None,
    warning: float | None = None,
    nominals: dict[str, float] | None = None,
) -> None:
    """Validate preset numeric values.

    Args:
        good: Good threshold (must be non-negative if provided)
        warning: Warning threshold (must be non-negative if provided)
        nominals: Nominal values (each must be finite if provided)

    Raises:
        ValueError: If any value violates its constraint
    """
    if good is not None and good < 0:
        raise ValueError(f"good threshold cannot be negative, got {good}")
    if warning is not None and warning < 0:
        raise ValueError(f"warning threshold cannot be negative, got {warning}")
    if nominals is not None:
        for key, value in nominals.items():
            if math.isnan(value) or math.isinf(value):
                raise ValueError(f"nominal '{key}' must be finite, got {value}")


@dataclass(slots=True)
class MeasurementPreset:
    """
    A curated measurement setup for one measurement kind.

    Attributes:
        id: Unique identifier for the preset
        name: Display name (e.g., "Default Angle Set")
        kind: Measurement kind the pairs are meant for
        pairs: Entity name pairs measured by the DEFAULT strategy
        nominals: Nominal values keyed by "<name_a>_<name_b>"
        good: Good threshold on |deviation|
        warning: Warning threshold on |deviation|
        notes: Optional notes about the preset
    """

    id: str
    name: str
    kind: MeasurementKind
    pairs: list[tuple[str, str]] = field(default_factory=list)
    nominals: dict[str, float] = field(default_factory=dict)
    good: float = 0.0
    warning: float = 0.0
    notes: str = ""

    def __post_init__(self) -> None:
        """Validate thresholds and nominals."""
        validate_preset_values(good=self.good, warning=self.warning, nominals=self.nominals)

    def __repr__(self) -> str:
        return f"MeasurementPreset(name={self.name!r}, kind={self.kind.value}, pairs={len(self.pairs)})"

    @property
    def thresholds(self) -> ToleranceThresholds:
        return ToleranceThresholds(good=self.good, warning=self.warning)

    def to_dict(self) -> PresetDict:
        """Convert to dictionary for JSON serialization."""
        return PresetDict(
            id=self.id,
            name=self.name,
            kind=self.kind.value,
            pairs=[[a, b] for a, b in self.pairs],
            nominals=dict(self.nominals),
            good=self.good,
            warning=self.warning,
            notes=self.notes,
        )

    @classmethod
    def from_dict(cls, data: PresetDict) -> MeasurementPreset:
        """Create MeasurementPreset from dictionary.

        Pairs that are not exactly two names are dropped. Negative
        thresholds are clamped to zero.

        Raises:
            TypeError: If the entry or its nominals are not mappings
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"preset entry must be an object, got {type(data).__name__}")
        raw_nominals = data.get('nominals', {})
        if not isinstance(raw_nominals, Mapping):
            raise TypeError(f"nominals must be an object, got {type(raw_nominals).__name__}")

        pairs = [
            (str(pair[0]), str(pair[1]))
            for pair in data.get('pairs', [])
            if len(pair) == 2
        ]
        nominals = {str(k): float(v) for k, v in raw_nominals.items()}

        return cls(
            id=data['id'],
            name=data['name'],
            kind=MeasurementKind(data['kind']),
            pairs=pairs,
            nominals=nominals,
            good=max(0.0, float(data.get('good', 0.0))),
            warning=max(0.0, float(data.get('warning', 0.0))),
            notes=data.get('notes', ''),
        )
