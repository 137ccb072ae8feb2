"""Tolerance classification of measured deviations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ..models.measurement import Measurement, ToleranceThresholds
from ..models.types import MeasurementKind, ToleranceStatus


def classify(deviation_abs: float, good: float, warning: float) -> ToleranceStatus:
    """
    Map an absolute deviation onto Good / Warning / Error.

    Threshold ordering is not checked; with good > warning any deviation
    above good is reported as Error.

    Args:
        deviation_abs: Absolute deviation from nominal
        good: Largest deviation still considered good
        warning: Largest deviation still considered a warning

    Returns:
        ToleranceStatus
    """
    if deviation_abs <= good:
        return ToleranceStatus.GOOD
    if deviation_abs <= warning:
        return ToleranceStatus.WARNING
    return ToleranceStatus.ERROR


def severity(status: ToleranceStatus) -> int:
    """Numeric severity: Good < Warning < Error."""
    return status.severity


def evaluate_measurement(
    kind: MeasurementKind,
    actual: float,
    nominal: float | None = None,
    thresholds: ToleranceThresholds | None = None,
    label: str = "",
) -> Measurement:
    """
    Build a Measurement, comparing against the nominal when one is given.

    Without a nominal only the actual value is recorded. With a nominal but
    no thresholds the deviation is recorded but left unclassified.

    Args:
        kind: Measurement kind
        actual: Measured value
        nominal: Expected value
        thresholds: Good / warning limits on |actual - nominal|
        label: Display label (e.g. "L1_2 / L2_5")

    Returns:
        Frozen Measurement
    """
    if nominal is None:
        return Measurement(kind=kind, actual=actual, label=label)

    deviation = actual - nominal
    status: ToleranceStatus | None = None
    if thresholds is not None:
        status = classify(abs(deviation), thresholds.good, thresholds.warning)

    return Measurement(
        kind=kind,
        actual=actual,
        nominal=nominal,
        deviation=deviation,
        status=status,
        label=label,
    )


def lookup_nominal(
    table: Mapping[str, float],
    name_a: str,
    name_b: str,
    default: float,
) -> float:
    """
    Nominal value for a pair, trying "a_b" then "b_a" before the default.

    Args:
        table: Nominal values keyed by "<name_a>_<name_b>"
        name_a: First entity name
        name_b: Second entity name
        default: Value used when neither key is present

    Returns:
        Nominal value
    """
    forward = f"{name_a}_{name_b}"
    if forward in table:
        return table[forward]
    backward = f"{name_b}_{name_a}"
    if backward in table:
        return table[backward]
    return default


def tolerance_band(thresholds: ToleranceThresholds) -> tuple[float, float]:
    """Symmetric (tol_min, tol_max) band reported alongside a measurement."""
    return (-thresholds.warning, thresholds.warning)


def thresholds_from_band(tol_max: float) -> ToleranceThresholds:
    """
    Thresholds for a measurement that only carries a symmetric band.

    The good limit is a third of the band; the warning limit is the band.
    """
    band = abs(tol_max)
    return ToleranceThresholds(good=band / 3, warning=band)


@dataclass(slots=True)
class StatusSummary:
    """Counts of measurements per tolerance status."""

    total: int = 0
    good: int = 0
    warning: int = 0
    error: int = 0
    unclassified: int = 0
    by_kind: dict[MeasurementKind, int] = field(default_factory=dict)

    @property
    def all_good(self) -> bool:
        return self.warning == 0 and self.error == 0

    @property
    def verdict(self) -> str:
        if self.error > 0:
            return f"{self.error} measurements are outside acceptable tolerances!"
        if self.warning > 0:
            return f"{self.warning} measurements are in warning range"
        return "All measurements are within acceptable tolerances!"


def summarize(measurements: Iterable[Measurement]) -> StatusSummary:
    """Count measurements by status and by kind."""
    summary = StatusSummary()
    for m in measurements:
        summary.total += 1
        summary.by_kind[m.kind] = summary.by_kind.get(m.kind, 0) + 1
        if m.status is ToleranceStatus.GOOD:
            summary.good += 1
        elif m.status is ToleranceStatus.WARNING:
            summary.warning += 1
        elif m.status is ToleranceStatus.ERROR:
            summary.error += 1
        else:
            summary.unclassified += 1
    return summary
