"""Formatting utilities for measurements and display."""

from __future__ import annotations

import math

from ..models.measurement import Measurement
from ..models.types import MeasurementKind
from .classification import StatusSummary

# Decimal places used per kind when none is given
_DEFAULT_DECIMALS: dict[MeasurementKind, int] = {
    MeasurementKind.LENGTH: 4,
    MeasurementKind.ANGLE: 2,
    MeasurementKind.PERPENDICULAR: 3,
}

_UNIT_SYMBOLS: dict[MeasurementKind, str] = {
    MeasurementKind.LENGTH: '',
    MeasurementKind.ANGLE: '°',
    MeasurementKind.PERPENDICULAR: '',
}


def format_value(value: float, decimal_places: int, signed: bool = False) -> str:
    """
    Format a number with a fixed number of decimals.

    Args:
        value: Value to format
        decimal_places: Number of decimal places
        signed: Always show the sign (used for deviations)

    Returns:
        Formatted string like "10.50" or "+0.03"
        Returns "ERROR" if value is NaN or infinity
    """
    # Guard against invalid float values
    if math.isnan(value) or math.isinf(value):
        return "ERROR"

    if signed:
        return f"{value:+.{decimal_places}f}"
    return f"{value:.{decimal_places}f}"


def format_measurement(measurement: Measurement, decimal_places: int | None = None) -> str:
    """
    One-line description of a measurement.

    Examples:
        "L1_2 / L1_4: 89.80°"
        "L1_2 / L1_4: 89.80° (nominal 90.00°, dev -0.20°, GOOD)"

    Args:
        measurement: Measurement to describe
        decimal_places: Override the per-kind default precision

    Returns:
        Formatted string
    """
    places = _DEFAULT_DECIMALS[measurement.kind] if decimal_places is None else decimal_places
    unit = _UNIT_SYMBOLS[measurement.kind]
    label = measurement.label or measurement.kind.value.capitalize()

    text = f"{label}: {format_value(measurement.actual, places)}{unit}"
    if measurement.nominal is None:
        return text

    details = [f"nominal {format_value(measurement.nominal, places)}{unit}"]
    if measurement.deviation is not None:
        details.append(f"dev {format_value(measurement.deviation, places, signed=True)}{unit}")
    if measurement.status is not None:
        details.append(measurement.status.name)
    return f"{text} ({', '.join(details)})"


def format_summary(summary: StatusSummary) -> str:
    """
    Multi-line summary: counts per kind, counts per status, and the verdict.

    Kinds with no measurements are omitted.
    """
    lines: list[str] = [f"Total measurements: {summary.total}"]
    for kind in MeasurementKind:
        count = summary.by_kind.get(kind, 0)
        if count:
            lines.append(f"  {kind.value.capitalize()}: {count}")

    lines.append(f"Good: {summary.good}")
    lines.append(f"Warning: {summary.warning}")
    lines.append(f"Error: {summary.error}")
    if summary.unclassified:
        lines.append(f"Unclassified: {summary.unclassified}")

    lines.append(summary.verdict)
    return "\n".join(lines)
