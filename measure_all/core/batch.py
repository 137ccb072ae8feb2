"""Batch measurement runners.

Each runner measures a list of pairs independently. A pair that fails
(missing entity, degenerate line, arc that cannot be drawn) is logged and
recorded on its outcome; the remaining pairs are still processed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar, Union

from .. import config
from ..lib.measureUtils import log
from ..models.entities import LineLike, SphereLike
from ..models.measurement import (
    Arc,
    Measurement,
    PairSelection,
    PerpendicularResult,
    ToleranceThresholds,
)
from ..models.types import MeasurementKind
from .angles import compute_angle, compute_length
from .arc_geometry import build_arc
from .classification import StatusSummary, evaluate_measurement, lookup_nominal, summarize
from .intersection import resolve_arc_anchors
from .perpendicular import compute_perpendicular
from .results import MeasurementError

if TYPE_CHECKING:
    from ..providers.base import GeometryProvider

_E = TypeVar('_E', LineLike, SphereLike)

PairRef = Union[PairSelection, tuple[str, str]]


@dataclass(slots=True)
class PairOutcome:
    """What happened to one pair of a batch."""

    names: tuple[str, str]
    measurement: Measurement | None = None
    arc: Arc | None = None
    perpendicular: PerpendicularResult | None = None
    error: MeasurementError | None = None
    arc_error: MeasurementError | None = None
    skipped_reason: str = ""

    @property
    def ok(self) -> bool:
        return self.measurement is not None


@dataclass(slots=True)
class BatchReport:
    """Outcomes of one batch, in pair order."""

    kind: MeasurementKind
    outcomes: list[PairOutcome] = field(default_factory=list)

    @property
    def measurements(self) -> list[Measurement]:
        return [o.measurement for o in self.outcomes if o.measurement is not None]

    @property
    def failures(self) -> list[PairOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def summary(self) -> StatusSummary:
        return summarize(self.measurements)


def index_by_name(entities: Iterable[_E]) -> dict[str, _E]:
    """Map names to entities; the first entity with a name wins."""
    index: dict[str, _E] = {}
    for entity in entities:
        index.setdefault(entity.name, entity)
    return index


def _pair_names(pair: PairRef) -> tuple[str, str]:
    if isinstance(pair, PairSelection):
        return pair.names
    return (pair[0], pair[1])


def _check_thresholds(thresholds: ToleranceThresholds | None, kind: MeasurementKind) -> None:
    if thresholds is not None and not thresholds.is_ordered:
        log(
            f"{kind.value}: good threshold ({thresholds.good}) is larger than "
            f"warning threshold ({thresholds.warning})",
            logging.WARNING,
        )


def _nominal_for(
    nominals: Mapping[str, float] | None,
    a: str,
    b: str,
    default: float,
) -> float | None:
    # No nominal table means simple measurement mode
    if nominals is None:
        return None
    return lookup_nominal(nominals, a, b, default)


def _missing(names: tuple[str, str], index: Mapping[str, object], other: Mapping[str, object] | None = None) -> str:
    a, b = names
    lookup_b = other if other is not None else index
    missing = [n for n, source in ((a, index), (b, lookup_b)) if n not in source]
    if missing:
        return f"Entity not found: {', '.join(missing)}"
    return ""


def run_length_measurements(
    spheres: Iterable[SphereLike],
    pairs: Iterable[PairRef],
    nominals: Mapping[str, float] | None = None,
    thresholds: ToleranceThresholds | None = None,
    default_nominal: float = config.DEFAULT_NOMINAL_LENGTH,
) -> BatchReport:
    """
    Measure center-to-center distances between sphere pairs.

    Args:
        spheres: Available spheres
        pairs: Sphere name pairs to measure
        nominals: Nominal lengths keyed "<a>_<b>"; None for simple mode
        thresholds: Good / warning limits; None leaves results unclassified
        default_nominal: Nominal used for pairs missing from the table

    Returns:
        BatchReport with one outcome per pair
    """
    _check_thresholds(thresholds, MeasurementKind.LENGTH)
    index = index_by_name(spheres)
    report = BatchReport(kind=MeasurementKind.LENGTH)

    for pair in pairs:
        names = _pair_names(pair)
        reason = _missing(names, index)
        if reason:
            log(f"Length {names[0]} / {names[1]} skipped: {reason}", logging.WARNING)
            report.outcomes.append(PairOutcome(names=names, skipped_reason=reason))
            continue

        a, b = names
        actual = compute_length(index[a].center, index[b].center)
        measurement = evaluate_measurement(
            MeasurementKind.LENGTH,
            actual,
            _nominal_for(nominals, a, b, default_nominal),
            thresholds,
            label=f"{a} / {b}",
        )
        log(f"Length {a} / {b}: {actual:.4f}", logging.DEBUG)
        report.outcomes.append(PairOutcome(names=names, measurement=measurement))

    return report


def run_angle_measurements(
    lines: Iterable[LineLike],
    pairs: Iterable[PairRef],
    nominals: Mapping[str, float] | None = None,
    thresholds: ToleranceThresholds | None = None,
    default_nominal: float = config.DEFAULT_NOMINAL_ANGLE_DEG,
    provider: GeometryProvider | None = None,
    with_arcs: bool = True,
    step_degrees: int = config.ARC_STEP_DEGREES,
) -> BatchReport:
    """
    Measure acute angles between line pairs and build their arcs.

    A pair whose angle cannot be computed is recorded as failed. A pair
    whose arc cannot be drawn keeps its measurement and records arc_error.

    Args:
        lines: Available lines
        pairs: Line name pairs to measure
        nominals: Nominal angles keyed "<a>_<b>"; None for simple mode
        thresholds: Good / warning limits in degrees
        default_nominal: Nominal used for pairs missing from the table
        provider: Geometry provider for intersections and arc placement
        with_arcs: Build the visual arc for each measured pair
        step_degrees: Angular resolution of the arcs

    Returns:
        BatchReport with one outcome per pair
    """
    _check_thresholds(thresholds, MeasurementKind.ANGLE)
    index = index_by_name(lines)
    report = BatchReport(kind=MeasurementKind.ANGLE)

    for pair in pairs:
        names = _pair_names(pair)
        reason = _missing(names, index)
        if reason:
            log(f"Angle {names[0]} / {names[1]} skipped: {reason}", logging.WARNING)
            report.outcomes.append(PairOutcome(names=names, skipped_reason=reason))
            continue

        a, b = names
        line_a, line_b = index[a], index[b]
        angle = compute_angle(line_a, line_b)
        if not angle.is_ok:
            log(f"Angle {a} / {b} failed: {angle.error}", logging.WARNING)
            report.outcomes.append(PairOutcome(names=names, error=angle.error))
            continue

        outcome = PairOutcome(
            names=names,
            measurement=evaluate_measurement(
                MeasurementKind.ANGLE,
                angle.value,
                _nominal_for(nominals, a, b, default_nominal),
                thresholds,
                label=f"{a} / {b}",
            ),
        )

        if with_arcs:
            anchors = resolve_arc_anchors(line_a, line_b, provider)
            if anchors.used_fallback:
                log(f"Angle {a} / {b}: lines do not meet, using closest endpoints", logging.DEBUG)
            arc = build_arc(
                anchors.center,
                anchors.toward_a,
                anchors.toward_b,
                config.ARC_NAME_FORMAT.format(a=a, b=b),
                provider,
                step_degrees,
            )
            if arc.is_ok:
                outcome.arc = arc.value
            else:
                log(f"Could not create arc for {a} / {b}: {arc.error}", logging.WARNING)
                outcome.arc_error = arc.error

        log(f"Angle {a} / {b}: {angle.value:.2f} deg", logging.DEBUG)
        report.outcomes.append(outcome)

    return report


def run_perpendicular_measurements(
    spheres: Iterable[SphereLike],
    lines: Iterable[LineLike],
    pairs: Iterable[tuple[str, str]],
    nominals: Mapping[str, float] | None = None,
    thresholds: ToleranceThresholds | None = None,
    default_nominal: float = config.DEFAULT_NOMINAL_PERPENDICULAR,
) -> BatchReport:
    """
    Measure perpendicular distances from sphere centers to lines.

    Args:
        spheres: Available spheres
        lines: Available lines
        pairs: (sphere_name, line_name) pairs
        nominals: Nominal distances keyed "<sphere>_<line>"; None for simple mode
        thresholds: Good / warning limits
        default_nominal: Nominal used for pairs missing from the table

    Returns:
        BatchReport with one outcome per pair
    """
    _check_thresholds(thresholds, MeasurementKind.PERPENDICULAR)
    sphere_index = index_by_name(spheres)
    line_index = index_by_name(lines)
    report = BatchReport(kind=MeasurementKind.PERPENDICULAR)

    for sphere_name, line_name in pairs:
        names = (sphere_name, line_name)
        reason = _missing(names, sphere_index, line_index)
        if reason:
            log(f"Perpendicular {sphere_name} -> {line_name} skipped: {reason}", logging.WARNING)
            report.outcomes.append(PairOutcome(names=names, skipped_reason=reason))
            continue

        result = compute_perpendicular(sphere_index[sphere_name].center, line_index[line_name])
        if not result.is_ok:
            log(f"Perpendicular {sphere_name} -> {line_name} failed: {result.error}", logging.WARNING)
            report.outcomes.append(PairOutcome(names=names, error=result.error))
            continue

        perpendicular = result.value
        report.outcomes.append(PairOutcome(
            names=names,
            measurement=evaluate_measurement(
                MeasurementKind.PERPENDICULAR,
                perpendicular.distance,
                _nominal_for(nominals, sphere_name, line_name, default_nominal),
                thresholds,
                label=f"{sphere_name} -> {line_name}",
            ),
            perpendicular=perpendicular,
        ))
        log(f"Perpendicular {sphere_name} -> {line_name}: {perpendicular.distance:.3f}", logging.DEBUG)

    return report
