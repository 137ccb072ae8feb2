"""Discriminated results and the measurement error taxonomy.

Kernel operations never let a geometry failure escape as an exception.
They return either ``Ok(value)`` or ``Err(error)``, and the caller
branches on ``is_ok``. The error classes are still real exceptions so
``unwrap()`` can re-raise them when a caller prefers unwinding.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union, NoReturn

_T = TypeVar('_T')


class MeasurementError(ValueError):
    """Base class for per-pair measurement failures."""

    pass


class DegenerateLineError(MeasurementError):
    """Raised when a line has zero (or near-zero) length and no direction."""

    pass


class CoincidentPointsError(MeasurementError):
    """Raised when an arc center coincides with one of its direction points."""

    pass


class RadiusTooSmallError(MeasurementError):
    """Raised when the computed arc radius is too small to draw."""

    pass


class NegligibleAngleError(MeasurementError):
    """Raised when the arc sweep is too small to draw."""

    pass


class FullCircleError(MeasurementError):
    """Raised when the arc sweep is effectively a full circle."""

    pass


class IntersectionUnavailable(Exception):
    """Signals that no intersection was reported.

    Non-fatal: the intersection resolver catches it and switches to the
    closest-endpoint fallback. It never reaches callers.
    """

    pass


@dataclass(frozen=True, slots=True)
class Ok(Generic[_T]):
    """Successful result."""

    value: _T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> _T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed result carrying the error that caused it."""

    error: MeasurementError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[_T], Err]
