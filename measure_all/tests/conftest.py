"""
Pytest configuration for MeasureAll tests.

The project root is put on sys.path by the pytest settings in
pyproject.toml, so tests import the package as `measure_all`. Shared
scene fixtures live here; mock classes live in helpers.py.
"""
from __future__ import annotations

import logging

import pytest

from helpers import MockLine, MockSphere, line, sphere
from measure_all import config


@pytest.fixture
def x_axis() -> MockLine:
    """Line along +X from the origin, length 10."""
    return line("L1_2", (0.0, 0.0, 0.0), (10.0, 0.0, 0.0))


@pytest.fixture
def y_axis() -> MockLine:
    """Line along +Y from the origin, length 10."""
    return line("L1_4", (0.0, 0.0, 0.0), (0.0, 10.0, 0.0))


@pytest.fixture
def diagonal() -> MockLine:
    """Line at 45 degrees in the XY plane, through the origin."""
    return line("L8_10", (0.0, 0.0, 0.0), (5.0, 5.0, 0.0))


@pytest.fixture
def square_spheres() -> list[MockSphere]:
    """Four spheres on the corners of an 8.5 x 7.6 rectangle."""
    return [
        sphere("Sphere 1", (0.0, 0.0, 0.0)),
        sphere("Sphere 2", (8.5, 0.0, 0.0)),
        sphere("Sphere 3", (8.5, 7.6, 0.0)),
        sphere("Sphere 4", (0.0, 7.6, 0.0)),
    ]


@pytest.fixture
def measure_log(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture everything the package logger emits."""
    caplog.set_level(logging.DEBUG, logger=config.LOGGER_NAME)
    return caplog
