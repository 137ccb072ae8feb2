"""MeasureAll - geometric measurement and tolerance classification kernel.

Measures lengths between sphere centers, acute angles between lines and
perpendicular distances from sphere centers to lines, builds the arcs that
visualize angles, and classifies deviations from nominal values.

Host applications pass their own lines and spheres (anything matching
models.LineLike / models.SphereLike) and may plug in their own geometry
engine through providers.GeometryProvider.
"""

from . import core
from . import models
from . import providers
from . import storage

__all__ = ['core', 'models', 'providers', 'storage']
