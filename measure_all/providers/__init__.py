"""Geometry providers (intersection and frame alignment capabilities)."""

from __future__ import annotations

from functools import lru_cache

from .base import GeometryProvider
from .numpy_provider import NumpyGeometryProvider, RigidTransform, orthonormal_frame


@lru_cache(maxsize=1)
def get_default_provider() -> GeometryProvider:
    """Shared stateless provider used when callers pass none."""
    return NumpyGeometryProvider()


__all__ = [
    'GeometryProvider',
    'NumpyGeometryProvider',
    'RigidTransform',
    'orthonormal_frame',
    'get_default_provider',
]
