"""Persistent storage for measurement presets."""

from .presets import PresetManager, PresetLoadError, PresetSaveError

__all__ = ['PresetManager', 'PresetLoadError', 'PresetSaveError']
