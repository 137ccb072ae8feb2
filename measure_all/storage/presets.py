"""Measurement preset storage and management."""

from __future__ import annotations

import json
import logging
import threading
import uuid
from pathlib import Path

from .. import config
from ..lib.measureUtils import log
from ..models.presets import MeasurementPreset, validate_preset_values
from ..models.types import MeasurementKind


class PresetSaveError(IOError):
    """Raised when saving measurement presets fails."""

    pass


class PresetLoadError(IOError):
    """Raised when loading measurement presets fails due to I/O errors."""

    pass


class PresetManager:
    """
    Manages measurement presets stored in JSON.

    Presets are stored in a presets.json file in the given resources folder.

    Schema Version History:
        1.0 - Initial schema with pairs, nominals and thresholds per kind
    """

    FILENAME = config.PRESETS_FILENAME
    CURRENT_VERSION = '1.0'
    SUPPORTED_VERSIONS = {'1.0'}

    def __init__(self, resources_path: str | Path) -> None:
        """
        Initialize the preset manager.

        Args:
            resources_path: Folder holding the preset file
        """
        self._resources_path = Path(resources_path)
        self._presets_path = self._resources_path / self.FILENAME
        self._presets: list[MeasurementPreset] = []
        self._loaded = False
        self._load_lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._presets_path

    @property
    def presets(self) -> list[MeasurementPreset]:
        """Get all presets (loaded lazily on first access)."""
        with self._load_lock:
            if not self._loaded:
                self.load()
        return self._presets

    def reload(self) -> None:
        """Force reload presets from disk."""
        self._loaded = False
        self.load()

    def load(self) -> None:
        """
        Load presets from disk.

        If no preset file exists, creates default presets.
        If file is corrupted (invalid JSON), creates fresh defaults.
        Invalid individual presets are skipped with a warning.

        Raises:
            PresetLoadError: If file exists but cannot be read or has a bad layout
        """
        self._presets = []

        if not self._presets_path.exists():
            self._create_default_presets()
            self.save()
        else:
            try:
                with open(self._presets_path, encoding='utf-8') as f:
                    data = json.load(f)

                if not isinstance(data, dict):
                    raise PresetLoadError(
                        "Invalid preset format: expected JSON object at root"
                    )

                if 'presets' not in data:
                    raise PresetLoadError(
                        "Invalid preset format: missing 'presets' key"
                    )

                file_version = data.get('version', '1.0')
                if file_version not in self.SUPPORTED_VERSIONS:
                    raise PresetLoadError(
                        f"Unsupported preset schema version: {file_version}. "
                        f"Supported versions: {', '.join(sorted(self.SUPPORTED_VERSIONS))}"
                    )

                preset_list = data['presets']
                if not isinstance(preset_list, list):
                    raise PresetLoadError(
                        "Invalid preset format: 'presets' must be a list"
                    )

                for i, preset_data in enumerate(preset_list):
                    try:
                        self._presets.append(MeasurementPreset.from_dict(preset_data))
                    except (KeyError, TypeError, ValueError) as e:
                        log(f"Skipping invalid preset at index {i}: {e}", logging.WARNING)
                        continue

            except json.JSONDecodeError as e:
                log(f"Error loading presets (invalid JSON): {e}", logging.ERROR)
                self._create_default_presets()
                self.save()

            except OSError as e:
                raise PresetLoadError(f"Failed to load measurement presets: {e}") from e

        self._loaded = True

    def save(self) -> None:
        """
        Save presets to disk using atomic write pattern.

        Raises:
            PresetSaveError: If file cannot be written
        """
        temp_path = self._presets_path.with_suffix('.tmp')

        try:
            self._resources_path.mkdir(parents=True, exist_ok=True)

            data = {
                'version': self.CURRENT_VERSION,
                'presets': [p.to_dict() for p in self._presets]
            }

            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)

            temp_path.replace(self._presets_path)

        except (OSError, TypeError) as e:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup

            raise PresetSaveError(f"Failed to save measurement presets: {e}") from e

    def _create_default_presets(self) -> None:
        """Create the stock sphere/line presets."""
        angle_set = MeasurementPreset(
            id=self._generate_id(),
            name='Default Angle Set',
            kind=MeasurementKind.ANGLE,
            pairs=[
                ('L1_2', 'L1_4'), ('L1_2', 'L8_10'), ('L8_10', 'L4_5'),
                ('L2_5', 'L4_5'), ('L2_5', 'L8_10'), ('L2_5', 'L7_9'),
                ('L2_5', 'L5_6'), ('L7_9', 'L5_6'), ('L3_6', 'L7_9'),
            ],
            nominals={
                'L1_2_L1_4': 90.0, 'L1_2_L8_10': 45.0, 'L8_10_L4_5': 45.0,
                'L2_5_L4_5': 90.0, 'L2_5_L8_10': 45.0, 'L2_5_L7_9': 45.0,
                'L2_5_L5_6': 90.0, 'L7_9_L5_6': 45.0, 'L3_6_L7_9': 45.0,
                'L2_3_L7_9': 45.0, 'L2_3_L3_6': 90.0,
            },
            good=config.DEFAULT_ANGLE_GOOD_DEG,
            warning=config.DEFAULT_ANGLE_WARNING_DEG,
            notes='Predefined angle measurement pairs',
        )
        length_set = MeasurementPreset(
            id=self._generate_id(),
            name='Default Length Set',
            kind=MeasurementKind.LENGTH,
            pairs=[
                ('Sphere 1', 'Sphere 2'), ('Sphere 2', 'Sphere 3'),
                ('Sphere 4', 'Sphere 5'), ('Sphere 1', 'Sphere 4'),
                ('Sphere 8', 'Sphere 10'), ('Sphere 2', 'Sphere 5'),
                ('Sphere 7', 'Sphere 9'), ('Sphere 3', 'Sphere 6'),
                ('Sphere 5', 'Sphere 6'),
            ],
            nominals={
                'Sphere 1_Sphere 2': 8.5, 'Sphere 2_Sphere 3': 7.6,
                'Sphere 4_Sphere 5': 8.5, 'Sphere 1_Sphere 4': 7.6,
                'Sphere 8_Sphere 10': 9.93, 'Sphere 2_Sphere 5': 7.6,
                'Sphere 7_Sphere 9': 9.3, 'Sphere 3_Sphere 6': 7.6,
                'Sphere 5_Sphere 6': 7.6,
            },
            good=config.DEFAULT_LENGTH_GOOD,
            warning=config.DEFAULT_LENGTH_WARNING,
            notes='Predefined sphere-to-sphere length pairs',
        )
        perpendicular_set = MeasurementPreset(
            id=self._generate_id(),
            name='Default Perpendicular Set',
            kind=MeasurementKind.PERPENDICULAR,
            good=config.DEFAULT_PERPENDICULAR_GOOD,
            warning=config.DEFAULT_PERPENDICULAR_WARNING,
            notes='Pairs come from the sphere-to-line grid',
        )
        self._presets = [angle_set, length_set, perpendicular_set]

    def _generate_id(self) -> str:
        """Generate a unique ID."""
        return str(uuid.uuid4())[:8]

    def get_preset_by_id(self, preset_id: str) -> MeasurementPreset | None:
        """Find a preset by ID."""
        for preset in self.presets:
            if preset.id == preset_id:
                return preset
        return None

    def get_preset_by_name(self, name: str) -> MeasurementPreset | None:
        """Find a preset by name."""
        for preset in self.presets:
            if preset.name == name:
                return preset
        return None

    def presets_for_kind(self, kind: MeasurementKind) -> list[MeasurementPreset]:
        """All presets for one measurement kind, in file order."""
        return [p for p in self.presets if p.kind is kind]

    def add_preset(
        self,
        name: str,
        kind: MeasurementKind,
        pairs: list[tuple[str, str]] | None = None,
        nominals: dict[str, float] | None = None,
        good: float = 0.0,
        warning: float = 0.0,
        notes: str = "",
    ) -> MeasurementPreset:
        """
        Add a new preset.

        Returns:
            The created MeasurementPreset

        Raises:
            ValueError: If thresholds or nominals are invalid
        """
        preset = MeasurementPreset(
            id=self._generate_id(),
            name=name,
            kind=kind,
            pairs=list(pairs or []),
            nominals=dict(nominals or {}),
            good=good,
            warning=warning,
            notes=notes,
        )
        self.presets.append(preset)
        self.save()
        return preset

    def update_preset(
        self,
        preset_id: str,
        name: str | None = None,
        pairs: list[tuple[str, str]] | None = None,
        nominals: dict[str, float] | None = None,
        good: float | None = None,
        warning: float | None = None,
        notes: str | None = None,
    ) -> bool:
        """
        Update an existing preset.

        Returns:
            True if preset was found and updated

        Raises:
            ValueError: If thresholds or nominals are invalid
        """
        preset = self.get_preset_by_id(preset_id)
        if preset is None:
            return False

        validate_preset_values(good=good, warning=warning, nominals=nominals)

        if name is not None:
            preset.name = name
        if pairs is not None:
            preset.pairs = list(pairs)
        if nominals is not None:
            preset.nominals = dict(nominals)
        if good is not None:
            preset.good = good
        if warning is not None:
            preset.warning = warning
        if notes is not None:
            preset.notes = notes

        self.save()
        return True

    def delete_preset(self, preset_id: str) -> bool:
        """
        Delete a preset.

        Returns:
            True if preset was found and deleted
        """
        for i, preset in enumerate(self.presets):
            if preset.id == preset_id:
                self._presets.pop(i)
                self.save()
                return True
        return False
