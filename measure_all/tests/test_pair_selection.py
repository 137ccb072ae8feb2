"""
Tests for pair enumeration - runs without a CAD host.

Run with: pytest measure_all/tests/ -v
"""
import pytest

from helpers import MockSphere, line
from measure_all import config
from measure_all.core.pair_selection import (
    collect_line_names,
    collect_names,
    custom_pair_grid,
    enumerate_cross_pairs,
    enumerate_pairs,
)
from measure_all.models.measurement import PairSelection
from measure_all.models.types import CrossPairStrategy, SelectionStrategy

NAMES = ['L1_2', 'L1_4', 'L2_5', 'L4_5']


def _names(pairs: list[PairSelection]) -> list[tuple[str, str]]:
    return [p.names for p in pairs]


class TestCollectNames:
    """Test name discovery."""

    def test_dedupe_keeps_first_seen_order(self) -> None:
        assert collect_names(['L2', 'L1', 'L2', 'L3']) == ['L2', 'L1', 'L3']

    def test_prefix_filter(self) -> None:
        assert collect_names(['L1_2', 'Sketch1', 'L2_5', 'Axis'], prefix='L') == ['L1_2', 'L2_5']

    def test_line_names_use_configured_prefix(self) -> None:
        names = ['L1_2', 'Sphere 1', 'L2_5', 'L1_2', 'Axis']
        assert collect_line_names(names) == ['L1_2', 'L2_5']


class TestEnumeratePairs:
    """Test the three selection strategies."""

    def test_sequential(self) -> None:
        pairs = enumerate_pairs(NAMES, SelectionStrategy.SEQUENTIAL)
        assert _names(pairs) == [('L1_2', 'L1_4'), ('L1_4', 'L2_5'), ('L2_5', 'L4_5')]
        assert all(p.strategy is SelectionStrategy.SEQUENTIAL for p in pairs)

    def test_sequential_single_entity(self) -> None:
        assert enumerate_pairs(['L1_2'], SelectionStrategy.SEQUENTIAL) == []

    def test_default_filters_missing_names(self) -> None:
        preset = [('L1_2', 'L1_4'), ('L1_2', 'L8_10'), ('L2_5', 'L4_5')]
        pairs = enumerate_pairs(NAMES, SelectionStrategy.DEFAULT, preset_pairs=preset)
        assert _names(pairs) == [('L1_2', 'L1_4'), ('L2_5', 'L4_5')]

    def test_default_drops_duplicates(self) -> None:
        preset = [('L1_2', 'L1_4'), ('L1_4', 'L1_2'), ('L1_2', 'L1_2')]
        pairs = enumerate_pairs(NAMES, SelectionStrategy.DEFAULT, preset_pairs=preset)
        assert _names(pairs) == [('L1_2', 'L1_4')]

    def test_custom(self) -> None:
        pairs = enumerate_pairs(NAMES, SelectionStrategy.CUSTOM, selected={(0, 3), (1, 2)})
        assert _names(pairs) == [('L1_2', 'L4_5'), ('L1_4', 'L2_5')]

    def test_custom_ignores_lower_triangle(self) -> None:
        pairs = enumerate_pairs(NAMES, SelectionStrategy.CUSTOM, selected={(2, 1)})
        assert pairs == []

    def test_accepts_named_entities(self) -> None:
        lines = [line(n, (0.0, 0.0, 0.0), (1.0, 0.0, 0.0)) for n in NAMES[:2]]
        pairs = enumerate_pairs(lines, SelectionStrategy.SEQUENTIAL)
        assert _names(pairs) == [('L1_2', 'L1_4')]

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ValueError, match="Unknown selection strategy"):
            enumerate_pairs(NAMES, "bogus")

    def test_pair_key_is_order_free(self) -> None:
        a = PairSelection('L2_5', 'L1_2', SelectionStrategy.CUSTOM)
        b = PairSelection('L1_2', 'L2_5', SelectionStrategy.DEFAULT)
        assert a.key == b.key == ('L1_2', 'L2_5')


class TestCustomPairGrid:
    """Test the toggle grid for custom selection."""

    def test_upper_triangle(self) -> None:
        grid = custom_pair_grid(['A', 'B', 'C'])
        assert grid == [(0, 1, 'A', 'B'), (0, 2, 'A', 'C'), (1, 2, 'B', 'C')]

    def test_size(self) -> None:
        assert len(custom_pair_grid(NAMES)) == 6


class TestEnumerateCrossPairs:
    """Test sphere-to-line pair generation."""

    SPHERES = ['Sphere 1', 'Sphere 2', 'Sphere 3', 'Sphere 4']
    LINES = ['L1_2', 'L1_4', 'L2_5']

    def test_default_grid(self) -> None:
        pairs = enumerate_cross_pairs(self.SPHERES, self.LINES, CrossPairStrategy.DEFAULT)
        assert pairs == [
            ('Sphere 1', 'L1_2'), ('Sphere 1', 'L1_4'),
            ('Sphere 2', 'L1_2'), ('Sphere 2', 'L1_4'),
            ('Sphere 3', 'L1_2'), ('Sphere 3', 'L1_4'),
        ]

    def test_default_grid_follows_config(self) -> None:
        pairs = enumerate_cross_pairs(self.SPHERES, self.LINES, CrossPairStrategy.DEFAULT)
        assert len(pairs) == config.CROSS_PAIR_MAX_SOURCES * config.CROSS_PAIR_MAX_TARGETS

    def test_default_grid_override(self) -> None:
        pairs = enumerate_cross_pairs(
            self.SPHERES, self.LINES, CrossPairStrategy.DEFAULT, max_sources=1, max_targets=3,
        )
        assert pairs == [('Sphere 1', 'L1_2'), ('Sphere 1', 'L1_4'), ('Sphere 1', 'L2_5')]

    def test_default_grid_small_inputs(self) -> None:
        pairs = enumerate_cross_pairs(['Sphere 1'], ['L1_2'], CrossPairStrategy.DEFAULT)
        assert pairs == [('Sphere 1', 'L1_2')]

    def test_all_to_first(self) -> None:
        pairs = enumerate_cross_pairs(self.SPHERES, self.LINES, CrossPairStrategy.ALL_TO_FIRST)
        assert pairs == [(s, 'L1_2') for s in self.SPHERES]

    def test_all_to_first_without_targets(self) -> None:
        assert enumerate_cross_pairs(self.SPHERES, [], CrossPairStrategy.ALL_TO_FIRST) == []

    def test_custom(self) -> None:
        pairs = enumerate_cross_pairs(
            self.SPHERES, self.LINES, CrossPairStrategy.CUSTOM, selected={(3, 2), (0, 1)},
        )
        assert pairs == [('Sphere 1', 'L1_4'), ('Sphere 4', 'L2_5')]

    def test_accepts_named_entities(self) -> None:
        spheres = [MockSphere('Sphere 1', (0.0, 0.0, 0.0))]
        pairs = enumerate_cross_pairs(spheres, self.LINES, CrossPairStrategy.ALL_TO_FIRST)
        assert pairs == [('Sphere 1', 'L1_2')]

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ValueError):
            enumerate_cross_pairs(self.SPHERES, self.LINES, "bogus")
