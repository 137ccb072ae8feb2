"""Candidate pair enumeration for measurement batches.

Pairs are generated from an ordered collection of named entities under
one of three strategies:

- DEFAULT: a curated list of name pairs, kept only when both names exist
- SEQUENTIAL: every consecutive pair (entity[i], entity[i+1])
- CUSTOM: any subset of the upper-triangular pairs {(i, j): i < j}

Source-to-target pairs (sphere to line) have their own strategies, see
enumerate_cross_pairs().
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from typing import Protocol, Union

from .. import config
from ..models.measurement import PairSelection
from ..models.types import SelectionStrategy, CrossPairStrategy


class NamedLike(Protocol):
    """Protocol for any entity with a name."""

    @property
    def name(self) -> str: ...


EntityRef = Union[str, NamedLike]


def _name_of(entity: EntityRef) -> str:
    return entity if isinstance(entity, str) else entity.name


def collect_names(names: Iterable[str], prefix: str | None = None) -> list[str]:
    """
    Unique names in first-seen order, optionally filtered by prefix.

    Args:
        names: Entity names as found in the document
        prefix: Only keep names starting with this prefix (e.g. "L")

    Returns:
        De-duplicated list of names
    """
    seen: set[str] = set()
    result: list[str] = []
    for name in names:
        if prefix is not None and not name.startswith(prefix):
            continue
        if name in seen:
            continue
        seen.add(name)
        result.append(name)
    return result


def collect_line_names(names: Iterable[str]) -> list[str]:
    """Measurement line names (those starting with config.LINE_NAME_PREFIX)."""
    return collect_names(names, prefix=config.LINE_NAME_PREFIX)


def custom_pair_grid(entities: Sequence[EntityRef]) -> list[tuple[int, int, str, str]]:
    """
    Every toggleable pair for custom selection, grouped by first entity.

    Returns:
        List of (i, j, name_i, name_j) with i < j, in row-major order
    """
    names = [_name_of(e) for e in entities]
    return [
        (i, j, names[i], names[j])
        for i in range(len(names))
        for j in range(i + 1, len(names))
    ]


def _dedupe(pairs: Iterable[PairSelection]) -> list[PairSelection]:
    """Drop self-pairs and repeated unordered pairs, keeping insertion order."""
    seen: set[tuple[str, str]] = set()
    result: list[PairSelection] = []
    for pair in pairs:
        if pair.entity_a == pair.entity_b or pair.key in seen:
            continue
        seen.add(pair.key)
        result.append(pair)
    return result


def enumerate_pairs(
    entities: Sequence[EntityRef],
    strategy: SelectionStrategy,
    *,
    preset_pairs: Sequence[tuple[str, str]] = (),
    selected: Collection[tuple[int, int]] = (),
) -> list[PairSelection]:
    """
    Generate candidate pairs under the chosen strategy.

    Args:
        entities: Ordered entities (names or objects with a name)
        strategy: Pair generation strategy
        preset_pairs: Curated name pairs, used by DEFAULT
        selected: Toggled-on (i, j) index pairs with i < j, used by CUSTOM

    Returns:
        De-duplicated pairs in the strategy's own order (not sorted)
    """
    names = [_name_of(e) for e in entities]

    if strategy is SelectionStrategy.DEFAULT:
        available = set(names)
        candidates = (
            PairSelection(a, b, strategy)
            for a, b in preset_pairs
            if a in available and b in available
        )
    elif strategy is SelectionStrategy.SEQUENTIAL:
        candidates = (
            PairSelection(names[i], names[i + 1], strategy)
            for i in range(len(names) - 1)
        )
    elif strategy is SelectionStrategy.CUSTOM:
        toggled = set(selected)
        candidates = (
            PairSelection(name_i, name_j, strategy)
            for i, j, name_i, name_j in custom_pair_grid(names)
            if (i, j) in toggled
        )
    else:
        raise ValueError(f"Unknown selection strategy: {strategy}")

    return _dedupe(candidates)


def enumerate_cross_pairs(
    sources: Sequence[EntityRef],
    targets: Sequence[EntityRef],
    strategy: CrossPairStrategy,
    *,
    selected: Collection[tuple[int, int]] = (),
    max_sources: int = config.CROSS_PAIR_MAX_SOURCES,
    max_targets: int = config.CROSS_PAIR_MAX_TARGETS,
) -> list[tuple[str, str]]:
    """
    Generate ordered (source, target) pairs, e.g. sphere to line.

    Args:
        sources: Ordered source entities
        targets: Ordered target entities
        strategy: DEFAULT takes the first max_sources x max_targets grid,
            ALL_TO_FIRST pairs every source with the first target,
            CUSTOM keeps the toggled-on (source_index, target_index) pairs
        selected: Toggled-on index pairs, used by CUSTOM
        max_sources: Grid height for DEFAULT
        max_targets: Grid width for DEFAULT

    Returns:
        List of (source_name, target_name) in row-major order
    """
    source_names = [_name_of(s) for s in sources]
    target_names = [_name_of(t) for t in targets]

    if strategy is CrossPairStrategy.DEFAULT:
        return [
            (s, t)
            for s in source_names[:max_sources]
            for t in target_names[:max_targets]
        ]
    if strategy is CrossPairStrategy.ALL_TO_FIRST:
        if not target_names:
            return []
        return [(s, target_names[0]) for s in source_names]
    if strategy is CrossPairStrategy.CUSTOM:
        toggled = set(selected)
        return [
            (s, t)
            for i, s in enumerate(source_names)
            for j, t in enumerate(target_names)
            if (i, j) in toggled
        ]
    raise ValueError(f"Unknown cross pair strategy: {strategy}")
