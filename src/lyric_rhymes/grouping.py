"""Clustering of rhyme words into groups and merging of overlapping groups."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from .classifier import classify
from .models import TYPE_RANK, RhymeGroup, RhymeWord

LOGGER = logging.getLogger(__name__)

# (primary, secondary) colour pairs; strong types use the primary colour.
RHYME_COLORS: Tuple[Tuple[str, str], ...] = (
    ("#3b82f6", "#93c5fd"),  # blue
    ("#10b981", "#6ee7b7"),  # green
    ("#8b5cf6", "#c4b5fd"),  # purple
    ("#f59e0b", "#fcd34d"),  # amber
    ("#ec4899", "#f9a8d4"),  # pink
    ("#06b6d4", "#67e8f9"),  # cyan
    ("#f97316", "#fdba74"),  # orange
    ("#64748b", "#94a3b8"),  # slate
    ("#6366f1", "#a5b4fc"),  # indigo
    ("#a855f7", "#d8b4fe"),  # violet
    ("#14b8a6", "#5eead4"),  # teal
    ("#ef4444", "#fca5a5"),  # red
)

END_RHYME_FLOOR = 0.2
INTERNAL_RHYME_FLOOR = 0.3

_PRIMARY_TYPES = {"perfect", "family"}

_COMPATIBLE_TYPES = {
    frozenset(("perfect", "family")),
    frozenset(("slant", "assonance")),
    frozenset(("slant", "consonance")),
}


def compatible_types(first: str, second: str) -> bool:
    """Return ``True`` if groups of these two rhyme types may be merged."""

    if first == second:
        return True
    return frozenset((first, second)) in _COMPATIBLE_TYPES


def group_id(rhyme_type: str, key: str) -> str:
    return f"{rhyme_type}-{key.replace(' ', '').lower()}"


def build_groups(
    words: Iterable[RhymeWord],
    palette: Sequence[Tuple[str, str]] = RHYME_COLORS,
    end_rhyme_floor: float = END_RHYME_FLOOR,
    internal_rhyme_floor: float = INTERNAL_RHYME_FLOOR,
) -> List[RhymeGroup]:
    """Bucket ``words`` by rhyme key and return the buckets with two or more words.

    Groups come back ordered by rhyme type rank, then by descending strength.
    """

    buckets: Dict[Tuple[str, str], List[RhymeWord]] = {}
    strengths: Dict[Tuple[str, str], float] = {}
    skipped = 0
    for word in words:
        classification = classify(word.word)
        floor = end_rhyme_floor if word.is_end_rhyme else internal_rhyme_floor
        if classification.strength < floor:
            skipped += 1
            continue
        bucket = (classification.rhyme_type, classification.key)
        if bucket not in buckets:
            buckets[bucket] = []
            strengths[bucket] = classification.strength
        buckets[bucket].append(word)

    groups: List[RhymeGroup] = []
    for (rhyme_type, key), members in buckets.items():
        if len(members) < 2:
            continue
        groups.append(
            RhymeGroup(
                id=group_id(rhyme_type, key),
                rhyme_type=rhyme_type,
                strength=strengths[(rhyme_type, key)],
                words=tuple(members),
                color=_pick_color(palette, len(groups), rhyme_type),
            )
        )

    groups.sort(key=lambda group: (TYPE_RANK[group.rhyme_type], -group.strength))
    LOGGER.debug(
        "Built %s groups from %s buckets (%s words under the strength floor)",
        len(groups),
        len(buckets),
        skipped,
    )
    return groups


def merge_groups(groups: Sequence[RhymeGroup]) -> List[RhymeGroup]:
    """Greedily merge groups that share a word and have compatible types.

    Groups are visited in the given order; each one absorbs every later,
    unprocessed group it overlaps with. The result depends on that order.
    """

    result: List[RhymeGroup] = []
    processed: Set[int] = set()
    for i, current in enumerate(groups):
        if i in processed:
            continue
        processed.add(i)
        seen = {word.identity for word in current.words}
        merged = list(current.words)
        for j in range(i + 1, len(groups)):
            if j in processed:
                continue
            other = groups[j]
            if not compatible_types(current.rhyme_type, other.rhyme_type):
                continue
            if not any(word.identity in seen for word in other.words):
                continue
            for word in other.words:
                if word.identity not in seen:
                    seen.add(word.identity)
                    merged.append(word)
            processed.add(j)
            LOGGER.debug("Merged group %s into %s", other.id, current.id)
        if len(merged) < 2:
            continue
        result.append(
            RhymeGroup(
                id=current.id,
                rhyme_type=current.rhyme_type,
                strength=current.strength,
                words=tuple(merged),
                color=current.color,
            )
        )
    return result


def _pick_color(palette: Sequence[Tuple[str, str]], index: int, rhyme_type: str) -> str:
    if not palette:
        return ""
    primary, secondary = palette[index % len(palette)]
    return primary if rhyme_type in _PRIMARY_TYPES else secondary
