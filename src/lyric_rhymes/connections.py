"""Pairwise rhyme connections for graph style visualisations."""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence

from .models import RHYME_TYPES, RhymeConnection, RhymeGroup, RhymeWord

LOGGER = logging.getLogger(__name__)

MIN_COMPLEXITY = 1
MAX_COMPLEXITY = 5


@dataclass
class ConnectionOptions:
    max_connections: int = 80
    complexity_level: int = 3
    focus_word_key: Optional[str] = None
    hovered_word_key: Optional[str] = None
    type_filter: FrozenSet[str] = field(default_factory=lambda: frozenset(RHYME_TYPES))
    selected_group_id: Optional[str] = None
    show_end_rhymes: bool = True
    show_internal_rhymes: bool = True

    def __post_init__(self) -> None:
        if not MIN_COMPLEXITY <= self.complexity_level <= MAX_COMPLEXITY:
            raise ValueError(
                f"complexity_level must be between {MIN_COMPLEXITY} and {MAX_COMPLEXITY}, "
                f"got {self.complexity_level}"
            )
        if self.max_connections < 0:
            raise ValueError(f"max_connections must not be negative, got {self.max_connections}")
        self.type_filter = frozenset(self.type_filter)
        unknown = self.type_filter.difference(RHYME_TYPES)
        if unknown:
            raise ValueError(f"Unknown rhyme types: {', '.join(sorted(unknown))}")

    @property
    def fan_out(self) -> int:
        """Number of later members each word connects to."""

        return self.complexity_level * 2

    @property
    def max_distance(self) -> int:
        """Largest line distance a connection may span."""

        return 10 + self.complexity_level * 5


def filter_groups(groups: Iterable[RhymeGroup], options: ConnectionOptions) -> List[RhymeGroup]:
    """Apply the type, end/internal and group selection filters."""

    selected: List[RhymeGroup] = []
    for group in groups:
        if group.rhyme_type not in options.type_filter:
            continue
        if not options.show_end_rhymes and group.end_words:
            continue
        if not options.show_internal_rhymes and group.internal_words:
            continue
        if options.selected_group_id is not None and group.id != options.selected_group_id:
            continue
        selected.append(group)
    return selected


def generate_connections(
    groups: Sequence[RhymeGroup],
    options: Optional[ConnectionOptions] = None,
) -> List[RhymeConnection]:
    """Return a bounded, prioritised list of connections within ``groups``."""

    if options is None:
        options = ConnectionOptions()

    candidates: List[RhymeConnection] = []
    for group in filter_groups(groups, options):
        members = sorted(group.words, key=lambda word: (word.line, word.position))
        if options.focus_word_key is not None:
            candidates.extend(_focus_candidates(group, members, options.focus_word_key))
        else:
            candidates.extend(_sequential_candidates(group, members, options))

    coverage = _line_coverage(candidates)
    connections = [_with_density(candidate, coverage) for candidate in candidates]

    priority_keys = {key for key in (options.focus_word_key, options.hovered_word_key) if key}

    def sort_key(connection: RhymeConnection):
        touched = any(connection.touches(key) for key in priority_keys)
        return (not touched, -connection.group.strength, connection.distance)

    connections.sort(key=sort_key)
    LOGGER.debug(
        "Generated %s candidate connections, keeping %s",
        len(connections),
        min(len(connections), options.max_connections),
    )
    return connections[: options.max_connections]


def _focus_candidates(
    group: RhymeGroup, members: Sequence[RhymeWord], focus_key: str
) -> List[RhymeConnection]:
    focus = next((word for word in members if word.key == focus_key), None)
    if focus is None:
        return []
    return [
        _candidate(group, focus, word)
        for word in members
        if word.key != focus_key
    ]


def _sequential_candidates(
    group: RhymeGroup, members: Sequence[RhymeWord], options: ConnectionOptions
) -> List[RhymeConnection]:
    candidates: List[RhymeConnection] = []
    for i, source in enumerate(members):
        for target in members[i + 1 : i + 1 + options.fan_out]:
            if abs(target.line - source.line) > options.max_distance:
                continue
            candidates.append(_candidate(group, source, target))
    return candidates


def _candidate(group: RhymeGroup, source: RhymeWord, target: RhymeWord) -> RhymeConnection:
    return RhymeConnection(
        source=source,
        target=target,
        group=group,
        distance=abs(target.line - source.line),
        density=0.0,
    )


def _line_span(connection: RhymeConnection) -> range:
    low = min(connection.source.line, connection.target.line)
    high = max(connection.source.line, connection.target.line)
    return range(low, high + 1)


def _line_coverage(candidates: Iterable[RhymeConnection]) -> Dict[int, int]:
    """Count how many candidate connections cover each line."""

    coverage: Dict[int, int] = defaultdict(int)
    for candidate in candidates:
        for line in _line_span(candidate):
            coverage[line] += 1
    return coverage


def _with_density(candidate: RhymeConnection, coverage: Dict[int, int]) -> RhymeConnection:
    span = _line_span(candidate)
    density = sum(coverage.get(line, 0) for line in span) / len(span)
    return replace(candidate, density=density)
