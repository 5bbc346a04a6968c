"""End-rhyme scheme labelling, pattern naming and summary statistics."""
from __future__ import annotations

import string
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .extract import LyricLine
from .models import RhymeGroup

SCHEME_LABELS = string.ascii_uppercase

COMMON_SCHEMES: Tuple[Tuple[str, str], ...] = (
    ("Couplets", "AABB"),
    ("Alternate/Cross Rhyme", "ABAB"),
    ("Enclosed/Envelope Rhyme", "ABBA"),
    ("Triplet", "AAA"),
    ("Quatrain (common)", "ABCB"),
    ("Limerick", "AABBA"),
    ("Terza Rima", "ABABCB"),
)

MIN_SCHEME_LENGTH = 4


@dataclass(frozen=True)
class RhymeStats:
    total_groups: int
    end_rhyme_groups: int
    internal_rhyme_groups: int
    total_end_rhymes: int
    total_internal_rhymes: int
    end_rhyme_percent: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def scheme_label(index: int) -> str:
    """Return the ``index``-th scheme label: ``A`` .. ``Z``, then ``A1`` .."""

    letter = SCHEME_LABELS[index % len(SCHEME_LABELS)]
    cycle = index // len(SCHEME_LABELS)
    return f"{letter}{cycle}" if cycle else letter


def end_rhyme_scheme(groups: Sequence[RhymeGroup], lines: Sequence[LyricLine]) -> List[str]:
    """Label every content line with its end-rhyme letter.

    Lines whose end word shares a group with another end word share a label;
    every other content line gets a label of its own.
    """

    line_group: Dict[int, str] = {}
    for group in groups:
        end_words = group.end_words
        if len(end_words) < 2:
            continue
        for word in end_words:
            line_group.setdefault(word.line, group.id)

    labels: Dict[str, str] = {}
    scheme: List[str] = []
    for line in lines:
        if line.is_section_marker:
            continue
        owner = line_group.get(line.index, f"line-{line.index}")
        if owner not in labels:
            labels[owner] = scheme_label(len(labels))
        scheme.append(labels[owner])
    return scheme


def normalize_scheme(section: Sequence[str]) -> str:
    """Relabel ``section`` by order of first appearance (``CDCD`` -> ``ABAB``)."""

    mapping: Dict[str, str] = {}
    for label in section:
        if label not in mapping:
            mapping[label] = scheme_label(len(mapping))
    return "".join(mapping[label] for label in section)


def detect_scheme_pattern(scheme: Sequence[str]) -> Optional[str]:
    """Name the common rhyme scheme ``scheme`` follows, if any."""

    if len(scheme) < MIN_SCHEME_LENGTH:
        return None
    for name, pattern in COMMON_SCHEMES:
        size = len(pattern)
        sections = [scheme[i : i + size] for i in range(0, len(scheme) - size + 1, size)]
        if sections and all(normalize_scheme(section) == pattern for section in sections):
            return name
    return None


def rhyme_stats(groups: Sequence[RhymeGroup], lines: Sequence[LyricLine]) -> RhymeStats:
    end_words = [word for group in groups for word in group.end_words]
    internal_words = [word for group in groups for word in group.internal_words]
    content_lines = sum(1 for line in lines if not line.is_section_marker)
    rhyming_lines = len({word.line for word in end_words})
    percent = round(rhyming_lines / content_lines * 100) if content_lines else 0
    return RhymeStats(
        total_groups=len(groups),
        end_rhyme_groups=sum(1 for group in groups if len(group.end_words) >= 2),
        internal_rhyme_groups=sum(1 for group in groups if len(group.internal_words) >= 2),
        total_end_rhymes=len(end_words),
        total_internal_rhymes=len(internal_words),
        end_rhyme_percent=percent,
    )


def line_density(groups: Sequence[RhymeGroup], lines: Sequence[LyricLine]) -> List[float]:
    """Share of each content line's tokens that take part in a rhyme."""

    per_line: Dict[int, int] = {}
    for group in groups:
        for word in group.words:
            per_line[word.line] = per_line.get(word.line, 0) + 1

    densities: List[float] = []
    for line in lines:
        if line.is_section_marker:
            continue
        token_count = len(line.text.split()) or 1
        densities.append(min(per_line.get(line.index, 0) / token_count, 1.0))
    return densities
