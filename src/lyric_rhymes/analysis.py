"""The full rhyme analysis pass: extract, classify, build and merge."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .extract import extract_words
from .grouping import (
    END_RHYME_FLOOR,
    INTERNAL_RHYME_FLOOR,
    RHYME_COLORS,
    build_groups,
    merge_groups,
)
from .models import RhymeGroup

LOGGER = logging.getLogger(__name__)


@dataclass
class AnalysisOptions:
    end_rhyme_floor: float = END_RHYME_FLOOR
    internal_rhyme_floor: float = INTERNAL_RHYME_FLOOR
    palette: Sequence[Tuple[str, str]] = RHYME_COLORS
    include_internal: bool = True

    def __post_init__(self) -> None:
        for name in ("end_rhyme_floor", "internal_rhyme_floor"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")


def analyze(lyrics: str, options: Optional[AnalysisOptions] = None) -> List[RhymeGroup]:
    """Run the rhyme analysis over ``lyrics`` and return the merged groups."""

    if options is None:
        options = AnalysisOptions()

    words = extract_words(lyrics)
    if not options.include_internal:
        words = [word for word in words if word.is_end_rhyme]

    groups = build_groups(
        words,
        palette=options.palette,
        end_rhyme_floor=options.end_rhyme_floor,
        internal_rhyme_floor=options.internal_rhyme_floor,
    )
    merged = merge_groups(groups)
    LOGGER.debug("Analysis found %s rhyme groups in %s words", len(merged), len(words))
    return merged
