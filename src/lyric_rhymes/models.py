"""Dataclasses representing rhyme analysis results."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

# Ordered from strongest to weakest phonetic match.
RHYME_TYPES: Tuple[str, ...] = ("perfect", "family", "slant", "assonance", "consonance")

TYPE_RANK: Dict[str, int] = {rhyme_type: rank for rank, rhyme_type in enumerate(RHYME_TYPES)}


def word_key(line: int, position: int) -> str:
    """Return the ``"<line>-<position>"`` key used to select a word."""

    return f"{line}-{position}"


@dataclass(frozen=True)
class RhymeWord:
    word: str
    line: int
    position: int
    start: int
    end: int
    is_end_rhyme: bool
    syllables: int
    phonetic_representation: str

    @property
    def identity(self) -> Tuple[int, int]:
        return (self.line, self.position)

    @property
    def key(self) -> str:
        return word_key(self.line, self.position)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "line": self.line,
            "position": self.position,
            "start": self.start,
            "end": self.end,
            "is_end_rhyme": self.is_end_rhyme,
            "syllables": self.syllables,
            "phonetic_representation": self.phonetic_representation,
        }


@dataclass(frozen=True)
class RhymeGroup:
    id: str
    rhyme_type: str
    strength: float
    words: Tuple[RhymeWord, ...]
    color: str = ""

    def has_word(self, word: RhymeWord) -> bool:
        return any(member.identity == word.identity for member in self.words)

    @property
    def end_words(self) -> Tuple[RhymeWord, ...]:
        return tuple(word for word in self.words if word.is_end_rhyme)

    @property
    def internal_words(self) -> Tuple[RhymeWord, ...]:
        return tuple(word for word in self.words if not word.is_end_rhyme)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.rhyme_type,
            "strength": self.strength,
            "color": self.color,
            "words": [word.to_dict() for word in self.words],
        }


@dataclass(frozen=True)
class RhymeConnection:
    source: RhymeWord
    target: RhymeWord
    group: RhymeGroup
    distance: int
    density: float

    def touches(self, key: str) -> bool:
        return self.source.key == key or self.target.key == key

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source.to_dict(),
            "target": self.target.to_dict(),
            "group_id": self.group.id,
            "type": self.group.rhyme_type,
            "strength": self.group.strength,
            "distance": self.distance,
            "density": self.density,
        }
