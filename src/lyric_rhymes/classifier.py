"""Rhyme key extraction and strength scoring for single words."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .phonetics import Pronunciation, approximate_phonemes, key_length
from .syllables import count_syllables

MULTI_SYLLABLE_BONUS = 0.05
MIN_STRENGTH = 0.1
MAX_STRENGTH = 1.0
DEGENERATE_STRENGTH = 0.1

# (minimum key length, base strength, length cap, step per extra character)
STRENGTH_RULES: Dict[str, Tuple[int, float, int, float]] = {
    "perfect": (3, 0.90, 6, 0.02),
    "family": (2, 0.70, 5, 0.04),
    "slant": (2, 0.50, 4, 0.05),
    "assonance": (1, 0.30, 3, 0.05),
    "consonance": (1, 0.20, 3, 0.05),
}


@dataclass(frozen=True)
class RhymeKeys:
    """The candidate keys derived from one pronunciation."""

    perfect: str
    family: str
    slant: str
    assonance: str
    consonance: str

    def get(self, rhyme_type: str) -> str:
        return getattr(self, rhyme_type)


@dataclass(frozen=True)
class RhymeClassification:
    key: str
    rhyme_type: str
    strength: float
    syllables: int = 1


def rhyme_keys(pronunciation: Pronunciation) -> RhymeKeys:
    """Derive the perfect, family, slant, assonance and consonance keys."""

    tail = pronunciation.rhyme_tail()
    coda = pronunciation.terminal_consonants()
    final = pronunciation.final_consonant()
    family: List[str] = list(tail[:1])
    if coda:
        family.append(coda[-1])
    return RhymeKeys(
        perfect=" ".join(tail),
        family=" ".join(family),
        slant=" ".join(coda),
        assonance=" ".join(pronunciation.terminal_vowels(2)),
        consonance=final or "",
    )


def strength_for(rhyme_type: str, key: str) -> float:
    """Base strength of ``key`` when selected as ``rhyme_type``."""

    minimum, base, cap, step = STRENGTH_RULES[rhyme_type]
    return base + (min(key_length(key), cap) - minimum) * step


def classify(word: str) -> RhymeClassification:
    """Classify ``word`` by the strongest rhyme key it can support.

    Key lengths count phoneme characters, so any closed syllable (``AE T``)
    already qualifies as perfect and any open one (``EY``) as family. Words
    with a vowel therefore never come out as slant, assonance or
    consonance; only a vowel-less word falls back to a weak slant key.
    """

    pronunciation = approximate_phonemes(word)
    syllables = count_syllables(word)
    if pronunciation.last_vowel_index() is None:
        return RhymeClassification(
            key=pronunciation.text,
            rhyme_type="slant",
            strength=DEGENERATE_STRENGTH,
            syllables=syllables,
        )

    keys = rhyme_keys(pronunciation)
    # the assonance key holds at least one vowel, so a type is always found
    rhyme_type = next(
        name for name, rule in STRENGTH_RULES.items() if key_length(keys.get(name)) >= rule[0]
    )
    key = keys.get(rhyme_type)
    strength = strength_for(rhyme_type, key)
    if rhyme_type in ("perfect", "family") and syllables > 1:
        strength += (syllables - 1) * MULTI_SYLLABLE_BONUS
    return RhymeClassification(
        key=key,
        rhyme_type=rhyme_type,
        strength=_clamp(strength),
        syllables=syllables,
    )


def _clamp(strength: float) -> float:
    return min(max(MIN_STRENGTH, strength), MAX_STRENGTH)

