"""Heuristic syllable estimation from spelling."""
from __future__ import annotations

from functools import lru_cache
from typing import Dict

from .phonetics import VOWEL_LETTERS, clean_word

# ---------------------------------------------------------------------------
# Known counts
# ---------------------------------------------------------------------------

COMMON_SYLLABLE_COUNTS: Dict[str, int] = {
    # high frequency words
    "the": 1,
    "and": 1,
    "that": 1,
    "have": 1,
    "for": 1,
    "not": 1,
    "with": 1,
    "you": 1,
    "this": 1,
    "but": 1,
    "his": 1,
    "from": 1,
    "they": 1,
    "say": 1,
    "her": 1,
    "she": 1,
    "will": 1,
    "one": 1,
    "all": 1,
    "would": 1,
    "there": 1,
    "their": 1,
    "what": 1,
    "out": 1,
    "about": 2,
    "who": 1,
    "get": 1,
    "which": 1,
    "when": 1,
    "make": 1,
    "can": 1,
    "like": 1,
    "time": 1,
    "just": 1,
    "him": 1,
    "know": 1,
    "take": 1,
    "people": 2,
    "into": 2,
    "year": 1,
    "your": 1,
    "good": 1,
    "some": 1,
    "could": 1,
    "them": 1,
    "see": 1,
    "other": 2,
    "than": 1,
    "then": 1,
    "now": 1,
    "look": 1,
    "only": 2,
    "come": 1,
    "its": 1,
    "over": 2,
    "think": 1,
    "also": 2,
    "back": 1,
    "after": 2,
    "use": 1,
    "two": 1,
    "how": 1,
    "our": 1,
    "work": 1,
    "first": 1,
    "well": 1,
    "way": 1,
    "even": 2,
    "new": 1,
    "want": 1,
    # lyric vocabulary
    "love": 1,
    "heart": 1,
    "soul": 1,
    "mind": 1,
    "eyes": 1,
    "light": 1,
    "dream": 1,
    "night": 1,
    "day": 1,
    "world": 1,
    "rain": 1,
    "pain": 1,
    "fire": 1,
    "desire": 2,
    "heaven": 2,
    "forever": 3,
    "together": 3,
    "never": 2,
    "always": 2,
    "baby": 2,
    "crazy": 2,
    "maybe": 2,
    "beautiful": 3,
    "wonderful": 3,
    "magical": 3,
    "melody": 3,
    "harmony": 3,
    "symphony": 3,
    "fantasy": 3,
    "reality": 4,
    "music": 2,
    "rhythm": 2,
}


# ---------------------------------------------------------------------------
# Counting
# ---------------------------------------------------------------------------


def count_syllables(word: str) -> int:
    """Estimate the number of syllables in ``word``; never less than one."""

    return _count_cached(clean_word(word))


@lru_cache(maxsize=8192)
def _count_cached(word: str) -> int:
    known = COMMON_SYLLABLE_COUNTS.get(word)
    if known is not None:
        return known

    count = vowel_groups(word)
    if len(word) > 2 and word.endswith("e") and word[-2] not in VOWEL_LETTERS:
        count -= 1
    if len(word) > 2 and word.endswith("le") and word[-3] not in VOWEL_LETTERS:
        count += 1
    # a past tense "-ed" is only voiced after d or t
    if len(word) > 2 and word.endswith("ed") and word[-3] in "dt":
        count += 1
    return max(1, count)


def vowel_groups(letters: str) -> int:
    """Count transitions from a non-vowel into a vowel letter."""

    count = 0
    previous_vowel = False
    for letter in letters:
        vowel = letter in VOWEL_LETTERS
        if vowel and not previous_vowel:
            count += 1
        previous_vowel = vowel
    return count
