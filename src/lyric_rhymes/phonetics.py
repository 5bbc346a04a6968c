"""Rule-table approximation of ARPABET pronunciations.

The encoder here is a heuristic: it maps spelling to phoneme tokens using a
table of word endings and a greedy longest-match scan over letter sequences.
It is not a dictionary lookup and makes no attempt at IPA accuracy.
"""
from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

ARPABET_VOWELS = {
    "AA",
    "AE",
    "AH",
    "AO",
    "AW",
    "AY",
    "EH",
    "ER",
    "EY",
    "IH",
    "IY",
    "OW",
    "OY",
    "UH",
    "UW",
}

VOWEL_LETTERS = "aeiouy"

NON_LETTER_RE = re.compile(r"[^a-z]")

# Word endings with a fixed pronunciation. Checked longest first.
ENDING_PATTERNS: Dict[str, Tuple[str, ...]] = {
    "ation": ("EY", "SH", "AH", "N"),
    "orld": ("ER", "L", "D"),
    "tion": ("SH", "AH", "N"),
    "sion": ("ZH", "AH", "N"),
    "ight": ("AY", "T"),
    "ing": ("IH", "NG"),
    "ine": ("AY", "N"),
    "ite": ("AY", "T"),
    "ide": ("AY", "D"),
    "ive": ("AY", "V"),
    "ime": ("AY", "M"),
    "ire": ("AY", "ER"),
    "ice": ("AY", "S"),
    "ate": ("EY", "T"),
    "ake": ("EY", "K"),
    "ame": ("EY", "M"),
    "ain": ("EY", "N"),
    "ays": ("EY", "Z"),
    "ace": ("EY", "S"),
    "ase": ("EY", "S"),
    "ale": ("EY", "L"),
    "ail": ("EY", "L"),
    "aim": ("EY", "M"),
    "ave": ("EY", "V"),
    "eet": ("IY", "T"),
    "eat": ("IY", "T"),
    "eam": ("IY", "M"),
    "eem": ("IY", "M"),
    "eal": ("IY", "L"),
    "eep": ("IY", "P"),
    "ead": ("EH", "D"),
    "oan": ("OW", "N"),
    "one": ("OW", "N"),
    "own": ("OW", "N"),
    "owe": ("OW",),
    "ode": ("OW", "D"),
    "oke": ("OW", "K"),
    "old": ("OW", "L", "D"),
    "oll": ("OW", "L"),
    "ope": ("OW", "P"),
    "ose": ("OW", "Z"),
    "ove": ("AH", "V"),
    "ool": ("UW", "L"),
    "oom": ("UW", "M"),
    "oot": ("UW", "T"),
    "ood": ("UH", "D"),
    "ore": ("AO", "R"),
    "orn": ("AO", "R", "N"),
    "ude": ("UW", "D"),
    "ute": ("UW", "T"),
    "une": ("UW", "N"),
    "ay": ("EY",),
    "in": ("IH", "N"),
}

# Letter sequences, vowel digraphs and consonant digraphs before single letters.
PHONEME_MAP: Dict[str, Tuple[str, ...]] = {
    # four letters
    "tion": ("SH", "AH", "N"),
    "eigh": ("EY",),
    # three letters
    "igh": ("AY",),
    "air": ("EH", "R"),
    "are": ("EH", "R"),
    "ear": ("IH", "R"),
    "ere": ("IH", "R"),
    "ore": ("AO", "R"),
    "all": ("AO", "L"),
    "tch": ("CH",),
    "dge": ("JH",),
    "sch": ("S", "K"),
    # vowel digraphs
    "ai": ("EY",),
    "ay": ("EY",),
    "au": ("AO",),
    "aw": ("AO",),
    "ar": ("AA", "R"),
    "ee": ("IY",),
    "ea": ("IY",),
    "ei": ("EY",),
    "eo": ("IY",),
    "er": ("ER",),
    "ew": ("UW",),
    "ey": ("IY",),
    "ie": ("AY",),
    "ir": ("ER",),
    "oa": ("OW",),
    "oe": ("OW",),
    "oi": ("OY",),
    "oy": ("OY",),
    "oo": ("UW",),
    "or": ("AO", "R"),
    "ou": ("AW",),
    "ow": ("AW",),
    "ue": ("UW",),
    "ui": ("UW",),
    "ur": ("ER",),
    # consonant digraphs
    "ch": ("CH",),
    "ck": ("K",),
    "gh": ("G",),
    "kn": ("N",),
    "ng": ("NG",),
    "ph": ("F",),
    "qu": ("K", "W"),
    "sh": ("SH",),
    "th": ("TH",),
    "wh": ("W",),
    "wr": ("R",),
    "zh": ("ZH",),
    "bb": ("B",),
    "dd": ("D",),
    "ff": ("F",),
    "gg": ("G",),
    "ll": ("L",),
    "mm": ("M",),
    "nn": ("N",),
    "pp": ("P",),
    "rr": ("R",),
    "ss": ("S",),
    "tt": ("T",),
    "zz": ("Z",),
    # single letters
    "a": ("AE",),
    "b": ("B",),
    "c": ("K",),
    "d": ("D",),
    "e": ("EH",),
    "f": ("F",),
    "g": ("G",),
    "h": ("HH",),
    "i": ("IH",),
    "j": ("JH",),
    "k": ("K",),
    "l": ("L",),
    "m": ("M",),
    "n": ("N",),
    "o": ("AA",),
    "p": ("P",),
    "q": ("K",),
    "r": ("R",),
    "s": ("S",),
    "t": ("T",),
    "u": ("AH",),
    "v": ("V",),
    "w": ("W",),
    "x": ("K", "S"),
    "z": ("Z",),
}

_ENDINGS_LONGEST_FIRST = sorted(ENDING_PATTERNS, key=len, reverse=True)
_MAX_SEQUENCE = 4


@dataclass(frozen=True)
class Pronunciation:
    """Structured representation of an approximate pronunciation."""

    phonemes: Sequence[str]

    @property
    def text(self) -> str:
        """Return the pronunciation as a space separated string."""

        return " ".join(self.phonemes)

    @property
    def vowel_count(self) -> int:
        return sum(1 for p in self.phonemes if is_vowel(p))

    def last_vowel_index(self) -> Optional[int]:
        indices = _vowel_indices(self.phonemes)
        return indices[-1] if indices else None

    def rhyme_tail(self) -> Tuple[str, ...]:
        """Return the phonemes from the last vowel to the end."""

        index = self.last_vowel_index()
        if index is None:
            return ()
        return tuple(self.phonemes[index:])

    def terminal_vowels(self, count: int = 1) -> Tuple[str, ...]:
        """Return up to ``count`` of the final vowel phonemes."""

        vowels = [p for p in self.phonemes if is_vowel(p)]
        return tuple(vowels[-count:]) if vowels else ()

    def terminal_consonants(self) -> Tuple[str, ...]:
        """Return trailing consonant phonemes after the last vowel."""

        index = self.last_vowel_index()
        if index is None:
            return ()
        return tuple(self.phonemes[index + 1 :])

    def final_consonant(self) -> Optional[str]:
        """Return the last consonant phoneme of the word, if any."""

        for phoneme in reversed(self.phonemes):
            if not is_vowel(phoneme):
                return phoneme
        return None


def clean_word(word: str) -> str:
    """Lower-case ``word``, fold accents and drop everything but a-z.

    ``"Café!"`` becomes ``"cafe"``; letters with no ASCII base such as ``ß``
    are dropped.
    """

    return NON_LETTER_RE.sub("", fold_accents(word.lower()))


def fold_accents(text: str) -> str:
    """Decompose accented letters so their ASCII base letter survives filtering."""

    return unicodedata.normalize("NFKD", text)


def approximate_phonemes(word: str) -> Pronunciation:
    """Approximate the pronunciation of ``word`` from its spelling."""

    return Pronunciation(_approximate_cached(clean_word(word)))


@lru_cache(maxsize=8192)
def _approximate_cached(word: str) -> Tuple[str, ...]:
    if len(word) <= 1:
        return (word,) if word else ()
    for ending in _ENDINGS_LONGEST_FIRST:
        if word.endswith(ending):
            stem = word[: len(word) - len(ending)]
            return _scan(stem, word, final=False) + ENDING_PATTERNS[ending]
    return _scan(word, word, final=True)


def _scan(letters: str, word: str, final: bool) -> Tuple[str, ...]:
    """Greedy longest-match scan of ``letters`` against :data:`PHONEME_MAP`.

    ``word`` is the full word ``letters`` was taken from and decides how ``y``
    is read. ``final`` is set when ``letters`` runs to the end of the word,
    where a silent ``e`` is dropped.
    """

    phonemes: List[str] = []
    i = 0
    length = len(letters)
    while i < length:
        if letters[i] == "y":
            phonemes.extend(_y_phoneme(word, i))
            i += 1
            continue
        if final and i == length - 1 and _is_silent_e(word):
            break
        for size in range(min(_MAX_SEQUENCE, length - i), 0, -1):
            chunk = letters[i : i + size]
            mapped = PHONEME_MAP.get(chunk)
            if mapped is not None:
                phonemes.extend(mapped)
                i += size
                break
        else:
            # unknown letters pass through as literal tokens
            phonemes.append(letters[i])
            i += 1
    return tuple(phonemes)


def _y_phoneme(word: str, index: int) -> Tuple[str, ...]:
    if index == 0:
        return ("Y",)
    has_other_vowel = any(letter in "aeiou" for letter in word)
    if index == len(word) - 1:
        return ("IY",) if has_other_vowel else ("AY",)
    return ("IY",) if has_other_vowel else ("IH",)


def _is_silent_e(word: str) -> bool:
    if len(word) <= 2 or not word.endswith("e"):
        return False
    if word[-2] in VOWEL_LETTERS:
        return False
    return any(letter in "aeiouy" for letter in word[:-2])


def is_vowel(phoneme: str) -> bool:
    """Return ``True`` if the phoneme represents a vowel."""

    return phoneme in ARPABET_VOWELS


def key_length(key: str) -> int:
    """Length of a space separated key, ignoring the separators."""

    return len(key.replace(" ", ""))


def _vowel_indices(phonemes: Sequence[str]) -> List[int]:
    return [index for index, phoneme in enumerate(phonemes) if is_vowel(phoneme)]
