"""Extraction of rhyme candidate words from raw lyric text."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from nltk.tokenize import WhitespaceTokenizer

from .models import RhymeWord
from .phonetics import approximate_phonemes, fold_accents
from .syllables import count_syllables

LOGGER = logging.getLogger(__name__)

SECTION_MARKER_RE = re.compile(r"^\[.*\]$")
LETTER_RE = re.compile(r"[A-Za-z]")

MIN_END_WORD_LENGTH = 2
MIN_INTERNAL_WORD_LENGTH = 3

_TOKENIZER = WhitespaceTokenizer()


@dataclass(frozen=True)
class LyricLine:
    """A non-blank line of lyric text and where it came from."""

    index: int
    source_line: int
    text: str
    is_section_marker: bool


def is_section_marker(line: str) -> bool:
    return bool(SECTION_MARKER_RE.match(line.strip()))


def split_lines(lyrics: str) -> List[LyricLine]:
    """Return the non-blank lines of ``lyrics`` with their analysis index.

    Section markers such as ``[Chorus]`` keep their index so that line numbers
    stay aligned with what the reader sees; blank lines are not numbered.
    """

    lines: List[LyricLine] = []
    for source_line, raw in enumerate(lyrics.split("\n")):
        text = raw.rstrip("\r")
        if not text.strip():
            continue
        lines.append(
            LyricLine(
                index=len(lines),
                source_line=source_line,
                text=text,
                is_section_marker=is_section_marker(text),
            )
        )
    return lines


def iter_tokens(text: str) -> Iterator[Tuple[str, int, int]]:
    """Yield ``(letters, start, end)`` for every whitespace token of ``text``.

    ``letters`` is the token with accents folded and every non-letter
    removed; ``start`` and ``end`` bound the first and last letter in
    ``text``, so ``"naïve"`` yields ``"naive"`` over all five characters.
    Tokens without letters yield an empty string and their own span.
    """

    for token_start, token_end in _TOKENIZER.span_tokenize(text):
        token = text[token_start:token_end]
        folded = [(i, "".join(LETTER_RE.findall(fold_accents(char)))) for i, char in enumerate(token)]
        positions = [i for i, letters in folded if letters]
        if not positions:
            yield "", token_start, token_end
            continue
        letters = "".join(letters for _, letters in folded)
        yield letters, token_start + positions[0], token_start + positions[-1] + 1


def extract_line_words(line: LyricLine) -> List[RhymeWord]:
    """Build the end-rhyme and internal words of a single content line."""

    if line.is_section_marker:
        return []
    tokens = list(iter_tokens(line.text))
    if not tokens:
        return []

    words: List[RhymeWord] = []
    last = len(tokens) - 1
    for position, (letters, start, end) in enumerate(tokens):
        is_end = position == last
        minimum = MIN_END_WORD_LENGTH if is_end else MIN_INTERNAL_WORD_LENGTH
        if len(letters) < minimum:
            continue
        words.append(_make_word(letters, line.index, position, start, end, is_end))
    return words


def extract_words(lyrics: str) -> List[RhymeWord]:
    """Extract every rhyme candidate word from ``lyrics`` in reading order."""

    lines = split_lines(lyrics)
    words: List[RhymeWord] = []
    for line in lines:
        words.extend(extract_line_words(line))
    LOGGER.debug("Extracted %s words from %s lines", len(words), len(lines))
    return words


def _make_word(letters: str, line: int, position: int, start: int, end: int, is_end: bool) -> RhymeWord:
    return RhymeWord(
        word=letters,
        line=line,
        position=position,
        start=start,
        end=end,
        is_end_rhyme=is_end,
        syllables=count_syllables(letters),
        phonetic_representation=approximate_phonemes(letters).text,
    )
