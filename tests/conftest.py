from __future__ import annotations

import _bootstrap  # noqa: F401
import pytest

from lyric_rhymes.models import RhymeGroup, RhymeWord


@pytest.fixture()
def make_word():
    def factory(line: int, position: int = 0, word: str = "word", is_end_rhyme: bool = True) -> RhymeWord:
        return RhymeWord(
            word=word,
            line=line,
            position=position,
            start=0,
            end=len(word),
            is_end_rhyme=is_end_rhyme,
            syllables=1,
            phonetic_representation="",
        )

    return factory


@pytest.fixture()
def make_group():
    def factory(group_id: str, rhyme_type: str, words, strength: float = 0.9) -> RhymeGroup:
        return RhymeGroup(
            id=group_id,
            rhyme_type=rhyme_type,
            strength=strength,
            words=tuple(words),
            color="#000000",
        )

    return factory


@pytest.fixture()
def verse() -> str:
    return "\n".join(
        [
            "[Verse 1]",
            "I saw a black cat",
            "sitting on my hat",
            "",
            "it ran into the night",
            "chasing after light",
        ]
    )
