import _bootstrap  # noqa: F401

from lyric_rhymes.analysis import analyze
from lyric_rhymes.extract import split_lines
from lyric_rhymes.scheme import (
    detect_scheme_pattern,
    end_rhyme_scheme,
    line_density,
    normalize_scheme,
    rhyme_stats,
    scheme_label,
)


def _scheme(lyrics):
    return end_rhyme_scheme(analyze(lyrics), split_lines(lyrics))


def test_alternate_rhyme():
    scheme = _scheme("cat\ndog\nhat\nfog")
    assert scheme == ["A", "B", "A", "B"]
    assert detect_scheme_pattern(scheme) == "Alternate/Cross Rhyme"


def test_couplets_with_section_marker(verse):
    scheme = _scheme(verse)
    assert scheme == ["A", "A", "B", "B"]
    assert detect_scheme_pattern(scheme) == "Couplets"


def test_unrhymed_lines_get_their_own_label():
    scheme = _scheme("cat\napple\nhat\norange")
    assert scheme == ["A", "B", "A", "C"]
    assert detect_scheme_pattern(scheme) is None


def test_short_schemes_are_not_named():
    assert detect_scheme_pattern(["A", "A", "A"]) is None
    assert detect_scheme_pattern(_scheme("[Hook]\ncat\nhat")) is None


def test_pattern_must_repeat():
    assert detect_scheme_pattern(list("AABBCCDD")) == "Couplets"
    assert detect_scheme_pattern(list("ABCBDEFE")) == "Quatrain (common)"
    assert detect_scheme_pattern(list("AABBCDCD")) is None


def test_labels():
    assert scheme_label(0) == "A"
    assert scheme_label(25) == "Z"
    assert scheme_label(26) == "A1"
    assert normalize_scheme(["C", "D", "C", "D"]) == "ABAB"


def test_stats(verse):
    stats = rhyme_stats(analyze(verse), split_lines(verse))
    assert stats.total_groups == 3
    assert stats.end_rhyme_groups == 2
    assert stats.internal_rhyme_groups == 1
    assert stats.total_end_rhymes == 4
    assert stats.total_internal_rhymes == 2
    assert stats.end_rhyme_percent == 100


def test_stats_percent_excludes_section_markers():
    lyrics = "cat\nhat\n[Chorus]\ndog"
    stats = rhyme_stats(analyze(lyrics), split_lines(lyrics))
    assert stats.end_rhyme_percent == 67
    assert rhyme_stats([], []).end_rhyme_percent == 0


def test_line_density():
    lyrics = "my cat\nan hat\n[Outro]"
    assert line_density(analyze(lyrics), split_lines(lyrics)) == [0.5, 0.5]
