import _bootstrap  # noqa: F401

from lyric_rhymes.phonetics import (
    Pronunciation,
    approximate_phonemes,
    clean_word,
    key_length,
)


def test_single_letter_mapping():
    assert approximate_phonemes("cat").text == "K AE T"
    assert approximate_phonemes("hat").text == "HH AE T"


def test_known_endings_take_precedence():
    assert approximate_phonemes("night").text == "N AY T"
    assert approximate_phonemes("knight").text == "N AY T"
    assert approximate_phonemes("love").text == "L AH V"
    assert approximate_phonemes("singing").text == "S IH NG IH NG"


def test_silent_final_e_is_dropped():
    assert approximate_phonemes("apple").text == "AE P L"
    # "the" has no other vowel, so the e is voiced
    assert approximate_phonemes("the").text == "TH EH"


def test_y_depends_on_context():
    assert approximate_phonemes("my").text == "M AY"
    assert approximate_phonemes("fly").text == "F L AY"
    assert approximate_phonemes("baby").text == "B AE B IY"
    assert approximate_phonemes("rhythm").text == "R HH IH TH M"


def test_input_is_cleaned_before_encoding():
    assert clean_word("Can't!") == "cant"
    assert approximate_phonemes("CAT!!").text == approximate_phonemes("cat").text


def test_accents_are_folded():
    assert clean_word("Café") == "cafe"
    assert approximate_phonemes("naïve").text == approximate_phonemes("naive").text


def test_degenerate_words():
    assert approximate_phonemes("a").text == "a"
    assert approximate_phonemes("").text == ""
    assert approximate_phonemes("...").text == ""


def test_pronunciation_features():
    pron = Pronunciation(("HH", "AE", "N", "D"))
    assert pron.rhyme_tail() == ("AE", "N", "D")
    assert pron.terminal_consonants() == ("N", "D")
    assert pron.terminal_vowels() == ("AE",)
    assert pron.final_consonant() == "D"
    assert pron.vowel_count == 1


def test_pronunciation_without_vowels():
    pron = Pronunciation(("HH", "M"))
    assert pron.last_vowel_index() is None
    assert pron.rhyme_tail() == ()
    assert pron.terminal_consonants() == ()


def test_key_length_ignores_separators():
    assert key_length("AE T") == 3
    assert key_length("") == 0
