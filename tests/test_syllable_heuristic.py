import pytest

from found_haiku.utils.syllables import clean_word, estimate_syllable_count


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("make", 1),
        ("table", 2),
        ("free", 1),
        ("waited", 2),
        ("jumped", 1),
        ("gracious", 3),
        ("courteous", 3),
        ("mania", 3),
        ("radio", 3),
        ("rhythm", 1),
        ("bed", 1),
    ],
)
def test_estimate_syllable_count_applies_suffix_rules(word, expected):
    assert estimate_syllable_count(word) == expected


@pytest.mark.parametrize("word", ["", "123", "!!", "  "])
def test_estimate_syllable_count_is_zero_without_letters(word):
    assert estimate_syllable_count(word) == 0


@pytest.mark.parametrize("word", ["the", "shh", "b", "ye", "cwm", "strengths"])
def test_estimate_syllable_count_never_drops_below_one(word):
    assert estimate_syllable_count(word) >= 1


def test_estimate_syllable_count_ignores_case_and_punctuation():
    assert estimate_syllable_count("Table!") == estimate_syllable_count("table")


def test_studied_is_counted_consistently():
    counts = {estimate_syllable_count("studied") for _ in range(10)}

    assert len(counts) == 1
    assert counts.pop() >= 1


def test_clean_word_keeps_only_lowercase_letters():
    assert clean_word("Court's,") == "courts"
    assert clean_word("") == ""
    assert clean_word("42") == ""
