import logging

import pytest

from found_haiku.core import SYLLABLE_EXCEPTIONS, SyllableOracle
from found_haiku.utils.syllables import estimate_syllable_count


def test_dictionary_value_is_returned_verbatim():
    oracle = SyllableOracle({"subpoena": 3})

    assert oracle.count("Subpoena!") == 3


def test_dictionary_overrides_heuristic_and_exception_table():
    oracle = SyllableOracle({"subpoena": 7, "fire": 2}, use_exceptions=False)

    assert estimate_syllable_count("subpoena") != 7
    assert oracle.count("SUBPOENA") == 7
    assert oracle.count("fire") == 2

    with_exceptions = SyllableOracle({"fire": 2})
    assert SYLLABLE_EXCEPTIONS["fire"] == 1
    assert with_exceptions.count("fire") == 2


def test_exception_table_applies_without_dictionary(oracle):
    assert oracle.count("Investigation") == 5
    assert oracle.count("people") == 2


def test_heuristic_used_when_nothing_else_matches():
    oracle = SyllableOracle(use_exceptions=False)

    assert oracle.count("marmalade") == estimate_syllable_count("marmalade")


@pytest.mark.parametrize("token", ["", "   ", "123", "--", "!?"])
def test_count_is_zero_for_tokens_without_letters(oracle, token):
    assert oracle.count(token) == 0


@pytest.mark.parametrize("token", ["zzyzx", "glorp", "a", "Thy", "quixotically"])
def test_count_is_at_least_one_for_alphabetic_tokens(oracle, token):
    assert oracle.count(token) >= 1


def test_count_phrase_skips_tokens_without_letters(oracle):
    text = "the quiet court -- of law! 2019"

    expected = sum(oracle.count(word) for word in ("the", "quiet", "court", "of", "law"))
    assert oracle.count_phrase(text) == expected
    assert oracle.count_phrase("") == 0
    assert oracle.count_phrase("... ---") == 0


def test_is_known_word_is_false_without_dictionary(oracle):
    assert oracle.has_dictionary is False
    assert oracle.is_known_word("the") is False
    assert oracle.is_known_word("court") is False


def test_is_known_word_normalises_tokens():
    oracle = SyllableOracle({"Court": 1})

    assert oracle.is_known_word("court.") is True
    assert oracle.is_known_word("COURT") is True
    assert oracle.is_known_word("law") is False
    assert oracle.is_known_word("") is False


def test_load_dictionary_skips_invalid_entries(caplog):
    oracle = SyllableOracle()
    caplog.set_level(logging.INFO, logger="found_haiku.core.oracle")

    kept = oracle.load_dictionary(
        {"": 2, "zero": 0, "bad": "x", "flag": True, "good": "2", "Fine!": 1, "none": None}
    )

    assert kept == 2
    assert oracle.dictionary_size == 2
    assert oracle.count("good") == 2
    assert oracle.is_known_word("fine")
    assert not oracle.is_known_word("zero")
    assert any("Syllable dictionary loaded" in record.getMessage() for record in caplog.records)


def test_late_dictionary_load_changes_subsequent_counts(oracle):
    assert oracle.count("fire") == 1

    oracle.load_dictionary({"fire": 2})

    assert oracle.count("fire") == 2
    assert oracle.is_known_word("fire")


def test_loaded_dictionary_is_read_only():
    source = {"court": 1}
    oracle = SyllableOracle(source)
    source["court"] = 9

    assert oracle.count("court") == 1
