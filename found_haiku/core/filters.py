"""Boundary-word rules that keep generated lines from dangling."""

from __future__ import annotations

import re
from typing import List, Sequence

from found_haiku.utils.syllables import clean_word

from .oracle import SyllableOracle

# Function words a line must not end on.
WEAK_ENDINGS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "of", "to", "in", "on", "at",
        "by", "for", "with", "from", "as", "is", "was", "were", "are", "be",
        "that", "this", "these", "those", "it", "its", "my", "his", "her",
        "our", "your", "their", "not", "no", "so", "if", "then", "than",
        "had", "has", "have", "been", "being", "do", "did", "does", "will",
        "would", "could", "should", "shall", "may", "might", "can", "just",
        "very", "also", "about", "into", "onto", "upon", "over", "under",
        "between", "through", "during", "before", "after", "while", "when",
        "where", "which", "who", "whom", "whose", "what", "how", "because",
        "although", "whether", "i", "we", "you", "he", "she", "they",
        "me", "him", "us", "them", "some", "any", "each", "every",
    }
)

# Coordinating conjunctions a line must not start with.
WEAK_STARTS = frozenset({"and", "or", "but", "so", "yet", "nor", "for"})

_TOKEN_PATTERN = re.compile(r"[A-Za-z']+")
_LETTER_PATTERN = re.compile(r"[A-Za-z]")
_PUNCTUATION_PATTERN = re.compile(r"[^\w\s']")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """Return the maximal runs of letters and apostrophes in ``text``.

    Runs made only of apostrophes carry no word and are dropped.
    """

    if not text:
        return []
    return [token for token in _TOKEN_PATTERN.findall(text) if _LETTER_PATTERN.search(token)]


def clean_phrase(text: str) -> str:
    """Strip punctuation except apostrophes, collapse whitespace, lower-case."""

    stripped = _PUNCTUATION_PATTERN.sub("", text or "")
    return _WHITESPACE_PATTERN.sub(" ", stripped).strip().lower()


def is_weak_ending(word: str) -> bool:
    return clean_word(word) in WEAK_ENDINGS


def is_weak_start(word: str) -> bool:
    return clean_word(word) in WEAK_STARTS


def ends_well(tokens: Sequence[str]) -> bool:
    if not tokens:
        return False
    last = clean_word(tokens[-1])
    return bool(last) and last not in WEAK_ENDINGS


def starts_well(tokens: Sequence[str]) -> bool:
    if not tokens:
        return False
    first = clean_word(tokens[0])
    return bool(first) and first not in WEAK_STARTS


def all_known(tokens: Sequence[str], oracle: SyllableOracle) -> bool:
    """True when every token is covered by the oracle's dictionary."""

    return all(oracle.is_known_word(token) for token in tokens)


def passes_filters(
    tokens: Sequence[str],
    oracle: SyllableOracle,
    require_known: bool = False,
) -> bool:
    """Apply both boundary rules, plus the known-word rule when requested.

    The known-word rule only applies while the oracle has a dictionary
    loaded; without one every candidate would be rejected.
    """

    if not (ends_well(tokens) and starts_well(tokens)):
        return False
    if require_known and oracle.has_dictionary:
        return all_known(tokens, oracle)
    return True


__all__ = [
    "WEAK_ENDINGS",
    "WEAK_STARTS",
    "all_known",
    "clean_phrase",
    "ends_well",
    "is_weak_ending",
    "is_weak_start",
    "passes_filters",
    "starts_well",
    "tokenize",
]
