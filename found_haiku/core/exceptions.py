"""Words whose spelling misleads the vowel-group heuristic."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

__all__ = ["SYLLABLE_EXCEPTIONS"]


_ONE = (
    "the", "to", "and", "a", "of", "in", "is", "it", "for", "that", "was",
    "on", "are", "as", "with", "his", "they", "be", "at", "one", "have",
    "this", "from", "or", "had", "by", "but", "some", "what", "there", "we",
    "can", "out", "were", "all", "your", "when", "use", "said", "each",
    "which", "she", "do", "their", "if", "will", "way", "could", "would",
    "made", "eye", "eyes", "filed", "fire", "our", "through", "where",
    "judge", "case", "court", "law", "rights", "state", "states", "charge",
    "charged", "crime", "crimes", "time", "place", "name", "names", "sealed",
    "caused", "does", "done", "those", "these", "make", "called", "closed",
    "claimed", "forced", "based", "whole", "while", "source", "once",
)

_TWO = (
    "about", "over", "after", "again", "also", "being", "before", "between",
    "because", "under", "every", "people", "into", "only", "order", "other",
    "even", "given", "never", "island", "minor", "minors", "victim",
    "victims", "alleged", "abuse", "justice", "plaintiff", "counsel",
    "motion", "trial", "witness", "prison", "unsealed", "massage", "travel",
    "private",
)

_THREE = (
    "federal", "evidence", "attorney", "agreement", "defendant", "document",
    "documents", "amendment", "however", "another", "continue", "government",
    "following", "pursuant", "trafficking", "subpoena", "indictment",
    "proceedings",
)

_FOUR = (
    "violation", "deposition", "prosecution", "conspiracy", "allegations",
    "testimony", "jurisdiction", "confidential", "allegation",
)

_FIVE = ("investigation",)


def _build() -> Mapping[str, int]:
    table = {}
    for count, words in ((1, _ONE), (2, _TWO), (3, _THREE), (4, _FOUR), (5, _FIVE)):
        for word in words:
            table[word] = count
    return MappingProxyType(table)


SYLLABLE_EXCEPTIONS: Mapping[str, int] = _build()
