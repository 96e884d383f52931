"""Heuristic syllable estimation for English words."""

from __future__ import annotations

import re


__all__ = ["clean_word", "estimate_syllable_count"]


_NON_LETTER_PATTERN = re.compile(r"[^a-z]")
_VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")
_SILENT_E_EXEMPT = ("le", "ee", "ie", "ye")


def clean_word(token: str) -> str:
    """Lower-case ``token`` and drop everything outside ``a-z``."""

    if not token:
        return ""
    return _NON_LETTER_PATTERN.sub("", str(token).lower())


def estimate_syllable_count(word: str) -> int:
    """Estimate the number of syllables in ``word`` from its spelling.

    Each run of vowels (``y`` included) counts as one syllable, then a few
    suffix corrections are applied:

    * a silent final ``e`` is dropped unless the word ends in ``le``, ``ee``,
      ``ie`` or ``ye``;
    * a final ``ed`` is dropped unless it follows ``t`` or ``d``;
    * ``-ious``/``-eous`` and ``-ia``/``-io`` endings gain one syllable.

    Returns 0 for input without letters and at least 1 otherwise.
    """

    normalized = clean_word(word)
    if not normalized:
        return 0

    count = len(_VOWEL_GROUP_PATTERN.findall(normalized))

    if (
        normalized.endswith("e")
        and not normalized.endswith(_SILENT_E_EXEMPT)
        and len(normalized) > 2
    ):
        count -= 1

    if normalized.endswith("ed") and len(normalized) > 3:
        if normalized[-3] not in ("t", "d"):
            count -= 1

    if normalized.endswith(("ious", "eous")):
        count += 1

    if normalized.endswith(("ia", "io")):
        count += 1

    return max(1, count)
