"""Syllable counting backed by an optional dictionary and a heuristic."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from found_haiku.utils.observability import get_logger
from found_haiku.utils.syllables import clean_word, estimate_syllable_count

from .exceptions import SYLLABLE_EXCEPTIONS


class SyllableOracle:
    """Answer "how many syllables does this token have?".

    A loaded dictionary is authoritative. Tokens it does not cover fall back
    to the built-in exception table and then to
    :func:`~found_haiku.utils.syllables.estimate_syllable_count`, so a count
    is always available.
    """

    def __init__(
        self,
        dictionary: Optional[Mapping[str, int]] = None,
        *,
        use_exceptions: bool = True,
    ) -> None:
        self._logger = get_logger(__name__).bind(component="syllable_oracle")
        self._dictionary: Optional[Mapping[str, int]] = None
        self._exceptions: Mapping[str, int] = (
            SYLLABLE_EXCEPTIONS if use_exceptions else MappingProxyType({})
        )
        if dictionary is not None:
            self.load_dictionary(dictionary)

    @property
    def has_dictionary(self) -> bool:
        return self._dictionary is not None

    @property
    def dictionary_size(self) -> int:
        return len(self._dictionary) if self._dictionary is not None else 0

    def load_dictionary(self, dictionary: Mapping[str, int]) -> int:
        """Install ``dictionary`` as the authoritative syllable source.

        Keys are normalised the same way tokens are. Entries with an empty key
        or a count that is not a positive integer are skipped. Returns the
        number of entries kept.
        """

        cleaned = {}
        skipped = 0
        for raw_word, raw_count in dictionary.items():
            word = clean_word(raw_word)
            if not word or isinstance(raw_count, bool):
                skipped += 1
                continue
            try:
                count = int(raw_count)
            except (TypeError, ValueError):
                skipped += 1
                continue
            if count <= 0:
                skipped += 1
                continue
            cleaned.setdefault(word, count)

        self._dictionary = MappingProxyType(cleaned)
        self._logger.info(
            "Syllable dictionary loaded",
            context={"entries": len(cleaned), "skipped": skipped},
        )
        return len(cleaned)

    def count(self, token: str) -> int:
        """Return the syllable count of ``token`` (0 when it has no letters)."""

        word = clean_word(token)
        if not word:
            return 0

        dictionary = self._dictionary
        if dictionary is not None:
            known = dictionary.get(word)
            if known is not None:
                return known

        exception = self._exceptions.get(word)
        if exception is not None:
            return exception

        return estimate_syllable_count(word)

    def count_phrase(self, text: str) -> int:
        """Sum :meth:`count` over the whitespace-separated tokens of ``text``."""

        if not text:
            return 0
        return sum(self.count(token) for token in str(text).split())

    def is_known_word(self, token: str) -> bool:
        """Report whether the loaded dictionary covers ``token``."""

        dictionary = self._dictionary
        if dictionary is None:
            return False
        word = clean_word(token)
        return bool(word) and word in dictionary


__all__ = ["SyllableOracle"]
