"""Syllable dictionaries derived from the CMU pronouncing dictionary."""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

import pronouncing

from found_haiku.utils.observability import get_logger

CMUDICT_ENV = "FOUND_HAIKU_CMUDICT"

_WORD_VARIANT_PATTERN = re.compile(r"\(\d+\)$")

_logger = get_logger(__name__).bind(component="cmudict_loader")


def _strip_variant(word: str) -> str:
    return _WORD_VARIANT_PATTERN.sub("", word).lower()


def _syllables_from_entries(entries: Iterable[Tuple[str, str]]) -> Dict[str, int]:
    """Map each word to the syllable count of its first pronunciation."""

    syllables: Dict[str, int] = {}
    for word, phones in entries:
        if not word or word in syllables:
            continue
        count = pronouncing.syllable_count(phones)
        if count > 0:
            syllables[word] = count
    return syllables


class CMUSyllableLoader:
    """Lazy loader producing a ``word -> syllable count`` mapping.

    ``dict_path`` (or the ``FOUND_HAIKU_CMUDICT`` environment variable) points
    at a file in ``cmudict.7b`` format. Without either, the copy of the CMU
    dictionary bundled with :mod:`pronouncing` is used.
    """

    def __init__(self, dict_path: Optional[Path | str] = None) -> None:
        if dict_path is None:
            env_path = os.environ.get(CMUDICT_ENV)
            dict_path = env_path or None
        self.dict_path: Optional[Path] = Path(dict_path) if dict_path else None
        self._syllables: Mapping[str, int] = MappingProxyType({})
        self._loaded: bool = False

    def _read_file(self, path: Path) -> Optional[Dict[str, int]]:
        entries = []
        try:
            with path.open("r", encoding="utf-8", errors="strict") as handle:
                for line in handle:
                    entry = line.strip()
                    if not entry or entry.startswith(";;;"):
                        continue
                    parts = entry.split(None, 1)
                    if len(parts) < 2:
                        continue
                    word = _strip_variant(parts[0])
                    entries.append((word, parts[1]))
        except (OSError, UnicodeDecodeError) as exc:
            _logger.warning(
                "CMU dictionary unreadable",
                context={"path": str(path), "error": str(exc)},
            )
            return None
        return _syllables_from_entries(entries)

    def _read_bundled(self) -> Dict[str, int]:
        pronouncing.init_cmu()
        return _syllables_from_entries(pronouncing.pronunciations or ())

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return

        if self.dict_path is not None:
            if not self.dict_path.exists():
                return
            syllables = self._read_file(self.dict_path)
            if syllables is None:
                return
            source = str(self.dict_path)
        else:
            syllables = self._read_bundled()
            source = "pronouncing"

        self._syllables = MappingProxyType(syllables)
        self._loaded = True
        _logger.info(
            "CMU syllable dictionary ready",
            context={"source": source, "entries": len(syllables)},
        )

    @property
    def loaded(self) -> bool:
        return self._loaded

    def syllable_dictionary(self) -> Mapping[str, int]:
        """Return the loaded mapping, empty while the source is unavailable."""

        self._ensure_loaded()
        return self._syllables

    def syllables_for(self, word: str) -> Optional[int]:
        self._ensure_loaded()
        return self._syllables.get(word.lower())


def load_json_dictionary(path: Path | str) -> Dict[str, int]:
    """Read a flat ``{"word": count}`` JSON document.

    Unreadable files and non-object documents yield an empty mapping. Entries
    whose value is not an integer are dropped.
    """

    json_path = Path(path)
    try:
        with json_path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        _logger.warning(
            "Syllable dictionary unreadable",
            context={"path": str(json_path), "error": str(exc)},
        )
        return {}

    if not isinstance(raw, Mapping):
        _logger.warning(
            "Syllable dictionary is not a JSON object",
            context={"path": str(json_path), "type": type(raw).__name__},
        )
        return {}

    return {
        str(word): value
        for word, value in raw.items()
        if isinstance(value, int) and not isinstance(value, bool)
    }


__all__ = ["CMUSyllableLoader", "CMUDICT_ENV", "load_json_dictionary"]
