"""Phrase and word corpora that feed the line generator."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from found_haiku.utils.observability import get_logger

CORPUS_ENV = "FOUND_HAIKU_CORPUS"

BACKGROUND_SNIPPET_LIMIT = 500
MIN_TEXT_LINE_LENGTH = 4
MIN_WORD_LENGTH = 2

_NON_WORD_PATTERN = re.compile(r"[^a-zA-Z']")

_logger = get_logger(__name__).bind(component="corpus")


@dataclass(frozen=True)
class Corpus:
    """Read-only phrases, standalone words and background snippets."""

    phrases: Tuple[str, ...] = ()
    words: FrozenSet[str] = frozenset()
    background: Tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "Corpus":
        return cls()

    @classmethod
    def from_phrases(
        cls,
        phrases: Iterable[Any],
        words: Optional[Iterable[Any]] = None,
    ) -> "Corpus":
        """Build a corpus, deriving the words from the phrases when omitted."""

        cleaned_phrases = _clean_strings(phrases)
        if words is None:
            word_set = extract_words(cleaned_phrases)
        else:
            word_set = frozenset(
                word for word in (_normalize_word(entry) for entry in _clean_strings(words)) if word
            )
        return cls(
            phrases=cleaned_phrases,
            words=word_set,
            background=cleaned_phrases[:BACKGROUND_SNIPPET_LIMIT],
        )

    @property
    def is_empty(self) -> bool:
        return not self.phrases and not self.words


def _clean_strings(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    if values is None or isinstance(values, (str, bytes)):
        return ()
    return tuple(value.strip() for value in values if isinstance(value, str) and value.strip())


def _normalize_word(word: str) -> str:
    return _NON_WORD_PATTERN.sub("", word).lower()


def extract_words(phrases: Iterable[str]) -> FrozenSet[str]:
    """Collect the distinct lower-cased tokens of at least two characters."""

    words = set()
    for phrase in phrases:
        for raw in phrase.split():
            word = _normalize_word(raw)
            if len(word) >= MIN_WORD_LENGTH:
                words.add(word)
    return frozenset(words)


def _corpus_from_document(document: Mapping[str, Any]) -> Corpus:
    phrases = _clean_strings(document.get("phrases"))
    raw_words = document.get("words")
    corpus = Corpus.from_phrases(phrases, raw_words if isinstance(raw_words, list) else None)

    background = _clean_strings(document.get("backgroundSnippets"))
    if background:
        corpus = Corpus(phrases=corpus.phrases, words=corpus.words, background=background)
    return corpus


def _read_json(path: Path) -> Optional[Corpus]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            document = json.load(handle)
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        _logger.error("Failed to load corpus", context={"path": str(path), "error": str(exc)})
        return None

    if not isinstance(document, Mapping):
        _logger.error(
            "Corpus document is not a JSON object",
            context={"path": str(path), "type": type(document).__name__},
        )
        return None
    return _corpus_from_document(document)


def _read_text(path: Path) -> Optional[Corpus]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        _logger.error("Failed to load corpus", context={"path": str(path), "error": str(exc)})
        return None

    phrases: List[str] = [
        line.strip() for line in text.splitlines() if len(line.strip()) >= MIN_TEXT_LINE_LENGTH
    ]
    return Corpus.from_phrases(phrases)


def _candidate_paths(path: Path) -> List[Path]:
    if path.suffix.lower() == ".txt":
        return [path]
    return [path, path.with_suffix(".txt")]


def load_corpus(path: Optional[Path | str] = None) -> Corpus:
    """Load phrases and words from a JSON document or a plain text file.

    The JSON form carries ``phrases``, optional ``words`` and optional
    ``backgroundSnippets`` lists. When it cannot be read the sibling ``.txt``
    file (one phrase per line) is tried. ``path`` defaults to the
    ``FOUND_HAIKU_CORPUS`` environment variable, then ``phrases.json`` in the
    working directory. An empty corpus is returned when nothing loads.
    """

    resolved = Path(path or os.environ.get(CORPUS_ENV) or "phrases.json")

    for candidate in _candidate_paths(resolved):
        if candidate.suffix.lower() == ".txt":
            corpus = _read_text(candidate)
        else:
            corpus = _read_json(candidate)
        if corpus is None:
            continue
        _logger.info(
            "Corpus loaded",
            context={
                "path": str(candidate),
                "phrases": len(corpus.phrases),
                "words": len(corpus.words),
            },
        )
        return corpus

    _logger.error("Failed to load any corpus", context={"path": str(resolved)})
    return Corpus.empty()


__all__ = ["Corpus", "CORPUS_ENV", "extract_words", "load_corpus"]
