"""Syllable counting and syllable-exact line generation."""

from .cmudict_loader import CMUSyllableLoader, load_json_dictionary
from .composer import HAIKU_PATTERN, Haiku, HaikuComposer, TAGLINES, choose_tagline
from .corpus import Corpus, extract_words, load_corpus
from .exceptions import SYLLABLE_EXCEPTIONS
from .filters import (
    WEAK_ENDINGS,
    WEAK_STARTS,
    clean_phrase,
    ends_well,
    passes_filters,
    starts_well,
    tokenize,
)
from .generator import FALLBACK_LINE, GeneratorSettings, Line, LineGenerator
from .oracle import SyllableOracle

__all__ = [
    "CMUSyllableLoader",
    "Corpus",
    "FALLBACK_LINE",
    "GeneratorSettings",
    "HAIKU_PATTERN",
    "Haiku",
    "HaikuComposer",
    "Line",
    "LineGenerator",
    "SYLLABLE_EXCEPTIONS",
    "SyllableOracle",
    "TAGLINES",
    "WEAK_ENDINGS",
    "WEAK_STARTS",
    "choose_tagline",
    "clean_phrase",
    "ends_well",
    "extract_words",
    "load_corpus",
    "load_json_dictionary",
    "passes_filters",
    "starts_well",
    "tokenize",
]
