"""Randomised search for lines with an exact syllable count."""

from __future__ import annotations

import os
import random
import time
from collections import defaultdict
from dataclasses import dataclass, fields, replace
from typing import Collection, Dict, List, Optional, Sequence, Tuple

from found_haiku.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    start_span,
)

from .filters import clean_phrase, is_weak_ending, is_weak_start, passes_filters, tokenize
from .oracle import SyllableOracle

FALLBACK_LINE = "silence falls here"

STRATEGY_EMPTY = "empty"
STRATEGY_PHRASE = "phrase"
STRATEGY_PHRASE_WINDOW = "phrase_window"
STRATEGY_WORD_WALK = "word_walk"
STRATEGY_GREEDY = "greedy"
STRATEGY_LITERAL = "literal"

_SETTINGS_ENV = {
    "max_attempts": "FOUND_HAIKU_MAX_ATTEMPTS",
    "word_strategy_after": "FOUND_HAIKU_WORD_STRATEGY_AFTER",
    "max_stuck": "FOUND_HAIKU_MAX_STUCK",
    "fallback_attempts": "FOUND_HAIKU_FALLBACK_ATTEMPTS",
}

_logger = get_logger(__name__).bind(component="line_generator")

_metric_lines = create_counter(
    "found_haiku_lines_total",
    "Lines produced by the line generator, by winning strategy.",
    label_names=("strategy",),
)
_metric_line_seconds = create_histogram(
    "found_haiku_line_seconds",
    "Time spent building a single line.",
)


@dataclass(frozen=True)
class Line:
    """A generated line and the syllable count recomputed from its text."""

    text: str
    syllables: int
    strategy: str

    @property
    def tokens(self) -> List[str]:
        return self.text.split()

    @property
    def first_token(self) -> str:
        tokens = self.tokens
        return tokens[0] if tokens else ""

    @property
    def last_token(self) -> str:
        tokens = self.tokens
        return tokens[-1] if tokens else ""

    @property
    def is_fallback(self) -> bool:
        """True for the fixed placeholder line, which may miss the target."""

        return self.strategy == STRATEGY_LITERAL


@dataclass(frozen=True)
class GeneratorSettings:
    """Attempt budgets for :class:`LineGenerator`.

    ``max_attempts`` bounds the shared loop of the phrase and word strategies;
    the word strategy joins once the attempt index passes
    ``word_strategy_after``. ``max_stuck`` caps rejected draws within one word
    walk. ``fallback_attempts`` bounds the syllable-bucket fill, which prefers
    a strong final word once ``ending_window`` syllables or fewer remain.
    """

    max_attempts: int = 300
    word_strategy_after: int = 150
    max_stuck: int = 50
    fallback_attempts: int = 20
    ending_window: int = 3
    fallback_line: str = FALLBACK_LINE

    def __post_init__(self) -> None:
        for item in fields(self):
            if item.name == "fallback_line":
                continue
            value = getattr(self, item.name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{item.name} must be a non-negative integer, got {value!r}")
        if not self.fallback_line.strip():
            raise ValueError("fallback_line must not be blank")

    @classmethod
    def from_env(cls, base: Optional["GeneratorSettings"] = None) -> "GeneratorSettings":
        """Return ``base`` (or the defaults) overridden by environment values."""

        settings = base or cls()
        overrides: Dict[str, int] = {}
        for name, env_name in _SETTINGS_ENV.items():
            raw = os.environ.get(env_name)
            if raw is None or not raw.strip():
                continue
            try:
                value = int(raw)
            except ValueError:
                value = -1
            if value < 0:
                _logger.warning(
                    "Ignoring invalid generator setting",
                    context={"variable": env_name, "value": raw},
                )
                continue
            overrides[name] = value
        return replace(settings, **overrides) if overrides else settings


def _word_pool(words: Collection[str]) -> Tuple[str, ...]:
    if isinstance(words, (list, tuple)):
        return tuple(words)
    return tuple(sorted(words))


class LineGenerator:
    """Assemble lines of an exact syllable count from phrases and words.

    Three strategies run in order of quality:

    1. a random phrase, whole or as a window of consecutive tokens;
    2. a random walk over single words (after ``word_strategy_after``
       attempts);
    3. a greedy fill from words bucketed by syllable count.

    When all of them fail the fixed fallback line is returned, so
    :meth:`build_line` always produces a :class:`Line`.
    """

    def __init__(
        self,
        oracle: SyllableOracle,
        settings: Optional[GeneratorSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.oracle = oracle
        self.settings = settings or GeneratorSettings()
        self._rng = rng or random.Random()

    # Public API ------------------------------------------------------------
    def build_line(
        self,
        target: int,
        phrases: Sequence[str],
        words: Collection[str],
        *,
        strict_known_only: bool = False,
    ) -> Line:
        """Return a line whose syllables sum to ``target``.

        Only the fallback line (``Line.is_fallback``) may miss the target.
        """

        start = time.perf_counter()
        with start_span(
            "haiku.build_line",
            {
                "haiku.target": target,
                "haiku.phrases": len(phrases),
                "haiku.words": len(words),
                "haiku.strict_known_only": strict_known_only,
            },
        ) as span:
            text, strategy = self._search(target, phrases, words, strict_known_only)
            line = Line(text=text, syllables=self.oracle.count_phrase(text), strategy=strategy)
            add_span_attributes(
                span,
                {"haiku.strategy": strategy, "haiku.syllables": line.syllables},
            )

        _metric_lines.labels(strategy=strategy).inc()
        _metric_line_seconds.observe(time.perf_counter() - start)

        context = {"target": target, "strategy": strategy, "syllables": line.syllables}
        if strategy == STRATEGY_LITERAL:
            _logger.warning("No strategy met the syllable target", context=context)
        elif strategy == STRATEGY_GREEDY:
            _logger.info("Line built by greedy fallback", context=context)
        else:
            _logger.debug("Line built", context=context)
        return line

    # Search ----------------------------------------------------------------
    def _search(
        self,
        target: int,
        phrases: Sequence[str],
        words: Collection[str],
        strict_known_only: bool,
    ) -> Tuple[str, str]:
        if target <= 0:
            return "", STRATEGY_EMPTY

        require_known = strict_known_only and self.oracle.has_dictionary
        pool = _word_pool(words)
        if require_known:
            pool = tuple(word for word in pool if self.oracle.is_known_word(word))

        settings = self.settings
        for attempt in range(settings.max_attempts):
            if phrases:
                found = self._from_phrase(self._rng.choice(phrases), target, require_known)
                if found is not None:
                    return found

            if attempt > settings.word_strategy_after and pool:
                text = self._word_walk(pool, target, require_known)
                if text is not None:
                    return text, STRATEGY_WORD_WALK

        text = self._greedy_fill(pool, target, require_known)
        if text is not None:
            return text, STRATEGY_GREEDY
        return settings.fallback_line, STRATEGY_LITERAL

    def _from_phrase(
        self,
        phrase: str,
        target: int,
        require_known: bool,
    ) -> Optional[Tuple[str, str]]:
        """Strategy 1: the whole phrase, else a window of consecutive tokens."""

        if not isinstance(phrase, str):
            return None

        oracle = self.oracle
        if oracle.count_phrase(phrase) == target:
            cleaned = clean_phrase(phrase)
            if passes_filters(cleaned.split(), oracle, require_known):
                return cleaned, STRATEGY_PHRASE

        tokens = tokenize(phrase)

        for offset in range(len(tokens)):
            total = 0
            selected: List[str] = []
            for token in tokens[offset:]:
                syllables = oracle.count(token)
                if total + syllables > target:
                    break
                total += syllables
                selected.append(token)
                if total == target and len(selected) >= 2:
                    if passes_filters(selected, oracle, require_known):
                        return " ".join(selected), STRATEGY_PHRASE_WINDOW
                    break
        return None

    def _word_walk(
        self,
        pool: Sequence[str],
        target: int,
        require_known: bool,
    ) -> Optional[str]:
        """Strategy 2: draw random words until the target is hit exactly."""

        oracle = self.oracle
        total = 0
        selected: List[str] = []
        stuck = 0

        while total < target and stuck < self.settings.max_stuck:
            word = self._rng.choice(pool)
            syllables = oracle.count(word)
            if syllables <= 0:
                stuck += 1
            elif total + syllables == target:
                if is_weak_ending(word):
                    stuck += 1
                else:
                    selected.append(word)
                    total += syllables
            elif total + syllables < target:
                if not selected and is_weak_start(word):
                    stuck += 1
                else:
                    selected.append(word)
                    total += syllables
            else:
                stuck += 1

        if total == target and len(selected) >= 2:
            if passes_filters(selected, oracle, require_known):
                return " ".join(selected)
        return None

    def _greedy_fill(
        self,
        pool: Sequence[str],
        target: int,
        require_known: bool,
    ) -> Optional[str]:
        """Strategy 3: fill the target from words bucketed by syllable count."""

        oracle = self.oracle
        buckets: Dict[int, List[str]] = defaultdict(list)
        for word in pool:
            syllables = oracle.count(word)
            if 0 < syllables <= target:
                buckets[syllables].append(word)
        if not buckets:
            return None

        for _ in range(self.settings.fallback_attempts):
            selected = self._greedy_attempt(buckets, target)
            if selected and passes_filters(selected, oracle, require_known):
                return " ".join(selected)
        return None

    def _greedy_attempt(self, buckets: Dict[int, List[str]], target: int) -> Optional[List[str]]:
        rng = self._rng
        remaining = target
        selected: List[str] = []

        while remaining > 0:
            exact = buckets.get(remaining)
            if exact and remaining <= self.settings.ending_window:
                strong = [word for word in exact if not is_weak_ending(word)]
                if strong:
                    selected.append(rng.choice(strong))
                    return selected

            if exact:
                selected.append(rng.choice(exact))
                return selected

            options = [
                (word, syllables)
                for syllables in sorted(buckets)
                if syllables <= remaining
                for word in buckets[syllables]
                if selected or not is_weak_start(word)
            ]
            if not options:
                return None
            word, syllables = rng.choice(options)
            selected.append(word)
            remaining -= syllables

        return selected


__all__ = [
    "FALLBACK_LINE",
    "GeneratorSettings",
    "Line",
    "LineGenerator",
    "STRATEGY_EMPTY",
    "STRATEGY_GREEDY",
    "STRATEGY_LITERAL",
    "STRATEGY_PHRASE",
    "STRATEGY_PHRASE_WINDOW",
    "STRATEGY_WORD_WALK",
]
