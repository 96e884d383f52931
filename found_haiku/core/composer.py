"""Three-line haiku composition on top of :class:`LineGenerator`."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from found_haiku.utils.observability import get_logger, start_span

from .corpus import Corpus
from .generator import Line, LineGenerator
from .oracle import SyllableOracle

HAIKU_PATTERN: Tuple[int, ...] = (5, 7, 5)

COUNT_SEPARATOR = " • "

TAGLINES: Tuple[str, ...] = (
    "found poetry from sealed places",
    "five, seven, five to life",
    "the documents speak in verse",
    "where redactions become stanzas",
    "court-ordered tranquility",
    "declassified one syllable at a time",
    "evidence has never been this elegant",
    "legally obtained. poetically arranged.",
    "what the foia intended",
    "finding inner peace in public records",
    "exhibit a in the art of calm",
    "unsealed for your enlightenment",
    "the most relaxing use of federal documents",
    "mindfulness through court filings",
    "therapeutic jurisprudence, literally",
    "depositions, distilled",
    "inhale testimony, exhale verdict",
    "every redaction is a pause for reflection",
    "the flight log of the soul",
    "putting the zen in subpoena",
    "namaste in the court of law",
    "plea deals in iambic pentameter, almost",
    "wellness content from unwellness documents",
    "classified serenity, now declassified",
)


def choose_tagline(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(TAGLINES)


@dataclass(frozen=True)
class Haiku:
    lines: Tuple[Line, ...]

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    @property
    def syllable_counts(self) -> Tuple[int, ...]:
        return tuple(line.syllables for line in self.lines)

    @property
    def is_degraded(self) -> bool:
        """True when any line had to use the fixed fallback text."""

        return any(line.is_fallback for line in self.lines)

    def format_counts(self) -> str:
        """Render the syllable readout, e.g. ``5 • 7 • 5``."""

        return COUNT_SEPARATOR.join(str(count) for count in self.syllable_counts)


class HaikuComposer:
    """Build one line per target in ``pattern`` from a shared corpus."""

    def __init__(
        self,
        corpus: Corpus,
        oracle: SyllableOracle,
        generator: Optional[LineGenerator] = None,
        *,
        strict_known_only: bool = False,
        pattern: Sequence[int] = HAIKU_PATTERN,
    ) -> None:
        self.corpus = corpus
        self.oracle = oracle
        self.generator = generator or LineGenerator(oracle)
        self.strict_known_only = strict_known_only
        self.pattern = tuple(pattern)
        self._logger = get_logger(__name__).bind(component="haiku_composer")

    def compose(self) -> Haiku:
        with start_span("haiku.compose", {"haiku.pattern": list(self.pattern)}):
            lines = tuple(
                self.generator.build_line(
                    target,
                    self.corpus.phrases,
                    self.corpus.words,
                    strict_known_only=self.strict_known_only,
                )
                for target in self.pattern
            )
        haiku = Haiku(lines=lines)
        if haiku.is_degraded:
            self._logger.warning(
                "Haiku used the fallback line",
                context={"counts": haiku.format_counts()},
            )
        return haiku


__all__ = [
    "COUNT_SEPARATOR",
    "HAIKU_PATTERN",
    "Haiku",
    "HaikuComposer",
    "TAGLINES",
    "choose_tagline",
]
