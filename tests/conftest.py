import random
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from found_haiku.core import Corpus, LineGenerator, SyllableOracle

_ENV_VARIABLES = (
    "FOUND_HAIKU_CMUDICT",
    "FOUND_HAIKU_CORPUS",
    "FOUND_HAIKU_FALLBACK_ATTEMPTS",
    "FOUND_HAIKU_LOG_LEVEL",
    "FOUND_HAIKU_MAX_ATTEMPTS",
    "FOUND_HAIKU_MAX_STUCK",
    "FOUND_HAIKU_SHARE",
    "FOUND_HAIKU_SYLLABLES",
    "FOUND_HAIKU_WORD_STRATEGY_AFTER",
)

SAMPLE_PHRASES = [
    "The quiet court of law moves slowly.",
    "Counsel filed a motion to dismiss the charges",
    "the witness declined to answer further questions",
    "Exhibit 14 was entered into evidence",
    "records remain sealed pending review by the court",
    "and the river keeps on flowing past the island",
    "---",
    "",
]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep developer environment overrides out of the tests."""

    for name in _ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def oracle():
    return SyllableOracle()


@pytest.fixture
def sample_corpus():
    return Corpus.from_phrases(SAMPLE_PHRASES)


@pytest.fixture
def make_generator(oracle):
    """Factory returning a generator seeded for reproducible draws."""

    def _factory(seed=7, settings=None, syllable_oracle=None):
        return LineGenerator(
            syllable_oracle or oracle,
            settings,
            rng=random.Random(seed),
        )

    return _factory
