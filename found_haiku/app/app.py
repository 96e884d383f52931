"""Application wiring for the found haiku generator."""

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import Optional

if __package__ in {None, ""}:
    import sys

    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from found_haiku.core import (
    CMUSyllableLoader,
    Corpus,
    GeneratorSettings,
    Haiku,
    HaikuComposer,
    LineGenerator,
    SyllableOracle,
    choose_tagline,
    load_corpus,
    load_json_dictionary,
)
from found_haiku.utils.logging_config import configure_logging
from found_haiku.utils.observability import get_logger

SYLLABLE_DICTIONARY_ENV = "FOUND_HAIKU_SYLLABLES"


class FoundHaikuApp:
    """High-level facade bundling corpus, oracle, generator and composer."""

    def __init__(
        self,
        corpus_path: Optional[Path | str] = None,
        *,
        corpus: Optional[Corpus] = None,
        oracle: Optional[SyllableOracle] = None,
        cmu_loader: Optional[CMUSyllableLoader] = None,
        dictionary_path: Optional[Path | str] = None,
        settings: Optional[GeneratorSettings] = None,
        use_cmu_dictionary: bool = True,
        strict_known_only: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._logger = get_logger(__name__).bind(component="app_facade")
        self._rng = rng or random.Random()

        self.corpus = corpus if corpus is not None else load_corpus(corpus_path)
        # A caller-supplied oracle is used as given; dictionaries only go
        # into an oracle the app creates.
        if oracle is not None:
            self.oracle = oracle
        else:
            self.oracle = SyllableOracle()
            self._load_dictionary(
                cmu_loader,
                dictionary_path or os.environ.get(SYLLABLE_DICTIONARY_ENV),
                use_cmu_dictionary,
            )

        self.settings = GeneratorSettings.from_env(settings)
        self.generator = LineGenerator(self.oracle, self.settings, rng=self._rng)
        self.composer = HaikuComposer(
            self.corpus,
            self.oracle,
            self.generator,
            strict_known_only=strict_known_only,
        )

        self._logger.info(
            "Application dependencies wired",
            context={
                "phrases": len(self.corpus.phrases),
                "words": len(self.corpus.words),
                "dictionary_entries": self.oracle.dictionary_size,
                "strict_known_only": strict_known_only,
            },
        )

    def _load_dictionary(
        self,
        cmu_loader: Optional[CMUSyllableLoader],
        dictionary_path: Optional[Path | str],
        use_cmu_dictionary: bool,
    ) -> None:
        entries = {}
        if use_cmu_dictionary:
            loader = cmu_loader or CMUSyllableLoader()
            entries.update(loader.syllable_dictionary())
        if dictionary_path:
            entries.update(load_json_dictionary(dictionary_path))
        if entries:
            self.oracle.load_dictionary(entries)
        else:
            self._logger.warning("No syllable dictionary available; using heuristic counts")

    # Public API ------------------------------------------------------------
    def generate(self) -> Haiku:
        return self.composer.compose()

    def tagline(self) -> str:
        return choose_tagline(self._rng)

    def create_gradio_interface(self):
        from found_haiku.app.ui.gradio import create_interface

        return create_interface(self)


def _should_share_interface() -> bool:
    """Return whether the Gradio UI should request a public share link."""

    env_value = os.environ.get("FOUND_HAIKU_SHARE", "")
    if not env_value:
        return False
    return str(env_value).strip().lower() in {"1", "true", "yes", "on"}


def main() -> None:
    configure_logging()
    app = FoundHaikuApp()
    interface = app.create_gradio_interface()
    interface.launch(
        server_name="0.0.0.0",
        server_port=7860,
        share=_should_share_interface(),
    )


if __name__ == "__main__":
    main()


__all__ = ["FoundHaikuApp", "SYLLABLE_DICTIONARY_ENV", "main"]
