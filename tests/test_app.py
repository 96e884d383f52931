import json
import random

import pytest

from found_haiku.app.app import FoundHaikuApp, _should_share_interface
from found_haiku.core import TAGLINES, CMUSyllableLoader, Corpus, GeneratorSettings, SyllableOracle

PHRASES = [
    "the quiet court of law moves slowly",
    "records remain sealed pending review by the court",
    "counsel filed a motion to dismiss the charges",
]


def _app(**kwargs):
    kwargs.setdefault("corpus", Corpus.from_phrases(PHRASES))
    kwargs.setdefault("use_cmu_dictionary", False)
    kwargs.setdefault("rng", random.Random(2))
    return FoundHaikuApp(**kwargs)


def test_generate_returns_three_lines():
    app = _app()

    haiku = app.generate()

    assert len(haiku.lines) == 3
    for line, target in zip(haiku.lines, (5, 7, 5)):
        assert line.is_fallback or line.syllables == target


def test_tagline_is_one_of_the_taglines():
    assert _app().tagline() in TAGLINES


def test_app_loads_cmu_dictionary_from_loader(tmp_path):
    dict_path = tmp_path / "cmudict.7b"
    dict_path.write_text("COURT  K AO1 R T\nQUIET  K W AY1 AH0 T\n", encoding="utf-8")

    app = _app(use_cmu_dictionary=True, cmu_loader=CMUSyllableLoader(dict_path))

    assert app.oracle.has_dictionary
    assert app.oracle.count("quiet") == 2
    assert app.oracle.is_known_word("court")


def test_json_dictionary_overrides_cmu_entries(tmp_path):
    dict_path = tmp_path / "cmudict.7b"
    dict_path.write_text("QUIET  K W AY1 AH0 T\n", encoding="utf-8")
    json_path = tmp_path / "syllables.json"
    json_path.write_text(json.dumps({"quiet": 3}), encoding="utf-8")

    app = _app(
        use_cmu_dictionary=True,
        cmu_loader=CMUSyllableLoader(dict_path),
        dictionary_path=json_path,
    )

    assert app.oracle.count("quiet") == 3


def test_app_without_dictionary_uses_heuristics():
    app = _app()

    assert not app.oracle.has_dictionary


def test_settings_honour_environment(monkeypatch):
    monkeypatch.setenv("FOUND_HAIKU_MAX_ATTEMPTS", "7")

    app = _app(settings=GeneratorSettings(max_stuck=5))

    assert app.settings.max_attempts == 7
    assert app.settings.max_stuck == 5
    assert app.generator.settings is app.settings


def test_app_loads_corpus_from_path(tmp_path):
    path = tmp_path / "phrases.json"
    path.write_text(json.dumps({"phrases": PHRASES}), encoding="utf-8")

    app = FoundHaikuApp(path, use_cmu_dictionary=False)

    assert app.corpus.phrases == tuple(PHRASES)


@pytest.mark.parametrize(("value", "expected"), [("", False), ("yes", True), ("0", False), ("TRUE", True)])
def test_should_share_interface(monkeypatch, value, expected):
    monkeypatch.setenv("FOUND_HAIKU_SHARE", value)

    assert _should_share_interface() is expected


def test_render_haiku_returns_lines_and_readout():
    pytest.importorskip("gradio")
    from found_haiku.app.ui.gradio import render_haiku

    line1, line2, line3, counts = render_haiku(_app())

    assert all(isinstance(text, str) and text for text in (line1, line2, line3))
    assert counts.count("•") == 2


def test_supplied_oracle_is_left_untouched(tmp_path):
    dict_path = tmp_path / "cmudict.7b"
    dict_path.write_text("COURT  K AO1 R T\n", encoding="utf-8")
    oracle = SyllableOracle()

    app = _app(oracle=oracle, use_cmu_dictionary=True, cmu_loader=CMUSyllableLoader(dict_path))

    assert app.oracle is oracle
    assert not oracle.has_dictionary
    assert not oracle.is_known_word("court")
