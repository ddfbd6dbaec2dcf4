from __future__ import annotations

import json

import pytest

from mood_detective import demo
from mood_detective.engine import orchestrator as O
from mood_detective.engine.general.utils import log as LOG

"""
Tests: demo.py (mood-demo CLI)
- Human-readable report, JSON output, compare mode, --debug, error exit code
"""


@pytest.fixture(autouse=True)
def _quiet_topics(monkeypatch):
    monkeypatch.delenv("MOOD_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()
    yield
    LOG.reload_topics()


def test_demo_prints_both_judges(capsys):
    demo.main(["I", "love", "pizza"])
    out = capsys.readouterr().out
    assert "“I love pizza”" in out
    assert "Smiley Judge (Rulebook): Positive  score: 2.00" in out
    assert "clues: love(+2.00)" in out
    assert "Robot Judge (Baby NB):" in out
    assert "P(pos)" in out


def test_demo_default_sentence(capsys):
    demo.main([])
    assert demo.DEFAULT_TEXT in capsys.readouterr().out


def test_demo_json(capsys):
    demo.main(["--json", "I", "do", "not", "love", "this"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["text"] == "I do not love this"
    assert payload["rulebook"]["explain"] == ["NOT love(-2.00)"]
    assert set(payload["bayes"]["probs"]) == {"pos", "neu", "neg"}


def test_demo_compare_json(capsys):
    demo.main(["--compare", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert [r["text"] for r in payload] == list(O.COMPARE_SENTENCES)


def test_demo_debug_enables_topics(capsys):
    demo.main(["--debug", "very", "good"])
    err = capsys.readouterr().err
    assert "[rulebook][DEBUG] good(+1.50)" in err
    assert "[bayes][DEBUG]" in err


def test_demo_error_exits_1(monkeypatch, capsys):
    def boom(text):
        raise RuntimeError("kaput")

    monkeypatch.setattr(O, "judge_sentence", boom, raising=True)
    with pytest.raises(SystemExit) as exc:
        demo.main(["hello"])
    assert exc.value.code == 1
    assert "Error: kaput" in capsys.readouterr().err
