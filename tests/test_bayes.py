from __future__ import annotations

import dataclasses
import json
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from mood_detective.engine.bayes import corpus as C
from mood_detective.engine.bayes import model as M
from mood_detective.engine.general.utils.load_config import ConfigTypeError
from mood_detective.engine.rulebook import rulebook

"""
Tests: bayes (corpus.py & model.py)
- Training tables built from the packaged seed corpus
- Laplace smoothing, prior-only prediction, tie-breaking order
- Softmax stability and agreement with the log-posterior arg-max
- Concurrent predictions on the shared snapshots match serial ones
"""

NB = M.NB
Example = C.TrainingExample


# ──────────────────────────────────────────────────────────────────────────────
# Corpus
# ──────────────────────────────────────────────────────────────────────────────

def test_seed_corpus_shape():
    labels = [ex.label for ex in C.TRAINING_CORPUS]
    assert len(labels) == 31
    assert labels.count("pos") == 11
    assert labels.count("neu") == 10
    assert labels.count("neg") == 10


def test_parse_examples_rejects_bad_labels():
    with pytest.raises(ConfigTypeError, match="label must be one of"):
        C.parse_examples([{"text": "meh", "label": "maybe"}])
    with pytest.raises(ConfigTypeError):
        C.parse_examples([{"label": "pos"}])
    with pytest.raises(ConfigTypeError):
        C.parse_examples({"text": "not a list"})


def test_load_training_corpus_from_base_dir(tmp_path):
    (tmp_path / "training_corpus.json").write_text(
        json.dumps([{"text": "Sunny day", "label": "pos"}]), encoding="utf-8"
    )
    assert C.load_training_corpus(base_dir=tmp_path) == (Example("Sunny day", "pos"),)


# ──────────────────────────────────────────────────────────────────────────────
# Training
# ──────────────────────────────────────────────────────────────────────────────

def test_priors_sum_to_one():
    assert sum(NB.priors.values()) == pytest.approx(1.0)
    assert NB.priors["pos"] == pytest.approx(11 / 31)
    assert NB.priors["neu"] == pytest.approx(10 / 31)


def test_word_tables_count_every_occurrence():
    assert NB.totals["pos"] == 56
    assert NB.word_counts["pos"]["is"] == 4
    # "The book is on the table" has two "the"
    assert NB.word_counts["neu"]["the"] == 6
    for key in ("pos", "neu", "neg"):
        assert NB.totals[key] == sum(NB.word_counts[key].values())


def test_vocab_counts_documents_not_occurrences():
    # 3 positive + 5 neutral + 4 negative sentences contain "the"
    assert NB.vocab["the"] == 12
    assert NB.vocab_size == len(NB.vocab)
    all_words = set()
    for key in ("pos", "neu", "neg"):
        all_words |= set(NB.word_counts[key])
    assert set(NB.vocab) == all_words


def test_model_is_read_only():
    with pytest.raises(TypeError):
        NB.priors["pos"] = 1.0  # type: ignore[index]
    with pytest.raises(TypeError):
        NB.word_counts["pos"]["love"] = 99  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        NB.vocab = {}  # type: ignore[misc]


def test_train_on_empty_corpus_raises():
    with pytest.raises(ValueError):
        M.train_nb([])


# ──────────────────────────────────────────────────────────────────────────────
# Prediction
# ──────────────────────────────────────────────────────────────────────────────

def test_predict_positive_training_like_sentence():
    res = NB.predict("I love this game it is awesome")
    assert res["label"] == "Positive"
    assert res["words"] == ["i", "love", "this", "game", "it", "is", "awesome"]


def test_predict_neutral_sentence():
    assert NB.predict("The box is on the table")["label"] == "Neutral"


def test_predict_negative_sentence():
    assert NB.predict("I hate this terrible soup")["label"] == "Negative"


def test_empty_sentence_uses_priors_only():
    res = NB.predict("")
    assert res["words"] == []
    assert res["label"] == "Positive"  # 11 of 31 documents
    for key in ("pos", "neu", "neg"):
        assert res["logs"][key] == pytest.approx(math.log(NB.priors[key]))
        assert res["probs"][key] == pytest.approx(NB.priors[key])


def test_laplace_smoothing_for_unseen_words():
    base = NB.log_posteriors([])
    oov = NB.log_posteriors(["zzzxq"])
    for key in ("pos", "neu", "neg"):
        expected = math.log(1 / (NB.totals[key] + NB.vocab_size))
        assert oov[key] - base[key] == pytest.approx(expected)


def test_repeated_words_count_every_time():
    once = NB.log_posteriors(["love"])
    twice = NB.log_posteriors(["love", "love"])
    base = NB.log_posteriors([])
    for key in ("pos", "neu", "neg"):
        assert twice[key] - base[key] == pytest.approx(2 * (once[key] - base[key]))


@pytest.mark.parametrize(
    "text",
    [
        "",
        "!!!",
        "I love this game it is awesome",
        "The box is on the table",
        "I am not happy about the rain",
        "Super fun but the ending was bad",
        "zebra quantum xylophone",
        "the " * 200,
    ],
)
def test_probs_sum_to_one_and_argmax_agrees(text):
    res = NB.predict(text)
    probs, logs = res["probs"], res["logs"]
    assert sum(probs.values()) == pytest.approx(1.0, abs=1e-6)
    assert all(0.0 <= p <= 1.0 for p in probs.values())
    keys = ("pos", "neu", "neg")
    by_log = max(keys, key=lambda k: logs[k])
    by_prob = max(keys, key=lambda k: probs[k])
    assert by_log == by_prob
    assert res["label"] == {"pos": "Positive", "neu": "Neutral", "neg": "Negative"}[by_log]


def test_predict_is_deterministic():
    s = "The puppy is so cute and sweet"
    assert NB.predict(s) == NB.predict(s)


def test_shared_snapshots_are_safe_across_threads():
    sentences = [
        "I love this game it is awesome",
        "This is the worst lunch ever.",
        "My brother is ten years old.",
        "I am not happy about the rain",
        "really very good",
        "a little sad",
        "",
        "The puppy is so cute and sweet",
    ] * 4
    serial_nb = [NB.predict(s) for s in sentences]
    serial_rule = [rulebook(s) for s in sentences]

    with ThreadPoolExecutor(max_workers=8) as pool:
        threaded_nb = list(pool.map(NB.predict, sentences))
        threaded_rule = list(pool.map(rulebook, sentences))

    assert threaded_nb == serial_nb
    assert threaded_rule == serial_rule


def test_ties_break_in_pos_neu_neg_order():
    model = M.train_nb([Example("same", "pos"), Example("same", "neu"), Example("same", "neg")])
    res = model.predict("same same")
    assert res["label"] == "Positive"
    assert res["probs"]["pos"] == pytest.approx(1 / 3)

    model = M.train_nb([Example("same", "neu"), Example("same", "neg")])
    assert model.predict("")["label"] == "Neutral"


def test_zero_prior_uses_epsilon():
    model = M.train_nb([Example("good fun", "pos"), Example("bad", "neg")])
    assert model.priors["neu"] == 0
    res = model.predict("good")
    assert math.isfinite(res["logs"]["neu"])
    assert res["logs"]["neu"] < math.log(M.PRIOR_EPSILON) + 1
    assert res["probs"]["neu"] < 1e-6
    assert res["label"] == "Positive"


# ──────────────────────────────────────────────────────────────────────────────
# softmax()
# ──────────────────────────────────────────────────────────────────────────────

def test_softmax_is_stable_for_large_values():
    out = M.softmax([1000.0, 1001.0, 1002.0])
    assert sum(out) == pytest.approx(1.0)
    assert out[2] > out[1] > out[0]

    out = M.softmax([-1000.0, -1001.0, -5000.0])
    assert sum(out) == pytest.approx(1.0)
    assert out[0] > out[1] > out[2]


def test_softmax_uniform_and_empty():
    assert M.softmax([2.0, 2.0]) == [0.5, 0.5]
    assert M.softmax([]) == []
