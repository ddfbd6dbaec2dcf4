# src/mood_detective/engine/bayes/model.py

"""
Naive Bayes judge ("Robot Judge").
---------------------------------
Does:
- Train a multinomial bag-of-words Naive Bayes model once from the seed corpus
- Score every class with ln(prior) + Σ ln((count + 1) / (total + |V|))  (Laplace)
- Pick the arg-max class (ties → pos, neu, neg order)
- Turn the raw log-posteriors into display probabilities with a stable softmax
- High-level API: NB.predict(sentence) → NBResult
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from nltk.probability import FreqDist

from mood_detective.engine.bayes.corpus import TRAINING_CORPUS, TrainingExample
from mood_detective.engine.general.token import tokenize
from mood_detective.engine.general.types import (
    CLASS_KEYS,
    LABEL_BY_KEY,
    ClassKey,
    ClassScores,
    NBResult,
)
from mood_detective.engine.general.utils.log import debug

__all__ = ["NaiveBayesModel", "train_nb", "softmax", "NB", "PRIOR_EPSILON"]

logger = logging.getLogger(__name__)

# stands in for a zero prior so ln() stays finite
PRIOR_EPSILON = 1e-9


def softmax(values: Sequence[float]) -> list[float]:
    """Exponentiate after subtracting the max (no overflow), then normalize to sum 1."""
    if not values:
        return []
    top = max(values)
    exps = [math.exp(v - top) for v in values]
    total = sum(exps)
    return [e / total for e in exps]


@dataclass(frozen=True)
class NaiveBayesModel:
    """Trained, read-only model. Safe to share between callers."""

    priors: Mapping[ClassKey, float]
    word_counts: Mapping[ClassKey, Mapping[str, int]]
    vocab: Mapping[str, int]
    totals: Mapping[ClassKey, int]

    @property
    def vocab_size(self) -> int:
        return len(self.vocab)

    def log_posteriors(self, words: Sequence[str]) -> ClassScores:
        """Unnormalized ln P(class | words) for each class, in CLASS_KEYS order."""
        v = self.vocab_size
        logs: dict[str, float] = {}
        for key in CLASS_KEYS:
            counts = self.word_counts[key]
            denom = self.totals[key] + v
            logp = math.log(self.priors[key] or PRIOR_EPSILON)
            for w in words:
                logp += math.log((counts.get(w, 0) + 1) / denom)
            logs[key] = logp
        return ClassScores(pos=logs["pos"], neu=logs["neu"], neg=logs["neg"])

    def predict(self, sentence: str) -> NBResult:
        """
        Classifies one sentence.

        Returns:
            {label, probs, logs, words}. Never raises; an empty sentence is
            decided by the priors alone.
        """
        words = tokenize(sentence)
        logs = self.log_posteriors(words)

        # max() keeps the first of equal values → CLASS_KEYS order breaks ties
        top: ClassKey = max(CLASS_KEYS, key=lambda k: logs[k])
        p = softmax([logs[k] for k in CLASS_KEYS])
        probs = ClassScores(pos=p[0], neu=p[1], neg=p[2])

        debug(
            "logs pos=%.3f neu=%.3f neg=%.3f → %s" % (logs["pos"], logs["neu"], logs["neg"], top),
            topic="bayes",
        )
        return NBResult(label=LABEL_BY_KEY[top], probs=probs, logs=logs, words=words)


def train_nb(examples: Iterable[TrainingExample]) -> NaiveBayesModel:
    """
    Builds the model from labelled sentences.

    Word counts include every occurrence; the vocabulary counts each word
    once per document and is only used for its size |V|.
    """
    doc_counts: dict[ClassKey, int] = {key: 0 for key in CLASS_KEYS}
    word_counts: dict[ClassKey, FreqDist] = {key: FreqDist() for key in CLASS_KEYS}
    vocab: FreqDist = FreqDist()

    for example in examples:
        doc_counts[example.label] += 1
        words = tokenize(example.text)
        vocab.update(set(words))
        word_counts[example.label].update(words)

    total_docs = sum(doc_counts.values())
    if total_docs == 0:
        raise ValueError("cannot train Naive Bayes on an empty corpus")

    priors = {key: doc_counts[key] / total_docs for key in CLASS_KEYS}
    totals = {key: word_counts[key].N() for key in CLASS_KEYS}

    model = NaiveBayesModel(
        priors=MappingProxyType(priors),
        word_counts=MappingProxyType(
            {key: MappingProxyType(dict(word_counts[key])) for key in CLASS_KEYS}
        ),
        vocab=MappingProxyType(dict(vocab)),
        totals=MappingProxyType(totals),
    )
    logger.info(
        "Naive Bayes trained: %d docs, |V|=%d, priors=%s",
        total_docs,
        model.vocab_size,
        {k: round(v, 3) for k, v in priors.items()},
    )
    return model


# ── Trained once at import; every predict() is a pure read ───────────────────
NB: NaiveBayesModel = train_nb(TRAINING_CORPUS)
