# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Run both judges on the same sentence and present their verdicts side by side,
      flag disagreements, build history records, and score the judges against
      gold-labelled quiz sentences.
Returns:
  - judge_sentence(text) -> {"text", "rulebook", "bayes", "agree"}
  - compare_judges(texts) -> [JudgeReport, ...]
  - history_item(report) -> {"text", "rule_label", "rule_score", "bayes_label"}
  - evaluate_judges(examples) -> {"total", "rulebook", "bayes", "disagreements"}
  - format_probs(probs) -> "P(pos) 97% · P(neu) 2% · P(neg) 0%"
Used by: The lesson UI panels and the mood-demo CLI.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from typing import TypedDict

from mood_detective.engine.bayes import NB, NaiveBayesModel, TrainingExample, parse_examples
from mood_detective.engine.general.types import (
    LABEL_BY_KEY,
    ClassScores,
    Label,
    NBResult,
    RulebookResult,
)
from mood_detective.engine.general.utils.load_config import ConfigTypeError, load_config
from mood_detective.engine.general.utils.log import debug
from mood_detective.engine.rulebook import LEXICON, Lexicon, round_score, rulebook

logger = logging.getLogger(__name__)

__all__ = [
    "JudgeReport",
    "HistoryItem",
    "JudgeScore",
    "EvaluationReport",
    "judge_sentence",
    "compare_judges",
    "history_item",
    "evaluate_judges",
    "format_probs",
    "QUIZ_EXAMPLES",
    "COMPARE_SENTENCES",
]


# ── Types ────────────────────────────────────────────────────────────────────
class JudgeReport(TypedDict):
    text: str
    rulebook: RulebookResult
    bayes: NBResult
    agree: bool


class HistoryItem(TypedDict):
    text: str
    rule_label: Label
    rule_score: float
    bayes_label: Label


class JudgeScore(TypedDict):
    correct: int
    total: int
    accuracy: float


class Disagreement(TypedDict):
    text: str
    expected: Label
    rulebook: Label
    bayes: Label


class EvaluationReport(TypedDict):
    total: int
    rulebook: JudgeScore
    bayes: JudgeScore
    disagreements: list[Disagreement]


# ── Config snapshots ──────────────────────────────────────────────────────────
def _load_quiz_sets() -> tuple[tuple[TrainingExample, ...], tuple[str, ...]]:
    raw = load_config("quiz_examples", mode="validated_dict")
    quiz = parse_examples(raw.get("quiz", []), source="quiz_examples.quiz")
    compare = raw.get("compare", [])
    if not isinstance(compare, list) or not all(isinstance(s, str) for s in compare):
        raise ConfigTypeError("quiz_examples.compare: expected a list of strings")
    return quiz, tuple(compare)


QUIZ_EXAMPLES, COMPARE_SENTENCES = _load_quiz_sets()


# =============================================================================
# Side-by-side judging
# =============================================================================


def judge_sentence(
    text: str,
    *,
    lexicon: Lexicon = LEXICON,
    model: NaiveBayesModel = NB,
) -> JudgeReport:
    """Both verdicts for one sentence. The judges never see each other's output."""
    rule = rulebook(text, lexicon)
    bayes = model.predict(text)
    agree = rule["label"] == bayes["label"]
    debug(
        f"{text!r}: rulebook={rule['label']} bayes={bayes['label']} agree={agree}",
        topic="orchestrator",
    )
    return JudgeReport(text=text, rulebook=rule, bayes=bayes, agree=agree)


def compare_judges(
    texts: Iterable[str] | None = None,
    *,
    lexicon: Lexicon = LEXICON,
    model: NaiveBayesModel = NB,
) -> list[JudgeReport]:
    """Judges every sentence (default: the packaged compare set), preserving order."""
    if texts is None:
        texts = COMPARE_SENTENCES
    return [judge_sentence(t, lexicon=lexicon, model=model) for t in texts]


def history_item(report: JudgeReport) -> HistoryItem:
    """Compact record of one analysis for a caller-side recent-history list."""
    return HistoryItem(
        text=report["text"],
        rule_label=report["rulebook"]["label"],
        rule_score=round_score(report["rulebook"]["score"]),
        bayes_label=report["bayes"]["label"],
    )


# =============================================================================
# Quiz evaluation
# =============================================================================


def _judge_score(correct: int, total: int) -> JudgeScore:
    return JudgeScore(correct=correct, total=total, accuracy=correct / total if total else 0.0)


def evaluate_judges(
    examples: Sequence[TrainingExample] | None = None,
    *,
    lexicon: Lexicon = LEXICON,
    model: NaiveBayesModel = NB,
) -> EvaluationReport:
    """
    Scores both judges against gold labels (default: the packaged quiz set).

    `disagreements` lists every sentence where the two judges disagree,
    whether or not either of them is right.
    """
    if examples is None:
        examples = QUIZ_EXAMPLES

    rule_ok = bayes_ok = 0
    disagreements: list[Disagreement] = []
    for ex in examples:
        report = judge_sentence(ex.text, lexicon=lexicon, model=model)
        expected = LABEL_BY_KEY[ex.label]
        rule_label = report["rulebook"]["label"]
        bayes_label = report["bayes"]["label"]
        rule_ok += rule_label == expected
        bayes_ok += bayes_label == expected
        if not report["agree"]:
            disagreements.append(
                Disagreement(
                    text=ex.text, expected=expected, rulebook=rule_label, bayes=bayes_label
                )
            )

    total = len(examples)
    result = EvaluationReport(
        total=total,
        rulebook=_judge_score(rule_ok, total),
        bayes=_judge_score(bayes_ok, total),
        disagreements=disagreements,
    )
    logger.info(
        "Quiz evaluation: rulebook %d/%d, bayes %d/%d, %d disagreements",
        rule_ok,
        total,
        bayes_ok,
        total,
        len(disagreements),
    )
    return result


# =============================================================================
# Display helpers
# =============================================================================


def _percent(p: float) -> int:
    # truncated toward zero, never rounded up
    return math.trunc(p * 100)


def format_probs(probs: ClassScores) -> str:
    return (
        f"P(pos) {_percent(probs['pos'])}% · "
        f"P(neu) {_percent(probs['neu'])}% · "
        f"P(neg) {_percent(probs['neg'])}%"
    )
