# mood_detective/engine/__init__.py

"""
engine.
=======

Does: Expose the two judges and the side-by-side orchestration through one namespace.
Returns: rulebook(), NB.predict(), judge_sentence(), compare_judges(), evaluate_judges().
Used by: The lesson UI callers and the mood-demo CLI.
"""
from __future__ import annotations

from .bayes import NB, train_nb
from .general import tokenize
from .orchestrator import compare_judges, evaluate_judges, judge_sentence
from .rulebook import feeling_words, rulebook

__all__ = [
    "tokenize",
    "rulebook",
    "feeling_words",
    "NB",
    "train_nb",
    "judge_sentence",
    "compare_judges",
    "evaluate_judges",
]
__docformat__ = "google"
