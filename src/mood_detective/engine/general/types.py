# mood_detective/engine/general/types.py
from __future__ import annotations

from typing import Literal, TypedDict

"""
types.py.

Does: Define the label vocabularies and the result shapes returned by both judges
and by the orchestrator.
"""

# Short class keys used by the training corpus and the Bayes tables
ClassKey = Literal["pos", "neu", "neg"]
# Display labels returned to callers
Label = Literal["Positive", "Neutral", "Negative"]

# Fixed order: also the arg-max tie-break order
CLASS_KEYS: tuple[ClassKey, ...] = ("pos", "neu", "neg")

LABEL_BY_KEY: dict[ClassKey, Label] = {
    "pos": "Positive",
    "neu": "Neutral",
    "neg": "Negative",
}


class RulebookResult(TypedDict):
    score: float
    label: Label
    explain: list[str]


class ClassScores(TypedDict):
    pos: float
    neu: float
    neg: float


class NBResult(TypedDict):
    label: Label
    probs: ClassScores
    logs: ClassScores
    words: list[str]


__all__ = [
    "ClassKey",
    "Label",
    "CLASS_KEYS",
    "LABEL_BY_KEY",
    "RulebookResult",
    "ClassScores",
    "NBResult",
]

__docformat__ = "google"
