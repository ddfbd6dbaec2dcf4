"""
general.
=======

Shared general-purpose modules used by both judges.

Exports:
- tokenize: the shared tokenizer.
- Label / ClassKey and the result TypedDicts.
"""

from .token import tokenize
from .types import (
    CLASS_KEYS,
    LABEL_BY_KEY,
    ClassKey,
    ClassScores,
    Label,
    NBResult,
    RulebookResult,
)

__all__ = [
    "tokenize",
    "CLASS_KEYS",
    "LABEL_BY_KEY",
    "ClassKey",
    "ClassScores",
    "Label",
    "NBResult",
    "RulebookResult",
]
