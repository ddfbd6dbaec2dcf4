"""
rulebook
========

Package for the lexicon-based judge.

Submodules:
- lexicon : Immutable word tables compiled from data/lexicon.json.
- scorer  : Negation/intensifier-aware scoring and feeling-word lookup.

Exports:
- rulebook
- feeling_words
- Lexicon, LEXICON
"""

from .lexicon import LEXICON, Lexicon, build_lexicon
from .scorer import feeling_words, label_for_score, round_score, rulebook, score_tokens

__all__ = [
    "rulebook",
    "score_tokens",
    "label_for_score",
    "round_score",
    "feeling_words",
    "Lexicon",
    "LEXICON",
    "build_lexicon",
]

__docformat__ = "google"
