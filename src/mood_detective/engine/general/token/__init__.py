# engine/general/token/__init__.py
"""
token.
=====

Does: Provide the tokenizer shared bit-for-bit by both judges.
Exports: tokenize, strip_apostrophes
Used by: rulebook scorer and Naive Bayes model.
"""

from __future__ import annotations

from .normalize import (
    strip_apostrophes,
    tokenize,
)

__all__ = [
    "tokenize",
    "strip_apostrophes",
]
