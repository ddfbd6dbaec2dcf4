# engine/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared tokenizer for both judges
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Turn raw text into ordered lowercase word tokens. Apostrophes and
      hyphens survive; every other non-alphanumeric character becomes a space.
Returns: tokenize(), strip_apostrophes().
Used by: The rulebook scorer, Naive Bayes training and prediction.
"""

from __future__ import annotations

import re

__all__ = [
    "tokenize",
    "strip_apostrophes",
]

# Anything outside [a-z0-9], whitespace, apostrophe or hyphen is noise
_NOISE_RE = re.compile(r"[^a-z0-9\s'-]")
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """
    Does: Lowercase `text`, replace every noise character with a single space,
          split on whitespace runs and drop empty fragments.
    Returns: Ordered token list (duplicates kept). Non-strings and empty input → [].
    """
    if not isinstance(text, str):
        return []
    cleaned = _NOISE_RE.sub(" ", text.lower())
    return [t for t in _WHITESPACE_RE.split(cleaned) if t]


def strip_apostrophes(token: str) -> str:
    """Lexicon lookup form: "it's" → "its", "isn't" → "isnt"."""
    return token.replace("'", "")
