# src/mood_detective/engine/rulebook/scorer.py

"""
Rulebook judge ("Smiley Judge").
-------------------------------
Does:
- Walk the token sequence and add up signed lexicon weights
- Scale a weight by the intensifier/dampener right before it, and by a
  weaker (x0.9) intensifier two tokens back
- Flip the sign of a single word when a negator sits in the 3 tokens before it
- Keep a readable per-word trace like "NOT happy(-2.00)"
- High-level API: rulebook(sentence) → RulebookResult, feeling_words(sentence)
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from mood_detective.engine.general.token import strip_apostrophes, tokenize
from mood_detective.engine.general.types import Label, RulebookResult
from mood_detective.engine.general.utils.log import debug
from mood_detective.engine.rulebook.lexicon import LEXICON, Lexicon

__all__ = [
    "rulebook",
    "score_tokens",
    "label_for_score",
    "round_score",
    "feeling_words",
    "POSITIVE_THRESHOLD",
    "NEGATIVE_THRESHOLD",
    "NEGATION_WINDOW",
    "DISTANT_INTENSIFIER_DECAY",
]

logger = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
POSITIVE_THRESHOLD = 1.0       # strictly above → Positive
NEGATIVE_THRESHOLD = -1.0      # strictly below → Negative
NEGATION_WINDOW = 3            # how many tokens back a negator still counts
DISTANT_INTENSIFIER_DECAY = 0.9


# ─────────────────────────────────────────────────────────────────────────────
# Window helpers
# ─────────────────────────────────────────────────────────────────────────────

def _token_back(tokens: list[str], i: int, distance: int) -> str | None:
    """Token `distance` positions before i, or None before the start."""
    j = i - distance
    if j < 0:
        return None
    return tokens[j]


def _multiplier(tokens: list[str], i: int, lex: Lexicon) -> float:
    mult = 1.0
    prev = _token_back(tokens, i, 1)
    prev2 = _token_back(tokens, i, 2)

    if prev is not None:
        if prev in lex.intensifiers:
            mult *= lex.intensifiers[prev]
        if prev in lex.dampeners:
            mult *= lex.dampeners[prev]
        elif prev == "little":
            mult *= lex.little_fallback

    if prev2 is not None and prev2 in lex.intensifiers:
        mult *= lex.intensifiers[prev2] * DISTANT_INTENSIFIER_DECAY

    return mult


def _is_negated(tokens: list[str], i: int, lex: Lexicon) -> bool:
    """True when any of the NEGATION_WINDOW tokens before i is a negator (closest first)."""
    for distance in range(1, NEGATION_WINDOW + 1):
        back = _token_back(tokens, i, distance)
        if back is None:
            break
        if back in lex.negators:
            return True
    return False


def _quantize(value: float) -> Decimal:
    # exact binary value, halves away from zero
    return Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def round_score(value: float) -> float:
    """Score rounded to 2 decimals the same way the explanation trace shows it."""
    return float(_quantize(value))


def _format_signed(value: float) -> str:
    """Two decimals, explicit '+' for positives."""
    text = str(_quantize(value))
    return f"+{text}" if value > 0 else text


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def label_for_score(score: float) -> Label:
    if score > POSITIVE_THRESHOLD:
        return "Positive"
    if score < NEGATIVE_THRESHOLD:
        return "Negative"
    return "Neutral"


def score_tokens(tokens: list[str], lex: Lexicon = LEXICON) -> RulebookResult:
    """
    Scores an already tokenized sentence.

    Only words with a lexicon weight contribute; each contribution is
    weight x multiplier, sign-flipped if negated, and is recorded in `explain`.
    """
    score = 0.0
    explain: list[str] = []

    for i, word in enumerate(tokens):
        weight = lex.weight(strip_apostrophes(word))
        if weight == 0:
            continue

        mult = _multiplier(tokens, i, lex)
        negated = _is_negated(tokens, i, lex)
        value = -weight * mult if negated else weight * mult

        score += value
        entry = f"{'NOT ' if negated else ''}{word}({_format_signed(value)})"
        explain.append(entry)
        debug(f"{entry} running={score:.2f}", topic="rulebook")

    label = label_for_score(score)
    return RulebookResult(score=score, label=label, explain=explain)


def rulebook(sentence: str, lex: Lexicon = LEXICON) -> RulebookResult:
    """Tokenizes and scores one sentence. Never raises; empty input → Neutral, score 0."""
    result = score_tokens(tokenize(sentence), lex)
    logger.debug("rulebook(%r) → %s (%.2f)", sentence, result["label"], result["score"])
    return result


def feeling_words(sentence: str, lex: Lexicon = LEXICON) -> list[str]:
    """
    Does: List the tokens that carry a lexicon weight, in sentence order.
    Returns: e.g. "The pizza was tasty but the service was slow" → ["tasty", "slow"].
    """
    return [w for w in tokenize(sentence) if lex.is_feeling_word(strip_apostrophes(w))]
