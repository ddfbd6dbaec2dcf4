# src/mood_detective/engine/rulebook/lexicon.py

"""
lexicon.py
==========

Does: Compile the sentiment lexicon (positive/negative weights, intensifier and
      dampener multipliers, negator set) from data/lexicon.json into one
      immutable value, once, at import.
Returns: Lexicon dataclass, build_lexicon(), the shared LEXICON snapshot.
Used by: rulebook scorer, feeling-word lookup, tests.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from mood_detective.engine.general.utils.load_config import load_config

__all__ = ["Lexicon", "build_lexicon", "validate_lexicon", "LEXICON"]

logger = logging.getLogger(__name__)

_WEIGHT_TABLES = ("positive", "negative")
_REQUIRED_KEYS = ("positive", "negative", "intensifiers", "dampeners", "negators")
_DEFAULT_LITTLE_FALLBACK = 0.6


@dataclass(frozen=True)
class Lexicon:
    """Read-only word tables for the rulebook judge."""

    positive: Mapping[str, float]
    negative: Mapping[str, float]
    intensifiers: Mapping[str, float]
    dampeners: Mapping[str, float]
    negators: frozenset[str]
    # multiplier for a bare "little" before a sentiment word when no dampener entry matches
    little_fallback: float = _DEFAULT_LITTLE_FALLBACK

    def weight(self, word: str) -> float:
        """Signed base weight: positive entry minus negative entry (0 if neither)."""
        return self.positive.get(word, 0) - self.negative.get(word, 0)

    def is_feeling_word(self, word: str) -> bool:
        return word in self.positive or word in self.negative


def _check_number_table(name: str, table: Any) -> dict[str, float]:
    if not isinstance(table, dict):
        raise ValueError(f"'{name}' must be an object, got {type(table).__name__}")
    out: dict[str, float] = {}
    for word, value in table.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"'{name}.{word}' must be a number, got {value!r}")
        out[str(word)] = value
    return out


def validate_lexicon(data: dict[str, Any]) -> dict[str, Any]:
    """
    Does: Check the raw lexicon JSON shape and value ranges.
    Returns: Cleaned dict (numbers as numbers, negators as a list of str).
    Raises: ValueError on any bad table (wrapped as ConfigParseError by load_config).
    """
    missing = [k for k in _REQUIRED_KEYS if k not in data]
    if missing:
        raise ValueError(f"missing tables: {', '.join(missing)}")

    clean: dict[str, Any] = {}
    for name in _WEIGHT_TABLES:
        table = _check_number_table(name, data[name])
        bad = [w for w, v in table.items() if v <= 0]
        if bad:
            raise ValueError(f"'{name}' weights must be > 0 (bad: {', '.join(bad[:3])})")
        clean[name] = table

    intens = _check_number_table("intensifiers", data["intensifiers"])
    bad = [w for w, v in intens.items() if v <= 1]
    if bad:
        raise ValueError(f"intensifier factors must be > 1 (bad: {', '.join(bad[:3])})")
    clean["intensifiers"] = intens

    damp = _check_number_table("dampeners", data["dampeners"])
    bad = [w for w, v in damp.items() if not 0 < v < 1]
    if bad:
        raise ValueError(f"dampener factors must be in (0, 1) (bad: {', '.join(bad[:3])})")
    clean["dampeners"] = damp

    negators = data["negators"]
    if not isinstance(negators, list) or not all(isinstance(n, str) for n in negators):
        raise ValueError("'negators' must be a list of strings")
    clean["negators"] = [n.lower() for n in negators]

    fallback = data.get("little_fallback", _DEFAULT_LITTLE_FALLBACK)
    if isinstance(fallback, bool) or not isinstance(fallback, (int, float)) or not 0 < fallback < 1:
        raise ValueError(f"'little_fallback' must be in (0, 1), got {fallback!r}")
    clean["little_fallback"] = fallback
    return clean


def build_lexicon(base_dir: Path | None = None) -> Lexicon:
    """Load and freeze data/lexicon.json."""
    data = load_config(
        "lexicon", mode="validated_dict", base_dir=base_dir, validator=validate_lexicon
    )
    lex = Lexicon(
        positive=MappingProxyType(data["positive"]),
        negative=MappingProxyType(data["negative"]),
        intensifiers=MappingProxyType(data["intensifiers"]),
        dampeners=MappingProxyType(data["dampeners"]),
        negators=frozenset(data["negators"]),
        little_fallback=float(data["little_fallback"]),
    )
    logger.debug(
        "Lexicon compiled: %d positive, %d negative, %d intensifiers, %d dampeners, %d negators",
        len(lex.positive),
        len(lex.negative),
        len(lex.intensifiers),
        len(lex.dampeners),
        len(lex.negators),
    )
    return lex


# ── Config snapshot (built once, read-only afterwards) ────────────────────────
LEXICON: Lexicon = build_lexicon()
