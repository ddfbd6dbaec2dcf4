# src/mood_detective/engine/bayes/corpus.py
"""Seed training sentences for the Naive Bayes judge, loaded from data/training_corpus.json."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NamedTuple

from mood_detective.engine.general.types import CLASS_KEYS, ClassKey
from mood_detective.engine.general.utils.load_config import ConfigTypeError, load_config

__all__ = ["TrainingExample", "parse_examples", "load_training_corpus", "TRAINING_CORPUS"]

logger = logging.getLogger(__name__)


class TrainingExample(NamedTuple):
    text: str
    label: ClassKey


def parse_examples(raw: Any, *, source: str = "training_corpus") -> tuple[TrainingExample, ...]:
    """Turn a JSON list of {"text", "label"} objects into TrainingExamples."""
    if not isinstance(raw, list):
        raise ConfigTypeError(f"{source}: expected a list of examples, got {type(raw).__name__}")

    examples: list[TrainingExample] = []
    for n, item in enumerate(raw):
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):
            raise ConfigTypeError(f"{source}[{n}]: expected {{'text': str, 'label': str}}")
        label = item.get("label")
        if label not in CLASS_KEYS:
            raise ConfigTypeError(
                f"{source}[{n}]: label must be one of {', '.join(CLASS_KEYS)}, got {label!r}"
            )
        examples.append(TrainingExample(item["text"], label))
    return tuple(examples)


def load_training_corpus(base_dir: Path | None = None) -> tuple[TrainingExample, ...]:
    examples = parse_examples(load_config("training_corpus", mode="raw", base_dir=base_dir))
    logger.debug("Loaded %d training examples", len(examples))
    return examples


TRAINING_CORPUS: tuple[TrainingExample, ...] = load_training_corpus()
