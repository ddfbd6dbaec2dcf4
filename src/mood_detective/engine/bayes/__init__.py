"""
bayes
=====

Package for the toy multinomial Naive Bayes judge.

Submodules:
- corpus : Seed training sentences (data/training_corpus.json).
- model  : Training, Laplace-smoothed log-posteriors, softmax, prediction.

Exports:
- NB (pre-trained model), train_nb, softmax
- NaiveBayesModel, TrainingExample, TRAINING_CORPUS
"""

from .corpus import TRAINING_CORPUS, TrainingExample, load_training_corpus, parse_examples
from .model import NB, NaiveBayesModel, softmax, train_nb

__all__ = [
    "NB",
    "NaiveBayesModel",
    "train_nb",
    "softmax",
    "TrainingExample",
    "TRAINING_CORPUS",
    "load_training_corpus",
    "parse_examples",
]

__docformat__ = "google"
