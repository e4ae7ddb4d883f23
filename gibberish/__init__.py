"""Detection of gibberish texts with frequencies of adjacent letter pairs."""

from gibberish.data_models import Model
from gibberish.detection.classification import get_gibberish_score, test_gibberish
from gibberish.detection.threshold import calculate_threshold
from gibberish.detection.validation import is_valid_model
from gibberish.nlp.sanitiser import sanitise
from gibberish.training.trainer import train, train_with_files

__all__ = [
    "Model",
    "calculate_threshold",
    "get_gibberish_score",
    "is_valid_model",
    "sanitise",
    "test_gibberish",
    "train",
    "train_with_files",
]
