"""
Pytest fixtures for gibberish detection tests.

The tiny model is trained on a single pangram, small enough to verify scores by hand.
"""

from __future__ import annotations

import pytest

from gibberish.data_models import Model
from gibberish.training.trainer import train

PANGRAM = "the quick brown fox jumps over the lazy dog"
GOOD_LINES = ["the dog runs"]
BAD_LINES = ["xzq qzxw"]


@pytest.fixture
def tiny_model() -> Model:
    """Model trained on the pangram with one good and one bad reference line."""
    return train(PANGRAM, GOOD_LINES, BAD_LINES)


@pytest.fixture
def raw_model() -> dict:
    """Well-formed model as parsed from a JSON model file."""
    return {
        "matrix": [{"x": "th", "y": 2}, {"x": "he", "y": 2}, {"x": "e ", "y": 1}],
        "baseline": {
            "good": {"min": 1.5, "max": 2, "avg": 1.75},
            "bad": {"min": 0, "max": 0.25, "avg": 0.1},
        },
    }
