"""
Tests for detector evaluation (training.evaluation).
"""

from __future__ import annotations

import pytest

from gibberish.detection.classification import BigramDetector
from gibberish.training.evaluation import Evaluator


@pytest.fixture
def evaluator(tiny_model):
    evaluator = Evaluator()
    evaluator.add_detector(BigramDetector(tiny_model))
    return evaluator


def test_perfect_detector(evaluator):
    results = evaluator.evaluate(["the dog runs"], ["xzq qzxw"])
    evaluation = results["BigramDetector"]
    assert evaluation.accuracy == 1.0
    assert evaluation.precision == pytest.approx(1.0)
    assert evaluation.recall == pytest.approx(1.0)
    assert evaluation.f1_score == pytest.approx(1.0)


def test_missed_gibberish_lowers_recall(evaluator):
    results = evaluator.evaluate("the dog runs\n", "xzq qzxw\nthe lazy dog\n")
    evaluation = results["BigramDetector"]
    assert evaluation.accuracy == pytest.approx(2 / 3)
    assert evaluation.precision == pytest.approx(1.0)
    assert evaluation.recall == pytest.approx(0.5)


def test_no_positive_predictions(evaluator):
    results = evaluator.evaluate(["the dog runs", "the lazy dog"], [])
    evaluation = results["BigramDetector"]
    assert evaluation.accuracy == 1.0
    assert evaluation.precision == 0.0
    assert evaluation.f1_score == 0.0


def test_evaluation_without_lines_raises(evaluator):
    with pytest.raises(ValueError, match="no lines"):
        evaluator.evaluate("\n", [])


def test_evaluation_text_form(evaluator):
    text = str(evaluator.evaluate(["the dog runs"], ["xzq qzxw"])["BigramDetector"])
    assert "Accuracy:  1.0000" in text
    assert "F1 Score:  1.0000" in text
