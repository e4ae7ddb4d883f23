"""Module with thresholds separating gibberish from legitimate texts."""

from collections.abc import Callable

from gibberish.data_models import Model

ThresholdFunction = Callable[[Model], float]


def calculate_threshold(model: Model) -> float:
    """
    Get the score a text has to exceed not to be declared gibberish.

    Args:
        model (Model): The trained model.

    Returns:
        float: The midpoint between the lowest score of legitimate lines and
            the highest score of gibberish lines.
    """
    return (model.baseline.good.min + model.baseline.bad.max) / 2


def is_below_threshold(score: float, threshold: float) -> bool:
    """
    Classify a score against a threshold.

    Args:
        score (float): Score of a text. `nan` is never below the threshold.
        threshold (float): Value at or below which a text is gibberish.

    Returns:
        bool: True if the score indicates gibberish.
    """
    return score <= threshold
