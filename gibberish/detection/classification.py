"""Module with classification of texts as gibberish or legitimate language."""

from typing_extensions import override

from gibberish.configuration import config
from gibberish.data_models import Model
from gibberish.detection.detector import Detector
from gibberish.detection.scorer import assign_score
from gibberish.detection.threshold import (
    ThresholdFunction,
    calculate_threshold,
    is_below_threshold,
)


def test_gibberish(
    text: str,
    model: Model,
    threshold_fn: ThresholdFunction | None = None,
    use_cache: bool = True,  # noqa: FBT001, FBT002
) -> bool:
    """
    Test whether a suspect text is gibberish.

    Args:
        text (str): The suspect text.
        model (Model): The trained model.
        threshold_fn (ThresholdFunction | None, optional): Function calculating
            the score at or below which gibberish is declared. Defaults to
            `calculate_threshold`.
        use_cache (bool, optional): Memoise lookups of repeated letter pairs.
            Defaults to True.

    Returns:
        bool: True if the text is gibberish. A text too short to be scored is
            never declared gibberish.
    """
    threshold_fn = threshold_fn or calculate_threshold
    score = assign_score(text, model, use_cache=use_cache)
    return is_below_threshold(score, threshold_fn(model))


def get_gibberish_score(
    text: str,
    model: Model,
    use_cache: bool = True,  # noqa: FBT001, FBT002
) -> float:
    """
    Get the raw score of a suspect text.

    Args:
        text (str): The suspect text.
        model (Model): The trained model.
        use_cache (bool, optional): Memoise lookups of repeated letter pairs.
            Defaults to True.

    Returns:
        float: Average letter pair frequency of the text or `nan` if the text
            cannot be scored.
    """
    return assign_score(text, model, use_cache=use_cache)


class BigramDetector(Detector):
    """Gibberish detector scoring texts with letter pair frequencies of a model."""

    def __init__(
        self,
        model: Model,
        threshold_fn: ThresholdFunction = calculate_threshold,
        use_cache: bool = config.use_cache,  # noqa: FBT001
    ) -> None:
        """
        Initialise the detector with a trained model.

        Args:
            model (Model): The trained model.
            threshold_fn (ThresholdFunction, optional): Function calculating
                the threshold. Defaults to `calculate_threshold`.
            use_cache (bool, optional): Memoise lookups of repeated letter pairs.
                Defaults to the value from the configuration.
        """
        self._model = model
        self._threshold = threshold_fn(model)
        self._use_cache = use_cache

    @override
    def detect(self, text: str) -> float:
        return get_gibberish_score(text, self._model, use_cache=self._use_cache)

    @override
    def get_threshold(self) -> float:
        return self._threshold
