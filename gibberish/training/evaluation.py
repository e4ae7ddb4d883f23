"""Module for evaluation of different detectors."""

from collections.abc import Sequence

from gibberish.data_models import Evaluation
from gibberish.detection.detector import Detector
from gibberish.training.calibration import split_lines


class Evaluator:
    """Evaluator of gibberish detectors on labelled lines."""

    def __init__(self) -> None:
        """Initialise an empty study."""
        self._detectors: dict[str, Detector] = {}

    def add_detector(self, detector: Detector) -> None:
        """
        Add a detector to a study.

        Args:
            detector (Detector): An instance of a detector to be evaluated.
        """
        self._detectors[detector.get_name()] = detector

    def _evaluate_detector(
        self, detector: Detector, samples: list[tuple[str, bool]]
    ) -> Evaluation:
        epsilon = 1e-10
        correctly_predicted = 0
        true_positives = 0
        false_positives = 0
        false_negatives = 0
        for text, actual in samples:
            predicted = detector.is_gibberish(text)

            if predicted:
                if actual:
                    true_positives += 1
                    correctly_predicted += 1
                else:
                    false_positives += 1
            elif actual:
                false_negatives += 1
            else:
                correctly_predicted += 1

        accuracy = correctly_predicted / len(samples)

        # Prevent division by zero error.
        precision = true_positives / (true_positives + false_positives or epsilon)
        recall = true_positives / (true_positives + false_negatives or epsilon)
        f1_score = 2 * (precision * recall) / (precision + recall or epsilon)

        return Evaluation(
            accuracy=accuracy,
            precision=precision,
            recall=recall,
            f1_score=f1_score,
        )

    def evaluate(
        self,
        good_lines: str | Sequence[str],
        bad_lines: str | Sequence[str],
    ) -> dict[str, Evaluation]:
        """
        Run the evaluation study for all added detectors.

        Gibberish is the positive class. Empty lines are ignored.

        Args:
            good_lines (str | Sequence[str]): Legitimate lines.
            bad_lines (str | Sequence[str]): Gibberish lines.

        Raises:
            ValueError: Raised if there are no lines to evaluate on.

        Returns:
            dict[str, Evaluation]: Mapping of names of detectors to
                their evaluation sheets.
        """
        samples = [(line, False) for line in split_lines(good_lines) if line]
        samples += [(line, True) for line in split_lines(bad_lines) if line]
        if not samples:
            raise ValueError("There are no lines to evaluate the detectors on.")

        return {
            name: self._evaluate_detector(detector, samples)
            for name, detector in self._detectors.items()
        }
