"""Module with an interface for a detector."""

from abc import ABC, abstractmethod

from gibberish.detection.threshold import is_below_threshold


class Detector(ABC):
    """An interface for a gibberish text detector."""

    @abstractmethod
    def detect(self, text: str) -> float:
        """
        Detect and get a score of a text.

        Args:
            text (str): Text to be evaluated.

        Returns:
            float: Score of the text. The lower the score, the more likely the text
                is gibberish. `nan` means the text cannot be classified.
        """

    @abstractmethod
    def get_threshold(self) -> float:
        """
        Get a value below or equal to which a text is gibberish.

        Returns:
            float: Floating point value threshold for a detector.
        """

    def is_gibberish(self, text: str) -> bool:
        """
        Classify a text.

        Args:
            text (str): Text to be classified.

        Returns:
            bool: True if the text is gibberish. Texts that cannot be classified
                are not gibberish.
        """
        return is_below_threshold(self.detect(text), self.get_threshold())

    def get_name(self) -> str:
        """
        Get name of the detector.

        Returns:
            str: Name of the detector.
        """
        return type(self).__name__
