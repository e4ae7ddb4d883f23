"""Module with calibration of baselines on labelled reference lines."""

import math
from collections.abc import Mapping, Sequence

import numpy as np
from loguru import logger

from gibberish.data_models import BaselineStats, Model
from gibberish.detection.scorer import assign_score
from gibberish.nlp.bigrams import Matrix


def split_lines(lines: str | Sequence[str]) -> list[str]:
    """
    Convert a newline-delimited block into a list of stripped lines.

    Args:
        lines (str | Sequence[str]): Either a single block of text or lines.

    Returns:
        list[str]: Lines without leading and trailing whitespace.
    """
    if isinstance(lines, str):
        lines = lines.split("\n")
    return [str(line).strip() for line in lines]


def score_lines(
    lines: str | Sequence[str], matrix: Model | Matrix | Mapping[str, int | float]
) -> BaselineStats:
    """
    Score reference lines and aggregate their scores.

    Lines that cannot be scored (e.g. empty lines) are skipped.

    Args:
        lines (str | Sequence[str]): Reference lines or a newline-delimited block.
        matrix (Model | Matrix | Mapping[str, int | float]): Letter pair
            frequencies to score against.

    Raises:
        ValueError: Raised if none of the lines can be scored.

    Returns:
        BaselineStats: The minimum, maximum and average score of the lines.
    """
    scores = []
    for line in split_lines(lines):
        score = assign_score(line, matrix)
        if math.isnan(score):
            if line:
                logger.warning(f"Skipping a line too short to be scored: {line!r}")
            continue
        scores.append(score)

    if not scores:
        raise ValueError(
            "Baseline cannot be calculated. Provide at least one line with "
            "two or more characters."
        )

    values = np.array(scores, dtype=float)
    return BaselineStats(
        min=float(values.min()),
        max=float(values.max()),
        avg=float(values.mean()),
    )
