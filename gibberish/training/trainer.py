"""Module for training gibberish detection models."""

from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from gibberish.data_models import Baseline, Model
from gibberish.nlp.bigrams import convert_matrix_into_map, extract_frequency_table
from gibberish.nlp.sanitiser import sanitise
from gibberish.training.calibration import score_lines


def train(
    corpus: str,
    good_lines: str | Sequence[str],
    bad_lines: str | Sequence[str],
) -> Model:
    """
    Create a model of letter adjacency frequencies used to score suspect texts.

    Args:
        corpus (str): A large block of legitimate text, e.g. a piece of literature,
            where letter pair frequencies are counted.
        good_lines (str | Sequence[str]): Examples of legitimate sentences scored
            individually to find the tolerance threshold.
        bad_lines (str | Sequence[str]): Examples of gibberish (e.g. letter mashing)
            scored individually to find the tolerance threshold.

    Returns:
        Model: Letter pair frequencies with good and bad baselines.
    """
    matrix = extract_frequency_table(sanitise(corpus))
    lookup = convert_matrix_into_map(matrix)
    good = score_lines(good_lines, lookup)
    bad = score_lines(bad_lines, lookup)

    if bad.max >= good.min:
        logger.warning(
            "Gibberish lines score as high as legitimate ones "
            f"(bad max {bad.max:.2f} >= good min {good.min:.2f}). "
            "The model will misclassify some of the reference lines."
        )
    return Model(matrix=matrix, baseline=Baseline(good=good, bad=bad))


def train_with_files(
    good_lines_file: Path,
    bad_lines_file: Path,
    corpus_file: Path,
) -> Model:
    """
    Train a model reading training data from UTF-8 text files.

    Args:
        good_lines_file (Path): File with legitimate sentences, one per line.
        bad_lines_file (Path): File with gibberish sentences, one per line.
        corpus_file (Path): File with the corpus.

    Raises:
        FileNotFoundError: Raised if any of the files does not exist.

    Returns:
        Model: The trained model.
    """
    texts = []
    for file in (good_lines_file, bad_lines_file, corpus_file):
        if not file.is_file():
            raise FileNotFoundError(f"There is no such training file {file}.")
        texts.append(file.read_text(encoding="utf-8"))
        logger.info(f"Loaded {file}")

    good_lines, bad_lines, corpus = texts
    return train(corpus, good_lines, bad_lines)
