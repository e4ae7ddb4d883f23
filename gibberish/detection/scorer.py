"""Module with scoring of texts against letter pair frequencies."""

import math
from collections.abc import Mapping

from gibberish.data_models import Model
from gibberish.nlp.bigrams import Matrix, convert_matrix_into_map, iter_bigrams
from gibberish.nlp.sanitiser import sanitise


def _as_lookup(matrix: Model | Matrix | Mapping[str, int | float]) -> Mapping:
    if isinstance(matrix, Model):
        return matrix.lookup
    if isinstance(matrix, Mapping):
        return matrix
    return convert_matrix_into_map(matrix)


def assign_score(
    text: str,
    matrix: Model | Matrix | Mapping[str, int | float],
    use_cache: bool = True,  # noqa: FBT001, FBT002
) -> float:
    """
    Score a text by the average frequency of its adjacent letter pairs.

    The average makes scores of texts with different lengths comparable. Higher
    scores mean letter transitions typical for the language of the corpus.

    Args:
        text (str): The text to be scored.
        matrix (Model | Matrix | Mapping[str, int | float]): Letter pair frequencies.
            A `Model` reuses its prebuilt lookup, a sequence of pairs is converted
            to a lookup for this call only.
        use_cache (bool, optional): Memoise lookups of repeated letter pairs.
            It never changes the result. Defaults to True.

    Returns:
        float: The average score of each letter pair or `nan` if the sanitised
            text has fewer than two characters and cannot be classified.
    """
    sanitised = sanitise(text).replace("\n", " ")
    lookup = _as_lookup(matrix)
    cache: dict[str, int | float] = {}

    pair_count = 0
    total_score = 0.0
    for letter_pair in iter_bigrams(sanitised):
        pair_count += 1
        if use_cache and letter_pair in cache:
            total_score += cache[letter_pair]
            continue

        hits = lookup.get(letter_pair, 0)
        if use_cache:
            cache[letter_pair] = hits
        total_score += hits

    if pair_count == 0:
        return math.nan
    return total_score / pair_count
