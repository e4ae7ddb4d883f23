"""Module with extraction of adjacent letter pairs (bigrams) from texts."""

from collections.abc import Iterable, Iterator, Mapping

from loguru import logger

from gibberish.data_models import BigramCount

Matrix = Iterable[BigramCount | Mapping[str, object]]


def iter_bigrams(text: str) -> Iterator[str]:
    """
    Iterate over pairs of adjacent characters of a lowercased text.

    Args:
        text (str): A sanitised text.

    Yields:
        str: Two-character strings in order of their appearance.
    """
    characters = list(text.lower())
    for first, second in zip(characters, characters[1:], strict=False):
        yield first + second


def extract_frequency_table(sanitised_corpus: str) -> tuple[BigramCount, ...]:
    """
    Count occurrences of adjacent letter pairs in a corpus.

    Args:
        sanitised_corpus (str): The corpus after sanitisation.

    Returns:
        tuple[BigramCount, ...]: Letter pairs with their counts sorted by the count
            in descending order. Ties keep the order of the first appearance.
    """
    counts: dict[str, int] = {}
    for letter_pair in iter_bigrams(sanitised_corpus):
        counts[letter_pair] = counts.get(letter_pair, 0) + 1

    logger.debug(
        f"Extracted {len(counts)} distinct letter pairs "
        f"from {len(sanitised_corpus)} characters."
    )
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return tuple(BigramCount(x=pair, y=count) for pair, count in ordered)


def convert_matrix_into_map(matrix: Matrix) -> dict[str, int | float]:
    """
    Convert a sequence of letter pair counts into a lookup mapping.

    Args:
        matrix (Matrix): Either `BigramCount` objects or raw `{"x": ..., "y": ...}`
            mappings loaded from a model file.

    Returns:
        dict[str, int | float]: Mapping of letter pairs to their counts.
    """
    lookup: dict[str, int | float] = {}
    for item in matrix:
        if isinstance(item, BigramCount):
            lookup[item.x] = item.y
        else:
            lookup[str(item["x"])] = item["y"]  # type: ignore[assignment]
    return lookup
