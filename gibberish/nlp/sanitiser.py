"""Module with a text sanitiser preparing texts for letter pair analysis."""

import re
import unicodedata

# Only these four are treated as word boundaries. Colons and ellipsis characters
# are kept to stay compatible with existing model files.
SENTENCE_TERMINATORS = re.compile(r"[!?.;]")
WHITESPACE = re.compile(r"\s+")
COMBINING_DIACRITICS = re.compile(r"[\u0300-\u036f]")
NON_ASCII = re.compile(r"[^\x00-\x7f]")


def convert_to_latin_equivalent(text: str) -> str:
    """
    Convert a text to its Latin equivalent by removing diacritics and other scripts.

    Accented letters fold to their base letter, non-Latin characters are dropped.

    Args:
        text (str): The text to be converted.

    Returns:
        str: The text containing only ASCII characters.
    """
    decomposed = unicodedata.normalize("NFD", text)
    without_diacritics = COMBINING_DIACRITICS.sub("", decomposed)
    return NON_ASCII.sub("", without_diacritics)


def sanitise(text: str = "") -> str:
    """
    Normalise a text sample before its letter pairs are analysed.

    Line breaks, tabs and sentence terminators become spaces, runs of whitespace
    collapse into a single space and the text is converted to ASCII. Letter case
    is preserved and the text is not stripped.

    Args:
        text (str, optional): Raw text sample. Defaults to "".

    Returns:
        str: Sanitised text sample.
    """
    text = text.replace("\r\n", " ").replace("\n", " ").replace("\t", " ")

    # Letters at the end of a sentence are counted as letters at the end of a word.
    text = SENTENCE_TERMINATORS.sub(" ", text)
    text = WHITESPACE.sub(" ", text)

    text = convert_to_latin_equivalent(text)

    # Dropped characters may leave adjacent spaces behind and a decomposition may
    # produce a terminator (e.g. the Greek question mark becomes ";").
    text = SENTENCE_TERMINATORS.sub(" ", text)
    return WHITESPACE.sub(" ", text)
