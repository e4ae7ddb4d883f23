"""
Tests for letter pair extraction (nlp.bigrams).
"""

from __future__ import annotations

import pytest

from gibberish.data_models import BigramCount
from gibberish.nlp.bigrams import (
    convert_matrix_into_map,
    extract_frequency_table,
    iter_bigrams,
)
from gibberish.nlp.sanitiser import sanitise

from .conftest import PANGRAM


def test_iter_bigrams_lowercases_and_slides_by_one():
    assert list(iter_bigrams("AbC d")) == ["ab", "bc", "c ", " d"]


@pytest.mark.parametrize("text", ["", "a"])
def test_iter_bigrams_short_text_is_empty(text):
    assert list(iter_bigrams(text)) == []


def test_pangram_counts():
    lookup = convert_matrix_into_map(extract_frequency_table(PANGRAM))
    assert lookup["th"] == 2
    assert lookup["he"] == 2
    assert lookup["e "] == 2
    assert lookup["qu"] == 1
    assert "xz" not in lookup


def test_matrix_is_sorted_by_count_descending():
    matrix = extract_frequency_table("aaaa abab")
    counts = [pair.y for pair in matrix]
    assert counts == sorted(counts, reverse=True)
    assert matrix[0] == BigramCount(x="aa", y=3)


def test_ties_keep_first_seen_order():
    matrix = extract_frequency_table("abcd")
    assert [pair.x for pair in matrix] == ["ab", "bc", "cd"]


def test_keys_are_unique():
    matrix = extract_frequency_table(PANGRAM)
    keys = [pair.x for pair in matrix]
    assert len(keys) == len(set(keys))
    assert all(pair.y >= 1 for pair in matrix)


@pytest.mark.parametrize(
    "corpus",
    ["", "a", "ab", PANGRAM, "Mississippi. Banana; Café!\nnew line"],
)
def test_count_conservation(corpus):
    sanitised = sanitise(corpus)
    matrix = extract_frequency_table(sanitised)
    assert sum(pair.y for pair in matrix) == max(len(sanitised) - 1, 0)


def test_convert_matrix_into_map_accepts_raw_pairs():
    lookup = convert_matrix_into_map([{"x": "th", "y": 5}, BigramCount(x="he", y=3)])
    assert lookup == {"th": 5, "he": 3}
