"""
Tests for model validation (detection.validation).
"""

from __future__ import annotations

import copy

import pytest

from gibberish.detection.validation import is_valid_matrix, is_valid_model


def test_well_formed_model_is_valid(raw_model):
    assert is_valid_model(raw_model)


def test_trained_model_and_its_dump_are_valid(tiny_model):
    assert is_valid_model(tiny_model)
    assert is_valid_model(tiny_model.model_dump())


@pytest.mark.parametrize("candidate", [{}, None, [], "model", 42])
def test_non_models_are_invalid(candidate):
    assert not is_valid_model(candidate)


def test_missing_bad_avg_is_invalid(raw_model):
    del raw_model["baseline"]["bad"]["avg"]
    assert not is_valid_model(raw_model)


def test_three_character_key_is_invalid(raw_model):
    raw_model["matrix"].append({"x": "the", "y": 1})
    assert not is_valid_model(raw_model)


@pytest.mark.parametrize(
    "entry",
    [
        {"x": "t", "y": 1},
        {"x": 12, "y": 1},
        {"x": "th", "y": "1"},
        {"x": "th", "y": True},
        {"x": "th"},
        ["th", 1],
    ],
)
def test_malformed_matrix_entries_are_invalid(raw_model, entry):
    raw_model["matrix"].append(entry)
    assert not is_valid_matrix(raw_model["matrix"])
    assert not is_valid_model(raw_model)


@pytest.mark.parametrize(
    ("path", "value"),
    [
        (("matrix",), {"th": 1}),
        (("baseline",), []),
        (("baseline", "good"), [1, 2, 3]),
        (("baseline", "good", "min"), "1"),
        (("baseline", "bad", "max"), None),
    ],
)
def test_malformed_structure_is_invalid(raw_model, path, value):
    candidate = copy.deepcopy(raw_model)
    target = candidate
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = value
    assert not is_valid_model(candidate)


def test_missing_baseline_is_invalid(raw_model):
    del raw_model["baseline"]
    assert not is_valid_model(raw_model)


def test_empty_matrix_is_valid(raw_model):
    raw_model["matrix"] = []
    assert is_valid_matrix([])
    assert is_valid_model(raw_model)


def test_extra_fields_are_ignored(raw_model):
    raw_model["version"] = 2
    assert is_valid_model(raw_model)
