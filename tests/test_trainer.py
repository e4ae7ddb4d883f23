"""
Tests for model training (training.trainer).
"""

from __future__ import annotations

import pytest
from loguru import logger

import gibberish
from gibberish.training.trainer import train, train_with_files

from .conftest import BAD_LINES, GOOD_LINES, PANGRAM


def test_end_to_end_scenario(tiny_model):
    lookup = tiny_model.lookup
    assert lookup["th"] == 2
    assert gibberish.test_gibberish("the dog runs", tiny_model) is False
    assert gibberish.test_gibberish("xzq qzxw", tiny_model) is True


def test_baselines_are_calibrated(tiny_model):
    good = tiny_model.baseline.good
    bad = tiny_model.baseline.bad
    assert good.min == good.max == good.avg == pytest.approx(9 / 11)
    assert bad.min == bad.max == bad.avg == pytest.approx(1 / 7)
    assert bad.max < good.min


def test_training_is_deterministic():
    first = train(PANGRAM, GOOD_LINES, BAD_LINES)
    second = train(PANGRAM, GOOD_LINES, BAD_LINES)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_lines_may_be_given_as_blocks(tiny_model):
    model = train(PANGRAM, "the dog runs\n", "xzq qzxw\n")
    assert model.baseline == tiny_model.baseline


def test_corpus_is_sanitised():
    model = train("The Quick.\nBROWN; fox!", ["quick brown"], ["zzz"])
    assert "k " in model.lookup
    assert "." not in "".join(model.lookup)
    assert "\n" not in "".join(model.lookup)


def test_train_fails_without_scorable_bad_lines():
    with pytest.raises(ValueError, match="Baseline cannot be calculated"):
        train(PANGRAM, GOOD_LINES, ["", "x"])


def test_train_with_files(tmp_path, tiny_model):
    corpus = tmp_path / "corpus.txt"
    good = tmp_path / "good.txt"
    bad = tmp_path / "bad.txt"
    corpus.write_text(PANGRAM, encoding="utf-8")
    good.write_text("the dog runs\n", encoding="utf-8")
    bad.write_text("xzq qzxw\n", encoding="utf-8")

    model = train_with_files(good_lines_file=good, bad_lines_file=bad, corpus_file=corpus)
    assert model == tiny_model


def test_train_with_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(FileNotFoundError, match="missing.txt"):
        train_with_files(missing, missing, missing)


def test_train_with_files_reports_loaded_files(tmp_path):
    corpus = tmp_path / "corpus.txt"
    good = tmp_path / "good.txt"
    bad = tmp_path / "bad.txt"
    corpus.write_text(PANGRAM, encoding="utf-8")
    good.write_text("the dog runs\n", encoding="utf-8")
    bad.write_text("xzq qzxw\n", encoding="utf-8")

    messages = []
    handler_id = logger.add(messages.append, level="INFO", format="{message}")
    try:
        train_with_files(good_lines_file=good, bad_lines_file=bad, corpus_file=corpus)
    finally:
        logger.remove(handler_id)

    loaded = [message.strip() for message in messages if message.startswith("Loaded")]
    assert loaded == [f"Loaded {good}", f"Loaded {bad}", f"Loaded {corpus}"]
