"""Tests for the classifier pattern table."""

from __future__ import annotations

from pathlib import Path

import pytest

from fulcrum.classifier.classifier import PromptClassifier
from fulcrum.classifier.models import PROMPT_TYPES
from fulcrum.classifier.patterns import (
    DEFAULT_PATTERNS_FILE,
    PatternTableError,
    load_pattern_table,
    parse_pattern_table,
)


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "patterns.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_default_table_covers_every_scored_type() -> None:
    table = load_pattern_table()
    assert table.version == 1
    assert set(table.patterns) == set(PROMPT_TYPES)
    for prompt_type in PROMPT_TYPES:
        if prompt_type != "general":
            assert table.patterns[prompt_type], prompt_type


def test_default_table_is_cached() -> None:
    assert load_pattern_table(DEFAULT_PATTERNS_FILE) is load_pattern_table(DEFAULT_PATTERNS_FILE)


def test_phrases_are_lowercased() -> None:
    table = load_pattern_table()
    phrases = [p for pattern in table.patterns["code_generation"] for p in pattern.phrases]
    assert "react component" in phrases


def test_missing_version_rejected() -> None:
    with pytest.raises(PatternTableError, match="version"):
        parse_pattern_table({"patterns": {}})


def test_unknown_type_rejected() -> None:
    with pytest.raises(PatternTableError, match="poetry"):
        parse_pattern_table({"version": 1, "patterns": {"poetry": [{"keywords": ["rhyme"]}]}})


def test_bad_regex_rejected() -> None:
    data = {"version": 1, "patterns": {"writing": [{"regexes": ["(unclosed"]}]}}
    with pytest.raises(PatternTableError, match="invalid regex"):
        parse_pattern_table(data)


def test_negative_weight_rejected() -> None:
    data = {"version": 1, "patterns": {"writing": [{"weight": -1, "keywords": ["essay"]}]}}
    with pytest.raises(PatternTableError, match="weight"):
        parse_pattern_table(data)


def test_missing_file_rejected(tmp_path: Path) -> None:
    with pytest.raises(PatternTableError, match="not found"):
        load_pattern_table(tmp_path / "missing.toml")


def test_malformed_toml_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "version = \n")
    with pytest.raises(PatternTableError):
        load_pattern_table(path)


def test_alternative_table_changes_calibration(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        'version = 1\n'
        '[[patterns.creative_task]]\n'
        'weight = 2.0\n'
        'keywords = ["haiku"]\n',
    )
    table = load_pattern_table(path)
    custom = PromptClassifier(table).classify("Write a haiku about autumn")
    default = PromptClassifier().classify("Write a haiku about autumn")
    assert custom.primary_type == "creative_task"
    assert custom.score_of("creative_task") == 2.0
    assert default.primary_type == "writing"
