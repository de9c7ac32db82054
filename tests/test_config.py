"""Tests for configuration loading."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from fulcrum.config import AnalysisLimits, Config, ConfigError


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_defaults() -> None:
    config = Config()
    assert config.profile == "standard"
    assert config.workers == 2
    assert config.limits.max_sentences == 100
    assert config.limits.max_clusters == 20
    assert config.limits.max_tasks == 50
    assert config.limits.similarity_threshold == 0.20


def test_limits_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        AnalysisLimits().max_tasks = 5


def test_cluster_threshold_switches_for_long_text() -> None:
    limits = AnalysisLimits()
    assert limits.cluster_threshold(50) == 0.20
    assert limits.cluster_threshold(51) == 0.15


def test_load_from_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        'workers = 4\n'
        'patterns_file = "~/patterns.toml"\n'
        '[grading]\n'
        'profile = "legacy"\n'
        '[limits]\n'
        'max_tasks = 10\n'
        'similarity_threshold = 0.3\n',
    )
    config = Config.load(path=path)
    assert config.workers == 4
    assert config.profile == "legacy"
    assert config.patterns_file == Path("~/patterns.toml").expanduser()
    assert config.limits.max_tasks == 10
    assert config.limits.similarity_threshold == 0.3
    assert config.limits.max_clusters == 20


def test_overrides_win_over_file(tmp_path: Path) -> None:
    path = _write(tmp_path, '[grading]\nprofile = "legacy"\n')
    config = Config.load({"profile": "standard", "verbose": True}, path=path)
    assert config.profile == "standard"
    assert config.verbose is True


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        Config.load(path=tmp_path / "absent.toml")


def test_malformed_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "workers = = 3\n")
    with pytest.raises(ConfigError):
        Config.load(path=path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"profile": "lenient"},
        {"workers": 0},
        {"limits": {"max_clusters": 0}},
        {"limits": {"transition_threshold": 1.5}},
        {"workers": "two"},
        {"limits": {"max_tasks": "many"}},
        {"limits": {"similarity_threshold": "high"}},
        {"limits": 5},
    ],
)
def test_invalid_values_rejected(overrides: dict) -> None:
    with pytest.raises(ConfigError):
        Config._apply_dict(Config(), overrides)
