"""Configuration management for fulcrum."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path


_DEFAULT_CONFIG_DIR = Path.home() / ".config" / "fulcrum"

PROFILES = ("standard", "legacy")


class ConfigError(Exception):
    """Raised when a configuration file or override holds an invalid value."""


@dataclass(frozen=True)
class AnalysisLimits:
    """Caps and thresholds bounding the O(n^2) comparisons of the pipeline."""

    max_sentences: int = 100
    max_clusters: int = 20
    max_cluster_size: int = 10
    max_tasks: int = 50
    max_key_concepts: int = 10
    similarity_threshold: float = 0.20
    long_text_threshold: float = 0.15
    long_text_sentences: int = 50  # above this, long_text_threshold applies
    transition_threshold: float = 0.2

    def cluster_threshold(self, sentence_count: int) -> float:
        if sentence_count > self.long_text_sentences:
            return self.long_text_threshold
        return self.similarity_threshold


_INT_LIMITS = (
    "max_sentences",
    "max_clusters",
    "max_cluster_size",
    "max_tasks",
    "max_key_concepts",
    "long_text_sentences",
)
_FLOAT_LIMITS = ("similarity_threshold", "long_text_threshold", "transition_threshold")


@dataclass
class Config:
    limits: AnalysisLimits = field(default_factory=AnalysisLimits)
    profile: str = "standard"
    patterns_file: Path | None = None
    workers: int = 2
    verbose: bool = False

    @classmethod
    def load(cls, overrides: dict | None = None, path: Path | None = None) -> Config:
        """Load config from TOML file, then apply CLI overrides."""
        config = cls()

        config_path = path or _DEFAULT_CONFIG_DIR / "config.toml"
        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"{config_path}: {e}") from e
            config = cls._apply_dict(config, data)
        elif path is not None:
            raise ConfigError(f"Config file not found: {path}")

        if overrides:
            config = cls._apply_dict(config, overrides)

        return config

    @classmethod
    def _apply_dict(cls, config: Config, data: dict) -> Config:
        if "profile" in data and data["profile"] is not None:
            profile = str(data["profile"])
            if profile not in PROFILES:
                raise ConfigError(
                    f"Unknown grading profile {profile!r} (expected one of {', '.join(PROFILES)})"
                )
            config.profile = profile
        if "patterns_file" in data and data["patterns_file"]:
            config.patterns_file = Path(data["patterns_file"]).expanduser()
        if "workers" in data and data["workers"] is not None:
            workers = _convert(data["workers"], int, "workers")
            if workers <= 0:
                raise ConfigError(f"workers must be positive, got {workers}")
            config.workers = workers
        if "verbose" in data:
            config.verbose = bool(data["verbose"])

        # [grading] table mirrors the top-level profile key
        if "grading" in data:
            grading = data["grading"]
            if "profile" in grading:
                config = cls._apply_dict(config, {"profile": grading["profile"]})

        if "limits" in data:
            config.limits = _apply_limits(config.limits, data["limits"])

        return config


def _convert(value, kind, name: str):
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be a number, got {value!r}") from e


def _apply_limits(limits: AnalysisLimits, data: dict) -> AnalysisLimits:
    if not isinstance(data, dict):
        raise ConfigError("[limits] must be a table")
    changes: dict = {}
    for name in _INT_LIMITS:
        if name in data:
            value = _convert(data[name], int, f"limits.{name}")
            if value <= 0:
                raise ConfigError(f"limits.{name} must be positive, got {value}")
            changes[name] = value
    for name in _FLOAT_LIMITS:
        if name in data:
            value = _convert(data[name], float, f"limits.{name}")
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"limits.{name} must be within [0, 1], got {value}")
            changes[name] = value
    return replace(limits, **changes)
