"""Loading of the versioned classifier pattern table."""

from __future__ import annotations

import logging
import re
import tomllib
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from .models import PROMPT_TYPES, ClassificationPattern, PatternTable

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS_FILE = Path(__file__).resolve().parent / "patterns.toml"

SUPPORTED_VERSIONS = (1,)


class PatternTableError(Exception):
    """Raised when a pattern table is missing, malformed or unsupported."""


def _string_tuple(entry: dict, key: str, where: str) -> tuple[str, ...]:
    value = entry.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PatternTableError(f"{where}: '{key}' must be a list of strings")
    return tuple(value)


def _build_pattern(entry: dict, where: str) -> ClassificationPattern:
    weight = entry.get("weight", 1.0)
    if isinstance(weight, bool) or not isinstance(weight, (int, float)) or weight < 0:
        raise PatternTableError(f"{where}: 'weight' must be a non-negative number")

    regexes = []
    for source in _string_tuple(entry, "regexes", where):
        try:
            regexes.append(re.compile(source))
        except re.error as e:
            raise PatternTableError(f"{where}: invalid regex {source!r}: {e}") from e

    return ClassificationPattern(
        weight=float(weight),
        keywords=_string_tuple(entry, "keywords", where),
        phrases=tuple(p.lower() for p in _string_tuple(entry, "phrases", where)),
        regexes=tuple(regexes),
        description=str(entry.get("description", "")),
    )


def parse_pattern_table(data: dict) -> PatternTable:
    """Validate and compile a decoded pattern table.

    Raises:
        PatternTableError: On a missing or unsupported ``version``, an unknown
            prompt type, or an entry with bad fields.
    """
    version = data.get("version")
    if version not in SUPPORTED_VERSIONS:
        raise PatternTableError(f"Unsupported pattern table version: {version!r}")

    raw = data.get("patterns")
    if not isinstance(raw, dict):
        raise PatternTableError("Pattern table has no [patterns] section")

    patterns = {}
    for prompt_type in PROMPT_TYPES:
        entries = raw.get(prompt_type, [])
        patterns[prompt_type] = tuple(
            _build_pattern(entry, f"patterns.{prompt_type}[{i}]")
            for i, entry in enumerate(entries)
        )

    unknown = sorted(set(raw) - set(PROMPT_TYPES))
    if unknown:
        raise PatternTableError(f"Unknown prompt type(s) in pattern table: {', '.join(unknown)}")

    return PatternTable(version=version, patterns=MappingProxyType(patterns))


@lru_cache(maxsize=8)
def load_pattern_table(path: Path = DEFAULT_PATTERNS_FILE) -> PatternTable:
    """Read a TOML pattern table. Tables are immutable, so loads are cached."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise PatternTableError(f"Pattern table not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise PatternTableError(f"{path}: {e}") from e

    table = parse_pattern_table(data)
    logger.debug(
        "Loaded pattern table v%d from %s (%d patterns)",
        table.version,
        path,
        sum(len(p) for p in table.patterns.values()),
    )
    return table
