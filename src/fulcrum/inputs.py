"""Pre-computed metrics supplied by upstream text processing.

Segmentation, readability formulas and part-of-speech tagging happen
outside fulcrum; these records carry their results into the pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .text import split_sentences, split_words

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when an analysis request does not have the expected shape."""


@dataclass
class ComplexityMetrics:
    flesch_reading_ease: float = 0.0
    average_words_per_sentence: float = 0.0
    sentence_length_variance: float = 0.0
    lexical_diversity: float = 0.0
    sentence_complexity_average: float = 0.0
    word_complexity_distribution: dict[str, int] = field(default_factory=dict)


@dataclass
class TokenData:
    word_count: int = 0
    pronouns: list[str] = field(default_factory=list)
    nouns: list[str] = field(default_factory=list)
    verbs: list[str] = field(default_factory=list)
    named_entities: list[str] = field(default_factory=list)
    number_count: int = 0


@dataclass
class PreprocessingData:
    sentences: list[str] = field(default_factory=list)
    words: list[str] = field(default_factory=list)
    cleaned_text: str = ""


@dataclass
class AnalysisRequest:
    text: str
    complexity: ComplexityMetrics = field(default_factory=ComplexityMetrics)
    tokens: TokenData = field(default_factory=TokenData)
    preprocessing: PreprocessingData = field(default_factory=PreprocessingData)


def resolve_segmentation(text: str, preprocessing: PreprocessingData) -> tuple[list[str], list[str]]:
    """Return (sentences, words), falling back to a simple split when absent."""
    sentences = [s for s in preprocessing.sentences if s.strip()]
    words = list(preprocessing.words)
    if not sentences and text.strip():
        logger.warning("No sentence segmentation supplied; using simple split fallback")
        sentences = split_sentences(text)
    if not words and text.strip():
        words = split_words(text)
    return sentences, [w.lower() for w in words]


def _section(data: dict, key: str) -> dict:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise InputError(f"'{key}' must be an object, got {type(value).__name__}")
    return value


def _number(section: dict, key: str, kind=float):
    value = section.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputError(f"'{key}' must be a number, got {value!r}")
    return kind(value)


def _strings(section: dict, key: str) -> list[str]:
    value = section.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InputError(f"'{key}' must be a list of strings")
    return list(value)


def parse_request(data: dict) -> AnalysisRequest:
    """Build an AnalysisRequest from its JSON form.

    Expected shape::

        {"text": "...",
         "complexity_metrics": {...},
         "tokens": {...},
         "preprocessing": {"sentences": [...], "words": [...]}}

    Unknown keys are ignored.

    Raises:
        InputError: If ``text`` is missing or a field has the wrong type.
    """
    if not isinstance(data, dict):
        raise InputError("Request must be a JSON object")
    text = data.get("text")
    if not isinstance(text, str):
        raise InputError("Request is missing a 'text' string")

    cm = _section(data, "complexity_metrics")
    distribution = cm.get("word_complexity_distribution") or {}
    if not isinstance(distribution, dict):
        raise InputError("'word_complexity_distribution' must be an object")
    complexity = ComplexityMetrics(
        flesch_reading_ease=_number(cm, "flesch_reading_ease"),
        average_words_per_sentence=_number(cm, "average_words_per_sentence"),
        sentence_length_variance=_number(cm, "sentence_length_variance"),
        lexical_diversity=_number(cm, "lexical_diversity"),
        sentence_complexity_average=_number(cm, "sentence_complexity_average"),
        word_complexity_distribution={str(k): _number(distribution, k, int) for k in distribution},
    )

    tk = _section(data, "tokens")
    tokens = TokenData(
        word_count=_number(tk, "word_count", int),
        pronouns=_strings(tk, "pronouns"),
        nouns=_strings(tk, "nouns"),
        verbs=_strings(tk, "verbs"),
        named_entities=_strings(tk, "named_entities"),
        number_count=_number(tk, "number_count", int),
    )

    pp = _section(data, "preprocessing")
    cleaned = pp.get("cleaned_text", "")
    preprocessing = PreprocessingData(
        sentences=_strings(pp, "sentences"),
        words=_strings(pp, "words"),
        cleaned_text=cleaned if isinstance(cleaned, str) else "",
    )

    return AnalysisRequest(
        text=text,
        complexity=complexity,
        tokens=tokens,
        preprocessing=preprocessing,
    )
