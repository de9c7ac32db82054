"""Tests for prompt-type classification."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from fulcrum.classifier.classifier import PromptClassifier
from fulcrum.classifier.models import ClassificationPattern, PatternTable, PROMPT_TYPES, display_name

from samples import BUGFIX_TEXT, REACT_TEXT, WEBSITE_TEXT


def _table(**entries: ClassificationPattern) -> PatternTable:
    patterns = {name: () for name in PROMPT_TYPES}
    for name, pattern in entries.items():
        patterns[name] = (pattern,)
    return PatternTable(version=1, patterns=MappingProxyType(patterns))


def test_react_prompt_is_code_generation() -> None:
    result = PromptClassifier().classify(REACT_TEXT)
    assert result.primary_type == "code_generation"
    assert result.secondary_type == "data_analysis"
    assert result.score_of("code_generation") == pytest.approx(21.4)
    assert result.confidence == pytest.approx(0.5 + 0.4 * 20.4 / 22.4, abs=1e-4)
    assert "component" in result.keywords
    assert "react component" in result.keywords
    assert result.display_name == "Code Generation"


def test_vague_prompt_is_general() -> None:
    result = PromptClassifier().classify(WEBSITE_TEXT)
    assert result.primary_type == "general"
    assert result.secondary_type is None
    assert result.confidence == 1.0


def test_empty_text_is_general() -> None:
    result = PromptClassifier().classify("")
    assert result.primary_type == "general"
    assert result.confidence == 1.0
    assert result.keywords == []


def test_bugfix_prompt_is_problem_solving() -> None:
    result = PromptClassifier().classify(BUGFIX_TEXT)
    assert result.primary_type == "problem_solving"
    # "fix" keyword plus the "fix the bug" regex
    assert result.score_of("problem_solving") == pytest.approx(4.0)
    assert result.secondary_type == "technical_spec"


def test_single_type_match_has_fixed_confidence() -> None:
    table = _table(learning=ClassificationPattern(weight=1.0, keywords=("explain",)))
    result = PromptClassifier(table).classify("Explain recursion")
    assert result.primary_type == "learning"
    assert result.secondary_type is None
    assert result.confidence == 0.9


def test_keywords_match_whole_words_only() -> None:
    table = _table(problem_solving=ClassificationPattern(weight=1.0, keywords=("fix",)))
    classifier = PromptClassifier(table)
    assert classifier.classify("add a prefix to the id").primary_type == "general"
    assert classifier.classify("please fix it").primary_type == "problem_solving"


def test_keywords_with_symbols_match() -> None:
    table = _table(code_generation=ClassificationPattern(weight=1.0, keywords=("C++", "Node.js")))
    result = PromptClassifier(table).classify("Port this C++ tool to Node.js")
    assert result.score_of("code_generation") == 2.0


def test_ties_resolve_by_declaration_order() -> None:
    table = _table(
        writing=ClassificationPattern(weight=1.0, keywords=("draft",)),
        creative_task=ClassificationPattern(weight=1.0, keywords=("story",)),
    )
    result = PromptClassifier(table).classify("draft a story")
    # creative_task is declared before writing
    assert result.primary_type == "creative_task"
    assert result.secondary_type == "writing"
    assert result.confidence == 0.5


def test_primary_score_not_below_secondary() -> None:
    classifier = PromptClassifier()
    for text in (BUGFIX_TEXT, WEBSITE_TEXT, REACT_TEXT, "Explain how DNS works"):
        result = classifier.classify(text)
        assert 0 < result.confidence <= 1
        if result.secondary_type:
            assert result.score_of(result.primary_type) >= result.score_of(result.secondary_type) >= 0


def test_reasoning_names_primary_keywords() -> None:
    result = PromptClassifier().classify("Explain how photosynthesis works")
    assert result.primary_type == "learning"
    assert "detected keywords" in result.reasoning
    assert "explain" in result.reasoning


def test_to_dict_scores_cover_all_types() -> None:
    data = PromptClassifier().classify(BUGFIX_TEXT).to_dict()
    assert set(data["scores"]) == set(PROMPT_TYPES)
    assert data["display_name"] == "Problem Solving"


def test_display_name_falls_back_to_key() -> None:
    assert display_name("writing") == "Writing & Documentation"
    assert display_name("unknown") == "unknown"
