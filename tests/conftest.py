"""Shared sample prompts with the metrics an upstream tokenizer would supply."""

from __future__ import annotations

import pytest

from fulcrum.inputs import AnalysisRequest, ComplexityMetrics, PreprocessingData, TokenData

from samples import BUGFIX_TEXT, FUNCTION_TEXT, REACT_SENTENCES, REACT_TEXT, WEBSITE_TEXT


def _request(text, sentences, complexity, tokens) -> AnalysisRequest:
    return AnalysisRequest(
        text=text,
        complexity=complexity,
        tokens=tokens,
        preprocessing=PreprocessingData(sentences=sentences),
    )


@pytest.fixture
def react_request() -> AnalysisRequest:
    return _request(
        REACT_TEXT,
        list(REACT_SENTENCES),
        ComplexityMetrics(
            flesch_reading_ease=45.0,
            average_words_per_sentence=10.25,
            sentence_length_variance=35.0,
            lexical_diversity=0.78,
        ),
        TokenData(
            word_count=123,
            pronouns=["that", "it", "that"],
            nouns=[
                "component", "UserProfile", "user", "information", "user", "name",
                "email", "avatar", "date", "TypeScript", "type", "safety", "states",
                "modules", "animations", "elements", "accessibility", "attributes",
                "labels", "keyboard", "navigation", "data", "props", "interface",
                "userId", "string", "showActions", "boolean", "onEdit", "callback",
                "action", "grid", "layout", "design", "principles", "themes", "file",
                "interfaces", "module", "file", "tests", "library",
            ],
            verbs=[
                "create", "called", "displays", "display", "join", "use", "include",
                "loading", "make", "using", "add", "include", "handle", "defaults",
                "edit", "use", "follow", "support", "include", "using",
            ],
            named_entities=[
                "React", "UserProfile", "TypeScript", "CSS", "ARIA", "CSS Grid",
                "Material Design", "React Testing Library",
            ],
            number_count=0,
        ),
    )


@pytest.fixture
def bugfix_request() -> AnalysisRequest:
    return _request(
        BUGFIX_TEXT,
        [],
        ComplexityMetrics(
            flesch_reading_ease=70.0,
            average_words_per_sentence=6.75,
            sentence_length_variance=4.69,
        ),
        TokenData(
            word_count=27,
            pronouns=["I", "we"],
            nouns=["bug", "login", "system", "authentication", "flow", "user", "types", "solution"],
            verbs=["need", "fix", "check", "test", "document"],
        ),
    )


@pytest.fixture
def function_request() -> AnalysisRequest:
    return _request(
        FUNCTION_TEXT,
        [FUNCTION_TEXT],
        ComplexityMetrics(flesch_reading_ease=75.0, average_words_per_sentence=10.0),
        TokenData(
            word_count=10,
            pronouns=["that"],
            nouns=["function", "list", "numbers"],
            verbs=["write", "sorts"],
            named_entities=["Python"],
        ),
    )


@pytest.fixture
def website_request() -> AnalysisRequest:
    return _request(
        WEBSITE_TEXT,
        [WEBSITE_TEXT],
        ComplexityMetrics(flesch_reading_ease=95.0, average_words_per_sentence=10.0),
        TokenData(
            word_count=10,
            pronouns=["me", "that"],
            nouns=["website"],
            verbs=["make", "looks", "works"],
        ),
    )
