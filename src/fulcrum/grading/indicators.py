"""Boolean and fractional quality signals read straight off the prompt text."""

from __future__ import annotations

import re

from ..ideas.models import IdeaAnalysis
from ..inputs import TokenData
from ..tasks.models import TaskGraph
from ..text import clamp, contains_word, safe_div
from .models import QualityIndicators

GOAL_STEMS = (
    "goal", "objective", "need", "want", "should", "must",
    "create", "build", "implement", "analyze", "write", "design", "develop",
)
CONTEXT_WORDS = ("because", "for", "using", "with", "in the context of", "requirements", "constraints")
STEP_WORDS = ("first", "then", "next", "step", "steps", "finally")
CONSTRAINT_STEMS = (
    "within", "using only", "without", "must not", "should not", "limit", "constraint", "requirement",
)
EXAMPLE_WORDS = ("example", "examples", "like", "such as", "for instance", "e.g", "for example")
VAGUE_WORDS = frozenset({
    "good", "well", "nice", "better", "great", "stuff", "things", "thing",
    "something", "anything", "everything", "somehow", "whatever", "etc",
    "various", "some", "awesome", "cool", "really", "very",
})

_WORD_RE = re.compile(r"[a-z]+")


def _has_stem(text: str, stems) -> bool:
    return any(re.search(r"(?<!\w)" + re.escape(stem), text) for stem in stems)


def word_total(text: str, tokens: TokenData) -> int:
    """Word count from the tokenizer, or a whitespace count without one."""
    return tokens.word_count or len(text.split())


def vague_ratio(text: str, tokens: TokenData) -> float:
    vague = sum(1 for w in _WORD_RE.findall(text.lower()) if w in VAGUE_WORDS)
    return safe_div(vague, word_total(text, tokens))


def has_clear_goal(text: str) -> bool:
    return _has_stem(text.lower(), GOAL_STEMS)


def has_specific_context(text: str) -> bool:
    return any(contains_word(text, w) for w in CONTEXT_WORDS)


def quality_indicators(text: str, tokens: TokenData, ideas: IdeaAnalysis, graph: TaskGraph) -> QualityIndicators:
    lower = text.lower()
    return QualityIndicators(
        has_clear_goal=has_clear_goal(text),
        has_specific_context=has_specific_context(text),
        has_actionable_steps=graph.total_tasks > 0 or any(contains_word(lower, w) for w in STEP_WORDS),
        has_constraints=_has_stem(lower, CONSTRAINT_STEMS),
        has_examples=any(contains_word(lower, w) for w in EXAMPLE_WORDS),
        technical_depth=round(min(1.0, (len(tokens.named_entities) + tokens.number_count) / 10), 4),
        structural_quality=round(
            ideas.conceptual_coherence * 0.5 + min(1.0, ideas.sentence_count / 5) * 0.5, 4
        ),
        clarity_score=round(clamp(1.0 - vague_ratio(text, tokens) * 4, 0.0, 1.0), 4),
    )
