"""Data models for prompt-type classification."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

PromptType = Literal[
    "technical_spec",
    "creative_task",
    "code_generation",
    "data_analysis",
    "writing",
    "problem_solving",
    "learning",
    "general",
]

# Declaration order doubles as the tie-break order for equal scores.
PROMPT_TYPES: tuple[str, ...] = (
    "technical_spec",
    "creative_task",
    "code_generation",
    "data_analysis",
    "writing",
    "problem_solving",
    "learning",
    "general",
)

DISPLAY_NAMES = MappingProxyType({
    "technical_spec": "Technical Specification",
    "code_generation": "Code Generation",
    "creative_task": "Creative Task",
    "data_analysis": "Data Analysis",
    "writing": "Writing & Documentation",
    "problem_solving": "Problem Solving",
    "learning": "Learning & Education",
    "general": "General Purpose",
})


def display_name(prompt_type: str) -> str:
    return DISPLAY_NAMES.get(prompt_type, prompt_type)


@dataclass(frozen=True)
class ClassificationPattern:
    """One weighted group of keywords, phrases and regexes for a prompt type."""

    weight: float
    keywords: tuple[str, ...] = ()
    phrases: tuple[str, ...] = ()
    regexes: tuple[re.Pattern, ...] = ()
    description: str = ""


@dataclass(frozen=True)
class PatternTable:
    version: int
    patterns: MappingProxyType  # prompt type -> tuple[ClassificationPattern, ...]


@dataclass
class PromptClassification:
    primary_type: str
    secondary_type: str | None
    confidence: float
    reasoning: str
    keywords: list[str] = field(default_factory=list)
    scores: list[tuple[str, float]] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return display_name(self.primary_type)

    def score_of(self, prompt_type: str) -> float:
        for name, score in self.scores:
            if name == prompt_type:
                return score
        return 0.0

    def to_dict(self) -> dict:
        return {
            "primary_type": self.primary_type,
            "secondary_type": self.secondary_type,
            "display_name": self.display_name,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "keywords": list(self.keywords),
            "scores": {name: score for name, score in self.scores},
        }
