"""Data models for prompt grading."""

from __future__ import annotations

from dataclasses import dataclass, field

DIMENSIONS: tuple[str, ...] = (
    "clarity",
    "specificity",
    "completeness",
    "actionability",
    "context_provision",
    "structure_quality",
)

DIMENSION_NAMES = {
    "clarity": "Clarity",
    "specificity": "Specificity",
    "completeness": "Completeness",
    "actionability": "Actionability",
    "context_provision": "Context",
    "structure_quality": "Structure",
}

PRIORITIES: tuple[str, ...] = ("critical", "high", "medium", "low")


@dataclass
class Factor:
    name: str
    value: float
    weight: float
    contribution: float = 0.0  # value x weight, filled in once value is final


@dataclass
class DimensionContext:
    prompt_type_relevance: float
    expected_min: float = 60.0
    expected_max: float = 95.0
    tips: list[str] = field(default_factory=list)


@dataclass
class Dimension:
    key: str
    score: float
    grade: str
    label: str
    description: str
    factors: list[Factor] = field(default_factory=list)
    context: DimensionContext | None = None

    @property
    def name(self) -> str:
        return DIMENSION_NAMES[self.key]


@dataclass
class OverallGrade:
    score: float
    grade: str
    grade_color: str
    label: str
    summary: str
    percentile: int


@dataclass
class Suggestion:
    category: str
    priority: str
    title: str
    description: str
    impact_score: float
    example: str | None = None


@dataclass
class QualityIndicators:
    has_clear_goal: bool = False
    has_specific_context: bool = False
    has_actionable_steps: bool = False
    has_constraints: bool = False
    has_examples: bool = False
    technical_depth: float = 0.0
    structural_quality: float = 0.0
    clarity_score: float = 0.0


@dataclass
class PromptGrade:
    profile: str
    prompt_type: str
    overall: OverallGrade
    dimensions: dict[str, Dimension]
    weights: dict[str, float]
    suggestions: list[Suggestion] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    weak_areas: list[str] = field(default_factory=list)
    indicators: QualityIndicators = field(default_factory=QualityIndicators)
