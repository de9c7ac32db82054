"""Grading profiles: weights, grade bands and thresholds in one place."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .models import DIMENSIONS


def _weights(*values: float) -> Mapping[str, float]:
    return MappingProxyType(dict(zip(DIMENSIONS, values)))


@dataclass(frozen=True)
class GradingProfile:
    name: str
    weights: Mapping[str, Mapping[str, float]]
    grade_bands: tuple[tuple[float, str], ...]
    label_bands: tuple[tuple[float, str], ...]
    strength_threshold: float
    weak_threshold: float
    suggestion_cap: int

    def weights_for(self, prompt_type: str) -> Mapping[str, float]:
        return self.weights.get(prompt_type, self.weights["general"])

    def grade_for(self, score: float) -> str:
        return _band(score, self.grade_bands)

    def label_for(self, score: float) -> str:
        return _band(score, self.label_bands)


def _band(score: float, bands: tuple[tuple[float, str], ...]) -> str:
    for floor, name in bands:
        if score >= floor:
            return name
    return bands[-1][1]


STANDARD = GradingProfile(
    name="standard",
    # clarity, specificity, completeness, actionability, context, structure
    weights=MappingProxyType({
        "technical_spec": _weights(0.20, 0.25, 0.20, 0.15, 0.15, 0.05),
        "code_generation": _weights(0.15, 0.30, 0.20, 0.25, 0.05, 0.05),
        "creative_task": _weights(0.25, 0.15, 0.15, 0.20, 0.15, 0.10),
        "data_analysis": _weights(0.20, 0.25, 0.20, 0.15, 0.15, 0.05),
        "writing": _weights(0.25, 0.15, 0.15, 0.15, 0.15, 0.15),
        "problem_solving": _weights(0.25, 0.20, 0.20, 0.25, 0.05, 0.05),
        "learning": _weights(0.30, 0.20, 0.15, 0.15, 0.15, 0.05),
        "general": _weights(0.25, 0.20, 0.15, 0.20, 0.10, 0.10),
    }),
    grade_bands=(
        (90, "A+"), (85, "A"), (80, "A-"), (75, "B+"), (70, "B"), (65, "B-"),
        (60, "C+"), (55, "C"), (50, "C-"), (45, "D+"), (40, "D"), (0, "F"),
    ),
    label_bands=(
        (85, "Excellent"), (70, "Good"), (55, "Adequate"), (40, "Needs Improvement"), (0, "Poor"),
    ),
    strength_threshold=85.0,
    weak_threshold=65.0,
    suggestion_cap=6,
)

_UNIFORM = _weights(0.20, 0.20, 0.15, 0.20, 0.10, 0.15)

LEGACY = GradingProfile(
    name="legacy",
    weights=MappingProxyType({"general": _UNIFORM}),
    grade_bands=(
        (95, "A+"), (90, "A"), (87, "A-"), (83, "B+"), (80, "B"), (77, "B-"),
        (73, "C+"), (70, "C"), (67, "C-"), (63, "D+"), (60, "D"), (57, "D-"), (0, "F"),
    ),
    label_bands=(
        (90, "Excellent"), (80, "Good"), (70, "Fair"), (60, "Poor"), (0, "Very Poor"),
    ),
    strength_threshold=85.0,
    weak_threshold=60.0,
    suggestion_cap=5,
)

PROFILES = MappingProxyType({p.name: p for p in (STANDARD, LEGACY)})

SUMMARIES = MappingProxyType({
    "Excellent": "Outstanding prompt with clear objectives, specific details, and excellent structure.",
    "Good": "Well-crafted prompt with good clarity and specificity. Minor improvements possible.",
    "Adequate": "Decent prompt that covers the basics but could benefit from more detail and context.",
    "Fair": "Decent prompt that covers the basics but could benefit from more detail and context.",
    "Needs Improvement": "Prompt lacks clarity or specificity. Consider adding more context and details.",
    "Poor": "Prompt needs significant improvement in clarity, specificity, and structure.",
    "Very Poor": "Prompt needs significant improvement in clarity, specificity, and structure.",
})

GRADE_COLORS = MappingProxyType({
    "A": "#4CAF50",
    "B": "#8BC34A",
    "C": "#FFC107",
    "D": "#FF9800",
    "F": "#F44336",
})


def grade_color(grade: str) -> str:
    return GRADE_COLORS.get(grade[:1], GRADE_COLORS["F"])


def get_profile(name: str) -> GradingProfile:
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(f"Unknown grading profile {name!r}; expected one of {', '.join(PROFILES)}") from None
