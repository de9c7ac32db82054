"""Improvement suggestions derived from dimension scores."""

from __future__ import annotations

from .models import PRIORITIES, Dimension, QualityIndicators, Suggestion
from .profiles import GradingProfile

NO_STRENGTHS = "No exceptional strengths identified"
NO_WEAKNESSES = "No critical weaknesses identified"


def _general(dims: dict[str, Dimension], indicators: QualityIndicators, profile: GradingProfile) -> list[Suggestion]:
    out = []
    if dims["clarity"].score < profile.weak_threshold:
        out.append(Suggestion(
            "clarity", "high", "State the goal plainly",
            "Open with one sentence that says exactly what you want, and drop vague words.",
            7.0, "Build a REST endpoint that returns the ten most recent orders for a customer.",
        ))
    if dims["specificity"].score < 70:
        out.append(Suggestion(
            "specificity", "high", "Be more specific about inputs and outputs",
            "Name the data, formats and technologies involved instead of describing them loosely.",
            7.5, "Input: a CSV of orders (id, customer_id, total). Output: JSON grouped by customer.",
        ))
    if dims["completeness"].score < 70:
        out.append(Suggestion(
            "completeness", "high", "Fill in missing requirements",
            "List the requirements, constraints and edge cases the answer has to respect.",
            7.0,
        ))
    if dims["actionability"].score < 65:
        out.append(Suggestion(
            "actionability", "medium", "Make the request actionable",
            "Break the request into concrete steps and say what the finished result looks like.",
            6.5, "First parse the file, then validate each row, finally write a summary report.",
        ))
    if not indicators.has_examples and dims["completeness"].score < 85:
        out.append(Suggestion(
            "completeness", "low", "Add an example",
            "A short example of the expected input or output removes most ambiguity.",
            4.5,
        ))
    if dims["structure_quality"].score < profile.weak_threshold:
        out.append(Suggestion(
            "structure_quality", "low", "Organize the prompt",
            "Group related points and order them the way the work should happen.",
            4.0,
        ))
    return out


def _type_specific(prompt_type: str, dims: dict[str, Dimension]) -> list[Suggestion]:
    out = []
    if prompt_type == "technical_spec":
        if dims["context_provision"].score < 70:
            out.append(Suggestion(
                "context_provision", "medium", "Add technical context",
                "Describe the surrounding system: runtime, scale, and integration points.",
                6.0,
            ))
        if dims["specificity"].score < 70:
            out.append(Suggestion(
                "specificity", "medium", "Define the interface or schema",
                "Spell out endpoints, fields and types so the design has a fixed contract.",
                6.5, "POST /orders {customer_id: int, items: [{sku: str, qty: int}]} -> 201 {id: int}",
            ))
    elif prompt_type == "data_analysis":
        if dims["completeness"].score < 80:
            out.append(Suggestion(
                "completeness", "medium", "Describe the dataset",
                "Say where the data comes from, its size and the fields that matter.",
                6.0,
            ))
        out.append(Suggestion(
            "context_provision", "low", "State the methodology",
            "Name the statistics or models you expect and how results should be reported.",
            5.0,
        ))
    return out


def build_suggestions(
    prompt_type: str,
    dims: dict[str, Dimension],
    indicators: QualityIndicators,
    profile: GradingProfile,
) -> list[Suggestion]:
    """Deduplicated by title, most urgent first, capped per profile."""
    seen = set()
    unique = []
    for suggestion in _general(dims, indicators, profile) + _type_specific(prompt_type, dims):
        if suggestion.title in seen:
            continue
        seen.add(suggestion.title)
        unique.append(suggestion)
    unique.sort(key=lambda s: (PRIORITIES.index(s.priority), -s.impact_score))
    return unique[:profile.suggestion_cap]


def strengths(dims: dict[str, Dimension], profile: GradingProfile) -> list[str]:
    found = [f"{d.name}: {d.description}" for d in dims.values() if d.score >= profile.strength_threshold]
    return found or [NO_STRENGTHS]


def weak_areas(dims: dict[str, Dimension], profile: GradingProfile) -> list[str]:
    found = [f"{d.name}: {d.description}" for d in dims.values() if d.score < profile.weak_threshold]
    return found or [NO_WEAKNESSES]
