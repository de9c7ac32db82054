"""Rule-based prompt-type classification."""

from __future__ import annotations

import logging

from ..text import contains_word, dedupe
from .models import PROMPT_TYPES, PatternTable, PromptClassification
from .patterns import load_pattern_table

logger = logging.getLogger(__name__)

KEYWORD_POINTS = 1.0
PHRASE_POINTS = 2.0
REGEX_POINTS = 3.0

_REASONS = {
    "technical_spec": "Contains technical specifications, system requirements, and architectural elements",
    "code_generation": "Requests code implementation, programming solutions, or software development",
    "creative_task": "Involves creative ideation, brainstorming, or content generation",
    "data_analysis": "Focuses on data analysis, metrics evaluation, or statistical insights",
    "writing": "Involves writing, documentation, or content creation tasks",
    "problem_solving": "Addresses problem-solving, troubleshooting, or issue resolution",
    "learning": "Educational request seeking explanation or understanding",
    "general": "General-purpose prompt without specific domain focus",
}


class PromptClassifier:
    """Scores text against each prompt type's pattern set.

    The pattern table is loaded once and shared read-only; pass a different
    table to run an alternative calibration side by side.
    """

    def __init__(self, table: PatternTable | None = None) -> None:
        self.table = table or load_pattern_table()

    def _score_type(self, text: str, prompt_type: str) -> tuple[float, list[str]]:
        total = 0.0
        matched: list[str] = []
        for pattern in self.table.patterns.get(prompt_type, ()):
            points = 0.0
            for keyword in pattern.keywords:
                if contains_word(text, keyword):
                    points += KEYWORD_POINTS
                    matched.append(keyword)
            for phrase in pattern.phrases:
                if phrase in text:
                    points += PHRASE_POINTS
                    matched.append(phrase)
            for regex in pattern.regexes:
                if regex.search(text):
                    points += REGEX_POINTS
            total += points * pattern.weight
        return total, dedupe(matched)

    def classify(self, text: str) -> PromptClassification:
        lowered = text.lower()
        scored = []
        all_keywords: list[str] = []
        matched_by_type: dict[str, list[str]] = {}
        for prompt_type in PROMPT_TYPES:
            score, matched = self._score_type(lowered, prompt_type)
            scored.append((prompt_type, round(score, 4)))
            matched_by_type[prompt_type] = matched
            all_keywords.extend(matched)

        order = {name: i for i, name in enumerate(PROMPT_TYPES)}
        ranked = sorted(scored, key=lambda item: (-item[1], order[item[0]]))
        (top_type, top), (second_type, second) = ranked[0], ranked[1]

        if top == 0:
            primary, secondary, confidence = "general", None, 1.0
        elif second == 0:
            primary, secondary, confidence = top_type, None, 0.9
        else:
            primary, secondary = top_type, second_type
            confidence = 0.5 + 0.4 * (top - second) / (top + second)

        reasoning = _REASONS[primary]
        primary_keywords = matched_by_type.get(primary, [])
        if primary_keywords:
            reasoning += f" (detected keywords: {', '.join(primary_keywords[:3])})"

        logger.debug("Classified as %s (confidence %.2f, top score %.2f)", primary, confidence, top)
        return PromptClassification(
            primary_type=primary,
            secondary_type=secondary,
            confidence=round(confidence, 4),
            reasoning=reasoning,
            keywords=dedupe(all_keywords),
            scores=ranked,
        )
