"""Multi-dimensional prompt grading."""

from __future__ import annotations

import logging

from ..classifier.classifier import PromptClassifier
from ..classifier.models import PromptClassification
from ..ideas.models import IdeaAnalysis
from ..inputs import ComplexityMetrics, TokenData
from ..tasks.models import TaskGraph
from ..text import clamp
from .dimensions import GradingInput, score_dimension
from .indicators import quality_indicators
from .models import DIMENSIONS, OverallGrade, PromptGrade
from .profiles import SUMMARIES, GradingProfile, get_profile, grade_color
from .suggestions import build_suggestions, strengths, weak_areas

logger = logging.getLogger(__name__)


class PromptGrader:
    """Grades a prompt on six dimensions and combines them per prompt type.

    One engine serves every profile; the profile decides weights, grade
    bands and thresholds.
    """

    def __init__(
        self,
        profile: GradingProfile | str = "standard",
        classifier: PromptClassifier | None = None,
    ) -> None:
        self.profile = get_profile(profile) if isinstance(profile, str) else profile
        self._classifier = classifier

    @property
    def classifier(self) -> PromptClassifier:
        if self._classifier is None:
            self._classifier = PromptClassifier()
        return self._classifier

    def grade(
        self,
        text: str,
        classification: PromptClassification | None,
        complexity: ComplexityMetrics,
        tokens: TokenData,
        ideas: IdeaAnalysis,
        graph: TaskGraph,
    ) -> PromptGrade:
        if classification is None:
            classification = self.classifier.classify(text)
        prompt_type = classification.primary_type
        indicators = quality_indicators(text, tokens, ideas, graph)
        g = GradingInput(text, prompt_type, complexity, tokens, ideas, graph, indicators)

        dims = {key: score_dimension(key, g, self.profile) for key in DIMENSIONS}
        weights = dict(self.profile.weights_for(prompt_type))
        score = round(clamp(sum(dims[k].score * weights[k] for k in DIMENSIONS), 0, 100), 2)
        grade = self.profile.grade_for(score)
        label = self.profile.label_for(score)
        overall = OverallGrade(
            score=score,
            grade=grade,
            grade_color=grade_color(grade),
            label=label,
            summary=SUMMARIES[label],
            percentile=int(clamp(score, 1, 99)),
        )
        logger.debug("Graded %s prompt with %s profile: %.2f (%s)", prompt_type, self.profile.name, score, grade)
        return PromptGrade(
            profile=self.profile.name,
            prompt_type=prompt_type,
            overall=overall,
            dimensions=dims,
            weights=weights,
            suggestions=build_suggestions(prompt_type, dims, indicators, self.profile),
            strengths=strengths(dims, self.profile),
            weak_areas=weak_areas(dims, self.profile),
            indicators=indicators,
        )
