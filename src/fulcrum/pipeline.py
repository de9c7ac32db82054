"""End-to-end analysis: classify, analyze ideas, build tasks, grade."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field

from .classifier.classifier import PromptClassifier
from .classifier.models import PromptClassification
from .classifier.patterns import DEFAULT_PATTERNS_FILE, load_pattern_table
from .config import Config
from .grading.grader import PromptGrader
from .grading.models import PromptGrade
from .ideas.analyzer import IdeaAnalyzer
from .ideas.insights import build_insights
from .ideas.models import IdeaAnalysis, InsightReport
from .inputs import (
    AnalysisRequest,
    ComplexityMetrics,
    PreprocessingData,
    TokenData,
    resolve_segmentation,
)
from .tasks.builder import TaskGraphBuilder
from .tasks.models import TaskGraph

logger = logging.getLogger(__name__)

# Bump when a field of AnalysisResult.to_dict() is renamed or removed.
SCHEMA_VERSION = 1


@dataclass
class AnalysisResult:
    classification: PromptClassification
    idea_analysis: IdeaAnalysis
    task_graph: TaskGraph
    prompt_grade: PromptGrade
    insights: InsightReport = field(default_factory=InsightReport)

    def to_dict(self) -> dict:
        ideas = asdict(self.idea_analysis)
        ideas["unique_ideas"] = self.idea_analysis.unique_ideas

        graph = asdict(self.task_graph)
        graph["total_tasks"] = self.task_graph.total_tasks

        grade = asdict(self.prompt_grade)
        for key, dim in self.prompt_grade.dimensions.items():
            grade["dimensions"][key]["name"] = dim.name

        return {
            "schema_version": SCHEMA_VERSION,
            "classification": self.classification.to_dict(),
            "idea_analysis": ideas,
            "task_graph": graph,
            "prompt_grade": grade,
            "insights": asdict(self.insights),
        }


class Analyzer:
    """Holds one configuration and the components built from it.

    Components are read-only after construction, so one Analyzer can serve
    concurrent ``analyze`` calls.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        table = load_pattern_table(self.config.patterns_file or DEFAULT_PATTERNS_FILE)
        self.classifier = PromptClassifier(table)
        self.idea_analyzer = IdeaAnalyzer(self.config.limits)
        self.graph_builder = TaskGraphBuilder(self.config.limits)
        self.grader = PromptGrader(self.config.profile, self.classifier)

    def analyze(
        self,
        text: str,
        complexity: ComplexityMetrics | None = None,
        tokens: TokenData | None = None,
        preprocessing: PreprocessingData | None = None,
    ) -> AnalysisResult:
        complexity = complexity or ComplexityMetrics()
        tokens = tokens or TokenData()
        sentences, words = resolve_segmentation(text, preprocessing or PreprocessingData())

        classification = self.classifier.classify(text)
        ideas = self.idea_analyzer.analyze(sentences, words)
        graph = self.graph_builder.build(text, sentences, ideas.clusters)
        grade = self.grader.grade(text, classification, complexity, tokens, ideas, graph)
        logger.debug(
            "Analyzed %d sentence(s): %s, grade %s",
            len(sentences),
            classification.primary_type,
            grade.overall.grade,
        )
        insights = build_insights(ideas, complexity, tokens, sentences)
        return AnalysisResult(classification, ideas, graph, grade, insights)

    def analyze_request(self, request: AnalysisRequest) -> AnalysisResult:
        return self.analyze(request.text, request.complexity, request.tokens, request.preprocessing)


def analyze(
    text: str,
    complexity: ComplexityMetrics | None = None,
    tokens: TokenData | None = None,
    preprocessing: PreprocessingData | None = None,
    *,
    config: Config | None = None,
) -> AnalysisResult:
    """Run the whole pipeline on one prompt.

    Never raises for any ``text``; empty input yields an empty analysis with
    a General classification and a low grade.
    """
    return Analyzer(config).analyze(text, complexity, tokens, preprocessing)
