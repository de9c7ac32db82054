"""Data models for idea analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

ThoughtType = Literal[
    "question",
    "fact",
    "opinion",
    "instruction",
    "example",
    "argument",
    "description",
    "idea",
]

# Cascade precedence; also the tie-break order for a cluster's dominant type.
THOUGHT_TYPES: tuple[str, ...] = (
    "question",
    "fact",
    "opinion",
    "instruction",
    "example",
    "argument",
    "description",
    "idea",
)

Position = Literal["Beginning", "Middle", "End"]


@dataclass
class SentenceType:
    sentence: str
    type: str
    confidence: float
    sub_type: str | None = None
    indicators: list[str] = field(default_factory=list)


@dataclass
class IdeaCluster:
    id: int
    main_topic: str
    thought_type: str
    type_confidence: float
    sentences: list[str]
    sentence_types: list[SentenceType]
    key_words: list[str]
    coherence: float
    complexity: float
    position_in_text: str
    evidence: list[str] = field(default_factory=list)
    certainty_level: str | None = None
    actionable: bool = False


@dataclass
class KeyConcept:
    concept: str
    frequency: int
    importance: float
    context: list[str] = field(default_factory=list)
    sentences: list[str] = field(default_factory=list)
    position: list[int] = field(default_factory=list)


@dataclass
class ThoughtDistribution:
    counts: dict[str, int] = field(default_factory=dict)
    dominant_type: str = "mixed"
    balance: float = 0.0


@dataclass
class QuestionAnalysis:
    total_questions: int = 0
    question_types: dict[str, int] = field(default_factory=dict)
    unanswered: list[str] = field(default_factory=list)
    rhetorical: list[str] = field(default_factory=list)
    actionable: list[str] = field(default_factory=list)


@dataclass
class FactualContent:
    total_facts: int = 0
    fact_types: dict[str, int] = field(default_factory=dict)
    verifiable_facts: list[str] = field(default_factory=list)
    statistical_facts: list[str] = field(default_factory=list)
    fact_density: float = 0.0


@dataclass
class IdeaAnalysis:
    """Clusters, concepts and the metrics derived from them."""

    clusters: list[IdeaCluster] = field(default_factory=list)
    key_concepts: list[KeyConcept] = field(default_factory=list)
    sentence_count: int = 0
    idea_density: float = 0.0
    conceptual_coherence: float = 0.0
    idea_complexity: float = 0.0
    conceptual_breadth: float = 0.0
    thematic_consistency: float = 0.0
    idea_progression: str = "Single idea"
    topic_transitions: int = 0
    thought_distribution: ThoughtDistribution = field(default_factory=ThoughtDistribution)
    question_analysis: QuestionAnalysis = field(default_factory=QuestionAnalysis)
    factual_content: FactualContent = field(default_factory=FactualContent)

    @property
    def unique_ideas(self) -> int:
        return len(self.clusters)


@dataclass
class Insight:
    type: str
    title: str
    description: str
    evidence: list[str]
    impact: str  # high, medium or low
    priority: int  # 1 is most pressing


@dataclass
class PrimaryIdea:
    id: int
    summary: str
    coverage: float  # percent of analyzed sentences in this idea
    complexity: float
    key_points: list[str]
    text_mapping: list[int]  # sentence indices


@dataclass
class IdeaConnection:
    from_id: int
    to_id: int
    strength: float
    type: str


@dataclass
class IdeaBreakdown:
    total_ideas: int = 0
    primary_ideas: list[PrimaryIdea] = field(default_factory=list)
    idea_connections: list[IdeaConnection] = field(default_factory=list)
    idea_distribution: dict[str, int] = field(default_factory=dict)
    uniqueness_score: float = 0.0


@dataclass
class WritingQuality:
    overall_score: float = 0.0
    clarity: float = 0.0
    coherence: float = 0.0
    depth: float = 0.0
    originality: float = 0.0
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    quality_markers: dict[str, bool] = field(default_factory=dict)


@dataclass
class Recommendation:
    category: str
    suggestion: str
    rationale: str
    priority: str
    difficulty: str  # easy, moderate or challenging


@dataclass
class ContentProfile:
    type: str = "descriptive"
    purpose: str = ""
    audience_level: str = ""
    tone: str = ""
    style: str = ""
    key_themes: list[str] = field(default_factory=list)
    characteristics: dict[str, str] = field(default_factory=dict)


@dataclass
class InsightReport:
    """Reader-facing findings drawn from the idea metrics."""

    summary: str = ""
    main_insights: list[Insight] = field(default_factory=list)
    idea_breakdown: IdeaBreakdown = field(default_factory=IdeaBreakdown)
    writing_quality: WritingQuality = field(default_factory=WritingQuality)
    recommendations: list[Recommendation] = field(default_factory=list)
    content_profile: ContentProfile = field(default_factory=ContentProfile)
