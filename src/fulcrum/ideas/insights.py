"""Reader-facing insights: what the idea metrics say about the writing."""

from __future__ import annotations

import logging

from ..inputs import ComplexityMetrics, TokenData
from ..text import clamp, safe_div
from .models import (
    ContentProfile,
    IdeaAnalysis,
    IdeaBreakdown,
    IdeaCluster,
    IdeaConnection,
    Insight,
    InsightReport,
    PrimaryIdea,
    Recommendation,
    WritingQuality,
)

logger = logging.getLogger(__name__)

MAX_PRIMARY_IDEAS = 5
MAX_KEY_POINTS = 3
MAX_KEY_THEMES = 5
KEY_POINT_LENGTH = 100
CONNECTION_THRESHOLD = 0.2
WORDS_PER_MINUTE = 200

_PRIORITY_ORDER = {"high": 1, "medium": 2, "low": 3}


def _insight(kind: str, title: str, level: int, descriptions: tuple[str, str, str], evidence: list[str]) -> Insight:
    # level: 0 high, 1 medium, 2 low
    return Insight(
        type=kind,
        title=title,
        description=descriptions[level],
        evidence=evidence,
        impact=("high", "medium", "low")[level],
        priority=level + 1,
    )


def _complex_words(complexity: ComplexityMetrics) -> int:
    dist = complexity.word_complexity_distribution
    return dist.get("complex", 0) + dist.get("very_complex", 0)


def main_insights(complexity: ComplexityMetrics, ideas: IdeaAnalysis, tokens: TokenData) -> list[Insight]:
    flesch = complexity.flesch_reading_ease
    readability = _insight(
        "readability",
        "Readability Assessment",
        0 if flesch < 30 else 1 if flesch < 60 else 2,
        (
            "The text is very difficult to read, suitable for university graduates or specialists.",
            "The text has moderate to difficult readability, appropriate for college-level readers.",
            "The text is easy to read, accessible to a general audience.",
        ),
        [
            f"Flesch Reading Ease: {flesch:.1f}",
            f"Average words per sentence: {complexity.average_words_per_sentence:.1f}",
            f"Sentence length variance: {complexity.sentence_length_variance:.1f}",
        ],
    )

    count = ideas.unique_ideas
    richness = _insight(
        "idea_analysis",
        "Conceptual Richness",
        0 if count < 3 else 1 if count > 10 else 2,
        (
            "The text focuses on a very limited set of ideas, suggesting either focused "
            "argumentation or lack of depth.",
            "The text covers many diverse ideas, which may challenge reader comprehension "
            "or indicate comprehensive coverage.",
            f"The text contains {count} distinct ideas with good conceptual balance.",
        ),
        [
            f"Unique ideas identified: {count}",
            f"Idea density: {ideas.idea_density:.2f} per sentence",
            f"Conceptual coherence: {ideas.conceptual_coherence:.2f}",
        ],
    )

    diversity = complexity.lexical_diversity
    vocabulary = _insight(
        "vocabulary",
        "Vocabulary Analysis",
        0 if diversity < 0.3 else 1 if diversity > 0.7 else 2,
        (
            "Very low vocabulary diversity suggests repetitive language use.",
            "Exceptionally high vocabulary diversity indicates sophisticated or technical language.",
            "Vocabulary diversity is well-balanced for clear communication.",
        ),
        [
            f"Lexical diversity: {diversity:.2f}",
            f"Word count: {tokens.word_count}",
            f"Complex words: {_complex_words(complexity)}",
        ],
    )

    sentence_complexity = complexity.sentence_complexity_average
    structure = _insight(
        "structure",
        "Structural Complexity",
        0 if sentence_complexity > 5 else 1 if sentence_complexity < 2 else 2,
        (
            "Highly complex sentence structures may impair readability.",
            "Very simple sentence structures might seem choppy or elementary.",
            "Sentence complexity is appropriate for clear communication.",
        ),
        [
            f"Average sentence complexity: {sentence_complexity:.1f}",
            f"Sentences: {ideas.sentence_count}",
            f"Topic transitions: {ideas.topic_transitions}",
        ],
    )

    return sorted([readability, richness, vocabulary, structure], key=lambda i: i.priority)


def connection_strength(a: IdeaCluster, b: IdeaCluster) -> float:
    """Shared keywords over the larger keyword list."""
    if not a.key_words or not b.key_words:
        return 0.0
    shared = len(set(a.key_words) & set(b.key_words))
    return shared / max(len(a.key_words), len(b.key_words))


def connection_type(a: IdeaCluster, b: IdeaCluster) -> str:
    if a.position_in_text == "Beginning" and b.position_in_text == "End":
        return "develops-into"
    if a.complexity < b.complexity:
        return "builds-on"
    return "relates-to"


def _idea_summary(cluster: IdeaCluster) -> str:
    if cluster.key_words:
        return f"{cluster.main_topic}: {', '.join(cluster.key_words[:3])}"
    return cluster.main_topic


def _key_points(cluster: IdeaCluster) -> list[str]:
    points = []
    for sentence in cluster.sentences[:MAX_KEY_POINTS]:
        if len(sentence) > KEY_POINT_LENGTH:
            sentence = sentence[:KEY_POINT_LENGTH] + "..."
        points.append(sentence)
    return points


def _text_mapping(cluster: IdeaCluster, sentences: list[str], taken: set[int]) -> list[int]:
    indices = []
    for sentence in cluster.sentences:
        for i, candidate in enumerate(sentences):
            if i not in taken and candidate == sentence:
                taken.add(i)
                indices.append(i)
                break
    return indices


def idea_breakdown(ideas: IdeaAnalysis, sentences: list[str]) -> IdeaBreakdown:
    clusters = ideas.clusters
    clustered = sum(len(c.sentences) for c in clusters)
    taken: set[int] = set()

    primary = [
        PrimaryIdea(
            id=c.id,
            summary=_idea_summary(c),
            coverage=round(safe_div(len(c.sentences), clustered) * 100, 2),
            complexity=c.complexity,
            key_points=_key_points(c),
            text_mapping=_text_mapping(c, sentences, taken),
        )
        for c in clusters[:MAX_PRIMARY_IDEAS]
    ]

    connections = []
    for i, a in enumerate(clusters):
        for b in clusters[i + 1:]:
            strength = connection_strength(a, b)
            if strength > CONNECTION_THRESHOLD:
                connections.append(IdeaConnection(a.id, b.id, round(strength, 4), connection_type(a, b)))

    distribution: dict[str, int] = {}
    for c in clusters:
        distribution[c.position_in_text] = distribution.get(c.position_in_text, 0) + 1

    uniqueness = (ideas.conceptual_breadth + min(1.0, ideas.unique_ideas / 20)) / 2
    return IdeaBreakdown(
        total_ideas=ideas.unique_ideas,
        primary_ideas=primary,
        idea_connections=connections,
        idea_distribution=distribution,
        uniqueness_score=round(uniqueness, 4),
    )


def writing_quality(complexity: ComplexityMetrics, ideas: IdeaAnalysis) -> WritingQuality:
    clarity = complexity.flesch_reading_ease / 100
    if complexity.average_words_per_sentence > 20:
        clarity *= 0.8
    clarity = clamp(clarity, 0.0, 1.0)

    coherence = ideas.conceptual_coherence

    depth = (ideas.idea_complexity / 10 + ideas.conceptual_breadth) / 2
    if ideas.unique_ideas > 5 and coherence > 0.6:
        depth *= 1.2
    depth = min(1.0, depth)

    originality = (complexity.lexical_diversity + ideas.conceptual_breadth) / 2
    simple = complexity.word_complexity_distribution.get("simple", 0)
    if _complex_words(complexity) > simple / 10:
        originality *= 1.1
    originality = min(1.0, originality)

    quality = WritingQuality(
        overall_score=round(clarity * 0.3 + coherence * 0.25 + depth * 0.25 + originality * 0.2, 4),
        clarity=round(clarity, 4),
        coherence=round(coherence, 4),
        depth=round(depth, 4),
        originality=round(originality, 4),
    )

    markers = (
        (clarity > 0.7, "Clear and accessible writing", "clear_writing"),
        (coherence > 0.7, "Well-connected ideas with strong flow", "coherent_structure"),
        (depth > 0.7, "Thorough exploration of concepts", "conceptual_depth"),
        (complexity.lexical_diversity > 0.5, "Rich vocabulary usage", "varied_vocabulary"),
    )
    for present, strength, marker in markers:
        if present:
            quality.strengths.append(strength)
            quality.quality_markers[marker] = True

    if clarity < 0.5:
        quality.weaknesses.append("Unclear or overly complex writing")
    if coherence < 0.5:
        quality.weaknesses.append("Disconnected ideas or poor flow")
    if ideas.topic_transitions > 10:
        quality.weaknesses.append("Too many topic shifts")
    if complexity.average_words_per_sentence > 25:
        quality.weaknesses.append("Overly long sentences")
    return quality


def recommendations(
    complexity: ComplexityMetrics, ideas: IdeaAnalysis, quality: WritingQuality
) -> list[Recommendation]:
    recs = []
    if complexity.flesch_reading_ease < 30:
        recs.append(Recommendation(
            "Readability",
            "Simplify sentence structures and use more common vocabulary",
            "Text is very difficult to read for most audiences",
            "high", "moderate",
        ))
    if ideas.conceptual_coherence < 0.5:
        recs.append(Recommendation(
            "Organization",
            "Improve transitions between ideas and group related concepts",
            "Ideas appear disconnected or poorly organized",
            "high", "moderate",
        ))
    if ideas.topic_transitions > 10:
        recs.append(Recommendation(
            "Focus",
            "Reduce topic shifts and maintain consistent themes",
            "Frequent topic changes may confuse readers",
            "medium", "challenging",
        ))
    if complexity.lexical_diversity < 0.3:
        recs.append(Recommendation(
            "Vocabulary",
            "Use more varied vocabulary and reduce word repetition",
            "Limited vocabulary makes text monotonous",
            "medium", "easy",
        ))
    if complexity.average_words_per_sentence > 25:
        recs.append(Recommendation(
            "Structure",
            "Break long sentences into shorter, clearer ones",
            "Long sentences reduce comprehension",
            "high", "easy",
        ))
    if quality.depth < 0.5 and ideas.unique_ideas < 5:
        recs.append(Recommendation(
            "Content",
            "Expand on existing ideas and introduce supporting concepts",
            "Content lacks depth and variety",
            "medium", "challenging",
        ))
    return sorted(recs, key=lambda r: _PRIORITY_ORDER[r.priority])


def _reading_band(flesch: float, labels: tuple[str, str, str, str, str]) -> str:
    """Pick a label by Flesch band: >=80, >=60, >=50, >=30, below."""
    for bound, label in zip((80, 60, 50, 30), labels):
        if flesch >= bound:
            return label
    return labels[-1]


def content_profile(
    complexity: ComplexityMetrics, ideas: IdeaAnalysis, tokens: TokenData, sentences: list[str]
) -> ContentProfile:
    if ideas.idea_progression == "Linear development" and ideas.conceptual_coherence > 0.6:
        kind = "argumentative"
    elif ideas.unique_ideas > 8 and ideas.conceptual_breadth > 0.6:
        kind = "expository"
    elif complexity.sentence_complexity_average > 4:
        kind = "analytical"
    else:
        kind = "descriptive"

    flesch = complexity.flesch_reading_ease
    if flesch < 50:
        purpose = "Academic or professional communication"
    elif flesch < 70:
        purpose = "General information or education"
    else:
        purpose = "Broad audience communication"

    dist = complexity.word_complexity_distribution
    complex_share = safe_div(_complex_words(complexity), sum(dist.values()))
    if complexity.lexical_diversity > 0.6 and complex_share > 0.2:
        tone = "Formal"
    elif complexity.average_words_per_sentence < 15:
        tone = "Conversational"
    else:
        tone = "Neutral"

    if ideas.thematic_consistency > 0.7:
        style = "Focused and consistent"
    elif ideas.conceptual_breadth > 0.6:
        style = "Comprehensive and varied"
    else:
        style = "Mixed or developing"

    word_count = tokens.word_count or sum(len(s.split()) for s in sentences)
    return ContentProfile(
        type=kind,
        purpose=purpose,
        audience_level=_reading_band(
            flesch, ("Elementary", "Middle school", "High school", "College", "Graduate/Professional")
        ),
        tone=tone,
        style=style,
        key_themes=[c.concept.capitalize() for c in ideas.key_concepts[:MAX_KEY_THEMES]],
        characteristics={
            "word_count": f"{word_count} words",
            "sentence_count": f"{ideas.sentence_count} sentences",
            "reading_time": f"{word_count / WORDS_PER_MINUTE:.1f} minutes",
            "complexity_level": _reading_band(
                flesch, ("Very Simple", "Simple", "Moderate", "Complex", "Very Complex")
            ),
        },
    )


def insight_summary(breakdown: IdeaBreakdown, quality: WritingQuality, profile: ContentProfile) -> str:
    strengths = " and ".join(quality.strengths[:2]) or "none identified"
    return (
        f"This {profile.type} text contains {breakdown.total_ideas} unique ideas with an overall "
        f"quality score of {quality.overall_score:.2f}/1.0. The content is suitable for "
        f"{profile.audience_level.lower()} readers and demonstrates {profile.style.lower()} writing. "
        f"Key strengths include: {strengths}. The text has a {profile.tone.lower()} tone."
    )


def build_insights(
    ideas: IdeaAnalysis,
    complexity: ComplexityMetrics | None = None,
    tokens: TokenData | None = None,
    sentences: list[str] | None = None,
) -> InsightReport:
    """Turn idea metrics and upstream text metrics into an InsightReport.

    Args:
        ideas: Output of IdeaAnalyzer.analyze.
        complexity: Readability metrics; zero defaults when absent.
        tokens: Token counts; zero defaults when absent.
        sentences: The analyzed sentences, used to map ideas back to
            sentence indices.
    """
    complexity = complexity or ComplexityMetrics()
    tokens = tokens or TokenData()
    sentences = sentences or []

    breakdown = idea_breakdown(ideas, sentences)
    quality = writing_quality(complexity, ideas)
    profile = content_profile(complexity, ideas, tokens, sentences)
    report = InsightReport(
        summary=insight_summary(breakdown, quality, profile),
        main_insights=main_insights(complexity, ideas, tokens),
        idea_breakdown=breakdown,
        writing_quality=quality,
        recommendations=recommendations(complexity, ideas, quality),
        content_profile=profile,
    )
    logger.debug(
        "Insights: %d connection(s), %d recommendation(s), quality %.2f",
        len(breakdown.idea_connections),
        len(report.recommendations),
        quality.overall_score,
    )
    return report
