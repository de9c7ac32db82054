"""Idea analysis: clusters, key concepts and derived metrics."""

from __future__ import annotations

import logging
import math
import re
from itertools import combinations

from ..config import AnalysisLimits
from ..text import contains_word, jaccard, split_words
from .clustering import cluster_sentences, sample_sentences, topic_transitions
from .concepts import conceptual_breadth, extract_key_concepts
from .models import (
    THOUGHT_TYPES,
    FactualContent,
    IdeaAnalysis,
    IdeaCluster,
    KeyConcept,
    QuestionAnalysis,
    ThoughtDistribution,
)

logger = logging.getLogger(__name__)

_RHETORICAL = ("isn't it obvious", "who knows", "why not", "don't you think")
_VERIFIABLE_RE = re.compile(r"\d{4}|\d+\s*%")
_VERIFIABLE_WORDS = ("according to", "research", "study", "data")


def idea_complexity(clusters: list[IdeaCluster], concepts: list[KeyConcept]) -> float:
    if not clusters:
        return 0.0
    average = sum(c.complexity for c in clusters) / len(clusters)
    concept_factor = 1.0
    if concepts:
        concept_factor = sum(c.importance for c in concepts) / len(concepts) / 10.0
    return average * concept_factor


def thematic_consistency(clusters: list[IdeaCluster]) -> float:
    if len(clusters) <= 1:
        return 1.0
    pairs = list(combinations(clusters, 2))
    return sum(jaccard(a.key_words, b.key_words) for a, b in pairs) / len(pairs)


def idea_progression(clusters: list[IdeaCluster]) -> str:
    if len(clusters) <= 1:
        return "Single idea"
    positions = [c.position_in_text for c in clusters]
    beginning = positions.count("Beginning")
    middle = positions.count("Middle")
    end = positions.count("End")
    if beginning and middle and end:
        return "Linear development"
    if beginning > 1 and end > 1:
        return "Circular progression"
    return "Concentrated development"


def thought_distribution(clusters: list[IdeaCluster]) -> ThoughtDistribution:
    counts = {name: 0 for name in THOUGHT_TYPES}
    for cluster in clusters:
        counts[cluster.thought_type] += 1

    dominant = "mixed"
    best = 0
    for name in THOUGHT_TYPES:
        if counts[name] > best:
            best, dominant = counts[name], name

    balance = 0.0
    total = len(clusters)
    if total:
        entropy = -sum((n / total) * math.log2(n / total) for n in counts.values() if n)
        balance = entropy / 3.0  # log2 of the eight thought types
    return ThoughtDistribution(counts=counts, dominant_type=dominant, balance=balance)


def analyze_questions(clusters: list[IdeaCluster]) -> QuestionAnalysis:
    analysis = QuestionAnalysis()
    for cluster in clusters:
        questions = [st for st in cluster.sentence_types if st.type == "question"]
        if cluster.thought_type != "question" and not questions:
            continue
        analysis.total_questions += 1
        for st in questions:
            if st.sub_type:
                analysis.question_types[st.sub_type] = analysis.question_types.get(st.sub_type, 0) + 1
            lower = st.sentence.lower()
            if any(p in lower for p in _RHETORICAL):
                analysis.rhetorical.append(st.sentence)
            elif cluster.actionable:
                analysis.actionable.append(st.sentence)
            else:
                analysis.unanswered.append(st.sentence)
    return analysis


def _is_verifiable(sentence: str) -> bool:
    lower = sentence.lower()
    return bool(_VERIFIABLE_RE.search(sentence)) or any(contains_word(lower, w) for w in _VERIFIABLE_WORDS)


def analyze_facts(clusters: list[IdeaCluster], sentence_count: int) -> FactualContent:
    content = FactualContent()
    for cluster in clusters:
        facts = [st for st in cluster.sentence_types if st.type == "fact"]
        if cluster.thought_type != "fact" and not facts:
            continue
        content.total_facts += 1
        for st in facts:
            if st.sub_type:
                content.fact_types[st.sub_type] = content.fact_types.get(st.sub_type, 0) + 1
            if st.sub_type == "statistical-fact":
                content.statistical_facts.append(st.sentence)
            if _is_verifiable(st.sentence):
                content.verifiable_facts.append(st.sentence)
    if sentence_count:
        content.fact_density = content.total_facts / sentence_count
    return content


class IdeaAnalyzer:
    def __init__(self, limits: AnalysisLimits | None = None) -> None:
        self.limits = limits or AnalysisLimits()

    def analyze(self, sentences: list[str], words: list[str] | None = None) -> IdeaAnalysis:
        """Cluster ``sentences`` into ideas and derive the idea metrics.

        Args:
            sentences: Pre-segmented sentences in text order.
            words: Lowercase word list of the whole text. Derived from the
                sentences when not supplied.

        Returns:
            IdeaAnalysis; empty input yields zero clusters and zero metrics
            (thematic consistency stays 1.0, as for a single cluster).
        """
        sentences = [s for s in sentences if s.strip()]
        if words is None:
            words = split_words(" ".join(sentences))

        sampled = sample_sentences(sentences, self.limits.max_sentences)
        clusters = cluster_sentences(sampled, self.limits)
        concepts = extract_key_concepts(sentences, words, self.limits.max_key_concepts)

        count = len(sentences)
        analysis = IdeaAnalysis(
            clusters=clusters,
            key_concepts=concepts,
            sentence_count=count,
            idea_density=len(clusters) / count if count else 0.0,
            conceptual_coherence=(
                sum(c.coherence for c in clusters) / len(clusters) if clusters else 0.0
            ),
            idea_complexity=idea_complexity(clusters, concepts),
            conceptual_breadth=conceptual_breadth(concepts, words),
            thematic_consistency=thematic_consistency(clusters),
            idea_progression=idea_progression(clusters),
            topic_transitions=topic_transitions(sentences, self.limits.transition_threshold),
            thought_distribution=thought_distribution(clusters),
            question_analysis=analyze_questions(clusters),
            factual_content=analyze_facts(clusters, count),
        )
        logger.debug(
            "Idea analysis: %d cluster(s), %d concept(s), progression=%s",
            len(clusters),
            len(concepts),
            analysis.idea_progression,
        )
        return analysis
