"""Greedy single-pass clustering of sentences by shared significant terms."""

from __future__ import annotations

import logging
import math
from itertools import combinations

from ..config import AnalysisLimits
from ..text import dedupe, jaccard, significant_terms
from .models import IdeaCluster
from .thought_types import certainty_level, classify_sentence, dominant_type, extract_evidence

logger = logging.getLogger(__name__)


def sample_sentences(sentences: list[str], limit: int) -> list[str]:
    """Evenly sample down to ``limit`` sentences, keeping text order."""
    n = len(sentences)
    if n <= limit:
        return list(sentences)
    logger.debug("Sampling %d sentences down to %d", n, limit)
    return [sentences[i * n // limit] for i in range(limit)]


def position_label(index: int, total: int) -> str:
    third = total // 3
    if index < third:
        return "Beginning"
    if index < 2 * third:
        return "Middle"
    return "End"


def cluster_coherence(sentences: list[str]) -> float:
    """Mean pairwise term similarity; a single sentence is fully coherent."""
    if len(sentences) <= 1:
        return 1.0
    terms = [significant_terms(s) for s in sentences]
    pairs = list(combinations(terms, 2))
    return sum(jaccard(a, b) for a, b in pairs) / len(pairs)


def cluster_complexity(sentences: list[str]) -> float:
    if not sentences:
        return 0.0
    total = 0.0
    for sentence in sentences:
        words = sentence.split()
        avg_len = sum(len(w) for w in words) / len(words) if words else 0.0
        total += math.log(len(words) + 1) * (avg_len / 5.0)
    return total / len(sentences)


def main_topic(keywords: list[str]) -> str:
    if not keywords:
        return "General"
    return keywords[0].capitalize()


def build_cluster(cluster_id: int, sentences: list[str], keywords: list[str], position: str) -> IdeaCluster:
    sentence_types = [classify_sentence(s) for s in sentences]
    thought_type, type_confidence = dominant_type(sentence_types)

    evidence: list[str] = []
    certainty = None
    if thought_type == "fact":
        evidence = extract_evidence(sentences)
        certainty = "certain"
    elif thought_type in ("opinion", "argument"):
        certainty = certainty_level(sentences)

    return IdeaCluster(
        id=cluster_id,
        main_topic=main_topic(keywords),
        thought_type=thought_type,
        type_confidence=type_confidence,
        sentences=sentences,
        sentence_types=sentence_types,
        key_words=keywords,
        coherence=cluster_coherence(sentences),
        complexity=cluster_complexity(sentences),
        position_in_text=position,
        evidence=evidence,
        certainty_level=certainty,
        actionable=thought_type in ("question", "instruction"),
    )


def cluster_sentences(sentences: list[str], limits: AnalysisLimits) -> list[IdeaCluster]:
    """Partition sentences into idea clusters.

    Each unassigned sentence seeds a cluster and pulls in later unassigned
    sentences whose term similarity to the seed exceeds the threshold, until
    the cluster is full. Stops opening clusters at ``limits.max_clusters``.
    """
    if not sentences:
        return []

    terms = [significant_terms(s) for s in sentences]
    threshold = limits.cluster_threshold(len(sentences))
    used = [False] * len(sentences)
    clusters: list[IdeaCluster] = []

    for i, seed in enumerate(sentences):
        if used[i]:
            continue
        if len(clusters) >= limits.max_clusters:
            logger.debug("Cluster cap %d reached at sentence %d", limits.max_clusters, i)
            break
        used[i] = True
        members = [seed]
        keywords = list(terms[i])
        for j in range(i + 1, len(sentences)):
            if len(members) >= limits.max_cluster_size:
                break
            if used[j]:
                continue
            if jaccard(terms[i], terms[j]) > threshold:
                members.append(sentences[j])
                keywords.extend(terms[j])
                used[j] = True
        clusters.append(
            build_cluster(len(clusters), members, dedupe(keywords), position_label(i, len(sentences)))
        )

    logger.debug("Formed %d cluster(s) from %d sentence(s)", len(clusters), len(sentences))
    return clusters


def topic_transitions(sentences: list[str], threshold: float) -> int:
    """Count adjacent sentence pairs whose term similarity falls below ``threshold``."""
    terms = [significant_terms(s) for s in sentences]
    return sum(1 for a, b in zip(terms, terms[1:]) if jaccard(a, b) < threshold)
