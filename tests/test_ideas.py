"""Tests for idea clustering, key concepts and idea metrics."""

from __future__ import annotations

import math

import pytest

from fulcrum.config import AnalysisLimits
from fulcrum.ideas.analyzer import IdeaAnalyzer, idea_progression, thematic_consistency
from fulcrum.ideas.clustering import (
    cluster_sentences,
    position_label,
    sample_sentences,
    topic_transitions,
)
from fulcrum.ideas.concepts import extract_key_concepts
from fulcrum.text import split_sentences

from samples import BUGFIX_TEXT, REACT_SENTENCES

CACHE_SENTENCES = [
    "The cache stores session tokens.",
    "Session tokens expire after an hour.",
    "Deploy the service on Friday.",
]


def test_sample_keeps_order_and_limit() -> None:
    sentences = [f"Sentence number {i}." for i in range(150)]
    sampled = sample_sentences(sentences, 100)
    assert len(sampled) == 100
    assert sampled[0] == sentences[0]
    assert sampled == sorted(set(sampled), key=sentences.index)


def test_sample_short_input_unchanged() -> None:
    sentences = ["One.", "Two."]
    assert sample_sentences(sentences, 100) == sentences


def test_position_label_thirds() -> None:
    assert position_label(0, 12) == "Beginning"
    assert position_label(4, 12) == "Middle"
    assert position_label(8, 12) == "End"
    assert position_label(0, 2) == "End"


def test_similar_sentences_share_a_cluster() -> None:
    clusters = cluster_sentences(CACHE_SENTENCES, AnalysisLimits())
    assert len(clusters) == 2
    first, second = clusters
    assert first.sentences == CACHE_SENTENCES[:2]
    assert first.main_topic == "Cache"
    assert first.key_words[:4] == ["cache", "stores", "session", "tokens"]
    assert first.coherence == pytest.approx(2 / 7)
    assert second.sentences == CACHE_SENTENCES[2:]
    assert second.coherence == 1.0


def test_clusters_partition_input() -> None:
    clusters = cluster_sentences(REACT_SENTENCES, AnalysisLimits())
    seen = [s for c in clusters for s in c.sentences]
    assert sorted(seen) == sorted(REACT_SENTENCES)
    for c in clusters:
        assert 0.0 <= c.coherence <= 1.0
        assert 1 <= len(c.sentences) <= 10


def test_cluster_size_cap() -> None:
    sentences = ["Rotate the signing keys weekly."] * 5
    clusters = cluster_sentences(sentences, AnalysisLimits(max_cluster_size=2))
    assert [len(c.sentences) for c in clusters] == [2, 2, 1]


def test_cluster_count_cap() -> None:
    sentences = ["Alpha beta gamma.", "Delta epsilon zeta.", "Theta kappa lambda.", "Omicron sigma omega."]
    clusters = cluster_sentences(sentences, AnalysisLimits(max_clusters=2))
    assert len(clusters) == 2
    assert [c.id for c in clusters] == [0, 1]


def test_topic_transitions_counts_low_similarity_pairs() -> None:
    assert topic_transitions(CACHE_SENTENCES, 0.2) == 1
    assert topic_transitions(["Only one."], 0.2) == 0


def test_key_concepts_rank_repeated_words() -> None:
    sentences = ["Cache the tokens.", "Tokens expire.", "Refresh tokens daily."]
    words = [w.lower().strip(".") for s in sentences for w in s.split()]
    concepts = extract_key_concepts(sentences, words)
    assert [c.concept for c in concepts] == ["tokens"]
    tokens = concepts[0]
    assert tokens.frequency == 3
    assert tokens.importance == pytest.approx(3 * math.log(4))
    assert tokens.position == [0, 1, 2]
    assert tokens.context[0] == "Cache the tokens."


def test_key_concepts_ties_are_alphabetical() -> None:
    sentences = ["Zebra apple.", "Zebra apple."]
    words = ["zebra", "apple", "zebra", "apple"]
    assert [c.concept for c in extract_key_concepts(sentences, words)] == ["apple", "zebra"]


def test_analyzer_empty_input() -> None:
    analysis = IdeaAnalyzer().analyze([])
    assert analysis.clusters == []
    assert analysis.unique_ideas == 0
    assert analysis.conceptual_coherence == 0.0
    assert analysis.thematic_consistency == 1.0
    assert analysis.idea_progression == "Single idea"
    assert analysis.thought_distribution.dominant_type == "mixed"
    assert analysis.factual_content.fact_density == 0.0


def test_analyzer_bugfix_prompt() -> None:
    analysis = IdeaAnalyzer().analyze(split_sentences(BUGFIX_TEXT))
    assert analysis.sentence_count == 4
    assert analysis.unique_ideas == 4
    assert analysis.idea_density == 1.0
    assert analysis.idea_progression == "Linear development"
    assert analysis.topic_transitions == 3
    assert analysis.conceptual_coherence == 1.0


def test_analyzer_questions_and_facts() -> None:
    sentences = [
        "How do I rotate the keys?",
        "Isn't it obvious why not?",
        "The cluster was upgraded in 2021 and has 12 nodes.",
    ]
    analysis = IdeaAnalyzer().analyze(sentences)
    questions = analysis.question_analysis
    assert questions.total_questions == 2
    assert questions.actionable == [sentences[0]]
    assert questions.rhetorical == [sentences[1]]
    assert questions.question_types["how-question"] == 1
    facts = analysis.factual_content
    assert facts.total_facts == 1
    assert facts.verifiable_facts == [sentences[2]]
    assert facts.fact_density == pytest.approx(1 / 3)


def test_progression_helpers() -> None:
    assert idea_progression([]) == "Single idea"
    assert thematic_consistency([]) == 1.0
