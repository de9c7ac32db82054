"""Key concept extraction."""

from __future__ import annotations

import math
from collections import Counter

from ..text import STOP_WORDS
from .models import KeyConcept

MIN_FREQUENCY = 2
CONTEXT_WINDOW = 2
MAX_CONTEXTS = 3


def _is_candidate(word: str) -> bool:
    return len(word) > 3 and word not in STOP_WORDS


def _contexts(word: str, sentences: list[str]) -> list[str]:
    contexts = []
    for sentence in sentences:
        if len(contexts) >= MAX_CONTEXTS:
            break
        if word not in sentence.lower():
            continue
        tokens = sentence.split()
        for i, token in enumerate(tokens):
            if token.lower().strip(".,;:!?()\"'") == word:
                start = max(0, i - CONTEXT_WINDOW)
                contexts.append(" ".join(tokens[start:i + CONTEXT_WINDOW + 1]))
                break
    return contexts


def extract_key_concepts(sentences: list[str], words: list[str], limit: int = 10) -> list[KeyConcept]:
    """Rank repeated content words by frequency x ln(sentences containing + 1).

    Ties in importance are broken alphabetically so the ranking is stable.
    """
    frequency = Counter(w for w in words if _is_candidate(w))
    concepts = []
    for word, count in frequency.items():
        if count < MIN_FREQUENCY:
            continue
        matches = [(i, s) for i, s in enumerate(sentences) if word in s.lower()]
        concepts.append(
            KeyConcept(
                concept=word,
                frequency=count,
                importance=count * math.log(len(matches) + 1),
                context=_contexts(word, sentences),
                sentences=[s for _, s in matches],
                position=[i for i, _ in matches],
            )
        )
    concepts.sort(key=lambda c: (-c.importance, c.concept))
    return concepts[:limit]


def conceptual_breadth(concepts: list[KeyConcept], words: list[str]) -> float:
    vocabulary = {w for w in words if _is_candidate(w)}
    if not vocabulary:
        return 0.0
    return len({c.concept for c in concepts}) / len(vocabulary)
