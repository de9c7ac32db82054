"""Shared text helpers: stop words, significant terms and similarity."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
    "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
    "to", "was", "will", "with", "but", "or", "so", "if", "when", "where",
    "why", "how", "what", "who", "which", "this", "these", "those", "they", "them",
    "their", "we", "us", "our", "you", "your", "i", "me", "my", "can",
    "could", "should", "would", "do", "does", "did", "have", "had", "been", "being",
    "am", "were", "said", "say", "says",
})

_NON_LETTER_RE = re.compile(r"[^a-z]")
_WORD_RE = re.compile(r"[a-z]+")
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")


def significant_terms(sentence: str) -> list[str]:
    """Lowercase alphabetic tokens longer than 3 letters that are not stop words.

    Order and duplicates are preserved; callers needing sets convert.
    """
    terms = []
    for token in sentence.lower().split():
        token = _NON_LETTER_RE.sub("", token)
        if len(token) > 3 and token not in STOP_WORDS:
            terms.append(token)
    return terms


def jaccard(a, b) -> float:
    """Jaccard similarity of two term collections, 0.0 when both are empty."""
    set_a, set_b = set(a), set(b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def dedupe(items) -> list[str]:
    """Drop repeats while keeping first-seen order."""
    return list(dict.fromkeys(items))


@lru_cache(maxsize=1024)
def _phrase_pattern(phrase: str) -> re.Pattern:
    return re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)", re.IGNORECASE)


def contains_word(text: str, phrase: str) -> bool:
    """True when ``phrase`` occurs in ``text`` not bordered by word characters."""
    if not phrase:
        return False
    return _phrase_pattern(phrase).search(text) is not None


def count_words(text: str, phrases) -> int:
    """Number of ``phrases`` that occur in ``text`` as whole words."""
    return sum(1 for phrase in phrases if contains_word(text, phrase))


def matched_words(text: str, phrases) -> list[str]:
    return [phrase for phrase in phrases if contains_word(text, phrase)]


def split_sentences(text: str) -> list[str]:
    """Fallback segmentation on terminal punctuation.

    Used only when no upstream segmentation was supplied.
    """
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text.strip()) if s.strip()]


def split_words(text: str) -> list[str]:
    """Fallback word list: lowercase alphabetic runs."""
    return _WORD_RE.findall(text.lower())


def safe_div(a: float, b: float) -> float:
    if b == 0:
        return 0.0
    return a / b


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
