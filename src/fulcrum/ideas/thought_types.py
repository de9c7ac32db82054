"""Sentence-level thought-type classification.

Each sentence runs through a fixed cascade (question, fact, opinion,
instruction, example, argument) and falls back to description or idea.
Every stage computes its own score, so thresholds can be tuned per stage.
"""

from __future__ import annotations

import re

from ..text import contains_word, count_words
from .models import THOUGHT_TYPES, SentenceType

QUESTION_CONFIDENCE = 0.95
FACT_THRESHOLD = 0.7
OPINION_THRESHOLD = 0.6
INSTRUCTION_THRESHOLD = 0.7
EXAMPLE_THRESHOLD = 0.6
ARGUMENT_THRESHOLD = 0.5
DESCRIPTION_CONFIDENCE = 0.6
IDEA_CONFIDENCE = 0.5

_QUESTION_STARTERS = frozenset({
    "what", "when", "where", "who", "why", "how", "which", "whose", "whom",
    "can", "could", "would", "should", "will", "do", "does", "did",
    "is", "are", "was", "were", "have", "has", "had",
})
_QUESTION_PATTERNS = (
    "can you", "could you", "would you", "will you", "do you", "are you",
    "have you", "can i", "could i", "should i", "may i", "how do", "how can",
    "how to", "what is", "what are", "where is", "when is", "why is", "is it",
    "is there", "are there",
)
_QUESTION_SUBTYPES = (
    ("what", "what-question"),
    ("why", "why-question"),
    ("how", "how-question"),
    ("when", "when-question"),
    ("where", "where-question"),
    ("who", "who-question"),
    ("whom", "who-question"),
)

_FACT_INDICATORS = (
    "is", "are", "was", "were", "has", "have", "had", "contains", "consists",
    "comprises", "includes", "measured", "calculated", "determined", "found",
    "discovered", "proven", "demonstrated",
)
_STAT_TERMS = ("percent", "average", "mean", "median", "ratio", "rate", "total", "sum")

_OPINION_INDICATORS = (
    "believe", "think", "feel", "seems", "appears", "probably", "possibly",
    "perhaps", "maybe", "might", "could", "should", "ought", "better", "worse",
    "prefer", "opinion", "view", "perspective", "argue", "suggest", "recommend",
)
_SUBJECTIVE_ADJECTIVES = (
    "good", "bad", "best", "worst", "excellent", "poor", "great", "terrible",
    "amazing", "awful", "beautiful", "ugly", "important", "crucial", "vital",
    "unnecessary",
)
_STRONG_OPINION = ("definitely", "certainly", "absolutely", "clearly", "obviously", "undoubtedly")
_TENTATIVE_OPINION = ("perhaps", "maybe", "possibly", "might", "could")

_IMPERATIVE_VERBS = frozenset({
    "use", "make", "create", "add", "remove", "delete", "insert", "update",
    "click", "select", "choose", "enter", "type", "press", "open", "close",
    "start", "stop", "begin", "end", "follow", "ensure", "verify", "check",
    "confirm",
})
_INSTRUCTION_INDICATORS = (
    "step", "first", "then", "next", "finally", "must", "need to", "have to",
    "required", "ensure", "make sure",
)

_EXAMPLE_INDICATORS = (
    "for example", "for instance", "such as", "like", "e.g", "i.e", "namely",
    "specifically", "including", "especially",
)

_CAUSAL = (
    "because", "since", "therefore", "thus", "hence", "consequently",
    "as a result", "due to", "owing to", "leads to", "causes", "results in",
)
_CONTRAST = (
    "however", "but", "although", "though", "whereas", "while",
    "on the other hand", "in contrast", "nevertheless", "nonetheless",
)
_EVIDENCE = ("shows", "demonstrates", "proves", "indicates", "suggests", "implies", "reveals", "confirms")

_DESCRIPTIVE = (
    "is", "are", "was", "were", "has", "have", "contains", "looks", "appears", "seems",
    "large", "small", "big", "tiny", "red", "blue", "green", "fast", "slow",
    "high", "low", "new", "old",
)

_DIGIT_RE = re.compile(r"\d")
_YEAR_RE = re.compile(r"\b(19|20)\d{2}\b")
_NUMBERED_RE = re.compile(r"^\s*\d+[.)]")
_LEADING_PUNCT_RE = re.compile(r"^\W+|\W+$")


def _first_word(lower: str) -> str:
    words = lower.split()
    if not words:
        return ""
    return _LEADING_PUNCT_RE.sub("", words[0])


def _is_question(sentence: str, lower: str) -> bool:
    if "?" in sentence:
        return True
    if _first_word(lower) in _QUESTION_STARTERS:
        return True
    return any(contains_word(lower, p) for p in _QUESTION_PATTERNS)


def _question_subtype(lower: str) -> str:
    for word, subtype in _QUESTION_SUBTYPES:
        if contains_word(lower, word):
            return subtype
    return "yes-no-question"


def fact_score(sentence: str) -> float:
    lower = sentence.lower()
    score = 0.2 * count_words(lower, _FACT_INDICATORS)
    if _DIGIT_RE.search(sentence):
        score += 0.3
    if _YEAR_RE.search(sentence):
        score += 0.2
    if "%" in sentence or count_words(lower, _STAT_TERMS):
        score += 0.2
    return min(score, 1.0)


def _fact_subtype(sentence: str, lower: str) -> str:
    if _YEAR_RE.search(sentence):
        return "historical-fact"
    if _DIGIT_RE.search(sentence):
        if "%" in sentence or contains_word(lower, "percent"):
            return "statistical-fact"
        return "numerical-fact"
    if contains_word(lower, "located") or contains_word(lower, "found in"):
        return "geographical-fact"
    if any(contains_word(lower, p) for p in ("defined as", "is a", "is an")):
        return "definitional-fact"
    return "general-fact"


def _fact_indicators(sentence: str, lower: str) -> list[str]:
    indicators = []
    if _DIGIT_RE.search(sentence):
        indicators.append("numeric content")
    if contains_word(lower, "is") or contains_word(lower, "are"):
        indicators.append("declarative statement")
    if _YEAR_RE.search(sentence):
        indicators.append("date reference")
    return indicators


def _first_person(lower: str) -> bool:
    return contains_word(lower, "i")


def opinion_score(sentence: str) -> float:
    lower = sentence.lower()
    score = 0.25 * count_words(lower, _OPINION_INDICATORS)
    score += 0.15 * count_words(lower, _SUBJECTIVE_ADJECTIVES)
    if _first_person(lower):
        score += 0.3
    return min(score, 1.0)


def _opinion_subtype(lower: str) -> str:
    if any(contains_word(lower, w) for w in _STRONG_OPINION):
        return "strong-opinion"
    if any(contains_word(lower, w) for w in _TENTATIVE_OPINION):
        return "tentative-opinion"
    return "moderate-opinion"


def _opinion_indicators(lower: str) -> list[str]:
    indicators = []
    if contains_word(lower, "believe") or contains_word(lower, "think"):
        indicators.append("belief statement")
    if contains_word(lower, "should") or contains_word(lower, "ought"):
        indicators.append("prescriptive language")
    if _first_person(lower):
        indicators.append("first person")
    return indicators


def instruction_score(sentence: str) -> float:
    lower = sentence.lower()
    score = 0.0
    if _first_word(lower) in _IMPERATIVE_VERBS:
        score += 0.5
    score += 0.2 * count_words(lower, _INSTRUCTION_INDICATORS)
    if _NUMBERED_RE.match(sentence):
        score += 0.3
    return min(score, 1.0)


def _instruction_subtype(sentence: str, lower: str) -> str:
    if any(contains_word(lower, w) for w in ("click", "select", "press")):
        return "ui-instruction"
    if any(contains_word(lower, w) for w in ("install", "configure", "setup", "set up")):
        return "setup-instruction"
    if _NUMBERED_RE.match(sentence):
        return "numbered-step"
    return "general-instruction"


def _instruction_indicators(sentence: str, lower: str) -> list[str]:
    indicators = []
    if _first_word(lower) in _IMPERATIVE_VERBS:
        indicators.append("imperative verb")
    if contains_word(lower, "step") or _NUMBERED_RE.match(sentence):
        indicators.append("sequential marker")
    return indicators


def example_score(sentence: str) -> float:
    lower = sentence.lower()
    score = 0.4 * count_words(lower, _EXAMPLE_INDICATORS)
    if "(" in sentence and ")" in sentence:
        score += 0.2
    if ":" in sentence:
        score += 0.2
    return min(score, 1.0)


def _example_indicators(sentence: str, lower: str) -> list[str]:
    indicators = []
    if contains_word(lower, "for example") or contains_word(lower, "for instance"):
        indicators.append("example phrase")
    if contains_word(lower, "such as") or contains_word(lower, "like"):
        indicators.append("comparison phrase")
    if "(" in sentence and ")" in sentence:
        indicators.append("parenthetical")
    return indicators


def argument_score(sentence: str) -> float:
    lower = sentence.lower()
    score = 0.3 * count_words(lower, _CAUSAL)
    score += 0.25 * count_words(lower, _CONTRAST)
    score += 0.2 * count_words(lower, _EVIDENCE)
    return min(score, 1.0)


def _argument_subtype(lower: str) -> str:
    if any(contains_word(lower, w) for w in ("because", "therefore", "thus")):
        return "causal-argument"
    if any(contains_word(lower, w) for w in ("however", "but", "although")):
        return "contrastive-argument"
    if any(contains_word(lower, w) for w in ("shows", "proves", "demonstrates")):
        return "evidence-based-argument"
    return "general-argument"


def _argument_indicators(lower: str) -> list[str]:
    indicators = []
    if contains_word(lower, "because") or contains_word(lower, "therefore"):
        indicators.append("causal reasoning")
    if contains_word(lower, "however") or contains_word(lower, "but"):
        indicators.append("contrast")
    if contains_word(lower, "evidence") or contains_word(lower, "proves"):
        indicators.append("evidence claim")
    return indicators


def classify_sentence(sentence: str) -> SentenceType:
    """Assign exactly one thought type; the first qualifying stage wins."""
    lower = sentence.lower()

    if _is_question(sentence, lower):
        indicators = []
        if "?" in sentence:
            indicators.append("question mark")
        if _first_word(lower) in _QUESTION_STARTERS or any(
            contains_word(lower, p) for p in _QUESTION_PATTERNS
        ):
            indicators.append("interrogative")
        return SentenceType(sentence, "question", QUESTION_CONFIDENCE, _question_subtype(lower), indicators)

    score = fact_score(sentence)
    if score > FACT_THRESHOLD:
        return SentenceType(
            sentence, "fact", score, _fact_subtype(sentence, lower), _fact_indicators(sentence, lower)
        )

    score = opinion_score(sentence)
    if score > OPINION_THRESHOLD:
        return SentenceType(sentence, "opinion", score, _opinion_subtype(lower), _opinion_indicators(lower))

    score = instruction_score(sentence)
    if score > INSTRUCTION_THRESHOLD:
        return SentenceType(
            sentence,
            "instruction",
            score,
            _instruction_subtype(sentence, lower),
            _instruction_indicators(sentence, lower),
        )

    score = example_score(sentence)
    if score > EXAMPLE_THRESHOLD:
        return SentenceType(sentence, "example", score, None, _example_indicators(sentence, lower))

    score = argument_score(sentence)
    if score > ARGUMENT_THRESHOLD:
        return SentenceType(sentence, "argument", score, _argument_subtype(lower), _argument_indicators(lower))

    if count_words(lower, _DESCRIPTIVE):
        return SentenceType(sentence, "description", DESCRIPTION_CONFIDENCE, None, ["descriptive language"])
    return SentenceType(sentence, "idea", IDEA_CONFIDENCE, None, ["general statement"])


def dominant_type(sentence_types: list[SentenceType]) -> tuple[str, float]:
    """Pick the type with the largest count x mean confidence.

    Equal scores resolve by cascade precedence. Returns (type, confidence)
    where confidence is the winning score divided by the sentence count.
    """
    if not sentence_types:
        return "idea", 0.0
    totals = {name: 0.0 for name in THOUGHT_TYPES}
    for st in sentence_types:
        totals[st.type] += st.confidence
    # count x average confidence == summed confidence
    best = max(THOUGHT_TYPES, key=lambda name: (totals[name], -THOUGHT_TYPES.index(name)))
    return best, totals[best] / len(sentence_types)


_CERTAINTY_MARKERS = (
    (("definitely", "certainly", "absolutely"), 1.0),
    (("probably", "likely"), 0.5),
    (("possibly", "perhaps", "maybe"), 0.2),
)
_EVIDENCE_PHRASES = ("according to", "research shows", "studies indicate", "data reveals")
_CITATION_YEAR_RE = re.compile(r"\(\d{4}\)")


def certainty_level(sentences: list[str]) -> str:
    if not sentences:
        return "speculative"
    total = 0.0
    for sentence in sentences:
        lower = sentence.lower()
        for words, points in _CERTAINTY_MARKERS:
            if any(contains_word(lower, w) for w in words):
                total += points
    average = total / len(sentences)
    if average > 0.7:
        return "certain"
    if average > 0.4:
        return "probable"
    if average > 0.2:
        return "possible"
    return "speculative"


def extract_evidence(sentences: list[str]) -> list[str]:
    evidence = []
    for sentence in sentences:
        lower = sentence.lower()
        if any(p in lower for p in _EVIDENCE_PHRASES) or _CITATION_YEAR_RE.search(sentence):
            evidence.append(sentence)
    return evidence
