"""Turning sentences into tasks."""

from __future__ import annotations

import logging
import re

from ..ideas.models import IdeaCluster
from ..text import STOP_WORDS, contains_word, dedupe
from .models import Task, TextRange

logger = logging.getLogger(__name__)

ACTION_POINTS = 0.3
REQUIREMENT_POINTS = 0.2
QUESTION_POINTS = 0.2
GOAL_POINTS = 0.1
MIN_CONFIDENCE = 0.2
MAX_TITLE = 100

ACTION_PATTERNS = (
    "need to", "have to", "must", "should", "will", "going to",
    "want to", "trying to", "plan to", "intend to",
    "update", "create", "fix", "implement", "build", "develop",
    "analyze", "design", "test", "deploy", "configure",
    "document", "write", "add", "handle", "refactor", "migrate", "integrate", "set up",
    "help me", "help with", "assist", "support",
)
REQUIREMENT_PATTERNS = (
    "require", "necessary", "essential", "critical",
    "ensure", "make sure", "verify", "validate",
    "if there are", "when there are", "in case of",
)
QUESTION_PATTERNS = (
    "how to", "how can", "how do",
    "can you", "could you", "would you",
    "what is the best way",
)
GOAL_WORDS = ("goal", "objective", "aim", "purpose")
URGENCY_WORDS = ("urgent", "asap", "immediately", "critical")

LARGE_EFFORT = ("redesign", "refactor", "migrate", "overhaul", "complete rewrite", "entire")
SMALL_EFFORT = ("fix", "tweak", "adjust", "minor", "small", "quick")
COMPLEX_VERBS = ("implement", "design", "develop", "build")

_TITLE_PREFIXES = (
    "i need to ", "i have to ", "i must ", "i should ",
    "we need to ", "we have to ", "we must ", "we should ",
    "you need to ", "you have to ", "you must ", "you should ",
    "need to ", "have to ", "must ", "should ",
    "please ", "can you ", "could you ", "would you ",
)

_KEYWORD_VOCABULARY = frozenset({
    "update", "create", "delete", "modify", "fix", "bug", "error", "issue",
    "implement", "feature", "function", "method", "code", "script", "program",
    "application", "database", "api", "server", "client", "test", "deploy",
    "build", "compile", "return", "list", "array", "object", "file",
    "directory", "path", "url",
})
_NON_WORD_RE = re.compile(r"[^\w]")
# Matched as whole words only; everything else also takes regular inflections.
_UNINFLECTED = frozenset({"must", "should", "will"})
_SUFFIXES = r"(?:s|es|d|ed|ing|ment|ments)?"


def _pattern_re(pattern: str) -> re.Pattern:
    escaped = re.escape(pattern)
    if pattern in _UNINFLECTED or " " in pattern:
        body = escaped
    elif pattern.endswith("e"):
        # migrate -> migrating, migration
        body = f"(?:{escaped}{_SUFFIXES}|{re.escape(pattern[:-1])}(?:ing|ion|ions))"
    else:
        body = escaped + _SUFFIXES
    return re.compile(r"(?<!\w)" + body + r"(?!\w)")


_PATTERN_RES = {
    p: _pattern_re(p)
    for p in ACTION_PATTERNS + REQUIREMENT_PATTERNS + GOAL_WORDS + LARGE_EFFORT + SMALL_EFFORT
}


def _stem_matches(text: str, patterns) -> list[str]:
    """Patterns found as words; "tests" counts for "test", "testament" does not."""
    return [p for p in patterns if _PATTERN_RES[p].search(text)]


def task_title(sentence: str) -> str:
    title = sentence.strip()
    lower = title.lower()
    for prefix in _TITLE_PREFIXES:
        if lower.startswith(prefix):
            title = title[len(prefix):]
            break
    if title:
        title = title[0].upper() + title[1:]
    if len(title) > MAX_TITLE:
        title = title[:MAX_TITLE - 3] + "..."
    return title


def task_keywords(sentence: str) -> list[str]:
    keywords = []
    for word in sentence.lower().split():
        word = _NON_WORD_RE.sub("", word)
        if word in _KEYWORD_VOCABULARY or (len(word) > 4 and word not in STOP_WORDS):
            keywords.append(word)
    return dedupe(keywords)


def estimate_effort(sentence: str, action_verbs: list[str]) -> str:
    lower = sentence.lower()
    if _stem_matches(lower, LARGE_EFFORT):
        return "large"
    if _stem_matches(lower, SMALL_EFFORT):
        return "small"
    complex_verbs = sum(1 for verb in action_verbs if verb in COMPLEX_VERBS)
    if complex_verbs > 1:
        return "large"
    return "medium"


def _text_range(text: str, sentence: str, cursor: int, sentence_num: int) -> TextRange:
    found = text.find(sentence, cursor)
    start = found if found != -1 else min(cursor, len(text))
    end = min(start + len(sentence), len(text))
    return TextRange(
        start_char=start,
        end_char=end,
        start_line=text.count("\n", 0, start) + 1,
        end_line=text.count("\n", 0, end) + 1,
        sentence_num=sentence_num,
    )


def task_from_sentence(sentence: str, task_id: str, position: TextRange) -> Task | None:
    """Score a sentence for task language; None when it is not a task."""
    lower = sentence.lower()
    task_type = None
    confidence = 0.0

    action_verbs = _stem_matches(lower, ACTION_PATTERNS)
    if action_verbs:
        task_type = "action"
        confidence += ACTION_POINTS * len(action_verbs)

    requirements = _stem_matches(lower, REQUIREMENT_PATTERNS)
    if requirements:
        task_type = task_type or "requirement"
        confidence += REQUIREMENT_POINTS * len(requirements)

    questions = [p for p in QUESTION_PATTERNS if contains_word(lower, p)]
    if questions:
        task_type = task_type or "question"
        confidence += QUESTION_POINTS * len(questions)

    if _stem_matches(lower, GOAL_WORDS):
        task_type = task_type or "goal"
        confidence += GOAL_POINTS

    if task_type is None or confidence < MIN_CONFIDENCE:
        return None

    priority = "high" if any(contains_word(lower, w) for w in URGENCY_WORDS) else "medium"
    return Task(
        id=task_id,
        title=task_title(sentence),
        description=sentence,
        type=task_type,
        priority=priority,
        source_text=sentence,
        text_position=position,
        confidence=round(confidence, 4),
        estimated_effort=estimate_effort(sentence, action_verbs),
        keywords=task_keywords(sentence),
        action_verbs=action_verbs,
    )


def _enrich_with_clusters(task: Task, clusters: list[IdeaCluster]) -> None:
    for cluster in clusters:
        if any(s in task.source_text or task.source_text in s for s in cluster.sentences):
            task.keywords = dedupe(task.keywords + cluster.key_words)


def extract_tasks(
    text: str,
    sentences: list[str],
    clusters: list[IdeaCluster],
    max_sentences: int = 100,
    max_tasks: int = 50,
) -> list[Task]:
    """Scan sentences in order and collect tasks with positional metadata."""
    if len(sentences) > max_sentences:
        logger.debug("Task extraction limited to the first %d of %d sentences", max_sentences, len(sentences))
        sentences = sentences[:max_sentences]

    tasks: list[Task] = []
    cursor = 0
    for num, sentence in enumerate(sentences):
        position = _text_range(text, sentence, cursor, num)
        cursor = position.end_char
        task = task_from_sentence(sentence, f"task_{len(tasks) + 1}", position)
        if task is None:
            continue
        _enrich_with_clusters(task, clusters)
        tasks.append(task)
        if len(tasks) >= max_tasks:
            logger.warning("Task cap %d reached; remaining sentences skipped", max_tasks)
            break
    return tasks
