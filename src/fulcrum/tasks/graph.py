"""Relationship inference and graph-level derivations for tasks."""

from __future__ import annotations

import logging
from collections import deque

from ..text import contains_word, jaccard, significant_terms
from .models import Task, TaskRelationship

logger = logging.getLogger(__name__)

DEPENDENCY_CONNECTIVES = ("after", "once", "when", "then")
OPENING_MARKERS = ("first", "firstly", "before", "initially", "start")
SEQUENCE_MARKERS = ("then", "next", "after", "afterwards")
FOLLOW_UP_MARKERS = ("then", "after", "next", "finally", "lastly", "afterwards")
RELATED_THRESHOLD = 0.5


def _has_any(text: str, words) -> bool:
    return any(contains_word(text, w) for w in words)


def _shares_term(earlier: Task, later: Task) -> bool:
    return bool(set(significant_terms(earlier.source_text)) & set(significant_terms(later.source_text)))


def _is_temporal(earlier: Task, later: Task) -> bool:
    if earlier.text_position.sentence_num >= later.text_position.sentence_num:
        return False
    first = earlier.source_text.lower()
    second = later.source_text.lower()
    opens = _has_any(first, OPENING_MARKERS) or _has_any(first, SEQUENCE_MARKERS)
    return opens and _has_any(second, FOLLOW_UP_MARKERS)


def find_relationship(earlier: Task, later: Task) -> TaskRelationship | None:
    """Infer the relation between two tasks; the first matching rule wins.

    ``earlier`` precedes ``later`` in the text, so every dependency edge
    points forward and the dependency graph stays acyclic.
    """
    similarity = jaccard(earlier.keywords, later.keywords)

    if _has_any(later.source_text.lower(), DEPENDENCY_CONNECTIVES) and _shares_term(earlier, later):
        return TaskRelationship(
            earlier.id, later.id, "depends_on", min(1.0, 0.8 + similarity * 0.2),
            "Sequential dependency detected",
        )

    if _is_temporal(earlier, later):
        return TaskRelationship(earlier.id, later.id, "depends_on", 0.7, "Temporal ordering")

    if similarity > RELATED_THRESHOLD:
        return TaskRelationship(earlier.id, later.id, "related", similarity, "High keyword similarity")

    a, b = set(earlier.keywords), set(later.keywords)
    if a and b and a != b:
        # the parent is the task with fewer, more general keywords
        if a < b:
            return TaskRelationship(earlier.id, later.id, "subtask", 0.6, "Subtask relationship")
        if b < a:
            return TaskRelationship(later.id, earlier.id, "subtask", 0.6, "Subtask relationship")

    return None


def link_tasks(tasks: list[Task]) -> list[TaskRelationship]:
    """Evaluate every ordered pair and mirror edges onto the endpoint tasks."""
    relationships = []
    for i, earlier in enumerate(tasks):
        for later in tasks[i + 1:]:
            rel = find_relationship(earlier, later)
            if rel is None:
                continue
            relationships.append(rel)
            if rel.relation_type == "depends_on":
                later.depends_on.append(earlier.id)
                earlier.blocks.append(later.id)
            else:
                earlier.related_task_ids.append(later.id)
                later.related_task_ids.append(earlier.id)
    logger.debug("Inferred %d relationship(s) among %d task(s)", len(relationships), len(tasks))
    return relationships


def _topological_order(tasks: list[Task]) -> list[str]:
    indegree = {t.id: len(t.depends_on) for t in tasks}
    blocks = {t.id: t.blocks for t in tasks}
    queue = deque(t.id for t in tasks if indegree[t.id] == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in blocks[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order


def critical_path(tasks: list[Task]) -> list[str]:
    """Longest chain of dependent tasks.

    Dynamic programming over a topological order: each task keeps the
    longest chain ending at it. Equal lengths prefer the earlier task.
    """
    if not tasks:
        return []
    rank = {t.id: i for i, t in enumerate(tasks)}
    depends = {t.id: t.depends_on for t in tasks}
    length: dict[str, int] = {}
    previous: dict[str, str | None] = {}

    for node in _topological_order(tasks):
        best, best_prev = 1, None
        for dep in sorted(depends[node], key=rank.__getitem__):
            if length.get(dep, 0) + 1 > best:
                best, best_prev = length[dep] + 1, dep
        length[node], previous[node] = best, best_prev

    end = max(length, key=lambda node: (length[node], -rank[node]))
    path = [end]
    while previous[path[-1]] is not None:
        path.append(previous[path[-1]])
    return path[::-1]


def graph_complexity(tasks: list[Task], relationships: list[TaskRelationship]) -> float:
    if not tasks:
        return 0.0
    ratio = len(relationships) / len(tasks)
    links = sum(len(t.depends_on) + len(t.blocks) for t in tasks) / (len(tasks) * 2)
    return min(1.0, (ratio + links) / 2)
