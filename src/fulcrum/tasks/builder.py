"""Task graph construction."""

from __future__ import annotations

import logging

from ..config import AnalysisLimits
from ..ideas.models import IdeaCluster
from .extractor import extract_tasks
from .graph import critical_path, graph_complexity, link_tasks
from .models import TaskGraph

logger = logging.getLogger(__name__)


class TaskGraphBuilder:
    def __init__(self, limits: AnalysisLimits | None = None) -> None:
        self.limits = limits or AnalysisLimits()

    def build(self, text: str, sentences: list[str], clusters: list[IdeaCluster]) -> TaskGraph:
        tasks = extract_tasks(
            text,
            sentences,
            clusters,
            max_sentences=self.limits.max_sentences,
            max_tasks=self.limits.max_tasks,
        )
        relationships = link_tasks(tasks)
        graph = TaskGraph(
            tasks=tasks,
            relationships=relationships,
            root_tasks=[t.id for t in tasks if not t.depends_on],
            leaf_tasks=[t.id for t in tasks if not t.blocks],
            critical_path=critical_path(tasks),
            graph_complexity=graph_complexity(tasks, relationships),
        )
        logger.debug(
            "Task graph: %d task(s), %d relationship(s), critical path %s",
            graph.total_tasks,
            len(relationships),
            " -> ".join(graph.critical_path) or "(empty)",
        )
        return graph
