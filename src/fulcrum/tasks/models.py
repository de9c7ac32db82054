"""Data models for the task graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

TaskType = Literal["action", "requirement", "goal", "need", "question"]
RelationType = Literal["depends_on", "blocks", "related", "subtask", "parallel"]


@dataclass
class TextRange:
    start_char: int
    end_char: int
    start_line: int
    end_line: int
    sentence_num: int


@dataclass
class Task:
    id: str
    title: str
    description: str
    type: str
    priority: str
    source_text: str
    text_position: TextRange
    confidence: float
    estimated_effort: str
    status: str = "open"
    keywords: list[str] = field(default_factory=list)
    action_verbs: list[str] = field(default_factory=list)
    related_task_ids: list[str] = field(default_factory=list)
    depends_on: list[str] = field(default_factory=list)
    blocks: list[str] = field(default_factory=list)


@dataclass
class TaskRelationship:
    from_task_id: str
    to_task_id: str
    relation_type: str
    strength: float
    reason: str


@dataclass
class TaskGraph:
    tasks: list[Task] = field(default_factory=list)
    relationships: list[TaskRelationship] = field(default_factory=list)
    root_tasks: list[str] = field(default_factory=list)
    leaf_tasks: list[str] = field(default_factory=list)
    critical_path: list[str] = field(default_factory=list)
    graph_complexity: float = 0.0

    @property
    def total_tasks(self) -> int:
        return len(self.tasks)

    def get(self, task_id: str) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
