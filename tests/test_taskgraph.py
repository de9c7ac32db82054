"""Tests for task extraction, relationship inference and the critical path."""

from __future__ import annotations

from fulcrum.config import AnalysisLimits
from fulcrum.tasks.builder import TaskGraphBuilder
from fulcrum.tasks.extractor import extract_tasks, task_from_sentence, task_title
from fulcrum.tasks.graph import critical_path, find_relationship
from fulcrum.tasks.models import Task, TextRange
from fulcrum.text import split_sentences

from samples import BUGFIX_TEXT, REACT_SENTENCES, REACT_TEXT, WEBSITE_TEXT


def _pos(num: int = 0) -> TextRange:
    return TextRange(0, 0, 1, 1, num)


def _task(task_id: str, depends_on=(), num: int = 0) -> Task:
    return Task(
        id=task_id,
        title=task_id,
        description=task_id,
        type="action",
        priority="medium",
        source_text=task_id,
        text_position=_pos(num),
        confidence=0.3,
        estimated_effort="medium",
        depends_on=list(depends_on),
    )


def _link(tasks: list[Task]) -> list[Task]:
    by_id = {t.id: t for t in tasks}
    for t in tasks:
        for dep in t.depends_on:
            by_id[dep].blocks.append(t.id)
    return tasks


def _build(text: str, sentences=None):
    sentences = sentences if sentences is not None else split_sentences(text)
    return TaskGraphBuilder().build(text, sentences, [])


def test_bugfix_graph() -> None:
    graph = _build(BUGFIX_TEXT)
    assert graph.total_tasks == 4
    assert [t.action_verbs for t in graph.tasks] == [
        ["need to", "fix"], ["should"], ["test"], ["document"],
    ]
    edges = {(r.from_task_id, r.to_task_id) for r in graph.relationships if r.relation_type == "depends_on"}
    # "First, ... check" then "Then test"
    assert ("task_2", "task_3") in edges
    assert edges == {("task_2", "task_3"), ("task_2", "task_4"), ("task_3", "task_4")}
    assert graph.critical_path == ["task_2", "task_3", "task_4"]
    assert graph.root_tasks == ["task_1", "task_2"]
    assert graph.leaf_tasks == ["task_1", "task_4"]


def test_vague_prompt_has_no_tasks() -> None:
    graph = _build(WEBSITE_TEXT)
    assert graph.total_tasks == 0
    assert graph.critical_path == []
    assert graph.graph_complexity == 0.0


def test_react_prompt_tasks() -> None:
    graph = _build(REACT_TEXT, REACT_SENTENCES)
    assert graph.total_tasks == 7
    assert graph.tasks[3].type == "requirement"
    # no dependency edges: the first task alone
    assert graph.critical_path == ["task_1"]
    assert graph.tasks[0].text_position.start_line == 1
    assert graph.tasks[-1].text_position.start_line == 12


def test_graph_ids_are_consistent() -> None:
    for text in (BUGFIX_TEXT, REACT_TEXT, WEBSITE_TEXT, ""):
        graph = _build(text)
        ids = {t.id for t in graph.tasks}
        assert graph.total_tasks == len(graph.tasks)
        for rel in graph.relationships:
            assert rel.from_task_id in ids and rel.to_task_id in ids
        assert set(graph.root_tasks) <= ids
        assert set(graph.leaf_tasks) <= ids
        assert set(graph.critical_path) <= ids
        for task in graph.tasks:
            assert task.id not in task.depends_on
            assert task.id not in task.blocks


def test_then_inside_word_is_not_a_marker() -> None:
    earlier = task_from_sentence("First, update the config.", "task_1", _pos(0))
    later = task_from_sentence("Validate the authentication settings.", "task_2", _pos(1))
    rel = find_relationship(earlier, later)
    assert rel is None or rel.relation_type != "depends_on"


def test_connective_with_shared_term_depends() -> None:
    earlier = task_from_sentence("Create the database schema.", "task_1", _pos(0))
    later = task_from_sentence("Once the schema exists, deploy the service.", "task_2", _pos(1))
    rel = find_relationship(earlier, later)
    assert rel.relation_type == "depends_on"
    assert rel.reason == "Sequential dependency detected"
    assert 0.8 <= rel.strength <= 1.0


def test_task_from_sentence_fields() -> None:
    task = task_from_sentence("We need to refactor the billing module urgently, it is critical.", "task_1", _pos())
    assert task.type == "action"
    assert task.priority == "high"
    assert task.estimated_effort == "large"
    assert task.title.startswith("Refactor the billing")
    assert "billing" in task.keywords


def test_low_signal_sentence_is_not_a_task() -> None:
    assert task_from_sentence("What is the goal here", "task_1", _pos()) is None
    assert task_from_sentence("The sky is blue.", "task_1", _pos()) is None


def test_question_task() -> None:
    task = task_from_sentence("How can we speed up the build", "task_1", _pos())
    assert task.type == "action"
    task = task_from_sentence("Could you explain the flow", "task_1", _pos())
    assert task.type == "question"


def test_task_title_truncates() -> None:
    title = task_title("Please " + "x" * 150)
    assert len(title) == 100
    assert title.endswith("...")
    assert title.startswith("X")


def test_task_cap() -> None:
    sentences = [f"Fix bug number {i}." for i in range(10)]
    tasks = extract_tasks(" ".join(sentences), sentences, [], max_tasks=3)
    assert [t.id for t in tasks] == ["task_1", "task_2", "task_3"]


def test_builder_respects_limits() -> None:
    sentences = [f"Fix bug number {i}." for i in range(10)]
    graph = TaskGraphBuilder(AnalysisLimits(max_sentences=4)).build(" ".join(sentences), sentences, [])
    assert graph.total_tasks == 4


def test_critical_path_diamond() -> None:
    # a -> b -> d, a -> c -> d, d -> e
    tasks = _link([
        _task("a"),
        _task("b", ["a"]),
        _task("c", ["a"]),
        _task("d", ["b", "c"]),
        _task("e", ["d"]),
    ])
    assert critical_path(tasks) == ["a", "b", "d", "e"]


def test_critical_path_shared_descendant_across_roots() -> None:
    # x -> y, and a longer chain p -> q -> y -> z
    tasks = _link([
        _task("x"),
        _task("p"),
        _task("q", ["p"]),
        _task("y", ["x", "q"]),
        _task("z", ["y"]),
    ])
    assert critical_path(tasks) == ["p", "q", "y", "z"]


def test_critical_path_without_edges() -> None:
    assert critical_path([_task("a"), _task("b")]) == ["a"]
    assert critical_path([]) == []


def test_action_words_match_whole_words_and_inflections() -> None:
    assert task_from_sentence("She was willing to read the testament.", "task_1", _pos()) is None
    assert task_from_sentence("The address is on file.", "task_1", _pos()) is None
    task = task_from_sentence("Tests are failing after the migration.", "task_1", _pos())
    assert task is not None
    assert task.action_verbs == ["test", "migrate"]
    assert task.estimated_effort == "large"
