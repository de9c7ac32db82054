"""Markdown report card for an analysis result."""

from __future__ import annotations

from .pipeline import AnalysisResult


def _escape(cell: str) -> str:
    return cell.replace("|", "\\|").replace("\n", " ")


def render_markdown(result: AnalysisResult) -> str:
    """Format an AnalysisResult as a Markdown report.

    Returns:
        Complete Markdown string ending with a newline.
    """
    c = result.classification
    grade = result.prompt_grade
    overall = grade.overall
    lines: list[str] = []

    # Title
    lines.append(f"# Prompt Report: {overall.grade} ({overall.score:.1f})")
    lines.append("")
    lines.append(f"**{overall.label}**: {overall.summary}")
    lines.append("")
    secondary = f", secondary: {c.secondary_type}" if c.secondary_type else ""
    lines.append(f"- Type: {c.display_name} (confidence {c.confidence:.2f}{secondary})")
    lines.append(f"- Profile: {grade.profile}")
    lines.append("")

    # Dimensions
    lines.append("## Dimensions")
    lines.append("| Dimension | Score | Grade | Weight | Notes |")
    lines.append("|---|---|---|---|---|")
    for key, dim in grade.dimensions.items():
        lines.append(
            f"| {dim.name} | {dim.score:.1f} | {dim.grade} | {grade.weights[key]:.2f} | {_escape(dim.description)} |"
        )
    lines.append("")

    # Suggestions
    lines.append("## Suggestions")
    if grade.suggestions:
        for s in grade.suggestions:
            lines.append(f"- **[{s.priority}] {s.title}**: {s.description}")
            if s.example:
                lines.append(f"  - Example: `{s.example}`")
    else:
        lines.append("- (none)")
    lines.append("")

    lines.append("## Strengths")
    for item in grade.strengths:
        lines.append(f"- {item}")
    lines.append("")

    lines.append("## Weak Areas")
    for item in grade.weak_areas:
        lines.append(f"- {item}")
    lines.append("")

    # Tasks
    graph = result.task_graph
    lines.append("## Tasks")
    if graph.tasks:
        for task in graph.tasks:
            after = f" (after {', '.join(task.depends_on)})" if task.depends_on else ""
            lines.append(f"- `{task.id}` [{task.type}, {task.priority}] {task.title}{after}")
        if len(graph.critical_path) > 1:
            lines.append("")
            lines.append(f"Critical path: {' -> '.join(graph.critical_path)}")
    else:
        lines.append("- (none)")
    lines.append("")

    # Ideas
    ideas = result.idea_analysis
    lines.append("## Ideas")
    if ideas.clusters:
        for cluster in ideas.clusters:
            lines.append(
                f"- {cluster.main_topic} ({cluster.thought_type}, "
                f"{len(cluster.sentences)} sentence(s), {cluster.position_in_text})"
            )
        lines.append("")
        lines.append(f"Progression: {ideas.idea_progression}")
    else:
        lines.append("- (none)")
    lines.append("")

    # Insights
    insights = result.insights
    lines.append("## Writing Insights")
    lines.append(insights.summary)
    lines.append("")
    for rec in insights.recommendations:
        lines.append(f"- [{rec.priority}] {rec.category}: {rec.suggestion}")
    lines.append("")

    return "\n".join(lines)
