"""The six grading dimensions.

Each dimension is a weighted list of factors on a 0-100 scale; the
dimension score is the sum of ``value * weight`` over its factors, and
the factor weights of a dimension add up to 1.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ideas.models import IdeaAnalysis
from ..inputs import ComplexityMetrics, TokenData
from ..tasks.models import TaskGraph
from ..text import clamp, contains_word, safe_div
from .indicators import vague_ratio, word_total
from .models import Dimension, DimensionContext, Factor, QualityIndicators
from .profiles import GradingProfile

TECHNICAL_TYPES = ("technical_spec", "code_generation")
DELIVERABLE_STEMS = ("deliverable", "deliver", "output", "steps", "phase")
DOMAIN_WORDS = ("security", "authentication", "oauth", "latency", "throughput", "budget", "deadline")

PROGRESSION_SCORES = {
    "Linear development": 90.0,
    "Concentrated development": 70.0,
    "Circular progression": 60.0,
    "Single idea": 40.0,
}

TYPE_RELEVANCE = {
    "technical_spec": 0.9,
    "code_generation": 0.8,
    "creative_task": 0.9,
    "data_analysis": 0.8,
    "writing": 0.9,
    "problem_solving": 0.95,
    "learning": 0.95,
    "general": 0.8,
}

DEFAULT_TIPS = {
    "clarity": ["Use simple, direct language", "State the goal in the first sentence"],
    "specificity": ["Name concrete technologies, files or data", "Replace pronouns with the things they refer to"],
    "completeness": ["List every requirement and constraint", "Describe the expected output"],
    "actionability": ["Break the request into explicit steps", "Say what done looks like"],
    "context_provision": ["Explain why the task matters", "Mention the environment and audience"],
    "structure_quality": ["Group related points together", "Order steps the way they should happen"],
}

TYPE_TIPS = {
    ("technical_spec", "clarity"): ["Use precise technical terminology", "Define acronyms and domain terms"],
    ("code_generation", "clarity"): ["Specify the language and framework", "Describe inputs and outputs of the code"],
    ("code_generation", "specificity"): ["Give function signatures or prop types", "Name libraries and versions"],
    ("data_analysis", "completeness"): ["Describe the dataset and its fields", "State the analysis methodology"],
    ("creative_task", "context_provision"): ["Describe the audience and tone", "Reference styles you like"],
}

DESCRIPTIONS = {
    "clarity": (
        (85, "Very clear and easy to understand"),
        (70, "Generally clear with minor ambiguities"),
        (55, "Somewhat unclear in places"),
        (0, "Unclear or ambiguous"),
    ),
    "specificity": (
        (85, "Highly specific and detailed"),
        (70, "Reasonably specific"),
        (55, "Somewhat vague"),
        (0, "Too general or vague"),
    ),
    "completeness": (
        (85, "Comprehensive coverage of requirements"),
        (70, "Covers most requirements"),
        (55, "Missing some important details"),
        (0, "Significant gaps in requirements"),
    ),
    "actionability": (
        (85, "Immediately actionable"),
        (70, "Mostly actionable"),
        (55, "Needs some interpretation before acting"),
        (0, "Hard to act on"),
    ),
    "context_provision": (
        (85, "Rich supporting context"),
        (70, "Adequate context"),
        (55, "Limited context"),
        (0, "Little or no context"),
    ),
    "structure_quality": (
        (85, "Well organized and logically ordered"),
        (70, "Reasonably organized"),
        (55, "Loosely organized"),
        (0, "Poorly organized"),
    ),
}


@dataclass
class GradingInput:
    text: str
    prompt_type: str
    complexity: ComplexityMetrics
    tokens: TokenData
    ideas: IdeaAnalysis
    graph: TaskGraph
    indicators: QualityIndicators

    @property
    def words(self) -> int:
        return word_total(self.text, self.tokens)

    def ratio(self, count: int) -> float:
        return safe_div(count, self.words)


def _chain_length(graph: TaskGraph) -> int:
    return len(graph.critical_path)


def _named_entities(g: GradingInput) -> float:
    return clamp(len(g.tokens.named_entities) * 15, 0, 100)


def _quantitative(g: GradingInput) -> float:
    return clamp(g.ratio(g.tokens.number_count) * 400, 0, 100)


def _coherence(g: GradingInput) -> float:
    return g.ideas.conceptual_coherence * 100


def clarity_factors(g: GradingInput) -> list[Factor]:
    reading = clamp(g.complexity.flesch_reading_ease, 0, 100)
    if g.prompt_type in TECHNICAL_TYPES:
        # dense terminology lowers reading ease without hurting clarity
        reading = max(30.0, reading)
    avg = g.complexity.average_words_per_sentence
    length = 90.0 if avg <= 30 else max(60.0, 90 - (avg - 30) * 2)
    return [
        Factor("Reading Ease", reading, 0.25),
        Factor("Sentence Length", length, 0.20),
        Factor("Clear Goal", 90.0 if g.indicators.has_clear_goal else 40.0, 0.25),
        Factor("Precise Wording", clamp(100 - vague_ratio(g.text, g.tokens) * 400, 0, 100), 0.30),
    ]


def specificity_factors(g: GradingInput) -> list[Factor]:
    questions = g.ideas.question_analysis
    if questions.total_questions:
        question_clarity = clamp(len(questions.actionable) / questions.total_questions * 100, 30, 100)
    else:
        question_clarity = 70.0
    return [
        Factor("Low Pronoun Usage", clamp(100 - g.ratio(len(g.tokens.pronouns)) * 500, 30, 100), 0.25),
        Factor("Named Entities", _named_entities(g), 0.25),
        Factor("Numeric Specificity", _quantitative(g), 0.10),
        Factor("Concrete Nouns", clamp(g.ratio(len(g.tokens.nouns)) * 200, 20, 100), 0.25),
        Factor("Question Clarity", question_clarity, 0.15),
    ]


def completeness_factors(g: GradingInput) -> list[Factor]:
    total = g.graph.total_tasks
    tasks = 30.0 if total == 0 else clamp(40 + 10 * total, 50, 100)
    if _chain_length(g.graph) >= 2:
        tasks = max(tasks, 85.0)
    extras = 40 + (30 if g.indicators.has_constraints else 0) + (20 if g.indicators.has_examples else 0)
    return [
        Factor("Factual Coverage", clamp(g.ideas.factual_content.fact_density * 150, 30, 100), 0.15),
        Factor("Concept Coverage", clamp(len(g.ideas.key_concepts) * 10, 20, 100), 0.15),
        Factor("Tasks & Dependencies", tasks, 0.20),
        Factor("Constraints & Examples", clamp(extras, 40, 95), 0.20),
        Factor("Level of Detail", clamp(g.words * 1.5, 10, 100), 0.30),
    ]


def actionability_factors(g: GradingInput) -> list[Factor]:
    total = g.graph.total_tasks
    tasks = 30.0 if total == 0 else clamp(40 + 10 * total, 60, 95)
    if _chain_length(g.graph) >= 2:
        tasks = max(tasks, 85.0)
    lower = g.text.lower()
    steps = 50.0
    if any(contains_word(lower, w) for w in DELIVERABLE_STEMS):
        steps = 85.0
    if g.indicators.has_actionable_steps:
        steps = max(steps, 90.0)
    return [
        Factor("Tasks & Sequence", tasks, 0.35),
        Factor("Action Verb Density", clamp(g.ratio(len(g.tokens.verbs)) * 300, 40, 95), 0.25),
        Factor("Steps & Deliverables", steps, 0.25),
        Factor("Readiness", 75.0 if g.indicators.has_clear_goal else 45.0, 0.15),
    ]


def context_factors(g: GradingInput) -> list[Factor]:
    domain = 50.0
    if any(contains_word(g.text, w) for w in DOMAIN_WORDS):
        domain = 85.0
    if g.indicators.has_specific_context:
        domain = max(domain, 90.0)
    return [
        Factor("Named Entities", _named_entities(g), 0.25),
        Factor("Factual Context", clamp(g.ideas.factual_content.total_facts * 8, 20, 100), 0.20),
        Factor("Quantitative Details", _quantitative(g), 0.15),
        Factor("Domain Constraints", domain, 0.20),
        Factor("Coherence", _coherence(g), 0.20),
    ]


def structure_factors(g: GradingInput) -> list[Factor]:
    transitions = g.ideas.topic_transitions
    if transitions < 2:
        flow = 70.0
    elif transitions > 5:
        flow = clamp(100 - (transitions - 5) * 10, 40, 85)
    else:
        flow = 85.0
    return [
        Factor("Coherence", _coherence(g), 0.35),
        Factor("Transitions", flow, 0.15),
        Factor("Idea Progression", PROGRESSION_SCORES.get(g.ideas.idea_progression, 40.0), 0.25),
        Factor("Sentence Variance", clamp(100 - g.complexity.sentence_length_variance * 2, 40, 95), 0.10),
        Factor("Organization", clamp(g.ideas.sentence_count * 20, 20, 100), 0.15),
    ]


SCORERS = {
    "clarity": clarity_factors,
    "specificity": specificity_factors,
    "completeness": completeness_factors,
    "actionability": actionability_factors,
    "context_provision": context_factors,
    "structure_quality": structure_factors,
}


def dimension_context(prompt_type: str, key: str) -> DimensionContext:
    tips = TYPE_TIPS.get((prompt_type, key), DEFAULT_TIPS[key])
    return DimensionContext(prompt_type_relevance=TYPE_RELEVANCE.get(prompt_type, 0.8), tips=list(tips))


def _describe(key: str, score: float) -> str:
    for floor, text in DESCRIPTIONS[key]:
        if score >= floor:
            return text
    return DESCRIPTIONS[key][-1][1]


def score_dimension(key: str, g: GradingInput, profile: GradingProfile) -> Dimension:
    factors = SCORERS[key](g)
    for factor in factors:
        factor.value = round(clamp(factor.value, 0, 100), 2)
        factor.contribution = factor.value * factor.weight
    score = round(clamp(sum(f.contribution for f in factors), 0, 100), 2)
    return Dimension(
        key=key,
        score=score,
        grade=profile.grade_for(score),
        label=profile.label_for(score),
        description=_describe(key, score),
        factors=factors,
        context=dimension_context(g.prompt_type, key),
    )
