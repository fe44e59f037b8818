"""Offline scoring and counter-argument generation used when the AI is unavailable."""

import random
import re

from rostrum.debate_engine.models import ArgumentFeedback
from rostrum.debate_engine.types import DebateFormatName, DebatePhase, Difficulty, Position
from .base import ArgumentAnalysis, BaseEvaluator, CounterArgument, strip_demo_marker

EVIDENCE_PATTERN = re.compile(
    r"\b(study|studies|research|data|evidence|statistics|survey|surveys|poll|polls)\b",
    re.IGNORECASE,
)
EXAMPLE_PATTERN = re.compile(
    r"\b(example|examples|instance|case|such as|for example)\b", re.IGNORECASE
)
CITATION_PATTERN = re.compile(
    r"\b(according to|research shows|studies indicate)\b", re.IGNORECASE
)

MAX_FEEDBACK_ITEMS = 2
SHORT_ARGUMENT_WORDS = 50

SUGGESTIONS = [
    "Practice varying your tone and pace for greater impact",
    "Consider the strongest counterarguments and prepare responses",
    "Use transitions to connect ideas more smoothly",
    "Incorporate more persuasive language techniques",
]

COUNTER_ARGUMENT_TEMPLATES: dict[Difficulty, list[str]] = {
    Difficulty.BEGINNER: [
        "While you make some valid points, I believe the {position} position is stronger. The key issue here is that implementing this approach would create significant benefits for society as a whole. This matters because it addresses fundamental problems we're facing today.",
        "That's an interesting perspective, but I think {position} is the better approach. The evidence shows that this position offers more practical solutions. This would help address the core concerns while avoiding potential negative consequences.",
        "I understand your viewpoint, but {position} makes more sense when we consider the broader implications. The main reason is that this approach is more sustainable and practical. This would lead to better outcomes for everyone involved.",
    ],
    Difficulty.INTERMEDIATE: [
        "While your argument has merit, there are significant counterpoints that strengthen the {position} position. Research consistently shows that this approach offers more comprehensive solutions, and the evidence suggests substantial long-term benefits. Furthermore, practical implementation would be more feasible than your proposed alternative.",
        "Your position overlooks several critical factors that make {position} preferable. Studies indicate that this approach addresses root causes rather than just symptoms, and practical experience shows that similar implementations have succeeded elsewhere. The data demonstrates clear advantages in both effectiveness and sustainability.",
        "I respectfully challenge your conclusion because {position} offers a more balanced solution. The evidence demonstrates that this position accounts for multiple stakeholder interests, and historical precedent suggests that similar approaches have yielded positive results. This comprehensive strategy addresses the complexities you've raised while providing practical benefits.",
    ],
    Difficulty.ADVANCED: [
        "Your argument, while structurally sound, fails to address the fundamental systemic complexities that make {position} the superior approach. The empirical evidence overwhelmingly supports this position through multiple peer-reviewed studies, and when we examine the intersection of economic, social, and environmental factors, the implications become clear that your proposed alternative would create unintended consequences.",
        "I must respectfully but firmly disagree with your assessment because {position} represents the most viable path forward given the multifaceted nature of this issue. The intersection of policy implementation and practical outcomes creates a framework that fundamentally undermines the feasibility of your position, while supporting evidence demonstrates that this approach addresses both immediate concerns and long-term sustainability.",
        "While I appreciate the logical framework of your argument, it contains several critical flaws in its foundational assumptions that make {position} the more defensible stance. The multifaceted nature of this issue requires a nuanced approach that accounts for stakeholder diversity, implementation complexity, and unintended consequences, and the evidence consistently shows that this position offers the most comprehensive solution to the challenges we face.",
    ],
}

# Expert has no template tier of its own and reuses intermediate.
DEFAULT_TEMPLATE_TIER = Difficulty.INTERMEDIATE

STRATEGIES = [
    "Highlighting contradictions in the opposing argument while strengthening my position with evidence",
    "Using logical reasoning to demonstrate why the alternative approach is more effective",
    "Addressing counterarguments proactively while building a comprehensive case",
    "Leveraging empirical evidence and practical examples to support my stance",
    "Focusing on long-term implications and sustainability of different approaches",
]


def _jitter(score: int, rng: random.Random) -> int:
    delta = 1 if rng.random() > 0.5 else -1
    return min(10, max(3, score + delta))


def analyze_argument(content: str, rng: random.Random) -> ArgumentAnalysis:
    """Score an argument from its length and evidence/example/citation markers."""
    word_count = len(content.split())
    has_evidence = EVIDENCE_PATTERN.search(content) is not None
    has_examples = EXAMPLE_PATTERN.search(content) is not None
    has_citations = CITATION_PATTERN.search(content) is not None

    base_score = min(10, max(4, word_count // 15 + 3))
    base_score += sum((has_evidence, has_examples, has_citations))

    strength_score = min(10, base_score)
    logic_score = _jitter(strength_score, rng)
    persuasiveness_score = _jitter(strength_score, rng)

    strengths = [
        "Clear articulation of your position on the topic",
        "Logical flow of ideas and reasoning",
        "Strong opening statement that establishes your stance",
        "Good use of supporting evidence" if has_evidence else "Direct and confident delivery",
        "Effective use of examples to illustrate points"
        if has_examples
        else "Well-structured argument format",
    ]

    improvements = [
        "Could strengthen evidence with more recent sources"
        if has_evidence
        else "Consider adding more statistical or research-based evidence",
        "Examples could be more diverse or specific"
        if has_examples
        else "Adding concrete examples would make arguments more relatable",
        "Expanding on key points would strengthen the argument"
        if word_count < SHORT_ARGUMENT_WORDS
        else "Consider addressing potential counterarguments",
    ]

    return ArgumentAnalysis(
        strength_score=strength_score,
        logic_score=logic_score,
        persuasiveness_score=persuasiveness_score,
        feedback=ArgumentFeedback(
            strengths=strengths[:MAX_FEEDBACK_ITEMS],
            improvements=improvements[:MAX_FEEDBACK_ITEMS],
            suggestions=SUGGESTIONS[:MAX_FEEDBACK_ITEMS],
        ),
    )


def compose_counter_argument(
    position: Position, difficulty: Difficulty, rng: random.Random
) -> CounterArgument:
    """Pick a canned reply for the difficulty tier and a strategy rationale."""
    templates = COUNTER_ARGUMENT_TEMPLATES.get(
        difficulty, COUNTER_ARGUMENT_TEMPLATES[DEFAULT_TEMPLATE_TIER]
    )
    template = rng.choice(templates)
    return CounterArgument(
        content=template.format(position=position.value),
        strategy=rng.choice(STRATEGIES),
    )


class HeuristicEvaluator(BaseEvaluator):
    """Evaluator that never calls a model; also the fallback for AIEvaluator."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    @property
    def name(self) -> str:
        return "Heuristic Evaluator"

    async def score_argument(
        self,
        content: str,
        topic: str,
        position: Position,
        debate_format: DebateFormatName,
    ) -> ArgumentAnalysis:
        return analyze_argument(strip_demo_marker(content), self.rng)

    async def generate_counter_argument(
        self,
        topic: str,
        position: Position,
        user_argument: str,
        debate_format: DebateFormatName,
        difficulty: Difficulty,
        phase: DebatePhase,
    ) -> CounterArgument:
        return compose_counter_argument(position, difficulty, self.rng)
