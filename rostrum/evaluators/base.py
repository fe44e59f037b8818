"""Base classes and interfaces for argument evaluators."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rostrum.debate_engine.models import ArgumentFeedback
from rostrum.debate_engine.types import DebateFormatName, DebatePhase, Difficulty, Position

DEMO_MODE_MARKER = "[DEMO_MODE]"


@dataclass(frozen=True)
class ArgumentAnalysis:
    """Scores and coaching feedback for one user argument."""

    strength_score: int
    logic_score: int
    persuasiveness_score: int
    feedback: ArgumentFeedback


@dataclass(frozen=True)
class CounterArgument:
    """The AI opponent's reply and the rationale behind it."""

    content: str
    strategy: str


class BaseEvaluator(ABC):
    """Scores user arguments and generates the AI opponent's replies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Evaluator name/identifier."""
        pass

    @abstractmethod
    async def score_argument(
        self,
        content: str,
        topic: str,
        position: Position,
        debate_format: DebateFormatName,
    ) -> ArgumentAnalysis:
        """Score a single user argument."""
        pass

    @abstractmethod
    async def generate_counter_argument(
        self,
        topic: str,
        position: Position,
        user_argument: str,
        debate_format: DebateFormatName,
        difficulty: Difficulty,
        phase: DebatePhase,
    ) -> CounterArgument:
        """Generate an argument for `position` answering the user's argument."""
        pass


def is_demo_request(*texts: str) -> bool:
    """True when any text carries the demo-mode marker."""
    return any(DEMO_MODE_MARKER in text for text in texts)


def strip_demo_marker(text: str) -> str:
    return text.replace(f" {DEMO_MODE_MARKER}", "").replace(DEMO_MODE_MARKER, "").strip()
