"""Base classes and interfaces for end-of-debate judging."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from rostrum.debate_engine.types import DebateFormatName, Position, Winner

NEUTRAL_SCORE = 7


@dataclass(frozen=True)
class DebateAnalysis:
    """Aggregate scores and verdict over a whole debate."""

    overall_score: int
    strength_score: int
    logic_score: int
    persuasiveness_score: int
    response_score: int
    winner: Winner
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)


def neutral_analysis() -> DebateAnalysis:
    """Fixed result used when the debate could not be analyzed."""
    return DebateAnalysis(
        overall_score=NEUTRAL_SCORE,
        strength_score=NEUTRAL_SCORE,
        logic_score=NEUTRAL_SCORE,
        persuasiveness_score=NEUTRAL_SCORE,
        response_score=NEUTRAL_SCORE,
        winner=Winner.TIE,
        strengths=["Good effort", "Clear communication"],
        improvements=["Add more evidence", "Strengthen conclusions"],
    )


class BaseJudge(ABC):
    """Abstract base class for all judges."""

    @abstractmethod
    async def aggregate(
        self,
        topic: str,
        user_position: Position,
        user_arguments: List[str],
        ai_arguments: List[str],
        debate_format: DebateFormatName,
    ) -> DebateAnalysis:
        """Evaluate a completed debate transcript. Must not mutate any state."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Judge name/identifier."""
        pass
