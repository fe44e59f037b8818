"""Data models for the debate engine."""

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from .exceptions import ValidationError
from .types import (
    DebateFormatName,
    DebatePhase,
    DebateStatus,
    Difficulty,
    ErrorCategory,
    Position,
    Speaker,
    Winner,
)

MIN_SCORE = 1
MAX_SCORE = 10

E = TypeVar("E", bound=Enum)


def new_id() -> str:
    return str(uuid.uuid4())


def clamp_score(value: Any, low: int = MIN_SCORE, high: int = MAX_SCORE) -> int:
    """Clamp into [low, high], then round half-up to an integer.

    Infinities clamp to the nearest bound; NaN raises ValueError.
    """
    number = float(value)
    if math.isnan(number):
        raise ValueError(f"Score is not a number: {value!r}")
    return math.floor(max(low, min(high, number)) + 0.5)


def parse_enum(enum_cls: type[E], value: "str | E", field_name: str) -> E:
    """Convert a raw value into a member of enum_cls, rejecting unknown values."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_cls)
        raise ValidationError(
            f"Invalid {field_name}: {value!r}. Expected one of: {allowed}"
        ) from None


@dataclass(frozen=True)
class DebateSetup:
    """Caller-supplied configuration for a new debate."""

    topic: str
    format: DebateFormatName | str
    user_position: Position | str
    ai_difficulty: Difficulty | str
    real_time_feedback: bool = True


@dataclass(frozen=True)
class DebateSession:
    """A single debate between the user and the AI opponent."""

    id: str
    topic: str
    format: DebateFormatName
    user_position: Position
    ai_difficulty: Difficulty
    status: DebateStatus
    current_phase: DebatePhase
    time_remaining_seconds: int
    real_time_feedback: bool = True
    created_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    @property
    def ai_position(self) -> Position:
        return self.user_position.opposite

    @property
    def is_completed(self) -> bool:
        return self.status is DebateStatus.COMPLETED

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "topic": self.topic,
            "format": self.format.value,
            "user_position": self.user_position.value,
            "ai_difficulty": self.ai_difficulty.value,
            "status": self.status.value,
            "current_phase": self.current_phase.value,
            "time_remaining_seconds": self.time_remaining_seconds,
            "real_time_feedback": self.real_time_feedback,
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }


@dataclass(frozen=True)
class ArgumentFeedback:
    """Structured coaching feedback attached to a scored user argument."""

    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class Argument:
    """One entry of the debate transcript."""

    id: str
    debate_id: str
    speaker: Speaker
    content: str
    phase: DebatePhase
    strength_score: int | None = None
    logic_score: int | None = None
    persuasiveness_score: int | None = None
    feedback: ArgumentFeedback | None = None
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not self.content.strip():
            raise ValidationError("Argument content must not be empty")
        scores = (self.strength_score, self.logic_score, self.persuasiveness_score)
        if self.speaker is Speaker.AI and (
            any(score is not None for score in scores) or self.feedback is not None
        ):
            raise ValidationError("AI arguments cannot carry scores or feedback")
        for score in scores:
            if score is not None and not MIN_SCORE <= score <= MAX_SCORE:
                raise ValidationError(f"Score out of range: {score}")

    @property
    def is_scored(self) -> bool:
        return self.strength_score is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "debate_id": self.debate_id,
            "speaker": self.speaker.value,
            "content": self.content,
            "phase": self.phase.value,
            "strength_score": self.strength_score,
            "logic_score": self.logic_score,
            "persuasiveness_score": self.persuasiveness_score,
            "feedback": self.feedback.to_dict() if self.feedback else None,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class DebateResult:
    """End-of-debate performance report; exactly one per completed debate."""

    id: str
    debate_id: str
    overall_score: int
    strength_score: int
    logic_score: int
    persuasiveness_score: int
    response_score: int
    winner: Winner
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        for score in (
            self.overall_score,
            self.strength_score,
            self.logic_score,
            self.persuasiveness_score,
            self.response_score,
        ):
            if not MIN_SCORE <= score <= MAX_SCORE:
                raise ValidationError(f"Score out of range: {score}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "debate_id": self.debate_id,
            "overall_score": self.overall_score,
            "strength_score": self.strength_score,
            "logic_score": self.logic_score,
            "persuasiveness_score": self.persuasiveness_score,
            "response_score": self.response_score,
            "winner": self.winner.value,
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class SubmissionOutcome:
    """What a user argument submission produced."""

    user_argument: Argument
    ai_argument: Argument | None = None
    ai_strategy: str | None = None
    error: ErrorCategory | None = None


@dataclass(frozen=True)
class CompletionOutcome:
    """The stored result, plus the error category when the neutral result was used."""

    result: DebateResult
    error: ErrorCategory | None = None
