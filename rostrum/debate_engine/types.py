"""Shared types and enums for the debate engine."""

from collections.abc import Awaitable, Callable
from enum import Enum

# Timer notification callbacks
type TickCallback = Callable[[int], Awaitable[None]]
type CompleteCallback = Callable[[], Awaitable[None]]


class DebateFormatName(Enum):
    """Supported debate formats."""

    OXFORD = "oxford"
    PARLIAMENTARY = "parliamentary"
    LINCOLN_DOUGLAS = "lincoln-douglas"
    PUBLIC_FORUM = "public-forum"


class Position(Enum):
    """Debate positions."""

    PRO = "pro"
    CON = "con"

    @property
    def opposite(self) -> "Position":
        return Position.CON if self is Position.PRO else Position.PRO


class Difficulty(Enum):
    """AI opponent difficulty levels."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class DebateStatus(Enum):
    """Lifecycle status of a debate session."""

    SETUP = "setup"
    ACTIVE = "active"
    COMPLETED = "completed"


class DebatePhase(Enum):
    """Phases of a debate."""

    OPENING = "opening"
    REBUTTAL = "rebuttal"
    CLOSING = "closing"
    SUMMARY = "summary"


class Speaker(Enum):
    """Origin of an argument."""

    USER = "user"
    AI = "ai"


class Winner(Enum):
    """End-of-debate verdict."""

    USER = "user"
    AI = "ai"
    TIE = "tie"


class ErrorCategory(Enum):
    """User-facing categories for evaluator outages."""

    QUOTA_EXCEEDED = "quota-exceeded"
    INVALID_CREDENTIALS = "invalid-credentials"
    GENERIC_UNAVAILABLE = "generic-unavailable"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    ErrorCategory.QUOTA_EXCEEDED: (
        "OpenAI API quota exceeded - please check your billing settings at platform.openai.com"
    ),
    ErrorCategory.INVALID_CREDENTIALS: "Invalid OpenAI API key",
    ErrorCategory.GENERIC_UNAVAILABLE: "AI analysis unavailable",
}
