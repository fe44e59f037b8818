"""Debate session state, timing and orchestration.

`DebateEngine` lives in `rostrum.debate_engine.core`; it is not re-exported
here because formats, evaluators and judges import this package's types.
"""

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
from .models import (
    Argument,
    ArgumentFeedback,
    CompletionOutcome,
    DebateResult,
    DebateSession,
    DebateSetup,
    SubmissionOutcome,
)
from .exceptions import (
    DebateError,
    DebateStateError,
    EvaluatorHardFailure,
    EvaluatorUnavailable,
    NotFoundError,
    ValidationError,
)
from .timer import PhaseTimer

__all__ = [
    "DebateFormatName",
    "DebatePhase",
    "DebateStatus",
    "Difficulty",
    "ErrorCategory",
    "Position",
    "Speaker",
    "Winner",
    "Argument",
    "ArgumentFeedback",
    "CompletionOutcome",
    "DebateResult",
    "DebateSession",
    "DebateSetup",
    "SubmissionOutcome",
    "DebateError",
    "DebateStateError",
    "EvaluatorHardFailure",
    "EvaluatorUnavailable",
    "NotFoundError",
    "ValidationError",
    "PhaseTimer",
]
