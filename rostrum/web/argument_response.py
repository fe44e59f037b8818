from datetime import datetime

from pydantic import BaseModel, Field

from rostrum.debate_engine.models import Argument, SubmissionOutcome


class FeedbackResponse(BaseModel):
    """Structured coaching feedback."""

    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class ArgumentResponse(BaseModel):
    """Response model for a transcript entry."""

    id: str
    debate_id: str
    speaker: str
    content: str
    phase: str
    strength_score: int | None = None
    logic_score: int | None = None
    persuasiveness_score: int | None = None
    feedback: FeedbackResponse | None = None
    word_count: int
    created_at: datetime

    @classmethod
    def from_argument(cls, argument: Argument) -> "ArgumentResponse":
        feedback = None
        if argument.feedback is not None:
            feedback = FeedbackResponse(**argument.feedback.to_dict())
        return cls(
            id=argument.id,
            debate_id=argument.debate_id,
            speaker=argument.speaker.value,
            content=argument.content,
            phase=argument.phase.value,
            strength_score=argument.strength_score,
            logic_score=argument.logic_score,
            persuasiveness_score=argument.persuasiveness_score,
            feedback=feedback,
            word_count=len(argument.content.split()),
            created_at=argument.created_at,
        )


class SubmissionResponse(BaseModel):
    """Response model for an argument submission."""

    user_argument: ArgumentResponse
    ai_argument: ArgumentResponse | None = None
    ai_strategy: str | None = None
    error: str | None = None  # quota-exceeded, invalid-credentials, generic-unavailable
    error_message: str | None = None

    @classmethod
    def from_outcome(cls, outcome: SubmissionOutcome) -> "SubmissionResponse":
        return cls(
            user_argument=ArgumentResponse.from_argument(outcome.user_argument),
            ai_argument=(
                ArgumentResponse.from_argument(outcome.ai_argument)
                if outcome.ai_argument
                else None
            ),
            ai_strategy=outcome.ai_strategy,
            error=outcome.error.value if outcome.error else None,
            error_message=outcome.error.message if outcome.error else None,
        )
