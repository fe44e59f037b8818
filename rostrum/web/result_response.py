from datetime import datetime

from pydantic import BaseModel

from rostrum.debate_engine.models import CompletionOutcome, DebateResult


class ResultResponse(BaseModel):
    """Response model for the end-of-debate report."""

    id: str
    debate_id: str
    overall_score: int
    strength_score: int
    logic_score: int
    persuasiveness_score: int
    response_score: int
    winner: str
    strengths: list[str]
    improvements: list[str]
    created_at: datetime
    error: str | None = None
    error_message: str | None = None

    @classmethod
    def from_result(cls, result: DebateResult) -> "ResultResponse":
        return cls(**result.to_dict())

    @classmethod
    def from_outcome(cls, outcome: CompletionOutcome) -> "ResultResponse":
        response = cls.from_result(outcome.result)
        if outcome.error is not None:
            response.error = outcome.error.value
            response.error_message = outcome.error.message
        return response
