from pydantic import BaseModel, field_validator


class DebateSetupRequest(BaseModel):
    """Request model for creating a new debate."""

    topic: str
    format: str = "oxford"
    user_position: str
    ai_difficulty: str = "intermediate"
    real_time_feedback: bool = True

    @field_validator("topic")
    @classmethod
    def strip_topic(cls, v: str) -> str:
        """Trim surrounding whitespace; emptiness is checked by the engine."""
        return v.strip()


class DebateUpdateRequest(BaseModel):
    """Request model for patching a debate's mutable fields."""

    model_config = {"extra": "forbid"}

    time_remaining_seconds: int | None = None
    real_time_feedback: bool | None = None
    current_phase: str | None = None
