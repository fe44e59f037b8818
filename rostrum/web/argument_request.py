from pydantic import BaseModel, field_validator


class ArgumentSubmitRequest(BaseModel):
    """Request model for submitting a user argument."""

    debate_id: str
    content: str
    speaker: str = "user"

    @field_validator("speaker")
    @classmethod
    def validate_speaker(cls, v: str) -> str:
        """Only the user submits arguments; AI replies are generated."""
        if v != "user":
            raise ValueError("Only user arguments can be submitted")
        return v
