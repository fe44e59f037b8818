from datetime import datetime

from pydantic import BaseModel

from rostrum.debate_engine.models import DebateSession
from rostrum.debate_engine.timer import PhaseTimer


class DebateResponse(BaseModel):
    """Response model for debate information."""

    id: str
    topic: str
    format: str
    user_position: str
    ai_position: str
    ai_difficulty: str
    status: str
    current_phase: str
    time_remaining_seconds: int
    real_time_feedback: bool
    created_at: datetime
    completed_at: datetime | None = None
    side_labels: dict[str, str] | None = None  # Format-specific pro/con labels

    @classmethod
    def from_session(
        cls, session: DebateSession, side_labels: dict[str, str] | None = None
    ) -> "DebateResponse":
        return cls(
            id=session.id,
            topic=session.topic,
            format=session.format.value,
            user_position=session.user_position.value,
            ai_position=session.ai_position.value,
            ai_difficulty=session.ai_difficulty.value,
            status=session.status.value,
            current_phase=session.current_phase.value,
            time_remaining_seconds=session.time_remaining_seconds,
            real_time_feedback=session.real_time_feedback,
            created_at=session.created_at,
            completed_at=session.completed_at,
            side_labels=side_labels,
        )


class TimerResponse(BaseModel):
    """Response model for timer commands."""

    debate: DebateResponse
    running: bool
    seconds_remaining: int
    formatted_time: str
    progress: float

    @classmethod
    def from_state(cls, session: DebateSession, timer: PhaseTimer | None) -> "TimerResponse":
        if timer is None:
            seconds = session.time_remaining_seconds
            return cls(
                debate=DebateResponse.from_session(session),
                running=False,
                seconds_remaining=seconds,
                formatted_time=f"{seconds // 60}:{seconds % 60:02d}",
                progress=1.0 if seconds else 0.0,
            )
        return cls(
            debate=DebateResponse.from_session(session),
            running=timer.is_running,
            seconds_remaining=timer.seconds_remaining,
            formatted_time=timer.formatted_time,
            progress=timer.progress,
        )
