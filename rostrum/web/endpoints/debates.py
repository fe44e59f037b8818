"""Debate session endpoints."""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException

from rostrum.debate_engine.core import DebateEngine
from rostrum.debate_engine.exceptions import (
    DebateStateError,
    NotFoundError,
    ValidationError,
)
from rostrum.debate_engine.models import DebateSession, DebateSetup
from rostrum.formats import format_registry
from rostrum.web.argument_response import ArgumentResponse
from rostrum.web.debate_manager import get_debate_engine
from rostrum.web.debate_response import DebateResponse, TimerResponse
from rostrum.web.debate_setup_request import DebateSetupRequest, DebateUpdateRequest
from rostrum.web.result_response import ResultResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _to_response(session: DebateSession) -> DebateResponse:
    side_labels = None
    try:
        labels = format_registry.get_format(session.format).get_side_labels()
        side_labels = {position.value: label for position, label in labels.items()}
    except ValueError as e:
        logger.warning(f"Failed to get side labels for format {session.format.value}: {e}")
    return DebateResponse.from_session(session, side_labels=side_labels)


@router.post("/debates", response_model=DebateResponse)
async def create_debate(
    setup: DebateSetupRequest, engine: DebateEngine = Depends(get_debate_engine)
):
    """Create a new debate; it starts in its opening phase."""
    try:
        session = engine.create_debate(
            DebateSetup(
                topic=setup.topic,
                format=setup.format,
                user_position=setup.user_position,
                ai_difficulty=setup.ai_difficulty,
                real_time_feedback=setup.real_time_feedback,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(session)


@router.get("/debates/{debate_id}", response_model=DebateResponse)
async def get_debate(debate_id: str, engine: DebateEngine = Depends(get_debate_engine)):
    """Get debate status and info."""
    try:
        return _to_response(engine.get_debate(debate_id))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Debate not found")


@router.patch("/debates/{debate_id}", response_model=DebateResponse)
async def update_debate(
    debate_id: str,
    update: DebateUpdateRequest,
    engine: DebateEngine = Depends(get_debate_engine),
):
    """Update timer, feedback or phase fields of an active debate."""
    try:
        session = engine.update_debate(
            debate_id,
            time_remaining_seconds=update.time_remaining_seconds,
            real_time_feedback=update.real_time_feedback,
            current_phase=update.current_phase,
        )
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Debate not found")
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DebateStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _to_response(session)


@router.post("/debates/{debate_id}/advance", response_model=DebateResponse)
async def advance_phase(debate_id: str, engine: DebateEngine = Depends(get_debate_engine)):
    """Move the debate to its next phase."""
    try:
        return _to_response(engine.advance_phase(debate_id))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Debate not found")
    except DebateStateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/debates/{debate_id}/timer/{action}", response_model=TimerResponse)
async def control_timer(
    debate_id: str,
    action: Literal["start", "pause", "stop"],
    engine: DebateEngine = Depends(get_debate_engine),
):
    """Start, pause or stop the current phase's countdown."""
    try:
        if action == "start":
            engine.start_timer(debate_id)
            session = engine.get_debate(debate_id)
        elif action == "pause":
            session = engine.pause_timer(debate_id)
        else:
            session = engine.stop_timer(debate_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Debate not found")
    except DebateStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return TimerResponse.from_state(session, engine.get_timer(debate_id))


@router.get("/debates/{debate_id}/arguments", response_model=list[ArgumentResponse])
async def list_arguments(debate_id: str, engine: DebateEngine = Depends(get_debate_engine)):
    """Get the debate transcript in submission order."""
    try:
        arguments = engine.list_arguments(debate_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Debate not found")
    return [ArgumentResponse.from_argument(argument) for argument in arguments]


@router.post("/debates/{debate_id}/complete", response_model=ResultResponse)
async def complete_debate(debate_id: str, engine: DebateEngine = Depends(get_debate_engine)):
    """Complete the debate and return its performance report."""
    try:
        outcome = await engine.complete_debate(debate_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Debate not found")
    return ResultResponse.from_outcome(outcome)


@router.get("/debates/{debate_id}/result", response_model=ResultResponse)
async def get_result(debate_id: str, engine: DebateEngine = Depends(get_debate_engine)):
    """Get a completed debate's performance report."""
    try:
        return ResultResponse.from_result(engine.get_result(debate_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
