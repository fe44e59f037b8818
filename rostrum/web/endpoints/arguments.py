"""Argument submission endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from rostrum.debate_engine.core import DebateEngine
from rostrum.debate_engine.exceptions import (
    DebateStateError,
    EvaluatorHardFailure,
    NotFoundError,
    ValidationError,
)
from rostrum.web.argument_request import ArgumentSubmitRequest
from rostrum.web.argument_response import SubmissionResponse
from rostrum.web.debate_manager import get_debate_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/arguments", response_model=SubmissionResponse)
async def submit_argument(
    request: ArgumentSubmitRequest, engine: DebateEngine = Depends(get_debate_engine)
):
    """Submit a user argument; returns its scores and the AI's reply."""
    try:
        outcome = await engine.submit_argument(request.debate_id, request.content)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Debate not found")
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DebateStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except EvaluatorHardFailure as e:
        logger.error(f"Argument evaluation failed for debate {request.debate_id}: {e}")
        raise HTTPException(status_code=502, detail=f"Argument evaluation failed: {e}")
    return SubmissionResponse.from_outcome(outcome)
