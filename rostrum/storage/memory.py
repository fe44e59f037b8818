"""Process-lifetime in-memory session store."""

import logging

from rostrum.debate_engine.models import Argument, DebateResult, DebateSession
from .base import SessionStore

logger = logging.getLogger(__name__)


class InMemorySessionStore(SessionStore):
    """Dictionary-backed store; contents are lost when the process exits."""

    def __init__(self):
        self._debates: dict[str, DebateSession] = {}
        self._arguments: dict[str, list[Argument]] = {}
        self._results: dict[str, DebateResult] = {}

    def get(self, debate_id: str) -> DebateSession | None:
        return self._debates.get(debate_id)

    def put(self, session: DebateSession) -> None:
        self._debates[session.id] = session

    def get_arguments(self, debate_id: str) -> list[Argument]:
        return list(self._arguments.get(debate_id, []))

    def append_argument(self, argument: Argument) -> None:
        self._arguments.setdefault(argument.debate_id, []).append(argument)
        logger.debug(f"Stored {argument.speaker.value} argument {argument.id} for debate {argument.debate_id}")

    def get_result(self, debate_id: str) -> DebateResult | None:
        return self._results.get(debate_id)

    def put_result(self, result: DebateResult) -> None:
        if result.debate_id in self._results:
            raise ValueError(f"Debate {result.debate_id} already has a result")
        self._results[result.debate_id] = result

    def __len__(self) -> int:
        return len(self._debates)
