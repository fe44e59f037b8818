"""Session store interface."""

from abc import ABC, abstractmethod

from rostrum.debate_engine.models import Argument, DebateResult, DebateSession


class SessionStore(ABC):
    """Keyed persistence for debates, their arguments and results.

    Implementations must apply each call completely or not at all.
    """

    @abstractmethod
    def get(self, debate_id: str) -> DebateSession | None:
        pass

    @abstractmethod
    def put(self, session: DebateSession) -> None:
        pass

    @abstractmethod
    def get_arguments(self, debate_id: str) -> list[Argument]:
        """Arguments for a debate in insertion order."""
        pass

    @abstractmethod
    def append_argument(self, argument: Argument) -> None:
        pass

    @abstractmethod
    def get_result(self, debate_id: str) -> DebateResult | None:
        pass

    @abstractmethod
    def put_result(self, result: DebateResult) -> None:
        pass
