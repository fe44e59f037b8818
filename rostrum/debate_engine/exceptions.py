"""Exceptions raised by the debate engine."""

from .types import ErrorCategory


class DebateError(Exception):
    """Base class for debate engine errors."""


class ValidationError(DebateError):
    """A session or argument field is missing or malformed."""


class NotFoundError(DebateError):
    """A referenced debate or result does not exist."""


class DebateStateError(DebateError):
    """The operation is not valid in the debate's current status or phase."""


class EvaluatorUnavailable(DebateError):
    """The AI provider is out of quota, rejected credentials, or is unreachable."""

    def __init__(self, category: ErrorCategory, detail: str | None = None):
        self.category = category
        self.detail = detail
        super().__init__(detail or category.message)


class EvaluatorHardFailure(DebateError):
    """The evaluator failed in a way that cannot be recovered locally."""
