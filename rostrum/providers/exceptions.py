"""Provider error taxonomy."""

from rostrum.debate_engine.types import ErrorCategory


class ProviderError(Exception):
    """Non-recoverable provider failure."""


class ProviderUnavailableError(ProviderError):
    """The provider could not serve the request right now."""

    category: ErrorCategory = ErrorCategory.GENERIC_UNAVAILABLE


class ProviderRateLimitError(ProviderUnavailableError):
    """Quota exhausted or rate limited (HTTP 429)."""

    category = ErrorCategory.QUOTA_EXCEEDED


class ProviderAuthError(ProviderUnavailableError):
    """Missing, invalid or unauthorized credentials (HTTP 401/403)."""

    category = ErrorCategory.INVALID_CREDENTIALS


class ProviderResponseError(ProviderError):
    """The provider answered, but not with the JSON object we asked for."""
