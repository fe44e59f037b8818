"""Model providers package."""

from .providers import ProviderFactory
from .openai_provider import OpenAIProvider
from .base_model_provider import BaseModelProvider
from .exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderRateLimitError,
    ProviderResponseError,
    ProviderUnavailableError,
)

__all__ = [
    "ProviderFactory",
    "OpenAIProvider",
    "BaseModelProvider",
    "ProviderAuthError",
    "ProviderError",
    "ProviderRateLimitError",
    "ProviderResponseError",
    "ProviderUnavailableError",
]
