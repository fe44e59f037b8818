from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rostrum.config.settings import SystemConfig


class BaseModelProvider(ABC):
    """Abstract base class for model providers."""

    def __init__(self, system_config: "SystemConfig"):
        self.system_config = system_config

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of this provider."""
        pass

    @abstractmethod
    async def generate_json(
        self,
        model: str,
        messages: list[dict[str, str]],
        **overrides: Any,
    ) -> dict[str, Any]:
        """
        Generate a structured JSON object response.

        Args:
            model: Provider model name
            messages: Chat messages (role/content dicts)
            **overrides: Generation parameters such as temperature or max_tokens

        Returns:
            The decoded JSON object

        Raises:
            ProviderRateLimitError: quota exhausted or rate limited
            ProviderAuthError: credentials missing or rejected
            ProviderUnavailableError: transient transport or server failure
            ProviderResponseError: the response was not a JSON object
        """
        pass
