import json
import logging
from typing import TYPE_CHECKING, Any

import openai
from openai import AsyncOpenAI

from .base_model_provider import BaseModelProvider
from .exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderRateLimitError,
    ProviderResponseError,
    ProviderUnavailableError,
)

if TYPE_CHECKING:
    from rostrum.config.settings import SystemConfig

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseModelProvider):
    """OpenAI chat-completions provider returning JSON objects."""

    def __init__(self, system_config: "SystemConfig", client: Any | None = None):
        super().__init__(system_config)

        openai_config = system_config.openai
        if client is not None:
            self._client = client
            return

        api_key = openai_config.resolve_api_key()
        if not api_key:
            logger.warning(
                "No OpenAI API key found. Set OPENAI_API_KEY or configure in system settings."
            )
            self._client = None
        else:
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=openai_config.base_url,
                timeout=openai_config.timeout,
                max_retries=openai_config.max_retries,
            )

    @property
    def provider_name(self) -> str:
        return "openai"

    async def generate_json(
        self,
        model: str,
        messages: list[dict[str, str]],
        **overrides: Any,
    ) -> dict[str, Any]:
        """Generate a JSON object using OpenAI's json_object response format."""
        if not self._client:
            raise ProviderAuthError("OpenAI client not initialized - check API key")

        params: dict[str, Any] = {
            "model": model,
            "messages": messages,
            "response_format": {"type": "json_object"},
        }
        for key in ("temperature", "max_tokens"):
            if overrides.get(key) is not None:
                params[key] = overrides[key]

        try:
            response = await self._client.chat.completions.create(**params)
        except openai.RateLimitError as e:
            logger.warning(f"OpenAI rate limit or quota error for {model}: {e}")
            raise ProviderRateLimitError(str(e)) from e
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            logger.warning(f"OpenAI rejected credentials for {model}: {e}")
            raise ProviderAuthError(str(e)) from e
        except (openai.APIConnectionError, openai.InternalServerError) as e:
            logger.warning(f"OpenAI unavailable for {model}: {e}")
            raise ProviderUnavailableError(str(e)) from e
        except openai.OpenAIError as e:
            logger.error(f"OpenAI generation failed for {model}: {e}")
            raise ProviderError(str(e)) from e

        content = response.choices[0].message.content or "{}"
        logger.debug(f"Generated {len(content)} chars from OpenAI model {model}")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ProviderResponseError(f"Model {model} returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ProviderResponseError(
                f"Model {model} returned {type(data).__name__}, expected a JSON object"
            )
        return data
