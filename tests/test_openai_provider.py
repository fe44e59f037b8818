"""Tests for the OpenAI JSON provider."""

from __future__ import annotations

import asyncio
import json
from types import SimpleNamespace

import pytest

from httpx import Request, Response
from openai import APIConnectionError, AuthenticationError, RateLimitError
from rostrum.config.settings import OpenAIConfig, SystemConfig
from rostrum.debate_engine.types import ErrorCategory
from rostrum.providers.exceptions import (
    ProviderAuthError,
    ProviderRateLimitError,
    ProviderResponseError,
    ProviderUnavailableError,
)
from rostrum.providers.openai_provider import OpenAIProvider

MESSAGES = [{"role": "user", "content": "Score this argument"}]
REQUEST = Request("POST", "https://api.openai.com/v1/chat/completions")


class FakeChatCompletion:
    """Lightweight stand-in for an OpenAI chat completion."""

    def __init__(self, content: str | None):
        self.choices = [SimpleNamespace(message=SimpleNamespace(content=content))]


class FakeCompletionsClient:
    """Simplified AsyncOpenAI chat.completions client for testing."""

    def __init__(self, *responses):
        self._responses = list(responses)
        self.requests: list[dict] = []

    async def create(self, **kwargs):
        self.requests.append(kwargs)
        if not self._responses:
            raise AssertionError("No fake responses left")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def make_provider(*responses) -> tuple[OpenAIProvider, FakeCompletionsClient]:
    completions = FakeCompletionsClient(*responses)
    provider = OpenAIProvider(
        SystemConfig(openai=OpenAIConfig(api_key="test-key")),
        client=SimpleNamespace(chat=SimpleNamespace(completions=completions)),
    )
    return provider, completions


def api_error_response(status: int, message: str) -> Response:
    return Response(status, request=REQUEST, json={"error": {"message": message}})


def test_generate_json_returns_parsed_object() -> None:
    payload = {"strengthScore": 8, "logicScore": 7}
    provider, completions = make_provider(FakeChatCompletion(json.dumps(payload)))

    result = asyncio.run(
        provider.generate_json("gpt-4o", MESSAGES, temperature=0.5, max_tokens=None)
    )

    assert result == payload
    request = completions.requests[0]
    assert request["model"] == "gpt-4o"
    assert request["messages"] == MESSAGES
    assert request["response_format"] == {"type": "json_object"}
    assert request["temperature"] == 0.5
    assert "max_tokens" not in request


def test_rate_limit_maps_to_quota_error() -> None:
    response = api_error_response(429, "You exceeded your current quota")
    rate_error = RateLimitError(
        "You exceeded your current quota", response=response, body=response.json()
    )
    provider, _ = make_provider(rate_error)

    with pytest.raises(ProviderRateLimitError) as exc_info:
        asyncio.run(provider.generate_json("gpt-4o", MESSAGES))

    assert exc_info.value.category is ErrorCategory.QUOTA_EXCEEDED


def test_authentication_error_maps_to_invalid_credentials() -> None:
    response = api_error_response(401, "Incorrect API key provided")
    auth_error = AuthenticationError(
        "Incorrect API key provided", response=response, body=response.json()
    )
    provider, _ = make_provider(auth_error)

    with pytest.raises(ProviderAuthError) as exc_info:
        asyncio.run(provider.generate_json("gpt-4o", MESSAGES))

    assert exc_info.value.category is ErrorCategory.INVALID_CREDENTIALS


def test_connection_error_is_transient() -> None:
    provider, _ = make_provider(APIConnectionError(request=REQUEST))

    with pytest.raises(ProviderUnavailableError) as exc_info:
        asyncio.run(provider.generate_json("gpt-4o", MESSAGES))

    assert not isinstance(exc_info.value, (ProviderRateLimitError, ProviderAuthError))
    assert exc_info.value.category is ErrorCategory.GENERIC_UNAVAILABLE


@pytest.mark.parametrize("content", ["not json at all", "[1, 2, 3]"])
def test_non_object_output_is_a_response_error(content: str) -> None:
    provider, _ = make_provider(FakeChatCompletion(content))

    with pytest.raises(ProviderResponseError):
        asyncio.run(provider.generate_json("gpt-4o", MESSAGES))


def test_empty_content_parses_as_empty_object() -> None:
    provider, _ = make_provider(FakeChatCompletion(None))

    assert asyncio.run(provider.generate_json("gpt-4o", MESSAGES)) == {}


def test_missing_api_key_reports_invalid_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    provider = OpenAIProvider(SystemConfig())

    with pytest.raises(ProviderAuthError):
        asyncio.run(provider.generate_json("gpt-4o", MESSAGES))
