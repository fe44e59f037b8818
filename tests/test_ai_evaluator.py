"""Tests for the model-backed evaluator and its fallback policy."""

from __future__ import annotations

import asyncio
import json
import random

import pytest

from conftest import FakeProvider
from rostrum.config.settings import EvaluatorConfig
from rostrum.debate_engine.exceptions import EvaluatorHardFailure, EvaluatorUnavailable
from rostrum.debate_engine.types import (
    DebateFormatName,
    DebatePhase,
    Difficulty,
    ErrorCategory,
    Position,
)
from rostrum.evaluators.ai_evaluator import (
    DEFAULT_COUNTER_CONTENT,
    DEFAULT_STRATEGY,
    AIEvaluator,
)
from rostrum.evaluators.base import DEMO_MODE_MARKER
from rostrum.evaluators.heuristics import STRATEGIES
from rostrum.providers.exceptions import (
    ProviderAuthError,
    ProviderRateLimitError,
    ProviderResponseError,
    ProviderUnavailableError,
)

TOPIC = "Cities should ban private cars"


def make_evaluator(*responses, fallback: bool = True) -> tuple[AIEvaluator, FakeProvider]:
    provider = FakeProvider(*responses)
    config = EvaluatorConfig(model="test-model", fallback_on_unavailable=fallback)
    return AIEvaluator(provider, config, rng=random.Random(3)), provider


def score(evaluator: AIEvaluator, content: str = "Cars pollute.", topic: str = TOPIC):
    return asyncio.run(
        evaluator.score_argument(content, topic, Position.PRO, DebateFormatName.OXFORD)
    )


def counter(evaluator: AIEvaluator, topic: str = TOPIC, difficulty=Difficulty.BEGINNER):
    return asyncio.run(
        evaluator.generate_counter_argument(
            topic,
            Position.CON,
            "Cars pollute.",
            DebateFormatName.OXFORD,
            difficulty,
            DebatePhase.REBUTTAL,
        )
    )


def test_scores_are_clamped_and_rounded() -> None:
    evaluator, provider = make_evaluator(
        {
            "strengthScore": 14,
            "logicScore": 0.4,
            "persuasivenessScore": 7.5,
            "feedback": {
                "strengths": ["Concise"],
                "improvements": ["Add data", ""],
                "suggestions": "not a list",
            },
        }
    )

    analysis = score(evaluator)

    assert analysis.strength_score == 10
    assert analysis.logic_score == 1
    assert analysis.persuasiveness_score == 8
    assert analysis.feedback.strengths == ["Concise"]
    assert analysis.feedback.improvements == ["Add data"]
    assert analysis.feedback.suggestions == []
    assert provider.calls[0]["model"] == "test-model"
    assert provider.calls[0]["temperature"] == 0.7


def test_missing_scores_default_to_five() -> None:
    evaluator, _ = make_evaluator({})

    analysis = score(evaluator)

    assert (analysis.strength_score, analysis.logic_score, analysis.persuasiveness_score) == (
        5,
        5,
        5,
    )


def test_non_numeric_score_is_a_hard_failure() -> None:
    evaluator, _ = make_evaluator({"strengthScore": "excellent"})

    with pytest.raises(EvaluatorHardFailure):
        score(evaluator)


def test_quota_error_falls_back_to_heuristics() -> None:
    evaluator, _ = make_evaluator(ProviderRateLimitError("quota"))

    analysis = score(evaluator, "I think this is a good idea.")

    assert analysis.strength_score == 4
    assert len(analysis.feedback.improvements) <= 2


@pytest.mark.parametrize(
    ("error", "category"),
    [
        (ProviderRateLimitError("quota"), ErrorCategory.QUOTA_EXCEEDED),
        (ProviderAuthError("bad key"), ErrorCategory.INVALID_CREDENTIALS),
    ],
)
def test_unavailable_without_fallback(error: Exception, category: ErrorCategory) -> None:
    evaluator, _ = make_evaluator(error, fallback=False)

    with pytest.raises(EvaluatorUnavailable) as exc_info:
        score(evaluator)

    assert exc_info.value.category is category


def test_transient_outage_is_reported_not_faked() -> None:
    evaluator, _ = make_evaluator(ProviderUnavailableError("connection reset"))

    with pytest.raises(EvaluatorUnavailable) as exc_info:
        score(evaluator)

    assert exc_info.value.category is ErrorCategory.GENERIC_UNAVAILABLE


def test_malformed_provider_output_is_a_hard_failure() -> None:
    evaluator, _ = make_evaluator(ProviderResponseError("not JSON"))

    with pytest.raises(EvaluatorHardFailure):
        score(evaluator)


def test_demo_marker_skips_the_provider() -> None:
    evaluator, provider = make_evaluator()

    analysis = score(evaluator, f"I think this is a good idea. {DEMO_MODE_MARKER}")
    reply = counter(evaluator, topic=f"{TOPIC} {DEMO_MODE_MARKER}")

    assert provider.calls == []
    assert analysis.strength_score == 4
    assert reply.strategy in STRATEGIES


def test_counter_argument_from_model() -> None:
    evaluator, provider = make_evaluator(
        {"content": "  Cars enable access to jobs.  ", "strategy": "Economic framing"}
    )

    reply = counter(evaluator, difficulty=Difficulty.EXPERT)

    assert reply.content == "Cars enable access to jobs."
    assert reply.strategy == "Economic framing"
    prompt = provider.calls[0]["messages"][1]["content"]
    assert "con (Opposition)" in prompt
    assert "rebuttal" in prompt
    assert "expert-level reasoning" in prompt


def test_counter_argument_missing_fields_use_defaults() -> None:
    evaluator, _ = make_evaluator({})

    reply = counter(evaluator)

    assert reply.content == DEFAULT_COUNTER_CONTENT
    assert reply.strategy == DEFAULT_STRATEGY


def test_counter_argument_quota_falls_back_to_templates() -> None:
    evaluator, _ = make_evaluator(ProviderRateLimitError("quota"))

    reply = counter(evaluator)

    assert "con" in reply.content
    assert reply.strategy in STRATEGIES


def test_counter_argument_quota_without_fallback() -> None:
    evaluator, _ = make_evaluator(ProviderRateLimitError("quota"), fallback=False)

    with pytest.raises(EvaluatorUnavailable) as exc_info:
        counter(evaluator)

    assert exc_info.value.category is ErrorCategory.QUOTA_EXCEEDED


def test_blank_counter_fields_use_defaults() -> None:
    evaluator, _ = make_evaluator({"content": "   ", "strategy": "\n"})

    reply = counter(evaluator)

    assert reply.content == DEFAULT_COUNTER_CONTENT
    assert reply.strategy == DEFAULT_STRATEGY


def test_infinite_scores_are_clamped() -> None:
    evaluator, _ = make_evaluator(
        json.loads('{"strengthScore": 1e999, "logicScore": -1e999, "persuasivenessScore": Infinity}')
    )

    analysis = score(evaluator)

    assert analysis.strength_score == 10
    assert analysis.logic_score == 1
    assert analysis.persuasiveness_score == 10


def test_nan_score_is_a_hard_failure() -> None:
    evaluator, _ = make_evaluator(json.loads('{"strengthScore": NaN}'))

    with pytest.raises(EvaluatorHardFailure):
        score(evaluator)
