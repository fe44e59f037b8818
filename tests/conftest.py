"""Pytest configuration and shared fixtures.

Provides fake providers, evaluators and judges so the engine can be driven
without a network connection, plus an engine wired to an in-memory store.
"""

from __future__ import annotations

import random
from typing import Any

import pytest

from rostrum.config.settings import SystemConfig
from rostrum.debate_engine.core import DebateEngine
from rostrum.debate_engine.models import ArgumentFeedback, DebateSetup
from rostrum.debate_engine.types import (
    DebateFormatName,
    DebatePhase,
    Difficulty,
    Position,
    Winner,
)
from rostrum.evaluators.base import ArgumentAnalysis, BaseEvaluator, CounterArgument
from rostrum.judges.base import BaseJudge, DebateAnalysis
from rostrum.providers.base_model_provider import BaseModelProvider
from rostrum.storage import InMemorySessionStore


# =============================================================================
# FAKES
# =============================================================================


class FakeProvider(BaseModelProvider):
    """Provider returning queued JSON objects or raising queued exceptions."""

    def __init__(self, *responses: Any):
        super().__init__(SystemConfig())
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    async def generate_json(self, model, messages, **overrides):
        self.calls.append({"model": model, "messages": messages, **overrides})
        if not self._responses:
            raise AssertionError("No fake responses left")
        item = self._responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class FakeEvaluator(BaseEvaluator):
    """Evaluator with fixed outputs; set *_error to make a call raise."""

    def __init__(self):
        self.analysis = ArgumentAnalysis(
            strength_score=8,
            logic_score=7,
            persuasiveness_score=6,
            feedback=ArgumentFeedback(
                strengths=["Clear claim"],
                improvements=["Cite a source"],
                suggestions=["Slow down"],
            ),
        )
        self.counter = CounterArgument(
            content="The costs clearly outweigh the benefits.",
            strategy="Attack the cost assumptions",
        )
        self.score_error: BaseException | None = None
        self.counter_error: BaseException | None = None
        self.counter_calls: list[dict[str, Any]] = []

    @property
    def name(self) -> str:
        return "Fake Evaluator"

    async def score_argument(self, content, topic, position, debate_format):
        if self.score_error is not None:
            raise self.score_error
        return self.analysis

    async def generate_counter_argument(
        self, topic, position, user_argument, debate_format, difficulty, phase
    ):
        self.counter_calls.append(
            {
                "topic": topic,
                "position": position,
                "user_argument": user_argument,
                "difficulty": difficulty,
                "phase": phase,
            }
        )
        if self.counter_error is not None:
            raise self.counter_error
        return self.counter


class FakeJudge(BaseJudge):
    """Judge returning a fixed analysis, or raising `error` when set."""

    def __init__(self):
        self.analysis = DebateAnalysis(
            overall_score=8,
            strength_score=8,
            logic_score=7,
            persuasiveness_score=9,
            response_score=6,
            winner=Winner.USER,
            strengths=["Strong evidence", "Confident delivery", "Good structure"],
            improvements=["Address rebuttals", "Tighter conclusions", "Fewer fillers"],
        )
        self.error: BaseException | None = None
        self.calls: list[dict[str, Any]] = []

    @property
    def name(self) -> str:
        return "Fake Judge"

    async def aggregate(self, topic, user_position, user_arguments, ai_arguments, debate_format):
        self.calls.append(
            {
                "topic": topic,
                "user_position": user_position,
                "user_arguments": list(user_arguments),
                "ai_arguments": list(ai_arguments),
                "debate_format": debate_format,
            }
        )
        if self.error is not None:
            raise self.error
        return self.analysis


# =============================================================================
# SHARED FIXTURES - Available to all test modules
# =============================================================================


@pytest.fixture
def sample_debate_topic() -> str:
    """Provide a standard debate topic for testing."""
    return "X should happen"


@pytest.fixture
def rng() -> random.Random:
    """Seeded randomness source for the offline fallback."""
    return random.Random(1234)


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def fake_evaluator() -> FakeEvaluator:
    return FakeEvaluator()


@pytest.fixture
def fake_judge() -> FakeJudge:
    return FakeJudge()


@pytest.fixture
def engine(
    store: InMemorySessionStore, fake_evaluator: FakeEvaluator, fake_judge: FakeJudge
) -> DebateEngine:
    """Engine wired to fakes and an in-memory store."""
    return DebateEngine(store=store, evaluator=fake_evaluator, judge=fake_judge)


@pytest.fixture
def oxford_setup(sample_debate_topic: str) -> DebateSetup:
    return DebateSetup(
        topic=sample_debate_topic,
        format=DebateFormatName.OXFORD.value,
        user_position=Position.PRO.value,
        ai_difficulty=Difficulty.BEGINNER.value,
        real_time_feedback=True,
    )


@pytest.fixture
def opening_phase() -> DebatePhase:
    return DebatePhase.OPENING


# =============================================================================
# PYTEST CONFIGURATION HOOKS
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
