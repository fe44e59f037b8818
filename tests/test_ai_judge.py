"""Tests for the end-of-debate AI judge."""

from __future__ import annotations

import asyncio
import json

import pytest

from conftest import FakeProvider
from rostrum.config.settings import JudgingConfig
from rostrum.debate_engine.exceptions import EvaluatorHardFailure, EvaluatorUnavailable
from rostrum.debate_engine.types import DebateFormatName, ErrorCategory, Position, Winner
from rostrum.judges.ai_judge import AIJudge
from rostrum.judges.base import NEUTRAL_SCORE, neutral_analysis
from rostrum.providers.exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderRateLimitError,
)


def judge_debate(*responses, max_points: int = 6):
    provider = FakeProvider(*responses)
    judge = AIJudge(provider, JudgingConfig(model="judge-model", max_points=max_points))
    analysis = asyncio.run(
        judge.aggregate(
            "School uniforms should be mandatory",
            Position.CON,
            ["Uniforms limit self-expression.", "Costs burden families."],
            ["Uniforms reduce bullying."],
            DebateFormatName.PARLIAMENTARY,
        )
    )
    return analysis, provider


def test_evaluation_is_parsed_and_clamped() -> None:
    analysis, provider = judge_debate(
        {
            "overallScore": 8,
            "strengthScore": 11,
            "logicScore": -2,
            "persuasivenessScore": 6.5,
            "responseScore": "7",
            "winner": "User",
            "strengths": ["Clear framing", "Good rebuttals"],
            "improvements": ["More evidence"],
        }
    )

    assert analysis.overall_score == 8
    assert analysis.strength_score == 10
    assert analysis.logic_score == 1
    assert analysis.persuasiveness_score == 7
    assert analysis.response_score == 7
    assert analysis.winner is Winner.USER
    assert analysis.strengths == ["Clear framing", "Good rebuttals"]
    assert analysis.improvements == ["More evidence"]

    call = provider.calls[0]
    assert call["model"] == "judge-model"
    prompt = call["messages"][1]["content"]
    assert "con (Opposition)" in prompt
    assert "pro (Government)" in prompt
    assert "Costs burden families." in prompt
    assert "Uniforms reduce bullying." in prompt


def test_missing_fields_use_defaults() -> None:
    analysis, _ = judge_debate({})

    assert analysis.winner is Winner.TIE
    assert analysis.overall_score == 5
    assert analysis.strengths == []


def test_feedback_points_are_capped() -> None:
    analysis, _ = judge_debate(
        {"winner": "ai", "strengths": [f"point {i}" for i in range(10)]}, max_points=3
    )

    assert analysis.winner is Winner.AI
    assert analysis.strengths == ["point 0", "point 1", "point 2"]


def test_unknown_winner_is_a_hard_failure() -> None:
    with pytest.raises(EvaluatorHardFailure):
        judge_debate({"winner": "audience"})


@pytest.mark.parametrize(
    ("error", "category"),
    [
        (ProviderRateLimitError("quota"), ErrorCategory.QUOTA_EXCEEDED),
        (ProviderAuthError("bad key"), ErrorCategory.INVALID_CREDENTIALS),
    ],
)
def test_provider_unavailable(error: Exception, category: ErrorCategory) -> None:
    with pytest.raises(EvaluatorUnavailable) as exc_info:
        judge_debate(error)

    assert exc_info.value.category is category


def test_provider_failure_is_a_hard_failure() -> None:
    with pytest.raises(EvaluatorHardFailure):
        judge_debate(ProviderError("boom"))


def test_neutral_analysis() -> None:
    analysis = neutral_analysis()

    assert analysis.overall_score == NEUTRAL_SCORE == 7
    assert analysis.winner is Winner.TIE
    assert analysis.strengths == ["Good effort", "Clear communication"]


def test_non_finite_scores() -> None:
    analysis, _ = judge_debate(json.loads('{"overallScore": Infinity, "logicScore": -Infinity}'))

    assert analysis.overall_score == 10
    assert analysis.logic_score == 1

    with pytest.raises(EvaluatorHardFailure):
        judge_debate(json.loads('{"overallScore": NaN}'))
