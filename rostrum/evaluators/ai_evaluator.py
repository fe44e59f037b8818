"""AI-powered argument evaluator with an offline fallback."""

import logging
import random
from typing import Any

from rostrum.config.settings import EvaluatorConfig
from rostrum.debate_engine.exceptions import EvaluatorHardFailure, EvaluatorUnavailable
from rostrum.debate_engine.models import ArgumentFeedback, clamp_score
from rostrum.debate_engine.types import DebateFormatName, DebatePhase, Difficulty, Position
from rostrum.formats import format_registry
from rostrum.providers.base_model_provider import BaseModelProvider
from rostrum.providers.exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderRateLimitError,
    ProviderUnavailableError,
)
from .base import (
    ArgumentAnalysis,
    BaseEvaluator,
    CounterArgument,
    is_demo_request,
    strip_demo_marker,
)
from .heuristics import HeuristicEvaluator

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 5
DEFAULT_COUNTER_CONTENT = "I disagree with your position and will provide a counter-argument."
DEFAULT_STRATEGY = "Standard counter-argumentation approach"

DIFFICULTY_STYLES = {
    Difficulty.BEGINNER: "Use simple, clear arguments with basic reasoning",
    Difficulty.INTERMEDIATE: "Use moderate complexity with some nuanced points",
    Difficulty.ADVANCED: "Use sophisticated arguments with complex reasoning",
    Difficulty.EXPERT: "Use highly sophisticated arguments with deep analysis and expert-level reasoning",
}


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item]


class AIEvaluator(BaseEvaluator):
    """Evaluator backed by a language model.

    Quota and credential failures switch to the heuristic evaluator when
    `fallback_on_unavailable` is set, otherwise they surface as
    EvaluatorUnavailable. Transient outages always surface as
    EvaluatorUnavailable; anything else is an EvaluatorHardFailure.
    """

    def __init__(
        self,
        provider: BaseModelProvider,
        config: EvaluatorConfig,
        rng: random.Random | None = None,
    ):
        self.provider = provider
        self.config = config
        self.fallback = HeuristicEvaluator(rng)

    @property
    def name(self) -> str:
        return f"AI Evaluator ({self.config.model})"

    async def score_argument(
        self,
        content: str,
        topic: str,
        position: Position,
        debate_format: DebateFormatName,
    ) -> ArgumentAnalysis:
        if is_demo_request(content, topic):
            logger.info("Demo mode requested - scoring argument heuristically")
            return await self.fallback.score_argument(
                strip_demo_marker(content), topic, position, debate_format
            )

        messages = [
            {
                "role": "system",
                "content": "You are an expert debate coach providing constructive analysis of arguments. Always respond with valid JSON.",
            },
            {
                "role": "user",
                "content": self._create_scoring_prompt(content, topic, position, debate_format),
            },
        ]

        try:
            data = await self._generate(messages)
            return self._parse_analysis(data)
        except (ProviderRateLimitError, ProviderAuthError) as e:
            if not self.config.fallback_on_unavailable:
                raise EvaluatorUnavailable(e.category, str(e)) from e
            logger.warning(f"Scoring fell back to heuristics ({e.category.value}): {e}")
            return await self.fallback.score_argument(content, topic, position, debate_format)

    async def generate_counter_argument(
        self,
        topic: str,
        position: Position,
        user_argument: str,
        debate_format: DebateFormatName,
        difficulty: Difficulty,
        phase: DebatePhase,
    ) -> CounterArgument:
        if is_demo_request(topic):
            logger.info("Demo mode requested - using template counter-argument")
            return await self.fallback.generate_counter_argument(
                strip_demo_marker(topic), position, user_argument, debate_format, difficulty, phase
            )

        messages = [
            {
                "role": "system",
                "content": "You are a skilled debate opponent. Generate persuasive arguments appropriate to the specified difficulty level. Always respond with valid JSON.",
            },
            {
                "role": "user",
                "content": self._create_counter_prompt(
                    topic, position, user_argument, debate_format, difficulty, phase
                ),
            },
        ]

        try:
            data = await self._generate(messages)
        except (ProviderRateLimitError, ProviderAuthError) as e:
            if not self.config.fallback_on_unavailable:
                raise EvaluatorUnavailable(e.category, str(e)) from e
            logger.warning(f"Counter-argument fell back to templates ({e.category.value}): {e}")
            return await self.fallback.generate_counter_argument(
                topic, position, user_argument, debate_format, difficulty, phase
            )

        content = str(data.get("content") or "").strip()
        strategy = str(data.get("strategy") or "").strip()
        return CounterArgument(
            content=content or DEFAULT_COUNTER_CONTENT,
            strategy=strategy or DEFAULT_STRATEGY,
        )

    async def _generate(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        """Call the provider, translating only non-recoverable errors."""
        try:
            return await self.provider.generate_json(
                self.config.model,
                messages,
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except (ProviderRateLimitError, ProviderAuthError):
            raise
        except ProviderUnavailableError as e:
            raise EvaluatorUnavailable(e.category, str(e)) from e
        except ProviderError as e:
            raise EvaluatorHardFailure(f"Evaluator request failed: {e}") from e

    def _parse_analysis(self, data: dict[str, Any]) -> ArgumentAnalysis:
        feedback = data.get("feedback")
        if not isinstance(feedback, dict):
            feedback = {}
        try:
            return ArgumentAnalysis(
                strength_score=clamp_score(data.get("strengthScore") or DEFAULT_SCORE),
                logic_score=clamp_score(data.get("logicScore") or DEFAULT_SCORE),
                persuasiveness_score=clamp_score(
                    data.get("persuasivenessScore") or DEFAULT_SCORE
                ),
                feedback=ArgumentFeedback(
                    strengths=_string_list(feedback.get("strengths")),
                    improvements=_string_list(feedback.get("improvements")),
                    suggestions=_string_list(feedback.get("suggestions")),
                ),
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise EvaluatorHardFailure(f"Malformed argument analysis: {e}") from e

    def _create_scoring_prompt(
        self,
        content: str,
        topic: str,
        position: Position,
        debate_format: DebateFormatName,
    ) -> str:
        format_instructions = format_registry.get_format(debate_format).get_format_instructions()
        return f"""You are an expert debate coach analyzing an argument. Please analyze the following argument and provide scores and feedback.

Topic: {topic}
Position: {position.value}
Format: {debate_format.value}

{format_instructions}

Argument: {content}

Please respond with JSON in this exact format:
{{
  "strengthScore": number (1-10),
  "logicScore": number (1-10),
  "persuasivenessScore": number (1-10),
  "feedback": {{
    "strengths": ["strength 1", "strength 2"],
    "improvements": ["improvement 1", "improvement 2"],
    "suggestions": ["suggestion 1", "suggestion 2"]
  }}
}}"""

    def _create_counter_prompt(
        self,
        topic: str,
        position: Position,
        user_argument: str,
        debate_format: DebateFormatName,
        difficulty: Difficulty,
        phase: DebatePhase,
    ) -> str:
        debate_format_obj = format_registry.get_format(debate_format)
        side_label = debate_format_obj.get_side_labels()[position]
        format_phase = debate_format_obj.get_phase(phase)
        phase_instruction = format_phase.instruction if format_phase else ""

        return f"""You are an AI debate opponent in a {debate_format.value} debate.

Topic: {topic}
Your position: {position.value} ({side_label})
Current phase: {phase.value} - {phase_instruction}
Difficulty level: {difficulty.value} - {DIFFICULTY_STYLES[difficulty]}
User's argument: {user_argument}

Please generate a compelling counter-argument and explain your strategy. Respond with JSON in this format:
{{
  "content": "your debate argument here",
  "strategy": "brief explanation of your strategic approach"
}}"""
