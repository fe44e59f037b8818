"""AI-powered debate judge using language models."""

import logging
from typing import Any, List

from rostrum.config.settings import JudgingConfig
from rostrum.debate_engine.exceptions import EvaluatorHardFailure, EvaluatorUnavailable
from rostrum.debate_engine.models import clamp_score
from rostrum.debate_engine.types import DebateFormatName, Position, Winner
from rostrum.formats import format_registry
from rostrum.providers.base_model_provider import BaseModelProvider
from rostrum.providers.exceptions import ProviderError, ProviderUnavailableError
from .base import BaseJudge, DebateAnalysis

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 5
SCORE_FIELDS = {
    "overall_score": "overallScore",
    "strength_score": "strengthScore",
    "logic_score": "logicScore",
    "persuasiveness_score": "persuasivenessScore",
    "response_score": "responseScore",
}


class AIJudge(BaseJudge):
    """AI judge using a dedicated language model for evaluation."""

    def __init__(self, provider: BaseModelProvider, config: JudgingConfig):
        self.provider = provider
        self.config = config

    @property
    def name(self) -> str:
        return f"AI Judge ({self.config.model})"

    async def aggregate(
        self,
        topic: str,
        user_position: Position,
        user_arguments: List[str],
        ai_arguments: List[str],
        debate_format: DebateFormatName,
    ) -> DebateAnalysis:
        """Evaluate the debate using the AI judge model."""
        logger.info(
            f"AI judge evaluating debate: {topic} "
            f"({len(user_arguments)} user / {len(ai_arguments)} AI arguments)"
        )

        messages = [
            {"role": "system", "content": self._get_judge_system_prompt()},
            {
                "role": "user",
                "content": self._create_evaluation_prompt(
                    topic, user_position, user_arguments, ai_arguments, debate_format
                ),
            },
        ]

        try:
            evaluation = await self.provider.generate_json(
                self.config.model, messages, temperature=self.config.temperature
            )
        except ProviderUnavailableError as e:
            logger.error(f"AI judge unavailable: {e}")
            raise EvaluatorUnavailable(e.category, str(e)) from e
        except ProviderError as e:
            logger.error(f"AI judge evaluation failed: {e}")
            raise EvaluatorHardFailure(f"Judge evaluation failed: {e}") from e

        decision = self._parse_evaluation(evaluation)
        logger.info(
            f"AI judge decision: winner={decision.winner.value}, overall={decision.overall_score}"
        )
        return decision

    def _get_judge_system_prompt(self) -> str:
        """Get system prompt for the AI judge."""
        return """You are an expert debate judge providing fair, constructive analysis of a practice debate between a student and an AI opponent.

        JUDGING PRINCIPLES:
        1. Evaluate the student's arguments on strength, logic, and persuasiveness
        2. Consider how well the student responded to the opponent's arguments
        3. Be impartial - judge the arguments, not the participants
        4. Provide specific, constructive feedback
        5. Score each criterion on a scale of 1-10 (10 being exceptional)

        Always respond with valid JSON."""

    def _create_evaluation_prompt(
        self,
        topic: str,
        user_position: Position,
        user_arguments: List[str],
        ai_arguments: List[str],
        debate_format: DebateFormatName,
    ) -> str:
        """Create the evaluation prompt for the judge."""
        side_labels = format_registry.get_format(debate_format).get_side_labels()
        user_label = side_labels[user_position]
        ai_label = side_labels[user_position.opposite]

        user_text = "\n\n".join(user_arguments) or "(no arguments submitted)"
        ai_text = "\n\n".join(ai_arguments) or "(no arguments submitted)"

        return f"""You are an expert debate judge analyzing a complete debate performance.

Topic: {topic}
Format: {debate_format.value}
User Position: {user_position.value} ({user_label})
AI Position: {user_position.opposite.value} ({ai_label})

User Arguments:
{user_text}

AI Arguments:
{ai_text}

Please provide a comprehensive analysis of the user's performance with scores and feedback. Respond with JSON in this format:
{{
  "overallScore": number (1-10),
  "strengthScore": number (1-10),
  "logicScore": number (1-10),
  "persuasivenessScore": number (1-10),
  "responseScore": number (1-10),
  "winner": "user" | "ai" | "tie",
  "strengths": ["strength 1", "strength 2", "strength 3", "strength 4"],
  "improvements": ["improvement 1", "improvement 2", "improvement 3", "improvement 4"]
}}"""

    def _parse_evaluation(self, evaluation: dict[str, Any]) -> DebateAnalysis:
        """Parse the judge's JSON into a clamped DebateAnalysis."""
        logger.debug(f"Raw judge evaluation: {evaluation}")

        raw_winner = evaluation.get("winner") or Winner.TIE.value
        try:
            winner = Winner(str(raw_winner).strip().lower())
        except ValueError:
            raise EvaluatorHardFailure(f"Judge returned unknown winner: {raw_winner!r}") from None

        try:
            scores = {
                attr: clamp_score(evaluation.get(key) or DEFAULT_SCORE)
                for attr, key in SCORE_FIELDS.items()
            }
        except (TypeError, ValueError, OverflowError) as e:
            raise EvaluatorHardFailure(f"Judge returned malformed scores: {e}") from e

        return DebateAnalysis(
            winner=winner,
            strengths=self._points(evaluation.get("strengths")),
            improvements=self._points(evaluation.get("improvements")),
            **scores,
        )

    def _points(self, value: Any) -> List[str]:
        if not isinstance(value, list):
            if value:
                logger.warning(f"Converting non-list judge feedback: {type(value)} -> {value}")
                return [str(value)]
            return []
        return [str(item) for item in value if item][: self.config.max_points]
