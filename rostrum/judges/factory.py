"""Factory for creating judges."""

import logging

from rostrum.config.settings import AppConfig
from rostrum.providers import ProviderFactory
from rostrum.providers.base_model_provider import BaseModelProvider
from .ai_judge import AIJudge
from .base import BaseJudge

logger = logging.getLogger(__name__)

JUDGE_PROVIDER = "openai"


def create_judge(config: AppConfig, provider: BaseModelProvider | None = None) -> BaseJudge:
    """Build the end-of-debate judge.

    The judge always uses the model provider; there is no offline judge, so
    the demo evaluator setting does not apply here.
    """
    if provider is None:
        provider = ProviderFactory.create_provider(JUDGE_PROVIDER, config.system)

    logger.info(f"Creating AI judge with model: {config.judging.model}")
    return AIJudge(provider=provider, config=config.judging)
