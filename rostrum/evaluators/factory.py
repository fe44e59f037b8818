"""Factory for creating argument evaluators."""

import logging
import random

from rostrum.config.settings import AppConfig
from rostrum.providers import ProviderFactory
from rostrum.providers.base_model_provider import BaseModelProvider
from .ai_evaluator import AIEvaluator
from .base import BaseEvaluator
from .heuristics import HeuristicEvaluator

logger = logging.getLogger(__name__)


def create_evaluator(
    config: AppConfig,
    provider: BaseModelProvider | None = None,
    rng: random.Random | None = None,
) -> BaseEvaluator:
    """Build the evaluator named in config.evaluator.provider."""
    if config.evaluator.provider == "demo":
        logger.info("Using offline heuristic evaluator (demo provider)")
        return HeuristicEvaluator(rng)

    if provider is None:
        provider = ProviderFactory.create_provider(config.evaluator.provider, config.system)

    logger.info(f"Creating AI evaluator with model: {config.evaluator.model}")
    return AIEvaluator(provider=provider, config=config.evaluator, rng=rng)
