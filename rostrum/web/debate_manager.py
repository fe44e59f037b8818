"""Wiring of the debate engine used by the web application."""

import logging
import random

from rostrum.config.settings import AppConfig
from rostrum.debate_engine.core import DebateEngine
from rostrum.evaluators import create_evaluator
from rostrum.judges import create_judge
from rostrum.providers import ProviderFactory
from rostrum.storage import InMemorySessionStore

logger = logging.getLogger(__name__)


def build_debate_engine(config: AppConfig) -> DebateEngine:
    """Create an engine with an in-memory store and configured evaluator/judge."""
    rng = random.Random(config.system.random_seed)
    provider = ProviderFactory.create_provider("openai", config.system)

    evaluator = create_evaluator(config, provider=provider, rng=rng)
    judge = create_judge(config, provider=provider)

    logger.info(f"Debate engine ready: evaluator={evaluator.name}, judge={judge.name}")
    return DebateEngine(store=InMemorySessionStore(), evaluator=evaluator, judge=judge)


def get_debate_engine() -> DebateEngine:
    """FastAPI dependency returning the application's engine."""
    # Import here to avoid circular imports
    from rostrum.web import api

    return api.debate_engine
