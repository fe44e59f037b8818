"""Configuration settings and data models."""

from .settings import (
    AppConfig,
    EvaluatorConfig,
    JudgingConfig,
    OpenAIConfig,
    SystemConfig,
    get_default_config,
    get_template_config,
)

__all__ = [
    "AppConfig",
    "EvaluatorConfig",
    "JudgingConfig",
    "OpenAIConfig",
    "SystemConfig",
    "get_default_config",
    "get_template_config",
]
