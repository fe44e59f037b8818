"""Configuration settings and data models."""

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "rostrum_config.json"
CONFIG_PATH_ENV_VAR = "ROSTRUM_CONFIG"


class OpenAIConfig(BaseModel):
    """OpenAI-specific configuration."""

    api_key: Optional[str] = Field(
        default=None, description="OpenAI API key (can also be set via OPENAI_API_KEY env var)"
    )
    base_url: str = Field(
        default="https://api.openai.com/v1", description="OpenAI API base URL"
    )
    timeout: float = Field(default=60.0, description="API request timeout in seconds")
    max_retries: int = Field(default=2, description="Maximum number of API call retries")

    def resolve_api_key(self) -> Optional[str]:
        """Return the configured key, falling back to the environment."""
        return self.api_key or os.getenv("OPENAI_API_KEY")


class EvaluatorConfig(BaseModel):
    """Configuration for per-argument scoring and counter-argument generation."""

    provider: str = Field(default="openai", description="Evaluator provider (openai, demo)")
    model: str = Field(default="gpt-4o", description="Model used for scoring and generation")
    temperature: float = Field(default=0.7, description="Model temperature")
    max_tokens: int = Field(default=800, description="Maximum tokens per response")
    fallback_on_unavailable: bool = Field(
        default=True,
        description="Use the offline heuristics when the provider reports quota or credential problems",
    )

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        valid_providers = {"openai", "demo"}
        if v not in valid_providers:
            raise ValueError(f"Provider must be one of: {valid_providers}")
        return v


class JudgingConfig(BaseModel):
    """End-of-debate judging configuration."""

    model: str = Field(default="gpt-4o", description="Model used for the final debate analysis")
    temperature: float = Field(default=0.3, description="Lower temperature for consistent judging")
    max_points: int = Field(
        default=6, ge=1, description="Maximum strengths/improvements kept from the judge"
    )


class SystemConfig(BaseModel):
    """System-wide configuration."""

    openai: OpenAIConfig = Field(
        default_factory=OpenAIConfig, description="OpenAI-specific settings"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    random_seed: Optional[int] = Field(
        default=None, description="Seed for the offline fallback randomness source"
    )
    allowed_origins: Optional[List[str]] = Field(
        default=None, description="CORS origins; development defaults apply when unset"
    )


class AppConfig(BaseModel):
    """Complete application configuration."""

    evaluator: EvaluatorConfig = Field(default_factory=EvaluatorConfig)
    judging: JudgingConfig = Field(default_factory=JudgingConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "AppConfig":
        """Load configuration from a JSON or YAML file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix in (".yaml", ".yml"):
                data: Any = yaml.safe_load(f)
            else:
                data = json.load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(exclude_unset=True),
                f,
                default_flow_style=False,
                indent=2,
            )


def get_default_config() -> AppConfig:
    """Load configuration from ROSTRUM_CONFIG (or rostrum_config.json), else the template."""
    config_path = Path(os.environ.get(CONFIG_PATH_ENV_VAR, DEFAULT_CONFIG_PATH))
    if config_path.exists():
        logger.info(f"Loading configuration from {config_path}")
        return AppConfig.load_from_file(config_path)
    return get_template_config()


def get_template_config() -> AppConfig:
    """Get template configuration for config file generation."""
    return AppConfig(
        evaluator=EvaluatorConfig(
            provider="openai",
            model="gpt-4o",
            temperature=0.7,
            max_tokens=800,
            fallback_on_unavailable=True,
        ),
        judging=JudgingConfig(
            model="gpt-4o",
            temperature=0.3,
            max_points=6,
        ),
        system=SystemConfig(
            openai=OpenAIConfig(
                api_key=None,  # Set your OpenAI API key here or use OPENAI_API_KEY env var
                base_url="https://api.openai.com/v1",
                timeout=60.0,
                max_retries=2,
            ),
            log_level="INFO",
            random_seed=None,
        ),
    )
