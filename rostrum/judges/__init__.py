"""Judging system implementations."""

from .base import BaseJudge, DebateAnalysis, neutral_analysis
from .ai_judge import AIJudge
from .factory import create_judge

__all__ = [
    "BaseJudge",
    "DebateAnalysis",
    "neutral_analysis",
    "AIJudge",
    "create_judge",
]
