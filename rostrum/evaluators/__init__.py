"""Argument scoring and counter-argument generation."""

from .base import ArgumentAnalysis, BaseEvaluator, CounterArgument, DEMO_MODE_MARKER
from .ai_evaluator import AIEvaluator
from .heuristics import HeuristicEvaluator
from .factory import create_evaluator

__all__ = [
    "ArgumentAnalysis",
    "BaseEvaluator",
    "CounterArgument",
    "DEMO_MODE_MARKER",
    "AIEvaluator",
    "HeuristicEvaluator",
    "create_evaluator",
]
