"""Public Forum debate format implementation."""

from typing import Dict, List

from rostrum.debate_engine.types import DebateFormatName, DebatePhase, Position
from .base import DebateFormat, FormatPhase


class PublicForumFormat(DebateFormat):
    """Accessible, evidence-driven debate aimed at a lay audience."""

    @property
    def name(self) -> DebateFormatName:
        return DebateFormatName.PUBLIC_FORUM

    @property
    def display_name(self) -> str:
        return "Public Forum"

    @property
    def description(self) -> str:
        return "Audience-friendly debate on current events with short speeches and a closing summary"

    def get_phases(self) -> List[FormatPhase]:
        """Public Forum format: Case -> Rebuttal -> Summary"""
        return [
            FormatPhase(
                phase=DebatePhase.OPENING,
                name="Constructive Case",
                instruction="Present your case in plain language a citizen judge can follow.",
                duration_seconds=240,
            ),
            FormatPhase(
                phase=DebatePhase.REBUTTAL,
                name="Rebuttal",
                instruction="Respond to the other team's case with evidence and clear impacts.",
                duration_seconds=180,
            ),
            FormatPhase(
                phase=DebatePhase.SUMMARY,
                name="Summary",
                instruction="Collapse to your most important arguments and explain why they outweigh.",
                duration_seconds=120,
            ),
        ]

    def get_format_instructions(self) -> str:
        """Public Forum format-specific instructions."""
        return """PUBLIC FORUM DEBATE FORMAT:
            - Speak to a lay audience without jargon
            - Support claims with current, well-sourced evidence
            - Weigh impacts explicitly: magnitude, probability, timeframe"""
