"""Lincoln-Douglas debate format implementation."""

from typing import Dict, List

from rostrum.debate_engine.types import DebateFormatName, DebatePhase, Position
from .base import DebateFormat, FormatPhase


class LincolnDouglasFormat(DebateFormat):
    """One-on-one value debate centred on philosophy and ethics."""

    @property
    def name(self) -> DebateFormatName:
        return DebateFormatName.LINCOLN_DOUGLAS

    @property
    def display_name(self) -> str:
        return "Lincoln-Douglas"

    @property
    def description(self) -> str:
        return "One-on-one value debate weighing competing moral and philosophical frameworks"

    def get_phases(self) -> List[FormatPhase]:
        """Lincoln-Douglas format: Constructive -> Rebuttal (no separate closing)"""
        return [
            FormatPhase(
                phase=DebatePhase.OPENING,
                name="Constructive",
                instruction="Establish your value premise and criterion, then build contentions that uphold them.",
                duration_seconds=360,
            ),
            FormatPhase(
                phase=DebatePhase.REBUTTAL,
                name="Rebuttal",
                instruction="Weigh the competing values, attack your opponent's framework, and crystallize the key voting issues.",
                duration_seconds=180,
            ),
        ]

    def get_side_labels(self) -> Dict[Position, str]:
        return {Position.PRO: "Affirmative", Position.CON: "Negative"}

    def get_format_instructions(self) -> str:
        """Lincoln-Douglas format-specific instructions."""
        return """LINCOLN-DOUGLAS DEBATE FORMAT:
            - Center the case on a value premise and a criterion for weighing it
            - Prefer philosophical and ethical reasoning over policy detail
            - Compare frameworks explicitly when responding to the opponent"""
