"""Oxford-style debate format implementation."""

from typing import Dict, List

from rostrum.debate_engine.types import DebateFormatName, DebatePhase, Position
from .base import DebateFormat, FormatPhase


class OxfordFormat(DebateFormat):
    """Oxford Union-style debate with formal structure and balanced argument exchange."""

    @property
    def name(self) -> DebateFormatName:
        return DebateFormatName.OXFORD

    @property
    def display_name(self) -> str:
        return "Oxford"

    @property
    def description(self) -> str:
        return "Oxford Union-style debate with formal procedure and structured argument exchange"

    def get_phases(self) -> List[FormatPhase]:
        """Oxford format: Opening Statements -> Rebuttals -> Final Statements"""
        return [
            FormatPhase(
                phase=DebatePhase.OPENING,
                name="Opening Statements",
                instruction="Present your case on the motion. Establish key arguments, provide evidence, and set the framework for debate.",
                duration_seconds=360,
            ),
            FormatPhase(
                phase=DebatePhase.REBUTTAL,
                name="Rebuttals",
                instruction="Address your opponent's arguments directly. Identify weaknesses and reinforce your own position.",
                duration_seconds=240,
            ),
            FormatPhase(
                phase=DebatePhase.CLOSING,
                name="Final Statements",
                instruction="Make your final appeal to the audience. Summarize your strongest points and conclude persuasively.",
            ),
        ]

    def get_side_labels(self) -> Dict[Position, str]:
        """Return Oxford-style labels: Proposition and Opposition."""
        return {Position.PRO: "Proposition", Position.CON: "Opposition"}

    def get_format_instructions(self) -> str:
        """Oxford format-specific instructions."""
        return """OXFORD DEBATE FORMAT:
            - Maintain formal academic discourse and courtesy throughout
            - Proposition supports the motion, Opposition challenges it
            - Structure arguments clearly: premise, evidence, reasoning, conclusion
            - Engage substantively with opponent's strongest arguments
            - Use evidence-based reasoning and logical analysis"""
