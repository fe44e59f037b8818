"""Parliamentary debate format implementation."""

from typing import Dict, List

from rostrum.debate_engine.types import DebateFormatName, DebatePhase, Position
from .base import DebateFormat, FormatPhase


class ParliamentaryFormat(DebateFormat):
    """Parliamentary debate format with government and opposition."""

    @property
    def name(self) -> DebateFormatName:
        return DebateFormatName.PARLIAMENTARY

    @property
    def display_name(self) -> str:
        return "Parliamentary"

    @property
    def description(self) -> str:
        return "Parliamentary debate with Government and Opposition sides, formal procedures and structured speeches"

    def get_phases(self) -> List[FormatPhase]:
        """Parliamentary format: Constructive speeches -> Rebuttals -> Closing"""
        return [
            FormatPhase(
                phase=DebatePhase.OPENING,
                name="Constructive Speeches",
                instruction="Define the motion, present your side's case, and outline key arguments.",
                duration_seconds=420,
            ),
            FormatPhase(
                phase=DebatePhase.REBUTTAL,
                name="Rebuttals",
                instruction="Defend your position against attacks and dismantle the other side's case.",
                duration_seconds=480,
            ),
            FormatPhase(
                phase=DebatePhase.CLOSING,
                name="Closing Statements",
                instruction="Make final appeals to convince the House. Summarize why your side won the debate.",
            ),
        ]

    def get_side_labels(self) -> Dict[Position, str]:
        return {Position.PRO: "Government", Position.CON: "Opposition"}

    def get_format_instructions(self) -> str:
        """Parliamentary format-specific instructions."""
        return """PARLIAMENTARY DEBATE FORMAT:
            - Government proposes and defends the motion, Opposition contests it
            - Address the Speaker of the House with parliamentary courtesy
            - Arguments rely on reasoning and general knowledge rather than prepared evidence
            - Rebuttals should clash directly with the other side's strongest points"""
