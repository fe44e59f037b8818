"""Base classes and interfaces for debate formats."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List

from rostrum.debate_engine.types import DebateFormatName, DebatePhase, Position

DEFAULT_PHASE_SECONDS = 360


@dataclass(frozen=True)
class FormatPhase:
    """A phase within a specific debate format."""

    phase: DebatePhase
    name: str
    instruction: str
    duration_seconds: int | None = None  # None falls back to DEFAULT_PHASE_SECONDS


class DebateFormat(ABC):
    """Abstract base class for debate formats."""

    @property
    @abstractmethod
    def name(self) -> DebateFormatName:
        """Format identifier."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable format name for display in UI."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Format description."""
        pass

    @abstractmethod
    def get_phases(self) -> List[FormatPhase]:
        """Get the ordered phases for this format."""
        pass

    @abstractmethod
    def get_format_instructions(self) -> str:
        """Get format-specific instructions for evaluator prompts."""
        pass

    def get_side_labels(self) -> Dict[Position, str]:
        """Get format-specific labels for the pro and con sides."""
        return {Position.PRO: "Pro", Position.CON: "Con"}

    @property
    def phase_sequence(self) -> List[DebatePhase]:
        return [format_phase.phase for format_phase in self.get_phases()]

    def get_phase(self, phase: DebatePhase) -> FormatPhase | None:
        for format_phase in self.get_phases():
            if format_phase.phase is phase:
                return format_phase
        return None

    def get_phase_duration(self, phase: DebatePhase) -> int:
        """Seconds allotted to a phase; unmapped phases get the default."""
        format_phase = self.get_phase(phase)
        if format_phase is None or format_phase.duration_seconds is None:
            return DEFAULT_PHASE_SECONDS
        return format_phase.duration_seconds

    def next_phase(self, phase: DebatePhase) -> DebatePhase | None:
        """The phase following `phase`, or None when it is the last one."""
        sequence = self.phase_sequence
        if phase not in sequence:
            raise ValueError(f"Phase {phase.value} is not part of the {self.name.value} format")
        index = sequence.index(phase)
        if index + 1 < len(sequence):
            return sequence[index + 1]
        return None

    def is_final_phase(self, phase: DebatePhase) -> bool:
        return self.next_phase(phase) is None
