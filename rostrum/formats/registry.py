"""Registry for debate formats."""

from rostrum.debate_engine.types import DebateFormatName, DebatePhase
from .base import DEFAULT_PHASE_SECONDS, DebateFormat
from .lincoln_douglas import LincolnDouglasFormat
from .oxford import OxfordFormat
from .parliamentary import ParliamentaryFormat
from .public_forum import PublicForumFormat


class FormatRegistry:
    """Registry for managing available debate formats."""

    def __init__(self):
        self._formats: dict[DebateFormatName, type[DebateFormat]] = {}
        self._register_built_in_formats()

    def _register_built_in_formats(self):
        """Register the built-in debate formats."""
        self.register(OxfordFormat)
        self.register(ParliamentaryFormat)
        self.register(LincolnDouglasFormat)
        self.register(PublicForumFormat)

    def register(self, format_class: type[DebateFormat]) -> None:
        """Register a debate format class."""
        instance = format_class()
        self._formats[instance.name] = format_class

    def get_format(self, name: DebateFormatName | str) -> DebateFormat:
        """Get a format instance by name."""
        key = name if isinstance(name, DebateFormatName) else self._lookup(name)
        if key not in self._formats:
            raise ValueError(
                f"Unknown format: {name}. Available: {self.list_formats()}"
            )
        return self._formats[key]()

    def _lookup(self, name: str) -> DebateFormatName | str:
        try:
            return DebateFormatName(name)
        except ValueError:
            return name

    def list_formats(self) -> list[str]:
        """List all available format names."""
        return [name.value for name in self._formats]

    def get_phase_duration(self, name: DebateFormatName | str, phase: DebatePhase) -> int:
        """Initial timer duration for (format, phase), defaulting to 360 seconds."""
        try:
            debate_format = self.get_format(name)
        except ValueError:
            return DEFAULT_PHASE_SECONDS
        return debate_format.get_phase_duration(phase)

    def get_format_descriptions(self) -> dict[str, dict[str, object]]:
        """Get format names, display names, descriptions and phase timings."""
        descriptions: dict[str, dict[str, object]] = {}
        for name, format_class in self._formats.items():
            instance = format_class()
            descriptions[name.value] = {
                "display_name": instance.display_name,
                "description": instance.description,
                "phases": [
                    {
                        "phase": format_phase.phase.value,
                        "name": format_phase.name,
                        "duration_seconds": instance.get_phase_duration(format_phase.phase),
                    }
                    for format_phase in instance.get_phases()
                ],
            }
        return descriptions


# Global registry instance
format_registry = FormatRegistry()
