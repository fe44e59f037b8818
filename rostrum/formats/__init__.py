"""Debate format definitions and implementations."""

from .base import DEFAULT_PHASE_SECONDS, DebateFormat, FormatPhase
from .oxford import OxfordFormat
from .parliamentary import ParliamentaryFormat
from .lincoln_douglas import LincolnDouglasFormat
from .public_forum import PublicForumFormat
from .registry import format_registry

__all__ = [
    'DEFAULT_PHASE_SECONDS',
    'DebateFormat',
    'FormatPhase',
    'OxfordFormat',
    'ParliamentaryFormat',
    'LincolnDouglasFormat',
    'PublicForumFormat',
    'format_registry'
]
