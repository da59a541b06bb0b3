"""Core data structures and definitions.

This package contains fundamental data types and match definitions:
- data_structures.py: skill and combatant templates plus presentation payloads
- game_enums.py: centralized enums for sides, target types and match states
"""

from .data_structures import SkillTemplate, CombatantTemplate, StatsSnapshot, SkillOption, ValidationMixin
from .game_enums import (
    Side,
    TargetType,
    SkillType,
    MatchState,
    MatchTrigger,
    CueKind,
    SIDE_NAMES,
    TARGET_TYPE_NAMES,
    MATCH_STATE_NAMES,
)

__all__ = [
    "SkillTemplate",
    "CombatantTemplate",
    "StatsSnapshot",
    "SkillOption",
    "ValidationMixin",
    "Side",
    "TargetType",
    "SkillType",
    "MatchState",
    "MatchTrigger",
    "CueKind",
    "SIDE_NAMES",
    "TARGET_TYPE_NAMES",
    "MATCH_STATE_NAMES",
]
