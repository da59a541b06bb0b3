"""Turn-based 1v1 combat engine.

The engine is presentation-agnostic: a host builds a ``CombatEngine``,
subscribes to its events, starts a match with ``begin_match`` and forwards
player choices with ``submit_player_action``.
"""

from .core.config import EngineConfig, load_engine_config
from .core.data import CombatantTemplate, MatchState, Side, SkillTemplate, TargetType
from .core.engine import ImmediateScheduler, ManualScheduler, MatchConfigurationError
from .core.events import EventManager, EventType
from .game.combat_engine import CombatEngine
from .game.entities import load_roster

__version__ = "0.1.0"

__all__ = [
    "CombatEngine",
    "EngineConfig",
    "load_engine_config",
    "CombatantTemplate",
    "SkillTemplate",
    "TargetType",
    "MatchState",
    "Side",
    "ImmediateScheduler",
    "ManualScheduler",
    "MatchConfigurationError",
    "EventManager",
    "EventType",
    "load_roster",
]
