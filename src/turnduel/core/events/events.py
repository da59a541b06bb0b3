"""Match events and their payloads.

This module defines every event the engine publishes. Hosts subscribe to the
ones they care about (log narration, stat refreshes, animation cues) instead
of being called directly from resolution logic.

Event Design Principles:
- Events are immutable dataclasses
- All events carry the match turn counter
- Events use proper enums instead of magic strings
- Keep event types focused and avoid over-granular events
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

from ..data import CueKind, MatchState, Side, SkillOption, StatsSnapshot

if TYPE_CHECKING:
    from ...game.combat.action_resolver import ActionResult


class EventType(Enum):
    """Types of match events that hosts and managers can subscribe to."""
    # Match lifecycle
    MATCH_STARTED = auto()
    MATCH_STATE_CHANGED = auto()
    MATCH_ENDED = auto()
    TURN_STARTED = auto()

    # Actions
    ACTION_CUE = auto()
    HIT_CUE = auto()
    ACTION_RESOLVED = auto()
    ACTION_REJECTED = auto()

    # Presentation refresh
    STATS_CHANGED = auto()

    # Logging
    LOG_MESSAGE = auto()


@dataclass(frozen=True)
class MatchEvent(ABC):
    """Base class for all match events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class MatchStarted(MatchEvent):
    """Event emitted once both combatants exist."""
    player_name: str
    enemy_name: str

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.MATCH_STARTED)


@dataclass(frozen=True)
class MatchStateChanged(MatchEvent):
    """Event emitted on every state machine transition."""
    old_state: MatchState
    new_state: MatchState

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.MATCH_STATE_CHANGED)


@dataclass(frozen=True)
class MatchEnded(MatchEvent):
    """Terminal event. ``defeated_side`` drives the defeat animation."""
    result: MatchState
    defeated_side: Side
    message: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.MATCH_ENDED)


@dataclass(frozen=True)
class TurnStarted(MatchEvent):
    """Event emitted when a side begins its turn."""
    side: Side
    available_skills: tuple[SkillOption, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.TURN_STARTED)


@dataclass(frozen=True)
class ActionCue(MatchEvent):
    """Emitted before damage is applied so an attack animation can play."""
    side: Side
    cue_kind: CueKind

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ACTION_CUE)


@dataclass(frozen=True)
class HitCue(MatchEvent):
    """Emitted when a side receives damage."""
    side: Side

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.HIT_CUE)


@dataclass(frozen=True)
class ActionResolved(MatchEvent):
    """Emitted after an action has been fully applied."""
    side: Side
    result: "ActionResult"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ACTION_RESOLVED)


@dataclass(frozen=True)
class ActionRejected(MatchEvent):
    """Emitted when a player submission is refused."""
    skill_name: Optional[str]
    reason: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ACTION_REJECTED)


@dataclass(frozen=True)
class StatsChanged(MatchEvent):
    """UI refresh signal carrying both combatants' health and mana."""
    player: StatsSnapshot
    enemy: StatsSnapshot

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.STATS_CHANGED)


@dataclass(frozen=True)
class LogMessage(MatchEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    level: str
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)
