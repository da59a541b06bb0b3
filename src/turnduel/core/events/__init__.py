"""Event system for publisher-subscriber communication.

This package contains the complete event-driven architecture:
- event_manager.py: Publisher-subscriber event routing and coordination
- events.py: Event definitions for engine/host communication
"""

from .event_manager import EventManager, EventPriority, QueuedEvent
from .events import (
    MatchEvent,
    EventType,
    MatchStarted,
    MatchStateChanged,
    MatchEnded,
    TurnStarted,
    ActionCue,
    HitCue,
    ActionResolved,
    ActionRejected,
    StatsChanged,
    LogMessage,
)

__all__ = [
    "EventManager",
    "EventPriority",
    "QueuedEvent",
    "MatchEvent",
    "EventType",
    "MatchStarted",
    "MatchStateChanged",
    "MatchEnded",
    "TurnStarted",
    "ActionCue",
    "HitCue",
    "ActionResolved",
    "ActionRejected",
    "StatsChanged",
    "LogMessage",
]
