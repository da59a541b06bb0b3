"""Managers coordinating a match through the event bus.

- match_state_manager.py: Rule-driven match state machine
- log_manager.py: Categorized buffer of log message events
"""

from .log_manager import LogManager, LogCategory, LogLevel, LogEntry
from .match_state_manager import MatchStateManager, MatchTransitionRule, DEFAULT_RULES

__all__ = [
    "LogManager",
    "LogCategory",
    "LogLevel",
    "LogEntry",
    "MatchStateManager",
    "MatchTransitionRule",
    "DEFAULT_RULES",
]
