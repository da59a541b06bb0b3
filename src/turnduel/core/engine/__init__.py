"""Core engine state and infrastructure.

This package contains the runtime building blocks the combat engine is made of:
- match_context.py: Engine-owned mutable match state
- scheduler.py: Injectable pacing (virtual clock or zero-delay)
- errors.py: Configuration and state machine errors
"""

from .errors import MatchConfigurationError, IllegalTransitionError, TemplateLoadError
from .match_context import MatchContext
from .scheduler import Scheduler, ScheduledTask, ManualScheduler, ImmediateScheduler

__all__ = [
    "MatchConfigurationError",
    "IllegalTransitionError",
    "TemplateLoadError",
    "MatchContext",
    "Scheduler",
    "ScheduledTask",
    "ManualScheduler",
    "ImmediateScheduler",
]
