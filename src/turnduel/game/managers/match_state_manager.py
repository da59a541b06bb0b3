"""
Match state machine.

All ``MatchState`` changes go through this manager. Transitions are defined
as rules of (from_state, trigger) -> to_state; a trigger with no matching rule
for the current state is an engine bug and raises ``IllegalTransitionError``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from ...core.data import MatchState, MatchTrigger
from ...core.engine.errors import IllegalTransitionError
from ...core.events import LogMessage, MatchStateChanged

if TYPE_CHECKING:
    from ...core.engine.match_context import MatchContext
    from ...core.events.event_manager import EventManager


@dataclass(frozen=True)
class MatchTransitionRule:
    """Defines a match state transition rule."""

    from_state: MatchState
    trigger: MatchTrigger
    to_state: MatchState
    description: str

    def matches(self, current_state: MatchState, trigger: MatchTrigger) -> bool:
        """Check if this rule matches the current conditions."""
        return self.from_state == current_state and self.trigger == trigger


DEFAULT_RULES = (
    MatchTransitionRule(
        from_state=MatchState.STARTING,
        trigger=MatchTrigger.PLAYER_TURN_READY,
        to_state=MatchState.PLAYER_TURN,
        description="Player opens the match",
    ),
    MatchTransitionRule(
        from_state=MatchState.PLAYER_TURN,
        trigger=MatchTrigger.PLAYER_ACTION_RESOLVED,
        to_state=MatchState.ENEMY_TURN,
        description="Enemy acts after a surviving player action",
    ),
    MatchTransitionRule(
        from_state=MatchState.PLAYER_TURN,
        trigger=MatchTrigger.ENEMY_DEFEATED,
        to_state=MatchState.WON,
        description="Player action defeated the enemy",
    ),
    MatchTransitionRule(
        from_state=MatchState.ENEMY_TURN,
        trigger=MatchTrigger.PLAYER_TURN_READY,
        to_state=MatchState.PLAYER_TURN,
        description="Player acts after a surviving enemy action",
    ),
    MatchTransitionRule(
        from_state=MatchState.ENEMY_TURN,
        trigger=MatchTrigger.PLAYER_DEFEATED,
        to_state=MatchState.LOST,
        description="Enemy action defeated the player",
    ),
)


class MatchStateManager:
    """Rule-driven state machine over ``MatchContext.state``."""

    def __init__(
        self,
        context: "MatchContext",
        event_manager: "EventManager",
        rules: Optional[List[MatchTransitionRule]] = None
    ):
        self.context = context
        self.event_manager = event_manager
        self.rules: List[MatchTransitionRule] = list(rules) if rules is not None else list(DEFAULT_RULES)

    @property
    def state(self) -> MatchState:
        return self.context.state

    def _emit_log(self, message: str, category: str = "SYSTEM", level: str = "DEBUG") -> None:
        """Emit a log message event."""
        self.event_manager.publish_immediate(
            LogMessage(
                turn=self.context.turn,
                message=message,
                category=category,
                level=level,
                source="MatchStateManager",
            ),
            source="MatchStateManager",
        )

    def find_rule(self, trigger: MatchTrigger) -> Optional[MatchTransitionRule]:
        """Rule for ``trigger`` from the current state, or None."""
        for rule in self.rules:
            if rule.matches(self.context.state, trigger):
                return rule
        return None

    def can_transition(self, trigger: MatchTrigger) -> bool:
        return self.find_rule(trigger) is not None

    def transition(self, trigger: MatchTrigger) -> MatchState:
        """Apply ``trigger`` and return the new state.

        Raises:
            IllegalTransitionError: If no rule covers the current state and trigger
        """
        rule = self.find_rule(trigger)
        if rule is None:
            raise IllegalTransitionError(self.context.state, trigger)

        old_state = self.context.state
        self.context.state = rule.to_state
        self.context.history.append(rule.to_state.name)

        self._emit_log(f"Match state: {old_state.name} -> {rule.to_state.name} ({rule.description})")
        self.event_manager.publish_immediate(
            MatchStateChanged(turn=self.context.turn, old_state=old_state, new_state=rule.to_state),
            source="MatchStateManager",
        )
        return rule.to_state

    def add_rule(self, rule: MatchTransitionRule) -> None:
        """Add a custom transition rule."""
        self.rules.append(rule)
        self._emit_log(f"Added match state rule: {rule.description}")
