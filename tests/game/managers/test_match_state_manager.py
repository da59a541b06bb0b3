"""
Unit tests for the match state machine.
"""

import pytest
from unittest.mock import Mock
from turnduel.core.data import MatchState, MatchTrigger
from turnduel.core.engine import IllegalTransitionError, MatchContext
from turnduel.core.events import EventType
from turnduel.game.managers import DEFAULT_RULES, MatchStateManager, MatchTransitionRule


class TestMatchTransitionRule:

    def test_rule_matches(self):
        rule = MatchTransitionRule(
            from_state=MatchState.PLAYER_TURN,
            trigger=MatchTrigger.ENEMY_DEFEATED,
            to_state=MatchState.WON,
            description="Win",
        )

        assert rule.matches(MatchState.PLAYER_TURN, MatchTrigger.ENEMY_DEFEATED)
        assert not rule.matches(MatchState.ENEMY_TURN, MatchTrigger.ENEMY_DEFEATED)
        assert not rule.matches(MatchState.PLAYER_TURN, MatchTrigger.PLAYER_DEFEATED)

    def test_terminal_states_have_no_outgoing_rules(self):
        assert not any(rule.from_state.is_terminal for rule in DEFAULT_RULES)


class TestMatchStateManager:
    """Test MatchStateManager functionality."""

    @pytest.fixture
    def context(self):
        return MatchContext()

    @pytest.fixture
    def manager(self, context, event_manager):
        return MatchStateManager(context, event_manager)

    def test_full_winning_path(self, manager, context):
        manager.transition(MatchTrigger.PLAYER_TURN_READY)
        manager.transition(MatchTrigger.PLAYER_ACTION_RESOLVED)
        manager.transition(MatchTrigger.PLAYER_TURN_READY)
        manager.transition(MatchTrigger.ENEMY_DEFEATED)

        assert manager.state == MatchState.WON
        assert context.history == ["PLAYER_TURN", "ENEMY_TURN", "PLAYER_TURN", "WON"]

    def test_losing_path(self, manager):
        manager.transition(MatchTrigger.PLAYER_TURN_READY)
        manager.transition(MatchTrigger.PLAYER_ACTION_RESOLVED)

        assert manager.transition(MatchTrigger.PLAYER_DEFEATED) == MatchState.LOST

    def test_illegal_transition_raises(self, manager, context):
        with pytest.raises(IllegalTransitionError) as exc_info:
            manager.transition(MatchTrigger.ENEMY_DEFEATED)

        assert exc_info.value.state == MatchState.STARTING
        assert context.state == MatchState.STARTING
        assert context.history == []

    def test_no_transition_out_of_terminal_state(self, manager):
        manager.transition(MatchTrigger.PLAYER_TURN_READY)
        manager.transition(MatchTrigger.ENEMY_DEFEATED)

        for trigger in MatchTrigger:
            assert not manager.can_transition(trigger)

    def test_publishes_state_change(self, manager, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.MATCH_STATE_CHANGED, subscriber)

        manager.transition(MatchTrigger.PLAYER_TURN_READY)

        event = subscriber.call_args.args[0]
        assert event.old_state == MatchState.STARTING
        assert event.new_state == MatchState.PLAYER_TURN

    def test_transition_logged_at_debug(self, manager, event_manager):
        logs = []
        event_manager.subscribe(EventType.LOG_MESSAGE, logs.append)

        manager.transition(MatchTrigger.PLAYER_TURN_READY)

        assert logs[0].level == "DEBUG"
        assert "STARTING -> PLAYER_TURN" in logs[0].message

    def test_custom_rule(self, manager):
        manager.add_rule(MatchTransitionRule(
            from_state=MatchState.STARTING,
            trigger=MatchTrigger.PLAYER_DEFEATED,
            to_state=MatchState.LOST,
            description="Forfeit before the first turn",
        ))

        assert manager.can_transition(MatchTrigger.PLAYER_DEFEATED)
        assert manager.transition(MatchTrigger.PLAYER_DEFEATED) == MatchState.LOST
