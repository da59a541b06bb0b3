"""
Unit tests for ActionResolver.

Tests mana debit, damage application and the events published around it.
"""

import pytest
from unittest.mock import Mock
from turnduel.core.data import CueKind, Side, SkillTemplate, TargetType
from turnduel.core.events import EventType
from turnduel.game.combat import ActionResolver


@pytest.fixture
def resolver(match_context, event_manager):
    return ActionResolver(match_context, event_manager)


@pytest.fixture
def recorder(event_manager):
    """Universal subscriber recording every event in order."""
    events = []
    event_manager.subscribe_all(events.append)
    return events


class TestAnnounce:

    def test_basic_attack_cue(self, resolver, match_context, recorder):
        resolver.announce(Side.PLAYER, match_context.player_basic_attack)

        cue = recorder[-1]
        assert cue.event_type == EventType.ACTION_CUE
        assert cue.side == Side.PLAYER
        assert cue.cue_kind == CueKind.BASIC_ATTACK

    def test_skill_cue(self, resolver, fireball, recorder):
        resolver.announce(Side.PLAYER, fireball)
        assert recorder[-1].cue_kind == CueKind.SKILL

    def test_lookalike_is_not_the_basic_attack(self, resolver, recorder):
        lookalike = SkillTemplate(name="Attack", power=10, mana_cost=0)

        resolver.announce(Side.PLAYER, lookalike)

        assert recorder[-1].cue_kind == CueKind.SKILL

    def test_announce_does_not_change_stats(self, resolver, match_context, fireball):
        before = match_context.snapshot()
        resolver.announce(Side.PLAYER, fireball)
        assert match_context.snapshot() == before


class TestApply:
    """Test the resolution step."""

    def test_damage_to_enemy(self, resolver, match_context, basic_attack):
        result = resolver.apply(Side.PLAYER, basic_attack, charge_mana=False)

        assert match_context.enemy.current_health == 20
        assert result.amount == 10
        assert result.was_basic_attack
        assert not result.target_defeated
        assert result.message == "Hero uses Attack on Goblin for 10 damage!"

    def test_free_for_player_when_not_charged(self, resolver, match_context, fireball):
        result = resolver.apply(Side.PLAYER, fireball, charge_mana=False)

        assert match_context.player.current_mana == 50
        assert result.mana_spent == 0

    def test_charged_mana(self, resolver, match_context, fireball):
        result = resolver.apply(Side.PLAYER, fireball, charge_mana=True)

        assert match_context.player.current_mana == 40
        assert result.mana_spent == 10

    def test_overkill_reports_power_and_clamps(self, resolver, match_context, fireball):
        match_context.enemy.current_health = 5

        result = resolver.apply(Side.PLAYER, fireball, charge_mana=False)

        assert match_context.enemy.current_health == 0
        assert result.amount == 25
        assert result.target_defeated
        assert "for 25 damage" in result.message

    def test_enemy_hits_player(self, resolver, match_context, enemy_basic_attack):
        result = resolver.apply(Side.ENEMY, enemy_basic_attack, charge_mana=True)

        assert match_context.player.current_health == 95
        assert result.actor_name == "Goblin"
        assert result.target_name == "Hero"

    def test_all_enemies_hits_the_single_opponent(self, resolver, match_context):
        sweep = SkillTemplate(name="Sweep", power=7, target_type=TargetType.ALL_ENEMIES)

        resolver.apply(Side.PLAYER, sweep, charge_mana=False)

        assert match_context.enemy.current_health == 23

    def test_inert_skill(self, resolver, match_context, heal, recorder):
        result = resolver.apply(Side.PLAYER, heal, charge_mana=True)

        assert result.inert
        assert result.amount == 0
        assert result.message == "Hero uses Heal, but nothing happens."
        assert match_context.enemy.current_health == 30
        assert match_context.player.current_health == 100
        assert match_context.player.current_mana == 45
        assert not any(e.event_type == EventType.HIT_CUE for e in recorder)

    def test_event_order(self, resolver, basic_attack, recorder):
        resolver.apply(Side.PLAYER, basic_attack, charge_mana=False)

        types = [e.event_type for e in recorder]
        assert types == [
            EventType.HIT_CUE,
            EventType.LOG_MESSAGE,
            EventType.STATS_CHANGED,
            EventType.ACTION_RESOLVED,
        ]
        assert recorder[0].side == Side.ENEMY

    def test_stats_event_reflects_new_values(self, resolver, event_manager, fireball):
        subscriber = Mock()
        event_manager.subscribe(EventType.STATS_CHANGED, subscriber)

        resolver.apply(Side.PLAYER, fireball, charge_mana=True)

        event = subscriber.call_args.args[0]
        assert event.player.mana == 40
        assert event.enemy.hp == 5

    def test_mana_spend_logged_at_debug(self, resolver, event_manager, fireball):
        logs = []
        event_manager.subscribe(EventType.LOG_MESSAGE, logs.append)

        resolver.apply(Side.PLAYER, fireball, charge_mana=True)

        assert [(e.message, e.level) for e in logs] == [
            ("Hero uses Fireball on Goblin for 25 damage!", "INFO"),
            ("Hero spends 10 mana", "DEBUG"),
        ]
