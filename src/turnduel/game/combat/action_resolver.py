"""
Action resolution for both sides of a duel.

This module applies a chosen skill: it debits mana, applies damage for
enemy-targeting skills and publishes the resulting cues, narration and stat
refresh. It does not decide whose turn it is; the engine does.

Resolution happens in two steps so the host can pace them:
1. ``announce`` publishes the action cue (the attack animation starts)
2. ``apply`` mutates the combatants and publishes the hit cue, log and stats
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...core.data import CueKind, Side, SkillTemplate
from ...core.events import ActionCue, ActionResolved, HitCue, LogMessage, StatsChanged

if TYPE_CHECKING:
    from ...core.engine.match_context import MatchContext
    from ...core.events.event_manager import EventManager


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one resolved action."""
    actor_name: str
    skill_name: str
    target_name: str
    amount: int  # 0 when the skill is inert
    mana_spent: int
    was_basic_attack: bool
    target_defeated: bool
    inert: bool
    message: str


class ActionResolver:
    """Applies skills to combatants and reports what happened."""

    def __init__(self, context: "MatchContext", event_manager: "EventManager"):
        self.context = context
        self.event_manager = event_manager

    def _emit_log(self, message: str, category: str = "BATTLE", level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish_immediate(
            LogMessage(
                turn=self.context.turn,
                message=message,
                category=category,
                level=level,
                source="ActionResolver"
            ),
            source="ActionResolver"
        )

    def is_basic_attack(self, side: Side, skill: SkillTemplate) -> bool:
        """Whether ``skill`` is the side's designated basic attack (by identity)."""
        return skill is self.context.basic_attack(side)

    def announce(self, side: Side, skill: SkillTemplate) -> None:
        """Publish the action cue that precedes damage application."""
        cue_kind = CueKind.BASIC_ATTACK if self.is_basic_attack(side, skill) else CueKind.SKILL
        self.event_manager.publish_immediate(
            ActionCue(turn=self.context.turn, side=side, cue_kind=cue_kind),
            source="ActionResolver"
        )

    def apply(self, side: Side, skill: SkillTemplate, charge_mana: bool) -> ActionResult:
        """Apply ``skill`` from ``side`` to the opposing combatant.

        Args:
            side: The acting side
            skill: The skill being used
            charge_mana: Whether the actor pays the skill's mana cost

        Returns:
            ActionResult describing what was applied
        """
        actor = self.context.combatant(side)
        target_side = Side.ENEMY if side == Side.PLAYER else Side.PLAYER
        target = self.context.opponent(side)

        mana_spent = actor.spend_mana(skill.mana_cost) if charge_mana else 0

        amount = 0
        if skill.target_type.targets_enemy:
            self.event_manager.publish_immediate(
                HitCue(turn=self.context.turn, side=target_side),
                source="ActionResolver"
            )
            target.take_damage(skill.power)
            # Narrate the skill's power even when the target had less health left
            amount = skill.power
            message = f"{actor.name} uses {skill.name} on {target.name} for {skill.power} damage!"
        else:
            # Ally and self targeting are reserved for healing/buff skills
            message = f"{actor.name} uses {skill.name}, but nothing happens."

        result = ActionResult(
            actor_name=actor.name,
            skill_name=skill.name,
            target_name=target.name,
            amount=amount,
            mana_spent=mana_spent,
            was_basic_attack=self.is_basic_attack(side, skill),
            target_defeated=not target.is_alive,
            inert=not skill.target_type.targets_enemy,
            message=message,
        )

        self._emit_log(message)
        if mana_spent:
            self._emit_log(f"{actor.name} spends {mana_spent} mana", category="DEBUG", level="DEBUG")

        player_stats, enemy_stats = self.context.snapshot()
        self.event_manager.publish_immediate(
            StatsChanged(turn=self.context.turn, player=player_stats, enemy=enemy_stats),
            source="ActionResolver"
        )
        self.event_manager.publish_immediate(
            ActionResolved(turn=self.context.turn, side=side, result=result),
            source="ActionResolver"
        )
        return result
