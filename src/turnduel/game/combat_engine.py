"""
Combat engine orchestration.

This module coordinates a 1-versus-1 match: it owns the match context, drives
the turn state machine, resolves player and AI actions and decides when the
match is over. Presentation is kept out entirely; hosts observe the match
through events on the ``EventManager`` (or the ``on_*`` helpers below) and
drive it with ``begin_match`` and ``submit_player_action``.

Every pause between steps goes through the injected ``Scheduler``, so the
same engine runs in real time, on a virtual clock, or with no delays at all.
"""

import random
from typing import Callable, Optional

from ..core.config import EngineConfig
from ..core.data import (
    CombatantTemplate,
    CueKind,
    MatchState,
    MatchTrigger,
    Side,
    SkillOption,
    SkillTemplate,
    StatsSnapshot,
)
from ..core.engine import ImmediateScheduler, MatchConfigurationError, MatchContext, ScheduledTask, Scheduler
from ..core.events import (
    ActionRejected,
    EventManager,
    EventType,
    LogMessage,
    MatchEnded,
    MatchStarted,
    StatsChanged,
    TurnStarted,
)
from .ai import AIBehavior, ai_type_from_name, create_ai_behavior
from .combat import ActionResolver, ActionResult
from .entities import Combatant, CombatantFactory
from .managers import LogLevel, LogManager, MatchStateManager

VICTORY_MESSAGE = "You are victorious!"
DEFEAT_MESSAGE = "You have been defeated..."


class CombatEngine:
    """Turn-based 1v1 combat engine."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        event_manager: Optional[EventManager] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        ai_behavior: Optional[AIBehavior] = None,
    ):
        """Initialize the engine and its managers.

        Args:
            config: Engine settings (defaults used when omitted)
            event_manager: Event bus shared with the host
            scheduler: Pacing scheduler; defaults to zero-delay execution
            rng: Randomness for AI decisions
            ai_behavior: Enemy AI; defaults to the configured behavior

        Raises:
            ValueError: If the config is invalid or names an unknown AI behavior
        """
        self.config = config or EngineConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError("Invalid engine config: " + "; ".join(errors))

        self.event_manager = event_manager or EventManager(enable_debug_logging=False)
        self.scheduler = scheduler or ImmediateScheduler()
        self.rng = rng or random.Random()
        self.ai_behavior = ai_behavior or create_ai_behavior(ai_type_from_name(self.config.ai_behavior))

        self.context = MatchContext()
        self.log_manager = LogManager(
            self.event_manager,
            max_messages=self.config.max_log_messages,
            default_level=LogLevel[self.config.log_level],
        )
        self.state_manager = MatchStateManager(self.context, self.event_manager)
        self.resolver = ActionResolver(self.context, self.event_manager)

        self._pending_task: Optional[ScheduledTask] = None
        self._abandoned = False

    # ============== Queries ==============

    @property
    def state(self) -> MatchState:
        return self.context.state

    @property
    def turn(self) -> int:
        return self.context.turn

    @property
    def player(self) -> Optional[Combatant]:
        return self.context.player

    @property
    def enemy(self) -> Optional[Combatant]:
        return self.context.enemy

    @property
    def outcome_message(self) -> Optional[str]:
        """Human-readable result once the match is over."""
        return self.context.outcome_message

    @property
    def is_over(self) -> bool:
        return self.context.is_over

    @property
    def is_abandoned(self) -> bool:
        return self._abandoned

    def available_skills(self) -> list[SkillOption]:
        """The player's template skills in slot order.

        The basic attack is always available and is not part of this list.
        """
        player = self.context.player
        if player is None:
            return []
        return [
            SkillOption(name=skill.name, usable=self._player_can_use(skill), skill=skill)
            for skill in player.skills
        ]

    def _player_can_use(self, skill: SkillTemplate) -> bool:
        if not self.config.player_pays_mana:
            return True
        return self.context.combatant(Side.PLAYER).can_afford(skill)

    # ============== Host subscriptions ==============

    def on_log(self, callback: Callable[[str], None]) -> None:
        """Call ``callback(message)`` for every non-debug log line."""
        def handler(event):
            if event.level != "DEBUG":
                callback(event.message)
        self.event_manager.subscribe(EventType.LOG_MESSAGE, handler, subscriber_name="host.on_log")

    def on_stats_changed(self, callback: Callable[[StatsSnapshot, StatsSnapshot], None]) -> None:
        """Call ``callback(player_stats, enemy_stats)`` on every UI refresh."""
        self.event_manager.subscribe(
            EventType.STATS_CHANGED,
            lambda event: callback(event.player, event.enemy),
            subscriber_name="host.on_stats_changed",
        )

    def on_action_cue(self, callback: Callable[[Side, CueKind], None]) -> None:
        """Call ``callback(side, cue_kind)`` before each action lands."""
        self.event_manager.subscribe(
            EventType.ACTION_CUE,
            lambda event: callback(event.side, event.cue_kind),
            subscriber_name="host.on_action_cue",
        )

    def on_hit_cue(self, callback: Callable[[Side], None]) -> None:
        """Call ``callback(side)`` when a side receives damage."""
        self.event_manager.subscribe(
            EventType.HIT_CUE,
            lambda event: callback(event.side),
            subscriber_name="host.on_hit_cue",
        )

    def on_match_ended(self, callback: Callable[[MatchState, Side], None]) -> None:
        """Call ``callback(result, defeated_side)`` once the match ends."""
        self.event_manager.subscribe(
            EventType.MATCH_ENDED,
            lambda event: callback(event.result, event.defeated_side),
            subscriber_name="host.on_match_ended",
        )

    # ============== Match lifecycle ==============

    def _emit_log(self, message: str, category: str = "BATTLE", level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish_immediate(
            LogMessage(
                turn=self.context.turn,
                message=message,
                category=category,
                level=level,
                source="CombatEngine"
            ),
            source="CombatEngine"
        )

    def _schedule(self, delay: float, step: Callable[[], None], description: str) -> None:
        self._pending_task = self.scheduler.schedule(delay, step, description)

    def _publish_stats(self) -> None:
        player_stats, enemy_stats = self.context.snapshot()
        self.event_manager.publish_immediate(
            StatsChanged(turn=self.context.turn, player=player_stats, enemy=enemy_stats),
            source="CombatEngine"
        )

    @staticmethod
    def _validate_configuration(
        player_template: Optional[CombatantTemplate],
        enemy_template: Optional[CombatantTemplate],
        player_basic_attack: Optional[SkillTemplate],
        enemy_basic_attack: Optional[SkillTemplate],
    ) -> list[str]:
        problems = []
        for label, template in (("player", player_template), ("enemy", enemy_template)):
            if template is None:
                problems.append(f"missing {label} template")
            elif not isinstance(template, CombatantTemplate):
                problems.append(f"{label} template is not a CombatantTemplate: {template!r}")
            else:
                problems.extend(template.validate())

        for label, skill in (("player", player_basic_attack), ("enemy", enemy_basic_attack)):
            if skill is None:
                problems.append(f"missing {label} basic attack")
            elif not isinstance(skill, SkillTemplate):
                problems.append(f"{label} basic attack is not a SkillTemplate: {skill!r}")
            else:
                problems.extend(skill.validate())
                if skill.mana_cost != 0:
                    problems.append(f"{label} basic attack '{skill.name}' must cost 0 mana")
        return problems

    def begin_match(
        self,
        player_template: CombatantTemplate,
        enemy_template: CombatantTemplate,
        player_basic_attack: SkillTemplate,
        enemy_basic_attack: SkillTemplate,
    ) -> None:
        """Create both combatants and schedule the player's first turn.

        Raises:
            MatchConfigurationError: If a definition is missing or invalid, or
                a match was already started on this engine
        """
        if self.context.has_combatants:
            raise MatchConfigurationError(["a match has already been started on this engine"])

        problems = self._validate_configuration(
            player_template, enemy_template, player_basic_attack, enemy_basic_attack
        )
        if problems:
            self._emit_log(f"Refusing to start match: {'; '.join(problems)}", category="ERROR", level="ERROR")
            raise MatchConfigurationError(problems)

        self.context.player = CombatantFactory.instantiate(player_template)
        self.context.enemy = CombatantFactory.instantiate(enemy_template)
        self.context.player_basic_attack = player_basic_attack
        self.context.enemy_basic_attack = enemy_basic_attack

        player, enemy = self.context.player, self.context.enemy
        self._emit_log(f"{player.name} faces {enemy.name}!")
        self.event_manager.publish_immediate(
            MatchStarted(turn=self.context.turn, player_name=player.name, enemy_name=enemy.name),
            source="CombatEngine"
        )

        self._schedule(self.config.start_delay, self._begin_player_turn, "first player turn")

    def abandon(self) -> None:
        """Stop the match where it is. Pending steps are cancelled."""
        if self._abandoned or self.context.is_over:
            return
        self._abandoned = True
        if self._pending_task is not None:
            self.scheduler.cancel(self._pending_task)
            self._pending_task = None
        self._emit_log("Match abandoned", category="SYSTEM")

    # ============== Player turn ==============

    def _begin_player_turn(self) -> None:
        self.context.turn += 1
        # Cleared before the transition: hosts may submit from MatchStateChanged
        self.context.action_in_progress = False
        self.state_manager.transition(MatchTrigger.PLAYER_TURN_READY)

        self._emit_log("Your turn. Choose an action!", category="TURN")
        self._publish_stats()
        self.event_manager.publish_immediate(
            TurnStarted(
                turn=self.context.turn,
                side=Side.PLAYER,
                available_skills=tuple(self.available_skills()),
            ),
            source="CombatEngine"
        )

    def _rejection_reason(self, skill: Optional[SkillTemplate]) -> Optional[str]:
        if self._abandoned:
            return "match was abandoned"
        if self.context.state != MatchState.PLAYER_TURN:
            return f"not the player's turn (state: {self.context.state.name})"
        if self.context.action_in_progress:
            return "an action is already being resolved"
        if not isinstance(skill, SkillTemplate):
            return "no skill given"

        is_basic = skill is self.context.basic_attack(Side.PLAYER)
        player = self.context.combatant(Side.PLAYER)
        if not is_basic and not player.owns_skill(skill):
            return f"'{skill.name}' is not one of the player's skills"
        if not is_basic and not self._player_can_use(skill):
            return f"not enough mana for '{skill.name}'"
        return None

    def submit_player_action(self, skill: SkillTemplate) -> bool:
        """Submit the player's action for this turn.

        Args:
            skill: The player's basic attack or one of their template skills

        Returns:
            True if accepted; False if rejected, in which case nothing changed
        """
        reason = self._rejection_reason(skill)
        if reason is not None:
            skill_name = skill.name if isinstance(skill, SkillTemplate) else None
            self._emit_log(f"Rejected player action: {reason}", category="DEBUG", level="DEBUG")
            self.event_manager.publish_immediate(
                ActionRejected(turn=self.context.turn, skill_name=skill_name, reason=reason),
                source="CombatEngine"
            )
            return False

        self.context.action_in_progress = True
        self.resolver.announce(Side.PLAYER, skill)
        self._schedule(
            self.config.pre_hit_delay,
            lambda: self._land_player_action(skill),
            f"player {skill.name} lands",
        )
        return True

    def _land_player_action(self, skill: SkillTemplate) -> ActionResult:
        is_basic = self.resolver.is_basic_attack(Side.PLAYER, skill)
        result = self.resolver.apply(
            Side.PLAYER,
            skill,
            charge_mana=self.config.player_pays_mana and not is_basic,
        )

        if not self.context.combatant(Side.ENEMY).is_alive:
            self._end_match(player_won=True)
            return result

        self.state_manager.transition(MatchTrigger.PLAYER_ACTION_RESOLVED)
        self._emit_log("Enemy's turn...", category="TURN")
        self.event_manager.publish_immediate(
            TurnStarted(turn=self.context.turn, side=Side.ENEMY),
            source="CombatEngine"
        )
        self._schedule(
            self.config.post_action_delay + self.config.enemy_think_delay,
            self._take_enemy_action,
            "enemy chooses an action",
        )
        return result

    # ============== Enemy turn ==============

    def _take_enemy_action(self) -> None:
        enemy = self.context.combatant(Side.ENEMY)
        decision = self.ai_behavior.choose_action(enemy, self.context.basic_attack(Side.ENEMY), self.rng)
        self._emit_log(
            f"{self.ai_behavior.get_behavior_name()}: {decision.reasoning}",
            category="AI",
            level="DEBUG",
        )
        if decision.used_basic_attack:
            self._emit_log(f"{enemy.name} prepares a basic attack.")

        skill = decision.skill
        self.resolver.announce(Side.ENEMY, skill)
        self._schedule(
            self.config.pre_hit_delay,
            lambda: self._land_enemy_action(skill),
            f"enemy {skill.name} lands",
        )

    def _land_enemy_action(self, skill: SkillTemplate) -> ActionResult:
        result = self.resolver.apply(Side.ENEMY, skill, charge_mana=True)

        if not self.context.combatant(Side.PLAYER).is_alive:
            self._end_match(player_won=False)
            return result

        self._schedule(self.config.post_action_delay, self._begin_player_turn, "next player turn")
        return result

    # ============== Termination ==============

    def _end_match(self, player_won: bool) -> None:
        if player_won:
            self.state_manager.transition(MatchTrigger.ENEMY_DEFEATED)
            message, defeated_side = VICTORY_MESSAGE, Side.ENEMY
        else:
            self.state_manager.transition(MatchTrigger.PLAYER_DEFEATED)
            message, defeated_side = DEFEAT_MESSAGE, Side.PLAYER

        self.context.action_in_progress = False
        self.context.outcome_message = message
        self._pending_task = None

        self._emit_log(message)
        self.event_manager.publish_immediate(
            MatchEnded(
                turn=self.context.turn,
                result=self.context.state,
                defeated_side=defeated_side,
                message=message,
            ),
            source="CombatEngine"
        )
