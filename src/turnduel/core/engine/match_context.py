"""Engine-owned match state.

``MatchContext`` is the whole shared resource set of a running match: the
current ``MatchState``, the two runtime combatants and the designated basic
attacks. Only the engine and its managers mutate it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from ..data import MatchState, Side, SkillTemplate, StatsSnapshot

if TYPE_CHECKING:
    from ...game.entities.combatant import Combatant


@dataclass
class MatchContext:
    """Mutable state of one match."""

    state: MatchState = MatchState.STARTING
    turn: int = 0
    player: Optional["Combatant"] = None
    enemy: Optional["Combatant"] = None
    player_basic_attack: Optional[SkillTemplate] = None
    enemy_basic_attack: Optional[SkillTemplate] = None
    action_in_progress: bool = False
    outcome_message: Optional[str] = None
    history: list[str] = field(default_factory=list)  # State names in transition order

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    @property
    def has_combatants(self) -> bool:
        return self.player is not None and self.enemy is not None

    def combatant(self, side: Side) -> "Combatant":
        """Get the combatant fighting for ``side``."""
        combatant = self.player if side == Side.PLAYER else self.enemy
        if combatant is None:
            raise RuntimeError("Match has not started")
        return combatant

    def opponent(self, side: Side) -> "Combatant":
        return self.combatant(Side.ENEMY if side == Side.PLAYER else Side.PLAYER)

    def basic_attack(self, side: Side) -> SkillTemplate:
        skill = self.player_basic_attack if side == Side.PLAYER else self.enemy_basic_attack
        if skill is None:
            raise RuntimeError("Match has not started")
        return skill

    def snapshot(self) -> tuple[StatsSnapshot, StatsSnapshot]:
        """Current stats of (player, enemy)."""
        return self.combatant(Side.PLAYER).snapshot(), self.combatant(Side.ENEMY).snapshot()
