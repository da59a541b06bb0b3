"""Runtime battle participant.

A ``Combatant`` is created once per match from a ``CombatantTemplate`` and is
mutated only by the engine's resolution step. Health and mana are clamped
to ``0..max`` on every write, so no debit can drive them negative.
"""

from typing import Sequence

from ...core.data import SkillTemplate, StatsSnapshot


class Combatant:
    """Runtime combatant with clamped health and mana.

    The skill list is the template's own sequence, shared and never copied.

    Examples:
        combatant.current_health -= 15   # clamped at 0
        if combatant.is_alive and combatant.can_afford(skill):
            ...
    """

    def __init__(
        self,
        name: str,
        max_health: int,
        max_mana: int,
        skills: Sequence[SkillTemplate],
    ):
        self.name = name
        self.max_health = max_health
        self.max_mana = max_mana
        self.skills = skills
        self._current_health = max_health
        self._current_mana = max_mana

    @property
    def current_health(self) -> int:
        return self._current_health

    @current_health.setter
    def current_health(self, value: int) -> None:
        self._current_health = max(0, min(self.max_health, value))

    @property
    def current_mana(self) -> int:
        return self._current_mana

    @current_mana.setter
    def current_mana(self, value: int) -> None:
        self._current_mana = max(0, min(self.max_mana, value))

    @property
    def is_alive(self) -> bool:
        return self._current_health > 0

    def take_damage(self, amount: int) -> int:
        """Apply damage and return how much health was actually lost."""
        before = self._current_health
        self.current_health = before - amount
        return before - self._current_health

    def spend_mana(self, amount: int) -> int:
        """Debit mana and return how much was actually spent."""
        before = self._current_mana
        self.current_mana = before - amount
        return before - self._current_mana

    def can_afford(self, skill: SkillTemplate) -> bool:
        return skill.mana_cost <= self._current_mana

    def usable_skills(self) -> list[SkillTemplate]:
        """Skills whose mana cost the combatant can currently pay, in slot order."""
        return [skill for skill in self.skills if self.can_afford(skill)]

    def owns_skill(self, skill: SkillTemplate) -> bool:
        """Identity check against the shared skill list."""
        return any(own is skill for own in self.skills)

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            hp=self._current_health,
            max_hp=self.max_health,
            mana=self._current_mana,
            max_mana=self.max_mana,
        )

    def __repr__(self) -> str:
        return (
            f"Combatant({self.name!r}, hp={self._current_health}/{self.max_health}, "
            f"mana={self._current_mana}/{self.max_mana})"
        )
