"""Static definitions and value objects shared across the engine.

Data Flow:
1. SkillTemplate / CombatantTemplate (configuration) -> Combatant (match logic)
2. Combatant -> StatsSnapshot / SkillOption (presentation payloads)

Templates are immutable and shared by reference. Skills compare by identity,
so two skills with identical numbers are still distinct actions.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .game_enums import SkillType, TargetType


class ValidationMixin:
    """Mixin providing validation utilities for data structures."""

    def validate_required_fields(self, required_fields: list[str]) -> bool:
        """Validate that all required fields are present and non-None."""
        for name in required_fields:
            if not hasattr(self, name) or getattr(self, name) is None:
                return False
        return True

    @staticmethod
    def validate_non_negative(value: object) -> bool:
        """Validate that a value is a non-negative integer (bools excluded)."""
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True, eq=False)
class SkillTemplate(ValidationMixin):
    """A named action with power, mana cost and target type."""
    name: str = "New Skill"
    power: int = 10
    mana_cost: int = 0
    target_type: TargetType = TargetType.SINGLE_ENEMY
    skill_type: SkillType = SkillType.ATTACK

    def validate(self) -> list[str]:
        """Return a list of problems with this skill (empty when valid)."""
        errors = []
        if not self.validate_required_fields(["name", "target_type", "skill_type"]):
            errors.append("skill is missing required fields")
        if not self.name:
            errors.append("skill name must not be empty")
        if not self.validate_non_negative(self.power):
            errors.append(f"skill '{self.name}' power must be a non-negative integer")
        if not self.validate_non_negative(self.mana_cost):
            errors.append(f"skill '{self.name}' mana cost must be a non-negative integer")
        if not isinstance(self.target_type, TargetType):
            errors.append(f"skill '{self.name}' has invalid target type: {self.target_type!r}")
        return errors


@dataclass(frozen=True, eq=False)
class CombatantTemplate(ValidationMixin):
    """Static character definition authored in configuration.

    Skill order is significant: it is the action-slot order shown to the host.
    """
    name: str = "New Character"
    max_health: int = 100
    max_mana: int = 50
    skills: Sequence[SkillTemplate] = field(default_factory=tuple)

    def __post_init__(self):
        # Freeze the skill list so every runtime instance can share it safely
        object.__setattr__(self, 'skills', tuple(self.skills))

    def validate(self) -> list[str]:
        """Return a list of problems with this template (empty when valid)."""
        errors = []
        if not self.name:
            errors.append("combatant name must not be empty")
        if not self.validate_non_negative(self.max_health) or self.max_health == 0:
            errors.append(f"combatant '{self.name}' max health must be a positive integer")
        if not self.validate_non_negative(self.max_mana):
            errors.append(f"combatant '{self.name}' max mana must be a non-negative integer")
        for skill in self.skills:
            if not isinstance(skill, SkillTemplate):
                errors.append(f"combatant '{self.name}' has a non-skill entry: {skill!r}")
                continue
            errors.extend(skill.validate())
        return errors

    def find_skill(self, name: str) -> Optional[SkillTemplate]:
        """Find a skill by name, or None."""
        for skill in self.skills:
            if skill.name == name:
                return skill
        return None


@dataclass(frozen=True)
class StatsSnapshot:
    """Health and mana of one combatant at a point in time."""
    hp: int
    max_hp: int
    mana: int
    max_mana: int

    def format(self) -> str:
        return f"HP: {self.hp} / {self.max_hp}\nMP: {self.mana} / {self.max_mana}"


@dataclass(frozen=True)
class SkillOption:
    """One entry of the player's action menu."""
    name: str
    usable: bool
    skill: SkillTemplate
