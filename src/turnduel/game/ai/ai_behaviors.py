"""AI Behavior Strategy Classes

This module implements the Strategy design pattern for enemy AI behaviors.
Each behavior picks the skill the enemy uses on its turn. Randomness is
always drawn from the ``random.Random`` instance passed in, so tests can
seed or mock it.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.data import SkillTemplate
    from ..entities.combatant import Combatant


class AIType(Enum):
    """Available AI behavior types."""
    COIN_FLIP = auto()
    BASIC_ATTACK_ONLY = auto()


@dataclass(frozen=True)
class AIDecision:
    """Represents an AI decision with reasoning."""
    skill: "SkillTemplate"
    used_basic_attack: bool
    reasoning: str = ""


class AIBehavior(ABC):
    """Abstract base class for AI behavior strategies."""

    @abstractmethod
    def choose_action(
        self,
        actor: "Combatant",
        basic_attack: "SkillTemplate",
        rng: random.Random
    ) -> AIDecision:
        """Choose the skill for this turn.

        Args:
            actor: The combatant making the decision
            basic_attack: The actor's always-usable basic attack
            rng: Source of randomness

        Returns:
            AIDecision naming the chosen skill
        """
        pass

    @abstractmethod
    def get_behavior_name(self) -> str:
        """Get the name of this AI behavior."""
        pass


class CoinFlipAI(AIBehavior):
    """Flips a fair coin between the basic attack and a random affordable skill.

    With no affordable skill the basic attack is chosen without flipping.
    """

    def choose_action(self, actor: "Combatant", basic_attack: "SkillTemplate", rng: random.Random) -> AIDecision:
        usable = actor.usable_skills()

        if not usable:
            return AIDecision(
                skill=basic_attack,
                used_basic_attack=True,
                reasoning=f"No affordable skills with {actor.current_mana} mana"
            )

        if rng.randrange(2) == 0:
            return AIDecision(
                skill=basic_attack,
                used_basic_attack=True,
                reasoning="Coin flip chose the basic attack"
            )

        skill = rng.choice(usable)
        return AIDecision(
            skill=skill,
            used_basic_attack=False,
            reasoning=f"Coin flip chose a skill: {skill.name} out of {len(usable)} affordable"
        )

    def get_behavior_name(self) -> str:
        return "Coin Flip"


class BasicAttackOnlyAI(AIBehavior):
    """AI that always uses its basic attack."""

    def choose_action(self, actor: "Combatant", basic_attack: "SkillTemplate", rng: random.Random) -> AIDecision:
        return AIDecision(
            skill=basic_attack,
            used_basic_attack=True,
            reasoning="Basic-attack-only AI"
        )

    def get_behavior_name(self) -> str:
        return "Basic Attack Only"


def create_ai_behavior(ai_type: AIType) -> AIBehavior:
    """Factory function to create AI behavior instances.

    Raises:
        ValueError: If ai_type is not supported
    """
    if ai_type == AIType.COIN_FLIP:
        return CoinFlipAI()
    elif ai_type == AIType.BASIC_ATTACK_ONLY:
        return BasicAttackOnlyAI()
    else:
        raise ValueError(f"Unsupported AI type: {ai_type}")


def ai_type_from_name(name: str) -> AIType:
    """Convert a config name such as ``"coin_flip"`` to an AIType.

    Raises:
        ValueError: If the name is not a known behavior
    """
    try:
        return AIType[name.upper()]
    except KeyError:
        known = ", ".join(t.name for t in AIType)
        raise ValueError(f"Unknown AI behavior '{name}' (expected one of: {known})")
