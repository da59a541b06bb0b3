"""Match logic: combatants, AI, action resolution and the engine that ties them together."""

from .combat_engine import CombatEngine, VICTORY_MESSAGE, DEFEAT_MESSAGE

__all__ = [
    "CombatEngine",
    "VICTORY_MESSAGE",
    "DEFEAT_MESSAGE",
]
