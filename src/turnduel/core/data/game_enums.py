"""Centralized match enums and constants.

This module contains all core enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class Side(Enum):
    """The two sides of a duel."""
    PLAYER = 0
    ENEMY = 1


class TargetType(Enum):
    """Who a skill is aimed at.

    Only the enemy-targeting variants have an effect in the current ruleset.
    The ally and self variants are reserved for healing/buff skills.
    """
    SINGLE_ENEMY = "single_enemy"
    ALL_ENEMIES = "all_enemies"
    SINGLE_ALLY = "single_ally"
    ALL_ALLIES = "all_allies"
    SELF = "self"

    @property
    def targets_enemy(self) -> bool:
        return self in (TargetType.SINGLE_ENEMY, TargetType.ALL_ENEMIES)


class SkillType(Enum):
    """Fundamental skill categories."""
    ATTACK = "attack"


class MatchState(Enum):
    """Discrete phases of a match."""
    STARTING = auto()
    PLAYER_TURN = auto()
    ENEMY_TURN = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (MatchState.WON, MatchState.LOST)


class MatchTrigger(Enum):
    """Occurrences that drive match state transitions."""
    PLAYER_TURN_READY = auto()
    PLAYER_ACTION_RESOLVED = auto()
    ENEMY_DEFEATED = auto()
    PLAYER_DEFEATED = auto()


class CueKind(Enum):
    """Animation cue emitted before an action lands."""
    BASIC_ATTACK = auto()
    SKILL = auto()


SIDE_NAMES = {
    Side.PLAYER: "Player",
    Side.ENEMY: "Enemy",
}

TARGET_TYPE_NAMES = {
    TargetType.SINGLE_ENEMY: "Single Enemy",
    TargetType.ALL_ENEMIES: "All Enemies",
    TargetType.SINGLE_ALLY: "Single Ally",
    TargetType.ALL_ALLIES: "All Allies",
    TargetType.SELF: "Self",
}

MATCH_STATE_NAMES = {
    MatchState.STARTING: "Starting",
    MatchState.PLAYER_TURN: "Player Turn",
    MatchState.ENEMY_TURN: "Enemy Turn",
    MatchState.WON: "Won",
    MatchState.LOST: "Lost",
}
