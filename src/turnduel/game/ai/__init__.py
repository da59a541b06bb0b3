"""AI system components.

This package contains enemy decision-making:
- ai_behaviors.py: AI behavior strategies and their factory
"""

from .ai_behaviors import (
    AIBehavior,
    AIDecision,
    AIType,
    BasicAttackOnlyAI,
    CoinFlipAI,
    ai_type_from_name,
    create_ai_behavior,
)

__all__ = [
    "AIBehavior",
    "AIDecision",
    "AIType",
    "BasicAttackOnlyAI",
    "CoinFlipAI",
    "ai_type_from_name",
    "create_ai_behavior",
]
