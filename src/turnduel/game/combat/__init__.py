"""Combat resolution.

- action_resolver.py: Mana debit, damage application and result reporting
"""

from .action_resolver import ActionResolver, ActionResult

__all__ = [
    "ActionResolver",
    "ActionResult",
]
