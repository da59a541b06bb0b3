"""Combatant entities.

This package contains runtime combatants and the templates they come from:
- combatant.py: Runtime combatant with clamped health and mana
- combatant_factory.py: Template -> combatant instantiation
- template_loader.py: YAML roster of skills and combatant templates
"""

from .combatant import Combatant
from .combatant_factory import CombatantFactory
from .template_loader import Roster, Matchup, load_roster, parse_roster

__all__ = [
    "Combatant",
    "CombatantFactory",
    "Roster",
    "Matchup",
    "load_roster",
    "parse_roster",
]
