"""Creation of runtime combatants from static templates."""

from ...core.data import CombatantTemplate
from .combatant import Combatant


class CombatantFactory:
    """Instantiates runtime combatants at full health and mana."""

    @staticmethod
    def instantiate(template: CombatantTemplate) -> Combatant:
        """Create a combatant from a template.

        The template is assumed valid. The combatant shares the template's
        skill sequence rather than copying it.

        Args:
            template: Static character definition

        Returns:
            Combatant with current health/mana at their maximums
        """
        return Combatant(
            name=template.name,
            max_health=template.max_health,
            max_mana=template.max_mana,
            skills=template.skills,
        )
