"""
Unit tests for runtime combatants and their factory.
"""

from turnduel.core.data import CombatantTemplate, SkillTemplate, StatsSnapshot
from turnduel.game.entities import Combatant, CombatantFactory


class TestCombatantFactory:

    def test_instantiate_at_full_resources(self, hero_template):
        hero = CombatantFactory.instantiate(hero_template)

        assert hero.name == "Hero"
        assert hero.current_health == hero.max_health == 100
        assert hero.current_mana == hero.max_mana == 50

    def test_skills_are_shared_not_copied(self, hero_template):
        first = CombatantFactory.instantiate(hero_template)
        second = CombatantFactory.instantiate(hero_template)

        assert first.skills is hero_template.skills
        assert second.skills is hero_template.skills

    def test_instances_have_independent_resources(self, hero_template):
        first = CombatantFactory.instantiate(hero_template)
        second = CombatantFactory.instantiate(hero_template)

        first.take_damage(40)

        assert second.current_health == 100


class TestCombatant:
    """Test clamping and skill queries."""

    def make(self, health=30, mana=10, skills=()):
        return Combatant(name="Test", max_health=health, max_mana=mana, skills=tuple(skills))

    def test_damage_clamps_at_zero(self):
        combatant = self.make(health=30)

        lost = combatant.take_damage(45)

        assert combatant.current_health == 0
        assert lost == 30
        assert not combatant.is_alive

    def test_exact_lethal_damage(self):
        combatant = self.make(health=10)
        combatant.take_damage(10)
        assert not combatant.is_alive

    def test_health_never_exceeds_max(self):
        combatant = self.make(health=30)
        combatant.current_health = 500
        assert combatant.current_health == 30

    def test_spend_mana_clamps_at_zero(self):
        combatant = self.make(mana=5)

        spent = combatant.spend_mana(8)

        assert combatant.current_mana == 0
        assert spent == 5

    def test_usable_skills_filters_by_mana_in_slot_order(self):
        cheap = SkillTemplate(name="Cheap", mana_cost=2)
        pricey = SkillTemplate(name="Pricey", mana_cost=20)
        free = SkillTemplate(name="Free", mana_cost=0)
        combatant = self.make(mana=10, skills=[cheap, pricey, free])

        assert combatant.usable_skills() == [cheap, free]

        combatant.spend_mana(9)
        assert combatant.usable_skills() == [free]

    def test_cost_equal_to_mana_is_affordable(self):
        skill = SkillTemplate(name="Exact", mana_cost=10)
        assert self.make(mana=10).can_afford(skill)

    def test_owns_skill_is_identity(self):
        skill = SkillTemplate(name="Slash")
        lookalike = SkillTemplate(name="Slash")
        combatant = self.make(skills=[skill])

        assert combatant.owns_skill(skill)
        assert not combatant.owns_skill(lookalike)

    def test_snapshot(self):
        combatant = self.make(health=30, mana=10)
        combatant.take_damage(5)

        assert combatant.snapshot() == StatsSnapshot(hp=25, max_hp=30, mana=10, max_mana=10)

    def test_repr(self):
        assert "hp=30/30" in repr(self.make())


def test_template_skill_list_is_tuple():
    template = CombatantTemplate(name="X", skills=[SkillTemplate()])
    assert isinstance(CombatantFactory.instantiate(template).skills, tuple)
