"""
Basic test fixtures for the turnduel test suite.

Provides engine building blocks and small, predictable combatant templates.
"""

import sys
import os
import random
import pytest

# Add the source root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(project_root, "src"))

from turnduel.core.config import EngineConfig
from turnduel.core.data import CombatantTemplate, SkillTemplate, TargetType
from turnduel.core.engine import ManualScheduler, MatchContext
from turnduel.core.events import EventManager
from turnduel.game.combat_engine import CombatEngine
from turnduel.game.entities import CombatantFactory


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def scheduler():
    """Create a virtual-clock scheduler for testing."""
    return ManualScheduler()


@pytest.fixture
def rng():
    """Seeded random source so AI decisions are reproducible."""
    return random.Random(1234)


@pytest.fixture
def basic_attack():
    return SkillTemplate(name="Attack", power=10, mana_cost=0)


@pytest.fixture
def enemy_basic_attack():
    return SkillTemplate(name="Claw", power=5, mana_cost=0)


@pytest.fixture
def fireball():
    return SkillTemplate(name="Fireball", power=25, mana_cost=10)


@pytest.fixture
def heal():
    return SkillTemplate(name="Heal", power=0, mana_cost=5, target_type=TargetType.SELF)


@pytest.fixture
def hero_template(fireball, heal):
    """Player template: 100 HP, 50 MP, Fireball and an inert Heal."""
    return CombatantTemplate(name="Hero", max_health=100, max_mana=50, skills=[fireball, heal])


@pytest.fixture
def goblin_template():
    """Enemy template without skills: 30 HP, 0 MP."""
    return CombatantTemplate(name="Goblin", max_health=30, max_mana=0, skills=[])


@pytest.fixture
def match_context(hero_template, goblin_template, basic_attack, enemy_basic_attack):
    """A context with both combatants in place, as after ``begin_match``."""
    return MatchContext(
        player=CombatantFactory.instantiate(hero_template),
        enemy=CombatantFactory.instantiate(goblin_template),
        player_basic_attack=basic_attack,
        enemy_basic_attack=enemy_basic_attack,
    )


@pytest.fixture
def zero_delay_config():
    return EngineConfig(start_delay=0, pre_hit_delay=0, post_action_delay=0, enemy_think_delay=0)


@pytest.fixture
def engine(event_manager, scheduler, rng):
    """Engine with default pacing on a manual clock."""
    return CombatEngine(event_manager=event_manager, scheduler=scheduler, rng=rng)
