"""Combatant and skill templates authored in YAML.

A roster file has a ``skills`` map and a ``combatants`` map. Combatants list
their skills by key, so every combatant that names a skill shares the same
``SkillTemplate`` object::

    skills:
      slash: {name: Slash, power: 10}
      fireball: {name: Fireball, power: 25, mana_cost: 10, target_type: single_enemy}
    combatants:
      hero:
        name: Hero
        max_health: 100
        max_mana: 50
        skills: [fireball]
        basic_attack: slash
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from ...core.data import CombatantTemplate, SkillTemplate, SkillType, TargetType
from ...core.engine.errors import TemplateLoadError

DEFAULT_ROSTER_PATH = "assets/data/combatants.yaml"


@dataclass
class Matchup:
    """Everything ``CombatEngine.begin_match`` needs."""
    player_template: CombatantTemplate
    enemy_template: CombatantTemplate
    player_basic_attack: SkillTemplate
    enemy_basic_attack: SkillTemplate


@dataclass
class Roster:
    """Skills and combatants loaded from one roster file."""
    skills: dict[str, SkillTemplate] = field(default_factory=dict)
    combatants: dict[str, CombatantTemplate] = field(default_factory=dict)
    basic_attacks: dict[str, SkillTemplate] = field(default_factory=dict)

    def get_template(self, key: str) -> CombatantTemplate:
        """Get a combatant template by roster key.

        Raises:
            KeyError: If the key is not in the roster
        """
        if key not in self.combatants:
            raise KeyError(f"No combatant template named '{key}'")
        return self.combatants[key]

    def get_basic_attack(self, key: str) -> SkillTemplate:
        if key not in self.basic_attacks:
            raise KeyError(f"Combatant '{key}' has no basic attack")
        return self.basic_attacks[key]

    def matchup(self, player_key: str, enemy_key: str) -> Matchup:
        return Matchup(
            player_template=self.get_template(player_key),
            enemy_template=self.get_template(enemy_key),
            player_basic_attack=self.get_basic_attack(player_key),
            enemy_basic_attack=self.get_basic_attack(enemy_key),
        )


def _parse_skill(key: str, data: Any, path: str) -> SkillTemplate:
    if not isinstance(data, dict):
        raise TemplateLoadError(path, f"skill '{key}' must be a mapping")

    try:
        target_type = TargetType(str(data.get("target_type", "single_enemy")).lower())
    except ValueError:
        raise TemplateLoadError(path, f"skill '{key}' has unknown target type: {data.get('target_type')!r}")

    try:
        skill_type = SkillType(str(data.get("skill_type", "attack")).lower())
    except ValueError:
        raise TemplateLoadError(path, f"skill '{key}' has unknown skill type: {data.get('skill_type')!r}")

    skill = SkillTemplate(
        name=data.get("name", key),
        power=data.get("power", 10),
        mana_cost=data.get("mana_cost", 0),
        target_type=target_type,
        skill_type=skill_type,
    )
    errors = skill.validate()
    if errors:
        raise TemplateLoadError(path, "; ".join(errors))
    return skill


def _lookup_skill(skills: dict[str, SkillTemplate], skill_key: str, owner: str, path: str) -> SkillTemplate:
    if skill_key not in skills:
        raise TemplateLoadError(path, f"combatant '{owner}' references unknown skill '{skill_key}'")
    return skills[skill_key]


def parse_roster(data: dict[str, Any], path: str = "<memory>") -> Roster:
    """Build a roster from already-parsed YAML data.

    Raises:
        TemplateLoadError: If the structure or any value is invalid
    """
    if not isinstance(data, dict):
        raise TemplateLoadError(path, "roster must be a mapping")

    roster = Roster()

    skills = data.get("skills") or {}
    if not isinstance(skills, dict):
        raise TemplateLoadError(path, "'skills' must be a mapping of skill keys to skills")

    for key, skill_data in skills.items():
        roster.skills[key] = _parse_skill(key, skill_data, path)

    combatants = data.get("combatants")
    if not combatants:
        raise TemplateLoadError(path, "roster defines no combatants")
    if not isinstance(combatants, dict):
        raise TemplateLoadError(path, "'combatants' must be a mapping of combatant keys to combatants")

    for key, entry in combatants.items():
        if not isinstance(entry, dict):
            raise TemplateLoadError(path, f"combatant '{key}' must be a mapping")

        skills = [_lookup_skill(roster.skills, skill_key, key, path) for skill_key in entry.get("skills", [])]
        template = CombatantTemplate(
            name=entry.get("name", key),
            max_health=entry.get("max_health", 100),
            max_mana=entry.get("max_mana", 50),
            skills=skills,
        )
        errors = template.validate()
        if errors:
            raise TemplateLoadError(path, "; ".join(errors))
        roster.combatants[key] = template

        basic_key = entry.get("basic_attack")
        if basic_key is None:
            raise TemplateLoadError(path, f"combatant '{key}' has no basic_attack")
        roster.basic_attacks[key] = _lookup_skill(roster.skills, basic_key, key, path)

    return roster


def load_roster(file_path: Optional[str] = None) -> Roster:
    """Load a roster from a YAML file.

    Args:
        file_path: Path to the roster. Relative paths resolve against the
            project root; defaults to the bundled roster.

    Raises:
        FileNotFoundError: If the file does not exist
        TemplateLoadError: If the file cannot be parsed or is invalid
    """
    roster_path = file_path or DEFAULT_ROSTER_PATH
    if not os.path.isabs(roster_path):
        project_root = Path(__file__).resolve().parent.parent.parent.parent.parent
        roster_path = str(project_root / roster_path)

    try:
        with open(roster_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Roster file not found: {roster_path}")
    except yaml.YAMLError as e:
        raise TemplateLoadError(roster_path, f"invalid YAML: {e}")

    return parse_roster(data, roster_path)
