"""
Configuration loader for engine settings.

This module handles loading and parsing of the YAML file that tunes match
pacing, AI behavior and logging. Every key is optional; missing keys keep
their defaults.
"""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

DEFAULT_CONFIG_PATH = "assets/config/engine.yaml"

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class EngineConfig:
    """Tunable engine settings.

    Delays are in seconds and only pace the presentation; a headless host
    can leave them as they are and use an ``ImmediateScheduler``.
    """

    start_delay: float = 1.5
    pre_hit_delay: float = 0.5
    post_action_delay: float = 1.0
    enemy_think_delay: float = 1.5
    ai_behavior: str = "COIN_FLIP"
    player_pays_mana: bool = False
    log_level: str = "INFO"
    max_log_messages: int = 1000

    def validate(self) -> list[str]:
        """Return a list of problems with these settings (empty when valid)."""
        errors = []
        for name in ("start_delay", "pre_hit_delay", "post_action_delay", "enemy_think_delay"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                errors.append(f"{name} must be a non-negative number, got {value!r}")
        if not isinstance(self.ai_behavior, str) or not self.ai_behavior:
            errors.append(f"ai_behavior must be a behavior name, got {self.ai_behavior!r}")
        if not isinstance(self.player_pays_mana, bool):
            errors.append(f"player_pays_mana must be true or false, got {self.player_pays_mana!r}")
        if self.log_level not in LOG_LEVEL_NAMES:
            errors.append(f"log_level must be one of {', '.join(LOG_LEVEL_NAMES)}, got {self.log_level!r}")
        if isinstance(self.max_log_messages, bool) or not isinstance(self.max_log_messages, int) \
                or self.max_log_messages <= 0:
            errors.append(f"max_log_messages must be a positive integer, got {self.max_log_messages!r}")
        return errors

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EngineConfig":
        """Build a config from a mapping, rejecting unknown keys and bad values.

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown engine config keys: {', '.join(unknown)}")

        values = dict(data)
        if isinstance(values.get("ai_behavior"), str):
            values["ai_behavior"] = values["ai_behavior"].upper()
        if isinstance(values.get("log_level"), str):
            values["log_level"] = values["log_level"].upper()

        config = cls(**values)
        errors = config.validate()
        if errors:
            raise ValueError("Invalid engine config: " + "; ".join(errors))
        return config


def _resolve_path(config_path: str) -> Path:
    if os.path.isabs(config_path):
        return Path(config_path)
    # Relative paths are relative to the project root
    project_root = Path(__file__).resolve().parent.parent.parent.parent
    return project_root / config_path


def load_engine_config(config_path: Optional[str] = None) -> EngineConfig:
    """Load engine settings from YAML.

    Args:
        config_path: Path to the YAML file. When omitted the default file is
            used if present, otherwise built-in defaults are returned.

    Returns:
        EngineConfig with file values applied over the defaults

    Raises:
        FileNotFoundError: If an explicitly given file does not exist
        ValueError: If the file cannot be parsed or holds invalid values
    """
    config_file = _resolve_path(config_path or DEFAULT_CONFIG_PATH)

    if not config_file.exists():
        if config_path is None:
            return EngineConfig()
        raise FileNotFoundError(f"Engine config file not found: {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse engine config {config_file}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Engine config {config_file} must be a mapping")

    # Settings may sit at the top level or under an ``engine:`` section
    section = data.get("engine", data)
    if not isinstance(section, dict):
        raise ValueError(f"'engine' section in {config_file} must be a mapping")
    return EngineConfig.from_dict(section)
