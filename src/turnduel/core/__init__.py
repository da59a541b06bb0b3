"""Engine core: data definitions, the event bus, match state and configuration."""

from .config import EngineConfig, load_engine_config

__all__ = [
    "EngineConfig",
    "load_engine_config",
]
