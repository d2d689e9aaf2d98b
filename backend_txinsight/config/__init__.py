"""
Configuration management for Backend TxInsight.

Loads settings from environment variables and an optional .env file and
exposes them as explicit values passed to the components at construction.
"""

from backend_txinsight.config.settings import (  # noqa: F401
    GenerationConfig,
    GenerationParams,
    Settings,
    get_settings,
    load_generation_config,
)

__all__ = [
    "GenerationConfig",
    "GenerationParams",
    "Settings",
    "get_settings",
    "load_generation_config",
]
