"""Symptom Smart: Configuration module"""
from .settings import (
    SymptomSmartConfig,
    get_default_config,
    MatcherConfig,
    IntakeConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "SymptomSmartConfig",
    "get_default_config",
    "MatcherConfig",
    "IntakeConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
