"""Symptom Smart: Configuration loading"""
import yaml
from pathlib import Path
from .settings import SymptomSmartConfig


def save_yaml(config: SymptomSmartConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_config(config: SymptomSmartConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> SymptomSmartConfig:
    return SymptomSmartConfig.from_dict(load_yaml(path))
