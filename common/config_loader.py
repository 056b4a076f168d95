from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict
import yaml

DEFAULT_CONFIG_PATH = "config/bullboard.yaml"
MIXED_CURRENCY_POLICIES = ("error", "first")

def load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

@dataclass(frozen=True)
class LoadedConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def currency(self) -> str:
        return str((self.raw.get("dashboard") or {}).get("currency", "USD"))

    @property
    def mixed_currency(self) -> str:
        policy = str((self.raw.get("dashboard") or {}).get("mixed_currency", "error"))
        if policy not in MIXED_CURRENCY_POLICIES:
            raise ValueError(f"mixed_currency must be one of {MIXED_CURRENCY_POLICIES}, got {policy!r}")
        return policy

    @property
    def journal_path(self) -> str:
        return str((self.raw.get("journal") or {}).get("path", "data/journal.csv"))

    @property
    def log_level(self) -> str:
        return str((self.raw.get("logging") or {}).get("level", "INFO")).upper()

def load_all(config_path: str | Path = DEFAULT_CONFIG_PATH) -> LoadedConfig:
    try:
        raw = load_yaml(config_path)
    except FileNotFoundError:
        raw = {}
    return LoadedConfig(raw=raw)
