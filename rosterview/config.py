"""Load and validate configuration from JSON or YAML."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml


@dataclass
class RosterConfig:
    db_url: str = "sqlite:///rosterview.db"
    tenant_id: str = "default"
    seed_demo: bool = False
    date_format: str = "%Y.%m.%d"  # display format for dates and week ranges


def _read(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text) if text.strip() else {}
    elif path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    else:
        raise ValueError(f"Unsupported config format: {path.suffix}")
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return data


def load_config(path: str | Path | None = None) -> RosterConfig:
    """
    Load configuration, falling back to defaults for missing keys.

    Args:
        path: JSON or YAML file; None returns the defaults

    Raises:
        FileNotFoundError: If ``path`` does not exist
        ValueError: On unknown keys or wrongly typed values
    """
    if path is None:
        return RosterConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    data = _read(path)

    known = {f.name: f for f in fields(RosterConfig)}
    unknown = set(data) - set(known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(sorted(unknown))}")

    cfg = RosterConfig(**data)
    if not isinstance(cfg.seed_demo, bool):
        raise ValueError("seed_demo must be true or false")
    for name in ("db_url", "tenant_id", "date_format"):
        value = getattr(cfg, name)
        if not isinstance(value, str) or not value:
            raise ValueError(f"{name} must be a non-empty string")
    return cfg
