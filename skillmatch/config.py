"""Load settings and env configuration."""
from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from skillmatch.log import get_logger

log = get_logger(__name__)

load_dotenv()

PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = PROJECT_ROOT / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
REPORTS_DIR: Path = PROJECT_ROOT / "reports"

DEFAULT_SETTINGS: dict[str, Any] = {
    "matching": {
        "min_score": 0,
        "high_score_threshold": 85,
        "tiers": {"strong": 80, "good": 60, "fair": 40},
    },
    "recommendations": {
        "max_items": 3,
    },
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict):
            # empty section, e.g. "matching:" with every key commented out
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ValueError(f"Settings section {key!r} must be a mapping")
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def settings_path() -> Path:
    override = get_env("SKILLMATCH_SETTINGS")
    return Path(override) if override else SETTINGS_PATH


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Built-in defaults overlaid with the YAML settings file, if present."""
    path = path or settings_path()
    if not path.exists():
        log.debug("No settings file at %s, using defaults", path)
        return copy.deepcopy(DEFAULT_SETTINGS)

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")

    log.debug("Loaded settings from %s", path)
    return _merge(DEFAULT_SETTINGS, data)
