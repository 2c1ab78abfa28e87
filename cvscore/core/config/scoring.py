from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from cvscore.core.config import settings

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"


class ScoringConfigError(RuntimeError):
    pass


def scoring_config_path() -> Path:
    if settings.scoring_config_path:
        return Path(settings.scoring_config_path)
    return _DEFAULT_SCORING_CONFIG_PATH


def load_scoring_config(path: str | Path) -> dict[str, Any]:
    """Read and validate a scoring YAML file without touching the cache."""
    config_path = Path(path)
    if not config_path.exists():
        raise ScoringConfigError(
            f"Scoring config not found at '{config_path}'. "
            "Expected file: config/scoring.yaml"
        )

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScoringConfigError(
            f"Failed to read scoring config '{config_path}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ScoringConfigError(
            f"Invalid YAML in scoring config '{config_path}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise ScoringConfigError(
            f"Invalid scoring config '{config_path}': expected a top-level mapping."
        )
    return parsed


def get_scoring_config() -> dict[str, Any]:
    """Load scoring config from repo-level config/scoring.yaml and cache it."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    _SCORING_CONFIG_CACHE = load_scoring_config(scoring_config_path())
    return _SCORING_CONFIG_CACHE


def lookup_value(config: dict[str, Any], path: str, default: Any = None) -> Any:
    if not path:
        return default

    current: Any = config
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'aggregate.weights.content'.

    Typed access goes through ``load_scoring_constants``; this is the untyped
    lookup for ad-hoc keys and config checks.
    """
    return lookup_value(get_scoring_config(), path, default)
