from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

SCORING_CONFIG_PATH = Path(__file__).resolve().with_name("scoring.yaml")


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    """Parse the packaged scoring table once per process."""
    try:
        parsed = yaml.safe_load(SCORING_CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise RuntimeError(f"Cannot load scoring config '{SCORING_CONFIG_PATH}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Scoring config '{SCORING_CONFIG_PATH}' must be a mapping.")
    return parsed


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up a dotted key such as ``keywords.suggestion_preview``."""
    if not path:
        return default
    node: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def format_penalty(name: str, default: int = 0) -> int:
    """Points deducted from the format score for the named completeness gap."""
    penalties = get_scoring_value("format.penalties", {})
    if not isinstance(penalties, dict):
        return default
    return int(penalties.get(name, default))
