from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from uocplay.config import settings

_RULES_CACHE: Dict[str, Any] | None = None


def _load_rules(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    return data if isinstance(data, dict) else {}


def _normalize_rules(data: Dict[str, Any]) -> Dict[str, Any]:
    rules = data.get("loyalty", {})
    if not isinstance(rules, dict):
        rules = {}

    spend = rules.get("spend_per_tier", settings.DEFAULT_SPEND_PER_TIER)
    try:
        spend = float(spend)
    except (TypeError, ValueError):
        spend = settings.DEFAULT_SPEND_PER_TIER
    if spend <= 0:
        spend = settings.DEFAULT_SPEND_PER_TIER

    return {"spend_per_tier": spend}


def load_loyalty_rules(path: Path | None = None) -> Dict[str, Any]:
    resolved_path = path if path is not None else settings.LOYALTY_RULES_PATH
    return _normalize_rules(_load_rules(resolved_path))


def get_loyalty_rules(
    reload: bool | None = None,
    path: Path | None = None,
) -> Dict[str, Any]:
    global _RULES_CACHE
    should_reload = settings.LOYALTY_RULES_RELOAD if reload is None else reload
    if _RULES_CACHE is None or should_reload:
        _RULES_CACHE = load_loyalty_rules(path)
    return _RULES_CACHE


def get_spend_per_tier() -> float:
    return float(get_loyalty_rules()["spend_per_tier"])


__all__ = [
    "load_loyalty_rules",
    "get_loyalty_rules",
    "get_spend_per_tier",
]
