from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# `.env` in the working directory wins over the shell environment so that
# local overrides are picked up consistently.
load_dotenv(override=True)


def _get_env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer, got {raw!r}") from exc


def _get_env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_path(key: str, default: Path) -> Path:
    raw: Optional[str] = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


CONFIG_DIR = Path(__file__).resolve().parent

# ===== Subscription record layout =====

NUM_FIELDS_SUBSCRIPTION = 7
DOCUMENT_LENGTH = _get_env_int("UOCPLAY_DOCUMENT_LENGTH", 9)
MAX_PLAN_LENGTH = _get_env_int("UOCPLAY_MAX_PLAN_LENGTH", 10)

DATE_LENGTH = 10  # DD/MM/YYYY
DATE_FORMAT = "%d/%m/%Y"

# ===== Loyalty tiers =====

DEFAULT_SPEND_PER_TIER = 500.0
LOYALTY_RULES_PATH = _get_env_path("UOCPLAY_LOYALTY_RULES_PATH", CONFIG_DIR / "loyalty.yaml")
LOYALTY_RULES_RELOAD = _get_env_bool("UOCPLAY_LOYALTY_RULES_RELOAD", False)


__all__ = [
    "NUM_FIELDS_SUBSCRIPTION",
    "DOCUMENT_LENGTH",
    "MAX_PLAN_LENGTH",
    "DATE_LENGTH",
    "DATE_FORMAT",
    "DEFAULT_SPEND_PER_TIER",
    "LOYALTY_RULES_PATH",
    "LOYALTY_RULES_RELOAD",
]
