"""
UOCPlay subscriptions core.

Stable public import path is `uocplay.*`; sources live under `backend/`.
Heavy submodules are imported lazily so `import uocplay` stays cheap and does
not read `.env` until configuration is actually needed.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple

__version__ = "0.1.0"

_LAZY_IMPORTS: Dict[str, Tuple[str, str]] = {
    # ============ 1. Domain ============
    "Film": ("uocplay.domain", "Film"),
    "FilmGenre": ("uocplay.domain", "FilmGenre"),
    "Person": ("uocplay.domain", "Person"),
    "Subscription": ("uocplay.domain", "Subscription"),
    "Watchlist": ("uocplay.domain", "Watchlist"),
    # ============ 2. Collection and analytics ============
    "ApiStatus": ("uocplay.subscriptions", "ApiStatus"),
    "SubscriptionCollection": ("uocplay.subscriptions", "SubscriptionCollection"),
    "loyalty_tier": ("uocplay.subscriptions", "loyalty_tier"),
    "popular_film": ("uocplay.subscriptions", "popular_film"),
    "subscriptions_for_document": ("uocplay.subscriptions", "subscriptions_for_document"),
    "update_loyalty_tiers": ("uocplay.subscriptions", "update_loyalty_tiers"),
    # ============ 3. Collaborators ============
    "InMemoryPeople": ("uocplay.people", "InMemoryPeople"),
    "format_subscription": ("uocplay.io", "format_subscription"),
    "parse_subscription": ("uocplay.io", "parse_subscription"),
    "parse_subscription_line": ("uocplay.io", "parse_subscription_line"),
}


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = import_module(module_path)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> Any:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))


__all__ = ["__version__", *_LAZY_IMPORTS.keys()]
