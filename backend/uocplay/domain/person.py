from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Person:
    document: str
    name: str = ""
    surname: str = ""
    email: Optional[str] = None
    # Recomputed from subscription spend, see update_loyalty_tiers.
    vip_level: int = 0
