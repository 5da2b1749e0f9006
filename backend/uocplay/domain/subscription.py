from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from uocplay.domain.watchlist import Watchlist


@dataclass
class Subscription:
    """A person's plan record.

    Equality only looks at the identity fields (document, dates, plan, price
    and device count). The id and the watchlist contents are ignored, which is
    what duplicate detection in a collection relies on.
    """

    id: int = field(compare=False)
    document: str
    start_date: date
    end_date: date
    plan: str
    price: float
    num_devices: int
    watchlist: Watchlist = field(default_factory=Watchlist, compare=False, repr=False)

    def copy(self) -> "Subscription":
        """Copy every scalar field and deep-copy the watchlist into a fresh one."""
        return Subscription(
            id=self.id,
            document=self.document,
            start_date=self.start_date,
            end_date=self.end_date,
            plan=self.plan,
            price=self.price,
            num_devices=self.num_devices,
            watchlist=self.watchlist.copy(),
        )

    def months_active(self) -> int:
        start, end = self.start_date, self.end_date
        months = (end.year - start.year) * 12 + (end.month - start.month)
        if end.day >= start.day:
            months += 1
        return months
