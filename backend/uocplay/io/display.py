from __future__ import annotations

from datetime import date

from uocplay.domain.subscription import Subscription


def format_date(value: date) -> str:
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def format_subscription(subscription: Subscription) -> str:
    """Render `id;document;start;end;plan;price;devices`."""
    return ";".join(
        [
            str(subscription.id),
            subscription.document,
            format_date(subscription.start_date),
            format_date(subscription.end_date),
            subscription.plan,
            f"{subscription.price:g}",
            str(subscription.num_devices),
        ]
    )
