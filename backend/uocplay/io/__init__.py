"""Parsing and display collaborators for subscription records."""

from uocplay.io.display import format_date, format_subscription
from uocplay.io.parsing import SubscriptionRow, parse_date, parse_subscription, parse_subscription_line

__all__ = [
    "SubscriptionRow",
    "format_date",
    "format_subscription",
    "parse_date",
    "parse_subscription",
    "parse_subscription_line",
]
