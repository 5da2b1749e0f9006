from uocplay.subscriptions.analytics import (
    loyalty_tier,
    popular_film,
    subscriptions_for_document,
    update_loyalty_tiers,
)
from uocplay.subscriptions.collection import SubscriptionCollection
from uocplay.subscriptions.status import ApiStatus

__all__ = [
    "ApiStatus",
    "SubscriptionCollection",
    "loyalty_tier",
    "popular_film",
    "subscriptions_for_document",
    "update_loyalty_tiers",
]
