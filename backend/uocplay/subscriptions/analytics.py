"""Read-only aggregate queries over a subscription collection."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from uocplay.config.loyalty import get_spend_per_tier
from uocplay.domain.film import Film
from uocplay.domain.subscription import Subscription
from uocplay.ports.people import PeopleDirectory
from uocplay.subscriptions.collection import SubscriptionCollection
from uocplay.subscriptions.status import ApiStatus
from uocplay.utils import format_kv

logger = logging.getLogger(__name__)


@dataclass
class _FilmTally:
    film: Film
    count: int = 1


def popular_film(subscriptions: SubscriptionCollection) -> Optional[str]:
    """Return the name of the film found in most watchlists.

    Occurrences of the same film are counted together and the record with the
    newest release date is kept. Ties on the count go to the newer release;
    if the release dates are equal too, the film seen first wins.
    Returns None when there are no subscriptions or every watchlist is empty.
    """
    if len(subscriptions) == 0:
        return None

    # Insertion ordered: first-seen order breaks full ties.
    tallies: Dict[Film, _FilmTally] = {}
    for subscription in subscriptions:
        for current in subscription.watchlist:
            tally = tallies.get(current)
            if tally is None:
                tallies[current] = _FilmTally(film=current)
                continue
            tally.count += 1
            if current.is_newer_than(tally.film):
                tally.film = current

    if not tallies:
        return None

    best: Optional[_FilmTally] = None
    for tally in tallies.values():
        if best is None or tally.count > best.count:
            best = tally
        elif tally.count == best.count and tally.film.is_newer_than(best.film):
            best = tally

    logger.debug(
        "analytics.popular_film %s",
        format_kv(name=best.film.name, count=best.count, distinct=len(tallies)),
    )
    return best.film.name


def loyalty_tier(
    subscriptions: SubscriptionCollection,
    document: str,
    spend_per_tier: Optional[float] = None,
) -> int:
    """Loyalty tier of a person: floor(sum(price * months active) / spend_per_tier)."""
    if document is None:
        raise ValueError("document is required")
    divisor = float(spend_per_tier) if spend_per_tier is not None else get_spend_per_tier()

    total = 0.0
    for subscription in subscriptions:
        if subscription.document == document:
            total += subscription.price * subscription.months_active()

    return math.floor(total / divisor)


def update_loyalty_tiers(
    subscriptions: SubscriptionCollection,
    people: PeopleDirectory,
) -> ApiStatus:
    """Recompute and store the loyalty tier of every person."""
    for person in people:
        if len(subscriptions) == 0:
            person.vip_level = 0
        else:
            person.vip_level = loyalty_tier(subscriptions, person.document)

    logger.debug(
        "analytics.update_loyalty_tiers %s",
        format_kv(people=len(people), subscriptions=len(subscriptions)),
    )
    return ApiStatus.SUCCESS


def subscriptions_for_document(
    subscriptions: SubscriptionCollection,
    document: str,
) -> Optional[SubscriptionCollection]:
    """Deep copies of a person's subscriptions, in their original order.

    Each copy's id is overwritten with its 0-based position in the result; the
    original ids are not preserved. Returns an empty collection when nothing
    matches, and None only if copying runs out of memory.
    """
    if document is None:
        return None

    copies: List[Subscription] = []
    try:
        for subscription in subscriptions:
            if subscription.document != document:
                continue
            duplicate = subscription.copy()
            duplicate.id = len(copies)
            copies.append(duplicate)
    except MemoryError:
        logger.exception(
            "analytics.subscriptions_for_document failed %s",
            format_kv(document=document, copied=len(copies)),
        )
        for duplicate in copies:
            duplicate.watchlist.clear()
        return None

    return SubscriptionCollection.from_owned(copies)
