from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from uocplay.domain.subscription import Subscription
from uocplay.io.display import format_subscription
from uocplay.ports.people import PeopleDirectory
from uocplay.subscriptions.status import ApiStatus
from uocplay.utils import format_kv

logger = logging.getLogger(__name__)


class SubscriptionCollection:
    """Owning, insertion-ordered collection of subscriptions.

    Every stored subscription is a private deep copy: callers never share a
    watchlist with an element of the collection. Removing an element shifts
    the later ones left, so positional lookups are renumbered.
    """

    def __init__(self) -> None:
        self._elems: List[Subscription] = []

    @classmethod
    def from_owned(cls, subscriptions: Iterable[Subscription]) -> "SubscriptionCollection":
        """Wrap already-copied subscriptions without duplicate or people checks."""
        collection = cls()
        collection._elems = list(subscriptions)
        return collection

    def __len__(self) -> int:
        return len(self._elems)

    def __iter__(self) -> Iterator[Subscription]:
        return iter(self._elems)

    def __getitem__(self, index: int) -> Subscription:
        return self._elems[index]

    def add(self, people: PeopleDirectory, subscription: Subscription) -> ApiStatus:
        for existing in self._elems:
            if existing == subscription:
                logger.info(
                    "subscriptions.add rejected %s",
                    format_kv(id=subscription.id, document=subscription.document, status=ApiStatus.SUBSCRIPTION_DUPLICATED),
                )
                return ApiStatus.SUBSCRIPTION_DUPLICATED

        if people.find(subscription.document) < 0:
            logger.info(
                "subscriptions.add rejected %s",
                format_kv(id=subscription.id, document=subscription.document, status=ApiStatus.PERSON_NOT_FOUND),
            )
            return ApiStatus.PERSON_NOT_FOUND

        try:
            stored = subscription.copy()
        except MemoryError:
            logger.exception("subscriptions.add failed %s", format_kv(id=subscription.id))
            return ApiStatus.ALLOCATION_FAILURE

        self._elems.append(stored)
        logger.debug(
            "subscriptions.add %s",
            format_kv(id=stored.id, document=stored.document, count=len(self._elems)),
        )
        return ApiStatus.SUCCESS

    def remove(self, subscription_id: int) -> ApiStatus:
        idx = self.find(subscription_id)
        if idx < 0:
            logger.info(
                "subscriptions.remove rejected %s",
                format_kv(id=subscription_id, status=ApiStatus.SUBSCRIPTION_NOT_FOUND),
            )
            return ApiStatus.SUBSCRIPTION_NOT_FOUND

        removed = self._elems.pop(idx)
        removed.watchlist.clear()
        if not self._elems:
            self.free()
        logger.debug("subscriptions.remove %s", format_kv(id=subscription_id, index=idx, count=len(self._elems)))
        return ApiStatus.SUCCESS

    def find(self, subscription_id: int) -> int:
        """Return the position of the first subscription with this id, or -1."""
        for idx, subscription in enumerate(self._elems):
            if subscription.id == subscription_id:
                return idx
        return -1

    def find_hash(self, subscription_id: int) -> Optional[Subscription]:
        """Direct positional lookup: the element at `subscription_id - 1`.

        Only meaningful when ids are a dense 1-based sequence that matches
        insertion order; use `find` otherwise.
        """
        if subscription_id < 1 or subscription_id > len(self._elems):
            return None
        return self._elems[subscription_id - 1]

    def get(self, index: int) -> str:
        if index < 0 or index >= len(self._elems):
            raise IndexError(f"subscription index out of range: {index}")
        return format_subscription(self._elems[index])

    def lines(self) -> List[str]:
        return [format_subscription(subscription) for subscription in self._elems]

    def free(self) -> ApiStatus:
        """Release every watchlist and reset to empty. Safe to call repeatedly."""
        for subscription in self._elems:
            subscription.watchlist.clear()
        self._elems = []
        return ApiStatus.SUCCESS

    def __repr__(self) -> str:
        return f"<SubscriptionCollection count={len(self._elems)}>"
