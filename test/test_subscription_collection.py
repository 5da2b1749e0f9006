import sys
import unittest
from datetime import date
from pathlib import Path
from unittest import mock

_BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

from uocplay.domain import Film, FilmGenre, Person, Subscription
from uocplay.people import InMemoryPeople
from uocplay.subscriptions import ApiStatus, SubscriptionCollection

_DOC_A = "33365111X"
_DOC_B = "98765432J"


def _people() -> InMemoryPeople:
    people = InMemoryPeople()
    people.add(Person(document=_DOC_A, name="Marie", surname="Curie"))
    people.add(Person(document=_DOC_B, name="Alan", surname="Turing"))
    return people


def _subscription(subscription_id: int, document: str = _DOC_A, price: float = 10.0) -> Subscription:
    return Subscription(
        id=subscription_id,
        document=document,
        start_date=date(2023, 1, 1),
        end_date=date(2023, 12, 31),
        plan="Standard",
        price=price,
        num_devices=2,
    )


def _film(name: str) -> Film:
    return Film(name=name, duration=95, genre=FilmGenre.COMEDY, release=date(2019, 6, 1), rating=3.0)


class TestSubscriptionCollectionAdd(unittest.TestCase):
    def setUp(self) -> None:
        self.people = _people()
        self.collection = SubscriptionCollection()

    def test_new_collection_is_empty(self) -> None:
        self.assertEqual(len(self.collection), 0)
        self.assertEqual(self.collection.lines(), [])

    def test_duplicate_content_is_rejected_regardless_of_id(self) -> None:
        self.assertEqual(self.collection.add(self.people, _subscription(1)), ApiStatus.SUCCESS)
        self.assertEqual(self.collection.add(self.people, _subscription(2)), ApiStatus.SUBSCRIPTION_DUPLICATED)
        self.assertEqual(len(self.collection), 1)

    def test_unknown_person_is_rejected(self) -> None:
        status = self.collection.add(self.people, _subscription(1, document="00000000T"))
        self.assertEqual(status, ApiStatus.PERSON_NOT_FOUND)
        self.assertFalse(status.ok)
        self.assertEqual(len(self.collection), 0)

    def test_add_stores_a_private_copy(self) -> None:
        sub = _subscription(1)
        sub.watchlist.push(_film("X"))
        self.collection.add(self.people, sub)

        sub.watchlist.push(_film("Y"))
        sub.price = 99.0

        stored = self.collection[0]
        self.assertIsNot(stored, sub)
        self.assertEqual([f.name for f in stored.watchlist], ["X"])
        self.assertEqual(stored.price, 10.0)

    def test_allocation_failure_leaves_collection_unchanged(self) -> None:
        self.collection.add(self.people, _subscription(1))

        def _fail(_self):
            raise MemoryError

        with mock.patch.object(Subscription, "copy", _fail):
            status = self.collection.add(self.people, _subscription(2, document=_DOC_B))

        self.assertEqual(status, ApiStatus.ALLOCATION_FAILURE)
        self.assertEqual(len(self.collection), 1)


class TestSubscriptionCollectionRemove(unittest.TestCase):
    def setUp(self) -> None:
        self.people = _people()
        self.collection = SubscriptionCollection()
        for subscription_id, price in ((1, 10.0), (2, 20.0), (3, 30.0)):
            sub = _subscription(subscription_id, price=price)
            sub.watchlist.push(_film(f"film-{subscription_id}"))
            self.collection.add(self.people, sub)

    def test_add_then_remove_restores_length(self) -> None:
        before = len(self.collection)
        self.collection.add(self.people, _subscription(4, document=_DOC_B))
        self.assertEqual(self.collection.remove(4), ApiStatus.SUCCESS)
        self.assertEqual(len(self.collection), before)
        self.assertEqual(self.collection.find(4), -1)

    def test_remove_unknown_id(self) -> None:
        self.assertEqual(self.collection.remove(42), ApiStatus.SUBSCRIPTION_NOT_FOUND)
        self.assertEqual(len(self.collection), 3)

    def test_remove_middle_preserves_order_and_content(self) -> None:
        before = self.collection.lines()
        self.collection.remove(2)

        self.assertEqual(self.collection.lines(), [before[0], before[2]])
        self.assertEqual(self.collection.find(3), 1)
        self.assertEqual([f.name for f in self.collection[1].watchlist], ["film-3"])
        self.assertIsNot(self.collection[0].watchlist, self.collection[1].watchlist)

    def test_remove_releases_the_removed_watchlist(self) -> None:
        removed = self.collection[0]
        self.collection.remove(1)
        self.assertEqual(removed.watchlist.count, 0)

    def test_removing_everything_resets_to_empty(self) -> None:
        for subscription_id in (1, 2, 3):
            self.assertEqual(self.collection.remove(subscription_id), ApiStatus.SUCCESS)
        self.assertEqual(len(self.collection), 0)
        self.assertEqual(self.collection.lines(), [])
        # Still usable afterwards.
        self.assertEqual(self.collection.add(self.people, _subscription(9)), ApiStatus.SUCCESS)


class TestSubscriptionCollectionLookup(unittest.TestCase):
    def setUp(self) -> None:
        self.people = _people()
        self.collection = SubscriptionCollection()
        # Precondition for find_hash: ids are dense, 1-based and follow insertion order.
        for subscription_id, price in ((1, 10.0), (2, 20.0), (3, 30.0)):
            self.collection.add(self.people, _subscription(subscription_id, price=price))

    def test_find_returns_position_or_minus_one(self) -> None:
        self.assertEqual(self.collection.find(1), 0)
        self.assertEqual(self.collection.find(3), 2)
        self.assertEqual(self.collection.find(99), -1)

    def test_find_hash_with_dense_ids(self) -> None:
        self.assertEqual(self.collection.find_hash(2).price, 20.0)
        self.assertIsNone(self.collection.find_hash(0))
        self.assertIsNone(self.collection.find_hash(4))

    def test_get_formats_the_element(self) -> None:
        self.assertEqual(self.collection.get(0), "1;33365111X;01/01/2023;31/12/2023;Standard;10;2")
        with self.assertRaises(IndexError):
            self.collection.get(3)
        with self.assertRaises(IndexError):
            self.collection.get(-1)

    def test_free_is_safe_to_repeat(self) -> None:
        first = self.collection[0]
        first.watchlist.push(_film("X"))
        self.assertEqual(self.collection.free(), ApiStatus.SUCCESS)
        self.assertEqual(self.collection.free(), ApiStatus.SUCCESS)
        self.assertEqual(len(self.collection), 0)
        self.assertEqual(first.watchlist.count, 0)


if __name__ == "__main__":
    unittest.main()
