from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from uocplay.domain.person import Person
from uocplay.utils import format_kv

logger = logging.getLogger(__name__)


class InMemoryPeople:
    def __init__(self) -> None:
        self._people: List[Person] = []

    def add(self, person: Person) -> bool:
        if self.find(person.document) >= 0:
            logger.info("people.add rejected %s", format_kv(document=person.document, reason="duplicated"))
            return False
        self._people.append(person)
        return True

    def find(self, document: str) -> int:
        for idx, person in enumerate(self._people):
            if person.document == document:
                return idx
        return -1

    def get(self, document: str) -> Optional[Person]:
        idx = self.find(document)
        return self._people[idx] if idx >= 0 else None

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def __len__(self) -> int:
        return len(self._people)
