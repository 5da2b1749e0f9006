from __future__ import annotations

from typing import Iterator, Protocol

from uocplay.domain.person import Person


class PeopleDirectory(Protocol):
    """The people collection a subscription collection refers to.

    Only existence checks by document and iteration over mutable `Person`
    records (to write their loyalty tier) are needed.
    """

    def find(self, document: str) -> int:
        """Return the index of the person with `document`, or -1."""
        ...

    def __iter__(self) -> Iterator[Person]:
        ...

    def __len__(self) -> int:
        ...
