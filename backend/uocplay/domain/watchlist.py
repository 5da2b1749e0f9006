from __future__ import annotations

from typing import Iterator, List, Optional

from uocplay.domain.film import Film


class Watchlist:
    """Last-in-first-out stack of films owned by a single subscription.

    Films are pushed and popped at the top. Iteration walks from the top to
    the bottom, i.e. the most recently pushed film comes first.
    """

    def __init__(self) -> None:
        # The end of the list is the top of the stack.
        self._films: List[Film] = []

    def push(self, film: Film) -> None:
        self._films.append(film)

    def pop(self) -> Optional[Film]:
        if not self._films:
            return None
        return self._films.pop()

    def top(self) -> Optional[Film]:
        if not self._films:
            return None
        return self._films[-1]

    def clear(self) -> None:
        """Drop every film. Safe to call on an empty watchlist."""
        self._films.clear()

    def is_empty(self) -> bool:
        return not self._films

    def copy(self) -> "Watchlist":
        """Return an independent watchlist with the same top-to-bottom order.

        Pushing always inserts at the top, so the films are collected top to
        bottom first and then pushed back in reverse.
        """
        collected = list(self)
        duplicate = Watchlist()
        for film in reversed(collected):
            duplicate.push(film)
        return duplicate

    def __iter__(self) -> Iterator[Film]:
        return reversed(self._films)

    def __len__(self) -> int:
        return len(self._films)

    @property
    def count(self) -> int:
        return len(self._films)

    def __repr__(self) -> str:
        top = self.top()
        return f"<Watchlist count={self.count} top={top.name if top else None!r}>"
