from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import IntEnum
from typing import Optional


class FilmGenre(IntEnum):
    ACTION = 0
    ADVENTURE = 1
    COMEDY = 2
    DRAMA = 3
    HORROR = 4
    SCIENCE_FICTION = 5


@dataclass(frozen=True)
class Film:
    """A film as it appears in a subscription's watchlist.

    Two films are equal when name, duration, genre, rating and free-flag match.
    The release date does not take part in equality; it is only used to order
    occurrences of the same film (newest release wins).
    """

    name: Optional[str]
    duration: int  # minutes
    genre: FilmGenre
    release: date = field(compare=False)
    rating: float = 0.0
    is_free: bool = False

    def is_newer_than(self, other: "Film") -> bool:
        return self.release > other.release
