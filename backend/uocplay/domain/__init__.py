from uocplay.domain.film import Film, FilmGenre
from uocplay.domain.person import Person
from uocplay.domain.subscription import Subscription
from uocplay.domain.watchlist import Watchlist

__all__ = [
    "Film",
    "FilmGenre",
    "Person",
    "Subscription",
    "Watchlist",
]
