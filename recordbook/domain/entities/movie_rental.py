"""Domain entities for the movie rental counter."""

from dataclasses import dataclass
from datetime import datetime

from recordbook.domain.validation import require_present, require_text


@dataclass(frozen=True)
class Movie:
    movie_id: int
    title: str
    genre: str
    is_available: bool = True

    def __post_init__(self) -> None:
        require_present("movie_id", self.movie_id)
        require_text("title", self.title)
        require_text("genre", self.genre)

    @property
    def key(self) -> int:
        return self.movie_id

    @property
    def status(self) -> str:
        return "Available" if self.is_available else "Rented"


@dataclass(frozen=True)
class Customer:
    customer_id: int
    name: str
    phone_number: str

    def __post_init__(self) -> None:
        require_present("customer_id", self.customer_id)
        require_text("name", self.name)

    @property
    def key(self) -> int:
        return self.customer_id


@dataclass(frozen=True)
class Rental:
    """An open rental. Keyed by movie, since a movie is out to one customer at a time."""

    customer_id: int
    customer_name: str
    movie_id: int
    movie_title: str
    rental_date: datetime
    due_date: datetime
    is_returned: bool = False

    @property
    def key(self) -> int:
        return self.movie_id

    def overdue_days(self, now: datetime) -> int:
        return max((now - self.due_date).days, 0)

    def late_fee(self, now: datetime, per_day: float) -> float:
        """Fee for each full day past the due date; nothing once returned."""
        if self.is_returned:
            return 0.0
        return self.overdue_days(now) * per_day
