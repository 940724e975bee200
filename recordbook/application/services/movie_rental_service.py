"""Application service (use case) for the movie rental counter."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from pathlib import Path

from recordbook.application.interfaces import RecordRepository
from recordbook.application.schemas import CustomerCreate, CustomerUpdate, MovieCreate
from recordbook.domain.entities import Customer, Movie, Rental
from recordbook.domain.query import all_of, count_true, field_contains, field_equals

logger = logging.getLogger(__name__)


@dataclass
class RentalReceipt:
    """Outcome of returning a movie."""

    rental: Rental
    late_fee: float


@dataclass
class RentalReport:
    total_movies: int
    available_movies: int
    total_customers: int
    total_rentals: int
    rentals: list[Rental]


class MovieRentalService:
    """Movies, customers and open rentals.

    Renting flips the movie to unavailable and opens a rental; returning does
    the reverse and closes it. ``clock`` is injectable so due dates and late
    fees can be tested.
    """

    def __init__(
        self,
        movies: RecordRepository[Movie],
        customers: RecordRepository[Customer],
        rentals: RecordRepository[Rental],
        *,
        rental_period_days: int = 7,
        late_fee_per_day: float = 1.5,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._movies = movies
        self._customers = customers
        self._rentals = rentals
        self._rental_period = timedelta(days=rental_period_days)
        self._late_fee_per_day = late_fee_per_day
        self._clock = clock

    # ── Catalogue ───────────────────────────────────────────────────

    def add_movie(self, data: MovieCreate) -> Movie:
        return self._movies.add(Movie(movie_id=data.movie_id, title=data.title, genre=data.genre))

    def list_movies(self) -> list[Movie]:
        return self._movies.list_records()

    def find_movie(self, movie_id: int) -> Movie | None:
        return self._movies.get_by_key(movie_id)

    def search_movies(self, title: str | None = None, genre: str | None = None) -> list[Movie]:
        """Title substring and/or exact genre, both caseless. No criteria returns everything."""
        predicates = []
        if title:
            predicates.append(field_contains("title", title))
        if genre:
            predicates.append(field_equals("genre", genre))
        return list(self._movies.find_all(all_of(*predicates)))

    def movies_by_genre(self, genre: str) -> list[Movie]:
        return list(self._movies.find_all(field_equals("genre", genre)))

    def count_available(self) -> int:
        return self._movies.aggregate(lambda m: m.is_available, count_true)

    # ── Customers ───────────────────────────────────────────────────

    def register_customer(self, data: CustomerCreate) -> Customer:
        return self._customers.add(
            Customer(
                customer_id=data.customer_id, name=data.name, phone_number=data.phone_number
            )
        )

    def list_customers(self) -> list[Customer]:
        return self._customers.list_records()

    def update_customer(self, customer_id: int, data: CustomerUpdate) -> Customer | None:
        return self._customers.update_by_key(
            customer_id,
            lambda old: replace(old, name=data.name, phone_number=data.phone_number),
            keep_position=True,
        )

    # ── Rentals ─────────────────────────────────────────────────────

    def rent_movie(self, customer_id: int, movie_id: int) -> Rental | None:
        """Open a rental when the customer exists and the movie is on the shelf."""
        customer = self._customers.get_by_key(customer_id)
        if customer is None:
            logger.info("Customer %s not found", customer_id)
            return None
        movie = self._movies.get_by_key(movie_id)
        if movie is None or not movie.is_available:
            logger.info("Movie %s not available for rent", movie_id)
            return None

        now = self._clock()
        rental = Rental(
            customer_id=customer.customer_id,
            customer_name=customer.name,
            movie_id=movie.movie_id,
            movie_title=movie.title,
            rental_date=now,
            due_date=now + self._rental_period,
        )
        self._movies.update_by_key(
            movie.movie_id, lambda m: replace(m, is_available=False), keep_position=True
        )
        return self._rentals.add(rental)

    def return_movie(self, rental_number: int) -> RentalReceipt | None:
        """Close the rental at 1-based position ``rental_number`` in the rental list.

        The late fee is worked out before the rental is marked returned.
        """
        rentals = self._rentals.list_records()
        if not 1 <= rental_number <= len(rentals):
            logger.info("Rental #%s not found", rental_number)
            return None

        rental = rentals[rental_number - 1]
        fee = rental.late_fee(self._clock(), self._late_fee_per_day)
        self._movies.update_by_key(
            rental.movie_id, lambda m: replace(m, is_available=True), keep_position=True
        )
        self._rentals.delete_by_key(rental.movie_id)
        return RentalReceipt(rental=replace(rental, is_returned=True), late_fee=fee)

    def list_rentals(self) -> list[Rental]:
        return self._rentals.list_records()

    def rental_history(self, customer_id: int) -> list[Rental]:
        return list(self._rentals.find_all(field_equals("customer_id", customer_id)))

    # ── Reports / persistence ───────────────────────────────────────

    def report(self) -> RentalReport:
        return RentalReport(
            total_movies=len(self._movies),
            available_movies=self.count_available(),
            total_customers=len(self._customers),
            total_rentals=len(self._rentals),
            rentals=self._rentals.list_records(),
        )

    def export_rental_report(self, path: str | Path) -> Path:
        """Write a human-readable rental report to ``path``."""
        report = self.report()
        lines = [
            "Movie Rental Report:",
            f"Total Movies: {report.total_movies}",
            f"Total Customers: {report.total_customers}",
            f"Total Rentals: {report.total_rentals}",
            "Rental Details:",
        ]
        lines.extend(
            f"{r.customer_name} rented '{r.movie_title}' on {r.rental_date.date().isoformat()} "
            f"(Due: {r.due_date.date().isoformat()})"
            for r in report.rentals
        )
        dest = Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info("Exported rental report to %s", dest)
        return dest

    def save_movies(self, path: str | Path) -> int:
        return self._movies.save_to_file(path)

    def load_movies(self, path: str | Path, *, strict: bool = False) -> int:
        return self._movies.load_from_file(path, strict=strict)
