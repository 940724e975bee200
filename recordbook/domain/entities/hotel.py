"""Domain entities for the hotel reservation desk."""

from dataclasses import dataclass
from datetime import date

from recordbook.domain.validation import require_present, require_text


@dataclass(frozen=True)
class Room:
    """A bookable room. ``is_available`` flips when a reservation is made or cancelled."""

    room_number: int
    room_type: str
    price_per_night: float
    is_available: bool = True

    def __post_init__(self) -> None:
        require_present("room_number", self.room_number)
        require_text("room_type", self.room_type)
        require_present("price_per_night", self.price_per_night)

    @property
    def key(self) -> int:
        return self.room_number

    @property
    def status(self) -> str:
        return "Available" if self.is_available else "Reserved"


@dataclass(frozen=True)
class Reservation:
    """A guest's stay in one room.

    The nightly rate is captured when the booking is made so the total does
    not change if the room is re-priced afterwards.
    """

    guest_name: str
    room_number: int
    start_date: date
    end_date: date
    nightly_rate: float

    def __post_init__(self) -> None:
        require_text("guest_name", self.guest_name)
        require_present("start_date", self.start_date)
        require_present("end_date", self.end_date)

    @property
    def key(self) -> tuple[str, int]:
        return (self.guest_name, self.room_number)

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def total_price(self) -> float:
        return self.nightly_rate * self.nights

    def overlaps(self, start: date, end: date) -> bool:
        """True when this stay intersects the half-open window [start, end)."""
        return self.start_date < end and self.end_date > start


@dataclass(frozen=True)
class Guest:
    """A hotel customer on file."""

    name: str
    phone_number: str
    email: str

    def __post_init__(self) -> None:
        require_text("name", self.name)

    @property
    def key(self) -> str:
        return self.name
