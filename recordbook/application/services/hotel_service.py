"""Application service (use case) for the hotel reservation desk."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path

from recordbook.application.interfaces import RecordRepository
from recordbook.application.schemas import GuestCreate, ReservationCreate, RoomCreate, RoomUpdate
from recordbook.domain.entities import Guest, Reservation, Room
from recordbook.domain.query import count, count_true

logger = logging.getLogger(__name__)


@dataclass
class HotelReport:
    total_rooms: int
    available_rooms: int
    total_reservations: int
    total_guests: int
    reservations: list[Reservation]


class HotelService:
    """Rooms, reservations and guests, each in its own store.

    Making or cancelling a reservation touches two stores: the room's
    availability flag and the reservation list. The pre-condition is checked
    first so a refused request changes neither.
    """

    def __init__(
        self,
        rooms: RecordRepository[Room],
        reservations: RecordRepository[Reservation],
        guests: RecordRepository[Guest],
    ):
        self._rooms = rooms
        self._reservations = reservations
        self._guests = guests

    # ── Rooms ───────────────────────────────────────────────────────

    def add_room(self, data: RoomCreate) -> Room:
        return self._rooms.add(
            Room(
                room_number=data.room_number,
                room_type=data.room_type,
                price_per_night=data.price_per_night,
            )
        )

    def update_room(self, room_number: int, data: RoomUpdate) -> Room | None:
        """Re-type/re-price a room. Its availability is kept; it moves to the end of the list."""
        return self._rooms.update_by_key(
            room_number,
            lambda old: replace(
                old, room_type=data.room_type, price_per_night=data.price_per_night
            ),
        )

    def list_rooms(self) -> list[Room]:
        return self._rooms.list_records()

    def get_room(self, room_number: int) -> Room | None:
        return self._rooms.get_by_key(room_number)

    def search_available_rooms(self, start: date, end: date) -> list[Room]:
        """Rooms with no reservation overlapping the window [start, end)."""
        booked = {
            r.room_number for r in self._reservations.find_all(lambda r: r.overlaps(start, end))
        }
        return list(self._rooms.find_all(lambda room: room.room_number not in booked))

    # ── Reservations ────────────────────────────────────────────────

    def make_reservation(self, data: ReservationCreate) -> Reservation | None:
        """Reserve an available room. Returns None (and changes nothing) otherwise."""
        room = self._rooms.get_by_key(data.room_number)
        if room is None or not room.is_available:
            logger.info("Room %s not available for reservation", data.room_number)
            return None

        reservation = Reservation(
            guest_name=data.guest_name,
            room_number=room.room_number,
            start_date=data.start_date,
            end_date=data.end_date,
            nightly_rate=room.price_per_night,
        )
        self._rooms.update_by_key(
            room.room_number, lambda r: replace(r, is_available=False), keep_position=True
        )
        return self._reservations.add(reservation)

    def cancel_reservation(self, guest_name: str, room_number: int) -> Reservation | None:
        """Drop a guest's reservation and release the room. None when there is no such booking."""
        reservation = self._reservations.get_by_key((guest_name, room_number))
        if reservation is None:
            logger.info("No reservation for %s in room %s", guest_name, room_number)
            return None

        self._rooms.update_by_key(
            room_number, lambda r: replace(r, is_available=True), keep_position=True
        )
        return self._reservations.delete_by_key((guest_name, room_number))

    def modify_reservation(
        self, guest_name: str, room_number: int, start: date, end: date
    ) -> Reservation | None:
        """Move an existing booking to new dates (cancel, then re-reserve)."""
        if self._reservations.get_by_key((guest_name, room_number)) is None:
            logger.info("No reservation for %s in room %s", guest_name, room_number)
            return None

        self.cancel_reservation(guest_name, room_number)
        return self.make_reservation(
            ReservationCreate(
                guest_name=guest_name, room_number=room_number, start_date=start, end_date=end
            )
        )

    def list_reservations(self) -> list[Reservation]:
        return self._reservations.list_records()

    # ── Guests ──────────────────────────────────────────────────────

    def add_guest(self, data: GuestCreate) -> Guest:
        return self._guests.add(
            Guest(name=data.name, phone_number=data.phone_number, email=data.email)
        )

    def get_guest(self, name: str) -> Guest | None:
        return self._guests.get_by_key(name)

    # ── Reports / persistence ───────────────────────────────────────

    def report(self) -> HotelReport:
        return HotelReport(
            total_rooms=len(self._rooms),
            available_rooms=self._rooms.aggregate(lambda r: r.is_available, count_true),
            total_reservations=len(self._reservations),
            total_guests=self._guests.aggregate(lambda g: g, count),
            reservations=self._reservations.list_records(),
        )

    def save_rooms(self, path: str | Path) -> int:
        return self._rooms.save_to_file(path)

    def load_rooms(self, path: str | Path, *, strict: bool = False) -> int:
        return self._rooms.load_from_file(path, strict=strict)
