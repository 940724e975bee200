"""Unit tests for the HotelService."""

from datetime import date

import pytest
from pydantic import ValidationError as SchemaValidationError

from recordbook.application.schemas import GuestCreate, ReservationCreate, RoomCreate, RoomUpdate
from recordbook.application.services import HotelService
from recordbook.domain.entities import Guest, Reservation, Room
from recordbook.infrastructure.codecs import RoomCodec
from recordbook.infrastructure.storage import InMemoryRecordStore


@pytest.fixture
def service() -> HotelService:
    return HotelService(
        rooms=InMemoryRecordStore[Room]("Room", codec=RoomCodec()),
        reservations=InMemoryRecordStore[Reservation]("Reservation"),
        guests=InMemoryRecordStore[Guest]("Guest"),
    )


def _reserve(service: HotelService, guest: str, room: int, start: date, end: date):
    return service.make_reservation(
        ReservationCreate(guest_name=guest, room_number=room, start_date=start, end_date=end)
    )


def test_reserve_then_cancel_room_101(service: HotelService):
    service.add_room(RoomCreate(room_number=101, room_type="Single", price_per_night=100))

    reservation = _reserve(service, "Alice", 101, date(2024, 1, 1), date(2024, 1, 3))
    assert reservation.total_price() == 200
    assert service.get_room(101).is_available is False

    assert service.cancel_reservation("Alice", 101) is not None
    assert service.get_room(101).is_available is True
    assert service.list_reservations() == []


def test_reserving_reserved_room_changes_nothing(service: HotelService):
    service.add_room(RoomCreate(room_number=101, room_type="Single", price_per_night=100))
    _reserve(service, "Alice", 101, date(2024, 1, 1), date(2024, 1, 3))

    assert _reserve(service, "Bob", 101, date(2024, 2, 1), date(2024, 2, 3)) is None
    assert [r.guest_name for r in service.list_reservations()] == ["Alice"]
    assert service.get_room(101).is_available is False


def test_reserving_unknown_room(service: HotelService):
    assert _reserve(service, "Alice", 999, date(2024, 1, 1), date(2024, 1, 2)) is None
    assert service.list_reservations() == []


def test_cancel_unknown_reservation(service: HotelService):
    service.add_room(RoomCreate(room_number=101, room_type="Single", price_per_night=100))
    assert service.cancel_reservation("Nobody", 101) is None
    assert service.get_room(101).is_available is True


def test_reservation_price_is_snapshotted(service: HotelService):
    service.add_room(RoomCreate(room_number=101, room_type="Single", price_per_night=100))
    reservation = _reserve(service, "Alice", 101, date(2024, 1, 1), date(2024, 1, 4))
    service.update_room(101, RoomUpdate(room_type="Suite", price_per_night=300))
    assert service.list_reservations()[0].total_price() == reservation.total_price() == 300


def test_update_room_keeps_availability_and_moves_to_end(service: HotelService):
    service.add_room(RoomCreate(room_number=101, room_type="Single", price_per_night=100))
    service.add_room(RoomCreate(room_number=102, room_type="Double", price_per_night=150))
    _reserve(service, "Alice", 101, date(2024, 1, 1), date(2024, 1, 2))

    updated = service.update_room(101, RoomUpdate(room_type="Deluxe", price_per_night=120))
    assert updated.is_available is False
    assert [r.room_number for r in service.list_rooms()] == [102, 101]
    assert service.update_room(999, RoomUpdate(room_type="X", price_per_night=1)) is None


def test_modify_reservation(service: HotelService):
    service.add_room(RoomCreate(room_number=101, room_type="Single", price_per_night=100))
    _reserve(service, "Alice", 101, date(2024, 1, 1), date(2024, 1, 2))

    moved = service.modify_reservation("alice", 101, date(2024, 3, 1), date(2024, 3, 5))
    assert moved.start_date == date(2024, 3, 1)
    assert moved.total_price() == 400
    assert len(service.list_reservations()) == 1
    assert service.modify_reservation("Bob", 101, date(2024, 3, 1), date(2024, 3, 2)) is None


def test_search_available_rooms_excludes_overlaps(service: HotelService):
    service.add_room(RoomCreate(room_number=101, room_type="Single", price_per_night=100))
    service.add_room(RoomCreate(room_number=102, room_type="Double", price_per_night=150))
    _reserve(service, "Alice", 101, date(2024, 1, 1), date(2024, 1, 3))

    during = service.search_available_rooms(date(2024, 1, 2), date(2024, 1, 4))
    assert [r.room_number for r in during] == [102]
    after = service.search_available_rooms(date(2024, 1, 3), date(2024, 1, 5))
    assert [r.room_number for r in after] == [101, 102]


def test_guests(service: HotelService):
    service.add_guest(GuestCreate(name="Alice", phone_number="555-0101", email="a@example.com"))
    assert service.get_guest("ALICE").email == "a@example.com"
    assert service.get_guest("Bob") is None


def test_report(service: HotelService):
    service.add_room(RoomCreate(room_number=101, room_type="Single", price_per_night=100))
    service.add_room(RoomCreate(room_number=102, room_type="Double", price_per_night=150))
    service.add_guest(GuestCreate(name="Alice"))
    _reserve(service, "Alice", 101, date(2024, 1, 1), date(2024, 1, 3))

    report = service.report()
    assert report.total_rooms == 2
    assert report.available_rooms == 1
    assert report.total_reservations == 1
    assert report.total_guests == 1


def test_save_and_load_rooms(tmp_path, service: HotelService):
    service.add_room(RoomCreate(room_number=101, room_type="Single", price_per_night=99.5))
    path = tmp_path / "rooms.txt"
    assert service.save_rooms(path) == 1
    assert service.load_rooms(path) == 1
    assert len(service.list_rooms()) == 2


def test_room_price_must_be_finite():
    for price in (float("inf"), float("nan")):
        with pytest.raises(SchemaValidationError):
            RoomCreate(room_number=101, room_type="Single", price_per_night=price)
