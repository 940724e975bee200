"""Line format for hotel rooms: ``roomNumber|roomType|pricePerNight|isAvailable``."""

from recordbook.application.interfaces import RecordCodec
from recordbook.domain.entities import Room

from .fields import format_bool, parse_bool, parse_float


class RoomCodec(RecordCodec[Room]):
    field_count = 4

    def encode(self, record: Room) -> list[str]:
        return [
            str(record.room_number),
            record.room_type,
            repr(record.price_per_night),
            format_bool(record.is_available),
        ]

    def decode(self, fields: list[str]) -> Room:
        number, room_type, price, available = fields
        return Room(
            room_number=int(number),
            room_type=room_type,
            price_per_night=parse_float(price),
            is_available=parse_bool(available),
        )
