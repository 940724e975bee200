"""Interactive Hotel Reservation System."""

from recordbook.application.schemas import GuestCreate, ReservationCreate, RoomCreate, RoomUpdate
from recordbook.application.services import HotelService
from recordbook.config import Settings
from recordbook.domain.entities import Reservation, Room
from recordbook.presentation.cli.console import Console, money
from recordbook.presentation.cli.menu import Menu, MenuOption
from recordbook.presentation.cli.prompts import Prompter

_ROOM_COLUMNS = [
    ("room_number", "Room"),
    ("room_type", "Type"),
    ("price", "Price/Night"),
    ("status", "Status"),
]

_RESERVATION_COLUMNS = [
    ("guest_name", "Guest"),
    ("room_number", "Room"),
    ("start_date", "Check-in"),
    ("end_date", "Check-out"),
    ("total", "Total"),
]


class HotelMenu(Menu):
    title = "Hotel Reservation System"

    def __init__(
        self, service: HotelService, console: Console, prompter: Prompter, settings: Settings
    ):
        super().__init__(console, prompter)
        self._service = service
        self._settings = settings

    def options(self) -> list[MenuOption]:
        return [
            ("Add Room", self.add_room),
            ("Update Room", self.update_room),
            ("Display Rooms", self.display_rooms),
            ("Make Reservation", self.make_reservation),
            ("Cancel Reservation", self.cancel_reservation),
            ("Modify Reservation", self.modify_reservation),
            ("Display Reservations", self.display_reservations),
            ("Add Customer", self.add_customer),
            ("Search Available Rooms", self.search_available),
            ("Generate Report", self.report),
            ("Display Customer Details", self.customer_details),
            ("Display Room Details", self.room_details),
            ("Save Rooms to File", self.save_rooms),
            ("Load Rooms from File", self.load_rooms),
        ]

    def add_room(self) -> None:
        number = self.prompt.integer("Enter room number")
        room_type = self.prompt.text("Enter room type")
        price = self.prompt.number("Enter price per night", check=lambda p: p >= 0)
        self._service.add_room(
            RoomCreate(room_number=number, room_type=room_type, price_per_night=price)
        )
        self.console.success("Room added successfully.")

    def update_room(self) -> None:
        number = self.prompt.integer("Enter room number to update")
        room_type = self.prompt.text("Enter new room type")
        price = self.prompt.number("Enter new price per night", check=lambda p: p >= 0)
        if self._service.update_room(number, RoomUpdate(room_type=room_type, price_per_night=price)):
            self.console.success("Room updated successfully.")
        else:
            self.console.warning("Room not found.")

    def display_rooms(self) -> None:
        self._show_rooms(self._service.list_rooms(), "No rooms available.")

    def make_reservation(self) -> None:
        guest = self.prompt.text("Enter guest name")
        number = self.prompt.integer("Enter room number")
        start = self.prompt.date("Enter check-in date")
        end = self.prompt.date("Enter check-out date")
        reservation = self._service.make_reservation(
            ReservationCreate(guest_name=guest, room_number=number, start_date=start, end_date=end)
        )
        if reservation is None:
            self.console.warning("Room not available for reservation.")
        else:
            self.console.success(
                f"Reservation made successfully. Total price: {self._money(reservation.total_price())}"
            )

    def cancel_reservation(self) -> None:
        guest = self.prompt.text("Enter guest name")
        number = self.prompt.integer("Enter room number")
        if self._service.cancel_reservation(guest, number):
            self.console.success("Reservation cancelled successfully.")
        else:
            self.console.warning("Reservation not found.")

    def modify_reservation(self) -> None:
        guest = self.prompt.text("Enter guest name")
        number = self.prompt.integer("Enter room number")
        start = self.prompt.date("Enter new check-in date")
        end = self.prompt.date("Enter new check-out date")
        if self._service.modify_reservation(guest, number, start, end):
            self.console.success("Reservation modified successfully.")
        else:
            self.console.warning("Reservation not found.")

    def display_reservations(self) -> None:
        self._show_reservations(self._service.list_reservations(), "No reservations found.")

    def add_customer(self) -> None:
        name = self.prompt.text("Enter customer name")
        phone = self.prompt.text("Enter phone number", default="")
        email = self.prompt.text("Enter email", default="")
        self._service.add_guest(GuestCreate(name=name, phone_number=phone, email=email))
        self.console.success("Customer added successfully.")

    def search_available(self) -> None:
        start = self.prompt.date("Enter check-in date")
        end = self.prompt.date("Enter check-out date")
        self._show_rooms(
            self._service.search_available_rooms(start, end),
            "No rooms available for the selected dates.",
        )

    def report(self) -> None:
        report = self._service.report()
        self.console.key_values(
            [
                ("Total Rooms", report.total_rooms),
                ("Available Rooms", report.available_rooms),
                ("Total Reservations", report.total_reservations),
                ("Total Customers", report.total_guests),
            ],
            title="Hotel Report",
        )
        if report.reservations:
            self._show_reservations(report.reservations, None)

    def customer_details(self) -> None:
        name = self.prompt.text("Enter customer name")
        guest = self._service.get_guest(name)
        if guest is None:
            self.console.warning("Customer not found.")
            return
        self.console.key_values(
            [("Name", guest.name), ("Phone", guest.phone_number), ("Email", guest.email)],
            title="Customer Details",
        )

    def room_details(self) -> None:
        number = self.prompt.integer("Enter room number")
        room = self._service.get_room(number)
        if room is None:
            self.console.warning("Room not found.")
            return
        self.console.key_values(
            [
                ("Room Number", room.room_number),
                ("Type", room.room_type),
                ("Price per Night", self._money(room.price_per_night)),
                ("Status", room.status),
            ],
            title="Room Details",
        )

    def save_rooms(self) -> None:
        written = self._service.save_rooms(self._path("Enter file path to save rooms"))
        self.console.success(f"Rooms saved successfully. ({written} written)")

    def load_rooms(self) -> None:
        loaded = self._service.load_rooms(
            self._path("Enter file path to load rooms"), strict=self._settings.strict_load
        )
        self.console.success(f"Rooms loaded successfully. ({loaded} loaded)")

    def _show_rooms(self, rooms: list[Room], empty_message: str) -> None:
        rows = [
            {
                "room_number": r.room_number,
                "room_type": r.room_type,
                "price": self._money(r.price_per_night),
                "status": r.status,
            }
            for r in rooms
        ]
        self.console.table(rows, _ROOM_COLUMNS, empty_message=empty_message)

    def _show_reservations(self, reservations: list[Reservation], empty_message: str | None) -> None:
        rows = [
            {
                "guest_name": r.guest_name,
                "room_number": r.room_number,
                "start_date": r.start_date.isoformat(),
                "end_date": r.end_date.isoformat(),
                "total": self._money(r.total_price()),
            }
            for r in reservations
        ]
        self.console.table(rows, _RESERVATION_COLUMNS, empty_message=empty_message)

    def _money(self, value: float) -> str:
        return money(value, self._settings.currency_symbol)

    def _path(self, label: str):
        return self._settings.data_path(self.prompt.text(label, default=self._settings.rooms_file))
