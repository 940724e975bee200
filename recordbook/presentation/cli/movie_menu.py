"""Interactive Movie Rental System."""

from rich.markup import escape

from recordbook.application.schemas import CustomerCreate, CustomerUpdate, MovieCreate
from recordbook.application.services import MovieRentalService
from recordbook.config import Settings
from recordbook.domain.entities import Movie, Rental
from recordbook.presentation.cli.console import Console, money
from recordbook.presentation.cli.menu import Menu, MenuOption
from recordbook.presentation.cli.prompts import Prompter

_MOVIE_COLUMNS = [("movie_id", "ID"), ("title", "Title"), ("genre", "Genre"), ("status", "Status")]
_CUSTOMER_COLUMNS = [("customer_id", "ID"), ("name", "Name"), ("phone_number", "Phone")]
_RENTAL_COLUMNS = [
    ("customer_name", "Customer"),
    ("movie_title", "Movie"),
    ("rental_date", "Rented"),
    ("due_date", "Due"),
]


class MovieMenu(Menu):
    title = "Movie Rental System"

    def __init__(
        self,
        service: MovieRentalService,
        console: Console,
        prompter: Prompter,
        settings: Settings,
    ):
        super().__init__(console, prompter)
        self._service = service
        self._settings = settings

    def options(self) -> list[MenuOption]:
        return [
            ("Add Movie", self.add_movie),
            ("Register Customer", self.register_customer),
            ("Rent Movie", self.rent_movie),
            ("Return Movie", self.return_movie),
            ("Display Movies", self.display_movies),
            ("Display Customers", self.display_customers),
            ("Display Rentals", self.display_rentals),
            ("Generate Report", self.report),
            ("Search Movies", self.search_movies),
            ("Update Customer Info", self.update_customer),
            ("Display Rental History", self.rental_history),
            ("Filter Movies by Genre", self.filter_by_genre),
            ("Count Available Movies", self.count_available),
            ("Export Rental Report", self.export_report),
            ("Find Movie by ID", self.find_movie),
            ("Save Movies to File", self.save_movies),
            ("Load Movies from File", self.load_movies),
        ]

    def add_movie(self) -> None:
        movie_id = self.prompt.integer("Enter movie ID")
        title = self.prompt.text("Enter movie title")
        genre = self.prompt.text("Enter movie genre")
        self._service.add_movie(MovieCreate(movie_id=movie_id, title=title, genre=genre))
        self.console.success("Movie added successfully.")

    def register_customer(self) -> None:
        customer_id = self.prompt.integer("Enter customer ID")
        name = self.prompt.text("Enter customer name")
        phone = self.prompt.text("Enter phone number", default="")
        self._service.register_customer(
            CustomerCreate(customer_id=customer_id, name=name, phone_number=phone)
        )
        self.console.success("Customer registered successfully.")

    def rent_movie(self) -> None:
        customer_id = self.prompt.integer("Enter customer ID")
        movie_id = self.prompt.integer("Enter movie ID")
        rental = self._service.rent_movie(customer_id, movie_id)
        if rental is None:
            self.console.warning("Customer not found or movie not available.")
        else:
            self.console.success(
                f"Movie rented successfully. Due date: {rental.due_date.date().isoformat()}"
            )

    def return_movie(self) -> None:
        rentals = self._service.list_rentals()
        if not rentals:
            self.console.warning("No active rentals.")
            return
        self._show_rentals(rentals, numbered=True)
        number = self.prompt.integer("Enter rental number to return")
        receipt = self._service.return_movie(number)
        if receipt is None:
            self.console.warning("Invalid rental number.")
            return
        self.console.success(f"'{escape(receipt.rental.movie_title)}' returned successfully.")
        if receipt.late_fee > 0:
            self.console.warning(
                f"Late fee: {money(receipt.late_fee, self._settings.currency_symbol)}"
            )

    def display_movies(self) -> None:
        self._show_movies(self._service.list_movies(), "No movies available.")

    def display_customers(self) -> None:
        rows = [
            {"customer_id": c.customer_id, "name": c.name, "phone_number": c.phone_number}
            for c in self._service.list_customers()
        ]
        self.console.table(rows, _CUSTOMER_COLUMNS, empty_message="No customers registered.")

    def display_rentals(self) -> None:
        self._show_rentals(self._service.list_rentals(), empty_message="No active rentals.")

    def report(self) -> None:
        report = self._service.report()
        self.console.key_values(
            [
                ("Total Movies", report.total_movies),
                ("Available Movies", report.available_movies),
                ("Total Customers", report.total_customers),
                ("Total Rentals", report.total_rentals),
            ],
            title="Movie Rental Report",
        )
        if report.rentals:
            self._show_rentals(report.rentals)

    def search_movies(self) -> None:
        title = self.prompt.text("Enter title (leave blank to skip)", default="")
        genre = self.prompt.text("Enter genre (leave blank to skip)", default="")
        self._show_movies(
            self._service.search_movies(title=title or None, genre=genre or None),
            "No movies match your search.",
        )

    def update_customer(self) -> None:
        customer_id = self.prompt.integer("Enter customer ID")
        name = self.prompt.text("Enter new name")
        phone = self.prompt.text("Enter new phone number", default="")
        if self._service.update_customer(customer_id, CustomerUpdate(name=name, phone_number=phone)):
            self.console.success("Customer information updated.")
        else:
            self.console.warning("Customer not found.")

    def rental_history(self) -> None:
        customer_id = self.prompt.integer("Enter customer ID")
        self._show_rentals(
            self._service.rental_history(customer_id),
            empty_message="No rentals found for this customer.",
        )

    def filter_by_genre(self) -> None:
        genre = self.prompt.text("Enter genre")
        self._show_movies(
            self._service.movies_by_genre(genre), f"No movies found in genre: {escape(genre)}"
        )

    def count_available(self) -> None:
        self.console.print(f"Available movies: {self._service.count_available()}")

    def export_report(self) -> None:
        path = self._settings.data_path(
            self.prompt.text("Enter file path for the report", default="rental_report.txt")
        )
        written = self._service.export_rental_report(path)
        self.console.success(f"Rental report exported to {escape(str(written))}")

    def find_movie(self) -> None:
        movie_id = self.prompt.integer("Enter movie ID")
        movie = self._service.find_movie(movie_id)
        if movie is None:
            self.console.warning("Movie not found.")
            return
        self.console.key_values(
            [
                ("ID", movie.movie_id),
                ("Title", movie.title),
                ("Genre", movie.genre),
                ("Status", movie.status),
            ],
            title="Movie Details",
        )

    def save_movies(self) -> None:
        written = self._service.save_movies(self._path("Enter file path to save movies"))
        self.console.success(f"Movies saved successfully. ({written} written)")

    def load_movies(self) -> None:
        loaded = self._service.load_movies(
            self._path("Enter file path to load movies"), strict=self._settings.strict_load
        )
        self.console.success(f"Movies loaded successfully. ({loaded} loaded)")

    def _show_movies(self, movies: list[Movie], empty_message: str) -> None:
        rows = [
            {"movie_id": m.movie_id, "title": m.title, "genre": m.genre, "status": m.status}
            for m in movies
        ]
        self.console.table(rows, _MOVIE_COLUMNS, empty_message=empty_message)

    def _show_rentals(
        self, rentals: list[Rental], *, numbered: bool = False, empty_message: str | None = None
    ) -> None:
        rows = [
            {
                "customer_name": r.customer_name,
                "movie_title": r.movie_title,
                "rental_date": r.rental_date.date().isoformat(),
                "due_date": r.due_date.date().isoformat(),
            }
            for r in rentals
        ]
        self.console.table(rows, _RENTAL_COLUMNS, numbered=numbered, empty_message=empty_message)

    def _path(self, label: str):
        return self._settings.data_path(self.prompt.text(label, default=self._settings.movies_file))
