"""Composition root — wires in-memory stores and codecs to the application services.

Each factory builds fresh stores, so every CLI session (and every test) gets
its own independent state.
"""

from recordbook.config import Settings, get_settings
from recordbook.application.services import (
    BudgetService,
    FitnessService,
    HotelService,
    MovieRentalService,
    RecipeService,
)
from recordbook.domain.entities import (
    Customer,
    FitnessUser,
    Goal,
    Guest,
    Meal,
    Movie,
    NutritionGoals,
    Recipe,
    Rental,
    Reservation,
    Room,
    Transaction,
    Workout,
)
from recordbook.infrastructure.codecs import MovieCodec, RecipeCodec, RoomCodec, TransactionCodec
from recordbook.infrastructure.storage import InMemoryRecordStore


def get_budget_service() -> BudgetService:
    """Provides a BudgetService backed by a transaction store that can save/load."""
    return BudgetService(InMemoryRecordStore[Transaction]("Transaction", codec=TransactionCodec()))


def get_hotel_service() -> HotelService:
    return HotelService(
        rooms=InMemoryRecordStore[Room]("Room", codec=RoomCodec()),
        reservations=InMemoryRecordStore[Reservation]("Reservation"),
        guests=InMemoryRecordStore[Guest]("Guest"),
    )


def get_movie_rental_service(settings: Settings | None = None) -> MovieRentalService:
    settings = settings or get_settings()
    return MovieRentalService(
        movies=InMemoryRecordStore[Movie]("Movie", codec=MovieCodec()),
        customers=InMemoryRecordStore[Customer]("Customer"),
        rentals=InMemoryRecordStore[Rental]("Rental"),
        rental_period_days=settings.rental_period_days,
        late_fee_per_day=settings.late_fee_per_day,
    )


def get_recipe_service() -> RecipeService:
    return RecipeService(InMemoryRecordStore[Recipe]("Recipe", codec=RecipeCodec()))


def get_fitness_service(settings: Settings | None = None) -> FitnessService:
    """Provides a FitnessService; new users start with the configured daily goals."""
    settings = settings or get_settings()
    return FitnessService(
        users=InMemoryRecordStore[FitnessUser]("FitnessUser"),
        workouts=InMemoryRecordStore[Workout]("Workout"),
        meals=InMemoryRecordStore[Meal]("Meal"),
        goals=InMemoryRecordStore[Goal]("Goal"),
        default_goals=NutritionGoals(
            calories=settings.daily_calorie_goal,
            protein=settings.daily_protein_goal,
            carbs=settings.daily_carbs_goal,
            fats=settings.daily_fats_goal,
        ),
    )
