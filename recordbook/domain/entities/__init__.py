from .transaction import Transaction
from .hotel import Guest, Reservation, Room
from .movie_rental import Customer, Movie, Rental
from .recipe import Recipe
from .fitness import FitnessUser, Goal, Meal, NutritionGoals, Workout

__all__ = [
    "Transaction",
    "Guest",
    "Reservation",
    "Room",
    "Customer",
    "Movie",
    "Rental",
    "Recipe",
    "FitnessUser",
    "Goal",
    "Meal",
    "NutritionGoals",
    "Workout",
]
