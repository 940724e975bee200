from .budget_service import BudgetReport, BudgetService
from .hotel_service import HotelReport, HotelService
from .movie_rental_service import MovieRentalService, RentalReceipt, RentalReport
from .recipe_service import RecipeService
from .fitness_service import FitnessService, GoalSummary, NutritionStatus, Progress
from . import math_drills

__all__ = [
    "BudgetReport",
    "BudgetService",
    "HotelReport",
    "HotelService",
    "MovieRentalService",
    "RentalReceipt",
    "RentalReport",
    "RecipeService",
    "FitnessService",
    "GoalSummary",
    "NutritionStatus",
    "Progress",
    "math_drills",
]
