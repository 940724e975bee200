from .budget import TransactionCreate, TransactionUpdate
from .hotel import GuestCreate, ReservationCreate, RoomCreate, RoomUpdate
from .movie_rental import CustomerCreate, CustomerUpdate, MovieCreate
from .recipe import RecipeCreate, RecipeUpdate
from .fitness import GoalCreate, MealCreate, NutritionGoalsUpdate, UserRegister, WorkoutCreate

__all__ = [
    "TransactionCreate",
    "TransactionUpdate",
    "GuestCreate",
    "ReservationCreate",
    "RoomCreate",
    "RoomUpdate",
    "CustomerCreate",
    "CustomerUpdate",
    "MovieCreate",
    "RecipeCreate",
    "RecipeUpdate",
    "GoalCreate",
    "MealCreate",
    "NutritionGoalsUpdate",
    "UserRegister",
    "WorkoutCreate",
]
