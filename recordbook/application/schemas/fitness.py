"""Pydantic DTOs for the personal fitness tracker."""

from datetime import date

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    model_config = {"allow_inf_nan": False}

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    age: int
    weight: float
    height: float


class WorkoutCreate(BaseModel):
    model_config = {"allow_inf_nan": False}

    workout_type: str = Field(..., min_length=1, examples=["Cardio"])
    duration: float = Field(..., description="minutes")
    calories_burned: float
    intensity: str = Field("Medium", examples=["Low", "Medium", "High"])


class MealCreate(BaseModel):
    model_config = {"allow_inf_nan": False}

    name: str = Field(..., min_length=1)
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0


class GoalCreate(BaseModel):
    description: str = Field(..., min_length=1)
    deadline: date


class NutritionGoalsUpdate(BaseModel):
    model_config = {"allow_inf_nan": False}

    calories: float
    protein: float
    carbs: float
    fats: float
