"""Unit tests for the FitnessService."""

from datetime import date, datetime

import pytest

from recordbook.application.schemas import (
    GoalCreate,
    MealCreate,
    NutritionGoalsUpdate,
    UserRegister,
    WorkoutCreate,
)
from recordbook.application.services import FitnessService
from recordbook.domain.entities import FitnessUser, Goal, Meal, NutritionGoals, Workout
from recordbook.infrastructure.storage import InMemoryRecordStore


@pytest.fixture
def workouts() -> InMemoryRecordStore[Workout]:
    return InMemoryRecordStore[Workout]("Workout")


@pytest.fixture
def service(workouts) -> FitnessService:
    svc = FitnessService(
        users=InMemoryRecordStore[FitnessUser]("FitnessUser"),
        workouts=workouts,
        meals=InMemoryRecordStore[Meal]("Meal"),
        goals=InMemoryRecordStore[Goal]("Goal"),
    )
    svc.register_user(UserRegister(username="sam", password="pw", age=30, weight=70, height=175))
    return svc


def test_login_is_exact(service: FitnessService):
    assert service.login("sam", "pw").username == "sam"
    assert service.login("SAM", "pw") is None
    assert service.login("sam", "PW") is None


def test_new_user_gets_default_goals(service: FitnessService):
    assert service.get_user("sam").goals == NutritionGoals(2000, 150, 250, 70)


def test_configured_default_goals():
    svc = FitnessService(
        users=InMemoryRecordStore[FitnessUser]("FitnessUser"),
        workouts=InMemoryRecordStore[Workout]("Workout"),
        meals=InMemoryRecordStore[Meal]("Meal"),
        goals=InMemoryRecordStore[Goal]("Goal"),
        default_goals=NutritionGoals(calories=1800),
    )
    user = svc.register_user(UserRegister(username="a", password="b", age=1, weight=1, height=1))
    assert user.goals.calories == 1800


def test_list_users(service: FitnessService):
    service.register_user(UserRegister(username="kim", password="x", age=25, weight=60, height=160))
    assert service.list_users() == ["sam", "kim"]


def test_update_weight(service: FitnessService):
    assert service.update_weight("sam", 68.5).weight == 68.5
    assert service.update_weight("nobody", 1) is None


def test_nutrition_status_sums_only_own_meals(service: FitnessService):
    service.register_user(UserRegister(username="kim", password="x", age=25, weight=60, height=160))
    service.log_meal("sam", MealCreate(name="Salad", calories=350, protein=30, carbs=10, fats=12))
    service.log_meal("sam", MealCreate(name="Smoothie", calories=300, protein=5, carbs=60, fats=3))
    service.log_meal("kim", MealCreate(name="Pizza", calories=900))

    status = service.nutritional_status("sam")
    assert status.consumed == NutritionGoals(650, 35, 70, 15)
    assert status.goals.calories == 2000
    assert service.daily_caloric_intake("sam") == 650
    assert service.nutritional_status("nobody") is None


def test_set_nutritional_goals(service: FitnessService):
    service.set_nutritional_goals(
        "sam", NutritionGoalsUpdate(calories=2500, protein=180, carbs=300, fats=80)
    )
    assert service.get_user("sam").goals == NutritionGoals(2500, 180, 300, 80)


def test_goals_and_summary(service: FitnessService):
    service.set_goal("sam", GoalCreate(description="Run 5k", deadline=date(2024, 6, 1)))
    service.set_goal("sam", GoalCreate(description="Bench 80kg", deadline=date(2024, 9, 1)))
    assert service.complete_goal("sam", "run 5K").is_completed is True
    assert service.complete_goal("sam", "Swim") is None

    summary = service.goal_summary("sam")
    assert (summary.completed, summary.total) == (1, 2)
    assert [g.description for g in service.progress("sam").goals] == ["Run 5k", "Bench 80kg"]


def test_progress_lists_workouts(service: FitnessService):
    service.log_workout(
        "sam", WorkoutCreate(workout_type="Cardio", duration=30, calories_burned=300)
    )
    progress = service.progress("sam")
    assert [w.workout_type for w in progress.workouts] == ["Cardio"]
    assert progress.workouts[0].intensity == "Medium"
    assert progress.nutrition is not None


def test_history_is_inclusive_by_day(service: FitnessService, workouts):
    workouts.add(Workout("sam", "Cardio", 30, 300, "High", datetime(2024, 1, 1, 7, 0)))
    workouts.add(Workout("sam", "Balance", 20, 100, "Low", datetime(2024, 1, 5, 21, 0)))
    workouts.add(Workout("sam", "Flexibility", 15, 50, "Low", datetime(2024, 1, 6, 6, 0)))
    workouts.add(Workout("kim", "Cardio", 30, 300, "High", datetime(2024, 1, 2, 7, 0)))

    history = service.history("sam", date(2024, 1, 1), date(2024, 1, 5))
    assert [w.workout_type for w in history.workouts] == ["Cardio", "Balance"]
    assert history.meals == []


def test_catalogues():
    assert "Cardio" in FitnessService.workout_types()
    assert ("Smoothie Bowl", 300) in FitnessService.meal_suggestions()
