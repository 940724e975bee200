"""Application service (use case) for the personal fitness tracker."""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime

from recordbook.application.interfaces import RecordRepository
from recordbook.application.schemas import (
    GoalCreate,
    MealCreate,
    NutritionGoalsUpdate,
    UserRegister,
    WorkoutCreate,
)
from recordbook.domain.entities import FitnessUser, Goal, Meal, NutritionGoals, Workout
from recordbook.domain.query import all_of, count, count_true, field_between, field_equals, total

logger = logging.getLogger(__name__)

WORKOUT_TYPES = (
    "Cardio",
    "Strength Training",
    "Flexibility",
    "Balance",
    "High-Intensity Interval Training (HIIT)",
)

MEAL_SUGGESTIONS = (
    ("Grilled Chicken Salad", 350),
    ("Quinoa and Black Beans", 400),
    ("Greek Yogurt with Berries", 200),
    ("Smoothie Bowl", 300),
)


@dataclass
class NutritionStatus:
    consumed: NutritionGoals
    goals: NutritionGoals


@dataclass
class GoalSummary:
    completed: int
    total: int


@dataclass
class Progress:
    workouts: list[Workout] = field(default_factory=list)
    meals: list[Meal] = field(default_factory=list)
    goals: list[Goal] = field(default_factory=list)
    nutrition: NutritionStatus | None = None


class FitnessService:
    """Users plus their workout, meal and goal logs.

    Logs are flat stores shared by every user; each entry carries the owning
    username and every query filters on it.
    """

    def __init__(
        self,
        users: RecordRepository[FitnessUser],
        workouts: RecordRepository[Workout],
        meals: RecordRepository[Meal],
        goals: RecordRepository[Goal],
        *,
        default_goals: NutritionGoals | None = None,
    ):
        self._users = users
        self._workouts = workouts
        self._meals = meals
        self._goals = goals
        self._default_goals = default_goals or NutritionGoals()

    # ── Accounts ────────────────────────────────────────────────────

    def register_user(self, data: UserRegister) -> FitnessUser:
        return self._users.add(
            FitnessUser(
                username=data.username,
                password=data.password,
                age=data.age,
                weight=data.weight,
                height=data.height,
                goals=self._default_goals,
            )
        )

    def login(self, username: str, password: str) -> FitnessUser | None:
        """Exact (case-sensitive) username and password match."""
        for user in self._users.find_all(
            lambda u: u.username == username and u.password == password
        ):
            return user
        logger.info("Failed login for %r", username)
        return None

    def list_users(self) -> list[str]:
        return [u.username for u in self._users.find_all()]

    def get_user(self, username: str) -> FitnessUser | None:
        return self._users.get_by_key(username)

    def update_weight(self, username: str, weight: float) -> FitnessUser | None:
        return self._users.update_by_key(
            username, lambda u: replace(u, weight=weight), keep_position=True
        )

    def set_nutritional_goals(self, username: str, data: NutritionGoalsUpdate) -> FitnessUser | None:
        goals = NutritionGoals(
            calories=data.calories, protein=data.protein, carbs=data.carbs, fats=data.fats
        )
        return self._users.update_by_key(
            username, lambda u: replace(u, goals=goals), keep_position=True
        )

    # ── Logging activity ────────────────────────────────────────────

    def log_workout(self, username: str, data: WorkoutCreate) -> Workout:
        return self._workouts.add(
            Workout(
                username=username,
                workout_type=data.workout_type,
                duration=data.duration,
                calories_burned=data.calories_burned,
                intensity=data.intensity,
            )
        )

    def log_meal(self, username: str, data: MealCreate) -> Meal:
        return self._meals.add(
            Meal(
                username=username,
                name=data.name,
                calories=data.calories,
                protein=data.protein,
                carbs=data.carbs,
                fats=data.fats,
            )
        )

    def set_goal(self, username: str, data: GoalCreate) -> Goal:
        return self._goals.add(
            Goal(username=username, description=data.description, deadline=data.deadline)
        )

    def complete_goal(self, username: str, description: str) -> Goal | None:
        return self._goals.update_by_key(
            (username, description),
            lambda g: replace(g, is_completed=True),
            keep_position=True,
        )

    # ── Views ───────────────────────────────────────────────────────

    def progress(self, username: str) -> Progress:
        owned = field_equals("username", username)
        return Progress(
            workouts=list(self._workouts.find_all(owned)),
            meals=list(self._meals.find_all(owned)),
            goals=list(self._goals.find_all(owned)),
            nutrition=self.nutritional_status(username),
        )

    def history(self, username: str, start: date, end: date) -> Progress:
        """Workouts and meals logged on any day from ``start`` to ``end`` inclusive."""
        in_range = all_of(
            field_equals("username", username),
            field_between("date", start, end, transform=datetime.date),
        )
        return Progress(
            workouts=list(self._workouts.find_all(in_range)),
            meals=list(self._meals.find_all(in_range)),
        )

    def daily_caloric_intake(self, username: str) -> float:
        return float(
            self._meals.aggregate(lambda m: m.calories, total, field_equals("username", username))
        )

    def nutritional_status(self, username: str) -> NutritionStatus | None:
        user = self._users.get_by_key(username)
        if user is None:
            return None
        owned = field_equals("username", username)
        consumed = NutritionGoals(
            calories=float(self._meals.aggregate(lambda m: m.calories, total, owned)),
            protein=float(self._meals.aggregate(lambda m: m.protein, total, owned)),
            carbs=float(self._meals.aggregate(lambda m: m.carbs, total, owned)),
            fats=float(self._meals.aggregate(lambda m: m.fats, total, owned)),
        )
        return NutritionStatus(consumed=consumed, goals=user.goals)

    def goal_summary(self, username: str) -> GoalSummary:
        owned = field_equals("username", username)
        return GoalSummary(
            completed=self._goals.aggregate(lambda g: g.is_completed, count_true, owned),
            total=self._goals.aggregate(lambda g: g, count, owned),
        )

    @staticmethod
    def workout_types() -> tuple[str, ...]:
        return WORKOUT_TYPES

    @staticmethod
    def meal_suggestions() -> tuple[tuple[str, int], ...]:
        return MEAL_SUGGESTIONS
