"""Interactive Personal Fitness Tracker: an account menu plus a per-user session."""

from rich.markup import escape

from recordbook.application.schemas import (
    GoalCreate,
    MealCreate,
    NutritionGoalsUpdate,
    UserRegister,
    WorkoutCreate,
)
from recordbook.application.services import FitnessService, Progress
from recordbook.domain.entities import FitnessUser
from recordbook.presentation.cli.console import Console
from recordbook.presentation.cli.menu import Menu, MenuOption
from recordbook.presentation.cli.prompts import Prompter

_WORKOUT_COLUMNS = [
    ("date", "Date"),
    ("workout_type", "Type"),
    ("duration", "Minutes"),
    ("calories_burned", "Calories"),
    ("intensity", "Intensity"),
]
_MEAL_COLUMNS = [
    ("date", "Date"),
    ("name", "Meal"),
    ("calories", "Calories"),
    ("protein", "Protein"),
    ("carbs", "Carbs"),
    ("fats", "Fats"),
]
_GOAL_COLUMNS = [("description", "Goal"), ("deadline", "Deadline"), ("status", "Status")]


def _non_negative(value: float) -> bool:
    return value >= 0


class FitnessMenu(Menu):
    title = "Personal Fitness Tracker"

    def __init__(self, service: FitnessService, console: Console, prompter: Prompter):
        super().__init__(console, prompter)
        self._service = service

    def options(self) -> list[MenuOption]:
        return [
            ("Register User", self.register),
            ("Login", self.login),
            ("Display Registered Users", self.display_users),
        ]

    def register(self) -> None:
        username = self.prompt.text("Enter username")
        password = self.prompt.text("Enter password")
        age = self.prompt.integer("Enter age", check=lambda a: a > 0)
        weight = self.prompt.number("Enter weight (kg)", check=lambda w: w > 0)
        height = self.prompt.number("Enter height (cm)", check=lambda h: h > 0)
        self._service.register_user(
            UserRegister(
                username=username, password=password, age=age, weight=weight, height=height
            )
        )
        self.console.success("User registered successfully!")

    def login(self) -> None:
        username = self.prompt.text("Enter username")
        password = self.prompt.text("Enter password")
        user = self._service.login(username, password)
        if user is None:
            self.console.warning("Invalid username or password.")
            return
        self.console.success(f"Welcome, {escape(user.username)}!")
        UserSessionMenu(self._service, user, self.console, self.prompt).run()

    def display_users(self) -> None:
        users = self._service.list_users()
        if not users:
            self.console.warning("No registered users.")
            return
        self.console.print("Registered Users:")
        self.console.print_lines([escape(u) for u in users])


class UserSessionMenu(Menu):
    """Options available to one logged-in user; the exit number logs out."""

    title = "User Menu"
    exit_label = "Logout"

    def __init__(
        self, service: FitnessService, user: FitnessUser, console: Console, prompter: Prompter
    ):
        super().__init__(console, prompter)
        self._service = service
        self._username = user.username

    def options(self) -> list[MenuOption]:
        return [
            ("Log Workout", self.log_workout),
            ("Log Meal", self.log_meal),
            ("Set Goal", self.set_goal),
            ("Complete Goal", self.complete_goal),
            ("View Progress", self.view_progress),
            ("View History", self.view_history),
            ("Update Profile", self.update_profile),
            ("Show Goal Summary", self.goal_summary),
            ("Show Nutritional Goals", self.nutritional_goals),
        ]

    def on_exit(self) -> None:
        self.console.info("Logged out.")

    def log_workout(self) -> None:
        self.console.print("Workout Types:")
        self.console.print_lines(
            [f"{i}. {name}" for i, name in enumerate(self._service.workout_types(), 1)]
        )
        workout_type = self.prompt.text("Enter workout type")
        duration = self.prompt.number("Enter duration (minutes)", check=_non_negative)
        calories = self.prompt.number("Enter calories burned", check=_non_negative)
        intensity = self.prompt.text("Enter intensity (Low/Medium/High)", default="Medium")
        self._service.log_workout(
            self._username,
            WorkoutCreate(
                workout_type=workout_type,
                duration=duration,
                calories_burned=calories,
                intensity=intensity,
            ),
        )
        self.console.success("Workout logged successfully!")

    def log_meal(self) -> None:
        self.console.print("Meal Suggestions:")
        self.console.print_lines(
            [
                f"{i}. {name} - {calories} calories"
                for i, (name, calories) in enumerate(self._service.meal_suggestions(), 1)
            ]
        )
        name = self.prompt.text("Enter meal name")
        calories = self.prompt.number("Enter calories", check=_non_negative)
        protein = self.prompt.number("Enter protein (g)", check=_non_negative)
        carbs = self.prompt.number("Enter carbs (g)", check=_non_negative)
        fats = self.prompt.number("Enter fats (g)", check=_non_negative)
        self._service.log_meal(
            self._username,
            MealCreate(name=name, calories=calories, protein=protein, carbs=carbs, fats=fats),
        )
        self.console.success("Meal logged successfully!")

    def set_goal(self) -> None:
        description = self.prompt.text("Enter goal description")
        deadline = self.prompt.date("Enter deadline")
        self._service.set_goal(self._username, GoalCreate(description=description, deadline=deadline))
        self.console.success("Goal set successfully!")

    def complete_goal(self) -> None:
        description = self.prompt.text("Enter goal description to complete")
        if self._service.complete_goal(self._username, description):
            self.console.success("Goal marked as completed!")
        else:
            self.console.warning("Goal not found.")

    def view_progress(self) -> None:
        self._show_progress(self._service.progress(self._username))

    def view_history(self) -> None:
        start = self.prompt.date("Enter start date")
        end = self.prompt.date("Enter end date")
        self._show_progress(self._service.history(self._username, start, end))

    def update_profile(self) -> None:
        weight = self.prompt.number("Enter new weight (kg)", check=lambda w: w > 0)
        self._service.update_weight(self._username, weight)
        self.console.success("Profile updated successfully!")

    def goal_summary(self) -> None:
        summary = self._service.goal_summary(self._username)
        self.console.print(f"Goals completed: {summary.completed}/{summary.total}")

    def nutritional_goals(self) -> None:
        calories = self.prompt.number("Enter new daily caloric goal", check=_non_negative)
        protein = self.prompt.number("Enter new daily protein goal", check=_non_negative)
        carbs = self.prompt.number("Enter new daily carbs goal", check=_non_negative)
        fats = self.prompt.number("Enter new daily fats goal", check=_non_negative)
        self._service.set_nutritional_goals(
            self._username,
            NutritionGoalsUpdate(calories=calories, protein=protein, carbs=carbs, fats=fats),
        )
        self.console.success("Nutritional goals updated!")

    def _show_progress(self, progress: Progress) -> None:
        self.console.table(
            [
                {
                    "date": w.date.date().isoformat(),
                    "workout_type": w.workout_type,
                    "duration": f"{w.duration:g}",
                    "calories_burned": f"{w.calories_burned:g}",
                    "intensity": w.intensity,
                }
                for w in progress.workouts
            ],
            _WORKOUT_COLUMNS,
            title="Workouts",
            empty_message="No workouts logged.",
        )
        self.console.table(
            [
                {
                    "date": m.date.date().isoformat(),
                    "name": m.name,
                    "calories": f"{m.calories:g}",
                    "protein": f"{m.protein:g}",
                    "carbs": f"{m.carbs:g}",
                    "fats": f"{m.fats:g}",
                }
                for m in progress.meals
            ],
            _MEAL_COLUMNS,
            title="Meals",
            empty_message="No meals logged.",
        )
        if progress.goals:
            self.console.table(
                [
                    {
                        "description": g.description,
                        "deadline": g.deadline.isoformat(),
                        "status": g.status,
                    }
                    for g in progress.goals
                ],
                _GOAL_COLUMNS,
                title="Goals",
            )
        if progress.nutrition is not None:
            consumed, goals = progress.nutrition.consumed, progress.nutrition.goals
            self.console.key_values(
                [
                    ("Calories", f"{consumed.calories:g}/{goals.calories:g}"),
                    ("Protein", f"{consumed.protein:g}/{goals.protein:g} g"),
                    ("Carbs", f"{consumed.carbs:g}/{goals.carbs:g} g"),
                    ("Fats", f"{consumed.fats:g}/{goals.fats:g} g"),
                ],
                title="Nutrition",
            )
