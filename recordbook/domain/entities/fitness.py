"""Domain entities for the personal fitness tracker.

Workouts, meals and goals each carry the owning ``username`` so they can live
in their own flat collections instead of hanging off the user.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from recordbook.domain.validation import require_present, require_text

DEFAULT_CALORIE_GOAL = 2000.0
DEFAULT_PROTEIN_GOAL = 150.0
DEFAULT_CARBS_GOAL = 250.0
DEFAULT_FATS_GOAL = 70.0


@dataclass(frozen=True)
class NutritionGoals:
    calories: float = DEFAULT_CALORIE_GOAL
    protein: float = DEFAULT_PROTEIN_GOAL
    carbs: float = DEFAULT_CARBS_GOAL
    fats: float = DEFAULT_FATS_GOAL


@dataclass(frozen=True)
class FitnessUser:
    username: str
    password: str
    age: int
    weight: float
    height: float
    goals: NutritionGoals = field(default_factory=NutritionGoals)

    def __post_init__(self) -> None:
        require_text("username", self.username)
        require_text("password", self.password)
        require_present("age", self.age)
        require_present("weight", self.weight)
        require_present("height", self.height)

    @property
    def key(self) -> str:
        return self.username


@dataclass(frozen=True)
class Workout:
    username: str
    workout_type: str
    duration: float  # minutes
    calories_burned: float
    intensity: str
    date: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        require_text("workout_type", self.workout_type)

    @property
    def key(self) -> str:
        return self.username


@dataclass(frozen=True)
class Meal:
    username: str
    name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    date: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        require_text("name", self.name)

    @property
    def key(self) -> str:
        return self.username


@dataclass(frozen=True)
class Goal:
    username: str
    description: str
    deadline: date
    is_completed: bool = False

    def __post_init__(self) -> None:
        require_text("description", self.description)
        require_present("deadline", self.deadline)

    @property
    def key(self) -> tuple[str, str]:
        return (self.username, self.description)

    @property
    def status(self) -> str:
        return "Completed" if self.is_completed else "Not Completed"
