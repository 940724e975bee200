"""Domain entity — a recipe in the home cookbook."""

from dataclasses import dataclass, field, replace

from recordbook.domain.validation import clean_items, require_present, require_rating, require_text


@dataclass(frozen=True)
class Recipe:
    """A recipe, looked up by name.

    Ratings are individual 1–5 scores; every one is checked when the recipe
    is built, so a recipe carrying an out-of-range score cannot exist.
    """

    name: str
    ingredients: tuple[str, ...]
    instructions: str
    category: str
    nutritional_info: str
    ratings: tuple[int, ...] = field(default_factory=tuple)
    is_favorite: bool = False

    def __post_init__(self) -> None:
        require_text("name", self.name)
        require_present("ingredients", self.ingredients)
        require_text("instructions", self.instructions)
        require_text("category", self.category)
        require_present("nutritional_info", self.nutritional_info)
        object.__setattr__(self, "ingredients", clean_items(self.ingredients))
        object.__setattr__(self, "ratings", tuple(require_rating(r) for r in self.ratings))

    @property
    def key(self) -> str:
        return self.name

    @property
    def average_rating(self) -> float:
        if not self.ratings:
            return 0.0
        return sum(self.ratings) / len(self.ratings)

    def with_rating(self, rating: int) -> "Recipe":
        return replace(self, ratings=self.ratings + (require_rating(rating),))

    def with_favorite(self, is_favorite: bool) -> "Recipe":
        return replace(self, is_favorite=is_favorite)
