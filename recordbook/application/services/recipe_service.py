"""Application service (use case) for the recipe catalogue."""

from pathlib import Path

from recordbook.application.interfaces import RecordRepository
from recordbook.application.schemas import RecipeCreate, RecipeUpdate
from recordbook.domain.entities import Recipe
from recordbook.domain.query import any_item_contains, field_contains
from recordbook.domain.text import fold
from recordbook.domain.validation import require_rating


class RecipeService:
    def __init__(self, repository: RecordRepository[Recipe]):
        self._repository = repository

    def add_recipe(self, data: RecipeCreate) -> Recipe:
        return self._repository.add(
            Recipe(
                name=data.name,
                ingredients=tuple(data.ingredients),
                instructions=data.instructions,
                category=data.category,
                nutritional_info=data.nutritional_info,
            )
        )

    def list_recipes(self) -> list[Recipe]:
        return self._repository.list_records()

    def get_recipe(self, name: str) -> Recipe | None:
        return self._repository.get_by_key(name)

    def search(self, term: str) -> list[Recipe]:
        return list(self._repository.find_all(field_contains("name", term)))

    def search_by_ingredient(self, ingredient: str) -> list[Recipe]:
        return list(self._repository.find_all(any_item_contains("ingredients", ingredient)))

    def edit_recipe(self, name: str, data: RecipeUpdate) -> Recipe | None:
        """Rebuild a recipe from new values; ratings and favorite carry over, it moves to the end."""
        return self._repository.update_by_key(
            name,
            lambda old: Recipe(
                name=old.name,
                ingredients=tuple(data.ingredients),
                instructions=data.instructions,
                category=data.category,
                nutritional_info=data.nutritional_info,
                ratings=old.ratings,
                is_favorite=old.is_favorite,
            ),
        )

    def delete_recipe(self, name: str) -> bool:
        return self._repository.delete_by_key(name) is not None

    def rate_recipe(self, name: str, rating: int) -> Recipe | None:
        """Add a 1–5 rating. Raises ValidationError for anything else, even if the recipe is missing."""
        require_rating(rating)
        return self._repository.update_by_key(
            name, lambda old: old.with_rating(rating), keep_position=True
        )

    def mark_favorite(self, name: str) -> Recipe | None:
        return self._repository.update_by_key(
            name, lambda old: old.with_favorite(True), keep_position=True
        )

    def unmark_favorite(self, name: str) -> Recipe | None:
        return self._repository.update_by_key(
            name, lambda old: old.with_favorite(False), keep_position=True
        )

    def sorted_by_name(self) -> list[Recipe]:
        return self._sorted(lambda r: fold(r.name))

    def sorted_by_rating(self) -> list[Recipe]:
        return self._sorted(lambda r: r.average_rating, reverse=True)

    def sorted_by_category(self) -> list[Recipe]:
        return self._sorted(lambda r: fold(r.category))

    def _sorted(self, key, *, reverse: bool = False) -> list[Recipe]:
        return sorted(self._repository.list_records(), key=key, reverse=reverse)

    def save(self, path: str | Path) -> int:
        return self._repository.save_to_file(path)

    def load(self, path: str | Path, *, strict: bool = False) -> int:
        return self._repository.load_from_file(path, strict=strict)
