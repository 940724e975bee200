"""Interactive Recipe Management System."""

from rich.markup import escape

from recordbook.application.schemas import RecipeCreate, RecipeUpdate
from recordbook.application.services import RecipeService
from recordbook.config import Settings
from recordbook.domain.entities import Recipe
from recordbook.domain.validation import RATING_MAX, RATING_MIN
from recordbook.presentation.cli.console import Console
from recordbook.presentation.cli.menu import Menu, MenuOption
from recordbook.presentation.cli.prompts import Prompter

_COLUMNS = [
    ("name", "Name"),
    ("category", "Category"),
    ("rating", "Rating"),
    ("favorite", "Favorite"),
]


class RecipeMenu(Menu):
    title = "Recipe Management System"

    def __init__(
        self, service: RecipeService, console: Console, prompter: Prompter, settings: Settings
    ):
        super().__init__(console, prompter)
        self._service = service
        self._settings = settings

    def options(self) -> list[MenuOption]:
        return [
            ("Add Recipe", self.add_recipe),
            ("View Recipes", self.view_recipes),
            ("Search Recipe", self.search),
            ("Edit Recipe", self.edit_recipe),
            ("Delete Recipe", self.delete_recipe),
            ("Rate Recipe", self.rate_recipe),
            ("Mark Recipe as Favorite", self.mark_favorite),
            ("Unmark Recipe as Favorite", self.unmark_favorite),
            ("Search by Ingredient", self.search_by_ingredient),
            ("Sort Recipes by Name", self.sort_by_name),
            ("Sort Recipes by Rating", self.sort_by_rating),
            ("Sort Recipes by Category", self.sort_by_category),
            ("Print Recipe", self.print_recipe),
            ("Save Recipes to File", self.save),
            ("Load Recipes from File", self.load),
        ]

    def add_recipe(self) -> None:
        self._service.add_recipe(RecipeCreate(**self._recipe_fields("Enter recipe name")))
        self.console.success("Recipe added successfully.")

    def view_recipes(self) -> None:
        self._show(self._service.list_recipes(), "No recipes available.")

    def search(self) -> None:
        term = self.prompt.text("Enter recipe name to search")
        self._show(self._service.search(term), f"No recipes found matching: {escape(term)}")

    def edit_recipe(self) -> None:
        fields = self._recipe_fields("Enter recipe name to edit", new=True)
        if self._service.edit_recipe(fields["name"], RecipeUpdate(**fields)):
            self.console.success("Recipe updated successfully.")
        else:
            self.console.warning("Recipe not found.")

    def delete_recipe(self) -> None:
        name = self.prompt.text("Enter recipe name to delete")
        if self._service.delete_recipe(name):
            self.console.success("Recipe deleted successfully.")
        else:
            self.console.warning("Recipe not found.")

    def rate_recipe(self) -> None:
        name = self.prompt.text("Enter recipe name to rate")
        rating = self.prompt.integer(
            f"Enter rating ({RATING_MIN}-{RATING_MAX})",
            check=lambda r: RATING_MIN <= r <= RATING_MAX,
            error=f"Please enter a rating between {RATING_MIN} and {RATING_MAX}",
        )
        if self._service.rate_recipe(name, rating):
            self.console.success("Recipe rated successfully.")
        else:
            self.console.warning("Recipe not found.")

    def mark_favorite(self) -> None:
        name = self.prompt.text("Enter recipe name to mark as favorite")
        if self._service.mark_favorite(name):
            self.console.success("Recipe marked as favorite.")
        else:
            self.console.warning("Recipe not found.")

    def unmark_favorite(self) -> None:
        name = self.prompt.text("Enter recipe name to unmark as favorite")
        if self._service.unmark_favorite(name):
            self.console.success("Recipe unmarked as favorite.")
        else:
            self.console.warning("Recipe not found.")

    def search_by_ingredient(self) -> None:
        ingredient = self.prompt.text("Enter ingredient to search")
        self._show(
            self._service.search_by_ingredient(ingredient),
            f"No recipes found with ingredient: {escape(ingredient)}",
        )

    def sort_by_name(self) -> None:
        self._show(self._service.sorted_by_name(), "No recipes available.")

    def sort_by_rating(self) -> None:
        self._show(self._service.sorted_by_rating(), "No recipes available.")

    def sort_by_category(self) -> None:
        self._show(self._service.sorted_by_category(), "No recipes available.")

    def print_recipe(self) -> None:
        name = self.prompt.text("Enter recipe name to print")
        recipe = self._service.get_recipe(name)
        if recipe is None:
            self.console.warning("Recipe not found.")
            return
        body = "\n".join(
            [
                f"Category: {escape(recipe.category)}",
                f"Ingredients: {escape(', '.join(recipe.ingredients))}",
                f"Instructions: {escape(recipe.instructions)}",
                f"Nutritional Info: {escape(recipe.nutritional_info)}",
                f"Average Rating: {recipe.average_rating:.1f}",
                f"Favorite: {'Yes' if recipe.is_favorite else 'No'}",
            ]
        )
        self.console.panel(body, title=escape(recipe.name))

    def save(self) -> None:
        written = self._service.save(self._path("Enter file path to save recipes"))
        self.console.success(f"Recipes saved successfully. ({written} written)")

    def load(self) -> None:
        loaded = self._service.load(
            self._path("Enter file path to load recipes"), strict=self._settings.strict_load
        )
        self.console.success(f"Recipes loaded successfully. ({loaded} loaded)")

    def _recipe_fields(self, name_label: str, *, new: bool = False) -> dict:
        prefix = "Enter new" if new else "Enter"
        return {
            "name": self.prompt.text(name_label),
            "ingredients": self.prompt.text(f"{prefix} ingredients (comma separated)"),
            "instructions": self.prompt.text(f"{prefix} instructions"),
            "category": self.prompt.text(f"{prefix} category"),
            "nutritional_info": self.prompt.text(f"{prefix} nutritional information", default=""),
        }

    def _show(self, recipes: list[Recipe], empty_message: str) -> None:
        rows = [
            {
                "name": r.name,
                "category": r.category,
                "rating": f"{r.average_rating:.1f}",
                "favorite": "Yes" if r.is_favorite else "No",
            }
            for r in recipes
        ]
        self.console.table(rows, _COLUMNS, empty_message=empty_message)

    def _path(self, label: str):
        return self._settings.data_path(self.prompt.text(label, default=self._settings.recipes_file))
