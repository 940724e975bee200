"""Pydantic DTOs for the recipe catalogue."""

from pydantic import BaseModel, Field, field_validator


class RecipeCreate(BaseModel):
    """Schema for adding a recipe. Ingredients may be given as a comma list."""

    name: str = Field(..., min_length=1, examples=["Pancakes"])
    ingredients: list[str] = Field(..., min_length=1, examples=[["flour", "milk", "eggs"]])
    instructions: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, examples=["Breakfast"])
    nutritional_info: str = ""

    @field_validator("ingredients", mode="before")
    @classmethod
    def _split_ingredients(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


class RecipeUpdate(RecipeCreate):
    """Same fields as RecipeCreate; the name picks the recipe to replace."""
