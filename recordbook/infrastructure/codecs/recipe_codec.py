"""Line format for recipes.

    name|ingredient1,ingredient2|instructions|category|nutritionalInfo|rating1,rating2|favorite

The favorite flag is written as ``1``/``0``. An empty ratings field means no
ratings yet; a rating outside 1–5 makes the whole line unreadable.
"""

from recordbook.application.interfaces import RecordCodec
from recordbook.domain.entities import Recipe

from .fields import format_flag, join_list, parse_flag, split_list


class RecipeCodec(RecordCodec[Recipe]):
    field_count = 7

    def encode(self, record: Recipe) -> list[str]:
        return [
            record.name,
            join_list(record.ingredients),
            record.instructions,
            record.category,
            record.nutritional_info,
            join_list(record.ratings),
            format_flag(record.is_favorite),
        ]

    def decode(self, fields: list[str]) -> Recipe:
        name, ingredients, instructions, category, nutrition, ratings, favorite = fields
        return Recipe(
            name=name,
            ingredients=tuple(split_list(ingredients)),
            instructions=instructions,
            category=category,
            nutritional_info=nutrition,
            ratings=tuple(int(r) for r in split_list(ratings)),
            is_favorite=parse_flag(favorite),
        )
