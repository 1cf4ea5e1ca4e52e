"""
Read-only presentation of recipes: a display title, human readable
ingredient strings and numbered instructions.
"""

from typing import Iterable, List

from pydantic import BaseModel

from ..models.recipe import Recipe

RULE = "============"


class RecipeDisplay(BaseModel):
    title: str
    ingredients: List[str]
    instructions: List[str]


class RecipeView:
    @staticmethod
    def render(recipe: Recipe) -> RecipeDisplay:
        return RecipeDisplay(
            title=recipe.name,
            ingredients=[str(ingredient) for ingredient in recipe.ingredients],
            instructions=[f"{number} {text}" for number, text in enumerate(recipe.instructions, start=1)],
        )

    @classmethod
    def render_all(cls, recipes: Iterable[Recipe]) -> List[RecipeDisplay]:
        return [cls.render(recipe) for recipe in recipes]

    @staticmethod
    def to_lines(display: RecipeDisplay) -> List[str]:
        return [
            display.title,
            "",
            "Ingredienser",
            RULE,
            *display.ingredients,
            "",
            "Gör såhär:",
            RULE,
            *display.instructions,
        ]
