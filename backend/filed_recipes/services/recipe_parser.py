"""
Text codec for the section-tagged recipe file.

    [Recept]
    Pannkakor
    [Ingredienser]
    2;dl;mjölk
    [Instruktioner]
    Blanda allt.
"""

from typing import Iterable, List

from ..core.state_machine import INGREDIENT_DELIMITER, RecipeStateMachine, Section
from ..models.recipe import Ingredient, Recipe


class RecipeParser:
    @classmethod
    def parse(cls, lines: Iterable[str]) -> List[Recipe]:
        machine = RecipeStateMachine()
        for line in lines:
            machine.feed(line)

        # sorted() is stable and compares code points, independent of locale
        return sorted(machine.finish(), key=lambda recipe: recipe.name)

    @classmethod
    def parse_text(cls, raw: str) -> List[Recipe]:
        return cls.parse(raw.splitlines())


class RecipeSerializer:
    @staticmethod
    def format_ingredient(ingredient: Ingredient) -> str:
        return INGREDIENT_DELIMITER.join((ingredient.amount, ingredient.measure, ingredient.name))

    @classmethod
    def serialize(cls, recipes: Iterable[Recipe]) -> List[str]:
        lines: List[str] = []
        for recipe in recipes:
            lines.append(Section.SEEKING.value)
            lines.append(recipe.name)
            lines.append(Section.INGREDIENTS.value)
            lines.extend(cls.format_ingredient(i) for i in recipe.ingredients)
            lines.append(Section.INSTRUCTIONS.value)
            lines.extend(recipe.instructions)
        return lines

    @classmethod
    def serialize_text(cls, recipes: Iterable[Recipe]) -> str:
        return "".join(f"{line}\n" for line in cls.serialize(recipes))
