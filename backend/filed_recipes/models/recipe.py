from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class Ingredient(BaseModel):
    amount: str = ""
    measure: str = ""
    name: str

    def __str__(self) -> str:
        return " ".join(part for part in (self.amount, self.measure, self.name) if part)


class Recipe(BaseModel):
    """
    A named recipe. Equality is structural over name, ingredients and
    instructions, so a clone compares equal to the stored original.
    """

    name: str = Field(min_length=1)
    ingredients: List[Ingredient] = []
    instructions: List[str] = []

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)

    def add_instruction(self, instruction: str) -> None:
        self.instructions.append(instruction)

    def clone(self) -> Recipe:
        return self.model_copy(deep=True)
