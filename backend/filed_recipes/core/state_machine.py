import logging
from enum import Enum
from typing import List, Optional

from ..models.recipe import Ingredient, Recipe
from .errors import FormatError

log = logging.getLogger(__name__)

INGREDIENT_DELIMITER = ";"
INGREDIENT_FIELDS = 3


class Section(str, Enum):
    SEEKING = "[Recept]"
    INGREDIENTS = "[Ingredienser]"
    INSTRUCTIONS = "[Instruktioner]"


SECTION_TAGS = {section.value: section for section in Section}


class RecipeStateMachine:
    """
    Line-by-line reader for the section-tagged recipe format.

    Tag lines switch the current section, every other non-blank line is
    handled according to it. A recipe is only handed over once the next title
    or the end of input closes it.
    """

    def __init__(self) -> None:
        self.section = Section.SEEKING
        self.current: Optional[Recipe] = None
        self.finished: List[Recipe] = []
        self.line_number = 0

    def feed(self, line: str) -> None:
        self.line_number += 1

        if not line.strip():
            return

        section = SECTION_TAGS.get(line)
        if section is not None:
            self.section = section
            return

        if self.section == Section.SEEKING:
            self._open(line)
        elif self.section == Section.INGREDIENTS:
            self._require_open(line).add_ingredient(self._ingredient(line))
        else:
            self._require_open(line).add_instruction(line)

    def finish(self) -> List[Recipe]:
        self._close()
        log.debug(f"Read {len(self.finished)} recipes from {self.line_number} lines")
        return self.finished

    def _open(self, title: str) -> None:
        self._close()
        self.current = Recipe(name=title)

    def _close(self) -> None:
        if self.current is not None:
            self.finished.append(self.current)
            self.current = None

    def _require_open(self, line: str) -> Recipe:
        if self.current is None:
            raise FormatError(
                f"{self.section.value} content before any recipe title",
                line_number=self.line_number,
                line=line,
            )
        return self.current

    def _ingredient(self, line: str) -> Ingredient:
        fields = line.split(INGREDIENT_DELIMITER)
        if len(fields) != INGREDIENT_FIELDS:
            raise FormatError(
                f"Expected {INGREDIENT_FIELDS} ingredient fields, got {len(fields)}",
                line_number=self.line_number,
                line=line,
            )
        amount, measure, name = fields
        return Ingredient(amount=amount, measure=measure, name=name)
