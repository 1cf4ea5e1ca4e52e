import logging
import os
import tempfile
from pathlib import Path
from typing import List, Union

from ..models.recipe import Recipe
from ..services.recipe_parser import RecipeParser, RecipeSerializer
from .config import SaveMode
from .errors import IndexOutOfRange, StorageUnavailable
from .notifier import ChangeNotifier, Observer

log = logging.getLogger(__name__)


class RecipeRepository:
    """
    Owns the canonical, name-sorted recipe collection backed by a tagged text
    file.

    Every recipe handed out is a deep clone, so callers can never mutate the
    stored collection. Observers registered with ``subscribe`` are called
    after each successful load, save and delete.
    """

    def __init__(
        self,
        path: Union[str, Path],
        *,
        save_mode: SaveMode = SaveMode.OVERWRITE,
        encoding: str = "utf-8",
    ) -> None:
        self.path = Path(path).resolve()
        self.save_mode = save_mode
        self.encoding = encoding
        self._recipes: List[Recipe] = []
        self._modified = False
        self._notifier = ChangeNotifier()

    @property
    def is_modified(self) -> bool:
        return self._modified

    def __len__(self) -> int:
        return len(self._recipes)

    def subscribe(self, callback: Observer) -> Observer:
        return self._notifier.subscribe(callback)

    def unsubscribe(self, callback: Observer) -> None:
        self._notifier.unsubscribe(callback)

    def get_all(self) -> List[Recipe]:
        return [recipe.clone() for recipe in self._recipes]

    def get_at(self, index: int) -> Recipe:
        return self._stored_at(index).clone()

    def delete(self, recipe: Recipe) -> None:
        """
        Remove the stored recipe that is, or equals, ``recipe``.

        A recipe that is not stored leaves the collection untouched but the
        repository is still marked modified and observers are notified.
        """
        for position, stored in enumerate(self._recipes):
            if stored is recipe or stored == recipe:
                del self._recipes[position]
                log.info(f"Deleted recipe {stored.name!r}")
                break
        else:
            log.warning(f"Recipe {getattr(recipe, 'name', recipe)!r} not found, nothing deleted")

        self._modified = True
        self._notifier.notify()

    def delete_at(self, index: int) -> None:
        self.delete(self._stored_at(index))

    def load(self) -> None:
        """
        Replace the collection with the recipes read from ``path``.

        Raises StorageUnavailable when the file cannot be read and
        FormatError when it is malformed; either way the current collection
        is left as it was.
        """
        try:
            with open(self.path, encoding=self.encoding) as f:
                recipes = RecipeParser.parse(line.rstrip("\n") for line in f)
        except UnicodeDecodeError as e:
            raise StorageUnavailable(self.path, f"not valid {self.encoding}") from e
        except OSError as e:
            raise StorageUnavailable(self.path, e.strerror or str(e)) from e

        self._recipes = recipes
        self._modified = False
        log.info(f"Loaded {len(recipes)} recipes from {self.path}")
        self._notifier.notify()

    def save(self) -> None:
        """
        Write the collection to ``path``.

        The text is encoded up front and, when overwriting, written to a
        temporary file that then replaces ``path``, so a failed save leaves
        the previous file intact.
        """
        text = RecipeSerializer.serialize_text(self._recipes)
        try:
            data = text.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise StorageUnavailable(self.path, f"cannot encode as {self.encoding}") from e

        try:
            if self.save_mode == SaveMode.APPEND:
                with open(self.path, "ab") as f:
                    f.write(data)
            else:
                self._replace(data)
        except OSError as e:
            raise StorageUnavailable(self.path, e.strerror or str(e)) from e

        self._modified = False
        log.info(f"Saved {len(self._recipes)} recipes to {self.path} ({self.save_mode.value})")
        self._notifier.notify()

    def _stored_at(self, index: int) -> Recipe:
        if not 0 <= index < len(self._recipes):
            raise IndexOutOfRange(index, len(self._recipes))
        return self._recipes[index]

    def _replace(self, data: bytes) -> None:
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            if self.path.exists():
                os.chmod(tmp, self.path.stat().st_mode & 0o777)
            os.replace(tmp, self.path)
        except OSError:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
