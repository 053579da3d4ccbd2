"""
Favorites store.

Keeps the user's saved recipes as an ordered collection with at most one entry
per recipe id, and writes the full collection to storage after every change.

Each stored entry is a RecipeSummary in wire format:
- `idMeal`: recipe identifier (the de-duplication key)
- `strMeal`: display name
- `strMealThumb`: thumbnail URL
- Optional: `strCategory`, `strArea`

# NOTE: Persisted data that cannot be decoded is discarded and the store
    starts empty. Users never see an error for a broken favorites file.
"""

import json
import logging
from typing import Dict, Iterator, List, Union

from pydantic import ValidationError

from recipe_finder.config import DEFAULT_FAVORITES_KEY
from recipe_finder.errors import PersistenceCorrupt
from recipe_finder.models import RecipeSummary
from recipe_finder.storage import KeyValueStorage

logger = logging.getLogger(__name__)

RecipeOrId = Union[RecipeSummary, str]


def _recipe_id(recipe: RecipeOrId) -> str:
    return recipe if isinstance(recipe, str) else recipe.id


def decode_favorites(raw: str) -> List[RecipeSummary]:
    """
    Decode a persisted favorites payload.

    Entries that fail validation are skipped. Later duplicates of an id are
    dropped so the first occurrence wins.

    Raises:
        PersistenceCorrupt: If the payload is not JSON or not a JSON list.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise PersistenceCorrupt(f"Favorites payload is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise PersistenceCorrupt(f"Favorites payload is a {type(data).__name__}, expected a list")

    recipes: List[RecipeSummary] = []
    seen = set()
    for entry in data:
        try:
            recipe = RecipeSummary.model_validate(entry)
        except ValidationError as e:
            logger.warning("Skipping malformed favorite entry %r: %s", entry, e)
            continue
        if recipe.id in seen:
            continue
        seen.add(recipe.id)
        recipes.append(recipe)
    return recipes


def encode_favorites(recipes: List[RecipeSummary]) -> str:
    """Serialize favorites as a JSON list of wire-format summaries."""
    return json.dumps([recipe.to_storage() for recipe in recipes], ensure_ascii=False)


class FavoritesStore:
    """
    Durable, de-duplicated set of favorite recipes.

    The store reads storage once when constructed. Every mutating call
    persists the whole set before it returns, so a new store built on the
    same storage sees the change immediately.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_FAVORITES_KEY) -> None:
        self.storage = storage
        self.key = key
        # recipe id -> summary; dicts keep insertion order
        self._items: Dict[str, RecipeSummary] = {}
        self._load()

    def _load(self) -> None:
        try:
            raw = self.storage.get(self.key)
        except OSError as e:
            logger.warning("Could not read favorites from storage, starting empty: %s", e)
            return
        if raw is None:
            return

        try:
            recipes = decode_favorites(raw)
        except PersistenceCorrupt as e:
            logger.warning("Stored favorites are corrupt, starting empty: %s", e)
            return

        self._items = {recipe.id: recipe for recipe in recipes}
        logger.debug("Loaded %d favorites from storage", len(self._items))

    def _save(self) -> None:
        try:
            self.storage.set(self.key, encode_favorites(list(self._items.values())))
        except OSError as e:
            logger.error("Error saving favorites to storage: %s", e, exc_info=True)

    @property
    def favorites(self) -> List[RecipeSummary]:
        """Favorites in the order they were added (a copy)."""
        return list(self._items.values())

    def is_favorite(self, recipe: RecipeOrId) -> bool:
        return _recipe_id(recipe) in self._items

    def add(self, recipe: RecipeSummary) -> None:
        """Add a recipe. Does nothing if its id is already a favorite."""
        if recipe.id in self._items:
            return
        # Store only the summary part so detail records persist compactly
        self._items[recipe.id] = recipe.summary()
        self._save()

    def remove(self, recipe: RecipeOrId) -> None:
        """Remove a recipe by id. Does nothing if it is not a favorite."""
        recipe_id = _recipe_id(recipe)
        if recipe_id not in self._items:
            return
        del self._items[recipe_id]
        self._save()

    def toggle(self, recipe: RecipeSummary) -> bool:
        """
        Flip favorite membership of a recipe.

        Returns:
            True if the recipe is a favorite after the call, False otherwise.
        """
        if recipe.id in self._items:
            self.remove(recipe)
            return False
        self.add(recipe)
        return True

    def clear(self) -> None:
        """Remove all favorites."""
        self._items.clear()
        self._save()

    @property
    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[RecipeSummary]:
        return iter(self.favorites)

    def __contains__(self, recipe: object) -> bool:
        if isinstance(recipe, (RecipeSummary, str)):
            return self.is_favorite(recipe)
        return False
