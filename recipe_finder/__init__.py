"""
Recipe Finder: client-side recipe search, filtering and favorites.

Importing the package loads .env (see recipe_finder.config). Front ends
normally call build_app_services() once per user session and keep the result.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from recipe_finder import config  # noqa: F401  (loads .env first)
from recipe_finder.config import FavoritesConfig
from recipe_finder.connectors import BaseRecipeSource, MealDBConnector
from recipe_finder.detail import DetailController
from recipe_finder.favorites import FavoritesStore
from recipe_finder.search import SearchController
from recipe_finder.storage import JsonFileStorage, KeyValueStorage

__version__ = "1.0.0"


@dataclass
class AppServices:
    """The three objects a front end talks to, sharing one recipe source."""
    source: BaseRecipeSource
    search: SearchController
    detail: DetailController
    favorites: FavoritesStore


def build_app_services(
    source: Optional[BaseRecipeSource] = None,
    storage: Optional[KeyValueStorage] = None,
    favorites_path: Optional[Union[str, Path]] = None,
) -> AppServices:
    """
    Wire the controllers and the favorites store.

    Args:
        source: Recipe source (optional, defaults to MealDBConnector from config)
        storage: Favorites storage (optional, defaults to JsonFileStorage)
        favorites_path: File for the default storage (optional, reads
                        RECIPE_FINDER_FAVORITES_PATH); ignored when `storage` is given

    Returns:
        AppServices bundle
    """
    source = source or MealDBConnector()
    if storage is None:
        storage = JsonFileStorage(favorites_path or FavoritesConfig.get_path())
    return AppServices(
        source=source,
        search=SearchController(source),
        detail=DetailController(source),
        favorites=FavoritesStore(storage, key=FavoritesConfig.get_key()),
    )


__all__ = ["AppServices", "build_app_services", "__version__"]
