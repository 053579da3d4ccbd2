"""
Configuration management for Recipe Finder.

This module centralizes environment variable loading from the .env file at the
project root. It is imported by the package __init__, so .env is loaded before
any other code reads environment variables.

load_dotenv() is a no-op when .env does not exist; variables already set in
the environment always take precedence over .env values.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1/1"
- MEALDB_TIMEOUT_SECONDS: Optional, request timeout in seconds (default: 10)
- RECIPE_FINDER_FAVORITES_PATH: Optional, favorites file (default: "favorites.json")
- RECIPE_FINDER_FAVORITES_KEY: Optional, storage key (default: "recipe-favorites")
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MEALDB_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_MEALDB_TIMEOUT_SECONDS = 10.0
DEFAULT_FAVORITES_PATH = "favorites.json"
DEFAULT_FAVORITES_KEY = "recipe-favorites"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is located by going up from this file's location
    (recipe_finder/config.py -> recipe_finder/ -> project root).

    Safe to call multiple times.
    """
    project_root = Path(__file__).resolve().parent.parent
    env_path = project_root / ".env"

    # override=False means existing env vars take precedence
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


class MealDBConfig:
    """Configuration for the TheMealDB connector."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the TheMealDB API base URL.

        Returns:
            Base URL with trailing slash removed
        """
        return os.getenv("MEALDB_BASE_URL", DEFAULT_MEALDB_BASE_URL).rstrip("/")

    @staticmethod
    def get_timeout() -> float:
        """
        Get the request timeout in seconds.

        Returns:
            Positive timeout; invalid or non-positive values fall back to the default
        """
        raw = os.getenv("MEALDB_TIMEOUT_SECONDS")
        if not raw:
            return DEFAULT_MEALDB_TIMEOUT_SECONDS
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Invalid MEALDB_TIMEOUT_SECONDS=%r, using %s", raw, DEFAULT_MEALDB_TIMEOUT_SECONDS)
            return DEFAULT_MEALDB_TIMEOUT_SECONDS
        if timeout <= 0:
            logger.warning("Non-positive MEALDB_TIMEOUT_SECONDS=%r, using %s", raw, DEFAULT_MEALDB_TIMEOUT_SECONDS)
            return DEFAULT_MEALDB_TIMEOUT_SECONDS
        return timeout


class FavoritesConfig:
    """Configuration for favorites persistence."""

    @staticmethod
    def get_path() -> Path:
        """Get the favorites storage file path."""
        return Path(os.getenv("RECIPE_FINDER_FAVORITES_PATH", DEFAULT_FAVORITES_PATH)).expanduser()

    @staticmethod
    def get_key() -> str:
        """Get the storage key under which favorites are saved."""
        return os.getenv("RECIPE_FINDER_FAVORITES_KEY", DEFAULT_FAVORITES_KEY)
