"""
TheMealDB connector using the public JSON API.

This connector interfaces with TheMealDB (https://www.themealdb.com) to search
recipes by ingredient, look up full recipe records and list the category/area
taxonomy, normalizing responses into RecipeSummary and RecipeDetail models.

The connector:
- Uses a shared requests.Session against MEALDB_BASE_URL (see recipe_finder.config)
- Treats {"meals": null} as "no results", never as an error
- Raises RemoteUnavailable on network errors, timeouts, non-2xx statuses and
  undecodable bodies, with the original exception chained
- Never retries; callers decide whether to re-issue a request

All calls block. The controllers run them in worker threads.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from recipe_finder.config import MealDBConfig
from recipe_finder.errors import InvalidInput, RemoteUnavailable
from recipe_finder.models import RecipeDetail, RecipeSummary
from recipe_finder.taxonomy import TAXONOMY_AREA, TAXONOMY_CATEGORY

from .base import BaseRecipeSource

logger = logging.getLogger(__name__)

# list.php query parameter and response field per taxonomy kind
_TAXONOMY_QUERY = {
    TAXONOMY_CATEGORY: ("c", "strCategory"),
    TAXONOMY_AREA: ("a", "strArea"),
}


class MealDBConnector(BaseRecipeSource):
    """
    Connector for TheMealDB recipe service.

    Integrates with the filter.php, lookup.php and list.php endpoints of the
    v1 JSON API and normalizes the results into the recipe models.
    """
    source = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API base URL (optional, reads MEALDB_BASE_URL or uses the public v1 API)
            timeout: Request timeout in seconds (optional, reads MEALDB_TIMEOUT_SECONDS or 10)
            session: requests.Session to reuse (optional, a new one is created)
        """
        self.base_url = (base_url or MealDBConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout()
        self.session = session or requests.Session()

    def _get_meals(self, endpoint: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """
        GET an endpoint and return its "meals" array.

        Returns:
            The list of meal dicts, or an empty list if the field is null/missing.

        Raises:
            RemoteUnavailable: On any transport failure or malformed body.
        """
        url = f"{self.base_url}/{endpoint}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            raise RemoteUnavailable(f"Request to {endpoint} timed out after {self.timeout}s", cause=e) from e
        except requests.exceptions.ConnectionError as e:
            raise RemoteUnavailable(f"Could not connect to recipe service: {e}", cause=e) from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise RemoteUnavailable(f"Recipe service returned HTTP {status} for {endpoint}", cause=e) from e
        except requests.exceptions.RequestException as e:
            raise RemoteUnavailable(f"Request to {endpoint} failed: {e}", cause=e) from e
        except ValueError as e:
            # response.json() on a non-JSON body
            raise RemoteUnavailable(f"Recipe service returned an invalid body for {endpoint}", cause=e) from e

        if not isinstance(data, dict):
            raise RemoteUnavailable(f"Unexpected response format from {endpoint}: expected a JSON object")

        meals = data.get("meals")
        if meals is None:
            return []
        if not isinstance(meals, list):
            raise RemoteUnavailable(f"Unexpected response format from {endpoint}: 'meals' is not a list")
        return meals

    def search_by_ingredient(self, term: str) -> List[RecipeSummary]:
        """
        Search recipes containing an ingredient via filter.php.

        Args:
            term: Ingredient name (e.g. "chicken"); surrounding whitespace is ignored

        Returns:
            List of RecipeSummary in the order returned by the service. Entries
            that cannot be parsed are skipped.

        Raises:
            InvalidInput: If `term` is blank.
            RemoteUnavailable: If the request fails.
        """
        if not term or not term.strip():
            raise InvalidInput("Search term must not be empty")

        term = term.strip()
        logger.info("MealDB connector: searching by ingredient=%r", term)
        meals = self._get_meals("filter.php", {"i": term})

        recipes: List[RecipeSummary] = []
        parse_errors = 0
        for meal in meals:
            try:
                recipes.append(RecipeSummary.model_validate(meal))
            except ValidationError as e:
                parse_errors += 1
                logger.debug("MealDB connector: skipping unparsable meal %r: %s", meal, e)

        if parse_errors:
            logger.warning("MealDB connector: skipped %d unparsable meals for ingredient=%r", parse_errors, term)
        logger.info("MealDB connector: ingredient=%r returned %d recipes", term, len(recipes))
        return recipes

    def lookup_by_id(self, recipe_id: str) -> Optional[RecipeDetail]:
        """
        Fetch a full recipe record via lookup.php.

        Args:
            recipe_id: Recipe identifier (idMeal)

        Returns:
            RecipeDetail, or None if the id is unknown upstream.

        Raises:
            RemoteUnavailable: If the request fails or the record is malformed.
        """
        logger.info("MealDB connector: looking up recipe id=%r", recipe_id)
        meals = self._get_meals("lookup.php", {"i": str(recipe_id)})
        if not meals:
            logger.info("MealDB connector: recipe id=%r not found", recipe_id)
            return None

        try:
            return RecipeDetail.model_validate(meals[0])
        except ValidationError as e:
            raise RemoteUnavailable(f"Recipe service returned a malformed record for id {recipe_id!r}", cause=e) from e

    def list_taxonomy(self, kind: str) -> List[str]:
        """
        List categories or areas via list.php.

        Args:
            kind: "category" or "area"

        Returns:
            Names in service order. Any failure is logged and yields an empty
            list, since the taxonomy only feeds optional UI hints.

        Raises:
            InvalidInput: If `kind` is not "category" or "area".
        """
        if kind not in _TAXONOMY_QUERY:
            raise InvalidInput(f"Unknown taxonomy kind {kind!r}; expected 'category' or 'area'")

        param, field = _TAXONOMY_QUERY[kind]
        try:
            meals = self._get_meals("list.php", {param: "list"})
        except RemoteUnavailable as e:
            logger.warning("MealDB connector: could not list %s taxonomy: %s", kind, e)
            return []

        return [str(item[field]) for item in meals if isinstance(item, dict) and item.get(field)]
