"""
Base class for remote recipe sources.

This module defines the abstract interface the controllers depend on. The
production implementation is MealDBConnector; tests substitute simple fakes.

All recipe sources must:
- Provide search_by_ingredient, returning RecipeSummary records (empty list for no matches)
- Provide lookup_by_id, returning a RecipeDetail or None when the id is unknown
- Provide list_taxonomy, returning category or area names (empty list on failure)
- Raise RemoteUnavailable for transport failures on the first two operations
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from recipe_finder.models import RecipeDetail, RecipeSummary


class BaseRecipeSource(ABC):
    """
    Abstract base class for remote recipe sources.

    Attributes:
        source: Short identifier for the source (e.g. "mealdb")
    """
    source: str

    @abstractmethod
    def search_by_ingredient(self, term: str) -> List[RecipeSummary]:
        """
        Search recipes that use an ingredient.

        Args:
            term: Non-empty ingredient name (e.g. "chicken")

        Returns:
            Matching recipes in source order; empty list when nothing matches.

        Raises:
            InvalidInput: If `term` is blank.
            RemoteUnavailable: If the source cannot be reached or fails.
        """
        pass

    @abstractmethod
    def lookup_by_id(self, recipe_id: str) -> Optional[RecipeDetail]:
        """
        Fetch the full record of one recipe.

        Returns:
            The detail record, or None if the id does not exist upstream.

        Raises:
            RemoteUnavailable: If the source cannot be reached or fails.
        """
        pass

    @abstractmethod
    def list_taxonomy(self, kind: str) -> List[str]:
        """
        List the categories or areas known to the source.

        Args:
            kind: "category" or "area"

        Returns:
            Names in source order; empty list if the source fails.
        """
        pass
