from recipe_finder.connectors.base import BaseRecipeSource
from recipe_finder.connectors.mealdb_connector import MealDBConnector

__all__ = ["BaseRecipeSource", "MealDBConnector"]
