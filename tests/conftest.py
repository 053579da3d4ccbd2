"""
Shared fixtures for recipe finder tests.

FakeRecipeSource stands in for the TheMealDB connector so no test makes a real
HTTP call. Its search and lookup can be held on a threading.Event to control
the order in which concurrent requests complete.
"""

import threading
from typing import Dict, List, Optional

import pytest

from recipe_finder.connectors.base import BaseRecipeSource
from recipe_finder.models import RecipeDetail, RecipeSummary
from recipe_finder.storage import InMemoryStorage


class FakeRecipeSource(BaseRecipeSource):
    """In-memory recipe source with optional per-term gates and failures."""
    source = "fake"

    def __init__(
        self,
        results: Optional[Dict[str, List[RecipeSummary]]] = None,
        details: Optional[Dict[str, RecipeDetail]] = None,
    ) -> None:
        self.results = results or {}
        self.details = details or {}
        self.errors: Dict[str, Exception] = {}
        self.gates: Dict[str, threading.Event] = {}
        self.search_calls: List[str] = []
        self.lookup_calls: List[str] = []

    def hold(self, key: str) -> threading.Event:
        """Block calls for `key` until the returned event is set."""
        gate = threading.Event()
        self.gates[key] = gate
        return gate

    def _wait(self, key: str) -> None:
        gate = self.gates.get(key)
        if gate is not None:
            assert gate.wait(timeout=5), f"gate for {key!r} was never released"
        if key in self.errors:
            raise self.errors[key]

    def search_by_ingredient(self, term: str) -> List[RecipeSummary]:
        self.search_calls.append(term)
        self._wait(term)
        return list(self.results.get(term, []))

    def lookup_by_id(self, recipe_id: str) -> Optional[RecipeDetail]:
        self.lookup_calls.append(recipe_id)
        self._wait(recipe_id)
        return self.details.get(recipe_id)

    def list_taxonomy(self, kind: str) -> List[str]:
        return []


@pytest.fixture
def sample_recipes() -> List[RecipeSummary]:
    """A mixed list covering every filter axis."""
    return [
        RecipeSummary(id="1", name="Beef Wellington", thumbnail="t1", category="Beef", area="British"),
        RecipeSummary(id="2", name="Slow Cooked Beef Stew", thumbnail="t2", category="Beef", area="Irish"),
        RecipeSummary(id="3", name="Cheese Salad", thumbnail="t3", category="Vegetarian", area="Greek"),
        RecipeSummary(id="4", name="Vegan Chickpea Curry", thumbnail="t4", category="Vegan", area="Indian"),
        RecipeSummary(id="5", name="Pancakes", thumbnail="t5", category="Dessert", area="American"),
        RecipeSummary(id="6", name="Chicken Tikka", thumbnail="t6"),
    ]


@pytest.fixture
def sample_meal() -> Dict[str, Optional[str]]:
    """A lookup.php meal entry as returned by TheMealDB."""
    meal: Dict[str, Optional[str]] = {
        "idMeal": "52772",
        "strMeal": "Teriyaki Chicken Casserole",
        "strMealThumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
        "strCategory": "Chicken",
        "strArea": "Japanese",
        "strInstructions": "Preheat oven to 350 F.\r\n\r\nCombine soy sauce and brown sugar.\r\nBake 35 minutes.",
        "strYoutube": "https://www.youtube.com/watch?v=4aZr5hZXP_s",
        "strSource": "",
        "strTags": "Meat,Casserole",
    }
    for i in range(1, 21):
        meal[f"strIngredient{i}"] = ""
        meal[f"strMeasure{i}"] = ""
    meal["strIngredient1"] = "soy sauce"
    meal["strMeasure1"] = "3/4 cup"
    meal["strIngredient2"] = " water "
    meal["strMeasure2"] = None
    meal["strIngredient3"] = "   "
    meal["strMeasure3"] = "1 tsp"
    meal["strIngredient4"] = None
    meal["strIngredient5"] = "chicken breasts"
    meal["strMeasure5"] = "2 "
    return meal


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def source(sample_recipes, sample_meal) -> FakeRecipeSource:
    """A fake source with a few searchable terms and one full recipe."""
    return FakeRecipeSource(
        results={
            "beef": sample_recipes[:2],
            "cheese": [sample_recipes[2]],
            "all": sample_recipes,
        },
        details={"52772": RecipeDetail.model_validate(sample_meal)},
    )
