"""
Filter predicate engine for recipe search results.

This module derives the filtered view shown to the user from the raw search
results and the active filter set. Filtering is pure and order-preserving:
the output is always a subsequence of the input.

The filtering logic:
- Category/area: exact, case-sensitive match on the recipe's tag
- Cooking time: bucket estimated from the recipe name (keywords and length)
- Diet: keyword match on the lower-cased name and category

The remote source provides no cooking time or diet data, so both are simple
keyword heuristics. Their outputs are relied on as-is; do not refine the
keyword lists without updating every consumer.
"""

from typing import Iterable, List, Optional

from recipe_finder.models import ActiveFilterSet, RecipeSummary
from recipe_finder.taxonomy import (  # noqa: F401
    AREAS,
    CATEGORIES,
    COOKING_TIMES,
    COOKING_TIME_LONG,
    COOKING_TIME_MEDIUM,
    COOKING_TIME_QUICK,
    DIET_NONE,
    DIET_OPTIONS,
    DIET_VEGAN,
    DIET_VEGETARIAN,
)

# Name keywords that mark a recipe as slow to prepare
COMPLEXITY_KEYWORDS = ["stuffed", "marinated", "slow", "braised", "roasted"]

# Names longer than these thresholds fall into the next bucket
LONG_NAME_THRESHOLD = 25
MEDIUM_NAME_THRESHOLD = 15

# Keywords that rule a recipe out for vegetarians
MEAT_KEYWORDS = ["beef", "chicken", "pork", "lamb", "fish", "salmon", "tuna", "shrimp", "turkey"]

# Keywords that rule a recipe out for vegans (meat plus animal products)
NON_VEGAN_KEYWORDS = MEAT_KEYWORDS + ["cheese", "cream", "milk", "egg", "butter"]


def estimate_cooking_time(name: str) -> str:
    """
    Estimate the cooking time bucket of a recipe from its name.

    Args:
        name: Recipe display name

    Returns:
        "long" if the name contains a complexity keyword or is longer than 25
        characters, "medium" if it is longer than 15 characters, else "quick".

    Examples:
        >>> estimate_cooking_time("Beef Wellington")
        'quick'
        >>> estimate_cooking_time("Slow Cooked Beef Stew")
        'long'
    """
    name = name or ""
    lowered = name.lower()
    if any(keyword in lowered for keyword in COMPLEXITY_KEYWORDS) or len(name) > LONG_NAME_THRESHOLD:
        return COOKING_TIME_LONG
    if len(name) > MEDIUM_NAME_THRESHOLD:
        return COOKING_TIME_MEDIUM
    return COOKING_TIME_QUICK


def _mentions_any(keywords: Iterable[str], *texts: str) -> bool:
    return any(keyword in text for keyword in keywords for text in texts)


def matches_diet(recipe: RecipeSummary, diet: Optional[str]) -> bool:
    """
    Check whether a recipe fits a diet option.

    Args:
        recipe: Recipe to check
        diet: "vegetarian", "vegan", "none" or None

    Returns:
        False if the name or category mentions an excluded keyword and the
        category does not itself name the diet, True otherwise.
    """
    if not diet or diet == DIET_NONE:
        return True

    name = recipe.name.lower()
    category = (recipe.category or "").lower()

    if diet == DIET_VEGETARIAN:
        if _mentions_any(MEAT_KEYWORDS, name, category) and DIET_VEGETARIAN not in category:
            return False

    if diet == DIET_VEGAN:
        if _mentions_any(NON_VEGAN_KEYWORDS, name, category) and DIET_VEGAN not in category:
            return False

    return True


def matches_filters(recipe: RecipeSummary, filters: ActiveFilterSet) -> bool:
    """Return True if the recipe satisfies every set axis of `filters`."""
    if filters.category and recipe.category != filters.category:
        return False

    if filters.area and recipe.area != filters.area:
        return False

    if filters.diet and not matches_diet(recipe, filters.diet):
        return False

    if filters.cooking_time and estimate_cooking_time(recipe.name) != filters.cooking_time:
        return False

    return True


def apply_filters(recipes: List[RecipeSummary], filters: Optional[ActiveFilterSet]) -> List[RecipeSummary]:
    """
    Filter a recipe list by the active filter set.

    The input list is not mutated. Relative order is preserved and duplicates
    are kept; an empty or missing filter set returns a copy of the input.

    Args:
        recipes: Raw search results
        filters: Active filter set (None behaves like an empty set)

    Returns:
        New list with the recipes that pass every set axis
    """
    if filters is None or filters.is_empty:
        return list(recipes)
    return [recipe for recipe in recipes if matches_filters(recipe, filters)]
