"""
Fixed filter vocabularies.

These are the values the filter panel offers on each axis. The remote source
can list its own categories and areas (see MealDBConnector.list_taxonomy), but
filter values are validated against the lists below so a filter set never
holds a value the UI cannot show.
"""

from typing import Dict, List

CATEGORIES: List[str] = [
    "Beef", "Chicken", "Dessert", "Lamb", "Miscellaneous", "Pasta", "Pork",
    "Seafood", "Side", "Starter", "Vegan", "Vegetarian", "Breakfast", "Goat",
]

AREAS: List[str] = [
    "American", "British", "Canadian", "Chinese", "Croatian", "Dutch",
    "Egyptian", "French", "Greek", "Indian", "Irish", "Italian", "Jamaican",
    "Japanese", "Kenyan", "Malaysian", "Mexican", "Moroccan", "Polish",
    "Portuguese", "Russian", "Spanish", "Thai", "Tunisian", "Turkish", "Vietnamese",
]

# Cooking time buckets
COOKING_TIME_QUICK = "quick"
COOKING_TIME_MEDIUM = "medium"
COOKING_TIME_LONG = "long"

COOKING_TIMES: Dict[str, str] = {
    COOKING_TIME_QUICK: "Quick (15 min)",
    COOKING_TIME_MEDIUM: "Medium (30 min)",
    COOKING_TIME_LONG: "Long (45+ min)",
}

# Diet options
DIET_VEGETARIAN = "vegetarian"
DIET_VEGAN = "vegan"
DIET_NONE = "none"

DIET_OPTIONS: Dict[str, str] = {
    DIET_VEGETARIAN: "Vegetarian",
    DIET_VEGAN: "Vegan",
    DIET_NONE: "No Restrictions",
}

# Filter axis name -> allowed values
FILTER_VOCABULARY: Dict[str, List[str]] = {
    "category": CATEGORIES,
    "area": AREAS,
    "cooking_time": list(COOKING_TIMES),
    "diet": list(DIET_OPTIONS),
}

FILTER_AXES = tuple(FILTER_VOCABULARY)

# Taxonomy kinds understood by the remote list endpoint
TAXONOMY_CATEGORY = "category"
TAXONOMY_AREA = "area"
