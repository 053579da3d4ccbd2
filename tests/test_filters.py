"""
Tests for the filter predicate engine.

This module tests apply_filters and the cooking time and diet heuristics in
recipe_finder.filters.
"""

import pytest

from recipe_finder.filters import apply_filters, estimate_cooking_time, matches_diet
from recipe_finder.models import ActiveFilterSet, RecipeSummary


def _ids(recipes):
    return [r.id for r in recipes]


class TestEstimateCookingTime:
    """Test cases for the name-based cooking time bucket."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Slow Cooked Beef Stew", "long"),
            ("Stuffed Peppers", "long"),
            ("ROASTED Duck", "long"),
            ("Honey Teriyaki Salmon With Rice", "long"),  # 31 characters
            ("Chicken Enchilada", "medium"),  # 17 characters
            ("Beef Wellington", "quick"),  # exactly 15 characters
            ("Pancakes", "quick"),
            ("", "quick"),
        ],
    )
    def test_buckets(self, name, expected):
        assert estimate_cooking_time(name) == expected

    def test_length_boundaries(self):
        assert estimate_cooking_time("a" * 15) == "quick"
        assert estimate_cooking_time("a" * 16) == "medium"
        assert estimate_cooking_time("a" * 25) == "medium"
        assert estimate_cooking_time("a" * 26) == "long"


class TestMatchesDiet:
    """Test cases for the keyword diet heuristic."""

    def test_vegetarian_rejects_meat_in_name(self):
        assert not matches_diet(RecipeSummary(id="1", name="Chicken Tikka"), "vegetarian")

    def test_vegetarian_rejects_meat_in_category(self):
        assert not matches_diet(RecipeSummary(id="1", name="Wellington", category="Beef"), "vegetarian")

    def test_vegetarian_category_overrides_keywords(self):
        recipe = RecipeSummary(id="1", name="Mushroom Beef-style Pie", category="Vegetarian")
        assert matches_diet(recipe, "vegetarian")

    def test_vegetarian_allows_dairy(self):
        assert matches_diet(RecipeSummary(id="1", name="Cheese Salad", category="Vegetarian"), "vegetarian")

    def test_vegan_rejects_cheese_even_in_vegetarian_category(self):
        recipe = RecipeSummary(id="1", name="Cheese Salad", category="Vegetarian")
        assert not matches_diet(recipe, "vegan")

    def test_vegan_category_overrides_keywords(self):
        recipe = RecipeSummary(id="1", name="Vegan Butter Cookies", category="Vegan")
        assert matches_diet(recipe, "vegan")

    def test_vegan_rejects_substring_match(self):
        # "egg" inside "eggplant" counts as a match
        assert not matches_diet(RecipeSummary(id="1", name="Eggplant Curry"), "vegan")

    def test_none_and_unset_do_not_filter(self):
        recipe = RecipeSummary(id="1", name="Pork Belly")
        assert matches_diet(recipe, "none")
        assert matches_diet(recipe, None)


class TestApplyFilters:
    """Test cases for apply_filters."""

    def test_empty_filters_return_copy(self, sample_recipes):
        result = apply_filters(sample_recipes, ActiveFilterSet())
        assert result == sample_recipes
        assert result is not sample_recipes

    def test_none_filters(self, sample_recipes):
        assert apply_filters(sample_recipes, None) == sample_recipes

    def test_category_exact_match(self, sample_recipes):
        result = apply_filters(sample_recipes, ActiveFilterSet(category="Beef"))
        assert _ids(result) == ["1", "2"]

    def test_missing_tag_fails_set_axis(self, sample_recipes):
        result = apply_filters(sample_recipes, ActiveFilterSet(area="Indian"))
        assert _ids(result) == ["4"]
        assert "6" not in _ids(apply_filters(sample_recipes, ActiveFilterSet(category="Chicken")))

    def test_cooking_time(self, sample_recipes):
        assert _ids(apply_filters(sample_recipes, ActiveFilterSet(cooking_time="long"))) == ["2"]
        assert _ids(apply_filters(sample_recipes, ActiveFilterSet(cooking_time="medium"))) == ["4"]
        assert _ids(apply_filters(sample_recipes, ActiveFilterSet(cooking_time="quick"))) == ["1", "3", "5", "6"]

    def test_vegetarian(self, sample_recipes):
        result = apply_filters(sample_recipes, ActiveFilterSet(diet="vegetarian"))
        assert _ids(result) == ["3", "4", "5"]

    def test_vegan(self, sample_recipes):
        result = apply_filters(sample_recipes, ActiveFilterSet(diet="vegan"))
        assert _ids(result) == ["4", "5"]

    def test_axes_are_combined_with_and(self, sample_recipes):
        filters = ActiveFilterSet(category="Beef", cooking_time="quick")
        assert _ids(apply_filters(sample_recipes, filters)) == ["1"]

    def test_no_match(self, sample_recipes):
        filters = ActiveFilterSet(category="Dessert", diet="vegetarian", area="Greek")
        assert apply_filters(sample_recipes, filters) == []

    def test_preserves_order_and_duplicates(self, sample_recipes):
        recipes = sample_recipes + [sample_recipes[0]]
        result = apply_filters(recipes, ActiveFilterSet(category="Beef"))
        assert _ids(result) == ["1", "2", "1"]

    def test_result_is_subsequence_satisfying_every_axis(self, sample_recipes):
        """Check the filter contract over every combination of two axes."""
        combos = [
            ActiveFilterSet(category=c, diet=d)
            for c in (None, "Beef", "Vegetarian", "Vegan", "Dessert")
            for d in (None, "vegetarian", "vegan", "none")
        ] + [
            ActiveFilterSet(area=a, cooking_time=t)
            for a in (None, "British", "Irish", "Indian")
            for t in (None, "quick", "medium", "long")
        ]
        for filters in combos:
            result = apply_filters(sample_recipes, filters)
            positions = [sample_recipes.index(r) for r in result]
            assert positions == sorted(positions)
            for recipe in result:
                if filters.category:
                    assert recipe.category == filters.category
                if filters.area:
                    assert recipe.area == filters.area
                if filters.cooking_time:
                    assert estimate_cooking_time(recipe.name) == filters.cooking_time
                assert matches_diet(recipe, filters.diet)

    def test_does_not_mutate_input(self, sample_recipes):
        before = list(sample_recipes)
        apply_filters(sample_recipes, ActiveFilterSet(diet="vegan"))
        assert sample_recipes == before
