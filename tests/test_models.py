"""
Tests for recipe and filter models.

This module tests:
- RecipeSummary parsing from TheMealDB wire format
- RecipeDetail ingredient slot collapsing and optional fields
- ActiveFilterSet vocabulary validation and toggle semantics
"""

import pytest
from pydantic import ValidationError

from recipe_finder.errors import InvalidInput
from recipe_finder.models import (
    ActiveFilterSet,
    IngredientLine,
    RecipeDetail,
    RecipeSummary,
    SearchSnapshot,
)


class TestRecipeSummary:
    """Test cases for RecipeSummary."""

    def test_parses_wire_format(self):
        """Test that a filter.php entry maps onto the summary fields."""
        recipe = RecipeSummary.model_validate({
            "idMeal": "52795",
            "strMeal": "Chicken Handi",
            "strMealThumb": "https://example.com/handi.jpg",
        })
        assert recipe.id == "52795"
        assert recipe.name == "Chicken Handi"
        assert recipe.thumbnail == "https://example.com/handi.jpg"
        assert recipe.category is None
        assert recipe.area is None

    def test_numeric_id_is_coerced_to_string(self):
        recipe = RecipeSummary.model_validate({"idMeal": 52795, "strMeal": "Chicken Handi"})
        assert recipe.id == "52795"

    def test_blank_tags_become_none(self):
        recipe = RecipeSummary(id="1", name="Soup", category="  ", area="")
        assert recipe.category is None
        assert recipe.area is None

    def test_missing_id_is_rejected(self):
        with pytest.raises(ValidationError):
            RecipeSummary.model_validate({"strMeal": "No id"})

    def test_is_immutable(self):
        recipe = RecipeSummary(id="1", name="Soup")
        with pytest.raises(ValidationError):
            recipe.name = "Stew"

    def test_to_storage_uses_wire_aliases(self):
        recipe = RecipeSummary(id="1", name="Soup", thumbnail="t", category="Starter")
        assert recipe.to_storage() == {
            "idMeal": "1",
            "strMeal": "Soup",
            "strMealThumb": "t",
            "strCategory": "Starter",
            "strArea": None,
        }


class TestRecipeDetail:
    """Test cases for RecipeDetail."""

    def test_collects_non_blank_ingredients_in_order(self, sample_meal):
        """Test that blank or missing ingredient slots are dropped and values trimmed."""
        detail = RecipeDetail.model_validate(sample_meal)
        assert detail.ingredients == [
            IngredientLine(ingredient="soy sauce", measure="3/4 cup"),
            IngredientLine(ingredient="water", measure=""),
            IngredientLine(ingredient="chicken breasts", measure="2"),
        ]

    def test_optional_links_and_tags(self, sample_meal):
        detail = RecipeDetail.model_validate(sample_meal)
        assert detail.video_url == "https://www.youtube.com/watch?v=4aZr5hZXP_s"
        assert detail.source_url is None
        assert detail.tags == ["Meat", "Casserole"]
        assert detail.category == "Chicken"
        assert detail.area == "Japanese"

    def test_instruction_steps_skip_blank_lines(self, sample_meal):
        detail = RecipeDetail.model_validate(sample_meal)
        assert detail.instruction_steps == [
            "Preheat oven to 350 F.",
            "Combine soy sauce and brown sugar.",
            "Bake 35 minutes.",
        ]

    def test_no_ingredient_slots(self):
        detail = RecipeDetail.model_validate({"idMeal": "1", "strMeal": "Water", "strInstructions": None})
        assert detail.ingredients == []
        assert detail.instructions == ""
        assert detail.tags == []

    def test_summary_drops_detail_fields(self, sample_meal):
        detail = RecipeDetail.model_validate(sample_meal)
        summary = detail.summary()
        assert type(summary) is RecipeSummary
        assert summary.id == "52772"
        assert "strInstructions" not in detail.to_storage()


class TestActiveFilterSet:
    """Test cases for ActiveFilterSet."""

    def test_defaults_to_empty(self):
        filters = ActiveFilterSet()
        assert filters.is_empty
        assert filters.active_count == 0

    def test_rejects_value_outside_vocabulary(self):
        with pytest.raises(ValidationError):
            ActiveFilterSet(category="Soup")
        with pytest.raises(ValidationError):
            ActiveFilterSet(cooking_time="instant")
        with pytest.raises(ValidationError):
            ActiveFilterSet(diet="keto")

    def test_category_is_case_sensitive(self):
        with pytest.raises(ValidationError):
            ActiveFilterSet(category="beef")

    def test_toggle_selects_value(self):
        filters = ActiveFilterSet().toggle("diet", "vegan")
        assert filters.diet == "vegan"
        assert filters.active_count == 1

    def test_toggle_same_value_twice_restores_original(self):
        original = ActiveFilterSet(category="Beef", area="Irish")
        toggled = original.toggle("cooking_time", "long").toggle("cooking_time", "long")
        assert toggled == original

    def test_toggle_held_value_clears_axis(self):
        filters = ActiveFilterSet(category="Beef").toggle("category", "Beef")
        assert filters.category is None

    def test_toggle_other_value_replaces(self):
        filters = ActiveFilterSet(area="Irish").toggle("area", "Greek")
        assert filters.area == "Greek"

    def test_toggle_does_not_mutate(self):
        original = ActiveFilterSet()
        original.toggle("diet", "vegan")
        assert original.diet is None

    def test_toggle_unknown_axis(self):
        with pytest.raises(InvalidInput):
            ActiveFilterSet().toggle("spiciness", "hot")

    def test_clear(self):
        filters = ActiveFilterSet(category="Beef", diet="none").clear()
        assert filters.is_empty


class TestSearchSnapshot:
    """Test cases for SearchSnapshot counts."""

    def test_counts(self):
        recipes = [RecipeSummary(id=str(i), name=f"Dish {i}") for i in range(3)]
        snapshot = SearchSnapshot(raw_results=recipes, filtered_results=recipes[:1])
        assert snapshot.total == 3
        assert snapshot.showing == 1
