"""
Recipe and state models for the recipe finder.

This module defines the records exchanged between the remote recipe source,
the filter engine, the favorites store and the controllers.

# NOTE: Field aliases follow TheMealDB's wire names (idMeal, strMeal, ...).
    RecipeSummary.model_validate() accepts a raw "meals" entry directly, and
    model_dump(by_alias=True) produces the same shape, which is also the format
    used for persisted favorites.

Current field expectations:
- filter.php returns: idMeal, strMeal, strMealThumb (no category/area)
- lookup.php returns: the above plus strCategory, strArea, strInstructions,
  strYoutube, strSource, strTags and strIngredient1..20 / strMeasure1..20
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict, ValidationInfo, field_validator, model_validator

from recipe_finder.errors import InvalidInput
from recipe_finder.taxonomy import FILTER_AXES, FILTER_VOCABULARY

# Number of ingredient/measure slots in the remote schema
MAX_INGREDIENT_SLOTS = 20


def _blank_to_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class RecipeSummary(BaseModel):
    """
    Minimal recipe record used in list views.

    Identity is the `id` field alone; name and thumbnail are display data.
    """
    id: str = Field(..., alias="idMeal", description="Recipe identifier, unique per remote source")
    name: str = Field(..., alias="strMeal", description="Display name")
    thumbnail: str = Field("", alias="strMealThumb", description="Thumbnail image URL")
    category: Optional[str] = Field(None, alias="strCategory", description="Category tag (e.g. 'Seafood')")
    area: Optional[str] = Field(None, alias="strArea", description="Cuisine/area tag (e.g. 'Italian')")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        if value is None or not str(value).strip():
            raise ValueError("recipe id must not be empty")
        return str(value).strip()

    @field_validator("thumbnail", mode="before")
    @classmethod
    def _coerce_thumbnail(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("category", "area", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Optional[str]:
        return _blank_to_none(value)

    def to_storage(self) -> Dict[str, Any]:
        """Serialize with wire aliases, the shape persisted for favorites."""
        return self.summary().model_dump(by_alias=True)

    def summary(self) -> "RecipeSummary":
        """Return the plain summary part of this record."""
        return RecipeSummary(
            id=self.id,
            name=self.name,
            thumbnail=self.thumbnail,
            category=self.category,
            area=self.area,
        )


class IngredientLine(BaseModel):
    """One ingredient with its measure (measure may be empty)."""
    ingredient: str
    measure: str = ""

    model_config = ConfigDict(frozen=True)


class RecipeDetail(RecipeSummary):
    """
    Full recipe record built from a lookup response.

    The 20 strIngredientN/strMeasureN slots are collapsed into `ingredients`;
    slots with a missing or blank ingredient are dropped.
    """
    instructions: str = Field("", alias="strInstructions", description="Freeform cooking instructions")
    video_url: Optional[str] = Field(None, alias="strYoutube", description="External video link")
    source_url: Optional[str] = Field(None, alias="strSource", description="Original recipe page")
    tags: List[str] = Field(default_factory=list, alias="strTags", description="Free tags from the source")
    ingredients: List[IngredientLine] = Field(default_factory=list, description="Ordered ingredient/measure pairs")

    @model_validator(mode="before")
    @classmethod
    def _collect_ingredient_slots(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "ingredients" in data:
            return data

        lines: List[Dict[str, str]] = []
        for i in range(1, MAX_INGREDIENT_SLOTS + 1):
            ingredient = data.get(f"strIngredient{i}")
            measure = data.get(f"strMeasure{i}")
            if ingredient and str(ingredient).strip():
                lines.append({
                    "ingredient": str(ingredient).strip(),
                    "measure": str(measure).strip() if measure else "",
                })
        return {**data, "ingredients": lines}

    @field_validator("instructions", mode="before")
    @classmethod
    def _coerce_instructions(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("video_url", "source_url", mode="before")
    @classmethod
    def _coerce_links(cls, value: Any) -> Optional[str]:
        return _blank_to_none(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        return value

    @property
    def instruction_steps(self) -> List[str]:
        """Instructions split into non-blank, trimmed lines."""
        return [line.strip() for line in self.instructions.splitlines() if line.strip()]


class ActiveFilterSet(BaseModel):
    """
    The four-axis filter configuration.

    Each axis is either unset (None) or holds exactly one value from its fixed
    vocabulary. Instances are immutable; toggle() and clear() return new sets.
    """
    category: Optional[str] = None
    area: Optional[str] = None
    cooking_time: Optional[str] = None
    diet: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("category", "area", "cooking_time", "diet")
    @classmethod
    def _check_vocabulary(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if value is not None and value not in FILTER_VOCABULARY[info.field_name]:
            raise ValueError(f"{value!r} is not a valid {info.field_name} filter")
        return value

    def toggle(self, axis: str, value: Optional[str]) -> "ActiveFilterSet":
        """
        Select `value` on `axis`, or clear the axis if it already holds `value`.

        Raises:
            InvalidInput: If `axis` is not one of the four filter axes.
        """
        if axis not in FILTER_AXES:
            raise InvalidInput(f"Unknown filter axis {axis!r}")
        current = getattr(self, axis)
        new_value = None if current == value else value
        return ActiveFilterSet(**{**self.model_dump(), axis: new_value})

    def clear(self) -> "ActiveFilterSet":
        return ActiveFilterSet()

    @property
    def active_count(self) -> int:
        """Number of axes that currently hold a value."""
        return sum(1 for axis in FILTER_AXES if getattr(self, axis) is not None)

    @property
    def is_empty(self) -> bool:
        return self.active_count == 0


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    POPULATED = "populated"
    ERROR = "error"


class DetailStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class SearchSnapshot(BaseModel):
    """Read-only view of a search session handed to presentation."""
    status: SearchStatus = SearchStatus.IDLE
    query: Optional[str] = None
    raw_results: List[RecipeSummary] = Field(default_factory=list)
    filtered_results: List[RecipeSummary] = Field(default_factory=list)
    filters: ActiveFilterSet = Field(default_factory=ActiveFilterSet)
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def total(self) -> int:
        return len(self.raw_results)

    @property
    def showing(self) -> int:
        return len(self.filtered_results)


class DetailSnapshot(BaseModel):
    """Read-only view of the open detail panel."""
    status: DetailStatus = DetailStatus.IDLE
    recipe: Optional[RecipeSummary] = None
    detail: Optional[RecipeDetail] = None
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)
