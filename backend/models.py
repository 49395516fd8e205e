from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

MAX_INGREDIENT_SLOTS = 20


class RecipeRecord(BaseModel):
    # MealDB payloads arrive with their own field names and keep the
    # strIngredientN / strMeasureN slots as extra fields.
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    name: str = Field(alias="strMeal")
    category: Optional[str] = Field(default=None, alias="strCategory")
    area: Optional[str] = Field(default=None, alias="strArea")
    instructions: Optional[str] = Field(default="", alias="strInstructions")
    thumbnail: Optional[str] = Field(default=None, alias="strMealThumb")
    ingredients: Optional[List[str]] = None
    cooking_time: Optional[str] = None
    difficulty: Optional[str] = None
    source: Optional[str] = None

    def ingredient_slot(self, index: int):
        """Return the (ingredient, measure) pair stored in slot `index`."""
        extra = self.model_extra or {}
        return extra.get(f"strIngredient{index}"), extra.get(f"strMeasure{index}")


class ExternalRecipe(RecipeRecord):
    pass


class GeneratedRecipe(RecipeRecord):
    area: str = "International"
    ingredients: List[str]
    cooking_time: str
    difficulty: str
    source: str = "generated"
