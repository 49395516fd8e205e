from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

class RecipeRequest(BaseModel):
    keyword: str = Field(min_length=1)

    @field_validator("keyword", mode="before")
    @classmethod
    def strip(cls, v):
        return v.strip() if isinstance(v, str) else v

class RecipeResponse(BaseModel):
    recipe: str
    source: str

class RecipeView(BaseModel):
    name: str
    category: Optional[str] = None
    area: Optional[str] = None
    cooking_time: Optional[str] = None
    difficulty: Optional[str] = None
    ingredients: List[str]
    instructions: str = ""
    source: Optional[str] = None
