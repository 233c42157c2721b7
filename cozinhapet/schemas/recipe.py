from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from cozinhapet.schemas.pet import PetType

RecipeCategory = Literal["meat", "poultry", "fish", "treats"]
CookingType = Literal["raw", "cooked", "baked", "mixed"]


class RecipeCreate(BaseModel):
    # id, cook_count and timestamps are assigned by the server; unknown keys are ignored.
    title: str = Field(min_length=1, max_length=200)
    ingredients: str = Field(min_length=1)
    instructions: str = Field(min_length=1)
    pet_type: PetType
    category: RecipeCategory
    cooking_type: CookingType
    prep_time: int = Field(gt=0, description="Preparation time in minutes")
    image_url: Optional[str] = Field(None, max_length=500)
    youtube_url: Optional[str] = Field(None, max_length=500)


class RecipeUpdate(RecipeCreate):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    ingredients: Optional[str] = Field(None, min_length=1)
    instructions: Optional[str] = Field(None, min_length=1)
    pet_type: Optional[PetType] = None
    category: Optional[RecipeCategory] = None
    cooking_type: Optional[CookingType] = None
    prep_time: Optional[int] = Field(None, gt=0)

    @field_validator("title", "ingredients", "instructions", "pet_type", "category", "cooking_type", "prep_time")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class RecipeRead(BaseModel):
    id: int
    user_id: int
    title: str
    ingredients: str
    instructions: str
    pet_type: str
    category: str
    cooking_type: str
    prep_time: int
    image_url: Optional[str]
    youtube_url: Optional[str]
    cook_count: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class FavoriteRead(BaseModel):
    id: int
    user_id: int
    recipe_id: int
    created_at: datetime

    model_config = {"from_attributes": True}


class FavoriteStatus(BaseModel):
    is_favorite: bool
