from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

PetType = Literal["dog", "cat"]


class PetCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    type: PetType
    breed: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0)
    weight: Optional[int] = Field(None, ge=0)
    profile_image_url: Optional[str] = Field(None, max_length=500)


class PetUpdate(PetCreate):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[PetType] = None

    @field_validator("name", "type")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class PetRead(BaseModel):
    id: int
    user_id: int
    name: str
    type: str
    breed: Optional[str]
    age: Optional[int]
    weight: Optional[int]
    profile_image_url: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
