from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    content: str = Field(min_length=1)
    parent_id: Optional[int] = None


class CommentRead(BaseModel):
    id: int
    user_id: int
    recipe_id: int
    parent_id: Optional[int]
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CommentThreadEntry(CommentRead):
    """One comment of a flattened thread. ``depth`` is 0 for top-level comments;
    each reply follows its parent, one level deeper."""

    depth: int
