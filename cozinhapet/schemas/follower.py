from datetime import datetime

from pydantic import BaseModel


class FollowerRead(BaseModel):
    id: int
    follower_id: int
    following_id: int
    created_at: datetime

    model_config = {"from_attributes": True}


class FollowStatus(BaseModel):
    is_following: bool
