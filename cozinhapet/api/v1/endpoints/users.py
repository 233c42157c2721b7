import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.deps import CurrentUser, get_db
from cozinhapet.core.exceptions import NotFoundError, ValidationError
from cozinhapet.schemas.auth import MessageResponse
from cozinhapet.schemas.follower import FollowerRead, FollowStatus
from cozinhapet.schemas.recipe import RecipeRead
from cozinhapet.schemas.user import UserPublic, UserRead, UserUpdate
from cozinhapet.services import favorite_service, follow_service, recipe_service, user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


# ── Own account ──────────────────────────────────────────────────────────────


@router.put("/profile", response_model=UserRead)
async def update_profile(body: UserUpdate, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    return await user_service.update_user(db, current_user.id, body)


@router.delete("/me", response_model=MessageResponse)
async def delete_me(current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    await user_service.delete_user(db, current_user.id)
    return MessageResponse(message="Account deleted successfully")


# ── Public profiles ──────────────────────────────────────────────────────────


@router.get("/{user_id}", response_model=UserPublic)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    user = await user_service.get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


@router.get("/{user_id}/recipes", response_model=list[RecipeRead])
async def list_user_recipes(user_id: int, db: AsyncSession = Depends(get_db)):
    return await recipe_service.get_recipes_by_user(db, user_id)


@router.get("/{user_id}/favorites", response_model=list[RecipeRead])
async def list_user_favorites(user_id: int, db: AsyncSession = Depends(get_db)):
    return await favorite_service.get_favorites(db, user_id)


@router.get("/{user_id}/followers", response_model=list[UserPublic])
async def list_followers(user_id: int, db: AsyncSession = Depends(get_db)):
    return await follow_service.get_followers(db, user_id)


@router.get("/{user_id}/following", response_model=list[UserPublic])
async def list_following(user_id: int, db: AsyncSession = Depends(get_db)):
    return await follow_service.get_following(db, user_id)


# ── Follows ──────────────────────────────────────────────────────────────────


@router.get("/{user_id}/follow", response_model=FollowStatus)
async def follow_status(user_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    return FollowStatus(is_following=await follow_service.is_following(db, current_user.id, user_id))


@router.post("/{user_id}/follow", response_model=FollowerRead, status_code=status.HTTP_201_CREATED)
async def follow_user(user_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    if user_id == current_user.id:
        raise ValidationError("Cannot follow yourself")
    if not await user_service.get_user(db, user_id):
        raise NotFoundError("User not found")
    return await follow_service.follow(db, current_user.id, user_id)


@router.delete("/{user_id}/follow", response_model=MessageResponse)
async def unfollow_user(user_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    if not await follow_service.unfollow(db, current_user.id, user_id):
        raise NotFoundError("Not following this user")
    return MessageResponse(message="Unfollowed successfully")
