import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.config import settings
from cozinhapet.core.deps import CurrentUser, get_db
from cozinhapet.core.exceptions import ForbiddenError, NotFoundError
from cozinhapet.models.recipe import Recipe
from cozinhapet.schemas.auth import MessageResponse
from cozinhapet.schemas.comment import CommentCreate, CommentRead, CommentThreadEntry
from cozinhapet.schemas.pet import PetType
from cozinhapet.schemas.recipe import (
    FavoriteRead,
    FavoriteStatus,
    RecipeCategory,
    RecipeCreate,
    RecipeRead,
    RecipeUpdate,
)
from cozinhapet.services import comment_service, favorite_service, recipe_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


# ── Recipes ──────────────────────────────────────────────────────────────────


@router.get("", response_model=list[RecipeRead])
async def list_recipes(
    db: AsyncSession = Depends(get_db),
    pet_type: Optional[PetType] = Query(None, description="Filter by pet type (dog, cat)"),
    category: Optional[RecipeCategory] = Query(
        None, description="Filter by category (meat, poultry, fish, treats)"
    ),
    search: Optional[str] = Query(None, description="Substring of the title or the ingredients"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.RECIPES_PAGE_SIZE, ge=1, le=settings.RECIPES_MAX_PAGE_SIZE),
):
    return await recipe_service.get_recipes(
        db, pet_type=pet_type, category=category, search=search, page=page, limit=limit
    )


@router.get("/{recipe_id}", response_model=RecipeRead)
async def get_recipe(recipe_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_recipe_or_404(db, recipe_id)


@router.post("", response_model=RecipeRead, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    data: RecipeCreate, current_user: CurrentUser, db: AsyncSession = Depends(get_db)
):
    return await recipe_service.create_recipe(db, current_user.id, data)


@router.put("/{recipe_id}", response_model=RecipeRead)
async def update_recipe(
    recipe_id: int, data: RecipeUpdate, current_user: CurrentUser, db: AsyncSession = Depends(get_db)
):
    await _get_owned_recipe(db, recipe_id, current_user.id)
    return await recipe_service.update_recipe(db, recipe_id, data)


@router.delete("/{recipe_id}", response_model=MessageResponse)
async def delete_recipe(recipe_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    await _get_owned_recipe(db, recipe_id, current_user.id)
    await recipe_service.delete_recipe(db, recipe_id)
    return MessageResponse(message="Recipe deleted successfully")


@router.post("/{recipe_id}/cook", response_model=RecipeRead)
async def cook_recipe(recipe_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    await _get_recipe_or_404(db, recipe_id)
    recipe = await recipe_service.increment_cook_count(db, recipe_id)
    if not recipe:
        # deleted between the existence check and the update
        raise NotFoundError("Recipe not found")
    return recipe


# ── Comments ─────────────────────────────────────────────────────────────────


@router.get("/{recipe_id}/comments", response_model=list[CommentRead])
async def list_comments(recipe_id: int, db: AsyncSession = Depends(get_db)):
    return await comment_service.get_comments(db, recipe_id)


@router.get("/{recipe_id}/comments/thread", response_model=list[CommentThreadEntry])
async def comment_thread(recipe_id: int, db: AsyncSession = Depends(get_db)):
    return await comment_service.get_comment_thread(db, recipe_id)


@router.post("/{recipe_id}/comments", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
async def create_comment(
    recipe_id: int, data: CommentCreate, current_user: CurrentUser, db: AsyncSession = Depends(get_db)
):
    await _get_recipe_or_404(db, recipe_id)
    return await comment_service.create_comment(db, current_user.id, recipe_id, data)


# ── Favorites ────────────────────────────────────────────────────────────────


@router.get("/{recipe_id}/favorite", response_model=FavoriteStatus)
async def favorite_status(recipe_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    return FavoriteStatus(is_favorite=await favorite_service.is_favorite(db, current_user.id, recipe_id))


@router.post("/{recipe_id}/favorite", response_model=FavoriteRead, status_code=status.HTTP_201_CREATED)
async def favorite_recipe(recipe_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    await _get_recipe_or_404(db, recipe_id)
    return await favorite_service.add_favorite(db, current_user.id, recipe_id)


@router.delete("/{recipe_id}/favorite", response_model=MessageResponse)
async def unfavorite_recipe(recipe_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    if not await favorite_service.remove_favorite(db, current_user.id, recipe_id):
        raise NotFoundError("Favorite not found")
    return MessageResponse(message="Favorite removed successfully")


# ── Helpers ───────────────────────────────────────────────────────────────────


async def _get_recipe_or_404(db: AsyncSession, recipe_id: int) -> Recipe:
    recipe = await recipe_service.get_recipe(db, recipe_id)
    if not recipe:
        raise NotFoundError("Recipe not found")
    return recipe


async def _get_owned_recipe(db: AsyncSession, recipe_id: int, user_id: int) -> Recipe:
    recipe = await _get_recipe_or_404(db, recipe_id)
    if recipe.user_id != user_id:
        logger.warning("user %d tried to modify recipe %d", user_id, recipe_id)
        raise ForbiddenError("Not authorized")
    return recipe
