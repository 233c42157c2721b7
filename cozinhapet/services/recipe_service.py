import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.config import settings
from cozinhapet.core.exceptions import NotFoundError, ValidationError
from cozinhapet.db.integrity import commit_or_raise
from cozinhapet.models.enums import PET_TYPES, RECIPE_CATEGORIES
from cozinhapet.models.recipe import Recipe
from cozinhapet.schemas.recipe import RecipeCreate, RecipeUpdate

logger = logging.getLogger(__name__)


async def get_recipe(db: AsyncSession, recipe_id: int) -> Optional[Recipe]:
    result = await db.execute(select(Recipe).where(Recipe.id == recipe_id))
    return result.scalar_one_or_none()


async def get_recipes(
    db: AsyncSession,
    *,
    pet_type: Optional[str] = None,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: int = 1,
    limit: Optional[int] = None,
) -> list[Recipe]:
    """Newest first. Filters are ANDed; ``search`` is a case-sensitive substring
    match against the title OR the ingredients. ``page`` is 1-indexed."""
    if limit is None:
        limit = settings.RECIPES_PAGE_SIZE
    if page < 1:
        raise ValidationError("page must be 1 or greater")
    if limit < 1 or limit > settings.RECIPES_MAX_PAGE_SIZE:
        raise ValidationError(f"limit must be between 1 and {settings.RECIPES_MAX_PAGE_SIZE}")
    if pet_type and pet_type not in PET_TYPES:
        raise ValidationError(f"Unknown pet type: {pet_type}")
    if category and category not in RECIPE_CATEGORIES:
        raise ValidationError(f"Unknown category: {category}")

    query = select(Recipe)
    if pet_type:
        query = query.where(Recipe.pet_type == pet_type)
    if category:
        query = query.where(Recipe.category == category)
    if search:
        query = query.where(
            or_(
                Recipe.title.contains(search, autoescape=True),
                Recipe.ingredients.contains(search, autoescape=True),
            )
        )

    offset = (page - 1) * limit
    result = await db.execute(
        query.order_by(Recipe.created_at.desc(), Recipe.id.desc()).offset(offset).limit(limit)
    )
    return list(result.scalars().all())


async def get_recipes_by_user(db: AsyncSession, user_id: int) -> list[Recipe]:
    result = await db.execute(
        select(Recipe)
        .where(Recipe.user_id == user_id)
        .order_by(Recipe.created_at.desc(), Recipe.id.desc())
    )
    return list(result.scalars().all())


async def create_recipe(db: AsyncSession, user_id: int, data: RecipeCreate) -> Recipe:
    recipe = Recipe(**data.model_dump(), user_id=user_id, cook_count=0)
    db.add(recipe)
    await commit_or_raise(db)
    await db.refresh(recipe)
    logger.info("created recipe %d (%s) for user %d", recipe.id, recipe.title, user_id)
    return recipe


async def update_recipe(db: AsyncSession, recipe_id: int, data: RecipeUpdate) -> Recipe:
    recipe = await get_recipe(db, recipe_id)
    if not recipe:
        raise NotFoundError("Recipe not found")
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(recipe, field, value)
    recipe.updated_at = datetime.now(timezone.utc)
    await commit_or_raise(db)
    await db.refresh(recipe)
    return recipe


async def delete_recipe(db: AsyncSession, recipe_id: int) -> bool:
    result = await db.execute(delete(Recipe).where(Recipe.id == recipe_id))
    await db.commit()
    deleted = result.rowcount > 0
    if deleted:
        logger.info("deleted recipe %d", recipe_id)
    return deleted


async def increment_cook_count(db: AsyncSession, recipe_id: int) -> Optional[Recipe]:
    """Single UPDATE ... SET cook_count = cook_count + 1, so concurrent calls never lose
    an increment. Returns None when the recipe does not exist."""
    result = await db.execute(
        update(Recipe)
        .where(Recipe.id == recipe_id)
        .values(cook_count=Recipe.cook_count + 1, updated_at=datetime.now(timezone.utc))
        .returning(Recipe)
        .execution_options(populate_existing=True)
    )
    recipe = result.scalar_one_or_none()
    await db.commit()
    return recipe
