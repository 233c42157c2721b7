import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.db.integrity import commit_or_raise
from cozinhapet.models.favorite import Favorite
from cozinhapet.models.recipe import Recipe

logger = logging.getLogger(__name__)


async def get_favorites(db: AsyncSession, user_id: int) -> list[Recipe]:
    """Recipes the user favorited, most recently favorited first."""
    result = await db.execute(
        select(Recipe)
        .join(Favorite, Favorite.recipe_id == Recipe.id)
        .where(Favorite.user_id == user_id)
        .order_by(Favorite.created_at.desc(), Favorite.id.desc())
    )
    return list(result.scalars().all())


async def is_favorite(db: AsyncSession, user_id: int, recipe_id: int) -> bool:
    existing = await db.scalar(
        select(Favorite.id).where(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
    )
    return existing is not None


async def add_favorite(db: AsyncSession, user_id: int, recipe_id: int) -> Favorite:
    """The (user, recipe) unique constraint decides duplicates: a second favorite
    raises ``DuplicateKeyError`` even when two requests race past ``is_favorite``."""
    favorite = Favorite(user_id=user_id, recipe_id=recipe_id)
    db.add(favorite)
    await commit_or_raise(db)
    await db.refresh(favorite)
    logger.info("user %d favorited recipe %d", user_id, recipe_id)
    return favorite


async def remove_favorite(db: AsyncSession, user_id: int, recipe_id: int) -> bool:
    result = await db.execute(
        delete(Favorite).where(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
    )
    await db.commit()
    removed = result.rowcount > 0
    if removed:
        logger.info("user %d unfavorited recipe %d", user_id, recipe_id)
    return removed
