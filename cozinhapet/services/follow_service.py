import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.exceptions import ValidationError
from cozinhapet.db.integrity import commit_or_raise
from cozinhapet.models.follower import Follower
from cozinhapet.models.user import User
from cozinhapet.schemas.user import UserRead

logger = logging.getLogger(__name__)


async def get_followers(db: AsyncSession, user_id: int) -> list[UserRead]:
    """Users following ``user_id``."""
    result = await db.execute(
        select(User)
        .join(Follower, Follower.follower_id == User.id)
        .where(Follower.following_id == user_id)
        .order_by(Follower.created_at.desc(), Follower.id.desc())
    )
    return [UserRead.model_validate(u) for u in result.scalars().all()]


async def get_following(db: AsyncSession, user_id: int) -> list[UserRead]:
    """Users that ``user_id`` follows."""
    result = await db.execute(
        select(User)
        .join(Follower, Follower.following_id == User.id)
        .where(Follower.follower_id == user_id)
        .order_by(Follower.created_at.desc(), Follower.id.desc())
    )
    return [UserRead.model_validate(u) for u in result.scalars().all()]


async def is_following(db: AsyncSession, follower_id: int, following_id: int) -> bool:
    existing = await db.scalar(
        select(Follower.id).where(
            Follower.follower_id == follower_id,
            Follower.following_id == following_id,
        )
    )
    return existing is not None


async def follow(db: AsyncSession, follower_id: int, following_id: int) -> Follower:
    if follower_id == following_id:
        raise ValidationError("Cannot follow yourself")
    edge = Follower(follower_id=follower_id, following_id=following_id)
    db.add(edge)
    await commit_or_raise(db)
    await db.refresh(edge)
    logger.info("user %d now follows user %d", follower_id, following_id)
    return edge


async def unfollow(db: AsyncSession, follower_id: int, following_id: int) -> bool:
    result = await db.execute(
        delete(Follower).where(
            Follower.follower_id == follower_id,
            Follower.following_id == following_id,
        )
    )
    await db.commit()
    removed = result.rowcount > 0
    if removed:
        logger.info("user %d unfollowed user %d", follower_id, following_id)
    return removed
