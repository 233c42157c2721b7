"""User accounts.

Lookups by id hand back ``UserRead`` models, which have no password field. The
username/email lookups return the ORM row, hash included, and exist only for
the login flow.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.exceptions import NotFoundError
from cozinhapet.core.security import hash_password
from cozinhapet.db.integrity import commit_or_raise
from cozinhapet.models.user import User
from cozinhapet.schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)


async def _get_user_row(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user(db: AsyncSession, user_id: int) -> Optional[UserRead]:
    user = await _get_user_row(db, user_id)
    return UserRead.model_validate(user) if user else None


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, data: UserCreate) -> UserRead:
    """Raises ``DuplicateKeyError`` when the username or email is taken."""
    values = data.model_dump(exclude={"password"})
    user = User(**values, hashed_password=hash_password(data.password))
    db.add(user)
    await commit_or_raise(db)
    await db.refresh(user)
    logger.info("created user %d (%s)", user.id, user.username)
    return UserRead.model_validate(user)


async def update_user(db: AsyncSession, user_id: int, data: UserUpdate) -> UserRead:
    user = await _get_user_row(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    values = data.model_dump(exclude_unset=True)
    password = values.pop("password", None)
    if password is not None:
        values["hashed_password"] = hash_password(password)
    for field, value in values.items():
        setattr(user, field, value)
    user.updated_at = datetime.now(timezone.utc)

    await commit_or_raise(db)
    await db.refresh(user)
    return UserRead.model_validate(user)


async def delete_user(db: AsyncSession, user_id: int) -> bool:
    """Pets, recipes, comments, favorites, follow edges and sessions go with the user."""
    result = await db.execute(delete(User).where(User.id == user_id))
    await db.commit()
    deleted = result.rowcount > 0
    if deleted:
        logger.info("deleted user %d", user_id)
    return deleted
