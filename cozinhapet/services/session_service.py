"""Server-side login sessions.

A session row lives from login until logout or ``SESSION_EXPIRE_DAYS`` later,
whichever comes first. Access tokens only carry the session id.
"""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.config import settings
from cozinhapet.models.session import UserSession

logger = logging.getLogger(__name__)


async def create_session(db: AsyncSession, user_id: int) -> UserSession:
    now = datetime.now(timezone.utc)
    session = UserSession(
        id=secrets.token_hex(32),
        user_id=user_id,
        created_at=now,
        expires_at=now + timedelta(days=settings.SESSION_EXPIRE_DAYS),
    )
    db.add(session)
    await db.commit()
    return session


async def get_active_session(db: AsyncSession, session_id: str) -> Optional[UserSession]:
    result = await db.execute(
        select(UserSession).where(
            UserSession.id == session_id,
            UserSession.expires_at > datetime.now(timezone.utc),
        )
    )
    return result.scalar_one_or_none()


async def delete_session(db: AsyncSession, session_id: str) -> bool:
    result = await db.execute(delete(UserSession).where(UserSession.id == session_id))
    await db.commit()
    return result.rowcount > 0


async def purge_expired_sessions(db: AsyncSession, user_id: Optional[int] = None) -> int:
    query = delete(UserSession).where(UserSession.expires_at <= datetime.now(timezone.utc))
    if user_id is not None:
        query = query.where(UserSession.user_id == user_id)
    result = await db.execute(query)
    await db.commit()
    if result.rowcount:
        logger.info("purged %d expired sessions", result.rowcount)
    return result.rowcount
