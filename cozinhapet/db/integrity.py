import logging
import re
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.exceptions import AppError, DuplicateKeyError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

_CONSTRAINT_RE = re.compile(r'constraint "([^"]+)"')

# Messages for the constraints callers are expected to trip over.
_MESSAGES = {
    "uq_users_username": "Username already taken",
    "uq_users_email": "Email already registered",
    "uq_favorites_user_recipe": "Recipe already favorited",
    "uq_followers_pair": "Already following this user",
    "ck_followers_no_self_follow": "Cannot follow yourself",
    "ck_recipes_prep_time_positive": "Preparation time must be greater than zero",
    "fk_comments_parent_id_comments": "Parent comment not found",
    "fk_comments_recipe_id_recipes": "Recipe not found",
    "fk_favorites_recipe_id_recipes": "Recipe not found",
    "fk_followers_following_id_users": "User not found",
}


def constraint_name(exc: IntegrityError) -> Optional[str]:
    # asyncpg exposes the name on the wrapped driver exception; fall back to the message.
    cause = getattr(exc.orig, "__cause__", None)
    name = getattr(cause, "constraint_name", None)
    if name:
        return name
    match = _CONSTRAINT_RE.search(str(exc.orig))
    return match.group(1) if match else None


def translate_integrity_error(exc: IntegrityError) -> AppError:
    """Map a constraint violation to the domain error callers handle."""
    name = constraint_name(exc) or ""
    message = _MESSAGES.get(name)
    logger.warning("integrity error on constraint %s", name or "<unknown>")
    if name.startswith("uq_"):
        return DuplicateKeyError(message, constraint=name)
    if name.startswith("fk_"):
        return NotFoundError(message)
    return ValidationError(message)


async def commit_or_raise(db: AsyncSession) -> None:
    """Commit, turning a constraint violation into a domain error after rolling back."""
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise translate_integrity_error(exc) from exc
