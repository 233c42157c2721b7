import logging
from collections import defaultdict
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.exceptions import NotFoundError, ValidationError
from cozinhapet.db.integrity import commit_or_raise
from cozinhapet.models.comment import Comment
from cozinhapet.schemas.comment import CommentCreate, CommentRead, CommentThreadEntry

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (Comment.created_at.desc(), Comment.id.desc())


async def get_comment(db: AsyncSession, comment_id: int) -> Optional[Comment]:
    result = await db.execute(select(Comment).where(Comment.id == comment_id))
    return result.scalar_one_or_none()


async def get_comments(db: AsyncSession, recipe_id: int) -> list[Comment]:
    """Top-level comments of a recipe, newest first."""
    result = await db.execute(
        select(Comment)
        .where(Comment.recipe_id == recipe_id, Comment.parent_id.is_(None))
        .order_by(*_NEWEST_FIRST)
    )
    return list(result.scalars().all())


async def get_replies(db: AsyncSession, comment_id: int) -> list[Comment]:
    """Direct children only, newest first."""
    result = await db.execute(
        select(Comment).where(Comment.parent_id == comment_id).order_by(*_NEWEST_FIRST)
    )
    return list(result.scalars().all())


async def get_comment_thread(db: AsyncSession, recipe_id: int) -> list[CommentThreadEntry]:
    """Every comment of the recipe in one query, flattened depth-first.

    Roots come newest first and every comment is followed by its replies (also
    newest first), so a client can rebuild the tree from ``parent_id`` and
    ``depth``. Walks with an explicit stack; reply chains can be arbitrarily deep.
    """
    result = await db.execute(
        select(Comment).where(Comment.recipe_id == recipe_id).order_by(*_NEWEST_FIRST)
    )
    children: dict[Optional[int], list[Comment]] = defaultdict(list)
    for comment in result.scalars().all():
        children[comment.parent_id].append(comment)

    thread: list[CommentThreadEntry] = []
    stack = [(root, 0) for root in reversed(children[None])]
    while stack:
        comment, depth = stack.pop()
        fields = CommentRead.model_validate(comment).model_dump()
        thread.append(CommentThreadEntry(**fields, depth=depth))
        stack.extend((child, depth + 1) for child in reversed(children[comment.id]))
    return thread


async def create_comment(
    db: AsyncSession, user_id: int, recipe_id: int, data: CommentCreate
) -> Comment:
    if data.parent_id is not None:
        parent = await get_comment(db, data.parent_id)
        if not parent:
            raise NotFoundError("Parent comment not found")
        if parent.recipe_id != recipe_id:
            raise ValidationError("Parent comment belongs to another recipe")

    comment = Comment(
        user_id=user_id,
        recipe_id=recipe_id,
        parent_id=data.parent_id,
        content=data.content,
    )
    db.add(comment)
    await commit_or_raise(db)
    await db.refresh(comment)
    logger.info("user %d commented on recipe %d (comment %d)", user_id, recipe_id, comment.id)
    return comment


async def delete_comment(db: AsyncSession, comment_id: int) -> bool:
    """Replies are removed with their parent."""
    result = await db.execute(delete(Comment).where(Comment.id == comment_id))
    await db.commit()
    deleted = result.rowcount > 0
    if deleted:
        logger.info("deleted comment %d", comment_id)
    return deleted
