from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.deps import CurrentUser, get_db
from cozinhapet.core.exceptions import ForbiddenError, NotFoundError
from cozinhapet.schemas.auth import MessageResponse
from cozinhapet.schemas.comment import CommentRead
from cozinhapet.services import comment_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("/{comment_id}/replies", response_model=list[CommentRead])
async def list_replies(comment_id: int, db: AsyncSession = Depends(get_db)):
    return await comment_service.get_replies(db, comment_id)


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(comment_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    comment = await comment_service.get_comment(db, comment_id)
    if not comment:
        raise NotFoundError("Comment not found")
    if comment.user_id != current_user.id:
        raise ForbiddenError("Not authorized")
    await comment_service.delete_comment(db, comment_id)
    return MessageResponse(message="Comment deleted successfully")
