import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.deps import CurrentUser, SessionClaims, get_db
from cozinhapet.core.exceptions import UnauthorizedError
from cozinhapet.core.security import create_access_token, verify_password
from cozinhapet.schemas.auth import LoginRequest, LoginResponse, MessageResponse
from cozinhapet.schemas.user import UserCreate, UserRead
from cozinhapet.services.session_service import (
    create_session,
    delete_session,
    purge_expired_sessions,
)
from cozinhapet.services.user_service import create_user, get_user_by_username

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register(data: UserCreate, db: AsyncSession = Depends(get_db)):
    return await create_user(db, data)


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await get_user_by_username(db, body.username)
    if not user or not verify_password(body.password, user.hashed_password):
        logger.info("failed login for %r", body.username)
        raise UnauthorizedError("Invalid credentials")

    await purge_expired_sessions(db, user.id)
    session = await create_session(db, user.id)

    return LoginResponse(
        access_token=create_access_token(str(user.id), session.id, session.expires_at),
        user=UserRead.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    current_user: CurrentUser, claims: SessionClaims, db: AsyncSession = Depends(get_db)
):
    await delete_session(db, claims["sid"])
    logger.info("user %d logged out", current_user.id)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserRead)
async def me(current_user: CurrentUser):
    return current_user
