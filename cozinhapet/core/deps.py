from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.exceptions import UnauthorizedError
from cozinhapet.core.security import decode_token
from cozinhapet.db.session import get_db
from cozinhapet.schemas.user import UserRead
from cozinhapet.services.session_service import get_active_session
from cozinhapet.services.user_service import get_user

bearer_scheme = HTTPBearer(auto_error=False)


async def get_session_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> dict:
    if credentials is None:
        raise UnauthorizedError("Unauthorized")
    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")
    if payload.get("type") != "access" or not payload.get("sub") or not payload.get("sid"):
        raise UnauthorizedError("Could not validate credentials")
    return payload


async def get_current_user(
    claims: Annotated[dict, Depends(get_session_claims)],
    db: AsyncSession = Depends(get_db),
) -> UserRead:
    session = await get_active_session(db, claims["sid"])
    if not session or str(session.user_id) != claims["sub"]:
        raise UnauthorizedError("Session expired")

    user = await get_user(db, session.user_id)
    if not user:
        raise UnauthorizedError("User not found")
    return user


SessionClaims = Annotated[dict, Depends(get_session_claims)]
CurrentUser = Annotated[UserRead, Depends(get_current_user)]
