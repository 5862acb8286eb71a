# mylife/dependencies/auth.py
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlmodel.ext.asyncio.session import AsyncSession
from mylife.UAA.models import User
from mylife.UAA.utils import decode_token, is_access_jti_blacklisted
from mylife.UAA.repository import UserRepository
from mylife.dependencies.db import get_session_dep

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

async def _resolve_user(token: str, session: AsyncSession) -> User:
    try:
        payload = decode_token(token)
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid token")

    if payload.get("type") != "access":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid token type")
    jti = payload.get("jti")
    if jti and await is_access_jti_blacklisted(jti):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="token revoked")

    repo = UserRepository(session)
    user = await repo.get_by_id(payload.get("sub"))
    if not user or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="user not found")
    return user

async def get_current_user(token: str = Depends(oauth2_scheme), session: AsyncSession = Depends(get_session_dep)) -> User:
    return await _resolve_user(token, session)

async def get_optional_current_user(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    session: AsyncSession = Depends(get_session_dep),
) -> Optional[User]:
    """Anonymous requests resolve to None; a bad token is still rejected."""
    if not token:
        return None
    return await _resolve_user(token, session)
