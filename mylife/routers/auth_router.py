# mylife/routers/auth_router.py
from fastapi import APIRouter, Depends, HTTPException, status, Response, Cookie
from sqlmodel.ext.asyncio.session import AsyncSession
from typing import Optional
from ..core.timestamps import utcnow
import structlog
import os

from ..dependencies.db import get_session_dep
from ..dependencies.auth import optional_oauth2_scheme
from ..UAA.repository import UserRepository
from ..UAA.services import UserService, AuthenticationError
from ..UAA.schemas import UserCreate, LoginRequest, RegisterResponse, Token
from ..core.results import Invalid, Ok, present
from ..infrastructure.profile_repo import ProfileRepository

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])

# cookie config (in prod set secure=True)
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "false").lower() == "true"
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")
REFRESH_COOKIE = "refresh_token"

def _set_refresh_cookie(response: Response, refresh: dict) -> None:
    cookie_max_age = max(0, refresh["exp"] - int(utcnow().timestamp()))
    response.set_cookie(
        key=REFRESH_COOKIE,
        value=refresh["token"],
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
        max_age=cookie_max_age,
    )

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(user_in: UserCreate, response: Response, session: AsyncSession = Depends(get_session_dep)):
    svc = UserService(UserRepository(session), ProfileRepository(session))
    try:
        user, profile = await svc.register_user(user_in)
    except ValueError as e:
        logger.info("register_validation_failed", error=str(e), email=user_in.email)
        result = present(Invalid("Registration failed", [str(e)]), RegisterResponse)
    else:
        result = present(
            Ok(
                message="User successfully registered.",
                status_code=201,
                payload={"id": user.id, "email": user.email, "username": user.username, "profile_id": profile.id},
            ),
            RegisterResponse,
        )
    response.status_code = result.status_code
    return result

@router.post("/login", response_model=Token)
async def login(form_data: LoginRequest, response: Response, session: AsyncSession = Depends(get_session_dep)):
    """
    Expects JSON: {"email": "...", "password": "..."}
    Returns access token in body and sets refresh token as HttpOnly cookie.
    """
    svc = UserService(UserRepository(session), ProfileRepository(session))
    try:
        user = await svc.authenticate_user(form_data.email, form_data.password)
    except AuthenticationError as e:
        # Do not reveal whether email exists
        logger.warning("login_failed", reason=str(e), email=form_data.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    tokens = await svc.issue_tokens(user)
    _set_refresh_cookie(response, tokens["refresh"])
    return {"access_token": tokens["access"]["token"], "token_type": "bearer", "expires_in": tokens["access"]["exp"]}

@router.post("/refresh", response_model=Token)
async def refresh(response: Response, refresh_token: Optional[str] = Cookie(None)):
    if not refresh_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing refresh token")
    # rotation only touches redis
    svc = UserService(repo=None, profile_repo=None)
    try:
        new = await svc.refresh_tokens(refresh_token)
    except AuthenticationError as e:
        logger.warning("refresh_failed", reason=str(e))
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token")

    _set_refresh_cookie(response, new["refresh"])
    return {"access_token": new["access"]["token"], "token_type": "bearer", "expires_in": new["access"]["exp"]}

@router.post("/logout", response_model=dict)
async def logout(
    response: Response,
    access_token: Optional[str] = Depends(optional_oauth2_scheme),
    refresh_token: Optional[str] = Cookie(None),
    revoke_all: bool = False,
):
    """
    Revokes the refresh token from the cookie and blacklists the bearer access token.
    revoke_all: if True, revoke all refresh tokens for this user (logout everywhere)
    """
    svc = UserService(repo=None, profile_repo=None)
    await svc.logout(access_token=access_token, refresh_token=refresh_token, revoke_all=revoke_all)
    response.delete_cookie(REFRESH_COOKIE)
    return {"ok": True}
