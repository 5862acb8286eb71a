# mylife/routers/user_router.py
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession
from mylife.dependencies.auth import get_current_user
from mylife.dependencies.db import get_session_dep
from mylife.infrastructure.profile_repo import ProfileRepository
from mylife.UAA.schemas import UserRead

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/me", response_model=UserRead)
async def me(current_user = Depends(get_current_user), session: AsyncSession = Depends(get_session_dep)):
    profile = await ProfileRepository(session).get_by_user_id(current_user.id)
    return {
        "id": current_user.id,
        "email": current_user.email,
        "username": current_user.username,
        "is_active": current_user.is_active,
        "is_superuser": current_user.is_superuser,
        "created_at": current_user.created_at,
        "profile_id": profile.id if profile else None,
    }
